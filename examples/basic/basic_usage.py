"""Basic usage example.

This example demonstrates:
- Describing a small printer farm
- Setting up the parameters of a production run
- Distributing units over the printers
- Printing the cost report

This is the simplest way to use the cost planner.
"""

from print_cost_planner import PrinterFleet, PrinterProfile, PrintParameters, Session
from print_cost_planner.cost import calculate_session
from print_cost_planner.report import format_report


def main():
    """Price a run of 40 brackets on three printers."""

    print("=" * 80)
    print("BASIC COST PLANNER USAGE")
    print("=" * 80)

    # Printer farm (equipment properties)
    # power: kWh drawn per hour of printing
    # print time: hours per print cycle
    # bed capacity: how many brackets fit on one plate
    fleet = PrinterFleet(
        [
            PrinterProfile(
                id="Prusa",
                power_consumption_kwh_per_hour=0.12,
                print_time_per_unit_hours=2.0,
                nozzle_size_mm=0.4,
                bed_capacity_units_per_batch=4,
            ),
            PrinterProfile(
                id="Bambu",
                power_consumption_kwh_per_hour=0.35,
                print_time_per_unit_hours=1.0,
                nozzle_size_mm=0.4,
                bed_capacity_units_per_batch=6,
            ),
            PrinterProfile(
                id="Ender",
                power_consumption_kwh_per_hour=0.08,
                print_time_per_unit_hours=2.5,
                nozzle_size_mm=0.6,
                bed_capacity_units_per_batch=2,
            ),
        ]
    )

    # Run parameters (money and material)
    parameters = PrintParameters(
        total_units=40,
        material_per_unit_grams=35.0,
        commission_per_unit=0.75,
        material_cost_per_kg=22.0,
        has_discount=True,
        discount_rate=0.1,  # 10% supplier discount
        energy_cost_per_kwh=0.30,
    )

    report = calculate_session(Session(parameters=parameters, fleet=fleet))

    print()
    print(format_report(report))
    print()
    print("Completion time per printer:")
    for printer_id, hours in report.assignment.completion_times().items():
        print(f"  {printer_id:<8} {hours:5.1f}h")


if __name__ == "__main__":
    main()
