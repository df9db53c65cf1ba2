"""Plain-text rendering of printers and cost reports."""

from typing import List

from print_cost_planner.cost import CostReport
from print_cost_planner.models.printer import PrinterProfile


def format_printer(printer: PrinterProfile) -> str:
    """One-line description of a printer for listings."""
    return (
        f"{printer.id} | {printer.power_consumption_kwh_per_hour} kWh/h | "
        f"{printer.print_time_per_unit_hours}h/unit | {printer.nozzle_size_mm}mm | "
        f"{printer.bed_capacity_units_per_batch} units/batch"
    )


def format_report(report: CostReport) -> str:
    """Render a cost report as the multi-line text printed by the shell and CLI.

    Example output::

        Optimized Printer Distribution:
        A -> Units: 3, Energy Cost: $0.30 (Nozzle: 0.40mm)
        B -> Units: 0, Energy Cost: $0.00 (Nozzle: 0.40mm)
        Total Material Cost: $3.00
        ...
    """
    lines: List[str] = ["Optimized Printer Distribution:"]
    for line in report.lines:
        lines.append(
            f"{line.printer.id} -> Units: {line.units}, "
            f"Energy Cost: ${line.energy_cost:.2f} "
            f"(Nozzle: {line.printer.nozzle_size_mm:.2f}mm)"
        )
    lines.extend(
        [
            f"Total Material Cost: ${report.material_cost:.2f}",
            f"Total Energy Cost: ${report.energy_cost:.2f}",
            f"Total Production Cost: ${report.total_cost:.2f}",
            f"Total Cost with Commission: ${report.total_cost_with_commission:.2f}",
            f"Estimated Completion Time: {report.makespan:.2f}h",
        ]
    )
    return "\n".join(lines)
