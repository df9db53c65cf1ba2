"""Material, energy and commission cost calculation."""

from dataclasses import dataclass
from typing import Tuple

from print_cost_planner.models.assignment import Assignment
from print_cost_planner.models.printer import PrinterProfile
from print_cost_planner.models.session import PrintParameters, Session
from print_cost_planner.optimizer import DistributionStrategy, optimize_distribution

GRAMS_PER_KILOGRAM = 1000.0


def material_cost(
    total_units: int,
    material_per_unit_grams: float,
    cost_per_kg: float,
    has_discount: bool,
    discount_rate: float,
) -> float:
    """Calculate the material cost of a production run.

    Args:
        total_units: Number of units produced
        material_per_unit_grams: Material used per unit in grams
        cost_per_kg: Material price per kilogram
        has_discount: Whether the supplier discount applies
        discount_rate: Discount as a fraction; ignored unless has_discount

    Returns:
        Material cost after discount

    Examples:
        >>> material_cost(1000, 50, 20, True, 0.1)
        900.0
    """
    cost = (total_units * material_per_unit_grams / GRAMS_PER_KILOGRAM) * cost_per_kg
    if has_discount:
        return cost * (1 - discount_rate)
    return cost


def printer_energy_cost(printer: PrinterProfile, units: int, cost_per_kwh: float) -> float:
    """Energy cost of producing ``units`` units on one printer."""
    return printer.energy_kwh(units) * cost_per_kwh


def energy_cost(assignment: Assignment, cost_per_kwh: float) -> float:
    """Total energy cost of an assignment.

    Sum over printers of units * print_time_per_unit * power_consumption,
    multiplied by the price per kWh.
    """
    return sum(printer_energy_cost(printer, units, cost_per_kwh) for printer, units in assignment)


def total_cost(material: float, energy: float) -> float:
    return material + energy


def total_cost_with_commission(total: float, commission_per_unit: float, total_units: int) -> float:
    return total + commission_per_unit * total_units


@dataclass(frozen=True)
class PrinterCostLine:
    """Per-printer share of a cost report.

    Attributes:
        printer: The printer
        units: Units assigned to it
        energy_cost: Energy cost of those units
        completion_time: Hours until the printer finishes its units
    """

    printer: PrinterProfile
    units: int
    energy_cost: float
    completion_time: float


@dataclass(frozen=True)
class CostReport:
    """Full cost breakdown for one production run."""

    parameters: PrintParameters
    assignment: Assignment
    lines: Tuple[PrinterCostLine, ...]
    material_cost: float
    energy_cost: float
    total_cost: float
    total_cost_with_commission: float

    @property
    def commission(self) -> float:
        return self.total_cost_with_commission - self.total_cost

    @property
    def makespan(self) -> float:
        return self.assignment.makespan()


def evaluate(parameters: PrintParameters, assignment: Assignment) -> CostReport:
    """Turn parameters and an assignment into a cost report.

    Args:
        parameters: Global parameters of the run
        assignment: Per-printer unit counts, usually from optimize_distribution

    Returns:
        CostReport with per-printer lines in assignment order
    """
    price = parameters.energy_cost_per_kwh
    lines = tuple(
        PrinterCostLine(
            printer=printer,
            units=units,
            energy_cost=printer_energy_cost(printer, units, price),
            completion_time=printer.completion_time(units),
        )
        for printer, units in assignment
    )

    material = material_cost(
        parameters.total_units,
        parameters.material_per_unit_grams,
        parameters.material_cost_per_kg,
        parameters.has_discount,
        parameters.discount_rate,
    )
    energy = energy_cost(assignment, price)
    total = total_cost(material, energy)

    return CostReport(
        parameters=parameters,
        assignment=assignment,
        lines=lines,
        material_cost=material,
        energy_cost=energy,
        total_cost=total,
        total_cost_with_commission=total_cost_with_commission(
            total, parameters.commission_per_unit, parameters.total_units
        ),
    )


def calculate_session(
    session: Session,
    strategy: DistributionStrategy = DistributionStrategy.COMPLETION_TIME,
) -> CostReport:
    """Distribute the session's units over its fleet and price the result.

    Raises:
        InvalidConfiguration: If the fleet is empty or otherwise unusable
    """
    assignment = optimize_distribution(
        session.parameters.total_units, session.fleet.snapshot(), strategy=strategy
    )
    return evaluate(session.parameters, assignment)
