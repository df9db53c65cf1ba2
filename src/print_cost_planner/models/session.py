"""Session state: printing parameters and the printer fleet."""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from print_cost_planner.errors import InvalidConfiguration
from print_cost_planner.models.printer import PrinterProfile


@dataclass(frozen=True)
class PrintParameters:
    """Global parameters of one production run.

    Attributes:
        total_units: Number of units to produce
        material_per_unit_grams: Filament or resin used per unit, in grams
        commission_per_unit: Commission charged per unit
        material_cost_per_kg: Material price per kilogram
        has_discount: Whether the supplier grants a discount on material
        discount_rate: Discount as a fraction (0.1 = 10%), applied only with has_discount
        energy_cost_per_kwh: Electricity price per kWh
    """

    total_units: int = 0
    material_per_unit_grams: float = 0.0
    commission_per_unit: float = 0.0
    material_cost_per_kg: float = 0.0
    has_discount: bool = False
    discount_rate: float = 0.0
    energy_cost_per_kwh: float = 0.0

    def __post_init__(self) -> None:
        """Validate that amounts are non-negative and the discount is a fraction."""
        if self.total_units < 0:
            raise InvalidConfiguration(f"total_units must be non-negative, got {self.total_units}")
        for name in (
            "material_per_unit_grams",
            "commission_per_unit",
            "material_cost_per_kg",
            "energy_cost_per_kwh",
        ):
            value = getattr(self, name)
            if value < 0:
                raise InvalidConfiguration(f"{name} must be non-negative, got {value}")
        if not 0 <= self.discount_rate <= 1:
            raise InvalidConfiguration(
                f"discount_rate must be between 0 and 1, got {self.discount_rate}"
            )


class PrinterFleet:
    """Ordered collection of printers with case-insensitive id lookup."""

    def __init__(self, printers: Optional[List[PrinterProfile]] = None) -> None:
        self._printers: List[PrinterProfile] = []
        for printer in printers or []:
            self.add(printer)

    def add(self, printer: PrinterProfile) -> None:
        """Append a printer.

        Raises:
            InvalidConfiguration: If a printer with the same id (ignoring case) exists
        """
        if self.find(printer.id) is not None:
            raise InvalidConfiguration(f"printer {printer.id!r} already exists")
        self._printers.append(printer)

    def remove(self, printer_id: str) -> bool:
        """Remove the printer with the given id, ignoring case.

        Returns:
            True if a printer was removed, False if none matched
        """
        key = printer_id.casefold()
        before = len(self._printers)
        self._printers = [p for p in self._printers if p.key != key]
        return len(self._printers) < before

    def find(self, printer_id: str) -> Optional[PrinterProfile]:
        key = printer_id.casefold()
        for printer in self._printers:
            if printer.key == key:
                return printer
        return None

    def clear(self) -> None:
        self._printers.clear()

    def snapshot(self) -> Tuple[PrinterProfile, ...]:
        """Immutable view of the fleet in insertion order."""
        return tuple(self._printers)

    def __iter__(self) -> Iterator[PrinterProfile]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        return len(self._printers)

    def __repr__(self) -> str:
        return f"PrinterFleet({[p.id for p in self._printers]!r})"


@dataclass
class Session:
    """Parameters and printers the shell works on, passed explicitly to every call."""

    parameters: PrintParameters = field(default_factory=PrintParameters)
    fleet: PrinterFleet = field(default_factory=PrinterFleet)
