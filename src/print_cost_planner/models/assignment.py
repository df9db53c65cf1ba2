"""Assignment model: how many units each printer produces."""

from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple

from print_cost_planner.errors import InvalidConfiguration
from print_cost_planner.models.printer import PrinterProfile


@dataclass(frozen=True)
class Assignment:
    """Ordered per-printer unit counts produced by the distribution optimizer.

    Entries keep the order of the printers passed to the optimizer, and every
    printer appears exactly once, including those assigned zero units.

    Attributes:
        entries: Tuple of (printer, unit_count) pairs in input order
    """

    entries: Tuple[Tuple[PrinterProfile, int], ...]

    def __post_init__(self) -> None:
        """Validate unit counts."""
        for printer, units in self.entries:
            if units < 0:
                raise InvalidConfiguration(
                    f"unit count for printer {printer.id!r} must be non-negative, got {units}"
                )

    def __iter__(self) -> Iterator[Tuple[PrinterProfile, int]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def printers(self) -> Tuple[PrinterProfile, ...]:
        """Printers in input order."""
        return tuple(printer for printer, _ in self.entries)

    @property
    def total_units(self) -> int:
        """Sum of all assigned units."""
        return sum(units for _, units in self.entries)

    def find(self, printer_id: str) -> Optional[PrinterProfile]:
        """Return the printer with the given id (case-insensitive), if present."""
        key = printer_id.casefold()
        for printer, _ in self.entries:
            if printer.key == key:
                return printer
        return None

    def units_for(self, printer_id: str) -> int:
        """Units assigned to the printer with the given id (case-insensitive).

        Raises:
            KeyError: If no printer with that id is part of the assignment
        """
        key = printer_id.casefold()
        for printer, units in self.entries:
            if printer.key == key:
                return units
        raise KeyError(printer_id)

    def as_dict(self) -> Dict[str, int]:
        """Unit counts keyed by printer id, in input order."""
        return {printer.id: units for printer, units in self.entries}

    def completion_times(self) -> Dict[str, float]:
        """Completion time in hours per printer id."""
        return {printer.id: printer.completion_time(units) for printer, units in self.entries}

    def makespan(self) -> float:
        """Completion time of the last printer to finish, in hours."""
        if not self.entries:
            return 0.0
        return max(printer.completion_time(units) for printer, units in self.entries)
