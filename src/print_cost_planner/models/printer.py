"""Printer profile model for production planning."""

from dataclasses import dataclass
from numbers import Integral

from print_cost_planner.errors import InvalidConfiguration


@dataclass(frozen=True)
class PrinterProfile:
    """Physical and economic characteristics of one printer.

    Attributes:
        id: Printer nickname, unique within a fleet (compared case-insensitively)
        power_consumption_kwh_per_hour: Energy drawn while printing, in kWh per hour
        print_time_per_unit_hours: Time one print cycle takes, in hours
        nozzle_size_mm: Nozzle diameter in millimeters (informational only)
        bed_capacity_units_per_batch: Units that fit on the bed in one print cycle
    """

    id: str
    power_consumption_kwh_per_hour: float
    print_time_per_unit_hours: float
    nozzle_size_mm: float
    bed_capacity_units_per_batch: int

    def __post_init__(self) -> None:
        """Validate printer parameters."""
        if not self.id or not self.id.strip():
            raise InvalidConfiguration("id must be a non-empty string")
        if self.power_consumption_kwh_per_hour < 0:
            raise InvalidConfiguration(
                f"power_consumption_kwh_per_hour must be non-negative, "
                f"got {self.power_consumption_kwh_per_hour}"
            )
        if self.print_time_per_unit_hours <= 0:
            raise InvalidConfiguration(
                f"print_time_per_unit_hours must be positive, got {self.print_time_per_unit_hours}"
            )
        if self.nozzle_size_mm <= 0:
            raise InvalidConfiguration(
                f"nozzle_size_mm must be positive, got {self.nozzle_size_mm}"
            )
        if isinstance(self.bed_capacity_units_per_batch, bool) or not isinstance(
            self.bed_capacity_units_per_batch, Integral
        ):
            raise InvalidConfiguration(
                f"bed_capacity_units_per_batch must be an integer, "
                f"got {self.bed_capacity_units_per_batch!r}"
            )
        if self.bed_capacity_units_per_batch < 1:
            raise InvalidConfiguration(
                f"bed_capacity_units_per_batch must be >= 1, "
                f"got {self.bed_capacity_units_per_batch}"
            )

    @property
    def key(self) -> str:
        """Case-insensitive lookup key for this printer."""
        return self.id.casefold()

    def batches_for(self, units: int) -> int:
        """Number of print cycles needed to produce ``units`` units."""
        if units <= 0:
            return 0
        return -(-units // self.bed_capacity_units_per_batch)

    def completion_time(self, units: int) -> float:
        """Hours until ``units`` units are finished on this printer."""
        return self.batches_for(units) * self.print_time_per_unit_hours

    def energy_kwh(self, units: int) -> float:
        """Energy consumed producing ``units`` units, in kWh.

        Energy is charged per unit, not per batch: a full bed and a single
        part cost the same per part.
        """
        return units * self.print_time_per_unit_hours * self.power_consumption_kwh_per_hour
