"""Distribution of production units across a pool of printers.

This module provides the DistributionOptimizer, which decides how many units each
printer should produce. The default strategy greedily minimizes the makespan:
units are handed out one at a time to whichever printer would finish soonest
after taking it, with batching by bed capacity taken into account.

Example:
    >>> from print_cost_planner.models import PrinterProfile
    >>> from print_cost_planner.optimizer import DistributionOptimizer
    >>>
    >>> printers = [
    ...     PrinterProfile("A", 0.5, 1.0, 0.4, 2),
    ...     PrinterProfile("B", 0.3, 2.0, 0.4, 1),
    ... ]
    >>> DistributionOptimizer().optimize(3, printers).as_dict()
    {'A': 3, 'B': 0}
"""

import logging
from enum import Enum
from numbers import Integral
from typing import List, Sequence

from print_cost_planner.errors import InvalidConfiguration
from print_cost_planner.models.assignment import Assignment
from print_cost_planner.models.printer import PrinterProfile

logger = logging.getLogger(__name__)


class DistributionStrategy(Enum):
    """Policy used to hand out units to printers."""

    COMPLETION_TIME = "completion_time"  # Greedy makespan minimization (default)
    POWER_FIRST = "power_first"  # Lowest power draw first, filled one bed at a time


def validate_printers(printers: Sequence[PrinterProfile]) -> None:
    """Check that a printer list can be used for distribution.

    Args:
        printers: Printers to check

    Raises:
        InvalidConfiguration: If the list is empty, a printer has a bed capacity
            below 1 or a non-positive print time, or two printers share an id
    """
    if not printers:
        raise InvalidConfiguration("at least one printer is required")

    seen = set()
    for printer in printers:
        if printer.bed_capacity_units_per_batch < 1:
            raise InvalidConfiguration(
                f"printer {printer.id!r}: bed_capacity_units_per_batch must be >= 1, "
                f"got {printer.bed_capacity_units_per_batch}"
            )
        if printer.print_time_per_unit_hours <= 0:
            raise InvalidConfiguration(
                f"printer {printer.id!r}: print_time_per_unit_hours must be positive, "
                f"got {printer.print_time_per_unit_hours}"
            )
        key = printer.id.casefold()
        if key in seen:
            raise InvalidConfiguration(f"duplicate printer id {printer.id!r}")
        seen.add(key)


def _hypothetical_completion_time(printer: PrinterProfile, assigned: int) -> float:
    """Completion time of a printer if it were given one more unit."""
    return printer.completion_time(assigned + 1)


def distribute_by_completion_time(
    total_units: int, printers: Sequence[PrinterProfile]
) -> List[int]:
    """Assign units one at a time to the printer that would finish first.

    Args:
        total_units: Number of units to distribute
        printers: Validated, non-empty printer sequence

    Returns:
        Unit counts, parallel to ``printers``

    Algorithm:
        For each unit, compute for every printer the completion time it would
        have after taking one more unit: ceil((assigned + 1) / bed_capacity)
        batches of print_time_per_unit hours each. The unit goes to the printer
        with the strictly smallest value; ties go to the printer listed first.

    Note:
        Runs in O(total_units * len(printers)). Fine for tens of printers and
        thousands of units; larger jobs will be slow.
    """
    counts = [0] * len(printers)

    for _ in range(total_units):
        best_index = 0
        best_time = _hypothetical_completion_time(printers[0], counts[0])
        for index in range(1, len(printers)):
            candidate = _hypothetical_completion_time(printers[index], counts[index])
            if candidate < best_time:
                best_index = index
                best_time = candidate
        counts[best_index] += 1

    return counts


def distribute_by_power(total_units: int, printers: Sequence[PrinterProfile]) -> List[int]:
    """Fill printers one bed at a time, lowest power consumption first.

    Printers are stable-sorted by power consumption and swept repeatedly; each
    visit assigns min(remaining, bed_capacity) units. The input sequence is not
    reordered.

    Args:
        total_units: Number of units to distribute
        printers: Validated, non-empty printer sequence

    Returns:
        Unit counts, parallel to ``printers``
    """
    counts = [0] * len(printers)
    order = sorted(
        range(len(printers)), key=lambda i: printers[i].power_consumption_kwh_per_hour
    )

    remaining = total_units
    while remaining > 0:
        for index in order:
            batch = min(remaining, printers[index].bed_capacity_units_per_batch)
            counts[index] += batch
            remaining -= batch
            if remaining <= 0:
                break

    return counts


def optimize_distribution(
    total_units: int,
    printers: Sequence[PrinterProfile],
    strategy: DistributionStrategy = DistributionStrategy.COMPLETION_TIME,
) -> Assignment:
    """Distribute ``total_units`` units across ``printers``.

    Args:
        total_units: Number of units to produce (>= 0)
        printers: Non-empty ordered sequence of printers; treated as read-only
        strategy: Distribution policy (default: COMPLETION_TIME)

    Returns:
        Assignment listing every input printer in input order, with unit
        counts summing to total_units

    Raises:
        InvalidConfiguration: If total_units is not a non-negative integer or the printers are
            unusable (see validate_printers)
    """
    if isinstance(total_units, bool) or not isinstance(total_units, Integral):
        raise InvalidConfiguration(f"total_units must be an integer, got {total_units!r}")
    if total_units < 0:
        raise InvalidConfiguration(f"total_units must be non-negative, got {total_units}")
    printers = tuple(printers)
    validate_printers(printers)

    if strategy == DistributionStrategy.COMPLETION_TIME:
        counts = distribute_by_completion_time(total_units, printers)
    elif strategy == DistributionStrategy.POWER_FIRST:
        counts = distribute_by_power(total_units, printers)
    else:
        raise ValueError(f"Unknown distribution strategy: {strategy}")

    assignment = Assignment(entries=tuple(zip(printers, counts)))
    logger.debug(
        "Distributed %d units over %d printers (%s): %s, makespan %.2fh",
        total_units,
        len(printers),
        strategy.value,
        assignment.as_dict(),
        assignment.makespan(),
    )
    return assignment


class DistributionOptimizer:
    """Computes per-printer unit counts for a production run.

    The optimizer holds no state between calls besides its strategy; the printer
    list is a read-only snapshot for the duration of one call.

    Args:
        strategy: Distribution policy. Default: DistributionStrategy.COMPLETION_TIME,
                  which greedily minimizes the time until the last printer finishes.

    Example:
        >>> optimizer = DistributionOptimizer()
        >>> assignment = optimizer.optimize(100, printers)
    """

    def __init__(self, strategy: DistributionStrategy = DistributionStrategy.COMPLETION_TIME):
        self.strategy = strategy

    def optimize(self, total_units: int, printers: Sequence[PrinterProfile]) -> Assignment:
        """Distribute units across printers using the configured strategy.

        Raises:
            InvalidConfiguration: If the inputs cannot be distributed
        """
        return optimize_distribution(total_units, printers, strategy=self.strategy)

    def __repr__(self) -> str:
        """Return string representation of the optimizer."""
        return f"DistributionOptimizer(strategy={self.strategy.name})"
