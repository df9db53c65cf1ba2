"""Error types raised by the cost planner."""

from typing import Optional


class PrintCostError(Exception):
    """Base class for all cost planner errors."""


class InvalidConfiguration(PrintCostError, ValueError):
    """Printer or parameter values the optimizer cannot work with.

    Raised eagerly, before any assignment is computed, so callers never see a
    partially filled result.
    """


class MalformedInput(PrintCostError, ValueError):
    """Text that could not be parsed into a number, flag or settings record.

    Attributes:
        line_number: 1-based line in a settings file, if the text came from one
    """

    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
