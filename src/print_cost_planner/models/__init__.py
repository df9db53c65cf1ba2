"""Core data models for production cost planning.

This package contains the printer, assignment and session models.
"""

from print_cost_planner.models.assignment import Assignment
from print_cost_planner.models.printer import PrinterProfile
from print_cost_planner.models.session import PrinterFleet, PrintParameters, Session

__all__ = [
    "PrinterProfile",
    "Assignment",
    "PrintParameters",
    "PrinterFleet",
    "Session",
]
