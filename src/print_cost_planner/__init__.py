"""Production cost estimation and unit distribution for 3D printer farms."""

from .cost import CostReport, calculate_session, evaluate
from .errors import InvalidConfiguration, MalformedInput, PrintCostError
from .models import Assignment, PrinterFleet, PrinterProfile, PrintParameters, Session
from .optimizer import DistributionOptimizer, DistributionStrategy, optimize_distribution

__all__ = [
    "DistributionOptimizer",
    "DistributionStrategy",
    "optimize_distribution",
    "evaluate",
    "calculate_session",
    "CostReport",
    "PrinterProfile",
    "Assignment",
    "PrintParameters",
    "PrinterFleet",
    "Session",
    "PrintCostError",
    "InvalidConfiguration",
    "MalformedInput",
]
