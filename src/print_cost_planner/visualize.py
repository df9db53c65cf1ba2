"""Visualization utilities for production planning results.

This module provides functions to visualize how units are spread over printers,
how long each printer runs, and where the money goes.
"""

from typing import Optional

import matplotlib.pyplot as plt
import numpy as np

from print_cost_planner.cost import CostReport
from print_cost_planner.models.assignment import Assignment


def plot_distribution(
    assignment: Assignment,
    title: Optional[str] = None,
    show: bool = True,
    save_path: Optional[str] = None,
) -> plt.Figure:
    """Plot units and completion time per printer.

    Creates a two-panel visualization showing:
    - Units assigned to each printer
    - Completion time of each printer with the makespan line

    Args:
        assignment: Assignment returned by the optimizer
        title: Optional custom title (default: auto-generated)
        show: Whether to display the plot (default: True)
        save_path: Optional path to save the figure

    Returns:
        matplotlib Figure object

    Example:
        >>> from print_cost_planner.optimizer import optimize_distribution
        >>> assignment = optimize_distribution(40, printers)
        >>> plot_distribution(assignment)
    """
    if not len(assignment):
        raise ValueError("Cannot plot empty assignment")

    names = [printer.id for printer in assignment.printers]
    positions = np.arange(len(names))
    units = np.array([count for _, count in assignment])
    times = np.array([printer.completion_time(count) for printer, count in assignment])
    makespan = assignment.makespan()

    fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(10, 8), sharex=True)

    if title is None:
        title = (
            f"Printer Distribution\n"
            f"{assignment.total_units} units on {len(names)} printers | "
            f"Makespan: {makespan:.2f}h"
        )

    fig.suptitle(title, fontsize=14, fontweight="bold")

    # Plot 1: Units
    ax1.bar(positions, units, color="steelblue")
    ax1.set_ylabel("Units")
    ax1.set_title("Units per Printer")
    ax1.grid(True, axis="y", alpha=0.3)

    # Plot 2: Completion time
    ax2.bar(positions, times, color="seagreen", label="Completion Time")
    ax2.axhline(
        makespan,
        color="red",
        linestyle="--",
        linewidth=2,
        label=f"Makespan ({makespan:.2f}h)",
    )
    ax2.set_ylabel("Hours")
    ax2.set_title("Completion Time per Printer")
    ax2.set_xticks(positions)
    ax2.set_xticklabels(names)
    ax2.legend()
    ax2.grid(True, axis="y", alpha=0.3)

    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")

    if show:
        plt.show()

    return fig


def plot_cost_breakdown(
    report: CostReport,
    title: str = "Production Cost Breakdown",
    show: bool = True,
    save_path: Optional[str] = None,
) -> plt.Figure:
    """Plot cost components and per-printer energy cost.

    Args:
        report: Cost report to visualize
        title: Plot title
        show: Whether to display the plot
        save_path: Optional path to save the figure

    Returns:
        matplotlib Figure object
    """
    if not report.lines:
        raise ValueError("Cannot plot empty assignment")

    components = ["Material", "Energy", "Commission"]
    amounts = np.array([report.material_cost, report.energy_cost, report.commission])
    names = [line.printer.id for line in report.lines]
    energy = np.array([line.energy_cost for line in report.lines])

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 4))
    fig.suptitle(title, fontsize=14, fontweight="bold")

    ax1.bar(components, amounts, color=["peru", "goldenrod", "slategray"])
    ax1.set_ylabel("Cost ($)")
    ax1.set_title(f"Total with Commission: ${report.total_cost_with_commission:.2f}")
    ax1.grid(True, axis="y", alpha=0.3)

    ax2.bar(np.arange(len(names)), energy, color="goldenrod")
    ax2.set_xticks(np.arange(len(names)))
    ax2.set_xticklabels(names)
    ax2.set_ylabel("Energy Cost ($)")
    ax2.set_title("Energy Cost per Printer")
    ax2.grid(True, axis="y", alpha=0.3)

    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")

    if show:
        plt.show()

    return fig
