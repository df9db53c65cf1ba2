"""Command line entry point for the print cost planner.

Run:
    print-cost-planner                                  # interactive menu
    print-cost-planner --settings shop.txt --calculate  # one-shot report
    print-cost-planner --calculate --plot plan.png      # report plus chart
"""

import argparse
import logging
import sys
from typing import List, Optional

from print_cost_planner.cost import calculate_session
from print_cost_planner.errors import PrintCostError
from print_cost_planner.optimizer import DistributionStrategy
from print_cost_planner.report import format_report
from print_cost_planner.settings_io import DEFAULT_SETTINGS_PATH, import_settings
from print_cost_planner.shell import InteractiveShell

logger = logging.getLogger(__name__)


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Estimate 3D printing production cost and spread units over printers"
    )
    p.add_argument(
        "--settings",
        type=str,
        default=DEFAULT_SETTINGS_PATH,
        help="Settings file used for import/export",
    )
    p.add_argument(
        "--calculate",
        action="store_true",
        help="Load the settings file, print the cost report and exit",
    )
    p.add_argument(
        "--strategy",
        choices=[s.value for s in DistributionStrategy],
        default=DistributionStrategy.COMPLETION_TIME.value,
        help="How units are distributed over printers",
    )
    p.add_argument("--plot", type=str, default="", help="Save a distribution chart to this path")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def _run_calculation(args: argparse.Namespace, strategy: DistributionStrategy) -> int:
    session = import_settings(args.settings)
    report = calculate_session(session, strategy=strategy)
    print(format_report(report))

    if args.plot:
        import matplotlib

        matplotlib.use("Agg")
        from print_cost_planner.visualize import plot_distribution

        plot_distribution(report.assignment, show=False, save_path=args.plot)
        print(f"Plot saved: {args.plot}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_argparser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    strategy = DistributionStrategy(args.strategy)

    if args.calculate:
        try:
            return _run_calculation(args, strategy)
        except (PrintCostError, OSError) as exc:
            logger.debug("Calculation failed", exc_info=True)
            print(f"error: {exc}", file=sys.stderr)
            return 1

    InteractiveShell(settings_path=args.settings, strategy=strategy).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
