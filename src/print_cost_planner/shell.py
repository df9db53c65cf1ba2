"""Interactive menu for entering parameters, managing printers and pricing a run."""

import logging
import sys
from pathlib import Path
from typing import Callable, Optional, TextIO, TypeVar

from print_cost_planner.cost import calculate_session
from print_cost_planner.errors import InvalidConfiguration, MalformedInput
from print_cost_planner.models.printer import PrinterProfile
from print_cost_planner.models.session import PrintParameters, Session
from print_cost_planner.optimizer import DistributionStrategy
from print_cost_planner.report import format_printer, format_report
from print_cost_planner.settings_io import (
    DEFAULT_SETTINGS_PATH,
    export_settings,
    import_settings,
    parse_decimal,
    parse_int,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

MAIN_MENU = """
3D Print Cost Calculator
1. Set Printing Parameters
2. Manage Printers
3. Calculate Costs
4. Export Settings
5. Import Settings
6. Exit"""

PRINTER_MENU = """
1. Add Printer
2. List Printers
3. Remove Printer
4. Back"""


class ShellExit(Exception):
    """Raised internally when input ends; unwinds to InteractiveShell.run()."""


class InteractiveShell:
    """Menu loop driving a Session.

    Input and output are injectable so the shell can be scripted.

    Args:
        session: Session to work on (default: an empty one)
        settings_path: File used by export and import
        strategy: Distribution strategy used when calculating costs
        input_fn: Callable returning one line of user input (default: input)
        output: Stream the menu and results are written to (default: sys.stdout)
    """

    def __init__(
        self,
        session: Optional[Session] = None,
        settings_path: str | Path = DEFAULT_SETTINGS_PATH,
        strategy: DistributionStrategy = DistributionStrategy.COMPLETION_TIME,
        input_fn: Callable[[], str] = input,
        output: Optional[TextIO] = None,
    ) -> None:
        self.session = session if session is not None else Session()
        self.settings_path = Path(settings_path)
        self.strategy = strategy
        self._input_fn = input_fn
        self._output = output if output is not None else sys.stdout

    def _print(self, text: str = "") -> None:
        self._output.write(text + "\n")

    def _prompt(self, prompt: str) -> str:
        self._output.write(prompt)
        self._output.flush()
        try:
            return self._input_fn()
        except EOFError:
            raise ShellExit() from None

    def _ask(
        self,
        prompt: str,
        parse: Callable[[str], T],
        check: Optional[Callable[[T], bool]] = None,
        error: str = "Invalid number format. Please try again.",
    ) -> T:
        """Prompt until the answer parses and passes ``check``."""
        while True:
            try:
                value = parse(self._prompt(prompt))
            except MalformedInput:
                self._print(error)
                continue
            if check is not None and not check(value):
                self._print("Value out of range. Please try again.")
                continue
            return value

    def _ask_float(self, prompt: str, check: Callable[[float], bool] = lambda v: v >= 0) -> float:
        return self._ask(prompt, parse_decimal, check)

    def _ask_int(self, prompt: str, check: Callable[[int], bool] = lambda v: v >= 0) -> int:
        return self._ask(
            prompt,
            parse_int,
            check,
            error="Invalid number format. Please enter a whole number.",
        )

    def _ask_yes_no(self, prompt: str) -> bool:
        return self._prompt(prompt).strip().lower() in ("yes", "y")

    def run(self) -> None:
        """Show the main menu until the user exits or input ends."""
        try:
            while True:
                self._print(MAIN_MENU)
                choice = self._prompt("Select an option: ").strip()
                logger.debug("Main menu choice %r", choice)
                if choice == "1":
                    self.set_printing_parameters()
                elif choice == "2":
                    self.manage_printers()
                elif choice == "3":
                    self.calculate_costs()
                elif choice == "4":
                    self.export_settings()
                elif choice == "5":
                    self.import_settings()
                elif choice == "6":
                    return
                elif choice.isdigit():
                    self._print("Invalid option. Try again.")
                else:
                    self._print("Please enter a valid number.")
        except ShellExit:
            self._print()

    def set_printing_parameters(self) -> None:
        total_units = self._ask_int("Enter the number of units to print: ")
        material_per_unit = self._ask_float("Enter material required per unit (grams): ")
        commission = self._ask_float("Enter commission per unit ($): ")
        material_cost = self._ask_float("Enter material cost per Kg ($): ")
        has_discount = self._ask_yes_no("Does the supplier provide a discount? (yes/no): ")
        discount_rate = 0.0
        if has_discount:
            discount_rate = (
                self._ask_float("Enter discount percentage: ", lambda v: 0 <= v <= 100) / 100
            )
        energy_cost = self._ask_float("Enter energy cost per kWh ($): ")

        self.session.parameters = PrintParameters(
            total_units=total_units,
            material_per_unit_grams=material_per_unit,
            commission_per_unit=commission,
            material_cost_per_kg=material_cost,
            has_discount=has_discount,
            discount_rate=discount_rate,
            energy_cost_per_kwh=energy_cost,
        )

    def manage_printers(self) -> None:
        self._print(PRINTER_MENU)
        option = self._prompt("Select an option: ").strip()
        if option == "1":
            self.add_printer()
        elif option == "2":
            self.list_printers()
        elif option == "3":
            self.remove_printer()
        elif option == "4":
            return
        elif option.isdigit():
            self._print("Invalid option.")
        else:
            self._print("Please enter a valid number.")

    def add_printer(self) -> None:
        nickname = self._prompt("Nickname: ").strip()
        if not nickname:
            self._print("Nickname must not be empty.")
            return
        if self.session.fleet.find(nickname) is not None:
            self._print(f"Printer {nickname!r} already exists.")
            return

        printer = PrinterProfile(
            id=nickname,
            power_consumption_kwh_per_hour=self._ask_float("Power consumption (kWh per hour): "),
            print_time_per_unit_hours=self._ask_float(
                "Print time per unit (hours): ", lambda v: v > 0
            ),
            nozzle_size_mm=self._ask_float("Nozzle size (mm): ", lambda v: v > 0),
            bed_capacity_units_per_batch=self._ask_int(
                "Bed capacity (units per batch): ", lambda v: v >= 1
            ),
        )
        self.session.fleet.add(printer)
        self._print("Printer added successfully.")

    def list_printers(self) -> None:
        if not len(self.session.fleet):
            self._print("No printers available.")
            return
        for printer in self.session.fleet:
            self._print(format_printer(printer))

    def remove_printer(self) -> None:
        nickname = self._prompt("Enter nickname of printer to remove: ").strip()
        if self.session.fleet.remove(nickname):
            self._print("Printer removed.")
        else:
            self._print(f"No printer named {nickname!r}.")

    def calculate_costs(self) -> None:
        if not len(self.session.fleet):
            self._print("No printers available.")
            return
        try:
            report = calculate_session(self.session, strategy=self.strategy)
        except InvalidConfiguration as exc:
            self._print(f"Cannot calculate costs: {exc}")
            return
        self._print()
        self._print(format_report(report))

    def export_settings(self) -> None:
        try:
            export_settings(self.session, self.settings_path)
        except OSError as exc:
            logger.info("Export to %s failed: %s", self.settings_path, exc)
            self._print(f"Error exporting settings: {exc}")
            return
        self._print("Settings exported successfully.")

    def import_settings(self) -> None:
        try:
            self.session = import_settings(self.settings_path)
        except MalformedInput as exc:
            logger.info("Import from %s failed: %s", self.settings_path, exc)
            self._print(f"Error importing settings: {exc}")
            return
        self._print("Settings imported successfully.")
