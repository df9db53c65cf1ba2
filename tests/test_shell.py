"""Tests for the interactive shell."""

import io

import pytest

from print_cost_planner.models import PrinterFleet, PrinterProfile, PrintParameters, Session
from print_cost_planner.shell import InteractiveShell


def scripted(*lines):
    """Input function answering prompts from a fixed script, then signalling EOF."""
    answers = iter(lines)

    def _input():
        try:
            return next(answers)
        except StopIteration:
            raise EOFError from None

    return _input


def run_shell(*lines, session=None, settings_path="settings.txt"):
    output = io.StringIO()
    shell = InteractiveShell(
        session=session,
        settings_path=settings_path,
        input_fn=scripted(*lines),
        output=output,
    )
    shell.run()
    return shell, output.getvalue()


@pytest.fixture
def two_printer_session():
    return Session(
        parameters=PrintParameters(
            total_units=3,
            material_per_unit_grams=50.0,
            commission_per_unit=1.5,
            material_cost_per_kg=20.0,
            energy_cost_per_kwh=0.2,
        ),
        fleet=PrinterFleet(
            [
                PrinterProfile("A", 0.5, 1.0, 0.4, 2),
                PrinterProfile("B", 0.3, 2.0, 0.4, 1),
            ]
        ),
    )


class TestMainMenu:
    """Tests for the main menu loop."""

    def test_exit(self):
        """Test that option 6 leaves the loop."""
        _, out = run_shell("6")
        assert "3D Print Cost Calculator" in out

    def test_end_of_input_exits(self):
        """Test that running out of input ends the shell cleanly."""
        shell, out = run_shell()
        assert "Select an option: " in out

    def test_unknown_option(self):
        _, out = run_shell("9", "6")
        assert "Invalid option. Try again." in out

    def test_non_numeric_option(self):
        _, out = run_shell("x", "6")
        assert "Please enter a valid number." in out


class TestParameters:
    """Tests for entering printing parameters."""

    def test_set_parameters(self):
        """Test entering every parameter, including a decimal comma."""
        shell, _ = run_shell("1", "3", "50", "1.5", "20", "no", "0,2", "6")
        params = shell.session.parameters

        assert params.total_units == 3
        assert params.material_per_unit_grams == 50.0
        assert params.commission_per_unit == 1.5
        assert params.material_cost_per_kg == 20.0
        assert params.has_discount is False
        assert params.energy_cost_per_kwh == 0.2

    def test_discount_percentage(self):
        """Test that the discount is entered in percent and stored as a fraction."""
        shell, _ = run_shell("1", "10", "100", "0", "20", "yes", "10", "0.1", "6")
        params = shell.session.parameters

        assert params.has_discount is True
        assert params.discount_rate == pytest.approx(0.1)

    def test_invalid_number_reprompts(self):
        """Test that unparsable input is asked for again."""
        shell, out = run_shell("1", "abc", "5", "50", "0", "20", "no", "0.2", "6")

        assert "Invalid number format. Please enter a whole number." in out
        assert shell.session.parameters.total_units == 5

    def test_negative_value_reprompts(self):
        """Test that out-of-range values are asked for again."""
        shell, out = run_shell("1", "-5", "5", "50", "0", "20", "no", "0.2", "6")

        assert "Value out of range. Please try again." in out
        assert shell.session.parameters.total_units == 5


class TestPrinterManagement:
    """Tests for the printer submenu."""

    def test_add_printer(self):
        """Test adding a printer."""
        shell, out = run_shell("2", "1", "Prusa", "0,12", "2", "0.4", "4", "6")

        assert "Printer added successfully." in out
        printer = shell.session.fleet.find("prusa")
        assert printer.power_consumption_kwh_per_hour == 0.12
        assert printer.bed_capacity_units_per_batch == 4

    def test_add_printer_rejects_zero_bed(self):
        """Test that a bed capacity below 1 is asked for again."""
        shell, out = run_shell("2", "1", "Prusa", "0.12", "2", "0.4", "0", "4", "6")

        assert "Value out of range. Please try again." in out
        assert shell.session.fleet.find("Prusa").bed_capacity_units_per_batch == 4

    def test_add_duplicate_printer(self, two_printer_session):
        """Test that a second printer with the same nickname is refused."""
        shell, out = run_shell("2", "1", "a", "6", session=two_printer_session)

        assert "already exists" in out
        assert len(shell.session.fleet) == 2

    def test_list_printers(self, two_printer_session):
        _, out = run_shell("2", "2", "6", session=two_printer_session)
        assert "A | 0.5 kWh/h | 1.0h/unit | 0.4mm | 2 units/batch" in out
        assert "B | 0.3 kWh/h | 2.0h/unit | 0.4mm | 1 units/batch" in out

    def test_list_without_printers(self):
        _, out = run_shell("2", "2", "6")
        assert "No printers available." in out

    def test_remove_printer_ignores_case(self, two_printer_session):
        """Test removing a printer by nickname in a different case."""
        shell, out = run_shell("2", "3", "b", "6", session=two_printer_session)

        assert "Printer removed." in out
        assert [p.id for p in shell.session.fleet] == ["A"]

    def test_remove_unknown_printer(self, two_printer_session):
        shell, out = run_shell("2", "3", "Z", "6", session=two_printer_session)
        assert "No printer named 'Z'." in out
        assert len(shell.session.fleet) == 2

    def test_back(self):
        _, out = run_shell("2", "4", "6")
        assert "Invalid option." not in out


class TestCalculation:
    """Tests for the calculate option."""

    def test_calculate(self, two_printer_session):
        """Test the printed report for the worked example."""
        _, out = run_shell("3", "6", session=two_printer_session)

        assert "A -> Units: 3, Energy Cost: $0.30 (Nozzle: 0.40mm)" in out
        assert "B -> Units: 0, Energy Cost: $0.00 (Nozzle: 0.40mm)" in out
        assert "Total Cost with Commission: $7.80" in out

    def test_calculate_without_printers(self):
        _, out = run_shell("3", "6")
        assert "No printers available." in out

    def test_full_session(self):
        """Test entering everything by hand and calculating."""
        _, out = run_shell(
            "1", "3", "50", "1.5", "20", "no", "0,2",
            "2", "1", "A", "0.5", "1", "0.4", "2",
            "2", "1", "B", "0.3", "2", "0.4", "1",
            "3",
            "6",
        )
        assert "A -> Units: 3" in out
        assert "B -> Units: 0" in out
        assert "Total Cost with Commission: $7.80" in out


class TestSettingsMenu:
    """Tests for export and import."""

    def test_export_then_import(self, two_printer_session, tmp_path):
        """Test that a session exported by one shell is imported by another."""
        path = tmp_path / "settings.txt"
        _, out = run_shell("4", "6", session=two_printer_session, settings_path=path)
        assert "Settings exported successfully." in out
        assert path.exists()

        shell, out = run_shell("5", "6", settings_path=path)
        assert "Settings imported successfully." in out
        assert shell.session.parameters == two_printer_session.parameters
        assert [p.id for p in shell.session.fleet] == ["A", "B"]

    def test_failed_import_keeps_session(self, two_printer_session, tmp_path):
        """Test that a malformed file leaves the current session untouched."""
        path = tmp_path / "settings.txt"
        path.write_text("garbage\n", encoding="utf-8")

        shell, out = run_shell("5", "6", session=two_printer_session, settings_path=path)
        assert "Error importing settings" in out
        assert shell.session is two_printer_session

    def test_export_to_missing_directory(self, two_printer_session, tmp_path):
        """Test that write errors are reported instead of raised."""
        path = tmp_path / "missing" / "settings.txt"
        _, out = run_shell("4", "6", session=two_printer_session, settings_path=path)
        assert "Error exporting settings" in out

    def test_import_undecodable_file_keeps_running(self, two_printer_session, tmp_path):
        """Test that a non-UTF-8 file is reported and the menu keeps going."""
        path = tmp_path / "settings.txt"
        path.write_bytes(b"5,10,0,20,false,0,0.2\n\xff\xfeA,0.5,1.0,0.4,2\n")

        shell, out = run_shell("5", "2", "2", "6", session=two_printer_session, settings_path=path)
        assert "Error importing settings" in out
        assert shell.session is two_printer_session
        assert "A | 0.5 kWh/h" in out
