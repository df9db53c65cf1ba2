"""Settings file import/export and input normalization.

The settings file is comma-separated text:

- line 1: total_units, material_per_unit, commission_per_unit,
  material_cost_per_kg, has_discount, discount_rate, energy_cost_per_kwh
- every further line: id, power_consumption, print_time_per_unit,
  nozzle_size, bed_capacity

Fields are read and written with the csv module, so a field that itself
contains a comma (an id, or a decimal-comma number such as "0,5") is quoted.
Numbers may use either "." or "," as decimal separator on input; output always
uses ".".
"""

import csv
import io
import logging
import math
from pathlib import Path
from typing import List, Optional

from print_cost_planner.errors import InvalidConfiguration, MalformedInput
from print_cost_planner.models.printer import PrinterProfile
from print_cost_planner.models.session import PrinterFleet, PrintParameters, Session

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = "settings.txt"

PARAMETER_FIELD_COUNT = 7
PRINTER_FIELD_COUNT = 5

_TRUE_WORDS = ("true", "yes", "y", "1")
_FALSE_WORDS = ("false", "no", "n", "0")


def parse_decimal(text: str, line_number: Optional[int] = None) -> float:
    """Parse a decimal number written with "." or "," as separator.

    Examples:
        >>> parse_decimal("0,5")
        0.5
        >>> parse_decimal(" 12.25 ")
        12.25

    Raises:
        MalformedInput: If the text is not a finite number
    """
    normalized = str(text).strip().replace(",", ".")
    try:
        value = float(normalized)
    except ValueError:
        raise MalformedInput(f"invalid number: {text!r}", line_number) from None
    if not math.isfinite(value):
        raise MalformedInput(f"invalid number: {text!r}", line_number)
    return value


def parse_int(text: str, line_number: Optional[int] = None) -> int:
    """Parse a whole number.

    Raises:
        MalformedInput: If the text is not an integer
    """
    try:
        return int(str(text).strip())
    except ValueError:
        raise MalformedInput(f"invalid whole number: {text!r}", line_number) from None


def parse_bool(text: str, line_number: Optional[int] = None) -> bool:
    """Parse true/false, yes/no or 1/0, ignoring case.

    Raises:
        MalformedInput: If the text is not a recognized flag
    """
    word = str(text).strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise MalformedInput(f"invalid flag: {text!r}", line_number)


def _format_number(value: float) -> str:
    return repr(float(value))


def format_settings(session: Session) -> str:
    """Serialize a session to settings file text."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")

    params = session.parameters
    writer.writerow(
        [
            params.total_units,
            _format_number(params.material_per_unit_grams),
            _format_number(params.commission_per_unit),
            _format_number(params.material_cost_per_kg),
            "true" if params.has_discount else "false",
            _format_number(params.discount_rate),
            _format_number(params.energy_cost_per_kwh),
        ]
    )
    for printer in session.fleet:
        writer.writerow(
            [
                printer.id,
                _format_number(printer.power_consumption_kwh_per_hour),
                _format_number(printer.print_time_per_unit_hours),
                _format_number(printer.nozzle_size_mm),
                printer.bed_capacity_units_per_batch,
            ]
        )
    return buffer.getvalue()


def _parse_parameters(row: List[str], line_number: int) -> PrintParameters:
    if len(row) != PARAMETER_FIELD_COUNT:
        raise MalformedInput(
            f"expected {PARAMETER_FIELD_COUNT} parameter fields, got {len(row)}", line_number
        )
    try:
        return PrintParameters(
            total_units=parse_int(row[0], line_number),
            material_per_unit_grams=parse_decimal(row[1], line_number),
            commission_per_unit=parse_decimal(row[2], line_number),
            material_cost_per_kg=parse_decimal(row[3], line_number),
            has_discount=parse_bool(row[4], line_number),
            discount_rate=parse_decimal(row[5], line_number),
            energy_cost_per_kwh=parse_decimal(row[6], line_number),
        )
    except InvalidConfiguration as exc:
        raise MalformedInput(str(exc), line_number) from exc


def _parse_printer(row: List[str], line_number: int) -> PrinterProfile:
    if len(row) != PRINTER_FIELD_COUNT:
        raise MalformedInput(
            f"expected {PRINTER_FIELD_COUNT} printer fields, got {len(row)}", line_number
        )
    try:
        return PrinterProfile(
            id=row[0].strip(),
            power_consumption_kwh_per_hour=parse_decimal(row[1], line_number),
            print_time_per_unit_hours=parse_decimal(row[2], line_number),
            nozzle_size_mm=parse_decimal(row[3], line_number),
            bed_capacity_units_per_batch=parse_int(row[4], line_number),
        )
    except InvalidConfiguration as exc:
        raise MalformedInput(str(exc), line_number) from exc


def parse_settings(text: str) -> Session:
    """Parse settings file text into a new session.

    Parsing is all-or-nothing: the first malformed line aborts with an error and
    no partial session is returned.

    Raises:
        MalformedInput: If the text is empty or any line is malformed
    """
    reader = csv.reader(io.StringIO(text), skipinitialspace=True)
    parameters: Optional[PrintParameters] = None
    fleet = PrinterFleet()

    try:
        for row in reader:
            line_number = reader.line_num
            if not any(field.strip() for field in row):
                logger.debug("Skipping blank settings line %d", line_number)
                continue
            if parameters is None:
                parameters = _parse_parameters(row, line_number)
                continue
            printer = _parse_printer(row, line_number)
            try:
                fleet.add(printer)
            except InvalidConfiguration as exc:
                raise MalformedInput(str(exc), line_number) from exc
    except csv.Error as exc:
        raise MalformedInput(str(exc), reader.line_num) from exc

    if parameters is None:
        raise MalformedInput("settings are empty")

    return Session(parameters=parameters, fleet=fleet)


def export_settings(session: Session, path: str | Path = DEFAULT_SETTINGS_PATH) -> Path:
    """Write a session to a settings file.

    Returns:
        Path of the written file
    """
    path = Path(path)
    path.write_text(format_settings(session), encoding="utf-8")
    logger.info("Exported settings with %d printers to %s", len(session.fleet), path)
    return path


def import_settings(path: str | Path = DEFAULT_SETTINGS_PATH) -> Session:
    """Read a session from a settings file.

    Raises:
        MalformedInput: If the file cannot be read or its content is malformed
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise MalformedInput(f"cannot read settings file {path}: {exc}") from exc

    session = parse_settings(text)
    logger.info("Imported settings with %d printers from %s", len(session.fleet), path)
    return session
