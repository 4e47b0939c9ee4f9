"""
Ethiocal - Command Line Interface.

Interactive menu and one-shot subcommands for displaying calendars and
converting dates.

Usage:
    ethiocal                                  (interactive menu)
    ethiocal ethiopian-calendar 2016 [--xlsx calendar.xlsx]
    ethiocal gregorian-calendar 2024
    ethiocal to-ethiopian 2023 9 12
    ethiocal to-gregorian 2016 1 1
"""

import argparse
import logging
from pathlib import Path
from typing import Callable, List, Optional, Tuple, Union

from ethiocal import __version__
from ethiocal.excel_generator import CalendarWorkbook
from ethiocal.logging_setup import setup_logging
from ethiocal.renderer import CalendarRenderer
from ethiocal.schema import (
    ETHIOPIAN,
    GREGORIAN,
    EthiopianDate,
    GregorianDate,
    InvalidDate,
)
from ethiocal.service import CalendarService

logger = logging.getLogger(__name__)

MENU_OPTIONS = (
    "Display Ethiopian Calendar",
    "Convert Gregorian to Ethiopian Date",
    "Convert Ethiopian to Gregorian Date",
    "Display Gregorian Calendar",
    "Exit",
)

EXIT_CHOICE = len(MENU_OPTIONS)


def prompt(message: str) -> Optional[str]:
    """Reads one line, or returns None when input is exhausted."""
    try:
        return input(message)
    except EOFError:
        print()
        return None


def print_menu() -> None:
    """Prints the numbered menu options."""
    print("\nSelect an option:")
    for number, label in enumerate(MENU_OPTIONS, start=1):
        print(f"{number}. {label}")


def print_ethiopian_result(
    service: CalendarService,
    gregorian: GregorianDate,
    ethiopian: EthiopianDate
) -> None:
    """Prints a conversion with the holiday, if any, on the Ethiopian date."""
    print(f"Gregorian Date: {gregorian}")
    print(f"Ethiopian Date: {ethiopian}")
    holiday = service.holiday_name(*ethiopian.as_tuple())
    if holiday:
        print(f"Holiday: {holiday}")


def gregorian_to_ethiopian(
    service: CalendarService,
    year: int,
    month: int,
    day: int
) -> Union[EthiopianDate, InvalidDate]:
    """Converts and prints a Gregorian date; returns the result."""
    result = service.convert_gregorian_to_ethiopian(year, month, day)
    if isinstance(result, InvalidDate):
        print(str(result))
        return result
    print_ethiopian_result(service, GregorianDate(year, month, day), result)
    return result


def ethiopian_to_gregorian(
    service: CalendarService,
    year: int,
    month: int,
    day: int
) -> Union[GregorianDate, InvalidDate]:
    """Converts and prints an Ethiopian date; returns the result."""
    result = service.convert_ethiopian_to_gregorian(year, month, day)
    if isinstance(result, InvalidDate):
        print(str(result))
        return result
    ethiopian = EthiopianDate(year, month, day)
    print(f"Ethiopian Date: {ethiopian}")
    print(f"Gregorian Date: {result}")
    holiday = service.holiday_name(year, month, day)
    if holiday:
        print(f"Holiday: {holiday}")
    return result


def ask_year(service: CalendarService, message: str, calendar: str) -> Optional[int]:
    """Prompts until a valid year is entered; None on end of input."""
    while True:
        text = prompt(message)
        if text is None:
            return None
        year, error = service.validator.parse_year(text, calendar)
        if error is None:
            return year
        print(str(error))


def ask_and_convert(
    service: CalendarService,
    message: str,
    calendar: str,
    convert: Callable[[CalendarService, int, int, int], object]
) -> None:
    """Prompts for "YYYY MM DD" until a date converts successfully."""
    while True:
        text = prompt(message)
        if text is None:
            return
        fields, error = service.validator.parse_date_triple(text, calendar)
        if error is not None:
            print(str(error))
            continue
        if not isinstance(convert(service, *fields), InvalidDate):
            return


def export_workbook(
    workbook: CalendarWorkbook,
    year: int,
    output_path: Path
) -> Path:
    """Writes the year's workbook and reports where it went."""
    path = workbook.generate_workbook(year, output_path)
    print(f"  Workbook saved: {path}")
    return path


def run_menu(
    service: CalendarService,
    renderer: CalendarRenderer,
    workbook: CalendarWorkbook,
    xlsx_dir: Optional[Path] = None
) -> int:
    """
    Runs the interactive menu until the exit option or end of input.

    Args:
        service: Calendar service.
        renderer: Grid renderer.
        workbook: Workbook exporter, used when xlsx_dir is given.
        xlsx_dir: Directory receiving a workbook for every Ethiopian
                  calendar displayed.

    Returns:
        Exit code 0.
    """
    print("===== Calendar System =====")
    while True:
        print_menu()
        text = prompt("Enter choice: ")
        if text is None:
            return 0

        choice = text.strip()
        if choice == "1":
            year = ask_year(service, "Enter Ethiopian year: ", ETHIOPIAN)
            if year is not None:
                print()
                print(renderer.render_ethiopian_year(year))
                if xlsx_dir is not None:
                    export_workbook(
                        workbook, year,
                        xlsx_dir / workbook.generate_filename(year)
                    )
        elif choice == "2":
            ask_and_convert(
                service, "Enter Gregorian date (YYYY MM DD): ",
                GREGORIAN, gregorian_to_ethiopian
            )
        elif choice == "3":
            ask_and_convert(
                service, "Enter Ethiopian date (YYYY MM DD): ",
                ETHIOPIAN, ethiopian_to_gregorian
            )
        elif choice == "4":
            year = ask_year(service, "Enter Gregorian year: ", GREGORIAN)
            if year is not None:
                print()
                print(renderer.render_gregorian_year(year))
        elif choice == str(EXIT_CHOICE):
            logger.debug("Exit selected")
            return 0
        else:
            print(f"Invalid choice '{choice}'. Enter a number from 1 to {EXIT_CHOICE}.")


def build_parser() -> argparse.ArgumentParser:
    """Builds the argument parser with its subcommands."""
    parser = argparse.ArgumentParser(
        prog="ethiocal",
        description="Ethiopian and Gregorian calendar system"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug messages to stderr"
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log messages to this rotating file"
    )
    parser.add_argument(
        "--xlsx-dir",
        type=Path,
        default=None,
        help="Interactive mode: save a workbook for each Ethiopian calendar shown"
    )

    subparsers = parser.add_subparsers(dest="command")

    ethiopian = subparsers.add_parser(
        "ethiopian-calendar", help="Display the 13 months of an Ethiopian year"
    )
    ethiopian.add_argument("year", type=int)
    ethiopian.add_argument(
        "--xlsx",
        type=Path,
        default=None,
        help="Also export the year to this .xlsx file"
    )

    gregorian = subparsers.add_parser(
        "gregorian-calendar", help="Display the 12 months of a Gregorian year"
    )
    gregorian.add_argument("year", type=int)

    for name, help_text in (
        ("to-ethiopian", "Convert a Gregorian date to Ethiopian"),
        ("to-gregorian", "Convert an Ethiopian date to Gregorian"),
    ):
        convert = subparsers.add_parser(name, help=help_text)
        convert.add_argument("year", type=int)
        convert.add_argument("month", type=int)
        convert.add_argument("day", type=int)

    return parser


def run_command(
    args: argparse.Namespace,
    service: CalendarService,
    renderer: CalendarRenderer,
    workbook: CalendarWorkbook
) -> int:
    """
    Runs a one-shot subcommand.

    Returns:
        Exit code (0 for success, 1 for invalid input).
    """
    if args.command in ("ethiopian-calendar", "gregorian-calendar"):
        calendar = ETHIOPIAN if args.command == "ethiopian-calendar" else GREGORIAN
        year, error = service.validator.parse_year(str(args.year), calendar)
        if error is not None:
            print(str(error))
            return 1
        if calendar == ETHIOPIAN:
            print(renderer.render_ethiopian_year(year))
            if args.xlsx is not None:
                export_workbook(workbook, year, args.xlsx)
        else:
            print(renderer.render_gregorian_year(year))
        return 0

    fields: Tuple[int, int, int] = (args.year, args.month, args.day)
    if args.command == "to-ethiopian":
        result = gregorian_to_ethiopian(service, *fields)
    else:
        result = ethiopian_to_gregorian(service, *fields)
    return 1 if isinstance(result, InvalidDate) else 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Args:
        argv: Command-line arguments. Defaults to sys.argv[1:].

    Returns:
        Exit code.
    """
    args = build_parser().parse_args(argv)

    setup_logging(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        log_file=args.log_file,
        file_level=logging.DEBUG if args.log_file else None,
    )

    service = CalendarService()
    renderer = CalendarRenderer(service)
    workbook = CalendarWorkbook(service)

    if args.command is None:
        return run_menu(service, renderer, workbook, args.xlsx_dir)
    return run_command(args, service, renderer, workbook)
