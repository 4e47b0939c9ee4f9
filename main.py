"""
Ethiocal - Main Entry Point.

Ethiopian and Gregorian calendar system: display calendars for either
calendar, convert dates between them and list Ethiopian holidays.

Usage:
    python main.py [--xlsx-dir <dir>]
    python main.py <command> [args]

Example:
    python main.py ethiopian-calendar 2016 --xlsx reports/calendar_2016.xlsx
    python main.py to-ethiopian 2023 9 12
"""

import sys

from ethiocal.cli import main


if __name__ == "__main__":
    sys.exit(main())
