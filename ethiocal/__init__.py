"""
Ethiocal - Ethiopian and Gregorian Calendar System.

Converts dates between the Ethiopian and proleptic Gregorian calendars,
renders month and year grids for both, and annotates Ethiopian dates
with the fixed-rule national and religious holidays.

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "Ethiocal Team"
