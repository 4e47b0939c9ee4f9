"""
Ethiocal - Command Line Tests.

Tests for the one-shot subcommands and the interactive menu, driven
through main() with captured stdout.
"""

import io
import sys
from pathlib import Path

import pytest
from openpyxl import load_workbook

from ethiocal import cli


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    """Keeps main() from reconfiguring the root logger during tests."""
    monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: None)


def feed(monkeypatch, text: str) -> None:
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))


class TestSubcommands:
    """Tests for the one-shot subcommands."""

    def test_to_ethiopian(self, capsys) -> None:
        assert cli.main(["to-ethiopian", "2024", "12", "25"]) == 0
        out = capsys.readouterr().out
        assert "Gregorian Date: 2024-12-25" in out
        assert "Ethiopian Date: 2017-4-16" in out
        assert "Holiday:" not in out

    def test_to_ethiopian_reports_holiday(self, capsys) -> None:
        assert cli.main(["to-ethiopian", "2023", "9", "12"]) == 0
        out = capsys.readouterr().out
        assert "Ethiopian Date: 2016-1-1" in out
        assert "Holiday: Enkutatash (New Year)" in out

    def test_to_gregorian(self, capsys) -> None:
        assert cli.main(["to-gregorian", "2016", "1", "17"]) == 0
        out = capsys.readouterr().out
        assert "Gregorian Date: 2023-9-28" in out
        assert "Holiday: Meskel" in out

    def test_invalid_date_exits_with_one(self, capsys) -> None:
        assert cli.main(["to-gregorian", "2016", "13", "7"]) == 1
        out = capsys.readouterr().out
        assert "Invalid Ethiopian date: 'day' - Pagume 2016 has 5 days" in out

    def test_invalid_gregorian_date(self, capsys) -> None:
        assert cli.main(["to-ethiopian", "2023", "2", "30"]) == 1
        assert "Invalid Gregorian date" in capsys.readouterr().out

    def test_ethiopian_calendar(self, capsys) -> None:
        assert cli.main(["ethiopian-calendar", "2016"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("Year: 2016\n")
        assert "Pagume 2016" in out

    def test_ethiopian_calendar_rejects_year_zero(self, capsys) -> None:
        assert cli.main(["ethiopian-calendar", "0"]) == 1
        assert "Invalid Ethiopian date: 'year'" in capsys.readouterr().out

    def test_gregorian_calendar(self, capsys) -> None:
        assert cli.main(["gregorian-calendar", "2024"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("Gregorian Calendar for 2024\n")
        assert "  December 2024" in out

    def test_ethiopian_calendar_xlsx(self, capsys, tmp_path: Path) -> None:
        """Verify --xlsx writes the workbook alongside the text output."""
        output = tmp_path / "calendar.xlsx"
        assert cli.main(["ethiopian-calendar", "2016", "--xlsx", str(output)]) == 0
        assert f"Workbook saved: {output}" in capsys.readouterr().out
        assert load_workbook(output).sheetnames[0] == "Year Summary"

    def test_version(self, capsys) -> None:
        with pytest.raises(SystemExit) as excinfo:
            cli.main(["--version"])
        assert excinfo.value.code == 0
        assert "ethiocal" in capsys.readouterr().out


class TestInteractiveMenu:
    """Tests for the interactive menu."""

    def test_exit_option(self, monkeypatch, capsys) -> None:
        feed(monkeypatch, "5\n")
        assert cli.main([]) == 0
        out = capsys.readouterr().out
        assert "===== Calendar System =====" in out
        assert "1. Display Ethiopian Calendar" in out
        assert "5. Exit" in out

    def test_end_of_input_exits_cleanly(self, monkeypatch) -> None:
        feed(monkeypatch, "")
        assert cli.main([]) == 0

    def test_invalid_choice(self, monkeypatch, capsys) -> None:
        feed(monkeypatch, "9\nabc\n5\n")
        assert cli.main([]) == 0
        out = capsys.readouterr().out
        assert "Invalid choice '9'. Enter a number from 1 to 5." in out
        assert "Invalid choice 'abc'." in out

    def test_display_ethiopian_calendar(self, monkeypatch, capsys) -> None:
        feed(monkeypatch, "1\n2016\n5\n")
        assert cli.main([]) == 0
        out = capsys.readouterr().out
        assert "Amete Alem: 7516" in out
        assert "Meskerem 2016" in out

    def test_year_reprompted_until_valid(self, monkeypatch, capsys) -> None:
        feed(monkeypatch, "4\nnext year\n0\n2024\n5\n")
        assert cli.main([]) == 0
        out = capsys.readouterr().out
        assert out.count("Invalid Gregorian date: 'year'") == 2
        assert "Gregorian Calendar for 2024" in out

    def test_gregorian_to_ethiopian_conversion(self, monkeypatch, capsys) -> None:
        feed(monkeypatch, "2\n2023 9 11\n5\n")
        assert cli.main([]) == 0
        assert "Ethiopian Date: 2015-13-6" in capsys.readouterr().out

    def test_conversion_reprompts_after_bad_input(self, monkeypatch, capsys) -> None:
        """Verify malformed and invalid dates are reported and asked again."""
        feed(monkeypatch, "3\n2016-1-1\n2016 13 6\n2016 1 1\n5\n")
        assert cli.main([]) == 0
        out = capsys.readouterr().out
        assert "enter three numbers separated by spaces" in out
        assert "Pagume 2016 has 5 days" in out
        assert "Gregorian Date: 2023-9-12" in out

    def test_conversion_end_of_input(self, monkeypatch) -> None:
        feed(monkeypatch, "2\n")
        assert cli.main([]) == 0

    def test_xlsx_dir_exports_displayed_year(self, monkeypatch, capsys, tmp_path: Path) -> None:
        feed(monkeypatch, "1\n2016\n5\n")
        assert cli.main(["--xlsx-dir", str(tmp_path)]) == 0
        assert (tmp_path / "ethiopian_calendar_2016.xlsx").exists()
        assert "Workbook saved:" in capsys.readouterr().out

    def test_oversized_year_reprompts(self, monkeypatch, capsys) -> None:
        """Verify a year too long to parse is reported, not raised."""
        feed(monkeypatch, "4\n" + "9" * 5000 + "\n2024\n5\n")
        assert cli.main([]) == 0
        out = capsys.readouterr().out
        assert "Invalid Gregorian date: 'year' - number is too large" in out
        assert "Gregorian Calendar for 2024" in out
