"""Tests for the command line entry point."""

import csv
import pytest

from staff_roster.main import main


def write_config(tmp_path, name: str, body: str):
    path = tmp_path / name
    path.write_text(body)
    return str(path)


class TestMain:
    """End-to-end CLI runs."""

    def test_generates_and_exports(self, tmp_path, capsys):
        config = write_config(
            tmp_path, "roster.yaml", "roster:\n  name: June\n  start_date: 2024-06-03\n  weeks: 2\n"
        )
        csv_path = tmp_path / "out.csv"
        xlsx_path = tmp_path / "out.xlsx"

        with pytest.raises(SystemExit) as exc_info:
            main([config, "--export-csv", str(csv_path), "--export-xlsx", str(xlsx_path)])

        assert exc_info.value.code == 0
        assert "ROSTER: June" in capsys.readouterr().out
        with open(csv_path) as f:
            assert len(list(csv.reader(f))) == 19
        assert xlsx_path.exists()

    def test_compare(self, tmp_path, capsys):
        first = write_config(tmp_path, "a.yaml", "roster:\n  start_date: 2024-06-03\n  weeks: 5\n")
        second = write_config(tmp_path, "b.yaml", "roster:\n  start_date: 2024-07-01\n  weeks: 1\n")

        with pytest.raises(SystemExit) as exc_info:
            main([first, "--compare", second, "--quiet"])

        assert exc_info.value.code == 0
        assert "COMPARISON" in capsys.readouterr().out

    def test_missing_file_exits_with_error(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path / "missing.yaml")])

        assert exc_info.value.code == 1
        assert "Error" in capsys.readouterr().err

    def test_bad_date_exits_with_tip(self, tmp_path, capsys):
        config = write_config(tmp_path, "bad.yaml", "roster:\n  start_date: June\n")

        with pytest.raises(SystemExit) as exc_info:
            main([config])

        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert "Date Format Error" in err
        assert "YYYY-MM-DD" in err
