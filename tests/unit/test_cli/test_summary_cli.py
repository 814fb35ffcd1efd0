#!/usr/bin/env python3
"""
Unit tests for the summary CLI commands.

Invokes the click commands in-process with CliRunner against small snapshots.
"""

import json

import pytest
from click.testing import CliRunner

from frugeasy.cli.main import main
from frugeasy.core.config import get_config


@pytest.fixture
def snapshot_file(temp_dir):
    """February 2026 snapshot with a January baseline."""
    records = [
        {"id": "1", "amount": 20, "type": "expense", "category": "Food", "date": "2026-02-01T00:00:00.000Z", "createdAt": "2026-02-01T00:00:00.000Z"},
        {"id": "2", "amount": 100, "type": "income", "category": "Salary", "date": "2026-02-01T00:00:00.000Z", "createdAt": "2026-02-01T00:00:00.000Z"},
        {"id": "3", "amount": 10, "type": "expense", "category": "Transport", "date": "2026-02-03T00:00:00.000Z", "createdAt": "2026-02-03T00:00:00.000Z"},
        {"id": "4", "amount": 10, "type": "expense", "category": "Food", "date": "2026-01-02T00:00:00.000Z", "createdAt": "2026-01-02T00:00:00.000Z"},
    ]
    path = temp_dir / "transactions.json"
    path.write_text(json.dumps(records))
    return path


def _invoke(*args: str):
    return CliRunner().invoke(main, list(args))


class TestMainCLI:
    """Test top-level commands."""

    def test_version(self):
        """Test version output."""
        result = _invoke("version")
        assert result.exit_code == 0
        assert "Frugeasy v" in result.output

    def test_config(self):
        """Test configuration display."""
        result = _invoke("config")
        assert result.exit_code == 0
        assert "Environment: test" in result.output
        assert "Currency: USD" in result.output


class TestReportCommand:
    """Test summary report."""

    def test_text_report(self, snapshot_file):
        """Test the text report sections."""
        result = _invoke(
            "summary", "report", "--input", str(snapshot_file), "--month", "2026-02", "--now", "2026-02-10T00:00:00Z"
        )

        assert result.exit_code == 0, result.output
        assert "[SUMMARY] February 2026" in result.output
        assert "Income:  $100.00" in result.output
        assert "Net:     $70.00" in result.output
        assert "Day 10 of 28" in result.output
        assert "Weekly Burn: $21.00" in result.output
        assert "Projected Month-End Expense: $84.00" in result.output
        assert "Spending is up 200% vs last month." in result.output

    def test_json_report(self, snapshot_file):
        """Test JSON output parses and carries the month."""
        result = _invoke(
            "summary",
            "report",
            "--input",
            str(snapshot_file),
            "--month",
            "2026-02",
            "--now",
            "2026-02-10T00:00:00Z",
            "--format",
            "json",
        )

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["month"] == "2026-02"
        assert data["totals"] == {"income": 100.0, "expense": 30.0, "net": 70.0}
        assert len(data["daily"]) == 28

    def test_report_saved_to_configured_output_dir(self, snapshot_file):
        """Test --save writes under the configured output directory."""
        result = _invoke(
            "summary",
            "report",
            "--input",
            str(snapshot_file),
            "--month",
            "2026-02",
            "--now",
            "2026-02-10T00:00:00Z",
            "--format",
            "json",
            "--save",
        )

        saved = get_config().output_dir / "report_2026-02.json"
        assert result.exit_code == 0, result.output
        assert "Report saved to" in result.output
        assert json.loads(saved.read_text())["label"] == "February 2026"

    def test_report_output_dir_override(self, snapshot_file, temp_dir):
        """Test --output-dir overrides the destination and saves a text report."""
        output_dir = temp_dir / "out"
        result = _invoke(
            "summary",
            "report",
            "--input",
            str(snapshot_file),
            "--month",
            "2026-02",
            "--now",
            "2026-02-10T00:00:00Z",
            "--output-dir",
            str(output_dir),
        )

        assert result.exit_code == 0, result.output
        assert "[SUMMARY] February 2026" in (output_dir / "report_2026-02.txt").read_text()
        assert "[SUMMARY]" not in result.output

    def test_report_with_budgets(self, snapshot_file, temp_dir):
        """Test budget progress appears in the text report."""
        budgets = temp_dir / "budgets.json"
        budgets.write_text(json.dumps([{"id": "b", "category": "Food", "amount": 15, "monthKey": "2026-02"}]))

        result = _invoke(
            "summary",
            "report",
            "--input",
            str(snapshot_file),
            "--month",
            "2026-02",
            "--now",
            "2026-02-10T00:00:00Z",
            "--budgets",
            str(budgets),
        )

        assert result.exit_code == 0, result.output
        assert "Food: $20.00 of $15.00 (133%) OVER" in result.output

    def test_month_defaults_to_now(self, snapshot_file):
        """Test the month comes from --now when omitted."""
        result = _invoke("summary", "report", "--input", str(snapshot_file), "--now", "2026-01-15T00:00:00Z")

        assert result.exit_code == 0, result.output
        assert "[SUMMARY] January 2026" in result.output

    def test_missing_snapshot(self, temp_dir):
        """Test a missing snapshot fails cleanly."""
        result = _invoke("summary", "report", "--input", str(temp_dir / "missing.json"))

        assert result.exit_code != 0
        assert "not found" in result.output

    @pytest.mark.parametrize(
        "option,value",
        [("--month", "February"), ("--now", "yesterday"), ("--limit", "0")],
    )
    def test_bad_parameters(self, snapshot_file, option, value):
        """Test malformed options are rejected as usage errors."""
        result = _invoke("summary", "report", "--input", str(snapshot_file), option, value)
        assert result.exit_code == 2


class TestNudgesCommand:
    """Test summary nudges."""

    def test_nudges(self, snapshot_file):
        """Test nudges are listed."""
        result = _invoke("summary", "nudges", "--input", str(snapshot_file), "--month", "2026-02")

        assert result.exit_code == 0, result.output
        assert "- Top expense category: Food (20.00)." in result.output

    def test_nothing_to_report(self, snapshot_file):
        """Test an empty month says so."""
        result = _invoke("summary", "nudges", "--input", str(snapshot_file), "--month", "2025-06")

        assert result.exit_code == 0
        assert "Nothing to report for June 2025." in result.output


class TestDailyCommand:
    """Test summary daily."""

    def test_all_days(self, snapshot_file):
        """Test one line per day plus headers."""
        result = _invoke("summary", "daily", "--input", str(snapshot_file), "--month", "2026-02")

        assert result.exit_code == 0, result.output
        assert len(result.output.strip().splitlines()) == 2 + 28

    def test_active_only(self, snapshot_file):
        """Test only days with activity are listed."""
        result = _invoke("summary", "daily", "--input", str(snapshot_file), "--month", "2026-02", "--active-only")

        lines = result.output.strip().splitlines()
        assert result.exit_code == 0, result.output
        assert len(lines) == 2 + 2
        assert lines[2].split() == ["1", "$100.00", "$20.00"]
        assert lines[3].split() == ["3", "$0.00", "$10.00"]
