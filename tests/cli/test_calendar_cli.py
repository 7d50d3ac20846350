"""Tests for the calendar CLI commands."""

from typer.testing import CliRunner

from chronofns.cli import cli

runner = CliRunner()


def test_add_month_rolls_over() -> None:
    result = runner.invoke(cli, ["calendar", "add", "2025-01-31", "1", "month"])

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "2025-03-03T00:00:00.000"


def test_subtract_days() -> None:
    result = runner.invoke(cli, ["calendar", "subtract", "2025-07-09T15:00:00", "3", "day"])

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "2025-07-06T15:00:00.000"


def test_diff_months() -> None:
    result = runner.invoke(cli, ["calendar", "diff", "2025-09-09", "2025-07-09", "month"])

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "2"


def test_add_invalid_unit() -> None:
    result = runner.invoke(cli, ["calendar", "add", "2025-01-31", "1", "fortnight"])

    assert result.exit_code == 1
    assert "Error [INVALID_UNIT]" in result.output
    assert "Unknown unit: fortnight" in result.output


def test_diff_unknown_unit() -> None:
    result = runner.invoke(cli, ["calendar", "diff", "2025-09-09", "2025-07-09", "eon"])

    assert result.exit_code == 1
    assert "UNKNOWN_UNIT" in result.output


def test_invalid_timestamp() -> None:
    result = runner.invoke(cli, ["calendar", "add", "garbage", "1", "day"])

    assert result.exit_code == 1
    assert "INVALID_TIMESTAMP" in result.output


def test_add_out_of_range_year() -> None:
    result = runner.invoke(cli, ["calendar", "add", "2025-01-01", "99999999", "year"])

    assert result.exit_code == 1
    assert "Error [CALENDAR_ERROR]" in result.output
    assert "Result out of range" in result.output


def test_diff_unlocalizable_timestamp() -> None:
    result = runner.invoke(cli, ["calendar", "diff", "0001-01-01T00:00:00+05:00", "2025-07-09", "day"])

    assert result.exit_code == 1
    assert "INVALID_TIMESTAMP" in result.output
