"""
Tests for the timesheet command line interface.
"""
import pytest
from click.testing import CliRunner

from timesheet_api import app
from timesheet_api.cli import run_cli

runner = CliRunner()


@pytest.fixture
def db_file(tmp_path, monkeypatch):
    monkeypatch.delenv("TIMESHEET_CONFIG", raising=False)
    monkeypatch.delenv("TIMESHEET_DB_FILE", raising=False)
    yield tmp_path / "cli.db"
    app.db.disconnect()


def invoke(db_file, *args):
    return runner.invoke(run_cli, ["-d", str(db_file), *args])


def test_version():
    result = runner.invoke(run_cli, ["--version"])
    assert result.exit_code == 0
    assert "timesheet" in result.output


def test_initdb(db_file):
    result = invoke(db_file, "initdb")
    assert result.exit_code == 0, result.output
    assert db_file.exists()


def test_add_and_print(db_file):
    result = invoke(db_file, "add", "Alice", "Apollo", "2024-01-05", "--hours", "8", "-n", "kickoff")
    assert result.exit_code == 0, result.output
    assert "Created timesheet entry" in result.output

    result = invoke(db_file, "print")
    assert result.exit_code == 0, result.output
    assert "Alice" in result.output
    assert "kickoff" in result.output


def test_add_invalid_hours(db_file):
    result = invoke(db_file, "add", "Alice", "Apollo", "2024-01-05", "--hours", "30")
    assert result.exit_code == 1
    result = invoke(db_file, "print")
    assert "Alice" not in result.output


def test_edit(db_file):
    invoke(db_file, "add", "Alice", "Apollo", "2024-01-05", "--hours", "8")
    result = invoke(db_file, "edit", "1", "Bob", "Gemini", "2024-01-06", "--hours", "4")
    assert result.exit_code == 0, result.output
    assert "Bob" in result.output

    assert invoke(db_file, "edit", "99", "Bob", "Gemini", "2024-01-06", "--hours", "4").exit_code == 1


def test_rm(db_file):
    invoke(db_file, "add", "Alice", "Apollo", "2024-01-05", "--hours", "8")
    result = invoke(db_file, "rm", "1")
    assert result.exit_code == 0, result.output
    assert invoke(db_file, "rm", "1").exit_code == 1


def test_rm_id_out_of_range(db_file):
    result = invoke(db_file, "rm", "99999999999999999999")
    assert result.exit_code == 2
