"""Tests for the root tzc CLI surface."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from tzc import __version__
from tzc.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "TIMESTAMP" in result.output
    assert "end in 'Z'" in result.output or "ending in 'Z'" in result.output


def test_short_help_flag(cli_runner: CliRunner) -> None:
    assert cli_runner.invoke(cli, ["-h"]).exit_code == 0


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output
    assert "tzc" in result.output


def test_examples(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--examples"])
    assert result.exit_code == 0
    assert "Examples for" in result.output
    assert "tzc 2025-04-01T15:30:00Z IST" in result.output


def test_too_many_arguments(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["2025-04-01T15:30:00Z", "IST", "extra"])
    assert result.exit_code == 2


# --- Global flags ---


@pytest.mark.parametrize(
    "flag", ["--json", "-q", "--quiet", "-v", "--verbose", "--log-json", "--no-interact"]
)
def test_flag_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


def test_config_option_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "/nonexistent/tzc.toml", "2025-04-01T15:30:00Z", "UTC"])
    assert result.exit_code == 0


def test_explicit_config_file(cli_runner: CliRunner, tmp_path: Path) -> None:
    config = tmp_path / "other.toml"
    config.write_text('[zones.defaults]\nONLY = "UTC"\n')
    result = cli_runner.invoke(cli, ["-c", str(config), "-q", "2025-04-01T15:30:00Z", "default"])
    assert result.exit_code == 0
    assert result.stdout == "2025-04-01 15:30:00 UTC\n"


def test_invalid_config_file(cli_runner: CliRunner, tmp_path: Path) -> None:
    (tmp_path / "tzc.toml").write_text("[zones\n")
    result = cli_runner.invoke(cli, ["2025-04-01T15:30:00Z", "UTC"])
    assert result.exit_code == 1
    assert "Invalid TOML" in result.stderr


def test_verbose_error_detail(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-v", "2025-04-01T15:30:00Z", "Nowhere/Zone"])
    assert result.exit_code == 1
    assert "UNRECOGNIZED_ZONE" in result.stderr


@pytest.mark.parametrize(
    "content",
    ["[zones]\ndefaults = {}\n", "[prompt]\ncolumns = 0\n", '[zones.defaults]\nX = 5\n'],
)
def test_invalid_config_value(cli_runner: CliRunner, tmp_path: Path, content: str) -> None:
    (tmp_path / "tzc.toml").write_text(content)
    for args in ([], ["2025-04-01T15:30:00Z", "UTC"]):
        result = cli_runner.invoke(cli, args)
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert result.stdout == ""
        assert "Invalid configuration" in result.stderr
        assert "Traceback" not in result.stderr


def test_invalid_env_value(cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TZC_PROMPT__COLUMNS", "abc")
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Invalid configuration: prompt.columns" in result.stderr


def test_examples_ignore_broken_config(cli_runner: CliRunner, tmp_path: Path) -> None:
    (tmp_path / "tzc.toml").write_text("[zones\n")
    result = cli_runner.invoke(cli, ["--examples"])
    assert result.exit_code == 0
    assert "tzc --list-zones" in result.output
