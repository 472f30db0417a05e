"""Tests for CLI commands."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from calcula.cli import app
from calcula.cli.utils import format_number


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture
def isolated_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run commands in an empty directory so no calcula.toml is picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_format_number():
    assert format_number(14.0) == "14.000000"
    assert format_number(1 / 3, 2) == "0.33"
    assert format_number(float("inf")) == "inf"
    assert format_number(float("-inf")) == "-inf"
    assert format_number(float("nan")) == "nan"


def test_eval_command(cli_runner: CliRunner, isolated_dir: Path):
    result = cli_runner.invoke(app, ["eval", "2+3*4"])
    assert result.exit_code == 0
    assert "result of equation '2+3*4' = 14.000000" in result.output


def test_eval_failure_prints_sentinel(cli_runner: CliRunner, isolated_dir: Path):
    result = cli_runner.invoke(app, ["eval", "(2+3"])
    assert result.exit_code == 0
    assert "= inf" in result.output


def test_eval_strict_reports_error(cli_runner: CliRunner, isolated_dir: Path):
    result = cli_runner.invoke(app, ["eval", "--strict", "(2+3"])
    assert result.exit_code == 1
    assert "Expected ')'" in result.output


def test_eval_precision(cli_runner: CliRunner, isolated_dir: Path):
    result = cli_runner.invoke(app, ["eval", "-p", "2", "1/3"])
    assert result.exit_code == 0
    assert "= 0.33" in result.output


def test_eval_nan(cli_runner: CliRunner, isolated_dir: Path):
    result = cli_runner.invoke(app, ["eval", "log -1"])
    assert result.exit_code == 0
    assert "= nan" in result.output


def test_eval_with_config_file(cli_runner: CliRunner, tmp_path: Path):
    config = tmp_path / "custom.toml"
    config.write_text("[calcula]\nprecision = 1\nstrict = true\n")
    result = cli_runner.invoke(app, ["eval", "--config", str(config), "pi"])
    assert result.exit_code == 0
    assert "= 3.1" in result.output

    result = cli_runner.invoke(app, ["eval", "--config", str(config), "foo"])
    assert result.exit_code == 1
    assert "Unknown name 'foo'" in result.output


def test_eval_bad_config(cli_runner: CliRunner, tmp_path: Path):
    config = tmp_path / "bad.toml"
    config.write_text("[calcula]\nprecision = -3\n")
    result = cli_runner.invoke(app, ["eval", "--config", str(config), "1"])
    assert result.exit_code == 1
    assert "precision must be >= 0" in result.output


def test_repl_session(cli_runner: CliRunner, isolated_dir: Path):
    result = cli_runner.invoke(app, ["repl"], input="2+3\n(1\nquit\n1+1\n")
    assert result.exit_code == 0
    assert "please enter an equation or 'q' to quit." in result.output
    assert "result of equation '2+3' = 5.000000" in result.output
    assert "result of equation '(1' = inf" in result.output
    assert "calculator program exiting." in result.output
    assert "'1+1'" not in result.output


def test_repl_end_of_input(cli_runner: CliRunner, isolated_dir: Path):
    result = cli_runner.invoke(app, ["repl"], input="[2]^3\n")
    assert result.exit_code == 0
    assert "= 8.000000" in result.output
    assert "end of input, exiting." in result.output


def test_repl_rejects_long_lines(cli_runner: CliRunner, isolated_dir: Path):
    (isolated_dir / "calcula.toml").write_text("[calcula]\nmax_line_length = 5\n")
    result = cli_runner.invoke(app, ["repl"], input="1+1+1+1\n1+1\nQ\n")
    assert result.exit_code == 0
    assert "longer than 5 characters" in result.output
    assert "result of equation '1+1' = 2.000000" in result.output


def test_repl_strict(cli_runner: CliRunner, isolated_dir: Path):
    result = cli_runner.invoke(app, ["repl", "--strict"], input="2 $\nq\n")
    assert result.exit_code == 0
    assert "Unexpected character" in result.output
    assert "= inf" not in result.output


def test_tokens_command(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["tokens", "sin(2.5)"])
    assert result.exit_code == 0
    assert "Name" in result.output
    assert "sin" in result.output
    assert "2.5" in result.output


def test_tokens_command_lexical_error(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["tokens", "1 + 1.2.3"])
    assert result.exit_code == 1
    assert "Lexical error" in result.output


def test_ast_command(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["ast", "2^3^2"])
    assert result.exit_code == 0
    assert "((2.0 ^ 3.0) ^ 2.0)" in result.output


def test_ast_command_json(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["ast", "--json", "pi"])
    assert result.exit_code == 0
    assert '"name": "pi"' in result.output


def test_ast_command_error(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["ast", "[1"])
    assert result.exit_code == 1
    assert "Expected ']'" in result.output


def test_ast_command_deep_nesting(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["ast", "(" * 5000 + "1" + ")" * 5000])
    assert result.exit_code == 1
    assert not isinstance(result.exception, RecursionError)
    assert "Expression is nested too deeply" in result.output


def test_unknown_log_level(cli_runner: CliRunner, isolated_dir: Path):
    result = cli_runner.invoke(app, ["--log-level", "LOUD", "eval", "1+1"])
    assert result.exit_code == 1
    assert not isinstance(result.exception, ValueError)
    assert "Unknown log level 'LOUD'" in result.output


def test_log_level_is_case_insensitive(cli_runner: CliRunner, isolated_dir: Path):
    result = cli_runner.invoke(app, ["--log-level", "debug", "eval", "1+1"])
    assert result.exit_code == 0
    assert "= 2.000000" in result.output


def test_functions_command(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["functions"])
    assert result.exit_code == 0
    assert "arcsin" in result.output
    assert "myfunchere" in result.output
    assert "constant" in result.output


def test_version(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "calcula version" in result.output
