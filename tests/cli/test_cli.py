"""
Tests for the ixset command line.
Commands run in-process through click's CliRunner.
"""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from ixset_cli.cli import cli
from ixset_cli.config import CliConfig
from ixset_core import Scheme, constants

BASE = "https://test.imgix.net/image.png"


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def test_url_command(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["url", "test.imgix.net", "image.png", "-p", "w=320", "-p", "fit=crop"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == f"{BASE}?w=320&fit=crop"


def test_url_command_scheme_and_lib(runner: CliRunner) -> None:
    result = runner.invoke(
        cli, ["url", "test.imgix.net", "image.png", "--scheme", "http", "--lib", "ixlib=custom-1.0"]
    )
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "http://test.imgix.net/image.png?ixlib=custom-1.0"


def test_url_command_ix(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["url", "test.imgix.net", "image.png", "--ix"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == f"{BASE}?{constants.ixlib()}"


def test_url_command_env_defaults(runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("IXSET_SCHEME", "http")
    monkeypatch.setenv("IXSET_IX", "true")
    result = runner.invoke(cli, ["url", "test.imgix.net", "image.png"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == f"http://test.imgix.net/image.png?{constants.ixlib()}"


def test_url_command_rejects_empty_value(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["url", "test.imgix.net", "image.png", "-p", "w="])
    assert result.exit_code == 1
    assert "ParamError: value cannot be empty" in result.output


def test_url_command_rejects_malformed_param(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["url", "test.imgix.net", "image.png", "-p", "w320"])
    assert result.exit_code == 2
    assert "expected key=value" in result.output


def test_srcset_command_variable_quality(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["srcset", "test.imgix.net", "image.png", "-p", "w=640"])
    assert result.exit_code == 0, result.output
    lines = result.output.rstrip("\n").split("\n")
    assert lines[0] == f"{BASE}?w=640&q=75&dpr=1 1x,"
    assert lines[-1] == f"{BASE}?w=640&q=20&dpr=5 5x"


def test_srcset_command_custom_lists(runner: CliRunner) -> None:
    result = runner.invoke(
        cli,
        ["srcset", "test.imgix.net", "image.png", "-p", "w=640",
         "--ratios", "1,2,3,4,5", "--qualities", "100,90,80,70,60"],
    )
    assert result.exit_code == 0, result.output
    assert "q=100&dpr=1 1x" in result.output
    assert "q=60&dpr=5 5x" in result.output


def test_srcset_command_no_variable_quality(runner: CliRunner) -> None:
    result = runner.invoke(
        cli, ["srcset", "test.imgix.net", "image.png", "-p", "w=640", "--no-variable-quality"]
    )
    assert result.exit_code == 0, result.output
    assert "q=" not in result.output
    assert result.output.splitlines()[1] == f"{BASE}?w=640&dpr=2 2x,"


def test_srcset_command_targets(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["srcset", "test.imgix.net", "image.png", "--targets", "1024,512"])
    assert result.exit_code == 0, result.output
    assert result.output == f"{BASE}?w=1024 1024w,\n{BASE}?w=512 512w\n"


def test_srcset_command_wrong_ratio_count(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["srcset", "test.imgix.net", "image.png", "--ratios", "1,2"])
    assert result.exit_code == 1
    assert "ParamError" in result.output


def test_srcset_command_bad_int_list(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["srcset", "test.imgix.net", "image.png", "--targets", "a,b"])
    assert result.exit_code == 2


def test_widths_command(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["widths"])
    assert result.exit_code == 0, result.output
    assert [int(w) for w in result.output.split()] == list(constants.SRCSET_TARGET_WIDTHS)


def test_widths_command_rejects_bad_range(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["widths", "--min-width", "900", "--max-width", "100"])
    assert result.exit_code == 2


def test_version_command(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["version"])
    assert result.exit_code == 0
    assert result.output.strip() == constants.lib_version()


def test_unknown_scheme_is_a_usage_error(runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("IXSET_SCHEME", "ftp")
    result = runner.invoke(cli, ["version"])
    assert result.exit_code == 2
    assert "IXSET_SCHEME must be http or https, got 'ftp'" in result.output

def test_cli_config_load(monkeypatch: pytest.MonkeyPatch) -> None:
    assert CliConfig.load() == CliConfig()
    monkeypatch.setenv("IXSET_SCHEME", "HTTP")
    monkeypatch.setenv("IXSET_IX", "1")
    assert CliConfig.load() == CliConfig(scheme=Scheme.HTTP, ix=True)
