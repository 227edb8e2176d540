"""Tests for ``pdbflags check``.

Verifies:
    - Exit code 1 when a listed warning is explicitly disabled, 0 otherwise.
    - Warnings taken from --warning or from the config's watch_warnings.
    - Exit code 2 when there is nothing to check.
"""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from pdbflags.cli.main import cli


class TestCheckExitCodes:
    """Exit code reflects whether any listed warning is disabled."""

    def test_disabled_warning_exits_1(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["check", "cl.exe /W1 /wd4265", "-w", "4265"])
        assert result.exit_code == 1
        assert "DISABLED" in result.output

    def test_enabled_warning_exits_0(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["check", "cl.exe /W1 /wd4265 /w14265 /wo4265", "-w", "4265"]
        )
        assert result.exit_code == 0
        assert "not disabled" in result.output

    def test_level_directive_above_global_level(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["check", "cl.exe /w34996 /W2", "--warning", "4996"])
        assert result.exit_code == 1


class TestCheckJson:
    """JSON report."""

    def test_report(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            ["check", "cl.exe /W3 /wd4996", "-w", "4996", "-w", "4100", "--format", "json"],
        )
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["command_line"] == "cl.exe /W3 /wd4996"
        assert data["warning_level"] == 3
        assert data["warnings"] == [
            {"warning": 4996, "explicitly_disabled": True},
            {"warning": 4100, "explicitly_disabled": False},
        ]

    def test_duplicate_warnings_reported_once(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["check", "cl.exe /W3", "-w", "4996", "-w", "4996", "--format", "json"]
        )
        assert result.exit_code == 0
        assert len(json.loads(result.output)["warnings"]) == 1


class TestCheckConfig:
    """watch_warnings from the config file."""

    def test_watch_warnings_used(self, runner: CliRunner, json_config: Path) -> None:
        result = runner.invoke(cli, ["check", "cl.exe /W4 /wd4265"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert [w["warning"] for w in data["warnings"]] == [4996, 4265]

    def test_cli_warnings_override_config(
        self, runner: CliRunner, json_config: Path
    ) -> None:
        result = runner.invoke(cli, ["check", "cl.exe /W4 /wd4265", "-w", "4100"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [w["warning"] for w in data["warnings"]] == [4100]

    def test_explicit_config_path(self, runner: CliRunner, work_dir: Path) -> None:
        config = work_dir / "other.yaml"
        config.write_text("watch_warnings: [4100]\n")
        result = runner.invoke(
            cli, ["check", "cl.exe /wd4100", "--config", str(config)]
        )
        assert result.exit_code == 1


class TestCheckErrors:
    """Error paths exit with code 2."""

    def test_nothing_to_check(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["check", "cl.exe /W4"])
        assert result.exit_code == 2
        assert "no warnings to check" in result.output

    def test_missing_command_line(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["check"])
        assert result.exit_code == 2

    def test_nonexistent_config(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["check", "cl.exe", "-w", "1", "--config", "/nonexistent/x.yaml"]
        )
        assert result.exit_code == 2
