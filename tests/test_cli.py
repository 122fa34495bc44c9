"""Tests for CLI module."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

import spliminal.cli as cli_module
import spliminal.config as cfg_module
from spliminal.cli import app

runner = CliRunner()


@pytest.fixture
def isolated(tmp_path, monkeypatch):
    config_file = tmp_path / "config.toml"
    monkeypatch.setattr(cfg_module, "CONFIG_FILE", config_file)
    monkeypatch.setattr(cfg_module, "CONFIG_DIR", tmp_path)
    monkeypatch.setattr(cli_module, "CONFIG_FILE", config_file)
    monkeypatch.setenv("SPLIMINAL_LOG_FILE", str(tmp_path / "spliminal.log"))
    return tmp_path


class TestCli:
    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "spliminal v" in result.output

    def test_no_arguments_starts_ui(self, isolated):
        with patch("spliminal.cli.setup_logging") as setup, patch("spliminal.cli.SpliminalApp") as app_cls:
            result = runner.invoke(app, [])
        assert result.exit_code == 0
        setup.assert_called_once()
        app_cls.return_value.run.assert_called_once_with()

    def test_subcommand_does_not_start_ui(self, isolated):
        with patch("spliminal.cli.SpliminalApp") as app_cls:
            runner.invoke(app, ["version"])
        app_cls.assert_not_called()

    def test_config_shows_defaults(self, isolated):
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 0
        assert "shell.executable" in result.output
        assert "defaults" in result.output

    def test_config_set_value(self, isolated):
        result = runner.invoke(app, ["config", "shell.timeout", "12"])
        assert result.exit_code == 0
        assert cfg_module.load_config().shell.timeout == 12

    def test_config_set_bool(self, isolated):
        result = runner.invoke(app, ["config", "shell.block_interactive", "true"])
        assert result.exit_code == 0
        assert cfg_module.load_config().shell.block_interactive is True

    def test_config_bad_int(self, isolated):
        result = runner.invoke(app, ["config", "shell.timeout", "soon"])
        assert result.exit_code == 1

    def test_config_unknown_section(self, isolated):
        result = runner.invoke(app, ["config", "bot.token", "x"])
        assert result.exit_code == 1

    def test_config_missing_value(self, isolated):
        result = runner.invoke(app, ["config", "ui.title"])
        assert result.exit_code == 1

    def test_logs_no_file(self, isolated):
        result = runner.invoke(app, ["logs"])
        assert result.exit_code == 0
        assert "no log" in result.output.lower()

    def test_logs_tail(self, isolated):
        (isolated / "spliminal.log").write_text("one\ntwo\nthree\n")
        result = runner.invoke(app, ["logs", "-n", "2"])
        assert result.exit_code == 0
        assert "one" not in result.output
        assert "two" in result.output
        assert "three" in result.output
