"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from spliminal.config import AppConfig, LoggingConfig, ShellConfig, UIConfig
from spliminal.executor import CommandExecutor
from spliminal.models import ExecutionResult


@pytest.fixture
def app_config(tmp_path):
    """Create a test configuration."""
    return AppConfig(
        shell=ShellConfig(executable="sh", timeout=5, block_interactive=True),
        ui=UIConfig(title="Spliminal"),
        logging=LoggingConfig(level="DEBUG", file=str(tmp_path / "test.log")),
    )


@pytest.fixture
def fake_runner():
    """A runner whose results are set per test via ``return_value``."""
    runner = AsyncMock()
    runner.execute = AsyncMock(return_value=ExecutionResult())
    return runner


@pytest.fixture
def executor(fake_runner):
    return CommandExecutor(fake_runner)
