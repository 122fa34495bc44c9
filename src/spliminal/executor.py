"""Run a submitted command line and route its result into pane histories."""

from __future__ import annotations

import asyncio
import logging

from spliminal.history import PaneHistory
from spliminal.models import ExecutionResult
from spliminal.services.shell import ShellRunner

logger = logging.getLogger(__name__)

SPAWN_FAILURE_PREFIX = "failed to start: "
BLOCKED_PREFIX = "blocked: "
CANCELLED_PREFIX = "cancelled: "


def route_result(result: ExecutionResult, output: PaneHistory, error: PaneHistory) -> None:
    """Append a result's non-empty streams to the output and error histories.

    Infrastructure failures (blocked, spawn failure, timeout) go to the error
    history with a distinct prefix so they never look like command stderr.
    """
    if result.blocked:
        error.append(BLOCKED_PREFIX + result.reason)
        return
    if result.spawn_error:
        error.append(SPAWN_FAILURE_PREFIX + result.spawn_error)
        return

    if result.stdout:
        output.append(result.stdout)
    if result.stderr:
        error.append(result.stderr)
    if result.timed_out:
        error.append(result.reason)


class CommandExecutor:
    """Stateless bridge between a command line and the shell runner."""

    def __init__(self, runner: ShellRunner) -> None:
        self.runner = runner

    async def execute(
        self,
        raw: str,
        output: PaneHistory,
        error: PaneHistory,
    ) -> ExecutionResult | None:
        """Execute ``raw`` after trimming it.

        Returns None without spawning anything when the trimmed command is
        empty. A cancelled run is recorded in ``error`` before the
        cancellation propagates.
        """
        command = raw.strip()
        if not command:
            return None

        logger.debug("Executing: %s", command)
        try:
            result = await self.runner.execute(command)
        except asyncio.CancelledError:
            error.append(CANCELLED_PREFIX + command)
            raise

        route_result(result, output, error)
        return result
