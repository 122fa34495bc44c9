"""Shell command executor service."""

from __future__ import annotations

import asyncio
import logging
import os
import signal
import time

from spliminal.config import AppConfig
from spliminal.models import ExecutionResult
from spliminal.services.guard import interactive_guard

logger = logging.getLogger(__name__)


def _kill_group(proc: asyncio.subprocess.Process) -> None:
    """Kill the shell and everything it started.

    The shell runs as leader of its own process group, so children that
    still hold the output pipes go down with it.
    """
    try:
        os.killpg(proc.pid, signal.SIGKILL)
    except ProcessLookupError:
        pass


class ShellRunner:
    """Run one command through ``<shell> -c`` and capture both streams."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    async def execute(self, command: str) -> ExecutionResult:
        """Execute a shell command.

        A nonzero exit status is not an error: the captured streams are
        returned as-is. Failure to create the process is reported through
        ``spawn_error``. Cancelling the awaiting task kills the process.
        """
        if self.config.shell.block_interactive:
            blocked, reason = interactive_guard.check(command)
            if blocked:
                return ExecutionResult(command=command, exit_code=-1, blocked=True, reason=reason)

        start = time.monotonic()
        try:
            proc = await asyncio.create_subprocess_exec(
                self.config.shell.executable,
                "-c",
                command,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                start_new_session=True,
            )
        except OSError as e:
            logger.warning("Failed to start %r: %s", command, e)
            return ExecutionResult(command=command, exit_code=-1, spawn_error=str(e))

        timeout = self.config.shell.timeout or None
        try:
            stdout_bytes, stderr_bytes = await asyncio.wait_for(proc.communicate(), timeout=timeout)
            exit_code = proc.returncode or 0
        except asyncio.TimeoutError:
            logger.warning("Command timed out after %ss: %s", timeout, command)
            _kill_group(proc)
            await proc.communicate()
            return ExecutionResult(
                command=command,
                exit_code=-1,
                execution_time_ms=int((time.monotonic() - start) * 1000),
                timed_out=True,
                reason=f"timed out after {self.config.shell.timeout}s",
            )
        except asyncio.CancelledError:
            logger.warning("Command cancelled: %s", command)
            _kill_group(proc)
            await proc.wait()
            raise

        elapsed_ms = int((time.monotonic() - start) * 1000)
        logger.info("Command finished in %dms (exit %d): %s", elapsed_ms, exit_code, command)

        return ExecutionResult(
            command=command,
            stdout=stdout_bytes.decode("utf-8", errors="replace"),
            stderr=stderr_bytes.decode("utf-8", errors="replace"),
            exit_code=exit_code,
            execution_time_ms=elapsed_ms,
        )
