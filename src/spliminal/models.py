"""Data models for spliminal."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ExecutionResult:
    """Result from one shell command execution."""

    command: str = ""
    stdout: str = ""
    stderr: str = ""
    exit_code: int = 0
    execution_time_ms: int = 0
    blocked: bool = False
    reason: str = ""
    spawn_error: str = ""
    timed_out: bool = False
