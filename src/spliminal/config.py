"""Configuration management using TOML + environment variables."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import tomli_w

CONFIG_DIR = Path.home() / ".spliminal"
CONFIG_FILE = CONFIG_DIR / "config.toml"

_TRUE_VALUES = ("true", "1", "yes")


@dataclass
class ShellConfig:
    executable: str = "sh"
    timeout: int = 0
    block_interactive: bool = False


@dataclass
class UIConfig:
    title: str = "Spliminal"


@dataclass
class LoggingConfig:
    level: str = "WARNING"
    file: str = "~/.spliminal/spliminal.log"


@dataclass
class AppConfig:
    shell: ShellConfig = field(default_factory=ShellConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def sections(self) -> dict[str, object]:
        return {"shell": self.shell, "ui": self.ui, "logging": self.logging}


def ensure_config_dir() -> None:
    """Create config directory with secure permissions."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    os.chmod(CONFIG_DIR, 0o700)


def load_config() -> AppConfig:
    """Load configuration from TOML file with env var overrides."""
    config = AppConfig()

    if CONFIG_FILE.exists():
        with open(CONFIG_FILE, "rb") as f:
            data = tomllib.load(f)

        shell = data.get("shell", {})
        config.shell.executable = shell.get("executable", config.shell.executable)
        config.shell.timeout = shell.get("timeout", config.shell.timeout)
        config.shell.block_interactive = shell.get("block_interactive", config.shell.block_interactive)

        ui = data.get("ui", {})
        config.ui.title = ui.get("title", config.ui.title)

        logging_cfg = data.get("logging", {})
        config.logging.level = logging_cfg.get("level", config.logging.level)
        config.logging.file = logging_cfg.get("file", config.logging.file)

    # Environment variable overrides
    if env_shell := os.environ.get("SPLIMINAL_SHELL"):
        config.shell.executable = env_shell
    if env_timeout := os.environ.get("SPLIMINAL_SHELL_TIMEOUT"):
        config.shell.timeout = int(env_timeout)
    if env_block := os.environ.get("SPLIMINAL_BLOCK_INTERACTIVE"):
        config.shell.block_interactive = env_block.lower() in _TRUE_VALUES
    if env_title := os.environ.get("SPLIMINAL_TITLE"):
        config.ui.title = env_title
    if env_log_level := os.environ.get("SPLIMINAL_LOG_LEVEL"):
        config.logging.level = env_log_level
    if env_log_file := os.environ.get("SPLIMINAL_LOG_FILE"):
        config.logging.file = env_log_file

    return config


def save_config(config: AppConfig) -> None:
    """Save configuration to TOML file."""
    ensure_config_dir()

    data = {
        "shell": {
            "executable": config.shell.executable,
            "timeout": config.shell.timeout,
            "block_interactive": config.shell.block_interactive,
        },
        "ui": {
            "title": config.ui.title,
        },
        "logging": {
            "level": config.logging.level,
            "file": config.logging.file,
        },
    }

    with open(CONFIG_FILE, "wb") as f:
        tomli_w.dump(data, f)

    os.chmod(CONFIG_FILE, 0o600)
