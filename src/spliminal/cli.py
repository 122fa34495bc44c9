"""CLI entry point using typer."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from spliminal import __version__
from spliminal.config import (
    CONFIG_FILE,
    AppConfig,
    load_config,
    save_config,
)
from spliminal.ui.app import SpliminalApp

app = typer.Typer(
    name="spliminal",
    help="Split-pane shell front-end: input, output and error side by side.",
    add_completion=False,
)
console = Console()


def setup_logging(config: AppConfig) -> None:
    """Send log records to the log file; the terminal belongs to the UI."""
    log_path = Path(config.logging.file).expanduser().resolve()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=getattr(logging, config.logging.level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.FileHandler(str(log_path))],
    )


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Start the split-pane shell when no subcommand is given."""
    if ctx.invoked_subcommand is not None:
        return

    config = load_config()
    setup_logging(config)
    logging.getLogger(__name__).info("Starting spliminal v%s", __version__)
    SpliminalApp(config).run()


@app.command()
def config(
    key: str = typer.Argument(None, help="Config key (e.g., shell.timeout)"),
    value: str = typer.Argument(None, help="New value"),
) -> None:
    """View or modify configuration."""
    cfg = load_config()

    if key is None:
        table = Table(title="Configuration")
        table.add_column("Key", style="cyan")
        table.add_column("Value", style="green")

        table.add_row("shell.executable", cfg.shell.executable)
        table.add_row("shell.timeout", str(cfg.shell.timeout) if cfg.shell.timeout else "none")
        table.add_row("shell.block_interactive", str(cfg.shell.block_interactive))
        table.add_row("ui.title", cfg.ui.title)
        table.add_row("logging.level", cfg.logging.level)
        table.add_row("logging.file", cfg.logging.file)

        console.print(table)
        if not CONFIG_FILE.exists():
            console.print("[dim]No config file yet, showing defaults.[/dim]")
        return

    if value is None:
        console.print("[red]Usage: spliminal config <key> <value>[/red]")
        raise typer.Exit(1)

    parts = key.split(".")
    if len(parts) != 2:
        console.print("[red]Key format: section.key (e.g., shell.timeout)[/red]")
        raise typer.Exit(1)

    section, attr = parts
    section_map = cfg.sections()

    if section not in section_map:
        console.print(f"[red]Unknown section: {section}[/red]")
        raise typer.Exit(1)

    obj = section_map[section]
    if not hasattr(obj, attr):
        console.print(f"[red]Unknown key: {key}[/red]")
        raise typer.Exit(1)

    # Type coercion
    current = getattr(obj, attr)
    try:
        if isinstance(current, bool):
            typed_value: object = value.lower() in ("true", "1", "yes")
        elif isinstance(current, int):
            typed_value = int(value)
        else:
            typed_value = value
    except ValueError:
        console.print(f"[red]Invalid value type for {key}[/red]")
        raise typer.Exit(1)

    setattr(obj, attr, typed_value)
    save_config(cfg)
    console.print(f"[green]{key} = {typed_value}[/green]")


@app.command()
def logs(
    lines: int = typer.Option(50, "--lines", "-n", help="Number of lines"),
) -> None:
    """View the session log."""
    log_path = Path(load_config().logging.file).expanduser().resolve()
    if not log_path.exists():
        console.print("[dim]No log file found.[/dim]")
        return

    content = log_path.read_text()
    log_lines = content.strip().split("\n")
    for line in log_lines[-lines:]:
        console.print(line, markup=False, highlight=False)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"spliminal v{__version__}")
    console.print(f"Python: {sys.version.split()[0]}")
    console.print(f"Config: {CONFIG_FILE}")


if __name__ == "__main__":
    app()
