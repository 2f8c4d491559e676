#!/usr/bin/env python3
"""
Main CLI entry point for cheatview
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from cheatview import __version__
from cheatview.config.constants import CHEATSHEET_DIR_ENV, LOG_LEVEL_ENV
from cheatview.config.settings import get_cheatsheet_dir, get_log_level_name, parse_log_level
from cheatview.exceptions import ConfigurationError
from cheatview.ui.themes import get_theme_names
from cheatview.utils.logging_utils import setup_tui_logging

logger = logging.getLogger(__name__)

console = Console(stderr=True)

app = typer.Typer(add_completion=False)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"cheatview version {__version__}")
        raise typer.Exit()


def _check_theme(theme: Optional[str]) -> None:
    if theme is not None and theme not in get_theme_names():
        raise ConfigurationError(
            f"Unknown theme '{theme}'. Available: {', '.join(get_theme_names())}",
            setting="theme",
        )


@app.command()
def main(
    file: Optional[Path] = typer.Argument(
        None, help="Cheat sheet to open directly, skipping the selector"
    ),
    directory: Optional[str] = typer.Option(
        None,
        "--dir",
        "-d",
        help=f"Directory containing cheat sheet files (default: ${CHEATSHEET_DIR_ENV} or ./cheatsheets)",
    ),
    theme: Optional[str] = typer.Option(
        None,
        "--theme",
        "-t",
        help="Theme to use (cheatview-dark, cheatview-light)",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help=f"Log level: trace, debug, info, warn, error (default: ${LOG_LEVEL_ENV} or info)",
    ),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version"
    ),
):
    """
    Browse cheat sheets in the terminal.

    [bold]Examples:[/bold]

    Pick a sheet from ./cheatsheets:
        [cyan]cheatview[/cyan]

    Open one sheet directly:
        [cyan]cheatview cheatsheets/git.yaml[/cyan]
    """
    try:
        _check_theme(theme)
        sheet_dir = directory or str(get_cheatsheet_dir())
        level_name = log_level or get_log_level_name()
    except ConfigurationError as e:
        console.print(f"❌ Error: {e}", style="red")
        raise typer.Exit(1) from e

    setup_tui_logging(parse_log_level(level_name))
    logger.info(f"cheatview {__version__} starting (dir={sheet_dir}, file={file})")

    from cheatview.ui.app import CheatsheetApp

    viewer = CheatsheetApp(
        sheet_dir=sheet_dir,
        sheet_path=str(file) if file else None,
        theme_name=theme,
    )

    try:
        viewer.run()
    except KeyboardInterrupt:
        pass
    except Exception as e:
        logger.exception("Event loop failed")
        console.print(f"❌ Error: {e}", style="red")
        raise typer.Exit(1) from e

    if viewer.return_code:
        raise typer.Exit(viewer.return_code)


def run():
    """Entry point for the CLI"""
    app()


if __name__ == "__main__":
    run()
