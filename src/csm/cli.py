"""
CLI interface for csm using Typer.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from . import __version__
from .dependency_check import require_tmux, require_tmux_session
from .exceptions import CsmError
from .implementations import RealTmux
from .logging_config import setup_cli_logging

app = typer.Typer(
    name="csm",
    help="Show running Claude Code sessions in tmux and switch to one",
    add_completion=False,
    rich_markup_mode="rich",
)

# Diagnostics go to stderr
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"csm {__version__}")
        raise typer.Exit()


@app.command()
def pick(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version and exit"),
    ] = None,
    log_file: Annotated[
        Optional[Path],
        typer.Option("--log-file", help="Write debug logs to this file", dir_okay=False),
    ] = None,
):
    """Pick a Claude session and switch the tmux client to it."""
    from .tui import run_tui

    logger = setup_cli_logging(log_file)

    try:
        require_tmux_session()
        tmux_path = require_tmux()
    except CsmError as e:
        err_console.print(str(e), markup=False, highlight=False)
        raise typer.Exit(1)

    logger.debug("using tmux at %s", tmux_path)
    tmux = RealTmux()
    selected = run_tui(tmux)
    if selected:
        # Best effort: we are exiting either way
        if not tmux.activate(selected):
            logger.debug("switch-client to %s failed", selected)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
