from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import rich.console as console_
import rich.markup as markup_
from loguru import logger

if TYPE_CHECKING:
    from matchup.results import Match


console = console_.Console()
err_console = console_.Console(stderr=True)


def setup_logging(verbose: bool = False) -> None:
    """
    Configure loguru logging for CLI.

    Sets up colored stderr output with configurable verbosity.
    Should be called once at CLI entry point.

    Args:
        verbose: Enable DEBUG level logging. Defaults to False (INFO level).
    """
    logger.remove()  # remove default handler

    level = "DEBUG" if verbose else "INFO"

    logger.add(
        sys.stderr,
        format="<level>{level: <8}</level> | {message}",
        level=level,
        colorize=True,
    )


def print_match(match: Match, as_json: bool = False) -> None:
    """
    Print a match to stdout.

    Args:
        match: Matched path descriptor
        as_json: Print every descriptor field as JSON instead of the bare
            path. Defaults to False.
    """
    if as_json:
        console.print_json(match.model_dump_json(), highlight=False)
    else:
        # Paths must stay copy-pasteable: no markup, no wrapping
        console.print(match.format(), markup=False, highlight=False, soft_wrap=True)


def print_error(message: str) -> None:
    """
    Print an error message with X mark.

    Args:
        message: Error message to display
    """
    err_console.print(f"[red]✗[/red] {markup_.escape(message)}")
