from pathlib import Path
from typing import Annotated

import cyclopts
from loguru import logger

from matchup.api import matchup_sync
from matchup.errors import MatchupError
from matchup.logging import print_error, print_match, setup_logging
from matchup.options import max_from_env

app = cyclopts.App(
    name="matchup", help="Find a file, glob or directory up from where you are"
)


@app.meta.default
def launcher(
    *tokens: str,
    verbose: Annotated[
        bool, cyclopts.Parameter(name=["--verbose", "-v"], help="Debug logging")
    ] = False,
) -> None:
    """
    CLI entry point that configures logging and dispatches the search.

    Args:
        *tokens: Command tokens to execute
        verbose: Enable debug logging. Defaults to False.
    """
    setup_logging(verbose=verbose)
    app(tokens)


@app.default
def find(
    specifier: str,
    *,
    cwd: Annotated[
        Path | None,
        cyclopts.Parameter(
            name="--cwd", help="Directory to start from. Defaults to here."
        ),
    ] = None,
    ignore: Annotated[
        list[str] | None,
        cyclopts.Parameter(
            name="--ignore",
            help="Path segments of an ignore boundary. Repeat for several segments.",
        ),
    ] = None,
    max: Annotated[
        int | None,
        cyclopts.Parameter(
            name="--max",
            help="Directory levels to examine, starting with cwd. "
            "Defaults to $MATCHUP_MAX, else unlimited.",
        ),
    ] = None,
    no_symlinks: Annotated[
        bool,
        cyclopts.Parameter(name="--no-symlinks", help="Never match symbolic links"),
    ] = False,
    json: Annotated[
        bool,
        cyclopts.Parameter(name="--json", help="Print the full match as JSON"),
    ] = False,
):
    """
    Print the nearest entry matching SPECIFIER in cwd or an ancestor.

    Exits with status 1 when nothing matches and 2 when the search could
    not run.

    Args:
        specifier: File name, directory name ("src/") or glob ("*.toml")
        cwd: Directory to start from. Defaults to the current directory.
        ignore: Path segments of an ignore boundary. Defaults to None.
        max: Directory levels to examine. Defaults to None.
        no_symlinks: Never match symbolic links. Defaults to False.
        json: Print the full match as JSON. Defaults to False.

    Raises:
        SystemExit: If nothing matches or the search fails
    """
    try:
        if max is None:
            max = max_from_env()

        match = matchup_sync(
            specifier,
            cwd=cwd if cwd is not None else Path.cwd(),
            ignore=ignore or (),
            max=max,
            symlinks=not no_symlinks,
        )
    except MatchupError as e:
        print_error(str(e))
        raise SystemExit(2)

    if match is None:
        logger.debug(f"No match for '{specifier}'")
        print_error(f"No match for '{specifier}'")
        raise SystemExit(1)

    print_match(match, as_json=json)


def main() -> None:
    app.meta()
