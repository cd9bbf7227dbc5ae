from __future__ import annotations

import os
import typing as T
from pathlib import Path

import anyio

import matchup.ascender as ascender
import matchup.locate as locate
import matchup.options as options_

if T.TYPE_CHECKING:
    from matchup.results import Match


async def matchup(
    specifier: str,
    *,
    cwd: str | os.PathLike[str] | None = None,
    ignore: str | T.Sequence[str] = (),
    max: int | None = None,
    symlinks: bool = True,
) -> Match | None:
    """
    Find the nearest entry matching specifier in cwd or one of its ancestors.

    Args:
        specifier: Literal name ("pyproject.toml"), directory name ("src/")
            or glob pattern ("*.cfg")
        cwd: Directory to start from. Defaults to the invocation directory,
            or to the consuming project's root when called from code
            installed as a dependency.
        ignore: Path segments naming an ignore boundary. Defaults to none.
        max: Number of directory levels that may be examined, starting with
            cwd. Defaults to None (unlimited).
        symlinks: Whether symbolic links may match. Defaults to True.

    Returns:
        Match describing the entry, or None if nothing matched

    Raises:
        InvalidPatternError: If the specifier cannot be parsed
        InaccessibleStartError: If cwd cannot be listed
        OptionsError: If the options are invalid

    Example:
        match = await matchup("pyproject.toml")
        if match is not None:
            print(match.dir)
    """
    if cwd is None:
        cwd = locate.default_cwd(locate.caller_file())

    opts = options_.build_options(cwd=cwd, ignore=ignore, max=max, symlinks=symlinks)
    return await ascender.search(specifier, opts)


def matchup_sync(
    specifier: str,
    *,
    cwd: str | os.PathLike[str] | None = None,
    ignore: str | T.Sequence[str] = (),
    max: int | None = None,
    symlinks: bool = True,
) -> Match | None:
    """
    Blocking version of matchup() for callers without an event loop.

    Takes the same arguments and raises the same errors as matchup().
    """
    if cwd is None:
        cwd = locate.default_cwd(locate.caller_file())

    return anyio.run(
        _run,
        specifier,
        Path(cwd),
        ignore,
        max,
        symlinks,
    )


async def _run(
    specifier: str,
    cwd: Path,
    ignore: str | T.Sequence[str],
    max: int | None,
    symlinks: bool,
) -> Match | None:
    return await matchup(
        specifier, cwd=cwd, ignore=ignore, max=max, symlinks=symlinks
    )
