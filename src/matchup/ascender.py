"""
Upward search from a starting directory toward the filesystem root.

The walk lists one directory per step, hands the entries to the matcher
and moves to the literal parent when nothing matched. It stops at the
first match, at the filesystem root, when the level limit is spent, or at
the first directory above an ignored one.
"""

from __future__ import annotations

import stat
import typing as T
from pathlib import Path

import anyio
from loguru import logger

import matchup.errors as errors
import matchup.matcher as matcher
from matchup.results import Match

if T.TYPE_CHECKING:
    from matchup.options import SearchOptions


class _Cursor(T.NamedTuple):
    directory: Path
    steps: int
    # Whether an ignored directory has already been passed
    in_ignored: bool


def is_ignored(directory: Path, ignore: tuple[str, ...]) -> bool:
    """
    Return True if the ignore segments occur as a contiguous run in directory.

    Matching is by whole path segment: ignoring "sub" skips /repo/sub and
    /repo/sub/folder but not /repo/subway.
    """
    if not ignore:
        return False

    parts = directory.parts
    width = len(ignore)
    return any(
        parts[i : i + width] == ignore for i in range(len(parts) - width + 1)
    )


async def scan(directory: Path, symlinks: bool = True) -> list[matcher.Entry]:
    """
    List a directory's entries in the order the filesystem returns them.

    With symlinks enabled, each link is followed to decide whether it is a
    directory; a dangling link counts as a non-directory entry. With
    symlinks disabled, links are reported but never followed.

    Raises:
        OSError: If the directory cannot be listed
    """
    entries: list[matcher.Entry] = []

    async for child in anyio.Path(directory).iterdir():
        is_symlink, is_dir = await _entry_kind(child, symlinks)

        entries.append(
            matcher.Entry(
                name=child.name,
                path=Path(child),
                is_dir=is_dir,
                is_symlink=is_symlink,
            )
        )

    return entries


async def _entry_kind(child: anyio.Path, symlinks: bool) -> tuple[bool, bool]:
    """Return (is_symlink, is_dir); an entry that cannot be stat'd is a plain file."""
    try:
        is_symlink = await child.is_symlink()
    except OSError as e:
        logger.debug(f"Cannot stat {child}, treating as a file: {e}")
        return False, False

    if is_symlink and not symlinks:
        return True, False

    try:
        return is_symlink, await child.is_dir()
    except OSError as e:
        logger.debug(f"Cannot resolve {child}, treating as a file: {e}")
        return is_symlink, False


async def _check_start(directory: Path) -> None:
    try:
        info = await anyio.Path(directory).stat()
    except FileNotFoundError as e:
        raise errors.InaccessibleStartError(
            str(directory), "no such directory", cause=e
        ) from e
    except OSError as e:
        raise errors.InaccessibleStartError(
            str(directory), "cannot be accessed", cause=e
        ) from e

    if not stat.S_ISDIR(info.st_mode):
        raise errors.InaccessibleStartError(
            str(directory),
            "not a directory",
            hint="Pass the directory containing the file as cwd.",
        )


async def search(specifier: str, options: SearchOptions) -> Match | None:
    """
    Find the nearest entry matching specifier in cwd or one of its ancestors.

    Args:
        specifier: Literal name, directory name ("sub/") or glob ("*.toml")
        options: Validated search options with an explicit cwd

    Returns:
        Match for the nearest matching entry, or None if nothing matched

    Raises:
        InvalidPatternError: If the specifier cannot be parsed
        InaccessibleStartError: If cwd is missing, not a directory, or
            cannot be listed
    """
    spec = matcher.parse_specifier(specifier)
    start = options.cwd

    await _check_start(start)

    cursor = _Cursor(directory=start, steps=0, in_ignored=False)
    logger.debug(f"Searching for '{specifier}' upward from {start}")

    while True:
        ignored = is_ignored(cursor.directory, options.ignore)
        # First directory above an ignored one is the boundary
        at_boundary = cursor.in_ignored and not ignored

        if ignored:
            logger.debug(f"Skipping ignored directory {cursor.directory}")
        else:
            found = await _scan_level(cursor, spec, options)
            if found is not None:
                logger.debug(f"Matched {found.path}")
                return Match.from_path(found.path)

        if options.max is not None and cursor.steps + 1 >= options.max:
            logger.debug(f"Level limit {options.max} reached at {cursor.directory}")
            return None

        if at_boundary:
            logger.debug(f"Stopping at ignore boundary {cursor.directory}")
            return None

        parent = cursor.directory.parent
        if parent == cursor.directory:
            logger.debug(f"Reached filesystem root {cursor.directory}")
            return None

        cursor = _Cursor(
            directory=parent,
            steps=cursor.steps + 1,
            in_ignored=cursor.in_ignored or ignored,
        )


async def _scan_level(
    cursor: _Cursor,
    spec: matcher.Specifier,
    options: SearchOptions,
) -> matcher.Entry | None:
    try:
        entries = await scan(cursor.directory, symlinks=options.symlinks)
    except OSError as e:
        if cursor.steps == 0:
            raise errors.InaccessibleStartError(
                str(cursor.directory), "cannot be listed", cause=e
            ) from e
        logger.debug(f"Cannot list {cursor.directory}, treating as no match: {e}")
        return None

    return matcher.match(entries, spec, symlinks=options.symlinks)
