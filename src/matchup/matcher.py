from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

import matchup.errors as errors
import matchup.patterns as patterns


@dataclass(frozen=True)
class Entry:
    """
    Metadata for one directory entry, as produced by a listing.

    Attributes:
        name: Base name of the entry
        path: Absolute path of the entry
        is_dir: Whether the entry is a directory (after following a symlink
            when symlinks are resolved)
        is_symlink: Whether the entry itself is a symbolic link
    """

    name: str
    path: Path
    is_dir: bool = False
    is_symlink: bool = False


@dataclass(frozen=True)
class Specifier:
    """
    A parsed target specifier.

    Attributes:
        raw: The specifier as given
        name: The name or pattern to compare entry names against
        glob: Whether name is a glob pattern
        dir_only: Whether only directories may match (trailing separator)
    """

    raw: str
    name: str
    glob: bool
    dir_only: bool

    def accepts(self, entry: Entry) -> bool:
        if self.glob:
            return not entry.is_dir and patterns.fnmatch_segment(entry.name, self.name)
        if self.dir_only and not entry.is_dir:
            return False
        return entry.name == self.name


def parse_specifier(specifier: str) -> Specifier:
    """
    Parse a target specifier into a literal name, directory name or glob.

    Args:
        specifier: e.g. "pyproject.toml", "src/" or "*.cfg"

    Returns:
        Parsed Specifier

    Raises:
        InvalidPatternError: If the specifier is empty, spans several path
            segments, or is a malformed glob
    """
    separators = tuple(patterns.SEPARATORS)

    name = specifier
    dir_only = False
    while name.endswith(separators):
        name = name[:-1]
        dir_only = True

    if not name or name in (".", ".."):
        raise errors.InvalidPatternError(
            specifier, "does not name a directory entry"
        )

    if any(sep in name for sep in separators):
        raise errors.InvalidPatternError(
            specifier,
            "contains a path separator",
            hint="Only single entry names are matched. Search for the first segment instead.",
        )

    glob = patterns.has_magic(name)
    if glob:
        # Fail early on malformed patterns, before any directory is listed
        patterns.compile_pattern(name)

    return Specifier(raw=specifier, name=name, glob=glob, dir_only=dir_only)


def match(
    entries: Iterable[Entry],
    specifier: str | Specifier,
    symlinks: bool = True,
) -> Entry | None:
    """
    Return the first entry matching the specifier, in listing order.

    Literal names match files and directories alike, a trailing separator
    restricts a name to directories, and glob patterns only match
    non-directories. When symlinks is False, symbolic links are skipped.

    Args:
        entries: Directory entries in the order the listing produced them
        specifier: Raw specifier string or a pre-parsed Specifier
        symlinks: Whether symbolic links may match. Defaults to True.

    Returns:
        The first eligible Entry, or None

    Raises:
        InvalidPatternError: If a raw specifier cannot be parsed
    """
    if isinstance(specifier, str):
        specifier = parse_specifier(specifier)

    for entry in entries:
        if not symlinks and entry.is_symlink:
            continue
        if specifier.accepts(entry):
            return entry

    return None
