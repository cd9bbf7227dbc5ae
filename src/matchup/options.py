"""
Search options for an upward search.

SearchOptions is a frozen pydantic model: it is validated once at call
entry and then shared read-only with the walk.

Example:
    options = SearchOptions(cwd=Path("src/pkg"), ignore="node_modules", max=5)
"""

from __future__ import annotations

import os
import typing as T
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

import matchup.errors as errors

MAX_ENV_VAR = "MATCHUP_MAX"


def split_segments(value: str | os.PathLike[str]) -> tuple[str, ...]:
    """
    Split a path-like value into segments.

    An absolute value keeps its root anchor as the first segment, so it
    only ever matches from the filesystem root.

    Example:
        split_segments("a/b/") == ("a", "b")
        split_segments("/srv/app") == ("/", "srv", "app")
    """
    return Path(value).parts


class SearchOptions(BaseModel, frozen=True):
    """
    Options for one upward search.

    Attributes:
        cwd: Directory the search starts from
        ignore: Path segments naming an ignore boundary; the directory they
            name and everything below it is never scanned, and the walk
            ends at the first directory above it
        max: Number of directory levels that may be examined, counted from
            cwd. None means unlimited.
        symlinks: Whether symbolic links may match. Defaults to True.
    """

    cwd: Path
    ignore: tuple[str, ...] = ()
    max: int | None = Field(default=None, ge=0)
    symlinks: bool = True

    @field_validator("cwd", mode="after")
    @classmethod
    def _absolute_cwd(cls, value: Path) -> Path:
        # Literal parents only: normalize ".." without resolving symlinks
        return Path(os.path.abspath(value))

    @field_validator("ignore", mode="before")
    @classmethod
    def _split_ignore(cls, value: T.Any) -> T.Any:
        if value is None:
            return ()
        if isinstance(value, (str, os.PathLike)):
            return split_segments(value)

        segments: list[str] = []
        for item in value:
            segments.extend(split_segments(item))
        return tuple(segments)


def build_options(**kwargs: T.Any) -> SearchOptions:
    """
    Validate keyword arguments into SearchOptions.

    Raises:
        OptionsError: If any option is invalid
    """
    try:
        return SearchOptions.model_validate(kwargs)
    except ValidationError as e:
        error_lines = []
        for err in e.errors():
            loc = ".".join(str(x) for x in err["loc"])
            msg = err["msg"]
            error_lines.append(f"  {loc}: {msg}")

        raise errors.OptionsError(
            "Invalid search options:\n" + "\n".join(error_lines),
            hint="max must be a non-negative integer and cwd a path.",
        ) from e


def max_from_env() -> int | None:
    """
    Read a default level limit from the MATCHUP_MAX environment variable.

    Returns:
        The parsed limit, or None if the variable is unset or empty

    Raises:
        OptionsError: If the variable is not a non-negative integer
    """
    raw = os.environ.get(MAX_ENV_VAR, "").strip()
    if not raw:
        return None

    try:
        value = int(raw)
    except ValueError as e:
        raise errors.OptionsError(
            f"{MAX_ENV_VAR}={raw!r} is not an integer",
            hint=f"Unset {MAX_ENV_VAR} or set it to a non-negative integer.",
        ) from e

    if value < 0:
        raise errors.OptionsError(f"{MAX_ENV_VAR} must be >= 0, got {value}")

    return value
