"""
Default starting directory for callers that don't pass cwd.

Code installed as a dependency should search from the project that
consumes it, not from inside its own install location. Given the calling
module's file, this walks up past any dependency-install boundary
(site-packages, dist-packages, node_modules) to the consumer's root.
"""

import sys
from pathlib import Path

from loguru import logger

PACKAGE_BOUNDARIES = ("site-packages", "dist-packages")
MODULE_BOUNDARIES = ("node_modules",)
VENV_MARKER = "pyvenv.cfg"

# Packages whose frames never count as the caller
INTERNAL_PACKAGES = frozenset(
    {"matchup", "asyncio", "anyio", "trio", "sniffio", "concurrent", "threading"}
)


def _outermost_boundary(parts: tuple[str, ...]) -> int | None:
    for i, part in enumerate(parts):
        if part in PACKAGE_BOUNDARIES or part in MODULE_BOUNDARIES:
            return i
    return None


def _venv_root(start: Path) -> Path | None:
    """Return the nearest ancestor of start holding pyvenv.cfg, if any."""
    for parent in [start, *start.parents]:
        if (parent / VENV_MARKER).is_file():
            return parent
    return None


def default_cwd(module_file: str | Path | None = None) -> Path:
    """
    Return the directory a search should start from by default.

    Args:
        module_file: File of the module that asked for a search. Defaults
            to None (use the invocation directory).

    Returns:
        The consumer project's root when module_file lives inside a
        dependency install, otherwise the current working directory
    """
    if module_file is None:
        return Path.cwd()

    path = Path(module_file).absolute()
    parts = path.parts
    index = _outermost_boundary(parts)

    if index is None:
        return Path.cwd()

    boundary_parent = Path(*parts[:index])

    if parts[index] in MODULE_BOUNDARIES:
        logger.debug(
            f"{path} is installed under {parts[index]}, searching from {boundary_parent}"
        )
        return boundary_parent

    venv = _venv_root(boundary_parent)
    if venv is None:
        # System-wide install has no consumer project to point at
        logger.debug(f"{path} is installed system-wide, searching from cwd")
        return Path.cwd()

    logger.debug(
        f"{path} is installed in virtualenv {venv}, searching from {venv.parent}"
    )
    return venv.parent


def caller_file() -> str | None:
    """
    Return the __file__ of the module that called into matchup.

    Frames belonging to matchup itself and to event loop machinery
    (asyncio, anyio, trio) are skipped, so a coroutine driven by
    anyio.run() still reports the module that started the loop.

    Returns None when that module has no file, such as the REPL.
    """
    frame = sys._getframe(1)

    while frame is not None:
        module = frame.f_globals.get("__name__") or ""
        if module.partition(".")[0] not in INTERNAL_PACKAGES:
            return frame.f_globals.get("__file__")
        frame = frame.f_back

    return None
