from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel


class Match(BaseModel, frozen=True):
    """
    Path descriptor for a matched entry.

    Fields follow the usual path decomposition: dir / base is the absolute
    path of the entry and base == name + ext.

    Example:
        Match.from_path("/repo/pyproject.toml")
        # Match(root="/", dir="/repo", base="pyproject.toml",
        #       name="pyproject", ext=".toml")
    """

    root: str
    dir: str
    base: str
    name: str
    ext: str

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> Match:
        """Decompose an absolute path into a Match."""
        p = Path(path)
        # Path.suffix treats dotfiles like ".env" as having no extension
        ext = p.suffix
        name = p.name[: len(p.name) - len(ext)] if ext else p.name

        return cls(
            root=p.anchor,
            dir=str(p.parent),
            base=p.name,
            name=name,
            ext=ext,
        )

    @property
    def path(self) -> Path:
        """Absolute path of the matched entry."""
        return Path(self.dir) / self.base

    def format(self) -> str:
        """Return the matched entry's path as a string."""
        return str(self.path)

    def __str__(self) -> str:
        return self.format()
