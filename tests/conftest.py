"""Shared test fixtures for matchup tests."""

import os
from pathlib import Path

import pytest

FILE = "file.ext"
SUBPATH = Path("sub") / "folder"


@pytest.fixture
def anyio_backend():
    """Run async tests on asyncio only."""
    return "asyncio"


@pytest.fixture
def tree(tmp_path) -> Path:
    """
    Fixture tree used by most search tests.

        <root>/file.ext
        <root>/sub/file.ext -> ..file.ext   (dangling symlink)
        <root>/sub/folder/marker.txt
    """
    root = tmp_path / "root"
    folder = root / SUBPATH
    folder.mkdir(parents=True)

    (root / FILE).write_text("root file")
    (folder / "marker.txt").write_text("marker")
    os.symlink(f"..{FILE}", root / "sub" / FILE)

    return root


@pytest.fixture
def cwd(tree) -> Path:
    """Starting directory two levels below the fixture root."""
    return tree / SUBPATH
