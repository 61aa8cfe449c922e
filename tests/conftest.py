"""
Pytest configuration and fixtures for season-renamer tests.
"""

import os
import sys
from pathlib import Path
from typing import Any, Callable

import pytest

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from seasonrenamer.models import RenameOptions  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: Any) -> Path:
    """Point the platform settings directory at a scratch location."""
    config_home = tmp_path / "config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.setenv("APPDATA", str(config_home))
    monkeypatch.setenv("HOME", str(config_home))
    return config_home


@pytest.fixture
def make_show(tmp_path: Path) -> Callable[[dict[str, list[str]]], Path]:
    """Build a show directory from {folder: [file names]}.

    Each file's content is its original name, so a file can be traced
    through renames.
    """
    def _make(layout: dict[str, list[str]]) -> Path:
        root = tmp_path / "Show"
        root.mkdir(exist_ok=True)
        for folder, names in layout.items():
            season_dir = root / folder
            season_dir.mkdir(exist_ok=True)
            for name in names:
                (season_dir / name).write_text(name)
        return root

    return _make


@pytest.fixture
def listing() -> Callable[[Path], list[str]]:
    """Sorted names of the entries in a directory."""
    def _listing(path: Path) -> list[str]:
        return sorted(p.name for p in path.iterdir())

    return _listing


@pytest.fixture
def options() -> RenameOptions:
    return RenameOptions()
