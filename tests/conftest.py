"""Shared test fixtures for pagewright."""

from __future__ import annotations

from pathlib import Path

import pytest

# Scenario A: nested pages two levels deep
SCENARIO_A: dict[str, object] = {
    "Page0": "Page0Content",
    "SubDir0": {
        "SubDir0Page0": "SubDir0Page0Content",
        "SubDir0Page1": "SubDir0Page1Content",
    },
    "SubDir1": {
        "SubDir1Page0": "SubDir1Page0Content",
        "SubDir1SubDir0": {
            "SubDir1SubDir1Page0": "SubDir1SubDir1Page0Content",
        },
    },
}


def _make_tree(root: Path, tree: dict[str, object]) -> Path:
    """Create files and directories under *root* from a nested dict.

    String values become file contents (bytes are written as-is); dict
    values become directories.  Returns *root*.
    """
    root.mkdir(parents=True, exist_ok=True)
    for name, value in tree.items():
        path = root / name
        if isinstance(value, dict):
            _make_tree(path, value)
        elif isinstance(value, bytes):
            path.write_bytes(value)
        else:
            path.write_bytes(str(value).encode("utf-8"))
    return root


@pytest.fixture
def make_tree():
    """The tree-building helper, for tests that need their own layout."""
    return _make_tree


@pytest.fixture
def pages_dir(tmp_path: Path) -> Path:
    """The Scenario A tree at ``<tmp>/pages``."""
    return _make_tree(tmp_path / "pages", SCENARIO_A)


@pytest.fixture
def project(pages_dir: Path) -> Path:
    """A project root containing the Scenario A pages directory."""
    return pages_dir.parent
