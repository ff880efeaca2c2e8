from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared filesystem fixtures used by the engine and CLI tests.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Create a small tree whose files total 60 bytes.

    Structure:
    /tree
      a.txt            (10 bytes)
      /level1
        b.bin          (20 bytes)
        /level2
          c.dat        (30 bytes)
      /empty
    """
    root = tmp_path / "tree"
    (root / "level1" / "level2").mkdir(parents=True)
    (root / "empty").mkdir()

    (root / "a.txt").write_bytes(b"a" * 10)
    (root / "level1" / "b.bin").write_bytes(b"b" * 20)
    (root / "level1" / "level2" / "c.dat").write_bytes(b"c" * 30)

    return root


def snapshot(root: Path) -> dict:
    """Map every relative path under 'root' to its bytes (None for directories)."""
    result = {}
    for p in sorted(root.rglob("*")):
        rel = p.relative_to(root).as_posix()
        result[rel] = None if p.is_dir() else p.read_bytes()
    return result


@pytest.fixture
def tree_snapshot():
    """Expose the snapshot helper to tests."""
    return snapshot
