from __future__ import annotations

"""
Unit tests for Path Decomposition.

Verifies separator lookup for Unix, Windows and mixed paths, extension
detection when dots appear in parent directories, and the derived base
name / extension / stem values. None of these depend on the host OS.
"""

import pytest

from treeutil.core.paths import (
    base_name,
    extension,
    extension_index,
    last_separator_index,
    stem,
)

# -----------------------------------------------------------------------------
# SEPARATOR LOOKUP
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("path", ["a/b/c", "/usr/local/bin/tool", "D:/test/mydoc.txt", "x/"])
def test_last_separator_unix_only(path: str) -> None:
    """TC-01: Unix-only paths use the last '/' index."""
    assert last_separator_index(path) == path.rfind("/")


@pytest.mark.parametrize("path", ["a\\b\\c", "\\usr\\conf\\srun.tar", "C:\\dir\\"])
def test_last_separator_windows_only(path: str) -> None:
    """TC-01: Windows-only paths use the last '\\' index."""
    assert last_separator_index(path) == path.rfind("\\")


def test_last_separator_mixed_takes_the_larger_index() -> None:
    """TC-01: Mixed separators resolve to whichever occurs last."""
    assert last_separator_index("C:\\data/sub\\file.txt") == 11
    assert last_separator_index("a\\b/c") == 3
    assert last_separator_index("a/b\\c") == 3


def test_last_separator_absent() -> None:
    """TC-02: No separator, or a None path, yields -1."""
    assert last_separator_index("plain.txt") == -1
    assert last_separator_index("") == -1
    assert last_separator_index(None) == -1

# -----------------------------------------------------------------------------
# EXTENSION LOOKUP
# -----------------------------------------------------------------------------

def test_extension_index_ignores_dots_in_parent_directories() -> None:
    """TC-03: A dot before the last separator is not an extension."""
    assert extension_index("a/b.txt/c") == -1
    assert extension_index("dir.d\\file") == -1
    assert extension_index("a/b/c") == -1
    assert extension_index(None) == -1


def test_extension_index_points_at_last_dot() -> None:
    """TC-03: The last dot of the final segment is the extension index."""
    assert extension_index("D:/d.new.txt") == 8
    assert extension_index("archive.tar.gz") == 11

# -----------------------------------------------------------------------------
# COMPONENT EXTRACTION
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("path, expected", [
    ("D:/test/mydoc.txt", "mydoc.txt"),
    ("\\usr\\conf\\srun.tar", "srun.tar"),
    ("\\tmp\\tss\\c", "c"),
    ("C:\\mixed/path\\name.cfg", "name.cfg"),
    ("noseparator", "noseparator"),
    ("trailing/", ""),
])
def test_base_name(path: str, expected: str) -> None:
    """TC-04: Base name is everything after the last separator."""
    assert base_name(path) == expected


@pytest.mark.parametrize("path, expected", [
    ("D:/d.new.txt", "txt"),
    ("a/b/c.jpg", "jpg"),
    ("a/b.txt/c", ""),
    ("a/b/c", ""),
    ("x\\y.tar.gz", "gz"),
    ("dotfile.", ""),
])
def test_extension(path: str, expected: str) -> None:
    """TC-05: Extension is the text after the final dot of the last segment."""
    assert extension(path) == expected


@pytest.mark.parametrize("path, expected", [
    ("D:/test/mydoc.txt", "D:/test/mydoc"),
    ("aaaa.bbb.ccc", "aaaa.bbb"),
    ("a/b.txt/c", "a/b.txt/c"),
    ("C:\\dir.d\\file.log", "C:\\dir.d\\file"),
])
def test_stem(path: str, expected: str) -> None:
    """TC-06: Stem strips only the extension and its dot."""
    assert stem(path) == expected


def test_none_propagates() -> None:
    """TC-07: A None path is propagated rather than rejected."""
    assert base_name(None) is None
    assert extension(None) is None
    assert stem(None) is None
