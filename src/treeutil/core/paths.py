from __future__ import annotations

"""
Path Decomposition.

Pure string functions that split a path into base name, extension and stem.
Both Unix ('/') and Windows ('\\') separators are recognized anywhere in
the same string, independently of the host operating system, so results are
identical on every platform.

Examples:
    base_name("D:/test/mydoc.txt")   -> "mydoc.txt"
    base_name("\\\\tmp\\\\tss\\\\c")   -> "c"
    extension("a/b.txt/c")           -> ""
    stem("aaaa.bbb.ccc")             -> "aaaa.bbb"
"""

from typing import Optional

from treeutil.domain.constants import (
    EXTENSION_SEPARATOR,
    UNIX_SEPARATOR,
    WINDOWS_SEPARATOR,
)

# -----------------------------------------------------------------------------
# INDEX LOOKUPS
# -----------------------------------------------------------------------------

def last_separator_index(path: Optional[str]) -> int:
    """
    Return the index of the last directory separator of either flavour.

    Args:
        path: Path string to inspect; None is accepted.

    Returns:
        int: max(last '/', last '\\'), or -1 if neither occurs or path is None.
    """
    if path is None:
        return -1
    return max(path.rfind(UNIX_SEPARATOR), path.rfind(WINDOWS_SEPARATOR))


def extension_index(path: Optional[str]) -> int:
    """
    Return the index of the extension dot, if it belongs to the last segment.

    A dot that occurs before the last separator belongs to a parent directory
    name (e.g. 'a/b.txt/c') and does not count.

    Args:
        path: Path string to inspect; None is accepted.

    Returns:
        int: Index of the last '.', or -1 if there is no extension.
    """
    if path is None:
        return -1
    dot = path.rfind(EXTENSION_SEPARATOR)
    return -1 if last_separator_index(path) > dot else dot

# -----------------------------------------------------------------------------
# COMPONENT EXTRACTION
# -----------------------------------------------------------------------------

def base_name(path: Optional[str]) -> Optional[str]:
    """Return the part after the last separator (the whole path if none)."""
    if path is None:
        return None
    return path[last_separator_index(path) + 1:]


def extension(path: Optional[str]) -> Optional[str]:
    """
    Return the extension without its dot.

    Returns:
        Optional[str]: The extension, "" if there is none, None for None.
    """
    if path is None:
        return None
    index = extension_index(path)
    if index == -1:
        return ""
    return path[index + 1:]


def stem(path: Optional[str]) -> Optional[str]:
    """Return the path with its extension (and the dot) stripped."""
    index = extension_index(path)
    if index == -1:
        return path
    return path[:index]
