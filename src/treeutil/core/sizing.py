from __future__ import annotations

"""
Size Engine.

Computes the aggregate byte size of a file or directory tree and converts
between byte counts and human-readable size literals such as "1.53KB"
(binary, 1024-based units).
"""

import logging
import os
import re
from typing import Optional

from treeutil.core.nodes import PathArg, classify, describe_os_error, list_children
from treeutil.domain.constants import GB, KB, MB, SIZE_UNITS
from treeutil.domain.errors import InvalidArgumentError, IOFailureError, MalformedInputError
from treeutil.domain.models import NodeKind

logger = logging.getLogger(__name__)

_INTEGER_RX = re.compile(r"^[0-9]+$")
_DECIMAL_RX = re.compile(r"^([0-9]+\.?[0-9]*|\.[0-9]+)$")

# -----------------------------------------------------------------------------
# TREE SIZE
# -----------------------------------------------------------------------------

def directory_size(path: PathArg, *, strict: bool = False) -> int:
    """
    Return the total size in bytes of a file or of a whole directory tree.

    Args:
        path: File or directory to measure.
        strict: If True, an unreadable directory raises instead of
                contributing 0.

    Returns:
        int: Byte count, or -1 if 'path' is None or does not exist.

    Raises:
        IOFailureError: If a file cannot be stat'ed, or (strict) a directory
                        cannot be listed.
    """
    if path is None:
        return -1
    p = os.fspath(path)

    kind = classify(p)
    if kind is NodeKind.ABSENT:
        return -1
    if kind is NodeKind.FILE:
        return _file_length(p)

    total = _tree_size(p, strict)
    logger.debug(f"Size of '{p}': {total} bytes")
    return total

# -----------------------------------------------------------------------------
# SIZE LITERALS
# -----------------------------------------------------------------------------

def parse_size_literal(text: Optional[str]) -> int:
    """
    Convert a size literal (e.g. "3282B", "1.5KB", "3.45MB", "9.6GB") to bytes.

    Unit letters B/K/M/G are case-insensitive and separated from the numeric
    magnitude; only the first unit letter counts ("KB" means K). Without a
    unit, or with B, the magnitude must be a whole number. With K/M/G it may
    carry one decimal point; the scaled result is truncated, not rounded.

    Args:
        text: Literal to parse. None or blank means "no size" and yields 0.

    Returns:
        int: Byte count.

    Raises:
        MalformedInputError: If the magnitude does not follow the grammar.
    """
    if text is None:
        return 0
    literal = text.strip().upper()
    if not literal:
        return 0

    magnitude_chars = []
    unit_chars = []
    for c in literal:
        if c in SIZE_UNITS:
            unit_chars.append(c)
        else:
            magnitude_chars.append(c)

    magnitude = "".join(magnitude_chars).strip()
    unit = unit_chars[0] if unit_chars else "B"

    if unit == "B":
        if not _INTEGER_RX.match(magnitude):
            raise MalformedInputError(text, "a byte count must be a whole number")
        return int(magnitude)

    if not _DECIMAL_RX.match(magnitude):
        raise MalformedInputError(text, "expected digits with at most one decimal point")
    return int(float(magnitude) * SIZE_UNITS[unit])


def format_size(num_bytes: int) -> str:
    """
    Render a byte count with the largest binary unit it reaches, e.g. "1.53KB".

    Args:
        num_bytes: Non-negative byte count.

    Returns:
        str: Literal accepted back by parse_size_literal (up to rounding).
    """
    if num_bytes < 0:
        raise InvalidArgumentError(f"Size must not be negative, got {num_bytes}", "num_bytes")
    for unit, factor in (("GB", GB), ("MB", MB), ("KB", KB)):
        if num_bytes >= factor:
            return f"{num_bytes / factor:.2f}{unit}"
    return f"{num_bytes}B"

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _tree_size(directory: str, strict: bool) -> int:
    """Sum the sizes of every descendant file of 'directory'."""
    total = 0
    for name in list_children(directory, strict=strict):
        child = os.path.join(directory, name)
        kind = classify(child)
        if kind is NodeKind.DIRECTORY:
            total += _tree_size(child, strict)
        elif kind is NodeKind.FILE:
            total += _file_length(child)
    return total


def _file_length(path: str) -> int:
    """Return the byte length of a file; a file removed meanwhile counts 0."""
    try:
        return os.path.getsize(path)
    except FileNotFoundError:
        return 0
    except OSError as e:
        raise IOFailureError(path, f"Cannot read file size ({describe_os_error(e)})") from e
