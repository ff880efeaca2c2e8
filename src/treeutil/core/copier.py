from __future__ import annotations

"""
Copy Engine.

Copies single files through a bounded transfer window and whole directory
trees by re-creating the destination hierarchy. Destinations are
materialized on demand; sources that do not exist are a non-fatal no-op.

A failure in the middle of a transfer leaves the destination file
partially written. There is no compensation step.
"""

import logging
import os
from typing import BinaryIO, Optional

from treeutil.core.materialize import ensure_directory, ensure_file
from treeutil.core.nodes import (
    PathArg,
    classify,
    describe_os_error,
    list_children,
    require_path,
)
from treeutil.core.paths import base_name
from treeutil.domain.constants import CHUNK_SIZE, STREAM_BUFFER_SIZE
from treeutil.domain.errors import InvalidArgumentError, IOFailureError
from treeutil.domain.models import NodeKind

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def copy_file(src: PathArg, dst: PathArg, *, chunk_size: int = CHUNK_SIZE) -> int:
    """
    Copy one regular file, creating the destination and its parents first.

    Bytes are moved one window at a time: the source read position is
    tracked explicitly while the destination advances with each write, so
    at most one window is held in memory regardless of the file size. The
    last window is truncated to the remaining byte count.

    Note that the destination name is taken literally; pass the full target
    file name, including the extension.

    Args:
        src: Source file.
        dst: Destination file (overwritten if it exists).
        chunk_size: Transfer window in bytes.

    Returns:
        int: Number of bytes copied, or -1 if 'src' does not exist.

    Raises:
        InvalidArgumentError: On absent paths, a directory source, a
                              non-positive window, or src and dst being
                              the same file.
        IOFailureError: If reading or writing fails.
    """
    s = require_path(src, "src")
    d = require_path(dst, "dst")
    if chunk_size <= 0:
        raise InvalidArgumentError(f"chunk_size must be positive, got {chunk_size}", "chunk_size")

    kind = classify(s)
    if kind is NodeKind.ABSENT:
        logger.debug(f"Copy source does not exist, nothing to do: {s}")
        return -1
    if kind is NodeKind.DIRECTORY:
        raise InvalidArgumentError(f"Source is a directory, use copy_tree(): {s}", "src")
    if os.path.exists(d) and os.path.samefile(s, d):
        raise InvalidArgumentError(f"Source and destination are the same file: {s}", "dst")

    ensure_file(d)

    try:
        with open(s, "rb") as fin, open(d, "wb") as fout:
            size = os.fstat(fin.fileno()).st_size
            position = 0
            while position < size:
                length = min(chunk_size, size - position)
                fin.seek(position)
                window = fin.read(length)
                if not window:
                    logger.warning(f"Source shrank during copy: {s} ({position}/{size} bytes)")
                    return position
                fout.write(window)
                position += len(window)
    except OSError as e:
        raise IOFailureError(d, f"Copy from '{s}' failed ({describe_os_error(e)})") from e

    logger.debug(f"Copied {size} bytes: {s} -> {d}")
    return size


def copy_stream(
        stream: Optional[BinaryIO],
        dst: PathArg,
        *,
        buffer_size: int = STREAM_BUFFER_SIZE,
) -> int:
    """
    Drain a readable binary stream into a file.

    The destination (and its parents) is created first. The stream is
    closed on every exit path, including failures.

    Args:
        stream: Binary stream to read from; None produces an empty file.
        dst: Destination file (overwritten if it exists).
        buffer_size: Size of each read.

    Returns:
        int: Number of bytes written.

    Raises:
        InvalidArgumentError: If 'dst' is absent or 'buffer_size' <= 0.
        IOFailureError: If reading or writing fails.
    """
    try:
        d = require_path(dst, "dst")
        if buffer_size <= 0:
            raise InvalidArgumentError(
                f"buffer_size must be positive, got {buffer_size}", "buffer_size"
            )
        ensure_file(d)

        written = 0
        with open(d, "wb") as out:
            if stream is not None:
                while True:
                    block = stream.read(buffer_size)
                    if not block:
                        break
                    out.write(block)
                    written += len(block)
    except IOFailureError:
        raise
    except OSError as e:
        raise IOFailureError(os.fspath(dst), f"Stream copy failed ({describe_os_error(e)})") from e
    finally:
        if stream is not None:
            stream.close()

    logger.debug(f"Wrote {written} bytes from stream to {d}")
    return written


def copy_tree(
        src: PathArg,
        dst: PathArg,
        *,
        strict: bool = False,
        chunk_size: int = CHUNK_SIZE,
) -> int:
    """
    Copy a file or a whole directory tree.

    Directories are re-created under 'dst' (ancestors included) and every
    child is copied recursively, using the child's base name under the
    absolute form of 'dst'. Child order is not specified.

    Args:
        src: Source file or directory.
        dst: Destination path.
        strict: If True, an unreadable source directory raises instead of
                being copied as empty.
        chunk_size: Transfer window for each file copy.

    Returns:
        int: Total bytes copied, or -1 if 'src' does not exist.

    Raises:
        InvalidArgumentError: On absent paths or if 'dst' lies inside 'src'.
        IOFailureError: If a destination level cannot be created, a file
                        copy fails, or (strict) a listing fails.
    """
    s = require_path(src, "src")
    d = require_path(dst, "dst")

    kind = classify(s)
    if kind is NodeKind.ABSENT:
        logger.debug(f"Copy source does not exist, nothing to do: {s}")
        return -1
    if kind is NodeKind.FILE:
        return copy_file(s, d, chunk_size=chunk_size)

    _reject_nested_target(s, d)
    logger.info(f"Copying tree '{s}' -> '{d}'")
    total = _copy_directory(s, d, strict, chunk_size)
    logger.info(f"Copied {total} bytes into '{d}'")
    return total

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _copy_directory(src: str, dst: str, strict: bool, chunk_size: int) -> int:
    """Materialize 'dst' and copy the direct children of 'src' into it."""
    target = os.path.abspath(dst)
    if not ensure_directory(target):
        raise IOFailureError(target, "Destination exists and is not a directory")

    total = 0
    for name in list_children(src, strict=strict):
        child = os.path.join(src, name)
        child_target = os.path.join(target, base_name(child))

        kind = classify(child)
        if kind is NodeKind.DIRECTORY:
            total += _copy_directory(child, child_target, strict, chunk_size)
        elif kind is NodeKind.FILE:
            copied = copy_file(child, child_target, chunk_size=chunk_size)
            if copied > 0:
                total += copied
        # ABSENT: removed since the listing was taken
    return total


def _reject_nested_target(src: str, dst: str) -> None:
    """Refuse to copy a directory into itself or one of its descendants."""
    src_abs = os.path.abspath(src)
    dst_abs = os.path.abspath(dst)
    try:
        nested = os.path.commonpath([src_abs, dst_abs]) == src_abs
    except ValueError:
        # Different drives on Windows
        nested = False
    if nested:
        raise InvalidArgumentError(
            f"Destination '{dst}' lies inside source directory '{src}'", "dst"
        )
