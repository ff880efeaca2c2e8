from __future__ import annotations

"""
Move.

Moves a file or directory tree by copying it and then deleting the source.
The two steps are not atomic: an interruption between them leaves the
content at both locations. A copy that fails part-way can be rolled back
by removing the destination it created.
"""

import logging
import os

from treeutil.core.copier import copy_tree
from treeutil.core.deleter import delete
from treeutil.core.nodes import PathArg, classify, require_path
from treeutil.domain.constants import CHUNK_SIZE
from treeutil.domain.errors import InvalidArgumentError, IOFailureError
from treeutil.domain.models import NodeKind

logger = logging.getLogger(__name__)


def move(
        src: PathArg,
        dst: PathArg,
        *,
        strict: bool = False,
        rollback: bool = True,
        chunk_size: int = CHUNK_SIZE,
) -> int:
    """
    Move 'src' to 'dst' as copy_tree() followed by delete().

    Args:
        src: File or directory to move.
        dst: Destination path.
        strict: Passed to both phases; unreadable directories and undeletable
                source nodes raise instead of being logged.
        rollback: If the copy fails and 'dst' did not exist before, delete
                  whatever the copy created.
        chunk_size: Transfer window for each file copy.

    Returns:
        int: Bytes moved, or -1 if 'src' does not exist.

    Raises:
        InvalidArgumentError: On absent paths, or a destination that lies inside
                              'src' or contains it.
        IOFailureError: If the copy fails, or (strict) the source cannot be
                        fully removed.
    """
    s = require_path(src, "src")
    d = require_path(dst, "dst")

    if classify(s) is NodeKind.ABSENT:
        logger.debug(f"Move source does not exist, nothing to do: {s}")
        return -1
    _reject_enclosing_target(s, d)

    dst_existed = classify(d) is not NodeKind.ABSENT
    logger.info(f"Moving '{s}' -> '{d}'")

    try:
        moved = copy_tree(s, d, strict=strict, chunk_size=chunk_size)
    except IOFailureError:
        if rollback and not dst_existed and classify(d) is not NodeKind.ABSENT:
            logger.warning(f"Move failed, removing partial destination: {d}")
            delete(d)
        raise

    report = delete(s, strict=strict)
    if not report.ok:
        logger.warning(
            f"Moved '{s}' but {len(report.failures)} source node(s) could not be removed"
        )
    return moved


def _reject_enclosing_target(src: str, dst: str) -> None:
    """
    Refuse a destination that contains the source.

    Copying 'a/a' onto 'a' writes over the source's own location, and the
    delete phase would then remove the copied content along with it.
    """
    src_abs = os.path.abspath(src)
    dst_abs = os.path.abspath(dst)
    try:
        encloses = os.path.commonpath([src_abs, dst_abs]) == dst_abs
    except ValueError:
        # Different drives on Windows
        encloses = False
    if encloses:
        raise InvalidArgumentError(
            f"Destination '{dst}' contains source '{src}'", "dst"
        )
