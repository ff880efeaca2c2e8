from __future__ import annotations

"""
Delete Engine.

Recursively removes a file or a directory tree, optionally keeping the root
directory itself. Failures on individual nodes are collected into a
DeleteReport so that one locked file does not stop the rest of the walk;
strict mode raises on the first failure instead.
"""

import logging
import os

from treeutil.core.nodes import (
    PathArg,
    classify,
    describe_os_error,
    list_children,
    require_path,
)
from treeutil.domain.errors import IOFailureError
from treeutil.domain.models import DeleteFailure, DeleteReport, NodeKind

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def delete(path: PathArg, delete_self: bool = True, *, strict: bool = False) -> DeleteReport:
    """
    Delete a file, or a directory together with everything below it.

    Children are always removed completely; 'delete_self' only decides
    whether the (then empty) root directory is removed too, which lets a
    caller empty a directory while keeping it. For a regular file the flag
    is ignored. Symbolic links are unlinked, never followed.

    Args:
        path: File or directory to delete. A missing path is a no-op.
        delete_self: If 'path' is a directory, also remove the directory.
        strict: If True, raise on the first node that cannot be removed.

    Returns:
        DeleteReport: Counters and the list of nodes left behind.

    Raises:
        InvalidArgumentError: If 'path' is None or empty.
        IOFailureError: On the first failure, when strict is set.
    """
    p = require_path(path)
    report = DeleteReport()

    kind = classify(p)
    if kind is NodeKind.ABSENT:
        logger.debug(f"Delete target does not exist, nothing to do: {p}")
        return report

    if kind is NodeKind.FILE or os.path.islink(p):
        _remove_file(p, report, strict)
    else:
        _delete_directory(p, delete_self, report, strict)

    if report.ok:
        logger.info(
            f"Deleted '{p}' ({report.files_removed} files, {report.dirs_removed} directories)"
        )
    else:
        logger.warning(f"Delete of '{p}' left {len(report.failures)} node(s) behind")
    return report

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _delete_directory(directory: str, delete_self: bool, report: DeleteReport, strict: bool) -> None:
    """Remove every child of 'directory', then the directory if requested."""
    try:
        names = list_children(directory, strict=True)
    except IOFailureError as e:
        if strict:
            raise
        report.failures.append(DeleteFailure(path=directory, error=str(e)))
        logger.warning(str(e))
        names = []

    for name in names:
        child = os.path.join(directory, name)
        if os.path.isdir(child) and not os.path.islink(child):
            _delete_directory(child, True, report, strict)
        else:
            _remove_file(child, report, strict)

    if delete_self:
        try:
            os.rmdir(directory)
            report.dirs_removed += 1
            logger.debug(f"Removed directory: {directory}")
        except FileNotFoundError:
            pass
        except OSError as e:
            _record_failure(report, directory, e, strict)


def _remove_file(path: str, report: DeleteReport, strict: bool) -> None:
    """Unlink one file; a file already gone is not a failure."""
    try:
        os.remove(path)
        report.files_removed += 1
        logger.debug(f"Removed file: {path}")
    except FileNotFoundError:
        pass
    except OSError as e:
        _record_failure(report, path, e, strict)


def _record_failure(report: DeleteReport, path: str, e: OSError, strict: bool) -> None:
    """Raise (strict) or append the failure to the report."""
    reason = describe_os_error(e)
    if strict:
        raise IOFailureError(path, f"Cannot delete ({reason})") from e
    report.failures.append(DeleteFailure(path=path, error=reason))
    logger.warning(f"Cannot delete '{path}': {reason}")
