from __future__ import annotations

"""
Node Observation Helpers.

Shared primitives for the recursive walkers: argument checking, node
classification and direct-child enumeration. Enumeration is the one place
where a permissive (swallow) or strict (propagate) policy is applied to
unreadable directories.
"""

import logging
import os
from typing import List, Union

from treeutil.domain.errors import InvalidArgumentError, IOFailureError
from treeutil.domain.models import NodeKind

logger = logging.getLogger(__name__)

PathArg = Union[str, "os.PathLike[str]", None]


def require_path(path: PathArg, argument: str = "path") -> str:
    """
    Coerce a path argument to str, rejecting absent or blank input.

    Args:
        path: Raw path argument (str or os.PathLike).
        argument: Parameter name used in the error message.

    Returns:
        str: The path as a string.

    Raises:
        InvalidArgumentError: If the path is None or empty.
    """
    if path is None:
        raise InvalidArgumentError(f"Argument '{argument}' must not be None", argument)
    p = os.fspath(path)
    if not p:
        raise InvalidArgumentError(f"Argument '{argument}' must not be empty", argument)
    return p


def classify(path: PathArg) -> NodeKind:
    """
    Observe what currently lives at 'path'.

    Args:
        path: Location to inspect; None classifies as ABSENT.

    Returns:
        NodeKind: FILE, DIRECTORY or ABSENT.
    """
    if path is None:
        return NodeKind.ABSENT
    p = os.fspath(path)
    if not p or not os.path.exists(p):
        return NodeKind.ABSENT
    if os.path.isdir(p):
        return NodeKind.DIRECTORY
    return NodeKind.FILE


def list_children(path: str, *, strict: bool = False) -> List[str]:
    """
    Enumerate the names of the direct children of a directory.

    Names come back in whatever order the operating system lists them;
    callers and tests must not rely on it.

    Args:
        path: Directory to enumerate.
        strict: If True, propagate listing failures instead of returning [].

    Returns:
        List[str]: Child names (not joined paths).

    Raises:
        IOFailureError: If listing fails and strict is set.
    """
    try:
        names = os.listdir(path)
    except OSError as e:
        if strict:
            raise IOFailureError(path, f"Cannot list directory ({describe_os_error(e)})") from e
        logger.warning(f"Cannot list directory '{path}': {e}. Treating it as empty.")
        return []
    return names


def describe_os_error(e: OSError) -> str:
    """Return the most readable message available for an OSError."""
    return e.strerror or str(e) or type(e).__name__
