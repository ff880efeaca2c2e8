from __future__ import annotations

"""
Directory and File Materialization.

Ensures that a directory (with all missing ancestors) or an empty regular
file exists. Existing nodes are never overwritten: an existing file blocks
directory creation and an existing node of either kind satisfies file
creation as-is.
"""

import logging
import os

from treeutil.core.nodes import PathArg, classify, describe_os_error, require_path
from treeutil.domain.errors import IOFailureError
from treeutil.domain.models import NodeKind

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def ensure_directory(path: PathArg) -> bool:
    """
    Recursively create a directory and every missing ancestor.

    Relative paths are resolved against the current working directory before
    the ancestors are walked. Recursion depth equals the number of missing
    levels.

    An absent path raises instead of returning False: False is kept for the
    one case where a regular file blocks the directory.

    Args:
        path: Directory to materialize, e.g. "d:/aaa/bbb/ccc".

    Returns:
        bool: True iff a directory exists at 'path' after the call. False if
              'path' (or one of its ancestors) is a regular file.

    Raises:
        InvalidArgumentError: If 'path' is None or empty.
        IOFailureError: If a directory level cannot be created.
    """
    p = require_path(path)
    kind = classify(p)
    if kind is NodeKind.DIRECTORY:
        return True
    if kind is NodeKind.FILE:
        logger.debug(f"Refusing to create directory over existing file: {p}")
        return False

    p = os.path.abspath(p)
    parent = os.path.dirname(p)
    if parent == p:
        # Missing filesystem root (e.g. an unmounted drive)
        return False
    if not ensure_directory(parent):
        return False

    try:
        os.mkdir(p)
        logger.debug(f"Created directory: {p}")
    except FileExistsError:
        # Lost a race with another creator; the final check decides
        pass
    except OSError as e:
        raise IOFailureError(p, f"Cannot create directory ({describe_os_error(e)})") from e

    return os.path.isdir(p)


def ensure_file(path: PathArg) -> str:
    """
    Create an empty regular file, creating its parent directories first.

    If a file or directory already exists at 'path' it is returned unchanged.

    Args:
        path: File to materialize.

    Returns:
        str: The path, as given.

    Raises:
        InvalidArgumentError: If 'path' is None or empty.
        IOFailureError: If the parent directory or the file cannot be created.
    """
    p = require_path(path)
    if classify(p) is not NodeKind.ABSENT:
        return p

    parent = os.path.dirname(os.path.abspath(p))
    if not ensure_directory(parent):
        raise IOFailureError(parent, "Cannot create parent directory")

    try:
        with open(p, "xb"):
            pass
        logger.debug(f"Created empty file: {p}")
    except FileExistsError:
        pass
    except OSError as e:
        raise IOFailureError(p, f"Cannot create file ({describe_os_error(e)})") from e

    return p
