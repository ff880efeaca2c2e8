from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Resolves the per-user application data directory and normalizes raw path
arguments coming from the command line or configuration files. Acts as an
abstraction over the 'os' module to keep Windows and Unix-like behavior
uniform.
"""

import os
from typing import Optional

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "treeutil"
UNIX_APP_DIR_NAME = ".treeutil"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/treeutil
    - Linux/Mac: ~/.treeutil

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    # Posix fallback (Linux/Mac)
    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

    # Idempotent directory creation; a read-only home is not fatal here
    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def normalize_path(path: Optional[str]) -> Optional[str]:
    """
    Expand environment variables ($VAR/%VAR%) and user home shortcuts (~/).

    The path is not made absolute; the engine resolves relative paths itself
    so that relative inputs keep their meaning in logs and results.

    Args:
        path: Raw input path string.

    Returns:
        Optional[str]: Expanded path, or None if the input is blank.
    """
    p = (path or "").strip()
    if not p:
        return None
    return os.path.expandvars(os.path.expanduser(p))
