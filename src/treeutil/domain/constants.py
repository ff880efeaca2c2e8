from __future__ import annotations

"""
Domain Constants.

Centralizes the separator characters, transfer window sizes, binary size
units and configuration versioning shared by the tree engine and its
interfaces.
"""

from typing import Dict

CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# PATH GRAMMAR
# -----------------------------------------------------------------------------

UNIX_SEPARATOR = "/"
WINDOWS_SEPARATOR = "\\"
EXTENSION_SEPARATOR = "."

# -----------------------------------------------------------------------------
# TRANSFER WINDOWS
# -----------------------------------------------------------------------------

# Window used for chunked file-to-file transfers (2 MiB)
CHUNK_SIZE: int = 2 * 1024 * 1024

# Read buffer used when draining an arbitrary binary stream into a file
STREAM_BUFFER_SIZE: int = 8 * 1024

# -----------------------------------------------------------------------------
# SIZE UNITS (binary multipliers)
# -----------------------------------------------------------------------------

KB: int = 1024
MB: int = KB * 1024
GB: int = MB * 1024

SIZE_UNITS: Dict[str, int] = {
    "B": 1,
    "K": KB,
    "M": MB,
    "G": GB,
}
