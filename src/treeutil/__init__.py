"""
treeutil: filesystem tree toolkit.

Path decomposition, recursive directory and file materialization, chunked
copy, move, tree size, size-literal parsing and recursive delete.
"""

__version__ = "1.0.0"

from .core.copier import copy_file, copy_stream, copy_tree
from .core.deleter import delete
from .core.materialize import ensure_directory, ensure_file
from .core.mover import move
from .core.nodes import classify, list_children
from .core.paths import base_name, extension, extension_index, last_separator_index, stem
from .core.sizing import directory_size, format_size, parse_size_literal
from .domain.errors import (
    InvalidArgumentError,
    IOFailureError,
    MalformedInputError,
    TreeUtilError,
)
from .domain.models import DeleteFailure, DeleteReport, NodeKind

__all__ = [
    "base_name",
    "classify",
    "copy_file",
    "copy_stream",
    "copy_tree",
    "delete",
    "directory_size",
    "ensure_directory",
    "ensure_file",
    "extension",
    "extension_index",
    "format_size",
    "last_separator_index",
    "list_children",
    "move",
    "parse_size_literal",
    "stem",
    "DeleteFailure",
    "DeleteReport",
    "InvalidArgumentError",
    "IOFailureError",
    "MalformedInputError",
    "NodeKind",
    "TreeUtilError",
]
