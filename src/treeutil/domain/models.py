from __future__ import annotations

"""
Tree Domain Data Models.

Defines the node classification observed by the engine and the report
objects returned by the recursive delete walker.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

# -----------------------------------------------------------------------------
# NODE CLASSIFICATION
# -----------------------------------------------------------------------------

class NodeKind(Enum):
    """
    Classification of a filesystem location at the time it was observed.

    The engine holds no locks, so the kind may change between two
    observations of the same path.
    """
    FILE = "file"
    DIRECTORY = "directory"
    ABSENT = "absent"

# -----------------------------------------------------------------------------
# DELETE REPORTING
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DeleteFailure:
    """
    A single node the delete walker could not remove or enumerate.

    Attributes:
        path: Absolute path of the offending node.
        error: Descriptive message of the underlying failure.
    """
    path: str
    error: str


@dataclass
class DeleteReport:
    """
    Outcome of a recursive delete.

    Attributes:
        files_removed: Number of regular files unlinked.
        dirs_removed: Number of directories removed.
        failures: Nodes that could not be removed, in walk order.
    """
    files_removed: int = 0
    dirs_removed: int = 0
    failures: List[DeleteFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures
