from __future__ import annotations

"""
Operation Result Data Models.

Defines the result object used to communicate the outcome of a single
engine operation between the CLI controller and its renderers.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class OperationResult:
    """
    Unified result of one CLI-driven engine operation.

    Attributes:
        ok: Flag indicating success or failure.
        command: Subcommand that produced the result (e.g. 'copy').
        error: Descriptive message in case of failure.
        target: Primary path (or literal) the operation acted upon.
        payload: Operation-specific values (sizes, counts, path parts).
    """
    ok: bool
    command: str
    error: str = ""
    target: str = ""
    payload: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_success_result(
        command: str,
        target: str,
        payload: Optional[Dict[str, Any]] = None,
) -> OperationResult:
    """
    Create a successful operation result.

    Args:
        command: Subcommand identifier.
        target: Path or literal the operation acted upon.
        payload: Operation-specific result values.

    Returns:
        OperationResult: An immutable success result object.
    """
    return OperationResult(
        ok=True,
        command=command,
        target=target,
        payload=payload or {},
    )


def create_error_result(
        command: str,
        target: str,
        error: str,
        payload: Optional[Dict[str, Any]] = None,
) -> OperationResult:
    """
    Create a failed operation result.

    Args:
        command: Subcommand identifier.
        target: Path or literal the operation acted upon.
        error: Detailed error description.
        payload: Partial values gathered before the failure.

    Returns:
        OperationResult: An immutable error result object.
    """
    return OperationResult(
        ok=False,
        command=command,
        error=error,
        target=target,
        payload=payload or {},
    )
