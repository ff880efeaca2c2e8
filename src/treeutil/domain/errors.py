from __future__ import annotations

"""
Tree Engine Error Taxonomy.

Every failure raised by the engine derives from TreeUtilError. The concrete
classes also inherit the matching builtin (ValueError / OSError) so callers
that only know the standard hierarchy still catch them.
"""

from typing import Optional


class TreeUtilError(Exception):
    """Base exception class for the tree engine."""

    pass


class InvalidArgumentError(TreeUtilError, ValueError):
    """A required path (or parameter) is absent, empty or out of range."""

    def __init__(self, message: str, argument: Optional[str] = None) -> None:
        self.argument = argument
        super().__init__(message)


class IOFailureError(TreeUtilError, OSError):
    """An underlying read/write/create/delete call failed."""

    def __init__(self, path: Optional[str], message: str) -> None:
        self.path = path
        super().__init__(f"{message}: {path}" if path else message)


class MalformedInputError(TreeUtilError, ValueError):
    """A size literal does not follow the magnitude/unit grammar."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        super().__init__(f"Malformed size literal '{text}': {reason}")
