from __future__ import annotations

from .config import LEVELS, LoggingConfig
from .core import configure_logging, shutdown_logging

__all__ = [
    "LEVELS",
    "LoggingConfig",
    "configure_logging",
    "shutdown_logging",
]
