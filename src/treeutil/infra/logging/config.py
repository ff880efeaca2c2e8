from __future__ import annotations

"""
Logging Settings.

Holds the options the CLI passes to configure_logging() and the level names
accepted in configuration files.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

LEVELS: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Where log records go and how verbose they are.

    Attributes:
        level: Level name from LEVELS; unknown names mean INFO.
        console: Write records to stderr.
        log_file: Optional file that also receives records, rotated by size.
        max_bytes: Size at which the log file is rotated.
        backup_count: Rotated files kept next to the active one.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None
    max_bytes: int = 1024 * 1024
    backup_count: int = 3

    @property
    def level_number(self) -> int:
        return LEVELS.get((self.level or "").strip().upper(), logging.INFO)
