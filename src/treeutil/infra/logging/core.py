from __future__ import annotations

"""
Logging Bootstrap.

Attaches the CLI's handlers to the root logger: a terse stderr console and,
when requested, a timestamped log file rotated by size. Handlers installed
here are marked, so reconfiguration and shutdown never detach handlers that
belong to someone else (a host application, pytest's capture handler).
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from treeutil.infra.logging.config import LoggingConfig

_OWNED_MARKER = "_treeutil_owned"

CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Install the console and file handlers on the root logger.

    Calling it again is a no-op while our handlers are attached, unless
    'force' is set; then they are closed and rebuilt from 'cfg'.

    Args:
        cfg: Logging settings.
        force: Rebuild the handlers even if already configured.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    current = _owned_handlers(root)
    if current and not force:
        return root

    _detach(root, current)
    root.setLevel(cfg.level_number)
    for handler in _build_handlers(cfg):
        handler.setLevel(cfg.level_number)
        setattr(handler, _OWNED_MARKER, True)
        root.addHandler(handler)
    return root


def shutdown_logging() -> None:
    """Flush, close and detach every handler configure_logging() installed."""
    root = logging.getLogger()
    _detach(root, _owned_handlers(root))


def _build_handlers(cfg: LoggingConfig) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []
    if cfg.console:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handlers.append(console)
    if cfg.log_file:
        log_file = _open_log_file(cfg)
        if log_file is not None:
            handlers.append(log_file)
    return handlers


def _open_log_file(cfg: LoggingConfig) -> Optional[RotatingFileHandler]:
    """
    Open the rotating log file, creating its directory first.

    A log file that cannot be opened is reported on stderr and skipped; it
    must not stop the filesystem operation the user asked for.
    """
    try:
        os.makedirs(os.path.dirname(os.path.abspath(cfg.log_file)), exist_ok=True)
        handler = RotatingFileHandler(
            cfg.log_file,
            maxBytes=cfg.max_bytes,
            backupCount=cfg.backup_count,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"treeutil: log file '{cfg.log_file}' unavailable ({e}), console only\n")
        return None
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=FILE_DATE_FORMAT))
    return handler


def _owned_handlers(root: logging.Logger) -> List[logging.Handler]:
    return [h for h in root.handlers if getattr(h, _OWNED_MARKER, False)]


def _detach(root: logging.Logger, handlers: List[logging.Handler]) -> None:
    for h in handlers:
        root.removeHandler(h)
        h.close()
