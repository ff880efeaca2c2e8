from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies idempotency of configuration, forced re-configuration, handler
ownership, log file rotation and the clean shutdown used by the CLI.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from treeutil.infra.logging import LoggingConfig, configure_logging, shutdown_logging
from treeutil.infra.logging.core import _owned_handlers


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach our handlers before and after each test."""
    shutdown_logging()
    yield
    shutdown_logging()


def _ours() -> list:
    return _owned_handlers(logging.getLogger())


def test_logging_idempotency() -> None:
    """TC-01: Verify that multiple config calls do not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    initial_handler_count = len(logging.getLogger().handlers)

    configure_logging(cfg)
    assert len(logging.getLogger().handlers) == initial_handler_count, "Handlers were duplicated."


def test_force_rebuilds_handlers_and_level() -> None:
    """TC-02: force=True replaces our handlers and applies the new level."""
    configure_logging(LoggingConfig(level="INFO"))
    first = _ours()

    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(_ours()) == 1
    assert _ours()[0] is not first[0]
    assert _ours()[0].level == logging.DEBUG


def test_unknown_level_name_means_info() -> None:
    """TC-03: An unrecognised level name falls back to INFO."""
    assert LoggingConfig(level="chatty").level_number == logging.INFO
    assert LoggingConfig(level=" debug ").level_number == logging.DEBUG


def test_foreign_handlers_survive_reconfiguration() -> None:
    """TC-04: Handlers installed by other code are never removed."""
    foreign = logging.NullHandler()
    root = logging.getLogger()
    root.addHandler(foreign)
    try:
        configure_logging(LoggingConfig(level="INFO"))
        configure_logging(LoggingConfig(level="WARNING"), force=True)
        shutdown_logging()
        assert foreign in root.handlers
    finally:
        root.removeHandler(foreign)


def test_log_file_receives_records_and_rotates(tmp_path: Path) -> None:
    """TC-05: The file handler writes records and rotates past max_bytes."""
    log_file = tmp_path / "logs" / "test_rotate.log"
    cfg = LoggingConfig(
        level="DEBUG",
        console=False,
        log_file=str(log_file),
        max_bytes=100,
        backup_count=1,
    )

    configure_logging(cfg)
    assert isinstance(_ours()[0], RotatingFileHandler)

    logger = logging.getLogger("test_rotate")
    for _ in range(10):
        logger.debug("This is a long log message to trigger rotation." * 5)
    shutdown_logging()

    assert "DEBUG | test_rotate |" in log_file.read_text(encoding="utf-8")
    assert (log_file.parent / "test_rotate.log.1").exists(), "Rotation backup file was not created."


def test_unwritable_log_file_falls_back_to_console(tmp_path: Path, capsys) -> None:
    """TC-06: A log file that cannot be opened is reported, not fatal."""
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")

    configure_logging(LoggingConfig(level="INFO", log_file=str(blocker / "app.log")))

    assert "unavailable" in capsys.readouterr().err
    assert len(_ours()) == 1
    assert type(_ours()[0]) is logging.StreamHandler


def test_console_output_format(capsys) -> None:
    """TC-07: Console records are written to stderr as 'LEVEL | message'."""
    configure_logging(LoggingConfig(level="INFO"))

    logging.getLogger("treeutil.test").warning("disk almost full")

    assert "WARNING | disk almost full" in capsys.readouterr().err


def test_shutdown_resets_state() -> None:
    """TC-08: After shutdown the next configure call starts from scratch."""
    configure_logging(LoggingConfig(level="INFO"))
    shutdown_logging()

    assert _ours() == []
    configure_logging(LoggingConfig(level="INFO"))
    assert len(_ours()) == 1

    shutdown_logging()
    shutdown_logging()
    assert _ours() == []
