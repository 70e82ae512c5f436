"""Tests for frontbrain.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from frontbrain.logging import configure_logging, get_logger


def test_get_logger_is_namespaced() -> None:
    assert get_logger().name == "frontbrain"
    assert get_logger("walker").name == "frontbrain.walker"


def test_configure_logging_resets_handlers(tmp_path: Path) -> None:
    log_file = tmp_path / "scan.log"
    configure_logging(verbose=True, log_file=log_file)
    logger = configure_logging(verbose=False)

    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_file_sink_receives_records(tmp_path: Path) -> None:
    log_file = tmp_path / "scan.log"
    logger = configure_logging(verbose=True, log_file=log_file)

    get_logger("registry").debug("registry file missing")
    for handler in logger.handlers:
        handler.flush()

    assert "registry file missing" in log_file.read_text(encoding="utf-8")
    configure_logging()
