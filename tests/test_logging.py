"""Tests for ngcomp.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from ngcomp.config import NgCompConfig
from ngcomp.logging import LOGGER_NAME, configure_logging, get_logger


def test_get_logger_nests_under_project_logger() -> None:
    assert get_logger().name == LOGGER_NAME
    assert get_logger("orchestrator").name == "ngcomp.orchestrator"


def test_configure_logging_console_only_by_default() -> None:
    logger = configure_logging(verbose=True)

    assert logger.level == logging.DEBUG
    assert logger.propagate is False
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)


def test_configure_logging_adds_file_sink_from_config(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "nested" / "ngcomp.log"
    config = NgCompConfig(root=tmp_path, log_file=log_file)

    logger = configure_logging(config=config)
    get_logger("orchestrator").info("Created component %s", "card")
    get_logger("fs").debug("hidden at INFO")
    configure_logging()

    text = log_file.read_text(encoding="utf-8")
    assert "INFO ngcomp.orchestrator: Created component card" in text
    assert "hidden at INFO" not in text
    assert logger.level == logging.INFO


def test_configure_logging_replaces_previous_handlers(tmp_path: Path) -> None:
    config = NgCompConfig(root=tmp_path, log_file=tmp_path / "ngcomp.log")

    configure_logging(config=config)
    logger = configure_logging(config=config)
    assert len(logger.handlers) == 2

    logger = configure_logging()
    assert len(logger.handlers) == 1
    assert not any(isinstance(handler, logging.FileHandler) for handler in logger.handlers)
