"""Logging setup for ngcomp: console output plus the log file named in .ngcomp.yml."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from .config import NgCompConfig

LOGGER_NAME = "ngcomp"
CONSOLE_FORMAT = "[ngcomp] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``ngcomp.<name>``, e.g. ``get_logger("orchestrator")``."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}" if name else LOGGER_NAME)


def configure_logging(
    *, verbose: bool = False, config: "NgCompConfig | None" = None
) -> logging.Logger:
    """Install ngcomp's handlers, replacing any installed by an earlier call.

    Messages go to stderr; when ``config.log_file`` is set they are also
    appended to that file, whose folder is created if needed.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    for handler in _build_handlers(config.log_file if config is not None else None):
        handler.setLevel(level)
        logger.addHandler(handler)

    return logger


def _build_handlers(log_file: Path | None) -> List[logging.Handler]:
    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    handlers: List[logging.Handler] = [console]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        sink = logging.FileHandler(log_file, encoding="utf-8")
        sink.setFormatter(logging.Formatter(FILE_FORMAT))
        handlers.append(sink)
    return handlers


__all__ = ["LOGGER_NAME", "configure_logging", "get_logger"]
