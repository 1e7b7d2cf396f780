"""Exceptions raised by component extraction."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class ExtractionError(RuntimeError):
    """Base class for extraction failures that abort a single invocation."""


class ExtractionInProgressError(ExtractionError):
    """Raised when another extraction already targets the same directory."""

    def __init__(self, target: Path) -> None:
        super().__init__(f"An extraction into {target} is already running")
        self.target = target


class MissingMetadataError(ExtractionError):
    """Raised in strict mode when the class source lacks metadata fields."""

    def __init__(self, source: Path, missing: Sequence[str]) -> None:
        names = ", ".join(missing)
        super().__init__(f"{source} is missing component metadata: {names}")
        self.source = source
        self.missing = list(missing)


__all__ = ["ExtractionError", "ExtractionInProgressError", "MissingMetadataError"]
