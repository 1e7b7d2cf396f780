"""Editor adapters for the command-line and service hosts."""

from __future__ import annotations

import asyncio
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, TextIO

from ..logging import get_logger
from ..models import SourceDocument
from .base import EditorPort

_RANGE_PATTERN = re.compile(r"^\s*(\d+)\s*(?:[:-]\s*(\d+))?\s*$")


@dataclass(frozen=True)
class LineRange:
    """Inclusive, 1-based range of lines used as the selection."""

    start: int
    end: int

    @classmethod
    def parse(cls, value: str) -> "LineRange":
        """Parse ``START:END``, ``START-END`` or a single line number."""
        match = _RANGE_PATTERN.match(value)
        if match is None:
            raise ValueError(f"Invalid line range '{value}', expected START:END")
        start = int(match.group(1))
        end = int(match.group(2)) if match.group(2) else start
        if start < 1 or end < start:
            raise ValueError(f"Invalid line range '{value}', expected 1 <= START <= END")
        return cls(start=start, end=end)

    def select(self, text: str) -> str:
        lines = text.splitlines(keepends=True)
        return "".join(lines[self.start - 1 : self.end])


class ConsoleEditor(EditorPort):
    """Terminal-backed editor: the document and selection come from CLI arguments."""

    def __init__(
        self,
        document: Optional[SourceDocument],
        selection: str,
        *,
        name: Optional[str] = None,
        input_fn: Optional[Callable[[str], str]] = None,
        error_stream: TextIO | None = None,
    ) -> None:
        self._document = document
        self._selection = selection
        self._name = name
        self._input_fn = input_fn or input
        self._error_stream = error_stream
        self.logger = get_logger("editor")

    @classmethod
    def from_arguments(
        cls,
        document_path: Path,
        *,
        lines: Optional[LineRange] = None,
        selection_file: Optional[str] = None,
        name: Optional[str] = None,
    ) -> "ConsoleEditor":
        path = document_path.expanduser().resolve()
        text = path.read_text(encoding="utf-8")
        if selection_file == "-":
            selection = sys.stdin.read()
        elif selection_file:
            selection = Path(selection_file).expanduser().read_text(encoding="utf-8")
        elif lines is not None:
            selection = lines.select(text)
        else:
            selection = ""
        return cls(SourceDocument(path=path, text=text), selection, name=name)

    def active_document(self) -> Optional[SourceDocument]:
        return self._document

    def selection_text(self) -> str:
        return self._selection

    async def prompt(self, placeholder: str) -> Optional[str]:
        if self._name is not None:
            return self._name
        try:
            answer = await asyncio.to_thread(self._input_fn, f"{placeholder}: ")
        except EOFError:
            return None
        return answer.strip()

    async def show_error(self, message: str) -> None:
        self.logger.debug("Reporting error to user: %s", message)
        stream = self._error_stream or sys.stderr
        print(message, file=stream)


class RequestEditor(EditorPort):
    """Editor state supplied by a single service request; errors are collected."""

    def __init__(
        self,
        document_path: Optional[str],
        selection: str,
        name: Optional[str],
        *,
        document_text: str = "",
    ) -> None:
        path = Path(document_path).expanduser() if document_path else None
        self._document = SourceDocument(path=path, text=document_text)
        self._selection = selection
        self._name = name
        self.errors: List[str] = []

    def active_document(self) -> Optional[SourceDocument]:
        return self._document

    def selection_text(self) -> str:
        return self._selection

    async def prompt(self, placeholder: str) -> Optional[str]:
        return self._name

    async def show_error(self, message: str) -> None:
        self.errors.append(message)


__all__ = ["ConsoleEditor", "LineRange", "RequestEditor"]
