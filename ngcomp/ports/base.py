"""Host integration contracts used by the extraction orchestrator."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from ..models import SourceDocument


class EditorPort(ABC):
    """Access to the active document, the user's selection and user feedback."""

    @abstractmethod
    def active_document(self) -> Optional[SourceDocument]:
        """Return the document in focus, or None when nothing is open."""

    @abstractmethod
    def selection_text(self) -> str:
        """Return the currently selected text (empty when nothing is selected)."""

    @abstractmethod
    async def prompt(self, placeholder: str) -> Optional[str]:
        """Ask the user for a single line of text; None when cancelled."""

    @abstractmethod
    async def show_error(self, message: str) -> None:
        """Display an error message to the user."""


class FileSystemPort(ABC):
    """Asynchronous byte-level file access. Every call may fail with OSError."""

    @abstractmethod
    async def read(self, path: Path) -> bytes:
        """Return the full contents of ``path``."""

    @abstractmethod
    async def write(self, path: Path, data: bytes) -> None:
        """Create or overwrite ``path`` with ``data``."""

    @abstractmethod
    async def create_directory(self, path: Path) -> None:
        """Create ``path`` and any missing parents."""
