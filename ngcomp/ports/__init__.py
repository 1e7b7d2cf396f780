"""Editor and file-system ports with their bundled adapters."""

from .base import EditorPort, FileSystemPort
from .editors import ConsoleEditor, LineRange, RequestEditor
from .local import LocalFileSystem

__all__ = [
    "ConsoleEditor",
    "EditorPort",
    "FileSystemPort",
    "LineRange",
    "LocalFileSystem",
    "RequestEditor",
]
