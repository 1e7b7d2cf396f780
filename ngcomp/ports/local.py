"""File-system port backed by the local disk."""

from __future__ import annotations

import asyncio
from pathlib import Path

from ..logging import get_logger
from .base import FileSystemPort


class LocalFileSystem(FileSystemPort):
    """Runs pathlib I/O in worker threads so the event loop stays responsive."""

    def __init__(self) -> None:
        self.logger = get_logger("fs")

    async def read(self, path: Path) -> bytes:
        self.logger.debug("Reading %s", path)
        return await asyncio.to_thread(path.read_bytes)

    async def write(self, path: Path, data: bytes) -> None:
        self.logger.debug("Writing %d bytes to %s", len(data), path)
        await asyncio.to_thread(path.write_bytes, data)

    async def create_directory(self, path: Path) -> None:
        self.logger.debug("Creating directory %s", path)
        await asyncio.to_thread(path.mkdir, parents=True, exist_ok=True)


__all__ = ["LocalFileSystem"]
