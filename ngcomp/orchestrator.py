"""Coordinates extraction of a template fragment into a new component."""

from __future__ import annotations

import threading
from contextlib import asynccontextmanager, contextmanager
from pathlib import Path
from typing import AsyncIterator, Iterator, Optional, Set

from .config import NgCompConfig
from .errors import ExtractionInProgressError, MissingMetadataError
from .logging import get_logger
from .models import (
    ArtifactPaths,
    ComponentName,
    ExtractionRequest,
    GeneratedArtifactSet,
    SourceDocument,
)
from .ports.base import EditorPort, FileSystemPort
from .ports.local import LocalFileSystem
from .rewriter import RewriteOptions, prepare_component_code

NAME_PLACEHOLDER = "Enter new component name"
EMPTY_NAME_MESSAGE = "Component name cannot be empty"
MISSING_FOLDER_MESSAGE = "Can't find current folder"


class InFlightGuard:
    """Tracks target directories with an extraction in progress."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._active: Set[Path] = set()

    @contextmanager
    def claim(self, target: Path) -> Iterator[None]:
        with self._lock:
            if target in self._active:
                raise ExtractionInProgressError(target)
            self._active.add(target)
        try:
            yield
        finally:
            with self._lock:
                self._active.discard(target)

    def is_active(self, target: Path) -> bool:
        with self._lock:
            return target in self._active


class ExtractionOrchestrator:
    """Turns the editor's selection into a component directory with three files."""

    def __init__(
        self,
        editor: EditorPort,
        fs: FileSystemPort | None = None,
        config: NgCompConfig | None = None,
        guard: InFlightGuard | None = None,
    ) -> None:
        self.editor = editor
        self.fs = fs or LocalFileSystem()
        self.config = config or NgCompConfig(root=Path.cwd())
        self.guard = guard or InFlightGuard()
        self.logger = get_logger("orchestrator")

    async def run(self) -> Optional[GeneratedArtifactSet]:
        """Execute the extract command against the current editor state.

        Returns None when the command aborts. An empty selection aborts without
        telling the user; an empty name or an unresolvable folder shows an error.
        """
        document = self.editor.active_document()
        if document is None:
            self.logger.debug("No active document; nothing to extract")
            return None

        selection = self.editor.selection_text()
        if not selection:
            self.logger.debug("Selection is empty; nothing to extract")
            return None

        raw_name = await self.editor.prompt(NAME_PLACEHOLDER)
        if not raw_name:
            await self.editor.show_error(EMPTY_NAME_MESSAGE)
            return None

        directory = resolve_directory(document)
        if directory is None:
            await self.editor.show_error(MISSING_FOLDER_MESSAGE)
            return None

        request = ExtractionRequest(
            selection=selection,
            name=ComponentName(raw_name),
            directory=directory,
        )
        return await self.extract(document, request)

    async def extract(
        self, document: SourceDocument, request: ExtractionRequest
    ) -> GeneratedArtifactSet:
        """Write the stylesheet, class source and template for ``request``.

        Files already written stay in place when a later step fails.
        """
        dashed = request.name.dashed
        paths = self._artifact_paths(request.directory, dashed)
        self.logger.info("Extracting component '%s' into %s", request.name.raw, paths.directory)

        with self.guard.claim(paths.directory.resolve()):
            async with self._artifact_directory(paths):
                await self._write_styles(document, paths)
                missing = await self._write_component_class(document, paths, request.name)
                await self.fs.write(paths.template, request.selection.encode("utf-8"))
                self.logger.debug("Wrote template %s", paths.template)

        self.logger.info("Created component %s", paths.class_source)
        return GeneratedArtifactSet(paths=paths, missing_fields=missing)

    def _artifact_paths(self, parent: Path, dashed: str) -> ArtifactPaths:
        extensions = self.config.extensions
        return ArtifactPaths.build(
            parent,
            dashed,
            infix=self.config.naming.file_infix,
            class_extension=extensions.class_source,
            template_extension=extensions.template,
            stylesheet_extension=extensions.stylesheet,
        )

    @asynccontextmanager
    async def _artifact_directory(self, paths: ArtifactPaths) -> AsyncIterator[Path]:
        # Dependent writes only start once the directory exists.
        await self.fs.create_directory(paths.directory)
        yield paths.directory

    async def _write_styles(self, document: SourceDocument, paths: ArtifactPaths) -> None:
        source = document.sibling(self.config.extensions.stylesheet)
        styles = await self.fs.read(source)
        await self.fs.write(paths.stylesheet, styles)
        self.logger.debug("Copied styles from %s to %s", source, paths.stylesheet)

    async def _write_component_class(
        self, document: SourceDocument, paths: ArtifactPaths, name: ComponentName
    ) -> list[str]:
        source = document.sibling(self.config.extensions.class_source)
        code = await self.fs.read(source)

        result = prepare_component_code(
            code.decode("utf-8"),
            RewriteOptions(
                selector=name.dashed,
                template_url=f"./{paths.template.name}",
                style_url=f"./{paths.stylesheet.name}",
                class_name=name.classified,
                class_suffix=self.config.naming.class_suffix,
            ),
        )
        if result.missing:
            if self.config.strict:
                raise MissingMetadataError(source, result.missing)
            self.logger.warning(
                "Could not find %s in %s; left unchanged",
                ", ".join(result.missing),
                source,
            )

        await self.fs.write(paths.class_source, result.text.encode("utf-8"))
        self.logger.debug("Wrote component class %s", paths.class_source)
        return result.missing


def resolve_directory(document: SourceDocument) -> Optional[Path]:
    """Return the resolved folder containing ``document`` or None if it has none."""
    if document.path is None or not document.path.name:
        return None
    return document.path.resolve().parent


__all__ = [
    "EMPTY_NAME_MESSAGE",
    "ExtractionOrchestrator",
    "InFlightGuard",
    "MISSING_FOLDER_MESSAGE",
    "NAME_PLACEHOLDER",
    "resolve_directory",
]
