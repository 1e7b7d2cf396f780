"""Core data models shared across ngcomp components."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .naming import classify, dasherize


@dataclass(frozen=True)
class ComponentName:
    """User-entered component name and its derived identifiers."""

    raw: str

    def __post_init__(self) -> None:
        if not self.raw:
            raise ValueError("Component name cannot be empty")

    @property
    def dashed(self) -> str:
        return dasherize(self.raw)

    @property
    def classified(self) -> str:
        return classify(self.raw)


@dataclass(frozen=True)
class SourceDocument:
    """The document open in the editor. ``path`` is None for unsaved buffers."""

    path: Optional[Path]
    text: str = ""

    def sibling(self, extension: str) -> Path:
        """Return the path sharing this document's base name with ``extension``."""
        if self.path is None:
            raise ValueError("Document has no file path")
        return self.path.with_suffix(f".{extension}")


@dataclass(frozen=True)
class ExtractionRequest:
    """Complete input to one extraction."""

    selection: str
    name: ComponentName
    directory: Path


@dataclass(frozen=True)
class ArtifactPaths:
    """Target locations for a generated component."""

    directory: Path
    class_source: Path
    template: Path
    stylesheet: Path

    @classmethod
    def build(
        cls,
        parent: Path,
        dashed: str,
        *,
        infix: str = "component",
        class_extension: str = "ts",
        template_extension: str = "html",
        stylesheet_extension: str = "scss",
    ) -> "ArtifactPaths":
        directory = parent / dashed
        stem = f"{dashed}.{infix}" if infix else dashed
        return cls(
            directory=directory,
            class_source=directory / f"{stem}.{class_extension}",
            template=directory / f"{stem}.{template_extension}",
            stylesheet=directory / f"{stem}.{stylesheet_extension}",
        )


@dataclass
class GeneratedArtifactSet:
    """Files written by a successful extraction."""

    paths: ArtifactPaths
    missing_fields: List[str] = field(default_factory=list)

    @property
    def directory(self) -> Path:
        return self.paths.directory

    def files(self) -> List[Path]:
        return [self.paths.class_source, self.paths.template, self.paths.stylesheet]


__all__ = [
    "ArtifactPaths",
    "ComponentName",
    "ExtractionRequest",
    "GeneratedArtifactSet",
    "SourceDocument",
]
