"""Rewrites component metadata inside a duplicated class source."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

SELECTOR = "selector"
TEMPLATE_URL = "templateUrl"
STYLE_URLS = "styleUrls"
CLASS_NAME = "className"

# Patterns never cross a line boundary: ``.`` does not match newlines.
_FIELD_PATTERNS: Tuple[Tuple[str, re.Pattern[str]], ...] = (
    (SELECTOR, re.compile(r"selector:.*,")),
    (TEMPLATE_URL, re.compile(r"templateUrl:.*,")),
    (STYLE_URLS, re.compile(r"styleUrls.*,")),
    (CLASS_NAME, re.compile(r"export class.*{")),
)

FIELD_NAMES: Tuple[str, ...] = tuple(name for name, _ in _FIELD_PATTERNS)


@dataclass(frozen=True)
class MetadataField:
    """Location of a recognised metadata field in the source text."""

    name: str
    start: int
    end: int
    text: str

    def overlaps(self, other: "MetadataField") -> bool:
        return self.start < other.end and other.start < self.end


@dataclass(frozen=True)
class RewriteOptions:
    """Target values for the rewritten component."""

    selector: str
    template_url: str
    style_url: str
    class_name: str
    class_suffix: str = "Component"


@dataclass(frozen=True)
class RewriteResult:
    """Rewritten source text and the fields that could not be located."""

    text: str
    missing: List[str]

    @property
    def complete(self) -> bool:
        return not self.missing


def _render_selector(value: str, _: str) -> str:
    return f"selector: '{value}',"


def _render_template_url(value: str, _: str) -> str:
    return f"templateUrl: '{value}',"


def _render_style_urls(value: str, _: str) -> str:
    return f"styleUrls: ['{value}'],"


def _render_class_name(value: str, suffix: str) -> str:
    return f"export class {value}{suffix} {{"


_RENDERERS: Dict[str, Callable[[str, str], str]] = {
    SELECTOR: _render_selector,
    TEMPLATE_URL: _render_template_url,
    STYLE_URLS: _render_style_urls,
    CLASS_NAME: _render_class_name,
}


@dataclass
class ComponentMetadata:
    """Structured view over the four metadata fields of a component class.

    Each field records the first textual match of its pattern that does not
    overlap a field located earlier; replacing the earlier field consumes the
    overlapped text.
    """

    source: str
    fields: Dict[str, MetadataField]
    class_suffix: str = "Component"
    values: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def parse(cls, source: str, *, class_suffix: str = "Component") -> "ComponentMetadata":
        located: Dict[str, MetadataField] = {}
        for name, pattern in _FIELD_PATTERNS:
            for match in pattern.finditer(source):
                candidate = MetadataField(
                    name=name, start=match.start(), end=match.end(), text=match.group(0)
                )
                if any(candidate.overlaps(existing) for existing in located.values()):
                    continue
                located[name] = candidate
                break
        return cls(source=source, fields=located, class_suffix=class_suffix)

    @property
    def missing(self) -> List[str]:
        return [name for name in FIELD_NAMES if name not in self.fields]

    def get(self, name: str) -> Optional[str]:
        """Return the pending value for ``name`` or None when unchanged."""
        self._check_name(name)
        return self.values.get(name)

    def set(self, name: str, value: str) -> None:
        self._check_name(name)
        self.values[name] = value

    def render(self) -> str:
        """Serialise the source with every located, assigned field replaced."""
        pieces: List[str] = []
        cursor = 0
        for located in sorted(self.fields.values(), key=lambda item: item.start):
            value = self.values.get(located.name)
            if value is None:
                continue
            pieces.append(self.source[cursor : located.start])
            pieces.append(_RENDERERS[located.name](value, self.class_suffix))
            cursor = located.end
        pieces.append(self.source[cursor:])
        return "".join(pieces)

    @staticmethod
    def _check_name(name: str) -> None:
        if name not in _RENDERERS:
            raise KeyError(f"Unknown metadata field '{name}'")


def prepare_component_code(source: str, options: RewriteOptions) -> RewriteResult:
    """Point a copied component class at its new selector, template, styles and name."""
    metadata = ComponentMetadata.parse(source, class_suffix=options.class_suffix)
    metadata.set(SELECTOR, options.selector)
    metadata.set(TEMPLATE_URL, options.template_url)
    metadata.set(STYLE_URLS, options.style_url)
    metadata.set(CLASS_NAME, options.class_name)
    return RewriteResult(text=metadata.render(), missing=metadata.missing)


__all__ = [
    "CLASS_NAME",
    "ComponentMetadata",
    "FIELD_NAMES",
    "MetadataField",
    "RewriteOptions",
    "RewriteResult",
    "SELECTOR",
    "STYLE_URLS",
    "TEMPLATE_URL",
    "prepare_component_code",
]
