"""Configuration loading for ngcomp (.ngcomp.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = ".ngcomp.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ExtensionConfig:
    """File extensions of the three component artifacts."""

    class_source: str = "ts"
    template: str = "html"
    stylesheet: str = "scss"


@dataclass
class NamingConfig:
    """Naming conventions for generated files and classes."""

    file_infix: str = "component"
    class_suffix: str = "Component"


@dataclass
class NgCompConfig:
    """Represents the settings defined in .ngcomp.yml."""

    root: Path
    extensions: ExtensionConfig = field(default_factory=ExtensionConfig)
    naming: NamingConfig = field(default_factory=NamingConfig)
    strict: bool = False
    log_file: Optional[Path] = None


def load_config(config_path: Path) -> NgCompConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return NgCompConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    extensions = ExtensionConfig()
    extension_data = _as_dict(data.get("extensions"))
    if extension_data:
        extensions.class_source = _as_extension(extension_data.get("class")) or extensions.class_source
        extensions.template = _as_extension(extension_data.get("template")) or extensions.template
        extensions.stylesheet = _as_extension(extension_data.get("stylesheet")) or extensions.stylesheet

    naming = NamingConfig()
    naming_data = _as_dict(data.get("naming"))
    if naming_data:
        infix = naming_data.get("file_infix")
        if infix is not None:
            # An empty infix is allowed and yields "<name>.<ext>" file names.
            naming.file_infix = _as_str(infix) or ""
        naming.class_suffix = _as_str(naming_data.get("class_suffix")) or naming.class_suffix

    rewrite_data = _as_dict(data.get("rewrite"))
    strict = _as_bool(rewrite_data.get("strict")) if rewrite_data else None

    logging_data = _as_dict(data.get("logging"))
    log_file_str = _as_str(logging_data.get("log_file")) if logging_data else None
    log_file = root / log_file_str if log_file_str else None

    return NgCompConfig(
        root=root,
        extensions=extensions,
        naming=naming,
        strict=bool(strict),
        log_file=log_file,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_extension(value: Any) -> Optional[str]:
    text = _as_str(value)
    if text is None:
        return None
    return text.strip().lstrip(".") or None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "ExtensionConfig",
    "NamingConfig",
    "NgCompConfig",
    "load_config",
]
