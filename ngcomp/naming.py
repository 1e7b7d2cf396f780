"""Conversions between component naming conventions."""

from __future__ import annotations

import re

_UPPERCASE = re.compile(r"[A-Z]")
_FIRST_CHAR = re.compile(r"^.")
_SEPARATOR_RUN = re.compile(r"[-_\s]+(.)?")


def dasherize(value: str) -> str:
    """Return the kebab-case form of ``value`` (``FooBar`` -> ``foo-bar``)."""

    def _replace(match: re.Match[str]) -> str:
        prefix = "-" if match.start() != 0 else ""
        return prefix + match.group(0).lower()

    return _UPPERCASE.sub(_replace, value).lower()


def classify(value: str) -> str:
    """Return the Pascal-case form of ``value`` (``foo-bar`` -> ``FooBar``).

    Runs of dashes, underscores and whitespace are removed and the character
    following each run is uppercased. A run at the end of the string is dropped.
    """
    capitalised = _FIRST_CHAR.sub(lambda match: match.group(0).upper(), value, count=1)
    return _SEPARATOR_RUN.sub(
        lambda match: match.group(1).upper() if match.group(1) else "",
        capitalised,
    )


__all__ = ["classify", "dasherize"]
