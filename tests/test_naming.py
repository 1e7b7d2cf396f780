"""Tests for ngcomp.naming."""

from __future__ import annotations

import pytest

from ngcomp.models import ComponentName
from ngcomp.naming import classify, dasherize


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("FooBar", "foo-bar"),
        ("fooBar", "foo-bar"),
        ("UserProfileCard", "user-profile-card"),
        ("foo", "foo"),
        ("F", "f"),
        ("", ""),
    ],
)
def test_dasherize_inserts_dash_before_inner_capitals(value: str, expected: str) -> None:
    assert dasherize(value) == expected


@pytest.mark.parametrize("value", ["foo", "foo-bar", "already-dashed-name", "with_under score", "v2-item"])
def test_dasherize_without_capitals_only_lowercases(value: str) -> None:
    assert dasherize(value) == value.lower()
    assert dasherize(dasherize(value)) == dasherize(value)


@pytest.mark.parametrize("value", ["FooBar", "HTMLParser", "ÉcoleNormale", "A-B_C d", "x"])
def test_dasherize_never_returns_uppercase(value: str) -> None:
    result = dasherize(value)
    assert result == result.lower()


def test_dasherize_keeps_existing_separators() -> None:
    assert dasherize("Foo-Bar") == "foo--bar"
    assert dasherize("HTMLParser") == "h-t-m-l-parser"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("foo-bar", "FooBar"),
        ("foo", "Foo"),
        ("FooBar", "FooBar"),
        ("foo_bar baz", "FooBarBaz"),
        ("foo--bar", "FooBar"),
        ("foo-", "Foo"),
        ("user profile\tcard", "UserProfileCard"),
        ("", ""),
    ],
)
def test_classify_builds_pascal_case(value: str, expected: str) -> None:
    assert classify(value) == expected


def test_classify_reverses_dasherize_for_simple_names() -> None:
    assert classify(dasherize("FooBar")) == "FooBar"
    assert classify(dasherize("fooBar")) == "FooBar"


def test_classify_of_dasherize_is_not_a_round_trip() -> None:
    assert classify(dasherize("HTMLParser")) == "HTMLParser"
    assert classify(dasherize("Foo-Bar")) == "FooBar"
    assert classify(dasherize("foo_bar")) == "FooBar"


def test_component_name_derives_both_forms() -> None:
    name = ComponentName("UserCard")
    assert name.dashed == "user-card"
    assert name.classified == "UserCard"


def test_component_name_rejects_empty_value() -> None:
    with pytest.raises(ValueError):
        ComponentName("")
