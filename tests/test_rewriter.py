"""Tests for ngcomp.rewriter."""

from __future__ import annotations

import pytest

from ngcomp.rewriter import (
    CLASS_NAME,
    FIELD_NAMES,
    SELECTOR,
    STYLE_URLS,
    TEMPLATE_URL,
    ComponentMetadata,
    RewriteOptions,
    prepare_component_code,
)

SOURCE = (
    "import { Component } from '@angular/core';\n"
    "\n"
    "@Component({\n"
    "  selector: 'old',\n"
    "  templateUrl: 'old.html',\n"
    "  styleUrls: ['old.scss'],\n"
    "})\n"
    "export class Old {\n"
    "  value = 1;\n"
    "}\n"
)

OPTIONS = RewriteOptions(
    selector="new-name",
    template_url="./new-name.component.html",
    style_url="./new-name.component.scss",
    class_name="NewName",
)


def test_prepare_component_code_rewrites_all_fields() -> None:
    result = prepare_component_code(SOURCE, OPTIONS)

    assert result.missing == []
    assert result.complete is True
    assert result.text.splitlines() == [
        "import { Component } from '@angular/core';",
        "",
        "@Component({",
        "  selector: 'new-name',",
        "  templateUrl: './new-name.component.html',",
        "  styleUrls: ['./new-name.component.scss'],",
        "})",
        "export class NewNameComponent {",
        "  value = 1;",
        "}",
    ]
    assert result.text.endswith("}\n")


def test_prepare_component_code_is_idempotent() -> None:
    once = prepare_component_code(SOURCE, OPTIONS).text
    twice = prepare_component_code(once, OPTIONS).text
    assert twice == once


def test_prepare_component_code_only_replaces_first_occurrence() -> None:
    source = SOURCE + "// selector: 'keep-me',\nexport class Helper {\n}\n"
    result = prepare_component_code(source, OPTIONS)

    assert "// selector: 'keep-me'," in result.text
    assert "export class Helper {" in result.text
    assert result.text.count("selector: 'new-name',") == 1


def test_prepare_component_code_reports_missing_fields() -> None:
    source = "@Component({\n  selector: 'old',\n})\nexport class Old {\n}\n"
    result = prepare_component_code(source, OPTIONS)

    assert result.missing == [TEMPLATE_URL, STYLE_URLS]
    assert result.complete is False
    assert "selector: 'new-name'," in result.text
    assert "export class NewNameComponent {" in result.text
    assert "templateUrl" not in result.text


def test_prepare_component_code_without_metadata_returns_source_unchanged() -> None:
    source = "const answer = 42;\n"
    result = prepare_component_code(source, OPTIONS)
    assert result.text == source
    assert result.missing == list(FIELD_NAMES)


def test_prepare_component_code_honours_class_suffix() -> None:
    options = RewriteOptions(
        selector="x",
        template_url="./x.html",
        style_url="./x.scss",
        class_name="X",
        class_suffix="Page",
    )
    assert "export class XPage {" in prepare_component_code(SOURCE, options).text


def test_prepare_component_code_keeps_replacement_text_literal() -> None:
    options = RewriteOptions(
        selector=r"a\1",
        template_url="./$1.html",
        style_url="./x.scss",
        class_name="X",
    )
    result = prepare_component_code(SOURCE, options)
    assert "selector: 'a\\1'," in result.text
    assert "templateUrl: './$1.html'," in result.text


def test_metadata_skips_match_overlapping_earlier_field() -> None:
    source = "selector: 'a', templateUrl: 'b',\nexport class A {\n"
    metadata = ComponentMetadata.parse(source)

    assert metadata.fields[SELECTOR].text == "selector: 'a', templateUrl: 'b',"
    assert metadata.missing == [TEMPLATE_URL, STYLE_URLS]


def test_metadata_uses_later_occurrence_after_overlap() -> None:
    source = "selector: 'a', templateUrl: 'b',\ntemplateUrl: 'c',\n"
    metadata = ComponentMetadata.parse(source)

    assert metadata.fields[TEMPLATE_URL].text == "templateUrl: 'c',"


def test_metadata_render_leaves_unassigned_fields() -> None:
    metadata = ComponentMetadata.parse(SOURCE)
    metadata.set(CLASS_NAME, "Renamed")

    rendered = metadata.render()
    assert "export class RenamedComponent {" in rendered
    assert "selector: 'old'," in rendered
    assert metadata.get(CLASS_NAME) == "Renamed"
    assert metadata.get(SELECTOR) is None


def test_metadata_rejects_unknown_field() -> None:
    metadata = ComponentMetadata.parse(SOURCE)
    with pytest.raises(KeyError):
        metadata.set("providers", "[]")
