"""Testy normalizacji nagłówków do kotwic."""

from __future__ import annotations

import pytest

from doc_parser import document_anchors, duplicate_headings, normalize_anchor, parse_document
from doc_parser.anchors import unique_anchors


@pytest.mark.parametrize(
    "heading, anchor",
    [
        ("Factory Method", "factory-method"),
        ("Builder: krok po kroku!", "builder-krok-po-kroku"),
        ("Zasada SRP (Single Responsibility)", "zasada-srp-single-responsibility"),
        ("Open/Closed Principle", "openclosed-principle"),
        ("  Przykład  ", "przykład"),
        ("snake_case i kebab-case", "snake_case-i-kebab-case"),
    ],
)
def test_normalize_anchor(heading, anchor):
    assert normalize_anchor(heading) == anchor


@pytest.mark.parametrize("heading", ["Factory Method", "ISP — Machine/Printer", "Dependency  Inversion"])
def test_normalize_anchor_is_idempotent(heading):
    once = normalize_anchor(heading)
    assert normalize_anchor(once) == once


def test_unique_anchors_suffixes_duplicates():
    assert unique_anchors(["Przykład", "Problem", "Przykład", "przykład"]) == [
        "przykład", "problem", "przykład-1", "przykład-2",
    ]


def test_document_anchors_include_title(builder_md):
    doc = parse_document(builder_md, "builder")

    assert document_anchors(doc) == frozenset(
        {"builder", "problem", "przykład", "objaśnienie", "korzyści"}
    )


def test_duplicate_headings():
    doc = parse_document(
        "# Builder\n\n## Przykład\n\n```\nx\n```\n\n## Przykład\n\nTekst.\n", "builder"
    )

    assert duplicate_headings(doc) == ["Przykład"]
    assert "przykład-1" in document_anchors(doc)
