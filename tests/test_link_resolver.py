"""Testy resolvera linków wewnętrznych."""

from __future__ import annotations

import pathlib

import pytest

from doc_parser import parse_document
from validator import Corpus, LinkResolver, LinkStatus, resolve_corpus, resolve_links


@pytest.fixture
def documents(builder_md, factory_md):
    return (
        parse_document(builder_md, "builder"),
        parse_document(factory_md, "factory_method"),
    )


def test_corpus_without_dangling_links_has_no_missing(documents):
    targets = [link for doc in documents for link in doc.links]

    result = resolve_links(documents, targets)

    assert result
    assert LinkStatus.MISSING not in result.values()


def test_unknown_anchor_is_missing(documents):
    result = resolve_links(documents, ["#factory"])

    assert result == {"#factory": LinkStatus.MISSING}


@pytest.mark.parametrize(
    "target, status",
    [
        ("#problem", LinkStatus.RESOLVED),
        ("#Problem", LinkStatus.RESOLVED),
        ("#korzy%C5%9Bci", LinkStatus.RESOLVED),
        ("builder.md", LinkStatus.RESOLVED),
        ("./builder.md#objaśnienie", LinkStatus.RESOLVED),
        ("factory_method.md#builder", LinkStatus.MISSING),
        ("adapter.md", LinkStatus.MISSING),
        ("adapter.md#problem", LinkStatus.MISSING),
    ],
)
def test_status(documents, target, status):
    assert LinkResolver(documents).status(target) is status


def test_relative_targets_use_base():
    creational = parse_document("# Builder\n\n## Problem\n\nTekst.\n", "creational/builder")
    structural = parse_document("# Adapter\n\n## Problem\n\nTekst.\n", "structural/adapter")
    resolver = LinkResolver([creational, structural])

    assert resolver.status("../structural/adapter.md#adapter", base="creational") is LinkStatus.RESOLVED
    assert resolver.status("adapter.md", base="creational") is LinkStatus.MISSING
    assert resolver.status("structural/adapter.md") is LinkStatus.RESOLVED


def test_resolve_merges_duplicates_in_order(documents):
    result = LinkResolver(documents).resolve(["#problem", "#brak", "#problem"])

    assert list(result) == ["#problem", "#brak"]


def test_anchors_cover_whole_corpus(documents):
    anchors = LinkResolver(documents).anchors

    assert {"builder", "factory-method", "objaśnienie"} <= anchors


def test_resolve_corpus_includes_toc(documents):
    corpus = Corpus(
        root=pathlib.Path("."),
        documents=documents,
        toc_id="README",
        toc_links=("builder.md", "singleton.md"),
    )

    resolutions = resolve_corpus(corpus)

    assert set(resolutions) == {"builder", "README"}
    assert resolutions["README"] == {
        "builder.md": LinkStatus.RESOLVED,
        "singleton.md": LinkStatus.MISSING,
    }
    assert resolutions["builder"] == {
        "factory_method.md#factory-method": LinkStatus.RESOLVED,
        "#problem": LinkStatus.RESOLVED,
    }
