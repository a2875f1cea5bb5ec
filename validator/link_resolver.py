"""
validator/link_resolver.py — rozwiązywanie linków wewnętrznych.

LinkResolver buduje indeks kotwic korpusu:
  _anchors:     frozenset wszystkich kotwic (dowolny dokument)
  _by_document: document_id -> frozenset kotwic tego dokumentu

Kształty celów:
  "#frag"           → kotwica w dowolnym dokumencie
  "doc.md"          → istnienie dokumentu (ścieżka względem base)
  "doc.md#frag"     → kotwica w konkretnym dokumencie
"""

from __future__ import annotations

import logging
import posixpath
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, TypeAlias
from urllib.parse import unquote

from data_model.documents import PatternDocument
from doc_parser.anchors import document_anchors, normalize_anchor

from .types import LinkStatus

if TYPE_CHECKING:
    from .corpus import Corpus

logger = logging.getLogger(__name__)

# source_id -> (cel -> status)
Resolutions: TypeAlias = dict[str, dict[str, LinkStatus]]


class LinkResolver:
    """Indeks kotwic korpusu do sprawdzania celów linków."""

    def __init__(self, documents: Iterable[PatternDocument]) -> None:
        self._by_document: dict[str, frozenset[str]] = {
            doc.id: document_anchors(doc) for doc in documents
        }
        self._anchors: frozenset[str] = frozenset().union(*self._by_document.values())

    @property
    def anchors(self) -> frozenset[str]:
        return self._anchors

    def status(self, target: str, base: str = "") -> LinkStatus:
        """Status pojedynczego celu; base — katalog dokumentu źródłowego."""
        path, _, fragment = target.partition("#")
        anchor = normalize_anchor(unquote(fragment)) if fragment else ""

        if not path:
            found = anchor in self._anchors
        else:
            doc_id = target_document_id(path, base)
            doc_anchors = self._by_document.get(doc_id)
            if doc_anchors is None:
                found = False
            else:
                found = not anchor or anchor in doc_anchors

        return LinkStatus.RESOLVED if found else LinkStatus.MISSING

    def resolve(self, targets: Sequence[str], base: str = "") -> dict[str, LinkStatus]:
        """Mapa cel → status, w kolejności celów (duplikaty scalone)."""
        result: dict[str, LinkStatus] = {}
        for target in targets:
            if target not in result:
                result[target] = self.status(target, base)
        return result


def target_document_id(path: str, base: str) -> str:
    """'../creational/builder.md' względem 'structural' → 'creational/builder'."""
    joined = posixpath.normpath(posixpath.join(base, unquote(path)))
    root, _ = posixpath.splitext(joined)
    return root


def resolve_links(
    documents: Iterable[PatternDocument],
    targets: Sequence[str],
    base: str = "",
) -> dict[str, LinkStatus]:
    """Jednorazowe rozwiązanie listy celów względem korpusu."""
    return LinkResolver(documents).resolve(targets, base)


def resolve_corpus(corpus: Corpus) -> Resolutions:
    """
    Rozwiązuje linki każdego dokumentu (względem jego katalogu) oraz spisu
    treści (względem korzenia korpusu).
    """
    resolver = LinkResolver(corpus.documents)
    resolutions: Resolutions = {}

    for doc in corpus.documents:
        if doc.links:
            resolutions[doc.id] = resolver.resolve(doc.links, posixpath.dirname(doc.id))

    if corpus.toc_id is not None and corpus.toc_links:
        resolutions[corpus.toc_id] = resolver.resolve(corpus.toc_links)

    missing = sum(
        1 for statuses in resolutions.values()
        for s in statuses.values() if s is LinkStatus.MISSING
    )
    logger.debug("Rozwiązano linki z %d źródeł, brakujących: %d", len(resolutions), missing)
    return resolutions
