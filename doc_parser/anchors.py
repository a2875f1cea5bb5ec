"""doc_parser/anchors.py — normalizacja nagłówków do kotwic."""

from __future__ import annotations

import re

from data_model.documents import PatternDocument

_PUNCT_RE = re.compile(r"[^\w\s-]", re.UNICODE)


def normalize_anchor(heading: str) -> str:
    """
    Zamienia tekst nagłówka na kotwicę.

    Reguła (jedna dla parsera i resolvera):
      - małe litery
      - usunięcie interpunkcji poza '-' i '_'
      - obcięcie białych znaków z brzegów
      - każdy biały znak → '-'

    Funkcja jest idempotentna: normalize_anchor(normalize_anchor(h)) == normalize_anchor(h).
    """
    text = _PUNCT_RE.sub("", heading.lower()).strip()
    return re.sub(r"\s", "-", text)


def unique_anchors(headings: list[str]) -> list[str]:
    """
    Kotwice dla nagłówków jednego dokumentu, w kolejności.

    Powtórzony nagłówek dostaje sufiks "-1", "-2", ... (jak GitHub).
    """
    seen: dict[str, int] = {}
    out: list[str] = []
    for heading in headings:
        base = normalize_anchor(heading)
        n = seen.get(base, 0)
        seen[base] = n + 1
        out.append(base if n == 0 else f"{base}-{n}")
    return out


def document_headings(doc: PatternDocument) -> list[str]:
    """Tytuł + nagłówki sekcji (sekcja wstępna poziomu 1 nie ma własnego nagłówka)."""
    return [doc.title] + [s.heading for s in doc.sections if s.level > 1]


def document_anchors(doc: PatternDocument) -> frozenset[str]:
    """Zbiór kotwic jednego dokumentu (tytuł włącznie)."""
    return frozenset(unique_anchors(document_headings(doc)))


def duplicate_headings(doc: PatternDocument) -> list[str]:
    """Nagłówki, których kotwica powtarza się w dokumencie (każdy raz)."""
    counts: dict[str, int] = {}
    first: dict[str, str] = {}
    for heading in document_headings(doc):
        anchor = normalize_anchor(heading)
        counts[anchor] = counts.get(anchor, 0) + 1
        first.setdefault(anchor, heading)
    return [first[a] for a, n in counts.items() if n > 1]
