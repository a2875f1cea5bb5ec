"""
doc_parser/parser.py — parsowanie dokumentu markdown do PatternDocument.

Architektura:
  text → linie → fence_mask() (linie wewnątrz bloków kodu)
  → _scan_headings() → nagłówki ATX poza blokami kodu
  → _build_sections() → Section (treść do następnego nagłówka, klasyfikacja)
  → PatternDocument

Kluczowe funkcje publiczne:
  read_source(path, doc_id)    -> str
  parse_document(text, doc_id) -> PatternDocument
  extract_links(text)          -> tuple[str, ...]
"""

from __future__ import annotations

import logging
import pathlib
import re
from dataclasses import dataclass

from data_model.documents import PatternDocument, Section, SectionKind
from doc_parser.patterns import (
    FENCE_RE,
    HEADING_RE,
    KIND_PATTERNS,
    LINK_RE,
    REF_DEF_RE,
    is_internal_target,
)

logger = logging.getLogger(__name__)

_INLINE_CODE_RE = re.compile(r"`[^`]*`")


class MalformedDocument(Exception):
    """Dokument bez wymaganej struktury (tytuł, sekcje, domknięte bloki kodu)."""

    def __init__(self, document_id: str, message: str, line_start: int, line_end: int) -> None:
        self.document_id = document_id
        self.message     = message
        self.line_start  = line_start
        self.line_end    = line_end
        super().__init__(f"{document_id}: {message} (linie {self.line_range})")

    @property
    def line_range(self) -> str:
        if self.line_start == self.line_end:
            return str(self.line_start)
        return f"{self.line_start}–{self.line_end}"


@dataclass(frozen=True, slots=True)
class _Heading:
    line: int   # 1-based
    level: int
    text: str


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def parse_document(text: str, doc_id: str) -> PatternDocument:
    """
    Parsuje tekst jednego dokumentu i zwraca PatternDocument.

    Args:
        text:   Surowa treść pliku markdown.
        doc_id: Identyfikator dokumentu (ścieżka względna bez rozszerzenia).

    Raises:
        MalformedDocument: brak tytułu, drugi tytuł, nagłówek sekcji przed
            tytułem, niezamknięty blok kodu albo brak jakiejkolwiek sekcji.
    """
    # BOM z edytorów Windows nie może zasłonić nagłówka tytułu w linii 1
    text = text.removeprefix("\ufeff")
    lines = text.splitlines()
    last_line = max(len(lines), 1)

    in_fence, unclosed = fence_mask(lines)
    if unclosed is not None:
        raise MalformedDocument(doc_id, "niezamknięty blok kodu", unclosed, last_line)

    headings = _scan_headings(lines, in_fence)

    titles = [h for h in headings if h.level == 1]
    if not titles:
        raise MalformedDocument(doc_id, "brak nagłówka tytułu ('# ...')", 1, last_line)
    if len(titles) > 1:
        extra = titles[1]
        raise MalformedDocument(
            doc_id, f"drugi nagłówek tytułu '{extra.text}'", extra.line, extra.line
        )

    title = titles[0]
    early = next((h for h in headings if h.line < title.line), None)
    if early is not None:
        raise MalformedDocument(
            doc_id, f"nagłówek sekcji '{early.text}' przed tytułem", early.line, early.line
        )

    if any(line.strip() for line in lines[: title.line - 1]):
        logger.debug("%s: treść przed tytułem pominięta (linie 1–%d)", doc_id, title.line - 1)

    sections = _build_sections(lines, [h for h in headings if h.line >= title.line])
    if not sections:
        raise MalformedDocument(doc_id, "dokument nie zawiera żadnej sekcji", title.line, last_line)

    logger.debug("%s: %d sekcji", doc_id, len(sections))
    return PatternDocument(
        id=doc_id,
        title=title.text,
        sections=tuple(sections),
        links=extract_links(text),
    )


def read_source(path: str | pathlib.Path, doc_id: str) -> str:
    """
    Czyta plik dokumentu jako UTF-8 (BOM pomijany).

    Raises:
        MalformedDocument: plik nie jest poprawnym UTF-8 (linia z błędnym
            bajtem) albo nie da się go odczytać.
    """
    try:
        data = pathlib.Path(path).read_bytes()
    except OSError as e:
        raise MalformedDocument(doc_id, f"nie można odczytać pliku: {e.strerror or e}", 1, 1) from e

    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        line = data[: e.start].count(b"\n") + 1
        raise MalformedDocument(doc_id, "niepoprawne kodowanie UTF-8", line, line) from e


def extract_links(text: str) -> tuple[str, ...]:
    """
    Zwraca cele linków wewnętrznych (kotwice, dokumenty .md) w kolejności
    pierwszego wystąpienia. Uwzględnia linki inline i definicje linków
    referencyjnych ("[etykieta]: cel"). Linki w blokach kodu, w `kodzie inline`,
    obrazki i adresy zewnętrzne są pomijane.
    """
    lines = text.splitlines()
    in_fence, _ = fence_mask(lines)
    targets: dict[str, None] = {}
    for line, fenced in zip(lines, in_fence):
        if fenced:
            continue
        ref = REF_DEF_RE.match(line)
        if ref:
            found = [ref.group(2) if ref.group(2) is not None else ref.group(3)]
        else:
            found = [
                m.group(1) if m.group(1) is not None else m.group(2)
                for m in LINK_RE.finditer(_INLINE_CODE_RE.sub("", line))
            ]
        for target in found:
            target = target.strip()
            if is_internal_target(target):
                targets.setdefault(target, None)
    return tuple(targets)


def classify_section(body_lines: list[str]) -> SectionKind:
    """Rodzaj sekcji: pierwszy wzorzec z KIND_PATTERNS pasujący do dowolnej linii."""
    for pattern in KIND_PATTERNS:
        if any(pattern.regex.match(line) for line in body_lines):
            return pattern.kind
    return SectionKind.PROSE


def fence_mask(lines: list[str]) -> tuple[list[bool], int | None]:
    """
    Dla każdej linii: czy należy do bloku kodu (znaczniki otwarcia/zamknięcia
    włącznie). Drugi element — numer linii niezamkniętego bloku lub None.
    """
    mask: list[bool] = []
    open_char: str | None = None
    open_len = 0
    open_line = 0

    for i, line in enumerate(lines, start=1):
        m = FENCE_RE.match(line)
        if open_char is None:
            if m:
                open_char, open_len, open_line = m.group(1)[0], len(m.group(1)), i
                mask.append(True)
            else:
                mask.append(False)
            continue

        mask.append(True)
        # Zamknięcie: ten sam znak, co najmniej ta sama długość, bez info-stringu
        if m and m.group(1)[0] == open_char and len(m.group(1)) >= open_len \
                and line.strip() == m.group(1):
            open_char = None

    return mask, (open_line if open_char is not None else None)


# ---------------------------------------------------------------------------
# Wewnętrzna implementacja
# ---------------------------------------------------------------------------

def _scan_headings(lines: list[str], in_fence: list[bool]) -> list[_Heading]:
    headings: list[_Heading] = []
    for i, (line, fenced) in enumerate(zip(lines, in_fence), start=1):
        if fenced:
            continue
        m = HEADING_RE.match(line)
        if m:
            headings.append(_Heading(line=i, level=len(m.group(1)), text=m.group(2).strip()))
    return headings


def _trim_blank(block: list[str], first_line: int) -> tuple[list[str], int]:
    """Usuwa puste linie z brzegów; zwraca (linie, numer pierwszej linii)."""
    start, end = 0, len(block)
    while start < end and not block[start].strip():
        start += 1
    while end > start and not block[end - 1].strip():
        end -= 1
    return block[start:end], first_line + start


def _build_sections(lines: list[str], headings: list[_Heading]) -> list[Section]:
    """
    Buduje sekcje od tytułu (headings[0]) do końca dokumentu.

    Treść między tytułem a pierwszym nagłówkiem sekcji (jeśli niepusta)
    staje się sekcją wstępną poziomu 1 o nagłówku równym tytułowi.
    """
    sections: list[Section] = []
    bounds = [h.line for h in headings[1:]] + [len(lines) + 1]

    for h, next_line in zip(headings, bounds):
        # lines[h.line : next_line - 1] — linie między nagłówkiem a kolejnym
        body, body_start = _trim_blank(lines[h.line: next_line - 1], h.line + 1)

        if h.level == 1 and not body:
            continue

        line_end = body_start + len(body) - 1 if body else h.line
        sections.append(Section(
            heading=h.text,
            kind=classify_section(body),
            body="\n".join(body),
            level=h.level,
            line_start=h.line,
            line_end=line_end,
        ))

    return sections
