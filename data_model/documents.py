"""
data_model/documents.py — model dokumentu wzorca projektowego.

PatternDocument odpowiada jednemu plikowi katalogu (np. "builder.md");
składa się z uporządkowanych sekcji (Section). Oba typy są niemutowalne
po parsowaniu — parser tworzy je raz, resolver i checker tylko czytają.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias

# Znacznik elementu listy: "-", "*", "+", "1.", "1)" — treść opcjonalna
ITEM_RE = re.compile(r"^\s*(?:[-*+]|\d+[.)])(?:\s+(.*))?$")


class SectionKind(StrEnum):
    """Rodzaj sekcji, wyznaczany na podstawie kształtu treści."""

    PROSE        = "prose"
    CODE_EXAMPLE = "code_example"
    BULLET_LIST  = "bullet_list"


@dataclass(frozen=True, slots=True)
class Section:
    """
    Jedna sekcja dokumentu (nagłówek + treść do następnego nagłówka).

    - heading:    tekst nagłówka bez znaczników '#'
    - kind:       SectionKind
    - body:       treść sekcji bez nagłówka (bez pustych linii na brzegach)
    - level:      poziom nagłówka (1 = sekcja wstępna pod tytułem)
    - line_start: 1-based numer linii nagłówka
    - line_end:   1-based numer ostatniej linii sekcji
    """

    heading: str
    kind: SectionKind
    body: str
    level: int = 2
    line_start: int = 0
    line_end: int = 0

    @property
    def items(self) -> tuple[str, ...]:
        """Niepuste elementy listy (dla sekcji innych niż bullet_list — pusta krotka)."""
        if self.kind is not SectionKind.BULLET_LIST:
            return ()
        found: list[str] = []
        for line in self.body.splitlines():
            m = ITEM_RE.match(line)
            if m and m.group(1) and m.group(1).strip():
                found.append(m.group(1).strip())
        return tuple(found)


@dataclass(frozen=True, slots=True)
class PatternDocument:
    id: str                            # ścieżka względna bez rozszerzenia, np. "creational/builder"
    title: str                         # tekst nagłówka poziomu 1
    sections: tuple[Section, ...]
    links: tuple[str, ...] = ()        # surowe cele linków wewnętrznych

    def has_kind(self, kind: SectionKind) -> bool:
        return any(s.kind is kind for s in self.sections)


# Kolekcja dokumentów w kolejności identyfikatorów.
DocumentSet: TypeAlias = tuple[PatternDocument, ...]
