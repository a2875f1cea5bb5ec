"""
doc_parser/patterns.py — wzorce regex do rozpoznawania struktury dokumentu.

HEADING_RE — nagłówek ATX: "# Tytuł", "## Problem", "### Przykład (po)"
FENCE_RE   — otwarcie / zamknięcie bloku kodu: ``` lub ~~~ (min. 3 znaki)
LINK_RE    — link markdown [tekst](cel "tytuł"), [tekst](<cel ze spacjami> 'tytuł'), bez obrazków
REF_DEF_RE — definicja linku referencyjnego: [etykieta]: cel "tytuł"

KIND_PATTERNS — klasyfikacja sekcji po kształcie treści. Wzorce są
testowane w kolejności; pierwszy, który pasuje do dowolnej linii, wygrywa.
Brak dopasowania → SectionKind.PROSE.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from data_model.documents import ITEM_RE, SectionKind

HEADING_RE = re.compile(r"^(#{1,6})[ \t]+(.+?)(?:[ \t]+#+)?[ \t]*$")
FENCE_RE   = re.compile(r"^[ ]{0,3}(`{3,}|~{3,})")
LINK_RE    = re.compile(
    r"(?<!!)\[[^\]]*\]\(\s*(?:<([^>\n]*)>|([^)\s]+))"
    r"(?:\s+(?:\"[^\"]*\"|'[^']*'|\([^)]*\)))?\s*\)"
)
REF_DEF_RE = re.compile(r"^[ ]{0,3}\[([^\]^][^\]]*)\]:\s*(?:<([^>]*)>|(\S+))")

# Schemat URL (http:, mailto:, ...) lub adres bez schematu ("//host")
_EXTERNAL_RE = re.compile(r"^(?:[a-z][a-z0-9+.-]*:|//)", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class KindPattern:
    kind: SectionKind
    regex: re.Pattern[str]


KIND_PATTERNS: list[KindPattern] = [
    # Blok kodu ma pierwszeństwo: przykład z listą w komentarzu nadal jest przykładem
    KindPattern(kind=SectionKind.CODE_EXAMPLE, regex=FENCE_RE),
    KindPattern(kind=SectionKind.BULLET_LIST,  regex=ITEM_RE),
]


def is_internal_target(target: str) -> bool:
    """
    Czy cel linku wskazuje na katalog (kotwica lub inny dokument .md)?

    Obsługiwane kształty:
      "#factory"             — kotwica w dowolnym dokumencie katalogu
      "builder.md"           — cały dokument
      "builder.md#problem"   — kotwica w konkretnym dokumencie
    """
    if not target or _EXTERNAL_RE.match(target):
        return False
    if target.startswith("#"):
        return len(target) > 1
    path = target.split("#", 1)[0]
    return path.lower().endswith(".md")
