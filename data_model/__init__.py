"""
data_model — struktury danych katalogu wzorców.

Użycie:
  from data_model import PatternDocument, Section, SectionKind

Moduły:
  documents — PatternDocument, Section, SectionKind, DocumentSet
"""

from .documents import (
    ITEM_RE,
    DocumentSet,
    PatternDocument,
    Section,
    SectionKind,
)

__all__ = [
    "ITEM_RE",
    "DocumentSet",
    "PatternDocument",
    "Section",
    "SectionKind",
]
