"""
doc_parser — parsowanie dokumentów katalogu wzorców (markdown).

Publiczne API:
  read_source(path, doc_id)     → str
  parse_document(text, doc_id)  → PatternDocument
  extract_links(text)           → tuple[str, ...]
  render_document(doc)          → str
  normalize_anchor(heading)     → str
  unique_anchors(headings)      → list[str]
  document_anchors(doc)         → frozenset[str]
  MalformedDocument             błąd parsowania (z zakresem linii)
"""

from .anchors import (
    document_anchors,
    document_headings,
    duplicate_headings,
    normalize_anchor,
    unique_anchors,
)
from .parser  import (
    MalformedDocument,
    classify_section,
    extract_links,
    fence_mask,
    parse_document,
    read_source,
)
from .render  import render_document

__all__ = [
    "MalformedDocument",
    "classify_section",
    "document_anchors",
    "document_headings",
    "duplicate_headings",
    "extract_links",
    "fence_mask",
    "normalize_anchor",
    "parse_document",
    "read_source",
    "render_document",
    "unique_anchors",
]
