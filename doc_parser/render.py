"""
doc_parser/render.py — serializacja PatternDocument z powrotem do markdown.

render_document(doc) zachowuje kolejność sekcji, ich nagłówki, poziomy
i treść; parse_document(render_document(doc), doc.id) odtwarza te same
sekcje i rodzaje. Puste linie między blokami są normalizowane do jednej.
"""

from __future__ import annotations

from data_model.documents import PatternDocument


def render_document(doc: PatternDocument) -> str:
    parts: list[str] = [f"# {doc.title}"]
    for section in doc.sections:
        # sekcja wstępna (poziom 1) leży bezpośrednio pod tytułem
        if section.level > 1:
            parts.append(f"{'#' * section.level} {section.heading}")
        if section.body:
            parts.append(section.body)
    return "\n\n".join(parts) + "\n"
