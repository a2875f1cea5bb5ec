"""Komenda: pcat show — podgląd sekcji jednego dokumentu po parsowaniu."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from data_model.documents import PatternDocument, SectionKind
from doc_parser import (
    MalformedDocument,
    document_headings,
    parse_document,
    read_source,
    render_document,
    unique_anchors,
)

console = Console()

_KIND_STYLE: dict[SectionKind, str] = {
    SectionKind.PROSE:        "white",
    SectionKind.CODE_EXAMPLE: "green",
    SectionKind.BULLET_LIST:  "magenta",
}


# ---------------------------------------------------------------------------
# Wyświetlanie w terminalu
# ---------------------------------------------------------------------------

def _show_table(doc: PatternDocument) -> None:
    console.print(f"[bold]{escape(doc.title)}[/bold]  [dim]({doc.id})[/dim]")

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("LVL",    justify="right", no_wrap=True, style="dim")
    table.add_column("LINIE",  justify="center", no_wrap=True)
    table.add_column("RODZAJ", no_wrap=True)
    table.add_column("ELEM.",  justify="right", no_wrap=True)
    table.add_column("KOTWICA", no_wrap=True, style="bold cyan")
    table.add_column("NAGŁÓWEK", no_wrap=False, max_width=50)

    # anchors[0] to tytuł; kolejne odpowiadają sekcjom poziomu > 1
    anchors = iter(unique_anchors(document_headings(doc))[1:])
    for s in doc.sections:
        indent = "  " * (s.level - 1)
        lines = (
            str(s.line_start)
            if s.line_start == s.line_end
            else f"{s.line_start}–{s.line_end}"
        )
        items = str(len(s.items)) if s.kind is SectionKind.BULLET_LIST else "-"
        table.add_row(
            str(s.level),
            lines,
            f"[{_KIND_STYLE[s.kind]}]{s.kind}[/]",
            items,
            next(anchors) if s.level > 1 else "-",
            escape(indent + s.heading[:80]),
        )

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(doc.sections)} sekcji, {len(doc.links)} linków[/dim]\n")


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    path = Path(args.file)
    if not path.is_file():
        console.print(f"[red]Plik nie istnieje:[/red] {escape(str(path))}")
        raise SystemExit(2)

    doc_id: str = args.doc_id or path.stem

    try:
        doc = parse_document(read_source(path, doc_id), doc_id)
    except MalformedDocument as e:
        console.print(
            f"[red]Błąd parsowania[/red] (linie {e.line_range}): {escape(e.message)}"
        )
        raise SystemExit(1)

    if args.normalized:
        console.out(render_document(doc), end="", highlight=False)
    else:
        _show_table(doc)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "show",
        help="Wyświetla sekcje dokumentu po parsowaniu.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Parsuje jeden dokument markdown i wyświetla jego sekcje (poziom, zakres
linii, rodzaj, liczba elementów listy, kotwica).

Przykłady:
  pcat show docs/patterns/builder.md
  pcat show docs/patterns/builder.md --normalized
        """,
    )
    p.add_argument(
        "file",
        metavar="PLIK.md",
        help="Ścieżka do dokumentu markdown.",
    )
    p.add_argument(
        "--doc-id",
        metavar="ID",
        default=None,
        help="Identyfikator dokumentu (domyślnie: nazwa pliku bez .md).",
    )
    p.add_argument(
        "--normalized",
        action="store_true",
        help="Wypisz dokument ponownie zserializowany z sekcji zamiast tabeli.",
    )
    p.set_defaults(func=run)
