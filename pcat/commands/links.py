"""Komenda: pcat links — cele linków wewnętrznych korpusu i ich status."""

from __future__ import annotations

import argparse
import sys

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pcat._config import Settings
from pcat.commands.validate import _add_corpus_arguments, _load_or_exit
from validator import LinkStatus, resolve_corpus

console = Console()


def run(args: argparse.Namespace) -> None:
    corpus      = _load_or_exit(args)
    resolutions = resolve_corpus(corpus)

    rows = [
        (source_id, target, status)
        for source_id, statuses in resolutions.items()
        for target, status in statuses.items()
        if not args.missing or status is LinkStatus.MISSING
    ]

    if not rows:
        console.print("[yellow]Brak linków do wyświetlenia.[/yellow]")
        return

    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("Źródło", style="cyan", no_wrap=True)
    table.add_column("Cel",    no_wrap=True)
    table.add_column("Status", no_wrap=True)

    for source_id, target, status in rows:
        style = "green" if status is LinkStatus.RESOLVED else "red"
        table.add_row(escape(source_id), escape(target), f"[{style}]{status}[/{style}]")

    console.print(table)

    missing = sum(1 for *_, s in rows if s is LinkStatus.MISSING)
    console.print(f"  [dim]{len(rows)} linków, brakujących: {missing}[/dim]\n")
    if missing:
        sys.exit(1)


def add_parser(subparsers: argparse._SubParsersAction, settings: Settings) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "links",
        help="Listuje linki wewnętrzne korpusu i ich status.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Rozwiązuje linki wewnętrzne wszystkich dokumentów i spisu treści.

Przykłady:
  pcat links docs/patterns
  pcat links docs/patterns --missing
        """,
    )
    _add_corpus_arguments(p, settings)
    p.add_argument(
        "--missing",
        action="store_true",
        help="Pokaż tylko brakujące cele.",
    )
    p.set_defaults(func=run)
