"""Komenda: pcat validate — walidacja spójności katalogu dokumentów wzorców."""

from __future__ import annotations

import argparse
import dataclasses
import json
import sys

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pcat._config import Settings
from validator import (
    ConsistencyChecker,
    Corpus,
    EmptyCorpus,
    ValidationReport,
    load_corpus,
    resolve_corpus,
)

console = Console()
err_console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Wczytanie korpusu (wspólne z pcat links)
# ---------------------------------------------------------------------------

def _load_or_exit(args: argparse.Namespace) -> Corpus:
    toc = None if args.no_toc else args.toc
    try:
        return load_corpus(args.directory, pattern=args.glob, toc_name=toc)
    except (FileNotFoundError, NotADirectoryError) as exc:
        err_console.print(f"[red]Błąd:[/red] {escape(str(exc))}")
        raise SystemExit(2)
    except EmptyCorpus as exc:
        err_console.print(f"[red]Pusty korpus:[/red] {escape(str(exc))}")
        raise SystemExit(2)


def _add_corpus_arguments(p: argparse.ArgumentParser, settings: Settings) -> None:
    p.add_argument(
        "directory",
        metavar="KATALOG",
        help="Katalog z dokumentami wzorców (markdown).",
    )
    p.add_argument(
        "--glob", "-g",
        default=settings.glob,
        metavar="WZORZEC",
        help=f"Wzorzec plików dokumentów (domyślnie: {settings.glob}).",
    )
    p.add_argument(
        "--toc",
        default=settings.toc,
        metavar="PLIK",
        help=f"Plik spisu treści względem katalogu (domyślnie: {settings.toc}).",
    )
    p.add_argument(
        "--no-toc",
        action="store_true",
        help="Nie traktuj żadnego pliku jako spisu treści.",
    )


# ---------------------------------------------------------------------------
# Wyświetlanie raportu
# ---------------------------------------------------------------------------

def _show_table(report: ValidationReport) -> None:
    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("Dokument", style="cyan",   no_wrap=True)
    table.add_column("Reguła",   style="yellow", no_wrap=True)
    table.add_column("Komunikat")

    for v in report.violations:
        table.add_row(escape(v.document_id), escape(v.rule_id), escape(v.message))

    console.print(table)


def _report_json(report: ValidationReport) -> str:
    out: dict = {
        "is_valid": report.is_valid,
        "violations": [dataclasses.asdict(v) for v in report.violations],
        "warnings": report.warnings,
    }
    return json.dumps(out, ensure_ascii=False, indent=2)


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    corpus      = _load_or_exit(args)
    resolutions = resolve_corpus(corpus)
    report      = ConsistencyChecker().check(corpus.documents, resolutions, corpus.failures)

    if args.json_output:
        print(_report_json(report))
    elif args.table and report.violations:
        _show_table(report)
    else:
        for v in report.violations:
            console.out(str(v), highlight=False)

    checked = len(corpus.documents) + len(corpus.failures)
    if report.is_valid:
        err_console.print(f"[green]OK[/green]  {checked} dokument(ów) bez naruszeń.")
    else:
        err_console.print(
            f"[red]BŁĄD[/red]  {len(report.violations)} naruszenie(a) "
            f"w {checked} dokument(ach)."
        )

    for w in report.warnings:
        err_console.print(f"  [yellow]·[/yellow] {escape(w)}")

    if not report.is_valid:
        sys.exit(1)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction, settings: Settings) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "validate",
        help="Waliduje katalog dokumentów wzorców (parser → linki → reguły).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""\
Wczytuje wszystkie dokumenty z katalogu i sprawdza reguły:

  E_MALFORMED_DOCUMENT   dokument bez tytułu / sekcji / z niezamkniętym blokiem kodu
  E_NO_CODE_EXAMPLE      dokument bez przykładu kodu
  E_EMPTY_BULLET_LIST    lista punktowana bez elementów
  E_UNEXPLAINED_EXAMPLE  przykład kodu bez objaśnienia
  E_UNRESOLVED_LINK      link do nieistniejącej kotwicy lub dokumentu

Każde naruszenie to jedna linia: <dokument>: <reguła>: <komunikat>.
Kod wyjścia: 0 — brak naruszeń, 1 — naruszenia, 2 — brak dokumentów.

Przykłady:
  pcat validate docs/patterns
  pcat validate docs/patterns --table
  pcat validate docs --glob "**/*.md" --toc SUMMARY.md
  pcat validate docs/patterns --json-output
        """,
    )
    _add_corpus_arguments(p, settings)
    p.add_argument(
        "--table",
        action="store_true",
        help="Wyświetl naruszenia jako tabelę zamiast linii tekstu.",
    )
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Wypisz raport walidacji jako JSON na stdout.",
    )
    p.set_defaults(func=run)
