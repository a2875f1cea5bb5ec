"""
pcat — narzędzie CLI do walidacji katalogu wzorców projektowych.

Użycie:
  pcat <komenda> [opcje]

Komendy:
  validate  Parsuje katalog dokumentów, rozwiązuje linki i raportuje naruszenia.
  show      Wyświetla sekcje jednego dokumentu po parsowaniu.
  links     Listuje cele linków wewnętrznych korpusu i ich status.
"""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

# Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby polskie znaki
# w tekstach pomocy argparse były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from pcat._config import get_settings
from pcat.commands import links as cmd_links
from pcat.commands import show as cmd_show
from pcat.commands import validate as cmd_validate

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def configure_logging(level: str) -> None:
    """Logi bibliotek (validator, doc_parser) na stderr przez RichHandler."""
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(message)s",
        handlers=[handler],
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="pcat",
        description="pcat — walidator katalogu wzorców projektowych.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="pcat 0.1.0"
    )
    parser.add_argument(
        "--log-level",
        choices=_LOG_LEVELS,
        default=settings.log_level if settings.log_level in _LOG_LEVELS else "WARNING",
        help="Poziom logowania (domyślnie: PCAT_LOG_LEVEL lub WARNING).",
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_validate.add_parser(subparsers, settings)
    cmd_show.add_parser(subparsers)
    cmd_links.add_parser(subparsers, settings)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    args.func(args)


if __name__ == "__main__":
    main()
