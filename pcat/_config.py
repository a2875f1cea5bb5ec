"""Konfiguracja pcat — zmienne środowiskowe (opcjonalnie z pliku .env)."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv


@dataclass(frozen=True, slots=True)
class Settings:
    glob: str        # wzorzec plików dokumentów względem katalogu
    toc: str | None  # nazwa pliku spisu treści; None — bez spisu
    log_level: str


def get_settings() -> Settings:
    # .env z bieżącego katalogu; zmienne już ustawione w środowisku mają pierwszeństwo
    load_dotenv(find_dotenv(usecwd=True), override=False)
    toc = os.getenv("PCAT_TOC", "README.md")
    return Settings(
        glob      = os.getenv("PCAT_GLOB",      "*.md"),
        toc       = toc or None,
        log_level = os.getenv("PCAT_LOG_LEVEL", "WARNING").upper(),
    )
