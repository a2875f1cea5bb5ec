"""
validator/corpus.py — wczytanie katalogu dokumentów do Corpus.

load_corpus(directory, pattern, toc_name) -> Corpus

  - każdy plik pasujący do wzorca jest czytany raz (UTF-8, BOM pomijany)
  - document_id = ścieżka względna bez rozszerzenia, separator '/'
  - plik spisu treści (toc_name) nie jest dokumentem — zbieramy tylko jego linki
  - MalformedDocument (także błąd odczytu lub kodowania) nie przerywa
    wczytywania; trafia do Corpus.failures
"""

from __future__ import annotations

import logging
import pathlib
from dataclasses import dataclass

from data_model.documents import DocumentSet
from doc_parser import MalformedDocument, extract_links, parse_document, read_source

logger = logging.getLogger(__name__)


class EmptyCorpus(Exception):
    """Katalog nie zawiera żadnego dokumentu do walidacji."""

    def __init__(self, directory: pathlib.Path, pattern: str) -> None:
        self.directory = directory
        self.pattern   = pattern
        super().__init__(f"Brak dokumentów '{pattern}' w katalogu {directory}")


@dataclass(slots=True)
class Corpus:
    """
    Wczytany korpus.

    - root:      katalog korpusu
    - documents: poprawnie sparsowane dokumenty (posortowane po id)
    - failures:  błędy parsowania (po jednym na dokument)
    - toc_id:    identyfikator spisu treści (None gdy brak pliku)
    - toc_links: cele linków ze spisu treści
    """

    root: pathlib.Path
    documents: DocumentSet = ()
    failures: tuple[MalformedDocument, ...] = ()
    toc_id: str | None = None
    toc_links: tuple[str, ...] = ()


def document_id_for(path: pathlib.Path, root: pathlib.Path) -> str:
    return path.relative_to(root).with_suffix("").as_posix()


def load_corpus(
    directory: str | pathlib.Path,
    pattern: str = "*.md",
    toc_name: str | None = "README.md",
) -> Corpus:
    """
    Wczytuje wszystkie dokumenty z katalogu.

    Args:
        directory: katalog korpusu
        pattern:   wzorzec glob względem katalogu (np. "*.md", "**/*.md")
        toc_name:  nazwa pliku spisu treści względem katalogu; None — bez spisu

    Raises:
        FileNotFoundError:  katalog nie istnieje
        NotADirectoryError: ścieżka nie jest katalogiem
        EmptyCorpus:        brak plików dokumentów
    """
    root = pathlib.Path(directory)
    if not root.exists():
        raise FileNotFoundError(f"Katalog nie istnieje: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"To nie jest katalog: {root}")

    toc_path = root / toc_name if toc_name else None
    paths = sorted(
        p for p in root.glob(pattern)
        if p.is_file() and (toc_path is None or p.resolve() != toc_path.resolve())
    )
    if not paths:
        raise EmptyCorpus(root, pattern)

    documents = []
    failures: list[MalformedDocument] = []
    for path in paths:
        doc_id = document_id_for(path, root)
        try:
            documents.append(parse_document(read_source(path, doc_id), doc_id))
        except MalformedDocument as e:
            logger.warning("Pominięto dokument %s: %s", doc_id, e.message)
            failures.append(e)

    toc_id: str | None = None
    toc_links: tuple[str, ...] = ()
    if toc_path is not None and toc_path.is_file():
        toc_id = document_id_for(toc_path, root)
        try:
            toc_links = extract_links(read_source(toc_path, toc_id))
        except MalformedDocument as e:
            logger.warning("Pominięto spis treści %s: %s", toc_id, e.message)
            failures.append(e)
        else:
            logger.debug("Spis treści %s: %d linków", toc_id, len(toc_links))

    logger.info(
        "Wczytano %d dokumentów z %s (błędy parsowania: %d)",
        len(documents), root, len(failures),
    )
    return Corpus(
        root=root,
        documents=tuple(sorted(documents, key=lambda d: d.id)),
        failures=tuple(failures),
        toc_id=toc_id,
        toc_links=toc_links,
    )
