"""Testy wczytywania korpusu z katalogu."""

from __future__ import annotations

import pytest

from validator import EmptyCorpus, load_corpus

from .conftest import BUILDER_MD, FACTORY_MD


def test_load_corpus_sorted_ids_and_toc(valid_corpus_dir):
    corpus = load_corpus(valid_corpus_dir)

    assert [d.id for d in corpus.documents] == ["builder", "factory_method"]
    assert corpus.failures == ()
    assert corpus.toc_id == "README"
    assert corpus.toc_links == ("builder.md", "factory_method.md#factory-method")


def test_toc_disabled_makes_readme_a_document(valid_corpus_dir):
    corpus = load_corpus(valid_corpus_dir, toc_name=None)

    assert [d.id for d in corpus.documents] == ["README", "builder", "factory_method"]
    assert corpus.toc_id is None
    assert corpus.toc_links == ()


def test_malformed_documents_are_collected(write_corpus):
    root = write_corpus({
        "builder.md": BUILDER_MD,
        "broken.md": "Brak tytułu.\n\n## Problem\n",
    })

    corpus = load_corpus(root)

    assert [d.id for d in corpus.documents] == ["builder"]
    assert [f.document_id for f in corpus.failures] == ["broken"]


def test_invalid_utf8_becomes_failure(write_corpus):
    root = write_corpus({"builder.md": BUILDER_MD})
    (root / "broken.md").write_bytes(b"\xff\xfe")

    corpus = load_corpus(root)

    assert [d.id for d in corpus.documents] == ["builder"]
    assert [f.document_id for f in corpus.failures] == ["broken"]
    assert corpus.failures[0].message == "niepoprawne kodowanie UTF-8"


def test_invalid_utf8_toc_becomes_failure(write_corpus):
    root = write_corpus({"builder.md": BUILDER_MD})
    (root / "README.md").write_bytes(b"# Spis\n\n\xff\n")

    corpus = load_corpus(root)

    assert corpus.toc_id == "README"
    assert corpus.toc_links == ()
    assert [(f.document_id, f.line_start) for f in corpus.failures] == [("README", 3)]


def test_document_with_bom_is_parsed(tmp_path):
    (tmp_path / "builder.md").write_bytes(b"\xef\xbb\xbf" + BUILDER_MD.encode("utf-8"))

    corpus = load_corpus(tmp_path)

    assert corpus.failures == ()
    assert corpus.documents[0].title == "Builder"


def test_recursive_glob_uses_relative_ids(write_corpus):
    root = write_corpus({
        "creational/builder.md": BUILDER_MD,
        "creational/factory_method.md": FACTORY_MD,
        "index.md": "# Indeks\n\nOpis.\n",
    })

    corpus = load_corpus(root, pattern="**/*.md")

    assert [d.id for d in corpus.documents] == [
        "creational/builder", "creational/factory_method", "index",
    ]


def test_empty_directory_raises_empty_corpus(tmp_path):
    (tmp_path / "notes.txt").write_text("nie markdown", encoding="utf-8")

    with pytest.raises(EmptyCorpus):
        load_corpus(tmp_path)


def test_only_toc_is_empty_corpus(write_corpus):
    root = write_corpus({"README.md": "# Spis\n\n- [a](a.md)\n"})

    with pytest.raises(EmptyCorpus):
        load_corpus(root)


def test_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_corpus(tmp_path / "nie-ma")


def test_file_instead_of_directory(tmp_path):
    path = tmp_path / "builder.md"
    path.write_text(BUILDER_MD, encoding="utf-8")

    with pytest.raises(NotADirectoryError):
        load_corpus(path)
