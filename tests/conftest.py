"""Wspólne fixtures: przykładowe dokumenty wzorców i korpus na dysku."""

from __future__ import annotations

import pathlib
from collections.abc import Callable

import pytest

BUILDER_MD = """\
# Builder

Wzorzec Builder oddziela konstrukcję obiektu od jego reprezentacji.

## Problem

Konstruktor `House` ma zbyt wiele parametrów.

## Przykład

```python
# komentarz, nie nagłówek
class HouseBuilder:
    def build(self):
        return House()
```

## Objaśnienie

- `HouseBuilder` składa obiekt krok po kroku
- metoda `build()` zwraca gotowy obiekt

## Korzyści

- czytelna konstrukcja
- niezmienne obiekty

Zobacz też [Factory Method](factory_method.md#factory-method) i [problem](#problem).
"""

FACTORY_MD = """\
# Factory Method

## Problem

Klient tworzy obiekty `Dog` i `Cat` bezpośrednio.

## Przykład

~~~python
class AnimalFactory:
    def create(self, kind): ...
~~~

Fabryka tworzy obiekty `Animal` bez wiedzy o klasach konkretnych.

## Korzyści

- luźne powiązania
"""

README_MD = """\
# Katalog wzorców

- [Builder](builder.md)
- [Factory Method](factory_method.md#factory-method)
- [Strona projektu](https://example.com/patterns)
"""


@pytest.fixture
def builder_md() -> str:
    return BUILDER_MD


@pytest.fixture
def factory_md() -> str:
    return FACTORY_MD


@pytest.fixture
def write_corpus(tmp_path: pathlib.Path) -> Callable[[dict[str, str]], pathlib.Path]:
    """Zapisuje pliki {ścieżka względna: treść} w tmp_path i zwraca katalog."""

    def _write(files: dict[str, str]) -> pathlib.Path:
        for rel, text in files.items():
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        return tmp_path

    return _write


@pytest.fixture
def valid_corpus_dir(write_corpus) -> pathlib.Path:
    return write_corpus({
        "builder.md": BUILDER_MD,
        "factory_method.md": FACTORY_MD,
        "README.md": README_MD,
    })
