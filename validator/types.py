"""
validator/types.py — kody reguł i struktury raportu walidacji.

Violation — pojedyncze naruszenie reguły strukturalnej: dokument,
    kod reguły, komunikat.
ValidationReport — wynik walidacji korpusu: naruszenia (posortowane
    po dokumencie i regule) oraz ostrzeżenia.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class RuleId(StrEnum):
    """Stałe kody reguł checkera."""

    # parser
    MALFORMED_DOCUMENT  = "E_MALFORMED_DOCUMENT"

    # struktura dokumentu
    NO_CODE_EXAMPLE     = "E_NO_CODE_EXAMPLE"
    EMPTY_BULLET_LIST   = "E_EMPTY_BULLET_LIST"
    UNEXPLAINED_EXAMPLE = "E_UNEXPLAINED_EXAMPLE"

    # linki
    UNRESOLVED_LINK     = "E_UNRESOLVED_LINK"


class LinkStatus(StrEnum):
    RESOLVED = "resolved"
    MISSING  = "missing"


@dataclass(frozen=True, slots=True)
class Violation:
    """
    Pojedyncze naruszenie.

    - document_id: identyfikator dokumentu (lub pliku spisu treści)
    - rule_id:     stały identyfikator reguły (RuleId)
    - message:     czytelny opis naruszenia
    """

    document_id: str
    rule_id: RuleId
    message: str

    def __str__(self) -> str:
        return f"{self.document_id}: {self.rule_id}: {self.message}"


@dataclass(slots=True)
class ValidationReport:
    """
    Wynik walidacji korpusu.

    - violations: naruszenia w stałej kolejności (document_id, rule_id)
    - warnings:   komunikaty ostrzegawcze (nie wpływają na is_valid)
    """

    violations: list[Violation] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.violations
