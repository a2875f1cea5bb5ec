"""
validator/consistency_checker.py — reguły strukturalne korpusu.

ConsistencyChecker.check(documents, resolutions, failures=()) -> ValidationReport

Etapy (dla każdego dokumentu):
  A — błędy parsowania     (MalformedDocument → E_MALFORMED_DOCUMENT)
  B — przykład kodu        (co najmniej jedna sekcja code_example)
  C — listy punktowane     (każda bullet_list ma ≥1 element)
  D — objaśnienia          (każdy przykład ma prozę w sobie lub zaraz po sobie)
  E — linki                (każdy cel linku rozwiązany)

Checker nie przechowuje stanu między wywołaniami: ten sam korpus daje
zawsze tę samą sekwencję naruszeń.
"""

from __future__ import annotations

import posixpath
from collections.abc import Iterable, Mapping, Sequence

from data_model.documents import PatternDocument, Section, SectionKind
from doc_parser import MalformedDocument, duplicate_headings, fence_mask

from .link_resolver import target_document_id
from .types import LinkStatus, RuleId, ValidationReport, Violation

# Rodzaje sekcji, które mogą objaśniać poprzedzający przykład kodu
_EXPLAINING_KINDS = frozenset({SectionKind.PROSE, SectionKind.BULLET_LIST})


def _has_prose_outside_code(section: Section) -> bool:
    lines = section.body.splitlines()
    in_fence, _ = fence_mask(lines)
    return any(line.strip() and not fenced for line, fenced in zip(lines, in_fence))


class ConsistencyChecker:
    """
    Walidator spójności korpusu dokumentów wzorców.

    Użycie:
        corpus      = load_corpus("docs/patterns")
        resolutions = resolve_corpus(corpus)
        report      = ConsistencyChecker().check(
            corpus.documents, resolutions, corpus.failures
        )
        for v in report.violations:
            print(v)
    """

    # ------------------------------------------------------------------
    # Publiczny interfejs
    # ------------------------------------------------------------------

    def check(
        self,
        documents: Sequence[PatternDocument],
        resolutions: Mapping[str, Mapping[str, LinkStatus]],
        failures: Iterable[MalformedDocument] = (),
    ) -> ValidationReport:
        """
        Sprawdza korpus i zwraca ValidationReport.

        Args:
            documents:   sparsowane dokumenty
            resolutions: wynik resolvera: source_id -> (cel -> status)
            failures:    błędy parsowania dokumentów pominiętych w korpusie
        """
        violations: list[Violation] = []
        warnings: list[str] = []

        failures = tuple(failures)

        # A — błędy parsowania
        self._stage_failures(failures, violations)

        for doc in documents:
            # B — przykład kodu
            self._stage_code_example(doc, violations)
            # C — listy punktowane
            self._stage_bullet_lists(doc, violations)
            # D — objaśnienia przykładów
            self._stage_explanations(doc, violations)

            for heading in duplicate_headings(doc):
                warnings.append(
                    f"{doc.id}: powtórzony nagłówek '{heading}' — kolejne kotwice "
                    f"dostają sufiks -1, -2, ..."
                )

        # E — linki (dokumenty i spis treści)
        self._stage_links(resolutions, {f.document_id for f in failures}, violations)

        # sort stabilny: w obrębie (dokument, reguła) zostaje kolejność wykrycia
        violations.sort(key=lambda v: (v.document_id, v.rule_id))
        return ValidationReport(violations=violations, warnings=warnings)

    # ------------------------------------------------------------------
    # Stage A — błędy parsowania
    # ------------------------------------------------------------------

    def _stage_failures(
        self,
        failures: Iterable[MalformedDocument],
        violations: list[Violation],
    ) -> None:
        for failure in failures:
            violations.append(Violation(
                document_id=failure.document_id,
                rule_id=RuleId.MALFORMED_DOCUMENT,
                message=f"linie {failure.line_range}: {failure.message}",
            ))

    # ------------------------------------------------------------------
    # Stage B — co najmniej jeden przykład kodu
    # ------------------------------------------------------------------

    def _stage_code_example(self, doc: PatternDocument, violations: list[Violation]) -> None:
        if not doc.has_kind(SectionKind.CODE_EXAMPLE):
            violations.append(Violation(
                document_id=doc.id,
                rule_id=RuleId.NO_CODE_EXAMPLE,
                message=f"Dokument '{doc.title}' nie zawiera żadnego przykładu kodu.",
            ))

    # ------------------------------------------------------------------
    # Stage C — niepuste listy punktowane
    # ------------------------------------------------------------------

    def _stage_bullet_lists(self, doc: PatternDocument, violations: list[Violation]) -> None:
        for section in doc.sections:
            if section.kind is SectionKind.BULLET_LIST and not section.items:
                violations.append(Violation(
                    document_id=doc.id,
                    rule_id=RuleId.EMPTY_BULLET_LIST,
                    message=(
                        f"Lista w sekcji '{section.heading}' (linia {section.line_start}) "
                        f"nie ma żadnego elementu."
                    ),
                ))

    # ------------------------------------------------------------------
    # Stage D — każdy przykład ma objaśnienie
    # ------------------------------------------------------------------

    def _stage_explanations(self, doc: PatternDocument, violations: list[Violation]) -> None:
        sections = doc.sections
        for i, section in enumerate(sections):
            if section.kind is not SectionKind.CODE_EXAMPLE:
                continue
            if _has_prose_outside_code(section):
                continue
            following = sections[i + 1] if i + 1 < len(sections) else None
            if following is not None and following.kind in _EXPLAINING_KINDS and following.body:
                continue
            violations.append(Violation(
                document_id=doc.id,
                rule_id=RuleId.UNEXPLAINED_EXAMPLE,
                message=(
                    f"Przykład '{section.heading}' (linia {section.line_start}) "
                    f"nie ma objaśnienia ani w sekcji, ani bezpośrednio po niej."
                ),
            ))

    # ------------------------------------------------------------------
    # Stage E — linki
    # ------------------------------------------------------------------

    def _stage_links(
        self,
        resolutions: Mapping[str, Mapping[str, LinkStatus]],
        failed_ids: set[str],
        violations: list[Violation],
    ) -> None:
        for source_id, statuses in resolutions.items():
            base = posixpath.dirname(source_id)
            for target, status in statuses.items():
                if status is not LinkStatus.MISSING:
                    continue
                path = target.partition("#")[0]
                target_id = target_document_id(path, base) if path else None
                if target_id in failed_ids:
                    message = (
                        f"Cel linku '{target}' wskazuje na dokument '{target_id}' "
                        f"pominięty z powodu błędu parsowania."
                    )
                else:
                    message = f"Cel linku '{target}' nie istnieje w korpusie."
                violations.append(Violation(
                    document_id=source_id,
                    rule_id=RuleId.UNRESOLVED_LINK,
                    message=message,
                ))
