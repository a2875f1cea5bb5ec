"""
validator — walidator spójności katalogu wzorców projektowych.

Interfejs publiczny:
    load_corpus         — wczytanie katalogu dokumentów (Corpus)
    LinkResolver        — indeks kotwic, rozwiązywanie celów linków
    ConsistencyChecker  — reguły strukturalne (etapy A–E)
    ValidationReport, Violation, RuleId, LinkStatus — typy raportu

Typowe użycie:
    from validator import ConsistencyChecker, load_corpus, resolve_corpus

    corpus      = load_corpus("docs/patterns")
    resolutions = resolve_corpus(corpus)
    report      = ConsistencyChecker().check(corpus.documents, resolutions, corpus.failures)
    if not report.is_valid:
        for v in report.violations:
            print(v.document_id, v.rule_id, v.message)
"""

from .types import LinkStatus, RuleId, ValidationReport, Violation
from .corpus import Corpus, EmptyCorpus, load_corpus
from .link_resolver import LinkResolver, Resolutions, resolve_corpus, resolve_links
from .consistency_checker import ConsistencyChecker

__all__ = [
    "LinkStatus",
    "RuleId",
    "ValidationReport",
    "Violation",
    "Corpus",
    "EmptyCorpus",
    "load_corpus",
    "LinkResolver",
    "Resolutions",
    "resolve_corpus",
    "resolve_links",
    "ConsistencyChecker",
]
