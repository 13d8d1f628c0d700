"""Weighted fingerprint signals for decision letters.

Each entry is ``(label, points, predicate)``. The tuple order is the
evaluation order and the order labels appear in a ``Fingerprint``.
Thresholds are derived from these weights; re-derive them if a weight
changes.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from decision_audit.models import ParseResult


@dataclass(frozen=True)
class SignalInput:
    """What every predicate sees: the raw text, its lower-case form, the parse."""

    raw: str
    lower: str
    result: ParseResult

    @classmethod
    def build(cls, raw: str, result: ParseResult) -> SignalInput:
        raw = raw or ""
        return cls(raw=raw, lower=raw.lower(), result=result)


@dataclass(frozen=True)
class FingerprintSignal:
    """One heuristic test and the points it adds when it fires."""

    label: str
    points: int
    predicate: Callable[[SignalInput], bool]

    def fires(self, data: SignalInput) -> bool:
        return bool(self.predicate(data))


_AUTHORITY = re.compile(r"\bdepartment\s+of\s+veterans\s+affairs\b")
_DECISION = re.compile(r"\bdecision\b")
_EVIDENCE_OR_REASONS = re.compile(r"\bevidence\b|\breasons?\s+for\s+decision\b")
_DIAGNOSTIC_CODE = re.compile(r"\bdiagnostic\s+code\b")
_COMBINED = re.compile(r"\bcombined\s+(?:rating|evaluation)\b")
_EFFECTIVE_DATE = re.compile(r"\beffective\s+date\b")
_SERVICE_CONNECTION = re.compile(r"\bservice[- ]connect(?:ion|ed)\b")
_PERCENT_TOKEN = re.compile(r"\b\d{1,3}\s?(?:%|percent\b)")
_PAGE_FOOTER = re.compile(r"\bpage\s+\d+\s+of\s+\d+\b")

LONG_DOCUMENT_WORDS = 400


def _has(pattern: re.Pattern[str]) -> Callable[[SignalInput], bool]:
    return lambda data: pattern.search(data.lower) is not None


def _decision_with_evidence(data: SignalInput) -> bool:
    return bool(_DECISION.search(data.lower) and _EVIDENCE_OR_REASONS.search(data.lower))


def _claims_parsed(data: SignalInput) -> bool:
    return len(data.result.claims) > 0


def _long_document(data: SignalInput) -> bool:
    return len(data.raw.split()) > LONG_DOCUMENT_WORDS


FINGERPRINT_SIGNALS: tuple[FingerprintSignal, ...] = (
    FingerprintSignal("Header: Department of Veterans Affairs", 20, _has(_AUTHORITY)),
    FingerprintSignal("Sections: Decision + Evidence/Reasons", 20, _decision_with_evidence),
    FingerprintSignal("Mentions Diagnostic Code", 15, _has(_DIAGNOSTIC_CODE)),
    FingerprintSignal("Combined rating stated", 10, _has(_COMBINED)),
    FingerprintSignal("Effective date present", 10, _has(_EFFECTIVE_DATE)),
    FingerprintSignal("Service connection wording", 10, _has(_SERVICE_CONNECTION)),
    FingerprintSignal("Percent ratings present", 10, _has(_PERCENT_TOKEN)),
    FingerprintSignal("Conditions parsed", 10, _claims_parsed),
    # Light bonuses
    FingerprintSignal(f"Length > {LONG_DOCUMENT_WORDS} words", 5, _long_document),
    FingerprintSignal("Page x of y footer", 5, _has(_PAGE_FOOTER)),
)

MAX_SCORE = sum(s.points for s in FINGERPRINT_SIGNALS)
HIGH_THRESHOLD = 55
MEDIUM_THRESHOLD = 35
