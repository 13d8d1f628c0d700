"""Target-family fingerprint: does this document look like a decision letter?"""

from __future__ import annotations

import logging
from typing import Sequence

from decision_audit.fingerprint.signals import (
    FINGERPRINT_SIGNALS,
    HIGH_THRESHOLD,
    MEDIUM_THRESHOLD,
    FingerprintSignal,
    SignalInput,
)
from decision_audit.models import ConfidenceLevel, Fingerprint, ParseResult

log = logging.getLogger(__name__)


def confidence_for_score(score: int) -> ConfidenceLevel:
    """Map a fingerprint score onto the gate's confidence bands."""
    if score >= HIGH_THRESHOLD:
        return ConfidenceLevel.HIGH
    if score >= MEDIUM_THRESHOLD:
        return ConfidenceLevel.MEDIUM
    return ConfidenceLevel.LOW


def classify(
    raw_text: str,
    result: ParseResult,
    signals: Sequence[FingerprintSignal] = FINGERPRINT_SIGNALS,
) -> Fingerprint:
    """Score *raw_text* against the signal table.

    Independent of the parser's own extraction confidence; the parse result
    only feeds the "conditions parsed" signal. Never raises.
    """
    data = SignalInput.build(raw_text, result)
    score = 0
    fired: list[str] = []

    for signal in signals:
        if signal.fires(data):
            score += signal.points
            fired.append(signal.label)

    log.debug("Fingerprint score %d from %d signal(s)", score, len(fired))
    return Fingerprint(
        looks_like_target=score >= MEDIUM_THRESHOLD,
        score=score,
        confidence=confidence_for_score(score),
        signals=tuple(fired),
    )
