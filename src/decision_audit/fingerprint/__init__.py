"""Heuristic gate deciding whether a document belongs to the target family."""

from __future__ import annotations

from decision_audit.fingerprint.classifier import classify, confidence_for_score
from decision_audit.fingerprint.signals import (
    FINGERPRINT_SIGNALS,
    HIGH_THRESHOLD,
    MAX_SCORE,
    MEDIUM_THRESHOLD,
    FingerprintSignal,
)

__all__ = [
    "FINGERPRINT_SIGNALS",
    "HIGH_THRESHOLD",
    "MAX_SCORE",
    "MEDIUM_THRESHOLD",
    "FingerprintSignal",
    "classify",
    "confidence_for_score",
]
