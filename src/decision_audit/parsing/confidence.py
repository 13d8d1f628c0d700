"""Extraction confidence: how much structure the parser found."""

from __future__ import annotations

from typing import Optional, Sequence

from decision_audit.models import ClaimRecord, ConfidenceLevel, DocumentSections


def score_extraction_confidence(
    sections: DocumentSections,
    claims: Sequence[ClaimRecord],
    effective_dates: Sequence[str],
    combined_rating: Optional[int],
) -> ConfidenceLevel:
    """Classify extraction confidence.

    high   -- a decision, evidence or reasons section, a rated claim, and
              an effective date or a stated combined rating
    medium -- one of those sections or a rated claim
    low    -- neither
    """
    has_sections = bool(sections.decision or sections.evidence or sections.reasons)
    has_rated_claim = any(c.rating_percent is not None for c in claims)
    has_date_or_combined = (
        bool(effective_dates)
        or any(c.effective_date for c in claims)
        or combined_rating is not None
    )

    if has_sections and has_rated_claim and has_date_or_combined:
        return ConfidenceLevel.HIGH
    if has_sections or has_rated_claim:
        return ConfidenceLevel.MEDIUM
    return ConfidenceLevel.LOW
