"""Decision letter parser: normalize, segment, extract, score, assemble."""

from __future__ import annotations

import logging

from decision_audit.models import DocumentFacts, ParseResult
from decision_audit.parsing.claims import extract_claims
from decision_audit.parsing.confidence import score_extraction_confidence
from decision_audit.parsing.extractors import (
    extract_combined_rating,
    extract_diagnostic_codes,
    extract_effective_dates,
)
from decision_audit.parsing.normalizer import normalize_text
from decision_audit.parsing.segmenter import slice_sections

log = logging.getLogger(__name__)


def parse(raw_text: str) -> ParseResult:
    """Parse a decision letter into claims, document facts and a confidence.

    Never raises: text without recognizable structure yields an empty,
    ``low``-confidence result. Deterministic for identical input.
    """
    full = normalize_text(raw_text or "")
    sections = slice_sections(full)

    combined = extract_combined_rating(full, sections)
    effective_dates = extract_effective_dates(full, sections)
    diagnostic_codes = extract_diagnostic_codes(full, sections)
    claims = extract_claims(full, sections)

    confidence = score_extraction_confidence(sections, claims, effective_dates, combined)

    log.debug(
        "Parsed letter: %d claim(s), %d section(s), %d date(s), %d code(s), confidence=%s",
        len(claims),
        len(sections.found),
        len(effective_dates),
        len(diagnostic_codes),
        confidence.value,
    )

    return ParseResult(
        claims=claims,
        facts=DocumentFacts(
            combined_rating_stated=combined,
            effective_dates=effective_dates,
            diagnostic_codes=diagnostic_codes,
            sections=sections,
        ),
        extraction_confidence=confidence,
    )
