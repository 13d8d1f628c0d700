"""Decision letter parsing core.

Pure, synchronous functions; nothing here performs I/O or raises on odd
input.
"""

from __future__ import annotations

from decision_audit.parsing.claims import CLAIM_TEMPLATES, ClaimPhrasing, ClaimTemplate, extract_claims, match_line
from decision_audit.parsing.normalizer import normalize_text
from decision_audit.parsing.parser import parse
from decision_audit.parsing.segmenter import classify_heading, slice_sections

__all__ = [
    "CLAIM_TEMPLATES",
    "ClaimPhrasing",
    "ClaimTemplate",
    "classify_heading",
    "extract_claims",
    "match_line",
    "normalize_text",
    "parse",
    "slice_sections",
]
