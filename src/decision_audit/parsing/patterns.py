"""Regex patterns for decision letter parsing.

Heading synonyms, date forms and fact phrasings live here so the
extractors stay free of inline regex literals. All patterns are
case-insensitive.
"""

from __future__ import annotations

import re
from typing import Pattern

from decision_audit.models import SectionName

# ── Headings ─────────────────────────────────────────────────────────

# A candidate heading is a short standalone line of words, optional colon.
HEADING_LINE: Pattern[str] = re.compile(
    r"^[ ]*(?P<title>[A-Za-z][A-Za-z ]{2,40}?)[ ]*:?[ ]*$",
    re.MULTILINE,
)

# Matched with ``fullmatch`` against the candidate title.
SECTION_PATTERNS: dict[SectionName, list[Pattern[str]]] = {
    SectionName.DECISION: [
        re.compile(r"decisions?", re.IGNORECASE),
    ],
    SectionName.EVIDENCE: [
        re.compile(r"evidence", re.IGNORECASE),
    ],
    SectionName.REASONS: [
        re.compile(r"reasons?\s+for\s+decisions?", re.IGNORECASE),
        re.compile(r"reasons?\s+and\s+bases", re.IGNORECASE),
        re.compile(r"reasons?\s+bases", re.IGNORECASE),
        re.compile(r"reasons?", re.IGNORECASE),
    ],
    SectionName.REFERENCES: [
        re.compile(r"references?", re.IGNORECASE),
    ],
}

# ── Dates ────────────────────────────────────────────────────────────

MONTHS = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|Jun(?:e)?|Jul(?:y)?"
    r"|Aug(?:ust)?|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)"
)
DATE_LONG = rf"\b{MONTHS}\.?\s+\d{{1,2}},\s+\d{{4}}\b"
DATE_ISO = r"\b\d{4}-\d{2}-\d{2}\b"

EFFECTIVE_DATE: Pattern[str] = re.compile(
    rf"effective\s+(?:date\s+of\s+)?(?P<date>{DATE_LONG}|{DATE_ISO})",
    re.IGNORECASE,
)

# ── Document facts ───────────────────────────────────────────────────

COMBINED_RATING: Pattern[str] = re.compile(
    r"combined\s+(?:evaluation|rating)\s+(?:is|of)\s+(?P<pct>\d{1,3})\s*(?:percent\b|%)",
    re.IGNORECASE,
)

DIAGNOSTIC_CODE: Pattern[str] = re.compile(
    r"diagnostic\s*code\s*:?\s*(?P<code>\d{4})\b",
    re.IGNORECASE,
)

# Standalone rating near a claim line (look-ahead fill).
NEARBY_RATING: Pattern[str] = re.compile(
    r"(?P<pct>\d{1,3})\s*(?:percent\b|%)(?:\s*(?:evaluation|rating|disabling))?",
    re.IGNORECASE,
)

# ── Name cleanup ─────────────────────────────────────────────────────

ALSO_CLAIMED_AS: Pattern[str] = re.compile(r"\(\s*also\s+claimed\s+as[^)]*\)", re.IGNORECASE)
WHITESPACE_RUN: Pattern[str] = re.compile(r"\s{2,}")
TRAILING_PUNCTUATION: Pattern[str] = re.compile(r"[\s.,;:]+$")

SENTENCE_BREAK: Pattern[str] = re.compile(r"(?<=[.?!])\s+")
