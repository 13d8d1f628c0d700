"""Per-condition claim extraction.

Each way a letter phrases an outcome is a ``ClaimTemplate``: a tagged
pattern with a declared capture layout. Templates are tried in
``CLAIM_TEMPLATES`` order and the first hit on a line wins. Letters often
wrap one logical item over several physical lines, so a hit looks at the
next two lines for the rating, diagnostic code and effective date it is
missing.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Pattern, Sequence

from decision_audit.models import ClaimRecord, DocumentSections
from decision_audit.parsing.extractors import clamp_percent, clean_condition_name, parse_int
from decision_audit.parsing.normalizer import to_lines
from decision_audit.parsing.patterns import (
    DIAGNOSTIC_CODE,
    EFFECTIVE_DATE,
    NEARBY_RATING,
    SENTENCE_BREAK,
)

log = logging.getLogger(__name__)

LOOKAHEAD_LINES = 2
RATIONALE_LINES = 2
RATIONALE_SENTENCES = 2

_PCT = r"\d{1,3}"
_PERCENT = r"\s*(?:percent\b|%)"
# Condition names stop at a sentence break, a clause comma, an "effective"
# clause, a trailing verb phrase, or end of line.
_NAME = r"[^\n]+?"
_NAME_END = r"(?=\s*(?:[.;:](?:\s|$)|,\s|\beffective\b|\s+(?:is|was|has\s+been)\b|$))"


class ClaimPhrasing(str, Enum):
    """Kinds of outcome phrasing recognized in decision letters."""

    SERVICE_CONNECTION = "service_connection"
    EVALUATION_OUTCOME = "evaluation_outcome"
    RATING_ASSIGNED_FOR = "rating_assigned_for"
    FOR_RATING_ASSIGNED = "for_rating_assigned"
    RELAXED_RATING_FOR = "relaxed_rating_for"


@dataclass(frozen=True)
class ClaimTemplate:
    """A phrasing pattern with ``first``/``second`` capture groups.

    ``rating_group`` names the group that normally holds the percent; None
    means the template carries no rating and ``first`` is the name.
    """

    phrasing: ClaimPhrasing
    pattern: Pattern[str]
    rating_group: Optional[str] = None


@dataclass(frozen=True)
class LineMatch:
    """Name and rating pulled from one line by one template."""

    phrasing: ClaimPhrasing
    name: str
    rating_percent: Optional[int]


CLAIM_TEMPLATES: tuple[ClaimTemplate, ...] = (
    ClaimTemplate(
        ClaimPhrasing.SERVICE_CONNECTION,
        re.compile(
            r"service\s+connection\s+for\s+(?P<first>.+?)\s+is\s+(?:granted|denied)\b",
            re.IGNORECASE,
        ),
    ),
    ClaimTemplate(
        ClaimPhrasing.EVALUATION_OUTCOME,
        re.compile(
            rf"\b(?:increase|evaluation)\s+of\s+(?:(?P<second>{_PCT}){_PERCENT}\s+for\s+)?"
            r"(?P<first>.+?)\s+is\s+(?:granted|denied)\b",
            re.IGNORECASE,
        ),
        rating_group="second",
    ),
    ClaimTemplate(
        ClaimPhrasing.RATING_ASSIGNED_FOR,
        re.compile(
            rf"\b(?:a|an)\s+(?P<first>{_PCT}){_PERCENT}\s+(?:evaluation|rating)\s+"
            rf"(?:is\s+assigned\s+for|for)\s+(?P<second>{_NAME}){_NAME_END}",
            re.IGNORECASE,
        ),
        rating_group="first",
    ),
    ClaimTemplate(
        ClaimPhrasing.FOR_RATING_ASSIGNED,
        re.compile(
            rf"\bfor\s+(?P<first>(?:(?!\bfor\s)[^,\n])+?),\s+(?:a|an)\s+(?P<second>{_PCT})"
            rf"{_PERCENT}\s+(?:evaluation|rating)\s+is\s+assigned\b",
            re.IGNORECASE,
        ),
        rating_group="second",
    ),
)

RELAXED_TEMPLATE = ClaimTemplate(
    ClaimPhrasing.RELAXED_RATING_FOR,
    re.compile(
        rf"\b(?:a|an)\s+(?P<first>{_PCT}){_PERCENT}\s+(?:evaluation|rating)\b"
        rf"[^\n]*?\bfor\s+(?P<second>{_NAME}){_NAME_END}",
        re.IGNORECASE | re.MULTILINE,
    ),
    rating_group="first",
)


def _resolve(template: ClaimTemplate, match: re.Match[str]) -> LineMatch:
    """Work out which captured group is the rating and which is the name.

    The group that parses as an integer is the rating. If both do, the
    template's declared layout decides and the ambiguity is logged.
    """
    first = match.group("first")
    if template.rating_group is None:
        return LineMatch(template.phrasing, clean_condition_name(first), None)

    second = match.group("second") or ""
    first_num, second_num = parse_int(first), parse_int(second)

    if first_num is not None and second_num is not None:
        log.warning(
            "Ambiguous claim groups for %s: both %r and %r are numeric",
            template.phrasing.value,
            first,
            second,
        )
        if template.rating_group == "first":
            first_num, second_num = first_num, None
        else:
            first_num, second_num = None, second_num

    if first_num is not None:
        return LineMatch(template.phrasing, clean_condition_name(second), clamp_percent(first_num))
    if second_num is not None:
        return LineMatch(template.phrasing, clean_condition_name(first), clamp_percent(second_num))

    name_group = "second" if template.rating_group == "first" else "first"
    return LineMatch(template.phrasing, clean_condition_name(match.group(name_group)), None)


def match_line(line: str) -> Optional[LineMatch]:
    """Apply the line templates in priority order; first hit wins."""
    for template in CLAIM_TEMPLATES:
        match = template.pattern.search(line)
        if match is not None:
            return _resolve(template, match)
    return None


def rationale_snippet(lines: Sequence[str]) -> str:
    """Join *lines* and keep at most the first two sentences."""
    joined = " ".join(line.strip() for line in lines if line.strip())
    sentences = SENTENCE_BREAK.split(joined)
    return " ".join(sentences[:RATIONALE_SENTENCES]).strip()


def candidate_regions(sections: DocumentSections) -> list[str]:
    """Decision and reasons slices when present, else the whole document."""
    regions = [s for s in (sections.decision, sections.reasons) if s]
    if not regions and sections.full:
        regions = [sections.full]
    return regions


def _scan_region(region: str) -> list[ClaimRecord]:
    lines = to_lines(region)
    claims: list[ClaimRecord] = []

    for i, line in enumerate(lines):
        hit = match_line(line)
        if hit is None or not hit.name:
            continue

        window = " ".join(lines[i:i + 1 + LOOKAHEAD_LINES])
        rating = hit.rating_percent
        if rating is None:
            near = NEARBY_RATING.search(window)
            if near is not None:
                rating = clamp_percent(near.group("pct"))
        code = DIAGNOSTIC_CODE.search(window)
        effective = EFFECTIVE_DATE.search(window)

        claims.append(
            ClaimRecord(
                name=hit.name,
                rating_percent=rating,
                diagnostic_code=code.group("code") if code else None,
                effective_date=effective.group("date") if effective else None,
                rationale_snippet=rationale_snippet(lines[i:i + RATIONALE_LINES]),
            )
        )
    return claims


def _relaxed_fallback(text: str) -> list[ClaimRecord]:
    claims: list[ClaimRecord] = []
    for match in RELAXED_TEMPLATE.pattern.finditer(text):
        hit = _resolve(RELAXED_TEMPLATE, match)
        if hit.name:
            claims.append(ClaimRecord(name=hit.name, rating_percent=hit.rating_percent))
    return claims


def extract_claims(text: str, sections: DocumentSections) -> tuple[ClaimRecord, ...]:
    """Find claim records in the candidate regions of normalized *text*.

    When the line scan finds nothing, a relaxed "a N percent evaluation
    ... for X" pattern runs over the whole document without look-ahead.
    """
    claims: list[ClaimRecord] = []
    for region in candidate_regions(sections):
        claims.extend(_scan_region(region))

    if not claims and text:
        claims = _relaxed_fallback(text)
        if claims:
            log.debug("Relaxed fallback produced %d claim(s)", len(claims))

    return tuple(claims)
