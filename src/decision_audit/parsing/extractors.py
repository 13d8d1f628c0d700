"""Document-level fact extractors.

Each extractor is a pure function of the normalized full text (and the
section slices, which the document-wide extractors ignore).
"""

from __future__ import annotations

from typing import Iterable, Optional, TypeVar

from decision_audit.models import DocumentSections
from decision_audit.parsing.patterns import (
    ALSO_CLAIMED_AS,
    COMBINED_RATING,
    DIAGNOSTIC_CODE,
    EFFECTIVE_DATE,
    TRAILING_PUNCTUATION,
    WHITESPACE_RUN,
)

T = TypeVar("T")


def clamp_percent(value: int | str) -> int:
    """Clamp a percent to [0, 100]."""
    n = value if isinstance(value, int) else int(value)
    return max(0, min(100, n))


def parse_int(value: Optional[str]) -> Optional[int]:
    """Return ``int(value)`` when *value* is a plain integer, else None."""
    if value is None:
        return None
    value = value.strip()
    if not value.isascii() or not value.isdigit():
        return None
    return int(value)


def dedupe(items: Iterable[T]) -> tuple[T, ...]:
    """Drop repeats, keeping first-seen order."""
    return tuple(dict.fromkeys(items))


def clean_condition_name(raw: str) -> str:
    """Strip "(also claimed as ...)" notes, squeeze spaces, drop trailing punctuation."""
    name = ALSO_CLAIMED_AS.sub(" ", raw)
    name = WHITESPACE_RUN.sub(" ", name).strip()
    name = TRAILING_PUNCTUATION.sub("", name)
    return name.strip()


def extract_combined_rating(
    text: str, sections: Optional[DocumentSections] = None
) -> Optional[int]:
    """First explicitly stated combined rating, clamped, or None."""
    match = COMBINED_RATING.search(text)
    if match is None:
        return None
    return clamp_percent(match.group("pct"))


def extract_effective_dates(
    text: str, sections: Optional[DocumentSections] = None
) -> tuple[str, ...]:
    """Every "effective [date of] <DATE>" date, de-duplicated in document order."""
    return dedupe(m.group("date") for m in EFFECTIVE_DATE.finditer(text))


def extract_diagnostic_codes(
    text: str, sections: Optional[DocumentSections] = None
) -> tuple[str, ...]:
    """Every "diagnostic code NNNN", de-duplicated in document order."""
    return dedupe(m.group("code") for m in DIAGNOSTIC_CODE.finditer(text))
