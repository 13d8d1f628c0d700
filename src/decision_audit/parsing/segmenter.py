"""Heading detection and section slicing.

A heading is a standalone line whose title matches one of the synonyms in
``SECTION_PATTERNS``. Each canonical section spans from its heading
to the next heading of a different kind, or to the end of the document;
repeated blocks of the same section are joined.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from decision_audit.models import DocumentSections, SectionName
from decision_audit.parsing.patterns import HEADING_LINE, SECTION_PATTERNS

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class HeadingMark:
    """A recognized heading and the offset of its line in the text."""

    section: SectionName
    title: str
    offset: int


def classify_heading(title: str) -> Optional[SectionName]:
    """Map a heading title to its canonical section, or None."""
    title = title.strip()
    if not title:
        return None
    for section, patterns in SECTION_PATTERNS.items():
        for pattern in patterns:
            if pattern.fullmatch(title):
                return section
    return None


def find_headings(text: str) -> list[HeadingMark]:
    """Return every recognized heading line in document order."""
    marks: list[HeadingMark] = []
    for match in HEADING_LINE.finditer(text):
        title = match.group("title").strip()
        section = classify_heading(title)
        if section is not None:
            marks.append(HeadingMark(section=section, title=title, offset=match.start()))
    return marks


def slice_sections(text: str) -> DocumentSections:
    """Slice normalized *text* into its named sections.

    Missing headings are simply absent. A section's slice runs from its
    heading to the next heading of a different kind. When a section's
    heading recurs later in the document (letters with one
    Decision/Evidence/Reasons block per issue), every block is kept and
    joined in document order.
    """
    marks = find_headings(text)
    blocks: dict[str, list[str]] = {}

    for i, mark in enumerate(marks):
        if i > 0 and marks[i - 1].section == mark.section:
            continue
        end = len(text)
        for later in marks[i + 1:]:
            if later.section != mark.section:
                end = later.offset
                break
        blocks.setdefault(mark.section.value, []).append(text[mark.offset:end].strip())

    slices = {name: "\n\n".join(parts) for name, parts in blocks.items()}
    log.debug("Section slicing found %d of %d sections", len(slices), len(SectionName))
    return DocumentSections(full=text, **slices)
