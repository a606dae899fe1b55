"""
Section segmentation for resume lines.

Walks the ordered lines of a whole document and partitions them into typed
sections. Two signals drive the partition:

- positional: lines near the top of the document that look like contact
  details (email, phone, profile URLs, an address, a short capitalized name)
  are collected into a Contact section
- lexical: lines that normalize to a known section header open a new
  section of that type

The segmenter is an explicit state machine. State values are immutable and
every transition returns a new state, so a scan is a plain fold over lines.
"""

import re
import logging
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Tuple, Union

from resume_analyzer.core.config import settings
from resume_analyzer.core.contact_extractor import (
    ADDRESS_RE,
    EMAIL_RE,
    GITHUB_RE,
    LINKEDIN_RE,
    PHONE_RE,
    URL_RE,
)
from resume_analyzer.core.schemas import Section, SectionType

logger = logging.getLogger(__name__)


CONTACT_SECTION_LABEL = "Contact Information"
HEADER_SECTION_LABEL = "Header Information"

CONTACT_SECTION_CONFIDENCE = 0.95
HEADED_SECTION_CONFIDENCE = 0.9
HEADER_SECTION_CONFIDENCE = 0.7

MIN_CONTENT_LINE_LENGTH = 3  # lines must be longer than this to count as content
MAX_NAME_LINE_LENGTH = 50

CONTACT_INDICATORS = (EMAIL_RE, PHONE_RE, LINKEDIN_RE, GITHUB_RE, ADDRESS_RE, URL_RE)
CONTACT_HEADER_RE = re.compile(r"^(contact|personal|info|details)(\s+(information|info|details))?$")
NAME_CANDIDATE_RE = re.compile(r"^[A-Z][A-Za-z'.-]*\s+[A-Z][A-Za-z'.-]*$")

# Matched against the normalized line (lowercase, punctuation stripped,
# whitespace collapsed). Order matters: the first match wins.
SECTION_HEADER_PATTERNS: Tuple[Tuple[SectionType, "re.Pattern[str]"], ...] = (
    (SectionType.CONTACT, re.compile(
        r"^(contact|contact information|contact info|contact details|personal info|personal information|personal details|details)$"
    )),
    (SectionType.SUMMARY, re.compile(
        r"^(summary|objective|profile|about|about me|overview|professional summary|career summary|"
        r"career objective|executive summary|professional profile)$"
    )),
    (SectionType.EXPERIENCE, re.compile(
        r"^(experience|employment|employment history|work history|career|career history|professional experience|"
        r"work experience|relevant experience|career experience)$"
    )),
    (SectionType.EDUCATION, re.compile(
        r"^(education|academic|academics|academic background|educational background|qualifications|degree|"
        r"university|college|education and training|education training)$"
    )),
    (SectionType.SKILLS, re.compile(
        r"^(skills|technical skills|core skills|key skills|competencies|core competencies|technologies|tech stack|"
        r"expertise|areas of expertise|proficiencies|technical proficiencies)$"
    )),
    (SectionType.PROJECTS, re.compile(
        r"^(projects|portfolio|work samples|key projects|notable projects|personal projects|academic projects)$"
    )),
    (SectionType.CERTIFICATIONS, re.compile(
        r"^(certifications?|certificates?|licenses?|credentials|licenses and certifications|licenses certifications)$"
    )),
    (SectionType.AWARDS, re.compile(
        r"^(awards?|honors?|recognition|achievements|accomplishments|awards and honors|honors and awards)$"
    )),
)


def normalize_header_text(text: str) -> str:
    """Lowercase, strip punctuation, collapse whitespace."""
    t = re.sub(r"[^\w\s]", "", text.lower())
    return " ".join(t.split())


def identify_section_type(text: str) -> Optional[SectionType]:
    """
    Return the section type a header line announces, or None.

    Examples:
        "EXPERIENCE" -> SectionType.EXPERIENCE
        "Work History" -> SectionType.EXPERIENCE
        "Technical Skills:" -> SectionType.SKILLS
        "Engineer at Acme" -> None
    """
    key = normalize_header_text(text)
    if not key:
        return None
    for section_type, pattern in SECTION_HEADER_PATTERNS:
        if pattern.match(key):
            return section_type
    return None


def is_contact_signal(text: str, allow_name: bool = True) -> bool:
    """
    True if a top-of-document line looks like contact details or a person name.

    The name heuristic is the weakest signal ("React Native" looks like a
    name too), so callers turn it off once an explicit header has opened a
    section.
    """
    if any(pattern.search(text) for pattern in CONTACT_INDICATORS):
        return True
    if CONTACT_HEADER_RE.match(normalize_header_text(text)):
        return True
    if (
        allow_name
        and len(text) < MAX_NAME_LINE_LENGTH
        and NAME_CANDIDATE_RE.match(text)
        and identify_section_type(text) is None
    ):
        return True
    return False


# ===== STATE MACHINE =====

@dataclass(frozen=True)
class Idle:
    """No section has been opened yet."""
    emitted: Tuple[Section, ...] = ()


@dataclass(frozen=True)
class InSection:
    """A section is open and receiving content."""
    current: Section
    emitted: Tuple[Section, ...] = ()


SegmenterState = Union[Idle, InSection]


def _close(state: SegmenterState) -> Tuple[Section, ...]:
    """Emit the open section, if any. Sections that never received content are dropped."""
    if isinstance(state, InSection) and state.current.content:
        return state.emitted + (state.current,)
    return state.emitted


def open_section(state: SegmenterState, section: Section) -> InSection:
    return InSection(current=section, emitted=_close(state))


def open_contact(state: SegmenterState) -> InSection:
    """
    Open the Contact section, or reopen the last emitted one.

    Reopening happens when the section being closed was empty and got
    dropped, which would otherwise put two Contact sections side by side.
    """
    emitted = _close(state)
    if emitted and emitted[-1].type == SectionType.CONTACT:
        return InSection(current=emitted[-1], emitted=emitted[:-1])
    return InSection(
        current=Section(
            type=SectionType.CONTACT,
            header=CONTACT_SECTION_LABEL,
            content=[],
            confidence=CONTACT_SECTION_CONFIDENCE,
        ),
        emitted=emitted,
    )


def in_headed_section(state: SegmenterState) -> bool:
    """True while a section opened by an explicit header line is current."""
    return isinstance(state, InSection) and state.current.type not in (SectionType.CONTACT, SectionType.HEADER)


def append_line(state: InSection, text: str) -> InSection:
    current = state.current.model_copy(update={"content": [*state.current.content, text]})
    return replace(state, current=current)


def finish(state: SegmenterState) -> List[Section]:
    """Emit the still-open section at end of input (even if it is empty)."""
    if isinstance(state, InSection):
        return list(state.emitted) + [state.current]
    return list(state.emitted)


def step(state: SegmenterState, index: int, text: str, contact_zone_lines: int) -> SegmenterState:
    """Advance the segmenter by one line."""
    if index < contact_zone_lines and is_contact_signal(text, allow_name=not in_headed_section(state)):
        if not (isinstance(state, InSection) and state.current.type == SectionType.CONTACT):
            state = open_contact(state)
        return append_line(state, text)

    section_type = identify_section_type(text)
    if section_type is not None:
        logger.debug(f"SECTION HEADER DETECTED at line {index}: '{text}' -> section_type='{section_type.value}'")
        return open_section(state, Section(
            type=section_type,
            header=text,
            content=[],
            confidence=HEADED_SECTION_CONFIDENCE,
        ))

    if isinstance(state, InSection):
        if len(text) > MIN_CONTENT_LINE_LENGTH:
            return append_line(state, text)
        return state

    # Content before any section header is kept as header info
    return InSection(
        current=Section(
            type=SectionType.HEADER,
            header=HEADER_SECTION_LABEL,
            content=[text],
            confidence=HEADER_SECTION_CONFIDENCE,
        ),
        emitted=state.emitted,
    )


def segment_sections(
    lines: Sequence[str],
    contact_zone_lines: int = settings.CONTACT_ZONE_LINES,
) -> List[Section]:
    """
    Partition ordered document lines into typed sections.

    Args:
        lines: Line texts for the whole document, pages concatenated in order
        contact_zone_lines: How many leading lines are eligible for contact detection

    Returns:
        Sections in document order
    """
    state: SegmenterState = Idle()
    for index, raw in enumerate(lines):
        text = raw.strip()
        if not text:
            continue
        state = step(state, index, text, contact_zone_lines)

    sections = finish(state)
    logger.debug(f"Segmented {len(lines)} lines into {len(sections)} sections: {[s.type.value for s in sections]}")
    return sections
