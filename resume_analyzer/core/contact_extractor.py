import re
import logging
from typing import Callable, List, Optional

from resume_analyzer.core.schemas import Contact, Section, SectionType

logger = logging.getLogger(__name__)

# Returns candidate person names found in a text span, best first.
PersonExtractor = Callable[[str], List[str]]


EMAIL_RE = re.compile(r"\b[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}\b", re.IGNORECASE)
# Optional "+<cc>" or trunk "1" prefix, then exactly 10 digits that may be
# separated by spaces, dashes, dots or parentheses. Group 1 is the subscriber
# number; the prefix is discarded.
# Handles: +91 98765 43210, (987) 654-3210, 1-555-111-2222, 9876543210
PHONE_RE = re.compile(
    r"(?<![\d+])"
    r"(?:\+\d{1,3}[-.\s]?|1[-.\s]?)?"
    r"(\(?\d(?:[-.\s()]{0,2}\d){9})"
    r"(?!\d)"
)
LINKEDIN_RE = re.compile(r"linkedin\.com/in/([A-Za-z0-9_-]+)", re.IGNORECASE)
GITHUB_RE = re.compile(r"github\.com/([A-Za-z0-9_-]+)", re.IGNORECASE)
URL_RE = re.compile(r"\bhttps?://[^\s)>\]]+", re.IGNORECASE)
# "123 Main Street, Springfield, IL 62704"
ADDRESS_RE = re.compile(r"\b\d+\s+[A-Za-z\s]+,\s*[A-Za-z\s]+,?\s*[A-Za-z]{2}\s*\d{5}\b")

TOP_LINES_SCANNED = 10


def normalize_phone(text: str) -> Optional[str]:
    """
    Return the 10-digit subscriber number of the first phone found in text.

    Country codes (+91, +1) and a leading trunk "1" are dropped so national
    and international renderings of the same number compare equal.
    """
    m = PHONE_RE.search(text)
    if not m:
        return None
    digits = re.sub(r"\D", "", m.group(1))
    return digits if len(digits) == 10 else None


def _first_section(sections: List[Section], section_type: SectionType) -> Optional[Section]:
    for section in sections:
        if section.type == section_type:
            return section
    return None


def build_contact_text(sections: List[Section], full_text: str) -> str:
    """
    Combine the three overlapping contact sources into one search span.

    1. the first Contact section's content
    2. the first Header section's content
    3. the first lines of the whole document
    """
    contact_section = _first_section(sections, SectionType.CONTACT)
    header_section = _first_section(sections, SectionType.HEADER)
    top_lines = " ".join(full_text.split("\n")[:TOP_LINES_SCANNED])

    return " ".join([
        " ".join(contact_section.content) if contact_section else "",
        " ".join(header_section.content) if header_section else "",
        top_lines,
    ])


def _first_website(text: str) -> Optional[str]:
    for m in URL_RE.finditer(text):
        url = m.group(0).rstrip(".,;:")
        lowered = url.lower()
        if "linkedin.com" in lowered or "github.com" in lowered:
            continue
        return url
    return None


def extract_contact(
    sections: List[Section],
    full_text: str,
    person_extractor: Optional[PersonExtractor] = None,
) -> Contact:
    """
    Best-effort contact extraction over the header/contact zone.

    Every field is optional; a missing field is a valid outcome. Name
    detection is delegated to person_extractor and any failure there leaves
    the name unset instead of propagating.
    """
    text = build_contact_text(sections, full_text)
    logger.debug(f"Contact detection text: {text[:200]!r}")

    email_m = EMAIL_RE.search(text)
    linkedin_m = LINKEDIN_RE.search(text)
    github_m = GITHUB_RE.search(text)

    name: Optional[str] = None
    if person_extractor is not None:
        try:
            people = person_extractor(text)
            if people:
                name = people[0].strip() or None
        except Exception as e:
            logger.warning(f"Name extraction failed, leaving name unset: {e}")

    contact = Contact(
        name=name,
        email=email_m.group(0) if email_m else None,
        phone=normalize_phone(text),
        linkedin=f"https://linkedin.com/in/{linkedin_m.group(1)}" if linkedin_m else None,
        github=f"https://github.com/{github_m.group(1)}" if github_m else None,
        website=_first_website(text),
    )
    logger.debug(f"Extracted contact fields: {sorted(k for k, v in contact.model_dump().items() if v)}")
    return contact
