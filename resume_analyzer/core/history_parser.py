"""
Experience and education summaries.

Rather than splitting entries line by line, each block is summarized as the
organizations mentioned in it (companies or schools) plus every date-like
token. Both extractors are allowed to fail: a failure degrades the summary
(empty list, lower confidence) instead of aborting the parse.
"""

import re
import logging
from typing import Callable, List, Optional, Tuple

from resume_analyzer.core.confidence_calculator import ConfidenceCalculator
from resume_analyzer.core.schemas import EducationSummary, ExperienceSummary, Section, SectionType

logger = logging.getLogger(__name__)

# Returns organization names found in a text span.
OrganizationExtractor = Callable[[str], List[str]]

_MONTHS_SHORT = r"(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]*"
_MONTHS_LONG = r"(?:January|February|March|April|May|June|July|August|September|October|November|December)"

# Most specific first; results keep that order and are de-duplicated.
DATE_PATTERNS = (
    re.compile(r"\b\d{1,2}/\d{1,2}/\d{4}\b"),                          # MM/DD/YYYY
    re.compile(r"\b\d{4}-\d{1,2}-\d{1,2}\b"),                          # YYYY-MM-DD
    re.compile(r"\b\d{1,2}-\d{1,2}-\d{4}\b"),                          # MM-DD-YYYY
    re.compile(rf"\b{_MONTHS_SHORT}\s+\d{{4}}\b", re.IGNORECASE),      # Month YYYY
    re.compile(rf"\b{_MONTHS_LONG}\s+\d{{1,2}},?\s+\d{{4}}\b", re.IGNORECASE),  # Month D, YYYY
    re.compile(r"\b\d{4}\s*-\s*\d{4}\b"),                              # 2020-2023
    re.compile(r"\b\d{4}\s*to\s*\d{4}\b", re.IGNORECASE),              # 2020 to 2023
    re.compile(r"\b\d{4}\s*–\s*\d{4}\b"),                              # 2020 – 2023
    re.compile(r"\b\d{4}\b"),                                          # bare years
)


def extract_dates_from_text(text: str) -> List[str]:
    """
    Collect date-like tokens in pattern order without duplicates.

    Examples:
        "Engineer at Acme (2019-2022)" -> ["2019-2022", "2019", "2022"]
        "Jan 2020 - Mar 2021" -> ["Jan 2020", "Mar 2021", "2020", "2021"]
    """
    dates: List[str] = []
    for pattern in DATE_PATTERNS:
        for m in pattern.finditer(text):
            value = m.group(0)
            if value not in dates:
                dates.append(value)
    return dates


def _section_text(sections: List[Section], section_type: SectionType) -> Optional[str]:
    """Content of the first section of the given type, or None when absent."""
    for section in sections:
        if section.type == section_type:
            return " ".join(section.content)
    return None


def _summarize(
    text: str,
    organization_extractor: Optional[OrganizationExtractor],
    label: str,
    warnings: List[str],
) -> Tuple[List[str], List[str], float]:
    degraded = False

    organizations: List[str] = []
    if organization_extractor is not None:
        try:
            organizations = list(organization_extractor(text))
        except Exception as e:
            logger.warning(f"{label} organization extraction failed: {e}")
            warnings.append(f"{label} organization extraction failed; organizations left empty.")
            degraded = True

    try:
        dates = extract_dates_from_text(text)
    except Exception as e:
        logger.warning(f"{label} date extraction failed: {e}")
        warnings.append(f"{label} date extraction failed; dates left empty.")
        dates = []
        degraded = True

    return organizations, dates, ConfidenceCalculator.summary(degraded)


def summarize_experience(
    sections: List[Section],
    organization_extractor: Optional[OrganizationExtractor] = None,
    warnings: Optional[List[str]] = None,
) -> Optional[ExperienceSummary]:
    text = _section_text(sections, SectionType.EXPERIENCE)
    if text is None:
        return None
    companies, dates, confidence = _summarize(
        text, organization_extractor, "Experience", warnings if warnings is not None else []
    )
    logger.debug(f"Experience summary: {len(companies)} companies, {len(dates)} dates")
    return ExperienceSummary(companies=companies, dates=dates, raw_text=text, confidence=confidence)


def summarize_education(
    sections: List[Section],
    organization_extractor: Optional[OrganizationExtractor] = None,
    warnings: Optional[List[str]] = None,
) -> Optional[EducationSummary]:
    text = _section_text(sections, SectionType.EDUCATION)
    if text is None:
        return None
    schools, dates, confidence = _summarize(
        text, organization_extractor, "Education", warnings if warnings is not None else []
    )
    logger.debug(f"Education summary: {len(schools)} schools, {len(dates)} dates")
    return EducationSummary(schools=schools, dates=dates, raw_text=text, confidence=confidence)
