"""
Document assembly: the public entry point of the parser.

parse() decodes the PDF, rebuilds lines page by page, and runs the
pipeline stages in order:

    segment -> contact -> skills -> experience/education -> skill analysis
    -> quality -> keyword density / readability

Every stage consumes the full output of the previous one. There is no
shared mutable state, so independent documents can be parsed in parallel.
Only decoding can fail the whole call (DecodeError); sub-extractor failures
degrade the affected field and are listed in ParsedDocument.warnings.
"""

import logging
from typing import List, Optional, Sequence

from resume_analyzer.core.config import settings
from resume_analyzer.core.confidence_calculator import ConfidenceCalculator
from resume_analyzer.core.contact_extractor import PersonExtractor, extract_contact
from resume_analyzer.core.entity_extractor import extract_organizations, extract_person_names
from resume_analyzer.core.history_parser import (
    OrganizationExtractor,
    summarize_education,
    summarize_experience,
)
from resume_analyzer.core.line_reconstructor import Line, group_glyphs_into_lines, lines_from_text
from resume_analyzer.core.pdf_extractor import decode_pdf
from resume_analyzer.core.quality_scorer import DEFAULT_WEIGHTS, QualityWeights, calculate_quality_metrics
from resume_analyzer.core.schemas import ParsedDocument
from resume_analyzer.core.section_segmenter import segment_sections
from resume_analyzer.core.skill_extractor import analyze_skills, extract_skills
from resume_analyzer.core.text_metrics import calculate_keyword_density, calculate_readability_score

logger = logging.getLogger(__name__)


def build_full_text(pages: List[List[Line]]) -> str:
    """Lines joined by newlines, pages separated by a blank line."""
    return "\n\n".join("\n".join(line.text for line in page) for page in pages)


def assemble_document(
    pages: List[List[Line]],
    page_count: Optional[int] = None,
    *,
    file_name: Optional[str] = None,
    person_extractor: Optional[PersonExtractor] = extract_person_names,
    organization_extractor: Optional[OrganizationExtractor] = extract_organizations,
    contact_zone_lines: int = settings.CONTACT_ZONE_LINES,
    weights: QualityWeights = DEFAULT_WEIGHTS,
    decode_warnings: Sequence[str] = (),
) -> ParsedDocument:
    """
    Run the pipeline over already reconstructed lines.

    Args:
        pages: Ordered lines for each page, pages in document order
        page_count: Pages reported by the decoder (defaults to len(pages))
        file_name: Optional original file name, echoed into the result
        person_extractor: Name detector for the contact block (None disables it)
        organization_extractor: Company/school detector (None disables it)
        contact_zone_lines: Leading lines eligible for contact detection
        weights: Quality score weights and denominators
        decode_warnings: Problems reported by the decoder, carried into warnings

    Returns:
        Immutable ParsedDocument
    """
    warnings: List[str] = list(decode_warnings)
    all_lines = [line.text for page in pages for line in page]
    full_text = build_full_text(pages)

    sections = segment_sections(all_lines, contact_zone_lines=contact_zone_lines)

    contact = extract_contact(sections, full_text, person_extractor=person_extractor)
    if person_extractor is not None and contact.name is None:
        warnings.append("Could not detect candidate name.")

    skills = extract_skills(sections)
    experience = summarize_experience(sections, organization_extractor, warnings)
    education = summarize_education(sections, organization_extractor, warnings)

    skill_analysis = analyze_skills(skills)
    quality_metrics = calculate_quality_metrics(sections, skills, contact, weights)

    document = ParsedDocument(
        file_name=file_name,
        contact=contact,
        skills=skills,
        experience=experience,
        education=education,
        sections=sections,
        skill_analysis=skill_analysis,
        quality_metrics=quality_metrics,
        keyword_density=calculate_keyword_density(full_text),
        readability_score=calculate_readability_score(full_text),
        page_count=page_count if page_count is not None else len(pages),
        section_count=len(sections),
        character_count=len(full_text),
        confidence=ConfidenceCalculator.document(quality_metrics.overall_confidence),
        warnings=warnings,
    )
    logger.debug(
        f"Assembled document: {document.section_count} sections, "
        f"{skill_analysis.total_skills} skills, score {quality_metrics.overall_score}"
    )
    return document


def parse(
    file_bytes: bytes,
    *,
    file_name: Optional[str] = None,
    person_extractor: Optional[PersonExtractor] = extract_person_names,
    organization_extractor: Optional[OrganizationExtractor] = extract_organizations,
    line_y_threshold: float = settings.LINE_Y_THRESHOLD,
    contact_zone_lines: int = settings.CONTACT_ZONE_LINES,
    weights: QualityWeights = DEFAULT_WEIGHTS,
) -> ParsedDocument:
    """
    Parse raw PDF bytes into a ParsedDocument.

    Raises:
        DecodeError: the PDF could not be decoded. No partial result is returned.
    """
    decoded = decode_pdf(file_bytes)
    pages = [group_glyphs_into_lines(glyphs, y_threshold=line_y_threshold) for glyphs in decoded.pages]
    return assemble_document(
        pages,
        decoded.page_count,
        file_name=file_name,
        person_extractor=person_extractor,
        organization_extractor=organization_extractor,
        contact_zone_lines=contact_zone_lines,
        weights=weights,
        decode_warnings=decoded.warnings,
    )


def parse_text(
    text: str,
    *,
    file_name: Optional[str] = None,
    person_extractor: Optional[PersonExtractor] = extract_person_names,
    organization_extractor: Optional[OrganizationExtractor] = extract_organizations,
    contact_zone_lines: int = settings.CONTACT_ZONE_LINES,
    weights: QualityWeights = DEFAULT_WEIGHTS,
) -> ParsedDocument:
    """Parse an already linear plain-text resume as a single page."""
    return assemble_document(
        [lines_from_text(text)],
        1,
        file_name=file_name,
        person_extractor=person_extractor,
        organization_extractor=organization_extractor,
        contact_zone_lines=contact_zone_lines,
        weights=weights,
    )
