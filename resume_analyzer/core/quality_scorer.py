"""
Document quality scoring.

Pure function of (sections, skills, contact). No I/O and no hidden state,
so it can be tested on hand-built inputs without a PDF.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from resume_analyzer.core.schemas import Contact, QualityMetrics, Section, SectionType, SkillRecord


REQUIRED_SECTIONS: Tuple[SectionType, ...] = (
    SectionType.CONTACT,
    SectionType.EXPERIENCE,
    SectionType.SKILLS,
    SectionType.EDUCATION,
)
REQUIRED_CONTACT_FIELDS: Tuple[str, ...] = ("name", "email", "phone")

SECTION_COMPLETENESS_TARGET = 75
CONTACT_COMPLETENESS_TARGET = 80
SKILL_DIVERSITY_TARGET = 70
CONTENT_DEPTH_TARGET = 60

MISSING_SECTIONS_HINT = "Add missing sections like Education or Projects"
MISSING_CONTACT_HINT = "Include missing contact information: {fields}"
MORE_SKILLS_HINT = "Include more technical skills and tools"
MORE_DETAIL_HINT = "Provide more detailed descriptions of experience"


@dataclass(frozen=True)
class QualityWeights:
    """
    Weights (integer percentages summing to 100) and normalization denominators.

    Defaults: sections 35, contact 15, skills 25, content 25; diversity
    saturates at 15 skills, depth at 2000 characters of section content.
    """
    sections: int = 35
    contact: int = 15
    skills: int = 25
    content: int = 25
    skill_target: int = 15
    content_target_chars: int = 2000


DEFAULT_WEIGHTS = QualityWeights()


def _round_half_up(numerator: int, denominator: int) -> int:
    return (2 * numerator + denominator) // (2 * denominator)


def _percent(fraction_num: int, fraction_den: int) -> int:
    """round(min(num/den, 1) * 100) with half-up rounding, on integers."""
    if fraction_den <= 0:
        return 0
    return _round_half_up(min(fraction_num, fraction_den) * 100, fraction_den)


def section_completeness(sections: List[Section]) -> int:
    present = {s.type for s in sections}
    found = sum(1 for t in REQUIRED_SECTIONS if t in present)
    return _percent(found, len(REQUIRED_SECTIONS))


def missing_contact_fields(contact: Contact) -> List[str]:
    return [f for f in REQUIRED_CONTACT_FIELDS if not getattr(contact, f)]


def contact_completeness(contact: Contact) -> int:
    found = len(REQUIRED_CONTACT_FIELDS) - len(missing_contact_fields(contact))
    return _percent(found, len(REQUIRED_CONTACT_FIELDS))


def total_skill_count(skills: Dict[str, Dict[str, SkillRecord]]) -> int:
    return sum(len(category) for category in skills.values())


def skill_diversity(skills: Dict[str, Dict[str, SkillRecord]], weights: QualityWeights = DEFAULT_WEIGHTS) -> int:
    return _percent(total_skill_count(skills), weights.skill_target)


def content_characters(sections: List[Section]) -> int:
    """Characters of section content, lines of one section joined by single spaces."""
    return sum(len(" ".join(s.content)) for s in sections)


def content_depth(sections: List[Section], weights: QualityWeights = DEFAULT_WEIGHTS) -> int:
    return _percent(content_characters(sections), weights.content_target_chars)


def weighted_total(
    section_score: int,
    contact_score: int,
    skill_score: int,
    content_score: int,
    weights: QualityWeights = DEFAULT_WEIGHTS,
) -> int:
    """Weighted sum of the four sub-metrics, scaled by 100 (0..10000)."""
    return (
        weights.sections * section_score
        + weights.contact * contact_score
        + weights.skills * skill_score
        + weights.content * content_score
    )


def overall_score(
    section_score: int,
    contact_score: int,
    skill_score: int,
    content_score: int,
    weights: QualityWeights = DEFAULT_WEIGHTS,
) -> int:
    """round(0.35*SC + 0.15*CC + 0.25*SD + 0.25*CD), half-up, computed exactly on integers."""
    weight_sum = weights.sections + weights.contact + weights.skills + weights.content
    if weight_sum <= 0:
        return 0
    total = weighted_total(section_score, contact_score, skill_score, content_score, weights)
    return _round_half_up(total, weight_sum)


def quality_recommendations(
    section_score: int,
    contact_score: int,
    skill_score: int,
    content_score: int,
    contact: Contact,
) -> List[str]:
    recommendations: List[str] = []
    if section_score < SECTION_COMPLETENESS_TARGET:
        recommendations.append(MISSING_SECTIONS_HINT)
    if contact_score < CONTACT_COMPLETENESS_TARGET:
        missing = missing_contact_fields(contact)
        if missing:
            recommendations.append(MISSING_CONTACT_HINT.format(fields=", ".join(missing)))
    if skill_score < SKILL_DIVERSITY_TARGET:
        recommendations.append(MORE_SKILLS_HINT)
    if content_score < CONTENT_DEPTH_TARGET:
        recommendations.append(MORE_DETAIL_HINT)
    return recommendations


def calculate_quality_metrics(
    sections: List[Section],
    skills: Dict[str, Dict[str, SkillRecord]],
    contact: Contact,
    weights: QualityWeights = DEFAULT_WEIGHTS,
) -> QualityMetrics:
    """
    Score a document's structural and content completeness.

    Sub-metrics are integer percentages. The overall score is derived from
    those integers so it always equals the rounded weighted sum of what is
    reported.
    """
    sc = section_completeness(sections)
    cc = contact_completeness(contact)
    sd = skill_diversity(skills, weights)
    cd = content_depth(sections, weights)
    total = weighted_total(sc, cc, sd, cd, weights)
    weight_sum = weights.sections + weights.contact + weights.skills + weights.content

    return QualityMetrics(
        overall_score=overall_score(sc, cc, sd, cd, weights),
        overall_confidence=total / (weight_sum * 100) if weight_sum > 0 else 0.0,
        section_completeness=sc,
        contact_completeness=cc,
        skill_diversity=sd,
        content_depth=cd,
        recommendations=quality_recommendations(sc, cc, sd, cd, contact),
    )
