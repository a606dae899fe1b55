"""
Contextual skill detection.

Scans skills- and experience-bearing sections against a categorized keyword
dictionary. Every occurrence contributes a context window, and the windows
decide confidence and level via ConfidenceCalculator.
"""

import re
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from resume_analyzer.core.confidence_calculator import ConfidenceCalculator
from resume_analyzer.core.schemas import (
    CategoryBreakdown,
    Section,
    SectionType,
    SkillAnalysis,
    SkillRecord,
    StackRecommendation,
)

logger = logging.getLogger(__name__)

CONTEXT_RADIUS = 50
MAX_CONTEXTS_PER_SKILL = 3
TOP_SKILLS_LIMIT = 10
MAX_STACK_RECOMMENDATIONS = 5
HIGH_CONFIDENCE_THRESHOLD = 0.7
STACK_MEMBER_CONFIDENCE = 0.6

SKILL_SOURCE_SECTIONS = (SectionType.SKILLS, SectionType.EXPERIENCE)

SkillDictionary = Mapping[str, Mapping[str, Tuple[str, ...]]]

# category -> canonical skill name -> lowercase keyword variants
SKILL_KEYWORDS: SkillDictionary = MappingProxyType({
    "languages": MappingProxyType({
        "JavaScript": ("javascript", "js", "es6", "es2015", "ecmascript", "vanilla js"),
        "TypeScript": ("typescript", "ts"),
        "Python": ("python", "py", "python3"),
        "Java": ("java", "openjdk", "oracle java"),
        "C#": ("c#", "csharp", "c sharp", ".net"),
        "C++": ("c++", "cpp", "c plus plus"),
        "Go": ("go", "golang", "go lang"),
        "Rust": ("rust lang",),
        "PHP": ("php", "php7", "php8"),
        "Ruby": ("ruby", "ruby on rails"),
        "Swift": ("swift", "swift ui"),
        "Kotlin": ("kotlin",),
        "SQL": ("sql", "mysql", "postgresql", "sqlite", "t-sql"),
        "HTML": ("html", "html5", "html/css"),
        "CSS": ("css", "css3", "sass", "scss"),
    }),
    "frameworks": MappingProxyType({
        "React": ("react", "reactjs", "react.js", "react native"),
        "Angular": ("angular", "angularjs", "angular2", "angular4"),
        "Vue.js": ("vue", "vuejs", "vue.js", "nuxt"),
        "Node.js": ("node", "nodejs", "node.js", "npm"),
        "Express": ("express", "expressjs", "express.js"),
        "Django": ("django",),
        "Flask": ("flask",),
        "Spring": ("spring", "spring boot", "spring framework"),
        "Laravel": ("laravel",),
        "Next.js": ("nextjs", "next.js"),
        "Svelte": ("svelte", "sveltekit"),
    }),
    "databases": MappingProxyType({
        "MongoDB": ("mongodb", "mongo", "mongoose"),
        "PostgreSQL": ("postgresql", "postgres", "psql"),
        "MySQL": ("mysql",),
        "Redis": ("redis",),
        "Firebase": ("firebase", "firestore"),
        "SQLite": ("sqlite",),
        "Oracle": ("oracle db", "oracle database"),
        "Cassandra": ("cassandra",),
        "DynamoDB": ("dynamodb", "dynamo"),
    }),
    "cloud": MappingProxyType({
        "AWS": ("aws", "amazon web services", "ec2", "s3", "lambda"),
        "Azure": ("azure", "microsoft azure"),
        "Google Cloud": ("gcp", "google cloud", "google cloud platform"),
        "Docker": ("docker", "containerization"),
        "Kubernetes": ("kubernetes", "k8s"),
        "Heroku": ("heroku",),
        "Vercel": ("vercel",),
    }),
    "tools": MappingProxyType({
        "Git": ("git", "github", "gitlab", "version control"),
        "Jenkins": ("jenkins", "ci/cd"),
        "GitHub Actions": ("github actions",),
        "Webpack": ("webpack",),
        "Vite": ("vite",),
        "ESLint": ("eslint", "linting"),
        "Jest": ("jest", "unit testing"),
        "Cypress": ("cypress", "e2e testing"),
        "Postman": ("postman", "api testing"),
        "VS Code": ("vscode", "visual studio code"),
        "Figma": ("figma",),
        "Jira": ("jira", "project management"),
    }),
})


@dataclass(frozen=True)
class TechBundle:
    name: str
    skills: Tuple[str, ...]


TECH_BUNDLES: Tuple[TechBundle, ...] = (
    TechBundle("Full-Stack JavaScript", ("JavaScript", "React", "Node.js")),
    TechBundle("Frontend Web", ("JavaScript", "React", "CSS")),
    TechBundle("Cloud Development", ("AWS", "Docker", "Kubernetes")),
    TechBundle("Data Engineering", ("Python", "SQL", "MongoDB")),
)


def _variant_pattern(variant: str) -> "re.Pattern[str]":
    """Whole-word, case-insensitive pattern; works for variants ending in symbols (c++, c#)."""
    return re.compile(rf"(?<!\w){re.escape(variant)}(?!\w)", re.IGNORECASE)


# Compiled once; the dictionary is static.
_VARIANT_PATTERNS: Dict[str, "re.Pattern[str]"] = {
    variant: _variant_pattern(variant)
    for skills in SKILL_KEYWORDS.values()
    for variants in skills.values()
    for variant in variants
}


def extract_context(text: str, start: int, end: int, radius: int = CONTEXT_RADIUS) -> str:
    """Return the text within radius characters on either side of [start, end)."""
    return text[max(0, start - radius):min(len(text), end + radius)].strip()


def skill_source_text(sections: List[Section]) -> str:
    """Skills content first, then experience content, joined by spaces."""
    parts: List[str] = []
    for section_type in SKILL_SOURCE_SECTIONS:
        for section in sections:
            if section.type == section_type:
                parts.append(" ".join(section.content))
    return " ".join(parts)


def detect_skill(name: str, category: str, variants: Tuple[str, ...], text: str) -> Optional[SkillRecord]:
    """Match one skill's variants against text; None when nothing matches."""
    matches = 0
    contexts: List[str] = []
    for variant in variants:
        pattern = _VARIANT_PATTERNS.get(variant) or _variant_pattern(variant)
        for m in pattern.finditer(text):
            matches += 1
            contexts.append(extract_context(text, m.start(), m.end()))

    if matches == 0:
        return None

    return SkillRecord(
        name=name,
        category=category,
        matches=matches,
        contexts=contexts[:MAX_CONTEXTS_PER_SKILL],
        confidence=ConfidenceCalculator.skill(contexts),
        level=ConfidenceCalculator.skill_level(contexts),
    )


def extract_skills_from_text(
    text: str,
    dictionary: SkillDictionary = SKILL_KEYWORDS,
) -> Dict[str, Dict[str, SkillRecord]]:
    """
    Detect dictionary skills in text, grouped by category.

    Every category of the dictionary is present in the result, possibly empty.
    """
    found: Dict[str, Dict[str, SkillRecord]] = {}
    for category, skills in dictionary.items():
        found[category] = {}
        for name, variants in skills.items():
            record = detect_skill(name, category, variants, text)
            if record is not None:
                found[category][name] = record
    return found


def extract_skills(
    sections: List[Section],
    dictionary: SkillDictionary = SKILL_KEYWORDS,
) -> Dict[str, Dict[str, SkillRecord]]:
    """Detect skills in the Skills and Experience sections."""
    found = extract_skills_from_text(skill_source_text(sections), dictionary)
    logger.debug(f"Detected {sum(len(v) for v in found.values())} skills across {len(found)} categories")
    return found


def _flatten(skills: Dict[str, Dict[str, SkillRecord]]) -> List[SkillRecord]:
    return [record for category in skills.values() for record in category.values()]


def recommend_stack_completions(
    all_skills: List[SkillRecord],
    bundles: Tuple[TechBundle, ...] = TECH_BUNDLES,
) -> List[StackRecommendation]:
    """
    Suggest the missing members of partially present technology bundles.

    A member counts as held only when it was detected with confidence above
    0.6, and as missing only when it was not detected at all. A disclaimed
    skill ("not familiar with AWS") is therefore neither. A bundle qualifies
    when it has at least one held and one missing member. Priority is the
    held share of the bundle; ties keep bundle order.
    """
    detected = {s.name: s.confidence for s in all_skills}
    recommendations: List[StackRecommendation] = []

    for bundle in bundles:
        has = [skill for skill in bundle.skills if detected.get(skill, 0.0) > STACK_MEMBER_CONFIDENCE]
        missing = [skill for skill in bundle.skills if skill not in detected]
        if has and missing:
            recommendations.append(StackRecommendation(
                title=f"Complete your {bundle.name} stack",
                description=f"You have {', '.join(has)}. Consider adding {', '.join(missing)}.",
                priority=len(has) / len(bundle.skills),
                skills=missing,
            ))

    recommendations.sort(key=lambda r: r.priority, reverse=True)
    return recommendations[:MAX_STACK_RECOMMENDATIONS]


def analyze_skills(skills: Dict[str, Dict[str, SkillRecord]]) -> SkillAnalysis:
    """Aggregate per-document skill statistics and recommendations."""
    all_skills = _flatten(skills)
    top_skills = sorted(all_skills, key=lambda s: s.confidence * s.matches, reverse=True)

    return SkillAnalysis(
        total_skills=len(all_skills),
        high_confidence_skills=sum(1 for s in all_skills if s.confidence > HIGH_CONFIDENCE_THRESHOLD),
        expert_skills=sum(1 for s in all_skills if s.level == "Expert"),
        skills_by_category=[
            CategoryBreakdown(category=category, count=len(records), skills=records)
            for category, records in skills.items()
        ],
        top_skills=top_skills[:TOP_SKILLS_LIMIT],
        recommendations=recommend_stack_completions(all_skills),
    )
