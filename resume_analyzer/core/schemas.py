from enum import Enum
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


SkillLevel = Literal["Beginner", "Intermediate", "Proficient", "Expert"]


class ContractModel(BaseModel):
    """Shared config: snake_case in Python, camelCase on the wire, immutable once built."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class SectionType(str, Enum):
    CONTACT = "contact"
    HEADER = "header"
    SUMMARY = "summary"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"
    PROJECTS = "projects"
    CERTIFICATIONS = "certifications"
    AWARDS = "awards"


class Section(ContractModel):
    type: SectionType
    header: str = Field(..., description="Original header line, or a synthetic label for contact/header zones")
    content: List[str] = Field(default_factory=list)
    confidence: float = Field(..., ge=0.0, le=1.0)


class Contact(ContractModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None  # 10 digits, country/trunk prefix stripped
    linkedin: Optional[str] = None
    github: Optional[str] = None
    website: Optional[str] = None


class SkillRecord(ContractModel):
    name: str
    category: str
    matches: int = Field(..., ge=1)
    contexts: List[str] = Field(default_factory=list, max_length=3)
    confidence: float = Field(..., ge=0.1, le=1.0)
    level: SkillLevel


class CategoryBreakdown(ContractModel):
    category: str
    count: int
    skills: Dict[str, SkillRecord] = Field(default_factory=dict)


class StackRecommendation(ContractModel):
    type: Literal["skill_combo"] = "skill_combo"
    title: str
    description: str
    priority: float = Field(..., description="Share of the bundle already present (0.0-1.0)")
    skills: List[str] = Field(default_factory=list, description="Bundle members still missing")


class SkillAnalysis(ContractModel):
    total_skills: int = 0
    high_confidence_skills: int = 0
    expert_skills: int = 0
    skills_by_category: List[CategoryBreakdown] = Field(default_factory=list)
    top_skills: List[SkillRecord] = Field(default_factory=list)
    recommendations: List[StackRecommendation] = Field(default_factory=list)


class ExperienceSummary(ContractModel):
    companies: List[str] = Field(default_factory=list)
    dates: List[str] = Field(default_factory=list)
    raw_text: str = ""
    confidence: float = Field(..., ge=0.0, le=1.0)


class EducationSummary(ContractModel):
    schools: List[str] = Field(default_factory=list)
    dates: List[str] = Field(default_factory=list)
    raw_text: str = ""
    confidence: float = Field(..., ge=0.0, le=1.0)


class QualityMetrics(ContractModel):
    overall_score: int = Field(..., ge=0, le=100)
    overall_confidence: float = Field(..., ge=0.0, le=1.0)
    section_completeness: int = Field(..., ge=0, le=100)
    contact_completeness: int = Field(..., ge=0, le=100)
    skill_diversity: int = Field(..., ge=0, le=100)
    content_depth: int = Field(..., ge=0, le=100)
    recommendations: List[str] = Field(default_factory=list)


class KeywordDensityItem(ContractModel):
    word: str
    count: int
    frequency: float


class ParsedDocument(ContractModel):
    file_name: Optional[str] = None
    contact: Contact
    skills: Dict[str, Dict[str, SkillRecord]] = Field(default_factory=dict)
    experience: Optional[ExperienceSummary] = None
    education: Optional[EducationSummary] = None
    sections: List[Section] = Field(default_factory=list)
    skill_analysis: SkillAnalysis
    quality_metrics: QualityMetrics
    keyword_density: List[KeywordDensityItem] = Field(default_factory=list)
    readability_score: int = Field(..., ge=0, le=100)
    page_count: int
    section_count: int
    character_count: int
    confidence: float = Field(..., ge=0.0, le=1.0)
    warnings: List[str] = Field(default_factory=list, description="Sub-steps that degraded instead of failing")
