"""
End-to-end tests for the parse pipeline on plain-text input.

Text input skips the PDF decoder but runs every other stage, so these tests
pin down how segmentation, contact, skills, summaries and quality combine.
"""

from resume_analyzer.core.document_assembler import assemble_document, build_full_text, parse_text
from resume_analyzer.core.line_reconstructor import lines_from_text
from resume_analyzer.core.schemas import SectionType

SCENARIO_A = "Jane Doe\njane@x.com\n(555) 111-2222\n\nEXPERIENCE\nEngineer at Acme (2019-2022)\n\nSKILLS\nPython, React"


def test_full_resume(person_extractor):
    doc = parse_text(SCENARIO_A, person_extractor=person_extractor, organization_extractor=None)

    assert doc.contact.name == "Jane Doe"
    assert doc.contact.email == "jane@x.com"
    assert doc.contact.phone == "5551112222"
    assert [s.type for s in doc.sections] == [SectionType.CONTACT, SectionType.EXPERIENCE, SectionType.SKILLS]
    assert doc.skills["frameworks"]["React"].matches >= 1
    assert "Python" in doc.skills["languages"]

    assert doc.experience.raw_text == "Engineer at Acme (2019-2022)"
    assert doc.experience.dates == ["2019-2022", "2019", "2022"]
    assert doc.education is None

    assert doc.quality_metrics.section_completeness == 75
    assert doc.quality_metrics.contact_completeness == 100
    assert doc.quality_metrics.overall_score == 46
    assert doc.confidence == doc.quality_metrics.overall_confidence

    assert doc.page_count == 1
    assert doc.section_count == 3
    assert doc.character_count == len(build_full_text([lines_from_text(SCENARIO_A)]))
    assert doc.warnings == []


def test_sparse_summary_only_resume():
    doc = parse_text("SUMMARY\nMotivated developer who loves clean code", person_extractor=None, organization_extractor=None)

    assert [s.type for s in doc.sections] == [SectionType.SUMMARY]
    assert doc.quality_metrics.section_completeness == 0
    assert doc.quality_metrics.content_depth <= 5
    assert doc.quality_metrics.overall_score < 30
    assert "Add missing sections like Education or Projects" in doc.quality_metrics.recommendations


def test_negative_context_skill(person_extractor):
    doc = parse_text("SKILLS\nPython, SQL, not familiar with Go", person_extractor=person_extractor, organization_extractor=None)

    go = doc.skills["languages"]["Go"]
    assert go.confidence == 0.2
    assert go.level not in ("Expert", "Proficient")


def test_stack_completion_recommendation():
    doc = parse_text("SKILLS\nBuilt with React and JavaScript", person_extractor=None, organization_extractor=None)

    recommended = [r.skills for r in doc.skill_analysis.recommendations]
    assert ["CSS"] in recommended


def test_parse_is_deterministic(person_extractor):
    first = parse_text(SCENARIO_A, person_extractor=person_extractor, organization_extractor=None)
    second = parse_text(SCENARIO_A, person_extractor=person_extractor, organization_extractor=None)

    assert first == second


def test_empty_input_gives_empty_document():
    doc = parse_text("", person_extractor=None, organization_extractor=None)

    assert doc.sections == []
    assert doc.section_count == 0
    assert doc.character_count == 0
    assert doc.readability_score == 0
    assert doc.quality_metrics.overall_score == 0
    assert doc.confidence == 0.8


class TestDegradedExtractors:
    """Sub-extractor failures degrade fields instead of failing the parse."""

    def test_name_extractor_failure(self):
        def broken(text):
            raise RuntimeError("ner unavailable")

        doc = parse_text(SCENARIO_A, person_extractor=broken, organization_extractor=None)

        assert doc.contact.name is None
        assert doc.contact.email == "jane@x.com"
        assert "Could not detect candidate name." in doc.warnings

    def test_organization_extractor_failure(self, person_extractor):
        def broken(text):
            raise RuntimeError("ner unavailable")

        doc = parse_text(SCENARIO_A, person_extractor=person_extractor, organization_extractor=broken)

        assert doc.experience.companies == []
        assert doc.experience.dates == ["2019-2022", "2019", "2022"]
        assert doc.experience.confidence == 0.6
        assert any(w.startswith("Experience organization extraction failed") for w in doc.warnings)

    def test_organization_extractor_results(self, person_extractor):
        doc = parse_text(
            SCENARIO_A,
            person_extractor=person_extractor,
            organization_extractor=lambda text: ["Acme"] if "Acme" in text else [],
        )

        assert doc.experience.companies == ["Acme"]
        assert doc.experience.confidence == 0.8


def test_multi_page_lines_are_concatenated(person_extractor):
    pages = [
        lines_from_text("Jane Doe\njane@x.com\nEXPERIENCE\nEngineer at Acme"),
        lines_from_text("Built services with Django\nEDUCATION\nState University 2016"),
    ]
    doc = assemble_document(pages, person_extractor=person_extractor, organization_extractor=None)

    assert doc.page_count == 2
    assert [s.type for s in doc.sections] == [SectionType.CONTACT, SectionType.EXPERIENCE, SectionType.EDUCATION]
    assert doc.sections[1].content == ["Engineer at Acme", "Built services with Django"]
    assert "Django" in doc.skills["frameworks"]
    assert doc.education.dates == ["2016"]


def test_wire_format_is_camel_case(person_extractor):
    doc = parse_text(SCENARIO_A, file_name="jane.txt", person_extractor=person_extractor, organization_extractor=None)
    data = doc.model_dump(mode="json", by_alias=True)

    assert data["fileName"] == "jane.txt"
    assert data["qualityMetrics"]["overallScore"] == doc.quality_metrics.overall_score
    assert data["skillAnalysis"]["totalSkills"] == doc.skill_analysis.total_skills
    assert data["sections"][0]["type"] == "contact"
    assert "readabilityScore" in data
    assert "keywordDensity" in data
