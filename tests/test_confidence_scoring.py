"""
Test suite for skill and document confidence scoring.

Confidence separates affirmative claims ("built with React") from
disclaimers ("not familiar with Go") so consumers can rank skills.
"""

import pytest

from resume_analyzer.core.confidence_calculator import ConfidenceCalculator


class TestSkillConfidence:
    """Test context-driven skill confidence."""

    def test_neutral_mention_is_base(self):
        assert ConfidenceCalculator.skill(["Python, React"]) == 0.5

    def test_positive_phrase(self):
        assert ConfidenceCalculator.skill(["built with React"]) == 0.7

    def test_negative_phrase(self):
        assert ConfidenceCalculator.skill(["not familiar with Go"]) == 0.2

    def test_each_window_counts(self):
        assert ConfidenceCalculator.skill(["worked with Docker", "implemented Docker images"]) == 0.9

    def test_clamped_to_ceiling(self):
        contexts = ["proficient in Python, worked with Python, built with Python"] * 3
        assert ConfidenceCalculator.skill(contexts) == 1.0

    def test_clamped_to_floor(self):
        contexts = ["no experience with Rust, would like to learn it, learning slowly"]
        # one positive ("experience with") and three negatives
        assert ConfidenceCalculator.skill(contexts) == 0.1

    def test_no_contexts(self):
        assert ConfidenceCalculator.skill([]) == 0.5


class TestSkillLevel:
    """Test proficiency inference from context words."""

    @pytest.mark.parametrize(
        "context,level",
        [
            ("Lead architect for payments", "Expert"),
            ("Strong background in SQL", "Proficient"),
            ("Basic knowledge of Go", "Beginner"),
            ("Python, SQL, Go", "Intermediate"),
        ],
    )
    def test_levels(self, context, level):
        assert ConfidenceCalculator.skill_level([context]) == level

    def test_expert_wins_over_beginner(self):
        assert ConfidenceCalculator.skill_level(["junior role", "later senior engineer"]) == "Expert"

    def test_level_words_match_at_word_start(self):
        # "unfamiliar" does not start with "familiar"
        assert ConfidenceCalculator.skill_level(["unfamiliar territory"]) == "Intermediate"

    def test_some_marks_beginner_only_as_a_whole_word(self):
        assert ConfidenceCalculator.skill_level(["some exposure to Docker"]) == "Beginner"
        assert ConfidenceCalculator.skill_level(["built something with Docker"]) == "Intermediate"

    def test_all_levels_use_whole_words(self):
        assert ConfidenceCalculator.skill_level(["advanced Kubernetes operator"]) == "Expert"
        assert ConfidenceCalculator.skill_level(["expertise in Kubernetes"]) == "Intermediate"
        assert ConfidenceCalculator.skill_level(["solidity contracts"]) == "Intermediate"


def test_summary_confidence():
    assert ConfidenceCalculator.summary(degraded=False) == 0.8
    assert ConfidenceCalculator.summary(degraded=True) == 0.6


def test_document_confidence_falls_back_when_no_signal():
    assert ConfidenceCalculator.document(0.0) == 0.8
    assert ConfidenceCalculator.document(0.42) == 0.42
