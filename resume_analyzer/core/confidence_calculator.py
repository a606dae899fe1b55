"""
Confidence scoring for detected skills and derived document fields.

Skill confidence reflects whether a keyword mention reads like an
affirmative claim ("built with React") or a disclaimer ("not familiar with
Go"). It is computed from the context windows around each mention.

Confidence Scale:
  1.0   = Repeated affirmative claims
  0.7   = Affirmative claim found at least once
  0.5   = Neutral mention (keyword listed, no surrounding claim)
  0.2   = Mention inside a disclaimer
  0.1   = Floor; never lower
"""

import re
from typing import List

from resume_analyzer.core.schemas import SkillLevel


SKILL_BASE_CONFIDENCE = 0.5
POSITIVE_CONTEXT_BONUS = 0.2
NEGATIVE_CONTEXT_PENALTY = 0.3
SKILL_CONFIDENCE_FLOOR = 0.1
SKILL_CONFIDENCE_CEILING = 1.0

# Summary confidence for experience/education blocks
SUMMARY_CONFIDENCE = 0.8
DEGRADED_SUMMARY_CONFIDENCE = 0.6

# Used when the quality model yields no signal at all
DEFAULT_DOCUMENT_CONFIDENCE = 0.8

NEGATIVE_CONTEXTS = (
    re.compile(r"not familiar with", re.IGNORECASE),
    re.compile(r"no experience with", re.IGNORECASE),
    re.compile(r"learning", re.IGNORECASE),
    re.compile(r"interested in learning", re.IGNORECASE),
    re.compile(r"would like to learn", re.IGNORECASE),
    re.compile(r"basic understanding", re.IGNORECASE),
)

POSITIVE_CONTEXTS = (
    re.compile(r"experience with", re.IGNORECASE),
    re.compile(r"proficient in", re.IGNORECASE),
    re.compile(r"expert in", re.IGNORECASE),
    re.compile(r"skilled in", re.IGNORECASE),
    re.compile(r"worked with", re.IGNORECASE),
    re.compile(r"developed using", re.IGNORECASE),
    re.compile(r"built with", re.IGNORECASE),
    re.compile(r"implemented", re.IGNORECASE),
)

# Whole words only: "unfamiliar" is not "familiar", "something" is not "some"
EXPERT_LEVEL_RE = re.compile(r"\b(expert|advanced|senior|lead|architect)\b", re.IGNORECASE)
PROFICIENT_LEVEL_RE = re.compile(r"\b(proficient|experienced|solid|strong)\b", re.IGNORECASE)
BEGINNER_LEVEL_RE = re.compile(r"\b(familiar|basic|some|junior)\b", re.IGNORECASE)


class ConfidenceCalculator:
    """Central place for skill and document confidence logic."""

    @staticmethod
    def clamp_skill_confidence(value: float) -> float:
        return max(SKILL_CONFIDENCE_FLOOR, min(SKILL_CONFIDENCE_CEILING, value))

    @staticmethod
    def skill(contexts: List[str]) -> float:
        """
        Calculate confidence for a detected skill from its context windows.

        Starts at 0.5. Each positive phrase present in a window adds 0.2,
        each negative phrase subtracts 0.3. A phrase counts once per window.
        The result is clamped to [0.1, 1.0].

        Examples:
          ["Python, React"]            -> 0.5
          ["built with React"]         -> 0.7
          ["not familiar with Go"]     -> 0.2
        """
        confidence = SKILL_BASE_CONFIDENCE
        for context in contexts:
            for pattern in POSITIVE_CONTEXTS:
                if pattern.search(context):
                    confidence += POSITIVE_CONTEXT_BONUS
            for pattern in NEGATIVE_CONTEXTS:
                if pattern.search(context):
                    confidence -= NEGATIVE_CONTEXT_PENALTY
        return round(ConfidenceCalculator.clamp_skill_confidence(confidence), 4)

    @staticmethod
    def skill_level(contexts: List[str]) -> SkillLevel:
        """
        Infer a proficiency level from the concatenated context windows.

        Expert language wins over proficient language, which wins over
        beginner language. No signal means Intermediate.
        """
        text = " ".join(contexts)
        if EXPERT_LEVEL_RE.search(text):
            return "Expert"
        if PROFICIENT_LEVEL_RE.search(text):
            return "Proficient"
        if BEGINNER_LEVEL_RE.search(text):
            return "Beginner"
        return "Intermediate"

    @staticmethod
    def summary(degraded: bool) -> float:
        """Confidence for an experience/education summary block."""
        return DEGRADED_SUMMARY_CONFIDENCE if degraded else SUMMARY_CONFIDENCE

    @staticmethod
    def document(overall_confidence: float) -> float:
        """Document-level confidence; falls back to the default when quality gives no signal."""
        return overall_confidence if overall_confidence > 0 else DEFAULT_DOCUMENT_CONFIDENCE
