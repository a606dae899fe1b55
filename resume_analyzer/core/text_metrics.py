import re
from collections import Counter
from typing import List

from resume_analyzer.core.schemas import KeywordDensityItem


KEYWORD_LIMIT = 20
MIN_KEYWORD_LENGTH = 3

SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
VOWEL_GROUP_RE = re.compile(r"[aeiou]+", re.IGNORECASE)


def calculate_keyword_density(text: str, limit: int = KEYWORD_LIMIT) -> List[KeywordDensityItem]:
    """
    Most frequent words of the document.

    Words are lowercase whitespace-separated tokens longer than two
    characters. Frequency is relative to the number of kept words. Ties
    keep first-occurrence order.
    """
    words = [w for w in text.lower().split() if len(w) >= MIN_KEYWORD_LENGTH]
    if not words:
        return []
    counts = Counter(words)
    return [
        KeywordDensityItem(word=word, count=count, frequency=count / len(words))
        for word, count in counts.most_common(limit)
    ]


def calculate_readability_score(text: str) -> int:
    """
    Flesch reading-ease estimate clamped to 0-100.

    206.835 - 1.015 * (words / sentences) - 84.6 * (syllables / words),
    with syllables approximated by vowel groups.
    """
    words = text.split()
    if not words:
        return 0
    sentences = max(1, len([s for s in SENTENCE_SPLIT_RE.split(text) if s.strip()]))
    syllables = len(VOWEL_GROUP_RE.findall(text))

    score = 206.835 - 1.015 * (len(words) / sentences) - 84.6 * (syllables / len(words))
    return max(0, min(100, round(score)))
