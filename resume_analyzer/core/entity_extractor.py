"""
Named-entity helpers backed by spaCy.

Person names feed contact extraction; organizations feed the experience and
education summaries. The model is loaded lazily, once per process. When the
configured model package is not installed a blank English pipeline is used,
which yields no entities, so callers simply see empty results.
"""

import logging
from functools import lru_cache
from typing import Any, List

import spacy

from resume_analyzer.core.config import settings

logger = logging.getLogger(__name__)

MAX_ENTITY_TEXT_CHARS = 100_000


@lru_cache(maxsize=4)
def load_nlp(model_name: str = settings.SPACY_MODEL) -> Any:
    try:
        nlp = spacy.load(model_name)
        logger.info(f"spaCy model loaded: {model_name}")
    except OSError:
        logger.warning(f"spaCy model '{model_name}' not found, using blank English pipeline")
        nlp = spacy.blank("en")
    return nlp


def _entities(text: str, label: str) -> List[str]:
    if not text or not text.strip():
        return []
    doc = load_nlp()(text[:MAX_ENTITY_TEXT_CHARS])
    out: List[str] = []
    for ent in doc.ents:
        value = " ".join(ent.text.split())
        if ent.label_ == label and value and value not in out:
            out.append(value)
    return out


def extract_person_names(text: str) -> List[str]:
    """Return PERSON entities in order of appearance, de-duplicated."""
    return _entities(text, "PERSON")


def extract_organizations(text: str) -> List[str]:
    """Return ORG entities in order of appearance, de-duplicated."""
    return _entities(text, "ORG")
