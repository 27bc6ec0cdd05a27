import logging
from functools import lru_cache

from ats_analyzer.core.config import get_scoring_int, settings

from .extractor import KeywordExtractor, KeywordSet, safe_extract
from .recognizer import NoNounRecognizer, NounRecognizer
from .spacy_recognizer import SpacyNounRecognizer

logger = logging.getLogger(__name__)


def _build_default_recognizer() -> NounRecognizer:
    try:
        return SpacyNounRecognizer(settings.spacy_model, disabled_pipes=settings.spacy_disabled_pipes)
    except (ImportError, OSError) as exc:
        # Cached by the caller, so this is reported once per process.
        logger.warning("spacy_model_unavailable model=%s, noun extraction disabled: %s", settings.spacy_model, exc)
        return NoNounRecognizer()


@lru_cache(maxsize=1)
def get_default_keyword_extractor() -> KeywordExtractor:
    return KeywordExtractor(
        _build_default_recognizer(),
        min_noun_length=get_scoring_int("keywords.min_noun_length", 4, min_value=1, max_value=20),
        job_keyword_limit=get_scoring_int("keywords.jd_keyword_limit", 30, min_value=1, max_value=200),
    )


__all__ = [
    "KeywordExtractor",
    "KeywordSet",
    "NoNounRecognizer",
    "NounRecognizer",
    "SpacyNounRecognizer",
    "get_default_keyword_extractor",
    "safe_extract",
]
