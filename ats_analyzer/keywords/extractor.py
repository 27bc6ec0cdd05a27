from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field

from .matching import whole_word_pattern
from .recognizer import NounRecognizer
from .vocabulary import CORE_TECH_TERMS, EXTENDED_TECH_TERMS, NOUN_STOP_WORDS, SOFT_SKILL_TERMS

logger = logging.getLogger(__name__)

_WORD_RE = re.compile(r"\w+")
_EDGE_PUNCTUATION = " \t\r\n.,;:!?()[]{}<>\"'`*-•|/\\"


@dataclass(frozen=True, slots=True)
class KeywordSet:
    """Lower-cased terms in first-found order, duplicates collapsed."""

    terms: tuple[str, ...] = ()
    _members: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_members", frozenset(self.terms))

    @classmethod
    def from_terms(cls, terms: Iterable[str], *, limit: int | None = None) -> KeywordSet:
        ordered: list[str] = []
        seen: set[str] = set()
        for term in terms:
            if not term or term in seen:
                continue
            seen.add(term)
            ordered.append(term)
        if limit is not None:
            ordered = ordered[: max(0, limit)]
        return cls(terms=tuple(ordered))

    def __contains__(self, term: object) -> bool:
        return term in self._members

    def __iter__(self) -> Iterator[str]:
        return iter(self.terms)

    def __len__(self) -> int:
        return len(self.terms)


def _normalize_phrase(phrase: str) -> str:
    collapsed = re.sub(r"\s+", " ", (phrase or "").lower())
    return collapsed.strip(_EDGE_PUNCTUATION)


class KeywordExtractor:
    """Turns raw text into keyword sets.

    ``extract`` is the resume-side extractor used by the sub-scores: filtered
    nouns plus the core technical vocabulary, uncapped. ``extract_job_keywords``
    is the job-description variant: the extended technical vocabulary, filtered
    nouns and soft-skill phrases, capped at ``job_keyword_limit`` entries.
    """

    def __init__(
        self,
        recognizer: NounRecognizer,
        *,
        min_noun_length: int = 4,
        job_keyword_limit: int = 30,
    ) -> None:
        self._recognizer = recognizer
        self._min_noun_length = min_noun_length
        self._job_keyword_limit = job_keyword_limit
        self._core_terms_re = whole_word_pattern(CORE_TECH_TERMS)
        self._extended_terms_re = whole_word_pattern(EXTENDED_TECH_TERMS)
        self._soft_skills_re = whole_word_pattern(SOFT_SKILL_TERMS)

    @property
    def job_keyword_limit(self) -> int:
        return self._job_keyword_limit

    def _filtered_nouns(self, text: str) -> list[str]:
        output: list[str] = []
        for raw in self._recognizer.nouns(text):
            phrase = _normalize_phrase(raw)
            if len(phrase) < self._min_noun_length:
                continue
            if any(word in NOUN_STOP_WORDS for word in _WORD_RE.findall(phrase)):
                continue
            output.append(phrase)
        return output

    @staticmethod
    def _vocabulary_hits(pattern: re.Pattern[str], text: str) -> list[str]:
        return [match.group(0).lower() for match in pattern.finditer(text.lower())]

    def extract(self, text: str) -> KeywordSet:
        text = text or ""
        nouns = self._filtered_nouns(text)
        tech = self._vocabulary_hits(self._core_terms_re, text)
        return KeywordSet.from_terms([*nouns, *tech])

    def extract_job_keywords(self, text: str) -> KeywordSet:
        text = text or ""
        tech = self._vocabulary_hits(self._extended_terms_re, text)
        nouns = self._filtered_nouns(text)
        soft = self._vocabulary_hits(self._soft_skills_re, text)
        return KeywordSet.from_terms([*tech, *nouns, *soft], limit=self._job_keyword_limit)


def safe_extract(extract: Callable[[str], KeywordSet], text: str) -> KeywordSet:
    """Run an extraction, degrading to an empty set instead of raising."""
    try:
        return extract(text)
    except Exception as exc:
        logger.warning("keyword_extraction_failed chars=%s: %s", len(text or ""), exc)
        return KeywordSet()
