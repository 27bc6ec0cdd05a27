from __future__ import annotations

import logging

from .recognizer import NounRecognizer

logger = logging.getLogger(__name__)

_NOUN_POS = {"NOUN", "PROPN"}


class SpacyNounRecognizer(NounRecognizer):
    """Noun chunks plus standalone NOUN/PROPN tokens from a spaCy pipeline.

    The pipeline is loaded once at construction; ``nouns`` only reads it.
    """

    def __init__(self, model_name: str = "en_core_web_sm", *, disabled_pipes: tuple[str, ...] = ("ner",)) -> None:
        import spacy

        self.model_name = model_name
        self._nlp = spacy.load(model_name, disable=list(disabled_pipes))
        logger.info("spacy_model_loaded model=%s pipes=%s", model_name, ",".join(self._nlp.pipe_names))

    def nouns(self, text: str) -> list[str]:
        if not text or not text.strip():
            return []
        doc = self._nlp(text)
        phrases = [chunk.text for chunk in doc.noun_chunks]
        phrases.extend(token.text for token in doc if token.pos_ in _NOUN_POS)
        return phrases
