from .text_signals import (
    SECTION_PATTERNS,
    count_action_verbs,
    count_dates,
    count_pronouns,
    count_quantified_achievements,
    count_tabs,
    has_decorative_glyphs,
    has_email,
    has_phone,
    sentences,
    word_count,
    words,
)

__all__ = [
    "SECTION_PATTERNS",
    "count_action_verbs",
    "count_dates",
    "count_pronouns",
    "count_quantified_achievements",
    "count_tabs",
    "has_decorative_glyphs",
    "has_email",
    "has_phone",
    "sentences",
    "word_count",
    "words",
]
