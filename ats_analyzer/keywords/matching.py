from __future__ import annotations

import re
from collections.abc import Iterable


def whole_word_pattern(terms: Iterable[str], *, flags: int = re.IGNORECASE) -> re.Pattern[str]:
    """Alternation over escaped terms, bounded by non-word characters.

    Lookarounds are used instead of ``\\b`` so terms that end in symbols
    (``c++``, ``c#``, ``ci/cd``) still match as whole words. Longer terms are
    tried first so ``machine learning`` wins over ``ml``-style prefixes.
    """
    unique = sorted({term for term in terms if term}, key=lambda term: (-len(term), term))
    if not unique:
        return re.compile(r"(?!x)x")
    body = "|".join(re.escape(term) for term in unique)
    return re.compile(rf"(?<!\w)(?:{body})(?!\w)", flags)


def count_term_occurrences(text: str, term: str) -> int:
    if not term:
        return 0
    return len(whole_word_pattern([term]).findall(text or ""))
