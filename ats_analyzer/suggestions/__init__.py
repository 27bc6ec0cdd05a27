from .generator import (
    CompositeSuggestionStrategy,
    RuleBasedSuggestionStrategy,
    SuggestionStrategy,
    build_default_strategy,
    generate_suggestions,
)
from .rules import DEFAULT_RULES, MESSAGES, RuleContext

__all__ = [
    "CompositeSuggestionStrategy",
    "DEFAULT_RULES",
    "MESSAGES",
    "RuleBasedSuggestionStrategy",
    "RuleContext",
    "SuggestionStrategy",
    "build_default_strategy",
    "generate_suggestions",
]
