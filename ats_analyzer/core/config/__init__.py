from .scoring import get_scoring_config, get_scoring_int, get_scoring_value
from .settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
    "get_scoring_config",
    "get_scoring_int",
    "get_scoring_value",
]
