from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    log_level: str
    sentry_dsn: str | None
    sentry_send_default_pii: bool
    spacy_model: str
    spacy_disabled_pipes: tuple[str, ...]
    log_text_preview_chars: int


settings = Settings(
    log_level=(_get_env("LOG_LEVEL", "INFO") or "INFO").strip().upper(),
    sentry_dsn=_get_env("SENTRY_DSN"),
    sentry_send_default_pii=_get_env_bool("SENTRY_SEND_DEFAULT_PII", False),
    spacy_model=_get_env("SPACY_MODEL", "en_core_web_sm") or "en_core_web_sm",
    spacy_disabled_pipes=_get_env_list("SPACY_DISABLED_PIPES", ["ner"]),
    log_text_preview_chars=max(0, _get_env_int("LOG_TEXT_PREVIEW_CHARS", 0)),
)

if settings.log_level not in _LOG_LEVELS:
    raise RuntimeError(f"LOG_LEVEL must be one of: {', '.join(sorted(_LOG_LEVELS))}.")
