import logging

import sentry_sdk
from dotenv import load_dotenv

from ats_analyzer.core.config import settings

_configured = False


def configure() -> None:
    """Process-level logging and error reporting. Safe to call more than once."""
    global _configured
    if _configured:
        return

    load_dotenv()
    logging.basicConfig(level=settings.log_level, format="%(message)s")
    if settings.sentry_dsn:
        sentry_sdk.init(dsn=settings.sentry_dsn, send_default_pii=settings.sentry_send_default_pii)
    _configured = True
