import os
import logging

log = logging.getLogger(__name__)

FALLBACK_ENV: str = "SYNTOK_FALLBACK_LANGUAGE"
TIMEOUT_ENV: str = "SYNTOK_MATCH_TIMEOUT"

DEFAULT_FALLBACK: str = "javascript"


def fallback_language() -> str:
    """Language whose grammar is used for unknown identifiers (respects env var override)."""
    return os.environ.get(FALLBACK_ENV, "").strip() or DEFAULT_FALLBACK


def match_timeout() -> float | None:
    """Per-scan regex timeout in seconds, or None for no limit."""
    raw = os.environ.get(TIMEOUT_ENV, "").strip()
    if not raw:
        return None
    try:
        timeout = float(raw)
    except ValueError:
        log.warning(f"ignoring {TIMEOUT_ENV}={raw!r}: not a number")
        return None
    if timeout <= 0:
        log.warning(f"ignoring {TIMEOUT_ENV}={raw!r}: must be positive")
        return None
    return timeout
