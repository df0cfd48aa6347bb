"""Application configuration — environment variables and derived constants.

Loads ``BOT_TOKEN``, ``TELEBIND_API_ROOT``, ``TELEBIND_TIMEOUT`` and
``TELEBIND_LOG_LEVEL`` from the environment via ``python-dotenv``.  All
values are resolved at import time so other modules can
``from config import …`` without repeated lookups.
"""

# ── stdlib ───────────────────────────────────────────────────────────────────
import logging
import os

# ── third-party ──────────────────────────────────────────────────────────────
from dotenv import load_dotenv

# ── core ─────────────────────────────────────────────────────────────────────
from core.logger import TelebindLogger

# ── Environment bootstrap ────────────────────────────────────────────────────
load_dotenv()

DEFAULT_API_ROOT = "https://api.telegram.org"
DEFAULT_TIMEOUT = 10


# ── Helper functions (private) ───────────────────────────────────────────────


def _parse_timeout(raw: str | None, default: int = DEFAULT_TIMEOUT) -> int:
    """Parse a positive timeout in seconds; fall back to *default* otherwise."""
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def _parse_log_level(raw: str | None) -> int:
    """Map a level name such as ``"debug"`` to its :mod:`logging` constant."""
    if not raw:
        return logging.INFO
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def _build_base_url(api_root: str, token: str | None) -> str:
    return f"{api_root.rstrip('/')}/bot{token or ''}"


# ── Public constants ─────────────────────────────────────────────────────────

LOG_LEVEL: int = _parse_log_level(os.environ.get("TELEBIND_LOG_LEVEL"))
BOT_TOKEN: str | None = os.environ.get("BOT_TOKEN")
API_ROOT: str = os.environ.get("TELEBIND_API_ROOT") or DEFAULT_API_ROOT
BASE_URL: str = _build_base_url(API_ROOT, BOT_TOKEN)
REQUEST_TIMEOUT: int = _parse_timeout(os.environ.get("TELEBIND_TIMEOUT"))


# ── Startup diagnostics ─────────────────────────────────────────────────────

logger = TelebindLogger.get_logger(LOG_LEVEL)

if BOT_TOKEN:
    logger.info("Config loaded — BOT_TOKEN is set, BASE_URL ready", extra={"api_root": API_ROOT})
else:
    logger.warning("Config loaded — BOT_TOKEN is NOT set", extra={"api_root": API_ROOT})

logger.info("REQUEST_TIMEOUT resolved", extra={"request_timeout": REQUEST_TIMEOUT})
