"""Load settings from environment (.env and env vars)."""

from __future__ import annotations

import os
from pathlib import Path

# Load .env from backend root if present
_env_path = Path(__file__).resolve().parent.parent.parent / ".env"
if _env_path.exists():
    from dotenv import load_dotenv
    load_dotenv(_env_path)


def _str(key: str, default: str = "") -> str:
    return (os.environ.get(key) or "").strip() or default


def _int(key: str, default: int) -> int:
    raw = _str(key)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None


# Word filters: JSON file with [{"pattern": ..., "replace_with": ...}, ...]
FILTER_RULES_FILE = _str("BOARD_MARKUP_FILTER_RULES_FILE") or None

# Longest post body (in characters) the HTTP adapter hands to the engine
MAX_BODY_CHARS = _int("BOARD_MARKUP_MAX_BODY_CHARS", 10000)

LOG_LEVEL = _str("BOARD_MARKUP_LOG_LEVEL") or "INFO"
