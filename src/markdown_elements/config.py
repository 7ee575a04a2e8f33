"""Load settings from environment (.env and env vars)."""

from __future__ import annotations

import logging
import os
from pathlib import Path

# Load .env from repo root if present
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
        return default


def _log_level(key: str, default: str = "INFO") -> str:
    name = _str(key).upper()
    # getLevelName maps known names to ints and echoes anything else back.
    if name and isinstance(logging.getLevelName(name), int):
        return name
    return default


# Parser
ID_STRATEGY = _str("MARKDOWN_ELEMENTS_ID_STRATEGY") or "uuid4"

# Service
LOG_LEVEL = _log_level("MARKDOWN_ELEMENTS_LOG_LEVEL")
MAX_INPUT_CHARS = _int("MARKDOWN_ELEMENTS_MAX_INPUT_CHARS", 1_000_000)
PREVIEW_CHARS = _int("MARKDOWN_ELEMENTS_PREVIEW_CHARS", 5000)

# Data dir
MARKDOWN_ELEMENTS_DATA_DIR = _str("MARKDOWN_ELEMENTS_DATA_DIR")
