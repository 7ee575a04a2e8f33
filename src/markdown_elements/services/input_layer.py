"""Input layer: uploaded Markdown documents kept for later parsing."""

from __future__ import annotations

import json
import logging
import uuid
from pathlib import Path
from typing import Any

from .. import config

logger = logging.getLogger(__name__)

# Default storage for uploaded files:
# - in-memory for fast path
# - persisted on disk so documents survive a server reload/restart
_upload_store: dict[str, dict[str, Any]] = {}

_REPO_DIR = Path(__file__).resolve().parents[3]
_DEFAULT_DATA_DIR = _REPO_DIR / ".data"


def _upload_dir() -> Path:
    return Path(config.MARKDOWN_ELEMENTS_DATA_DIR or _DEFAULT_DATA_DIR) / "uploads"


def _persist_upload(file_id: str, record: dict[str, Any]) -> None:
    upload_dir = _upload_dir()
    upload_dir.mkdir(parents=True, exist_ok=True)
    path = upload_dir / f"{file_id}.json"
    path.write_text(json.dumps(record, ensure_ascii=False), encoding="utf-8")


def _load_upload_from_disk(file_id: str) -> dict[str, Any] | None:
    path = _upload_dir() / f"{file_id}.json"
    if not path.exists():
        return None
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        logger.warning("Unreadable upload record %s", path)
        return None


def decode_content(content: bytes) -> str:
    """Decode uploaded bytes as UTF-8; invalid sequences become U+FFFD."""
    return content.decode("utf-8", errors="replace")


def save_upload(content: str, filename: str = "README.md") -> dict[str, Any]:
    """Store uploaded content and return file_id and preview_markdown."""
    file_id = uuid.uuid4().hex
    limit = config.PREVIEW_CHARS
    preview = content[:limit] + ("..." if len(content) > limit else "")
    record = {
        "content": content,
        "filename": filename,
        "preview_markdown": preview,
    }
    _upload_store[file_id] = record
    _persist_upload(file_id, record)
    logger.info("Stored upload %s (%s, %d chars)", file_id, filename, len(content))
    return {"file_id": file_id, "preview_markdown": preview}


def get_upload(file_id: str) -> dict[str, Any] | None:
    """Retrieve stored upload by file_id."""
    rec = _upload_store.get(file_id)
    if rec is not None:
        return rec
    rec = _load_upload_from_disk(file_id)
    if rec is not None:
        _upload_store[file_id] = rec
    return rec
