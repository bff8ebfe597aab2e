"""Content type detection by magic-byte sniffing."""

from __future__ import annotations

import logging
from pathlib import Path

import filetype

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "text/plain"


def classify(local_path: Path | str) -> str | None:
    """Return the MIME type detected from the file's leading bytes.

    Returns None when no signature matches or the file cannot be inspected.
    """
    try:
        kind = filetype.guess(str(local_path))
    except Exception as e:
        logger.debug(f"Could not inspect {local_path}: {e}")
        return None
    if kind is None:
        return None
    return kind.mime or None


def content_type_for(local_path: Path | str) -> str:
    """Classified content type, falling back to text/plain."""
    return classify(local_path) or DEFAULT_CONTENT_TYPE
