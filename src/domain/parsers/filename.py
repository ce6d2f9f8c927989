"""File name helpers for rendered documents."""

import re

ILLEGAL_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')
DEFAULT_FILENAME = "document"


def sanitize_filename(name: str) -> str:
    """Replace every character that is illegal in file names with an underscore."""
    sanitized = ILLEGAL_FILENAME_CHARS.sub("_", (name or "").strip())
    return sanitized or DEFAULT_FILENAME
