"""General utility helpers."""
from __future__ import annotations

import json
import os
from datetime import date, datetime, timezone
from email.utils import parsedate_to_datetime
from pathlib import Path
from typing import Any, Dict, Tuple

EDITORIAL_DATE_FORMATS: Tuple[str, ...] = ("%Y/%m/%d", "%B %d, %Y", "%b %d, %Y", "%d %B %Y")


def load_json(path: Path, default: Dict[str, Any] | list | None = None) -> Any:
    """Load a JSON file returning a default value if it does not exist."""

    if not path.exists():
        return default if default is not None else {}
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def write_text(path: Path, content: str) -> None:
    """Write text to disk, ensuring the parent folder exists."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def env_str(name: str, default: str | None = None) -> str | None:
    """Return a stripped environment value, treating blanks as unset."""

    value = os.getenv(name)
    if value is None:
        return default
    value = value.strip()
    return value or default


def text_value(value: object) -> str:
    """Coerce a loosely typed scalar into a string, ``None`` becoming ``""``."""

    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple, set)):
        return ""
    return str(value)


def date_text(value: object) -> str:
    """Return the ISO-like text of a date field value, or ``""``."""

    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, str):
        return value.strip()
    return ""


def _parse_text(text: str) -> datetime | None:
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        pass
    for pattern in EDITORIAL_DATE_FORMATS:
        try:
            return datetime.strptime(text, pattern)
        except ValueError:
            continue
    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError):
        return None


def parse_datetime(value: object) -> datetime | None:
    """Best-effort parse of a date field into an aware UTC datetime."""

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    else:
        text = date_text(value)
        if not text:
            return None
        parsed = _parse_text(text)
        if parsed is None:
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def format_date_label(value: str | None) -> str:
    """Render a short human label such as ``Jan 01, 2024``."""

    parsed = parse_datetime(value)
    if parsed is None:
        return ""
    return parsed.strftime("%b %d, %Y")
