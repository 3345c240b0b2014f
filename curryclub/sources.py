"""Loading of the bundled content collections."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List

import requests

from .config import SiteSettings
from .utils import load_json

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 20
HEADERS = {"Accept": "application/json"}


class ContentSourceError(RuntimeError):
    """Raised when a content collection cannot be fetched or decoded."""


def _is_url(location: str) -> bool:
    return location.lower().startswith(("http://", "https://"))


def _fetch_document(url: str, session: requests.Session | None = None) -> Any:
    client = session or requests.Session()
    try:
        response = client.get(url, headers=HEADERS, timeout=REQUEST_TIMEOUT)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise ContentSourceError(f"Failed to fetch content from {url}: {exc}") from exc
    try:
        return response.json()
    except ValueError as exc:
        raise ContentSourceError(f"Invalid JSON returned by {url}") from exc


def _read_document(path: Path) -> Any:
    if not path.exists():
        logger.warning("Content file %s does not exist; using an empty collection", path)
        return []
    try:
        return load_json(path, default=[])
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ContentSourceError(f"Invalid JSON in {path}: {exc}") from exc


def extract_collection(document: Any, key: str) -> List[Any]:
    """Pull the record list out of a collection document.

    A document may be the list itself, or an object exposing the list under
    ``key`` or ``default``.
    """

    if isinstance(document, list):
        return document
    if isinstance(document, dict):
        for name in (key, "default"):
            value = document.get(name)
            if value is not None:
                if isinstance(value, list):
                    return value
                break
    logger.warning("No %s collection found in content document", key)
    return []


def load_collection(
    location: str | Path, key: str, *, session: requests.Session | None = None
) -> List[Any]:
    """Load the ``key`` collection from a local JSON file or an HTTP(S) URL."""

    text = str(location)
    if _is_url(text):
        document = _fetch_document(text, session=session)
    else:
        document = _read_document(Path(text))
    records = extract_collection(document, key)
    logger.debug("Loaded %s %s records from %s", len(records), key, text)
    return records


@dataclass
class ContentSources:
    """The raw news, case study and product collections."""

    news: List[Any] = field(default_factory=list)
    cases: List[Any] = field(default_factory=list)
    products: List[Any] = field(default_factory=list)

    @classmethod
    def load(
        cls, settings: SiteSettings, *, session: requests.Session | None = None
    ) -> "ContentSources":
        return cls(
            news=load_collection(settings.news_source, "posts", session=session),
            cases=load_collection(settings.cases_source, "cases", session=session),
            products=load_collection(settings.products_source, "products", session=session),
        )
