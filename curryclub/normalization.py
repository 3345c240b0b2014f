"""Helpers for normalizing loosely shaped content records.

Every function here accepts whatever the content collections contain and
returns a fully populated model. Malformed values degrade to a default
(``""``, an empty tuple, ``"#"`` or ``HeatLevel.MILD``); nothing is raised.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, List, Mapping, Sequence, Tuple, Union

from .models import CatalogProduct, FeedItem, FeedKind, HeatLevel, RecordFamily
from .utils import date_text, parse_datetime, text_value

logger = logging.getLogger(__name__)

RawRecord = Mapping[str, Any]
DateExtractor = Callable[[RawRecord], object]

FEED_DATE_FIELDS: Tuple[str, ...] = ("date", "publishedAt", "published", "createdAt", "updatedAt")

NEWS_TITLE_FALLBACK = "Untitled"
CASE_STUDY_TITLE_FALLBACK = "Untitled case study"
PLACEHOLDER_HREF = "#"
SUMMARY_SEPARATOR = " • "
SUMMARY_GOAL_LIMIT = 2

_COLLECTION_PATHS = {
    RecordFamily.NEWS: "/news",
    RecordFamily.CASE_STUDY: "/case-studies",
    RecordFamily.PRODUCT: "/products",
}


def as_record(value: object) -> RawRecord:
    """Return ``value`` when it is a mapping, otherwise an empty record."""

    if isinstance(value, Mapping):
        return value
    return {}


def as_collection(value: object) -> List[RawRecord]:
    if not isinstance(value, (list, tuple)):
        if value is not None:
            logger.warning("Ignoring content collection of type %s", type(value).__name__)
        return []
    return [as_record(item) for item in value]


def field_extractor(name: str) -> DateExtractor:
    def _extract(record: RawRecord) -> object:
        return record.get(name)

    _extract.__name__ = f"extract_{name}"
    return _extract


def date_extractors(fields: Iterable[str] = FEED_DATE_FIELDS) -> Tuple[DateExtractor, ...]:
    return tuple(field_extractor(name) for name in fields)


FEED_DATE_EXTRACTORS = date_extractors(FEED_DATE_FIELDS)


def pick_date(
    record: object, extractors: Sequence[DateExtractor] = FEED_DATE_EXTRACTORS
) -> str:
    """Return the first non-empty candidate date.

    Extractors are tried in order and the first non-empty value wins. It is
    returned as text so it can be shown as-is; when that value does not
    parse, or no candidate is present, the result is ``""``.
    """

    payload = as_record(record)
    for extractor in extractors:
        text = date_text(extractor(payload))
        if not text:
            continue
        if parse_datetime(text) is None:
            logger.debug("Unparseable date %r from %s", text, extractor.__name__)
            return ""
        return text
    return ""


def coerce_list(value: object) -> Tuple[str, ...]:
    """Coerce a list-like field into a tuple of strings.

    Sequences pass through, a truthy scalar becomes a single item and
    anything else becomes an empty tuple.
    """

    if isinstance(value, (list, tuple, set, frozenset)):
        items = sorted(value, key=str) if isinstance(value, (set, frozenset)) else value
        return tuple(text_value(item) for item in items if item is not None)
    if isinstance(value, Mapping) or not value:
        return ()
    return (text_value(value),)


def collection_href(family: RecordFamily, slug: object) -> str:
    slug_text = text_value(slug).strip()
    if not slug_text:
        return PLACEHOLDER_HREF
    return f"{_COLLECTION_PATHS[family]}/{slug_text}"


def _first_text(value: object, fallback: str) -> str:
    text = text_value(value)
    return text if text else fallback


def normalize_news(record: object) -> FeedItem:
    payload = as_record(record)
    url = text_value(payload.get("url")).strip()
    return FeedItem(
        kind=FeedKind.NEWS,
        date=pick_date(payload),
        title=_first_text(payload.get("title"), NEWS_TITLE_FALLBACK),
        href=url or collection_href(RecordFamily.NEWS, payload.get("slug")),
        summary=text_value(payload.get("summary")),
        extra={"author": text_value(payload.get("author"))},
    )


def case_study_summary(goals: object) -> str:
    if not isinstance(goals, (list, tuple)) or not goals:
        return ""
    selected = [text_value(goal) for goal in goals[:SUMMARY_GOAL_LIMIT]]
    return SUMMARY_SEPARATOR.join(selected)


def normalize_case_study(record: object) -> FeedItem:
    payload = as_record(record)
    return FeedItem(
        kind=FeedKind.CASE_STUDY,
        date=pick_date(payload),
        title=_first_text(payload.get("title"), CASE_STUDY_TITLE_FALLBACK),
        href=collection_href(RecordFamily.CASE_STUDY, payload.get("slug")),
        summary=case_study_summary(payload.get("goals")),
        extra={"sector": text_value(payload.get("sector"))},
    )


def normalize_heat(value: object) -> HeatLevel:
    level = HeatLevel.parse(value)
    if level is None:
        if value not in (None, ""):
            logger.debug("Unknown heat level %r; defaulting to %s", value, HeatLevel.MILD.value)
        return HeatLevel.MILD
    return level


def normalize_product(record: object) -> CatalogProduct:
    payload = as_record(record)
    return CatalogProduct(
        slug=text_value(payload.get("slug")),
        name=text_value(payload.get("name")),
        description=text_value(payload.get("description")),
        image=text_value(payload.get("image")),
        heat=normalize_heat(payload.get("heat")),
        tags=coerce_list(payload.get("tags")),
        diet=coerce_list(payload.get("diet")),
        allergens=coerce_list(payload.get("allergens")),
        category=text_value(payload.get("category")),
    )


_NORMALIZERS: dict[RecordFamily, Callable[[object], Union[FeedItem, CatalogProduct]]] = {
    RecordFamily.NEWS: normalize_news,
    RecordFamily.CASE_STUDY: normalize_case_study,
    RecordFamily.PRODUCT: normalize_product,
}


def normalize_record(
    family: RecordFamily | str, record: object
) -> Union[FeedItem, CatalogProduct]:
    """Normalize ``record`` with the converter registered for ``family``."""

    return _NORMALIZERS[RecordFamily(family)](record)


def normalize_news_posts(records: object) -> List[FeedItem]:
    return [normalize_news(record) for record in as_collection(records)]


def normalize_case_studies(records: object) -> List[FeedItem]:
    return [normalize_case_study(record) for record in as_collection(records)]


def normalize_products(records: object) -> List[CatalogProduct]:
    return [normalize_product(record) for record in as_collection(records)]
