"""Data models shared by the feed, catalog and sitemap helpers."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Mapping, Optional, Tuple

from .utils import format_date_label, parse_datetime


class RecordFamily(str, Enum):
    """The content collection a raw record was read from."""

    NEWS = "news"
    CASE_STUDY = "cases"
    PRODUCT = "products"


class FeedKind(str, Enum):
    NEWS = "news"
    CASE_STUDY = "cases"

    @property
    def label(self) -> str:
        return "News" if self is FeedKind.NEWS else "Case Study"


class HeatLevel(str, Enum):
    """Spice level printed on every product card."""

    MILD = "Mild"
    MEDIUM = "Medium"
    HOT = "Hot"

    @classmethod
    def parse(cls, value: object) -> Optional["HeatLevel"]:
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        lowered = value.strip().lower()
        for level in cls:
            if level.value.lower() == lowered:
                return level
        return None


@dataclass(frozen=True)
class FeedItem:
    """A news post or case study shaped for the insights feed."""

    kind: FeedKind
    date: str
    title: str
    href: str
    summary: str = ""
    extra: Mapping[str, Any] = field(default_factory=dict)

    @property
    def timestamp(self) -> Optional[datetime]:
        return parse_datetime(self.date)

    @property
    def kind_label(self) -> str:
        return self.kind.label

    @property
    def date_label(self) -> str:
        return format_date_label(self.date)

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "date": self.date,
            "title": self.title,
            "href": self.href,
            "summary": self.summary,
            "extra": dict(self.extra),
        }


@dataclass(frozen=True)
class CatalogProduct:
    """Represents a single dish from the product catalog."""

    slug: str
    name: str
    description: str
    image: str
    heat: HeatLevel
    tags: Tuple[str, ...] = ()
    diet: Tuple[str, ...] = ()
    allergens: Tuple[str, ...] = ()
    category: str = ""

    @property
    def href(self) -> str:
        return f"/products/{self.slug}" if self.slug else "#"

    @property
    def labels(self) -> Tuple[str, ...]:
        return self.tags + self.diet

    def to_dict(self) -> dict:
        return {
            "slug": self.slug,
            "name": self.name,
            "description": self.description,
            "image": self.image,
            "heat": self.heat.value,
            "tags": list(self.tags),
            "diet": list(self.diet),
            "allergens": list(self.allergens),
            "category": self.category,
        }


@dataclass(frozen=True)
class SitemapEntry:
    url: str
    last_modified: datetime
    priority: float
    change_frequency: str = "weekly"

    def to_dict(self) -> dict:
        return {
            "url": self.url,
            "lastModified": self.last_modified.isoformat(),
            "changeFrequency": self.change_frequency,
            "priority": self.priority,
        }
