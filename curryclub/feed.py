"""Merge news posts and case studies into the insights feed."""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Iterable, List, Sequence, Tuple

from .models import FeedItem, FeedKind
from .normalization import normalize_case_studies, normalize_news_posts


class FeedTab(str, Enum):
    ALL = "all"
    NEWS = "news"
    CASES = "cases"

    @classmethod
    def parse(cls, value: object) -> "FeedTab":
        if isinstance(value, cls):
            return value
        lowered = str(value or "").strip().lower()
        for tab in cls:
            if tab.value == lowered:
                return tab
        return cls.ALL

    @property
    def label(self) -> str:
        return {"all": "All", "news": "News", "cases": "Case Studies"}[self.value]


_TAB_KINDS = {
    FeedTab.NEWS: FeedKind.NEWS,
    FeedTab.CASES: FeedKind.CASE_STUDY,
}


def _recency_key(item: FeedItem) -> Tuple[bool, float]:
    stamp: datetime | None = item.timestamp
    if stamp is None:
        return (False, 0.0)
    return (True, stamp.timestamp())


def merge_feed(
    news_items: Iterable[FeedItem], case_items: Iterable[FeedItem]
) -> List[FeedItem]:
    """Concatenate both collections and order them newest first.

    The sort is stable, so items sharing a date keep their input order and
    undated items trail every dated one in the order they arrived.
    """

    merged = [*news_items, *case_items]
    return sorted(merged, key=_recency_key, reverse=True)


def build_feed(news_records: object, case_records: object) -> List[FeedItem]:
    return merge_feed(
        normalize_news_posts(news_records), normalize_case_studies(case_records)
    )


def filter_feed(items: Sequence[FeedItem], tab: FeedTab | str = FeedTab.ALL) -> List[FeedItem]:
    selected = FeedTab.parse(tab)
    if selected is FeedTab.ALL:
        return list(items)
    kind = _TAB_KINDS[selected]
    return [item for item in items if item.kind is kind]
