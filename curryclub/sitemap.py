"""Sitemap generation for static pages and every published record."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from html import escape as html_escape
from typing import List, Tuple

from .config import SiteSettings
from .models import RecordFamily, SitemapEntry
from .normalization import as_collection, collection_href, date_extractors, pick_date
from .sources import ContentSources
from .utils import parse_datetime, text_value

logger = logging.getLogger(__name__)

SITEMAP_DATE_FIELDS: Tuple[str, ...] = ("date", "updatedAt", "publishedAt", "published", "createdAt")
SITEMAP_DATE_EXTRACTORS = date_extractors(SITEMAP_DATE_FIELDS)

RECORD_PRIORITIES = {
    RecordFamily.PRODUCT: 0.6,
    RecordFamily.CASE_STUDY: 0.6,
    RecordFamily.NEWS: 0.5,
}


def record_last_modified(record: object, now: datetime) -> datetime:
    """Return the record's freshest known date, falling back to ``now``."""

    parsed = parse_datetime(pick_date(record, SITEMAP_DATE_EXTRACTORS))
    return parsed or now


def _record_entries(
    family: RecordFamily, records: object, settings: SiteSettings, now: datetime
) -> List[SitemapEntry]:
    entries: List[SitemapEntry] = []
    for record in as_collection(records):
        if not text_value(record.get("slug")).strip():
            continue
        entries.append(
            SitemapEntry(
                url=settings.abs_url(collection_href(family, record.get("slug"))),
                last_modified=record_last_modified(record, now),
                priority=RECORD_PRIORITIES[family],
            )
        )
    return entries


def build_sitemap(
    sources: ContentSources, settings: SiteSettings, now: datetime | None = None
) -> List[SitemapEntry]:
    reference = now or datetime.now(timezone.utc)
    entries = [
        SitemapEntry(
            url=settings.abs_url(page.path),
            last_modified=reference,
            priority=page.priority,
            change_frequency=page.change_frequency,
        )
        for page in settings.static_pages
    ]
    entries.extend(_record_entries(RecordFamily.PRODUCT, sources.products, settings, reference))
    entries.extend(_record_entries(RecordFamily.CASE_STUDY, sources.cases, settings, reference))
    entries.extend(_record_entries(RecordFamily.NEWS, sources.news, settings, reference))
    logger.debug("Built %s sitemap entries", len(entries))
    return entries


def render_sitemap_xml(entries: List[SitemapEntry]) -> str:
    lines = [
        "<?xml version=\"1.0\" encoding=\"UTF-8\"?>",
        "<urlset xmlns=\"http://www.sitemaps.org/schemas/sitemap/0.9\">",
    ]
    for entry in entries:
        lines.append("<url>")
        lines.append(f"<loc>{html_escape(entry.url)}</loc>")
        lines.append(f"<lastmod>{entry.last_modified.isoformat()}</lastmod>")
        lines.append(f"<changefreq>{entry.change_frequency}</changefreq>")
        lines.append(f"<priority>{entry.priority:.1f}</priority>")
        lines.append("</url>")
    lines.append("</urlset>")
    return "\n".join(lines)


def render_robots(settings: SiteSettings) -> str:
    return "User-agent: *\nAllow: /\n" f"Sitemap: {settings.abs_url('/sitemap.xml')}\n"
