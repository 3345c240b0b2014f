"""Configuration helpers for the Curry Club content tools."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Tuple

from .utils import env_str

BASE_DIR = Path(__file__).resolve().parent.parent
DATA_DIR = BASE_DIR / "data"
OUTPUT_DIR = BASE_DIR / "public"

DEFAULT_BASE_URL = "https://thecurry.club"
DEFAULT_DESCRIPTION = "Restaurant-quality curries, news and case studies from The Curry Club."


@dataclass(frozen=True)
class StaticPage:
    """A hand-built page that is always listed in the sitemap."""

    path: str
    priority: float
    change_frequency: str = "weekly"


DEFAULT_STATIC_PAGES: Tuple[StaticPage, ...] = (
    StaticPage(path="/", priority=1.0),
    StaticPage(path="/how-it-works", priority=0.8),
    StaticPage(path="/products", priority=0.8),
    StaticPage(path="/faqs", priority=0.6),
    StaticPage(path="/case-studies", priority=0.6),
    StaticPage(path="/news", priority=0.6),
    StaticPage(path="/contact", priority=0.5),
)


@dataclass(frozen=True)
class SiteSettings:
    """Global site level settings."""

    site_name: str = "The Curry Club"
    base_url: str = DEFAULT_BASE_URL
    description: str = DEFAULT_DESCRIPTION
    news_source: str = str(DATA_DIR / "news.json")
    cases_source: str = str(DATA_DIR / "cases.json")
    products_source: str = str(DATA_DIR / "products.json")
    static_pages: Tuple[StaticPage, ...] = field(default=DEFAULT_STATIC_PAGES)

    def abs_url(self, path: str) -> str:
        base = (self.base_url or DEFAULT_BASE_URL).rstrip("/")
        if path.startswith("/"):
            return f"{base}{path}"
        return f"{base}/{path}"


def load_settings() -> SiteSettings:
    """Build settings from the environment, falling back to the defaults."""

    defaults = SiteSettings()
    return SiteSettings(
        site_name=env_str("SITE_NAME", defaults.site_name) or defaults.site_name,
        base_url=env_str("SITE_BASE_URL", defaults.base_url) or defaults.base_url,
        description=env_str("SITE_DESCRIPTION", defaults.description)
        or defaults.description,
        news_source=env_str("CURRYCLUB_NEWS_SOURCE", defaults.news_source)
        or defaults.news_source,
        cases_source=env_str("CURRYCLUB_CASES_SOURCE", defaults.cases_source)
        or defaults.cases_source,
        products_source=env_str("CURRYCLUB_PRODUCTS_SOURCE", defaults.products_source)
        or defaults.products_source,
    )
