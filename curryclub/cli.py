"""Command line entrypoints for the Curry Club content tools."""
from __future__ import annotations

import argparse
import json
import logging
from dataclasses import replace
from pathlib import Path

from .catalog import (
    ALL_CATEGORIES,
    ALL_HEAT,
    ProductFilter,
    build_catalog_view,
    category_options,
    find_product,
)
from .config import OUTPUT_DIR, SiteSettings, load_settings
from .feed import FeedTab, build_feed, filter_feed
from .normalization import normalize_products
from .sitemap import build_sitemap, render_robots, render_sitemap_xml
from .sources import ContentSourceError, ContentSources
from .utils import write_text

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="The Curry Club content commands")
    parser.add_argument("--news", help="Path or URL of the news collection")
    parser.add_argument("--cases", help="Path or URL of the case study collection")
    parser.add_argument("--products", help="Path or URL of the product catalog")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ...)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    products_parser = subparsers.add_parser("products", help="Search and filter the product catalog")
    products_parser.add_argument("--q", default="", help="Free-text search")
    products_parser.add_argument(
        "--heat",
        default=ALL_HEAT,
        help="Heat level to show (All, Mild, Medium, Hot)",
    )
    products_parser.add_argument(
        "--cat",
        default=ALL_CATEGORIES,
        help="Category to show",
    )
    products_parser.add_argument(
        "--json",
        action="store_true",
        help="Output the matching products as JSON",
    )
    products_parser.set_defaults(func=handle_products)

    product_parser = subparsers.add_parser("product", help="Show the details of one product")
    product_parser.add_argument("slug", help="Product slug")
    product_parser.set_defaults(func=handle_product)

    categories_parser = subparsers.add_parser("categories", help="List the catalog categories")
    categories_parser.set_defaults(func=handle_categories)

    insights_parser = subparsers.add_parser(
        "insights", help="List news posts and case studies, newest first"
    )
    insights_parser.add_argument(
        "--tab",
        choices=[tab.value for tab in FeedTab],
        default=FeedTab.ALL.value,
        help="Restrict the feed to one kind of item",
    )
    insights_parser.add_argument(
        "--json",
        action="store_true",
        help="Output the feed as JSON",
    )
    insights_parser.set_defaults(func=handle_insights)

    sitemap_parser = subparsers.add_parser("sitemap", help="Write sitemap.xml and robots.txt")
    sitemap_parser.add_argument(
        "--output",
        type=Path,
        default=OUTPUT_DIR,
        help="Directory that receives the generated files",
    )
    sitemap_parser.set_defaults(func=handle_sitemap)

    return parser


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def resolve_settings(args: argparse.Namespace) -> SiteSettings:
    settings = load_settings()
    overrides = {
        "news_source": getattr(args, "news", None),
        "cases_source": getattr(args, "cases", None),
        "products_source": getattr(args, "products", None),
    }
    overrides = {key: value for key, value in overrides.items() if value}
    return replace(settings, **overrides) if overrides else settings


def load_sources(settings: SiteSettings) -> ContentSources:
    try:
        return ContentSources.load(settings)
    except ContentSourceError as error:
        raise SystemExit(str(error)) from error


def _truncate(value: object, width: int) -> str:
    text = str(value or "")
    if len(text) <= width:
        return text.ljust(width)
    if width <= 1:
        return text[:width]
    return (text[: width - 1].rstrip() + "…").ljust(width)


def handle_products(args: argparse.Namespace) -> None:
    sources = load_sources(resolve_settings(args))
    product_filter = ProductFilter(query=args.q, heat=args.heat, category=args.cat)
    view = build_catalog_view(sources.products, product_filter)
    if args.json:
        print(json.dumps([product.to_dict() for product in view.results], indent=2))
        return
    if not view.results:
        print("No products match your filters.")
        return
    header = (
        f"{_truncate('Name', 32)} {_truncate('Heat', 8)} "
        f"{_truncate('Category', 18)} Tags"
    )
    print(header)
    print("-" * len(header))
    for product in view.results:
        print(
            f"{_truncate(product.name or 'Untitled', 32)} "
            f"{_truncate(product.heat.value, 8)} "
            f"{_truncate(product.category, 18)} {', '.join(product.labels)}"
        )
    print(view.summary)


def handle_product(args: argparse.Namespace) -> None:
    sources = load_sources(resolve_settings(args))
    product = find_product(normalize_products(sources.products), args.slug)
    if product is None:
        raise SystemExit(f"No product with slug '{args.slug}'")
    print(f"{product.name or 'Untitled'} ({product.heat.value})")
    if product.description:
        print(product.description)
    if product.labels:
        print("Tags: " + ", ".join(product.labels))
    if product.allergens:
        print("Allergens: " + ", ".join(product.allergens))
    if product.category:
        print(f"Category: {product.category}")
    print(f"Link: {product.href}")


def handle_categories(args: argparse.Namespace) -> None:
    sources = load_sources(resolve_settings(args))
    for option in category_options(normalize_products(sources.products)):
        print(option)


def handle_insights(args: argparse.Namespace) -> None:
    sources = load_sources(resolve_settings(args))
    items = filter_feed(build_feed(sources.news, sources.cases), args.tab)
    if args.json:
        print(json.dumps([item.to_dict() for item in items], indent=2, ensure_ascii=False))
        return
    if not items:
        print("No items yet.")
        return
    for item in items:
        print(
            f"{_truncate(item.kind_label, 10)} {_truncate(item.date_label, 12)} "
            f"{_truncate(item.title, 48)} {item.href}"
        )


def handle_sitemap(args: argparse.Namespace) -> None:
    settings = resolve_settings(args)
    sources = load_sources(settings)
    entries = build_sitemap(sources, settings)
    output: Path = args.output
    write_text(output / "sitemap.xml", render_sitemap_xml(entries))
    write_text(output / "robots.txt", render_robots(settings))
    LOGGER.info("Wrote %s sitemap entries to %s", len(entries), output)


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    args.func(args)


if __name__ == "__main__":
    main()
