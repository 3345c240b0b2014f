"""Search and filter helpers for the product catalog page."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Mapping, Sequence

from .models import CatalogProduct, HeatLevel
from .normalization import normalize_products

ALL_HEAT = "All"
ALL_CATEGORIES = "All Categories"


@dataclass(frozen=True)
class ProductFilter:
    """The search box, heat toggle and category select of the catalog."""

    query: str = ""
    heat: str = ALL_HEAT
    category: str = ALL_CATEGORIES

    @classmethod
    def from_params(cls, params: Mapping[str, object] | None) -> "ProductFilter":
        """Read the ``q``, ``heat`` and ``cat`` query parameters."""

        params = params or {}

        def _param(name: str, default: str) -> str:
            value = params.get(name)
            if isinstance(value, (list, tuple)):
                value = value[0] if value else None
            return default if value is None else str(value)

        return cls(
            query=_param("q", ""),
            heat=_param("heat", ALL_HEAT),
            category=_param("cat", ALL_CATEGORIES),
        )

    @property
    def normalized_query(self) -> str:
        return (self.query or "").strip().lower()

    @property
    def heat_active(self) -> bool:
        heat = (self.heat or "").strip()
        return bool(heat) and heat.lower() != ALL_HEAT.lower()

    @property
    def category_active(self) -> bool:
        category = (self.category or "").strip()
        return bool(category) and category.lower() != ALL_CATEGORIES.lower()

    def matches(self, product: CatalogProduct) -> bool:
        return (
            _matches_query(product, self.normalized_query)
            and (not self.heat_active or _equals(product.heat.value, self.heat))
            and (not self.category_active or _equals(product.category, self.category))
        )


def _equals(value: str, selected: str) -> bool:
    return bool(value) and value.lower() == selected.strip().lower()


def _matches_query(product: CatalogProduct, query: str) -> bool:
    if not query:
        return True
    haystacks = (
        product.name,
        product.description,
        " ".join(product.tags),
        " ".join(product.diet),
    )
    return any(query in text.lower() for text in haystacks if text)


def filter_products(
    products: Iterable[CatalogProduct], product_filter: ProductFilter | None = None
) -> List[CatalogProduct]:
    """Return the products that satisfy every active predicate, in order."""

    active = product_filter or ProductFilter()
    return [product for product in products if active.matches(product)]


def category_options(products: Iterable[CatalogProduct]) -> List[str]:
    categories = {product.category for product in products if product.category}
    return [ALL_CATEGORIES, *sorted(categories)]


def heat_options() -> List[str]:
    return [ALL_HEAT, *(level.value for level in HeatLevel)]


@dataclass(frozen=True)
class CatalogView:
    """Everything the products page needs for one render."""

    products: List[CatalogProduct]
    results: List[CatalogProduct]
    categories: List[str]
    product_filter: ProductFilter

    @property
    def summary(self) -> str:
        return f"Showing {len(self.results):,} of {len(self.products):,} products"


def build_catalog_view(
    records: object, product_filter: ProductFilter | None = None
) -> CatalogView:
    products = normalize_products(records)
    active = product_filter or ProductFilter()
    return CatalogView(
        products=products,
        results=filter_products(products, active),
        categories=category_options(products),
        product_filter=active,
    )


def find_product(products: Sequence[CatalogProduct], slug: str) -> CatalogProduct | None:
    slug = (slug or "").strip()
    if not slug:
        return None
    for product in products:
        if product.slug == slug:
            return product
    return None
