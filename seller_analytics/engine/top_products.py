"""
Seller Analytics - Top Products Selection

Reduces a seller's SKU -> quantity map to the best-selling SKUs. Ties keep
the order in which SKUs were first sold.
"""

from __future__ import annotations

from typing import Any, Mapping

from seller_analytics.config import settings
from seller_analytics.models import TopProduct


def resolve_limit(limit: int | None = None) -> int:
    """Return limit, or TOP_PRODUCTS_LIMIT when None. Negative limits are rejected."""
    limit = limit if limit is not None else settings.TOP_PRODUCTS_LIMIT
    if limit < 0:
        raise ValueError("limit must be non-negative")
    return limit


def select_top_products(
    products_sold: Mapping[Any, int],
    limit: int | None = None,
) -> list[TopProduct]:
    """Return at most limit (default TOP_PRODUCTS_LIMIT) SKUs by quantity, descending."""
    limit = resolve_limit(limit)

    ranked = sorted(products_sold.items(), key=lambda entry: entry[1], reverse=True)
    return [TopProduct(sku=sku, quantity=quantity) for sku, quantity in ranked[:limit]]
