"""
Seller Analytics - Ledger & Report Models

SellerLedger is the mutable per-seller accumulator that lives for one
analysis run. SellerSummary is the immutable output record projected from
it once ranking is done.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TopProduct(BaseModel):
    """A SKU and the total quantity a seller sold of it."""

    model_config = ConfigDict(frozen=True)

    sku: Any
    quantity: int


class SellerLedger(BaseModel):
    """
    Per-seller running totals for a single run.

    revenue, profit, sales_count and products_sold are only touched during
    aggregation; bonus and top_products are written once during ranking.
    """

    id: Any
    name: str
    revenue: Decimal = Decimal("0")
    profit: Decimal = Decimal("0")
    sales_count: int = 0
    products_sold: dict[Any, int] = Field(default_factory=dict)
    bonus: Decimal | None = None
    top_products: list[TopProduct] | None = None


class SellerSummary(BaseModel):
    """Public per-seller analytics record; money fields are rounded to 2dp."""

    model_config = ConfigDict(frozen=True)

    seller_id: Any
    name: str
    revenue: Decimal
    profit: Decimal
    sales_count: int
    top_products: tuple[TopProduct, ...] = ()
    bonus: Decimal = Decimal("0")

    def as_dict(self) -> dict[str, Any]:
        """Plain-mapping form: {seller_id, name, revenue, ..., bonus}."""
        data = self.model_dump()
        data["top_products"] = list(data["top_products"])
        return data
