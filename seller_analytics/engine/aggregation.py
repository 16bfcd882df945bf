"""
Seller Analytics - Revenue & Profit Aggregation

Walks purchase records in input order and accumulates per-seller totals:

    cost    = purchase_price × quantity          (unknown product -> 0)
    revenue = calculate_revenue(item, product)   (non-numeric -> 0)
    profit  = Σ (revenue − cost) over the record's items

The seller's revenue takes the record's total_amount when it is numeric,
otherwise the sum of item revenues. Profit always comes from the items.

Records for unknown sellers are skipped without touching any ledger.
Seller ids and SKUs are matched as strings (see lookup_key).
Cost uses the item quantity as given; products_sold counts whole units.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Callable, Iterable, Sequence

import structlog

from seller_analytics.models import SellerLedger
from seller_analytics.utils.numbers import (
    coerce_number,
    coerce_quantity,
    get_field,
    lookup_key,
)

logger = structlog.get_logger(__name__)

_ZERO = Decimal("0")


def _seller_name(seller: Any) -> str:
    return f"{get_field(seller, 'first_name')} {get_field(seller, 'last_name')}"


def build_ledgers(sellers: Sequence[Any]) -> list[SellerLedger]:
    """Create one empty ledger per seller, in input order."""
    return [
        SellerLedger(id=get_field(seller, "id"), name=_seller_name(seller))
        for seller in sellers
    ]


def index_by(entries: Iterable[Any], key: str) -> dict[Any, Any]:
    """
    Map lookup_key(entry[key]) -> entry. On duplicate keys the last entry wins.
    """
    return {lookup_key(get_field(entry, key)): entry for entry in entries}


def accumulate_records(
    ledgers: Sequence[SellerLedger],
    products: Sequence[Any],
    purchase_records: Sequence[Any],
    calculate_revenue: Callable[..., Any],
) -> int:
    """
    Fold every purchase record into its seller's ledger.

    Args:
        ledgers: Fresh ledgers from build_ledgers(); mutated in place.
        products: Product cards, looked up by sku.
        purchase_records: Records in processing order.
        calculate_revenue: Revenue strategy, called once per item.

    Returns:
        Number of records skipped because their seller_id is unknown.
    """
    seller_index = {lookup_key(ledger.id): ledger for ledger in ledgers}
    product_index = index_by(products, "sku")
    skipped = 0

    for record in purchase_records:
        seller_id = get_field(record, "seller_id")
        ledger = seller_index.get(lookup_key(seller_id))
        if ledger is None:
            skipped += 1
            logger.debug("purchase_record_skipped", seller_id=seller_id)
            continue

        ledger.sales_count += 1

        items_revenue = _ZERO
        items_profit = _ZERO
        items = get_field(record, "items")
        if not isinstance(items, (list, tuple)):
            items = ()
        for item in items:
            sku = lookup_key(get_field(item, "sku"))
            product = product_index.get(sku)
            raw_quantity = get_field(item, "quantity")
            quantity = coerce_number(raw_quantity)

            cost = coerce_number(get_field(product, "purchase_price")) * quantity
            revenue = coerce_number(calculate_revenue(item, product))

            items_revenue += revenue
            items_profit += revenue - cost
            sold = coerce_quantity(raw_quantity)
            ledger.products_sold[sku] = ledger.products_sold.get(sku, 0) + sold

        total_amount = coerce_number(get_field(record, "total_amount"), default=None)
        ledger.revenue += total_amount if total_amount is not None else items_revenue
        ledger.profit += items_profit

    logger.info(
        "sales_aggregated",
        sellers=len(ledgers),
        records=len(purchase_records),
        skipped_records=skipped,
    )
    return skipped
