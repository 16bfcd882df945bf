"""
Seller Analytics - Sales Analysis Entry Point

analyze_sales_data() turns sellers, products and purchase records into one
ranked report row per seller:

    validate -> aggregate -> rank + bonus -> top products -> project

Every call builds its own ledgers; nothing is shared between calls.
Exceptions raised by the injected strategies propagate unchanged.
"""

from __future__ import annotations

from typing import Any, Mapping

import structlog

from seller_analytics.engine import (
    accumulate_records,
    assign_bonuses,
    build_ledgers,
    project_results,
    rank_by_profit,
    resolve_limit,
    select_top_products,
    validate_inputs,
)
from seller_analytics.models import SellerSummary

logger = structlog.get_logger(__name__)


def analyze_sales_data(
    data: Mapping[str, Any] | None,
    options: Mapping[str, Any] | None,
    top_products_limit: int | None = None,
) -> list[SellerSummary]:
    """
    Compute revenue, profit, sales count, top products and bonus per seller.

    Args:
        data: Mapping with non-empty "sellers", "products" and
            "purchase_records" sequences.
        options: Mapping with "calculate_revenue" and "calculate_bonus"
            callables.
        top_products_limit: Override for settings.TOP_PRODUCTS_LIMIT.

    Returns:
        One SellerSummary per seller, ordered by profit descending.

    Raises:
        InvalidInputError: A data collection is missing or empty.
        MissingStrategyError: A strategy was not supplied.
        InvalidStrategyTypeError: A strategy is not callable.
        ValueError: top_products_limit is negative.
    """
    calculate_revenue, calculate_bonus = validate_inputs(data, options)
    limit = resolve_limit(top_products_limit)

    ledgers = build_ledgers(data["sellers"])
    skipped = accumulate_records(
        ledgers,
        data["products"],
        data["purchase_records"],
        calculate_revenue,
    )

    ranked = rank_by_profit(ledgers)
    assign_bonuses(ranked, calculate_bonus)
    for ledger in ranked:
        ledger.top_products = select_top_products(ledger.products_sold, limit=limit)

    results = project_results(ranked)
    logger.info(
        "sales_analysis_completed",
        sellers=len(results),
        records=len(data["purchase_records"]),
        skipped_records=skipped,
    )
    return results
