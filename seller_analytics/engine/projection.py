"""
Seller Analytics - Result Projection
"""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from seller_analytics.models import SellerLedger, SellerSummary
from seller_analytics.utils.numbers import quantize_money


def project_summary(ledger: SellerLedger) -> SellerSummary:
    """Freeze a ranked ledger into its public record, rounding money to 2dp."""
    bonus = ledger.bonus if ledger.bonus is not None else Decimal("0")
    return SellerSummary(
        seller_id=ledger.id,
        name=ledger.name,
        revenue=quantize_money(ledger.revenue),
        profit=quantize_money(ledger.profit),
        sales_count=ledger.sales_count,
        top_products=tuple(ledger.top_products or ()),
        bonus=quantize_money(bonus),
    )


def project_results(ranked: Sequence[SellerLedger]) -> list[SellerSummary]:
    """Project every ledger, keeping the profit ranking order."""
    return [project_summary(ledger) for ledger in ranked]
