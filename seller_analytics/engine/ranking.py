"""
Seller Analytics - Profit Ranking & Bonus Assignment
"""

from __future__ import annotations

from typing import Any, Callable, Sequence

import structlog

from seller_analytics.models import SellerLedger
from seller_analytics.utils.numbers import coerce_number

logger = structlog.get_logger(__name__)


def rank_by_profit(ledgers: Sequence[SellerLedger]) -> list[SellerLedger]:
    """
    Order ledgers by profit, highest first.

    The sort is stable: sellers with equal profit keep their input order,
    which decides who gets which bonus tier.
    """
    return sorted(ledgers, key=lambda ledger: ledger.profit, reverse=True)


def assign_bonuses(
    ranked: Sequence[SellerLedger],
    calculate_bonus: Callable[..., Any],
) -> None:
    """
    Call calculate_bonus(rank, total, seller) for each ranked ledger and store
    the result as its bonus (non-numeric results become 0).

    The strategy receives a copy of the ledger so it cannot alter the totals.
    """
    total = len(ranked)
    for rank, ledger in enumerate(ranked):
        snapshot = ledger.model_copy(deep=True)
        ledger.bonus = coerce_number(calculate_bonus(rank, total, snapshot))

    logger.info(
        "sellers_ranked",
        sellers=total,
        leader_id=ranked[0].id if ranked else None,
    )
