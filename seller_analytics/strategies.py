"""
Seller Analytics - Revenue & Bonus Strategies

The pipeline does not define pricing or compensation rules. It calls two
injected callables:

    calculate_revenue(item, product) -> number
    calculate_bonus(rank, total, seller) -> number

The reference implementations below reproduce the standard policy:
revenue = sale_price × quantity × (1 − discount/100), and a profit share
bonus tiered by rank (15% / 10% / 5% / 0% for the last place).
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Mapping, Protocol

import structlog

from seller_analytics.config import settings
from seller_analytics.models import SellerLedger
from seller_analytics.utils.numbers import coerce_number, get_field, quantize_money

logger = structlog.get_logger(__name__)

_HUNDRED = Decimal("100")
_ONE = Decimal("1")


class RevenueStrategy(Protocol):
    """Computes the revenue of a single purchase item."""

    def __call__(self, item: Any, product: Any) -> Any: ...


class BonusStrategy(Protocol):
    """Computes a seller's bonus from its zero-based profit rank."""

    def __call__(self, rank: int, total: int, seller: SellerLedger) -> Any: ...


def calculate_simple_revenue(item: Any, product: Any = None) -> Decimal:
    """
    Revenue of one purchase item after its percentage discount.

    Args:
        item: Purchase item with sale_price, quantity and discount (percent).
        product: Product card for the item's SKU (unused by this policy).

    Returns:
        sale_price × quantity × (1 − discount / 100). Missing fields count as 0.

    Examples:
        >>> calculate_simple_revenue({"sale_price": 20, "quantity": 2, "discount": 10})
        Decimal('36.0')
    """
    discount = coerce_number(get_field(item, "discount"))
    sale_price = coerce_number(get_field(item, "sale_price"))
    quantity = coerce_number(get_field(item, "quantity"))

    discount_left = _ONE - discount / _HUNDRED
    return sale_price * quantity * discount_left


def calculate_bonus_by_profit(rank: int, total: int, seller: Any) -> Decimal:
    """
    Profit-share bonus for the seller at zero-based rank out of total.

    Checks run in order, so a lone seller (rank 0 and last at once) gets
    the leader rate:
    - rank 0 -> BONUS_RATE_LEADER
    - rank 1..BONUS_RUNNER_UP_RANKS -> BONUS_RATE_RUNNER_UP
    - rank total-1 -> BONUS_RATE_LAST
    - otherwise -> BONUS_RATE_STANDARD
    """
    if isinstance(seller, Mapping):
        raw_profit = seller.get("profit")
    else:
        raw_profit = getattr(seller, "profit", None)
    profit = coerce_number(raw_profit)

    if rank == 0:
        rate = settings.BONUS_RATE_LEADER
    elif 1 <= rank <= settings.BONUS_RUNNER_UP_RANKS:
        rate = settings.BONUS_RATE_RUNNER_UP
    elif rank == total - 1:
        rate = settings.BONUS_RATE_LAST
    else:
        rate = settings.BONUS_RATE_STANDARD

    bonus = quantize_money(profit * rate)
    logger.debug(
        "bonus_calculated",
        rank=rank,
        total=total,
        profit=str(profit),
        rate=str(rate),
        bonus=str(bonus),
    )
    return bonus
