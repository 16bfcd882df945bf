"""Tests for the reference revenue and bonus strategies."""

from __future__ import annotations

from decimal import Decimal

import pytest

from seller_analytics.config import settings
from seller_analytics.models import SellerLedger
from seller_analytics.strategies import calculate_bonus_by_profit, calculate_simple_revenue


class TestSimpleRevenue:
    """sale_price × quantity × (1 − discount / 100)"""

    def test_without_discount(self) -> None:
        assert calculate_simple_revenue({"sale_price": 20, "quantity": 2, "discount": 0}) == Decimal("40")

    def test_with_discount(self) -> None:
        revenue = calculate_simple_revenue({"sale_price": "19.99", "quantity": 3, "discount": 25})
        assert revenue == Decimal("19.99") * 3 * Decimal("0.75")

    def test_missing_fields_are_zero(self) -> None:
        assert calculate_simple_revenue({"sale_price": 10}) == Decimal("0")
        assert calculate_simple_revenue({"sale_price": 10, "quantity": 1}) == Decimal("10")
        assert calculate_simple_revenue(None) == Decimal("0")

    def test_product_is_ignored(self) -> None:
        item = {"sale_price": 5, "quantity": 2}
        assert calculate_simple_revenue(item, {"purchase_price": 100}) == Decimal("10")


class TestBonusByProfit:
    """15% leader, 10% for ranks 1-2, 0% last, 5% everyone else."""

    @pytest.mark.parametrize(
        ("rank", "rate"),
        [
            (0, settings.BONUS_RATE_LEADER),
            (1, settings.BONUS_RATE_RUNNER_UP),
            (2, settings.BONUS_RATE_RUNNER_UP),
            (3, settings.BONUS_RATE_STANDARD),
            (8, settings.BONUS_RATE_STANDARD),
            (9, settings.BONUS_RATE_LAST),
        ],
    )
    def test_rates_by_rank(self, rank: int, rate: Decimal) -> None:
        seller = SellerLedger(id="s", name="s", profit=Decimal("1000"))
        assert calculate_bonus_by_profit(rank, 10, seller) == (Decimal("1000") * rate).quantize(Decimal("0.01"))

    def test_single_seller_gets_leader_rate(self) -> None:
        seller = SellerLedger(id="s", name="s", profit=Decimal("20"))
        assert calculate_bonus_by_profit(0, 1, seller) == Decimal("3.00")

    def test_runner_up_rate_beats_last_place(self) -> None:
        """With two sellers, rank 1 is both last and runner-up; runner-up wins."""
        seller = SellerLedger(id="s", name="s", profit=Decimal("100"))
        assert calculate_bonus_by_profit(1, 2, seller) == Decimal("10.00")

    def test_rounds_to_two_places(self) -> None:
        seller = SellerLedger(id="s", name="s", profit=Decimal("33.33"))
        assert calculate_bonus_by_profit(0, 5, seller) == Decimal("5.00")

    def test_accepts_mapping_seller(self) -> None:
        assert calculate_bonus_by_profit(3, 10, {"profit": "200"}) == Decimal("10.00")

    def test_missing_profit_is_zero(self) -> None:
        assert calculate_bonus_by_profit(0, 3, {}) == Decimal("0.00")
