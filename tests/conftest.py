"""
Seller Analytics - Shared pytest Fixtures

Provides a small reference dataset and the reference strategy options.
"""

from __future__ import annotations

from typing import Any

import pytest

from seller_analytics.strategies import calculate_bonus_by_profit, calculate_simple_revenue


@pytest.fixture
def reference_options() -> dict[str, Any]:
    """Options wired to the reference revenue and bonus strategies."""
    return {
        "calculate_revenue": calculate_simple_revenue,
        "calculate_bonus": calculate_bonus_by_profit,
    }


@pytest.fixture
def single_seller_data() -> dict[str, Any]:
    """One seller, one product, one purchase of two units at 20 each."""
    return {
        "sellers": [{"id": "s1", "first_name": "A", "last_name": "B"}],
        "products": [{"sku": "p1", "purchase_price": 10}],
        "purchase_records": [
            {
                "seller_id": "s1",
                "items": [{"sku": "p1", "quantity": 2, "sale_price": 20, "discount": 0}],
            }
        ],
    }


@pytest.fixture
def marketplace_data() -> dict[str, Any]:
    """
    Five sellers with distinct profits plus one idle seller.

    Per-seller item profit (price 10 purchase, sold at 20 without discount):
    s1: 50 units -> 500, s2: 30 -> 300, s3: 20 -> 200, s4: 10 -> 100,
    s5: 5 -> 50, s6: no sales -> 0.
    """
    sellers = [
        {"id": f"s{n}", "first_name": f"First{n}", "last_name": f"Last{n}"}
        for n in range(1, 7)
    ]
    products = [
        {"sku": "p1", "purchase_price": 10},
        {"sku": "p2", "purchase_price": 10},
    ]
    quantities = {"s1": 50, "s2": 30, "s3": 20, "s4": 10, "s5": 5}
    records = [
        {
            "seller_id": seller_id,
            "items": [{"sku": "p1", "quantity": quantity, "sale_price": 20, "discount": 0}],
        }
        for seller_id, quantity in quantities.items()
    ]
    records.append({"seller_id": "ghost", "items": [{"sku": "p1", "quantity": 99, "sale_price": 20}]})
    return {"sellers": sellers, "products": products, "purchase_records": records}
