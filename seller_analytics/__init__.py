"""Seller Analytics - per-seller revenue, profit, bonus and top products."""

from seller_analytics.analyzer import analyze_sales_data
from seller_analytics.errors import (
    InvalidInputError,
    InvalidStrategyTypeError,
    MissingStrategyError,
    SalesAnalyticsError,
    StrategyExecutionError,
)
from seller_analytics.models import SellerLedger, SellerSummary, TopProduct
from seller_analytics.strategies import (
    BonusStrategy,
    RevenueStrategy,
    calculate_bonus_by_profit,
    calculate_simple_revenue,
)

__all__ = [
    "BonusStrategy",
    "InvalidInputError",
    "InvalidStrategyTypeError",
    "MissingStrategyError",
    "RevenueStrategy",
    "SalesAnalyticsError",
    "SellerLedger",
    "SellerSummary",
    "StrategyExecutionError",
    "TopProduct",
    "analyze_sales_data",
    "calculate_bonus_by_profit",
    "calculate_simple_revenue",
]
