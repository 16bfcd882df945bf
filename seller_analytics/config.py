"""
Seller Analytics - Configuration & Constants

Bonus tiers, top-product limits and logging defaults live here so that
the engine and the reference strategies never hardcode them.

Usage:
    from seller_analytics.config import settings
"""

from __future__ import annotations

from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Central configuration for seller analytics.

    Loads from environment variables with fallback defaults.
    """

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # -----------------------------------------------------------------------
    # Top products
    # -----------------------------------------------------------------------
    TOP_PRODUCTS_LIMIT: int = 10

    # -----------------------------------------------------------------------
    # Reference bonus tiers (share of seller profit by rank)
    # rank 0 -> leader, ranks 1..BONUS_RUNNER_UP_RANKS -> runner-up,
    # last rank -> last, everyone else -> standard
    # -----------------------------------------------------------------------
    BONUS_RATE_LEADER: Decimal = Decimal("0.15")
    BONUS_RATE_RUNNER_UP: Decimal = Decimal("0.10")
    BONUS_RATE_STANDARD: Decimal = Decimal("0.05")
    BONUS_RATE_LAST: Decimal = Decimal("0")
    BONUS_RUNNER_UP_RANKS: int = 2

    # -----------------------------------------------------------------------
    # Logging
    # -----------------------------------------------------------------------
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True


# Singleton instance
settings = Settings()
