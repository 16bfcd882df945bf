"""
Seller Analytics - Input Validation

All checks run before any ledger exists, so a rejected call has no side
effects. Data collections are checked first, then the two strategies.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

import structlog

from seller_analytics.errors import (
    InvalidInputError,
    InvalidStrategyTypeError,
    MissingStrategyError,
)

logger = structlog.get_logger(__name__)

REQUIRED_COLLECTIONS = ("sellers", "products", "purchase_records")
REQUIRED_STRATEGIES = ("calculate_revenue", "calculate_bonus")


def _is_non_empty_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and len(value) > 0


def validate_inputs(
    data: Mapping[str, Any] | None,
    options: Mapping[str, Any] | None,
) -> tuple[Callable[..., Any], Callable[..., Any]]:
    """
    Validate the analysis inputs and return (calculate_revenue, calculate_bonus).

    Raises:
        InvalidInputError: data is absent, or sellers/products/purchase_records
            is not a non-empty list or tuple.
        MissingStrategyError: either strategy is absent.
        InvalidStrategyTypeError: either strategy is present but not callable.
    """
    if not isinstance(data, Mapping):
        logger.warning("sales_input_rejected", reason="data_missing")
        raise InvalidInputError(
            "Invalid input data: expected non-empty sellers, products, purchase_records"
        )

    bad_collections = [
        key for key in REQUIRED_COLLECTIONS if not _is_non_empty_sequence(data.get(key))
    ]
    if bad_collections:
        logger.warning(
            "sales_input_rejected",
            reason="collection_invalid",
            collections=bad_collections,
        )
        raise InvalidInputError(
            f"Invalid input data: {', '.join(bad_collections)} must be non-empty sequences"
        )

    options = options or {}
    missing = [key for key in REQUIRED_STRATEGIES if not options.get(key)]
    if missing:
        logger.warning("sales_input_rejected", reason="strategy_missing", strategies=missing)
        raise MissingStrategyError(f"Missing calculation functions: {', '.join(missing)}")

    not_callable = [key for key in REQUIRED_STRATEGIES if not callable(options[key])]
    if not_callable:
        logger.warning(
            "sales_input_rejected",
            reason="strategy_not_callable",
            strategies=not_callable,
        )
        raise InvalidStrategyTypeError(
            f"Calculation functions are not callable: {', '.join(not_callable)}"
        )

    return options["calculate_revenue"], options["calculate_bonus"]
