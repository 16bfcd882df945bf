"""Exceptions raised by the seller analytics pipeline."""

from __future__ import annotations


class SalesAnalyticsError(Exception):
    """Base class for every seller analytics failure."""


class InvalidInputError(SalesAnalyticsError, ValueError):
    """A required input collection is missing, not a sequence, or empty."""


class MissingStrategyError(SalesAnalyticsError, ValueError):
    """calculate_revenue and/or calculate_bonus was not supplied."""


class InvalidStrategyTypeError(SalesAnalyticsError, TypeError):
    """A supplied strategy is not callable."""


class StrategyExecutionError(SalesAnalyticsError):
    """
    Raised by a strategy that cannot compute its value.

    The pipeline never catches or wraps strategy exceptions; this class only
    gives strategy authors a domain error to raise. Whatever a strategy
    raises aborts the whole run unchanged.
    """
