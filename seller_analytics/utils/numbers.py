"""
Seller Analytics - Tolerant Numeric Coercion

Input records are loosely shaped: prices, quantities and totals may be
missing, None, strings or garbage. Every numeric read in the engine goes
through coerce_number() so that malformed values uniformly collapse to a
default instead of raising.

All money values use Decimal - never float - and are rounded half-up to
two places only at the output boundary.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Any, Mapping, TypeVar

_TWO_DP = Decimal("0.01")
_ZERO = Decimal("0")

_D = TypeVar("_D")


def coerce_number(value: Any, default: _D | Decimal = _ZERO) -> Decimal | _D:
    """
    Convert value to a finite Decimal, or return default.

    Accepts int, float, Decimal and numeric strings. None, booleans,
    non-numeric strings, NaN and infinities yield default.

    Examples:
        >>> coerce_number("12.5")
        Decimal('12.5')
        >>> coerce_number(None)
        Decimal('0')
        >>> coerce_number("abc", default=None) is None
        True
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, (int, float, str)):
        try:
            # str() keeps floats at their shortest repr (0.1 -> Decimal("0.1"))
            number = Decimal(str(value).strip())
        except InvalidOperation:
            return default
    else:
        return default

    if not number.is_finite():
        return default
    return number


def coerce_quantity(value: Any) -> int:
    """Coerce an item quantity to int, truncating toward zero (default 0)."""
    return int(coerce_number(value))


def quantize_money(value: Decimal) -> Decimal:
    """Round a money value half-up to 2 decimal places."""
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the two decimals
        ctx.prec = max(28, value.adjusted() + 3)
        return value.quantize(_TWO_DP, rounding=ROUND_HALF_UP)


def lookup_key(value: Any) -> Any:
    """
    Normalize a seller id or SKU for index lookups.

    Ids are compared as strings, so 1, 1.0 and "1" address the same entry.
    None stays None.
    """
    if value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def get_field(entry: Any, key: str, default: Any = None) -> Any:
    """Read key from a mapping entry; non-mapping entries have no fields."""
    if isinstance(entry, Mapping):
        return entry.get(key, default)
    return default
