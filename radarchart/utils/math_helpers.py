"""Math helpers — clamping, number coercion. No engine imports."""

from __future__ import annotations

import math
from decimal import Decimal
from numbers import Real
from typing import Any


def clamp(value: float, lower: float, upper: float) -> float:
    """Constrain value to [lower, upper]. Idempotent."""
    return max(lower, min(upper, value))


def is_finite_number(value: Any) -> bool:
    """True for real, finite numbers. Booleans are not numbers here.

    Values that overflow a float (huge ints, Fractions, Decimals) are not
    finite here.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        if not value.is_finite():
            return False
    elif not isinstance(value, Real):
        return False
    try:
        return math.isfinite(float(value))
    except OverflowError:
        return False


def to_number(value: Any, default: float = 0.0) -> float:
    """Coerce a host numeric (Decimal, numpy scalar, anything with __float__).

    None or unconvertible input returns the default. NaN and infinities pass
    through so validation can report them; so do values that overflow a float,
    as a signed infinity.
    """
    if value is None or isinstance(value, bool):
        return default
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf
    except (TypeError, ValueError, ArithmeticError):
        return default
