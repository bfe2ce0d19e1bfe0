"""Read-only constants shared by the engines.

LN2_LITERAL drives range reduction in ln and exp. When a working precision
asks for more digits than the literal holds, ln2() computes the constant from
ln(2) = 2 * atanh(1/3) instead and caches it per precision.
"""

from __future__ import annotations

import logging
import math
from decimal import Decimal, localcontext
from functools import lru_cache

from decimath.core.config import DEFAULT_ENVIRONMENT
from decimath.core.context import RoundingRule

logger = logging.getLogger(__name__)

LN2_LITERAL = (
    "0.693147180559945309417232121458176568075500134360"
    "255254120680009493393621969694715605863326996418687542001481020570685733"
)
LN2_LITERAL_DIGITS = len(LN2_LITERAL) - 2

# binary64 pi, exactly as the float stores it (3.14159265358979311599...)
FLOAT_PI = Decimal(math.pi)

_ONE = Decimal("1")
_TWO = Decimal("2")
_THREE = Decimal("3")


def ln2(precision: int) -> Decimal:
    """ln(2) rounded HALF_EVEN to `precision` significant digits."""
    ctx = DEFAULT_ENVIRONMENT.context(precision, RoundingRule.HALF_EVEN.value)
    if precision <= LN2_LITERAL_DIGITS:
        return ctx.create_decimal(LN2_LITERAL)
    return _ln2_series(precision)


@lru_cache(maxsize=32)
def _ln2_series(precision: int) -> Decimal:
    """ln(2) = 2 * (1/3 + 1/(3*3^3) + 1/(5*3^5) + ...)."""
    logger.warning(
        "ln2 literal holds %d digits, %d requested; computing by series",
        LN2_LITERAL_DIGITS, precision,
    )
    with localcontext(DEFAULT_ENVIRONMENT.context(precision + 5, RoundingRule.HALF_EVEN.value)) as ctx:
        third = _ONE / _THREE
        third_sq = third * third
        eps = _ONE.scaleb(-(ctx.prec + 2))
        term = third
        result = third
        k = 1
        while True:
            term = term * third_sq
            contrib = term / Decimal(2 * k + 1)
            result = result + contrib
            if abs(contrib) < eps:
                break
            k += 1
        result = result * _TWO
    with localcontext(DEFAULT_ENVIRONMENT.context(precision, RoundingRule.HALF_EVEN.value)):
        return +result
