"""The constant pi to a requested number of fractional digits.

Up to PI_SHORTCUT_MAX_PRECISION digits the binary64 pi is used as is: it
is correct to 15 decimals, so flooring it gives the true digits. Beyond
that the Gauss-Legendre arithmetic-geometric-mean iteration runs at
precision + GUARD_DIGITS.

The AGM roughly doubles its correct digits per iteration, but every
iteration costs a full-precision square root and multiplications, so the
total cost grows faster than linearly. Requests above
PI_PRACTICAL_MAX_PRECISION (32768) digits are computed but logged as
impractical.
"""

from __future__ import annotations

import logging
from decimal import ROUND_FLOOR, Decimal, localcontext

from decimath.core.config import (
    GUARD_DIGITS,
    PI_PRACTICAL_MAX_PRECISION,
    PI_SHORTCUT_MAX_PRECISION,
)
from decimath.core.constants import FLOAT_PI
from decimath.core.context import MathContext, RoundingRule
from decimath.core.errors import UndefinedError

logger = logging.getLogger(__name__)

_ONE = Decimal("1")
_TWO = Decimal("2")
_FOUR = Decimal("4")
_QUARTER = Decimal("0.25")


def pi(precision: int) -> Decimal:
    """pi with exactly `precision` digits after the decimal point.

    The last digit is floored, not rounded.

    Raises
    ------
    UndefinedError
        If precision < 0.
    """
    if not isinstance(precision, int) or isinstance(precision, bool):
        raise TypeError(f"pi precision must be int, got {type(precision).__name__}")
    if precision < 0:
        raise UndefinedError(
            f"pi precision must be >= 0, got {precision}",
            source="pi_constant.pi",
            operation="pi",
        )

    working = MathContext(precision=precision + GUARD_DIGITS, rule=RoundingRule.HALF_EVEN)
    if precision <= PI_SHORTCUT_MAX_PRECISION:
        value = FLOAT_PI
    else:
        if precision > PI_PRACTICAL_MAX_PRECISION:
            logger.warning(
                "pi requested to %d digits; above %d the AGM is impractically slow",
                precision, PI_PRACTICAL_MAX_PRECISION,
            )
        value = _gauss_legendre(precision, working)

    # quantize needs precision + 1 digits of room in the active context
    with localcontext(working.to_decimal()):
        return value.quantize(_ONE.scaleb(-precision), rounding=ROUND_FLOOR)


def _gauss_legendre(precision: int, working: MathContext) -> Decimal:
    """Run the AGM until |a - b| <= 10^-precision; return (a+b)^2 / 4t."""
    eps = _ONE.scaleb(-precision)
    with localcontext(working.to_decimal()) as ctx:
        a = _ONE
        b = a / _TWO.sqrt(ctx)
        t = +_QUARTER
        p = _ONE
        iterations = 0
        while abs(a - b) > eps:
            a_next = (a + b) / _TWO
            b = (a * b).sqrt(ctx)
            diff = a - a_next
            t = t - p * (diff * diff)
            a = a_next
            p = p * _TWO
            iterations += 1
        s = a + b
        result = (s * s) / (t * _FOUR)
    logger.debug("pi AGM converged after %d iterations for %d digits", iterations, precision)
    return result
