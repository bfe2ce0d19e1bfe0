"""Exponential: range reduction by ln(2) plus the Taylor series."""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_EVEN, Decimal, localcontext

from decimath.core.config import EXP_EPSILON_EXTRA_DIGITS
from decimath.core.constants import ln2
from decimath.core.context import (
    MathContext,
    as_decimal,
    epsilon,
    pad,
    round_to,
    scale_of,
)
from decimath.engines._integer_power import ipow

logger = logging.getLogger(__name__)

_ZERO = Decimal("0")
_ONE = Decimal("1")
_TWO = Decimal("2")


def default_exp_context(x: Decimal) -> MathContext:
    """Precision max(scale, 6), HALF_UP."""
    return MathContext(precision=max(scale_of(x), 6))


def exp(x: Decimal | int | str, ctx: MathContext | None = None) -> Decimal:
    """e**x to ctx.precision significant digits.

    Algorithm
    ---------
    1. Range reduction: x = k * ln2 + r with k = round(x / ln2), ties to
       even, so |r| <= ln2 / 2. Then exp(x) = 2^k * exp(r).
    2. Taylor series for exp(r), stopping once a term is at most
       10^-(padded precision + 2); the two extra digits cover the
       multiplication by 2^k.
    3. 2^k by exponentiation by squaring, reciprocal when k < 0.
    """
    x = as_decimal(x, source="exponential.exp")
    if ctx is None:
        ctx = default_exp_context(x)
    if x == _ZERO:
        return round_to(_ONE, ctx)

    padded = pad(ctx)
    log2 = ln2(padded.precision)
    eps = epsilon(padded, EXP_EPSILON_EXTRA_DIGITS)
    with localcontext(padded.to_decimal()):
        k = int((x / log2).to_integral_value(rounding=ROUND_HALF_EVEN))
        r = x - log2 * Decimal(k)

        total = _ONE
        term = _ONE
        i = 1
        while abs(term) > eps:
            term = term * r / Decimal(i)
            total = total + term
            i += 1

    two_pow_k = ipow(_TWO, k, padded)
    with localcontext(padded.to_decimal()):
        result = total * two_pow_k
    logger.debug("exp summed %d terms, k=%d", i - 1, k)
    return round_to(result, ctx)
