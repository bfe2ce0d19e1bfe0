"""Natural logarithm: range reduction to [1, 2) plus the atanh series."""

from __future__ import annotations

import logging
from decimal import Decimal, localcontext

from decimath.core.constants import ln2
from decimath.core.context import (
    MathContext,
    as_decimal,
    epsilon,
    pad,
    round_to,
    scale_of,
)
from decimath.core.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

_ZERO = Decimal("0")
_ONE = Decimal("1")
_TWO = Decimal("2")


def default_ln_context(x: Decimal) -> MathContext:
    """Precision equal to x's scale (at least 1), HALF_UP."""
    return MathContext(precision=max(scale_of(x), 1))


def ln(x: Decimal | int | str, ctx: MathContext | None = None) -> Decimal:
    """Natural logarithm of x to ctx.precision significant digits.

    Raises
    ------
    InvalidArgumentError
        If x <= 0.

    Algorithm
    ---------
    1. Widen the padded precision by the number of leading zeros of x - 1.
       Near 1 the result is tiny: doubling x just below 1 leaves
       2 * atanh(z) ~ ln(2), and k * ln(2) then cancels those digits.
    2. Halve (k += 1) or double (k -= 1) x until 1 <= x < 2.
    3. z = (x - 1) / (x + 1), so |z| <= 1/3.
    4. ln(x) = 2 * (z + z^3/3 + z^5/5 + ...), summed until the running
       power of z drops to 10^-(padded precision).
    5. Add k * ln(2); round to ctx.
    """
    x = as_decimal(x, source="logarithm.ln")
    if ctx is None:
        ctx = default_ln_context(x)
    if x <= _ZERO:
        raise InvalidArgumentError(
            f"ln requires x > 0, got {x}",
            source="logarithm.ln",
            argument="x",
            value=str(x),
        )

    padded = pad(ctx)
    with localcontext(padded.to_decimal()):
        distance = x - _ONE
    if distance and distance.adjusted() < 0:
        padded = MathContext(padded.precision - distance.adjusted(), padded.rule)
    eps = epsilon(padded)
    with localcontext(padded.to_decimal()):
        k = 0
        while x >= _TWO:
            x = x / _TWO
            k += 1
        while x < _ONE:
            x = x * _TWO
            k -= 1

        z = (x - _ONE) / (x + _ONE)
        z_sq = z * z

        total = _ZERO
        term = z
        divisor = 1
        while True:
            total = total + term / Decimal(divisor)
            term = term * z_sq
            divisor += 2
            if abs(term) <= eps:
                break

        result = total * _TWO + ln2(padded.precision) * Decimal(k)
    logger.debug("ln summed %d terms, k=%d", (divisor - 1) // 2, k)
    return round_to(result, ctx)
