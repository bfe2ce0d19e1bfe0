"""Square root by Newton-Raphson iteration on f(y) = y^2 - x."""

from __future__ import annotations

import logging
import math
from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, Context, Decimal, localcontext

from decimath.core.context import (
    MathContext,
    as_decimal,
    coefficient,
    pad,
    round_to,
    scale_of,
)
from decimath.core.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

_ZERO = Decimal("0")
_TWO = Decimal("2")
_LOG2_100 = math.log2(100)

# Unbounded context: sums of two finite decimals are exact under it.
_EXACT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)


def default_sqrt_context(x: Decimal) -> MathContext:
    """Precision max(scale / 2, 2), HALF_UP."""
    return MathContext(precision=max(scale_of(x) // 2, 2))


def sqrt(x: Decimal | int | str, ctx: MathContext | None = None) -> Decimal:
    """Square root of x to ctx.precision significant digits.

    Raises
    ------
    InvalidArgumentError
        If x < 0.

    Algorithm
    ---------
    1. Initial guess 10^ceil(bits / log2(100)) where bits is the bit length
       of x's coefficient, i.e. roughly 2^(bits/2), times 10^(exponent // 2).
    2. Iterate next = (x / guess + guess) / 2 at padded precision. The
       inner sum is exact; both divisions round to the padded context.
    3. Stop when an iterate equals the previous one, or the one before it
       (rounding can leave the iteration flipping between two neighbours).
    4. Round the last iterate to ctx.
    """
    x = as_decimal(x, source="square_root.sqrt")
    if ctx is None:
        ctx = default_sqrt_context(x)
    if x < _ZERO:
        raise InvalidArgumentError(
            f"sqrt requires x >= 0, got {x}",
            source="square_root.sqrt",
            argument="x",
            value=str(x),
        )
    if x == _ZERO:
        return round_to(_ZERO, ctx)

    padded = pad(ctx)
    bits = coefficient(x).bit_length()
    guess = Decimal(1).scaleb(math.ceil(bits / _LOG2_100) + (-scale_of(x)) // 2)
    previous: Decimal | None = None
    iterations = 0
    with localcontext(padded.to_decimal()):
        while True:
            iterations += 1
            nxt = _EXACT.add(x / guess, guess) / _TWO
            if nxt == guess or nxt == previous:
                break
            previous, guess = guess, nxt
    logger.debug("sqrt converged after %d iterations at precision %d", iterations, padded.precision)
    return round_to(guess, ctx)
