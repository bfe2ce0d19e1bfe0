"""General power a**b: integer fast path, otherwise exp(b * ln(a))."""

from __future__ import annotations

from decimal import Decimal, localcontext

from decimath.core.context import (
    MathContext,
    as_decimal,
    digit_count,
    integral_value,
    pad,
    round_to,
    scale_of,
)
from decimath.core.errors import UndefinedError
from decimath.engines._integer_power import ipow
from decimath.engines.exponential import exp
from decimath.engines.logarithm import ln

_ZERO = Decimal("0")
_ONE = Decimal("1")


def default_pow_context(a: Decimal, b: Decimal) -> MathContext:
    """Precision max(6, scale(a) + digits(b) + 2), HALF_UP.

    The extra digits absorb the error ln and exp add on top of each other.
    """
    return MathContext(precision=max(6, scale_of(a) + digit_count(b) + 2))


def pow(  # noqa: A001
    a: Decimal | int | str,
    b: Decimal | int | str,
    ctx: MathContext | None = None,
) -> Decimal:
    """a raised to b, to ctx.precision significant digits.

    Special cases, checked in order:

    - b == 0: +1 when a > 0, -1 when a <= 0 (the sign of the base is kept).
    - a == 1 or b == 1: a, rounded.
    - a == 0: 0.
    - b integral: exponentiation by squaring in ctx itself.

    Otherwise exp(b * ln(a)), with ln and the product carried at padded
    precision so a large |b * ln(a)| does not eat into ctx.precision.

    Raises
    ------
    UndefinedError
        If a < 0 and b is not an integer.
    """
    a = as_decimal(a, source="exponentiation.pow", argument="a")
    b = as_decimal(b, source="exponentiation.pow", argument="b")
    if ctx is None:
        ctx = default_pow_context(a, b)

    if b == _ZERO:
        return round_to(_ONE if a > _ZERO else -_ONE, ctx)
    if a == _ONE or b == _ONE:
        return round_to(a, ctx)
    if a == _ZERO:
        return round_to(_ZERO, ctx)

    n = integral_value(b)
    if n is not None:
        return ipow(a, n, ctx)

    if a < _ZERO:
        raise UndefinedError(
            f"pow of negative base {a} with non-integer exponent {b} is undefined",
            source="exponentiation.pow",
            operation="pow",
        )

    padded = pad(ctx)
    ln_a = ln(a, padded)
    with localcontext(padded.to_decimal()):
        y = b * ln_a
    return exp(y, ctx)


power = pow
