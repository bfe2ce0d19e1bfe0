"""Exponentiation by squaring over Decimal, rounding every product to ctx."""

from __future__ import annotations

from decimal import Decimal, localcontext

from decimath.core.context import MathContext

_ONE = Decimal("1")


def ipow(x: Decimal, n: int, ctx: MathContext) -> Decimal:
    """x**n for integer n; negative n gives the reciprocal of x**-n."""
    if n == 0:
        with localcontext(ctx.to_decimal()):
            return +_ONE
    if n < 0:
        denominator = ipow(x, -n, ctx)
        with localcontext(ctx.to_decimal()):
            return _ONE / denominator

    with localcontext(ctx.to_decimal()):
        result = _ONE
        base = x
        while n > 0:
            if n & 1:
                result = result * base
            n >>= 1
            if n:
                base = base * base
        return result
