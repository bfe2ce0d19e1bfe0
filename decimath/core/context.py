"""Rounding contexts, the padding policy, and operand introspection.

MathContext is the immutable (precision, rule) pair callers pass to every
engine. The engines never touch the thread-local decimal context: they build
fresh decimal.Context objects from a MathContext and evaluate inside
localcontext(), then round once, with the caller's rule, at the end.
"""

from __future__ import annotations

import decimal
from dataclasses import dataclass
from decimal import Decimal, localcontext
from enum import Enum
from typing import final

from decimath.core.config import DEFAULT_ENVIRONMENT, GUARD_DIGITS
from decimath.core.errors import InvalidArgumentError

_ZERO = Decimal("0")
_ONE = Decimal("1")


class RoundingRule(Enum):
    """Rounding rule applied when a result is cut to its precision.

    Values are the decimal module's rounding constants.
    """

    HALF_UP = decimal.ROUND_HALF_UP
    HALF_EVEN = decimal.ROUND_HALF_EVEN
    HALF_DOWN = decimal.ROUND_HALF_DOWN
    UP = decimal.ROUND_UP
    DOWN = decimal.ROUND_DOWN
    CEILING = decimal.ROUND_CEILING
    FLOOR = decimal.ROUND_FLOOR
    ZERO_FIVE_UP = decimal.ROUND_05UP


@final
@dataclass(frozen=True, slots=True)
class MathContext:
    """Significant-digit count plus rounding rule."""

    precision: int
    rule: RoundingRule = RoundingRule.HALF_UP

    def __post_init__(self) -> None:
        if not isinstance(self.precision, int) or isinstance(self.precision, bool):
            raise TypeError(
                f"MathContext.precision must be int, got {type(self.precision).__name__}"
            )
        if not isinstance(self.rule, RoundingRule):
            raise TypeError(
                f"MathContext.rule must be RoundingRule, got {type(self.rule).__name__}"
            )
        if self.precision < 1:
            raise InvalidArgumentError(
                f"MathContext.precision must be >= 1, got {self.precision}",
                source="context.MathContext",
                argument="precision",
                value=str(self.precision),
            )

    def to_decimal(self) -> decimal.Context:
        """Return a fresh decimal.Context with this precision and rule."""
        return DEFAULT_ENVIRONMENT.context(self.precision, self.rule.value)

    @staticmethod
    def from_decimal(ctx: decimal.Context) -> MathContext:
        """Take precision and rounding from an existing decimal.Context."""
        return MathContext(precision=ctx.prec, rule=RoundingRule(ctx.rounding))


# ---------------------------------------------------------------------------
# Padding policy
# ---------------------------------------------------------------------------


def pad(ctx: MathContext) -> MathContext:
    """Working context: GUARD_DIGITS more precision, always HALF_EVEN."""
    return MathContext(precision=ctx.precision + GUARD_DIGITS, rule=RoundingRule.HALF_EVEN)


def epsilon(ctx: MathContext, extra_digits: int = 0) -> Decimal:
    """Stopping threshold 10^-(precision + extra_digits)."""
    return _ONE.scaleb(-(ctx.precision + extra_digits))


def round_to(value: Decimal, ctx: MathContext) -> Decimal:
    """Round value to ctx precision with ctx's own rule."""
    with localcontext(ctx.to_decimal()):
        return +value


# ---------------------------------------------------------------------------
# Operand handling
# ---------------------------------------------------------------------------


def as_decimal(value: Decimal | int | str, *, source: str, argument: str = "x") -> Decimal:
    """Coerce an operand to a finite Decimal.

    Floats are refused: their binary rounding error would pose as
    significant digits.
    """
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, str)):
        raise TypeError(
            f"{source} requires Decimal, int or str, got {type(value).__name__}"
        )
    if isinstance(value, str):
        try:
            value = Decimal(value)
        except decimal.InvalidOperation:
            raise InvalidArgumentError(
                f"{source} cannot parse {value!r} as a decimal",
                source=source,
                argument=argument,
                value=value,
            ) from None
    elif isinstance(value, int):
        value = Decimal(value)
    if not value.is_finite():
        raise InvalidArgumentError(
            f"{source} requires a finite {argument}, got {value}",
            source=source,
            argument=argument,
            value=str(value),
        )
    return value


def scale_of(x: Decimal) -> int:
    """Digits after the decimal point; negative for values like 1E+3."""
    exponent = x.as_tuple().exponent
    assert isinstance(exponent, int)
    return -exponent


def digit_count(x: Decimal) -> int:
    """Number of digits in the coefficient (unscaled value); 1 for zero."""
    return len(x.as_tuple().digits)


def coefficient(x: Decimal) -> int:
    """Unscaled integer value of x, without its sign."""
    return int("".join(str(d) for d in x.as_tuple().digits))


def integral_value(x: Decimal) -> int | None:
    """Return x as an int if it has no fractional part, else None."""
    if x == x.to_integral_value():
        return int(x)
    return None
