"""Tests for decimath.engines.square_root -- Newton-Raphson sqrt."""

from __future__ import annotations

import logging
import re
from decimal import Context, Decimal, localcontext

import pytest
from hypothesis import given
from hypothesis import strategies as st

from decimath.core.context import MathContext, RoundingRule, round_to
from decimath.core.errors import InvalidArgumentError
from decimath.engines.square_root import default_sqrt_context, sqrt

_positive = st.decimals(
    min_value=Decimal("0.000001"), max_value=Decimal("1000000"),
    places=6, allow_nan=False, allow_infinity=False,
)
_contexts = st.builds(
    MathContext,
    precision=st.integers(min_value=5, max_value=60),
    rule=st.sampled_from(list(RoundingRule)),
)


class TestSqrtReference:
    def test_sqrt_pi_approximation(self, pos: Decimal, ctx50: MathContext) -> None:
        expected = Decimal("1.7724531023414977791280875500565385146252166183339")
        assert sqrt(pos, ctx50) == round_to(expected, ctx50)

    def test_sqrt_zero_is_zero(self, ctx50: MathContext) -> None:
        assert sqrt(Decimal("0"), ctx50) == Decimal("0")

    def test_sqrt_two(self) -> None:
        result = sqrt(Decimal("2"), MathContext(precision=28))
        assert result == Decimal("1.414213562373095048801688724")


class TestSqrtDomain:
    def test_negative_raises(self, neg: Decimal, ctx50: MathContext) -> None:
        with pytest.raises(InvalidArgumentError, match="requires x >= 0"):
            sqrt(neg, ctx50)

    def test_negative_is_value_error(self, ctx50: MathContext) -> None:
        with pytest.raises(ValueError):
            sqrt(Decimal("-0.0001"), ctx50)

    def test_negative_zero_is_zero(self, ctx50: MathContext) -> None:
        assert sqrt(Decimal("-0"), ctx50) == 0

    def test_float_rejected(self, ctx50: MathContext) -> None:
        with pytest.raises(TypeError):
            sqrt(2.0, ctx50)  # type: ignore[arg-type]


class TestSqrtExactCases:
    @pytest.mark.parametrize(("x", "root"), [
        ("4", "2"), ("1", "1"), ("0.0625", "0.25"), ("1E+100", "1E+50"),
        ("1E-300", "1E-150"), ("152415787532388367501905199875019052100", "12345678901234567890"),
    ])
    def test_perfect_squares(self, x: str, root: str) -> None:
        assert sqrt(Decimal(x), MathContext(precision=30)) == Decimal(root)

    def test_int_and_str_operands(self) -> None:
        ctx = MathContext(precision=10)
        assert sqrt(9, ctx) == Decimal("3")
        assert sqrt("0.01", ctx) == Decimal("0.1")


class TestSqrtContext:
    def test_rounding_rule_applied_last(self) -> None:
        # sqrt(2) = 1.41421356...
        assert sqrt(Decimal("2"), MathContext(4, RoundingRule.CEILING)) == Decimal("1.415")
        assert sqrt(Decimal("2"), MathContext(4, RoundingRule.FLOOR)) == Decimal("1.414")

    def test_ignores_thread_local_context(self) -> None:
        with localcontext() as ctx:
            ctx.prec = 3
            result = sqrt(Decimal("2"), MathContext(precision=40))
        assert len(result.as_tuple().digits) == 40

    def test_default_context_from_scale(self) -> None:
        assert default_sqrt_context(Decimal("2.00000000")) == MathContext(4, RoundingRule.HALF_UP)
        assert default_sqrt_context(Decimal("2")) == MathContext(2, RoundingRule.HALF_UP)
        assert default_sqrt_context(Decimal("1E+5")) == MathContext(2, RoundingRule.HALF_UP)

    def test_parameterless_form(self) -> None:
        assert sqrt(Decimal("2.00000000")) == Decimal("1.414")
        assert sqrt(Decimal("2")) == Decimal("1.4")


class TestSqrtProperties:
    @given(x=_positive, ctx=_contexts)
    def test_square_of_root_recovers_x(self, x: Decimal, ctx: MathContext) -> None:
        root = sqrt(x, ctx)
        with localcontext() as work:
            work.prec = 2 * ctx.precision + 10
            relative = abs(root * root - x) / x
        assert relative <= Decimal(10) ** (2 - ctx.precision)

    @given(x=_positive)
    def test_matches_platform_sqrt(self, x: Decimal) -> None:
        ctx = MathContext(precision=40, rule=RoundingRule.HALF_EVEN)
        with localcontext() as work:
            work.prec = 40
            expected = x.sqrt()
        assert sqrt(x, ctx) == expected


class TestSqrtWideExponents:
    @pytest.mark.parametrize(("x", "root"), [
        ("1E+20000", "1E+10000"),
        ("1E-20000", "1E-10000"),
        ("4E+999998", "2E+499999"),
    ])
    def test_extreme_powers_of_ten(self, x: str, root: str) -> None:
        assert sqrt(Decimal(x), MathContext(precision=30)) == Decimal(root)

    @pytest.mark.parametrize("x", ["1E+20001", "2.5E-40001", "123456789E+5000"])
    def test_matches_platform_far_from_one(self, x: str) -> None:
        ctx = MathContext(precision=30, rule=RoundingRule.HALF_EVEN)
        assert sqrt(Decimal(x), ctx) == Context(prec=30, Emax=999999, Emin=-999999).sqrt(
            Decimal(x)
        )

    def test_iteration_count_independent_of_exponent(
        self, caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="decimath.engines.square_root"):
            sqrt(Decimal("7E+60000"), MathContext(precision=30))
        match = re.search(r"converged after (\d+) iterations", caplog.text)
        assert match is not None
        assert int(match.group(1)) < 20
