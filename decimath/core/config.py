"""Engine constants and the decimal environment every working context uses.

No environment variables, no files. Pure configuration data.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Context, DivisionByZero, InvalidOperation, Overflow
from typing import final

# ---------------------------------------------------------------------------
# Precision policy
# ---------------------------------------------------------------------------

GUARD_DIGITS: int = 10
EXP_EPSILON_EXTRA_DIGITS: int = 2      # exp series runs 2 digits past padding

# ---------------------------------------------------------------------------
# Pi engine thresholds
# ---------------------------------------------------------------------------

PI_SHORTCUT_MAX_PRECISION: int = 15    # digits a binary64 pi carries correctly
PI_PRACTICAL_MAX_PRECISION: int = 2 ** 15


# ---------------------------------------------------------------------------
# Decimal environment
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class DecimalEnvironment:
    """Exponent range and traps shared by every context the engines build.

    Precision and rounding are not part of the environment; they come from
    the caller's MathContext (or its padded form).
    """

    emin: int = -999999
    emax: int = 999999
    capitals: int = 1
    clamp: int = 0
    traps: tuple[type[ArithmeticError], ...] = (InvalidOperation, DivisionByZero, Overflow)

    def context(self, prec: int, rounding: str) -> Context:
        """Return a fresh decimal.Context with this environment."""
        return Context(
            prec=prec,
            rounding=rounding,
            Emin=self.emin,
            Emax=self.emax,
            capitals=self.capitals,
            clamp=self.clamp,
            flags=[],
            traps=list(self.traps),
        )


DEFAULT_ENVIRONMENT = DecimalEnvironment()
