"""Hypothesis profiles and pytest fixtures for decimath."""

from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import HealthCheck, settings

from decimath.core.context import MathContext, RoundingRule

# ---------------------------------------------------------------------------
# Hypothesis global settings
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci",
    max_examples=200,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile(
    "dev",
    max_examples=50,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile("dev")


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def ctx50() -> MathContext:
    """50 significant digits, HALF_UP: the context of the reference table."""
    return MathContext(precision=50, rule=RoundingRule.HALF_UP)


@pytest.fixture
def pos() -> Decimal:
    return Decimal("3.14159")


@pytest.fixture
def neg() -> Decimal:
    return Decimal("-3.14159")
