"""Divisor enumeration by trial division up to sqrt(n)."""

from __future__ import annotations

import math

from decimath.core.errors import InvalidArgumentError


def divisors(n: int) -> tuple[int, ...]:
    """All distinct positive divisors of n, ascending, including 1 and n.

    Raises
    ------
    InvalidArgumentError
        If n <= 0.
    """
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"divisors requires int, got {type(n).__name__}")
    if n <= 0:
        raise InvalidArgumentError(
            f"divisors requires n > 0, got {n}",
            source="factors.divisors",
            argument="n",
            value=str(n),
        )

    small: list[int] = []
    large: list[int] = []
    for i in range(1, math.isqrt(n) + 1):
        if n % i == 0:
            small.append(i)
            if i != n // i:  # perfect squares contribute their root once
                large.append(n // i)
    return tuple(small + large[::-1])
