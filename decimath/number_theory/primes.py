"""Primality testing and prime generation.

is_prime    : 6k +/- 1 wheel trial division
next_prime  : smallest prime >= n, optionally bounded
sieve_primes: Sieve of Atkin, all primes <= limit
find_primes : the first n primes
"""

from __future__ import annotations

import math

from decimath.core.errors import ExhaustedError, InvalidArgumentError


def _require_int(value: int, source: str) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{source} requires int, got {type(value).__name__}")


def _require_non_negative(value: int, source: str, argument: str) -> None:
    _require_int(value, source)
    if value < 0:
        raise InvalidArgumentError(
            f"{source} requires {argument} >= 0, got {value}",
            source=source,
            argument=argument,
            value=str(value),
        )


def is_prime(n: int) -> bool:
    """True if n is prime. Everything below 2 is not."""
    _require_int(n, "primes.is_prime")
    if n < 2:
        return False
    if n in (2, 3):
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    # candidates 5, 7, 11, 13, 17, 19, ... alternate steps of 2 and 4
    limit = math.isqrt(n)
    i, step = 5, 2
    while i <= limit:
        if n % i == 0:
            return False
        i += step
        step = 6 - step
    return True


def next_prime(n: int, upper_bound: int | None = None) -> int:
    """Smallest prime >= n.

    Raises
    ------
    InvalidArgumentError
        If n < 0.
    ExhaustedError
        If no prime exists in [n, upper_bound].
    """
    _require_non_negative(n, "primes.next_prime", "n")
    if upper_bound is not None:
        _require_int(upper_bound, "primes.next_prime")

    def _exhausted() -> ExhaustedError:
        return ExhaustedError(
            f"no prime in [{n}, {upper_bound}]",
            source="primes.next_prime",
            bound=str(upper_bound),
        )

    if n <= 2:
        if upper_bound is not None and upper_bound < 2:
            raise _exhausted()
        return 2

    candidate = n | 1
    # advance to the next 6k +/- 1 position, then alternate +2 / +4
    while candidate % 3 == 0 and candidate != 3:
        candidate += 2
    step = 2 if candidate % 6 == 5 else 4
    while upper_bound is None or candidate <= upper_bound:
        if is_prime(candidate):
            return candidate
        candidate += step
        step = 6 - step
    raise _exhausted()


def sieve_primes(limit: int) -> tuple[int, ...]:
    """All primes p with p <= limit, by the Sieve of Atkin.

    Raises
    ------
    InvalidArgumentError
        If limit < 0.
    """
    _require_non_negative(limit, "primes.sieve_primes", "limit")
    sieve = [False] * (limit + 1)

    # n = 4x^2 + y^2 with n % 12 in (1, 5); n = 3x^2 + y^2 with n % 12 == 7;
    # n = 3x^2 - y^2 with x > y and n % 12 == 11. Odd solution counts mark n.
    x = 1
    while x * x <= limit:
        y = 1
        while y * y <= limit:
            n = 4 * x * x + y * y
            if n <= limit and n % 12 in (1, 5):
                sieve[n] = not sieve[n]
            n = 3 * x * x + y * y
            if n <= limit and n % 12 == 7:
                sieve[n] = not sieve[n]
            n = 3 * x * x - y * y
            if x > y and n <= limit and n % 12 == 11:
                sieve[n] = not sieve[n]
            y += 1
        x += 1

    # strike multiples of squares of marked numbers
    r = 5
    while r * r <= limit:
        if sieve[r]:
            for i in range(r * r, limit + 1, r * r):
                sieve[i] = False
        r += 1

    primes = [p for p in (2, 3) if p <= limit]
    primes.extend(i for i in range(5, limit + 1) if sieve[i])
    return tuple(primes)


def find_primes(count: int) -> tuple[int, ...]:
    """The first `count` primes in ascending order.

    Raises
    ------
    InvalidArgumentError
        If count < 0.
    """
    _require_non_negative(count, "primes.find_primes", "count")
    primes: list[int] = []
    number = 2
    while len(primes) < count:
        if is_prime(number):
            primes.append(number)
        number += 1
    return tuple(primes)
