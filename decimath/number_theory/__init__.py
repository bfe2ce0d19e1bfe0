"""decimath.number_theory — divisors and primes over plain ints."""

from decimath.number_theory.factors import (
    divisors as divisors,
)
from decimath.number_theory.primes import (
    find_primes as find_primes,
)
from decimath.number_theory.primes import (
    is_prime as is_prime,
)
from decimath.number_theory.primes import (
    next_prime as next_prime,
)
from decimath.number_theory.primes import (
    sieve_primes as sieve_primes,
)
