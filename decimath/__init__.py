"""decimath — high-precision decimal math on top of the decimal module.

sqrt, ln, exp, pow and pi to any number of significant digits, with the
caller choosing precision and rounding through MathContext.
"""

from decimath.core import (
    LN2_LITERAL as LN2_LITERAL,
)
from decimath.core import (
    DecimathError as DecimathError,
)
from decimath.core import (
    ExhaustedError as ExhaustedError,
)
from decimath.core import (
    InvalidArgumentError as InvalidArgumentError,
)
from decimath.core import (
    MathContext as MathContext,
)
from decimath.core import (
    RoundingRule as RoundingRule,
)
from decimath.core import (
    UndefinedError as UndefinedError,
)
from decimath.core import (
    epsilon as epsilon,
)
from decimath.core import (
    ln2 as ln2,
)
from decimath.core import (
    pad as pad,
)
from decimath.engines import (
    exp as exp,
)
from decimath.engines import (
    ln as ln,
)
from decimath.engines import (
    pi as pi,
)
from decimath.engines import (
    pow as pow,  # noqa: A004
)
from decimath.engines import (
    power as power,
)
from decimath.engines import (
    sqrt as sqrt,
)
from decimath.number_theory import (
    divisors as divisors,
)
from decimath.number_theory import (
    find_primes as find_primes,
)
from decimath.number_theory import (
    is_prime as is_prime,
)
from decimath.number_theory import (
    next_prime as next_prime,
)
from decimath.number_theory import (
    sieve_primes as sieve_primes,
)
