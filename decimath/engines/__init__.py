"""decimath.engines — sqrt, ln, exp, pow and pi to arbitrary precision."""

from decimath.engines.exponential import (
    exp as exp,
)
from decimath.engines.logarithm import (
    ln as ln,
)
from decimath.engines.pi_constant import (
    pi as pi,
)
from decimath.engines.exponentiation import (
    pow as pow,  # noqa: A004
)
from decimath.engines.exponentiation import (
    power as power,
)
from decimath.engines.square_root import (
    sqrt as sqrt,
)
