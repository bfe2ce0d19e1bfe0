"""decimath.core — contexts, constants and errors shared by the engines."""

from decimath.core.constants import (
    LN2_LITERAL as LN2_LITERAL,
)
from decimath.core.constants import (
    ln2 as ln2,
)
from decimath.core.context import (
    MathContext as MathContext,
)
from decimath.core.context import (
    RoundingRule as RoundingRule,
)
from decimath.core.context import (
    epsilon as epsilon,
)
from decimath.core.context import (
    pad as pad,
)
from decimath.core.errors import (
    DecimathError as DecimathError,
)
from decimath.core.errors import (
    ExhaustedError as ExhaustedError,
)
from decimath.core.errors import (
    InvalidArgumentError as InvalidArgumentError,
)
from decimath.core.errors import (
    UndefinedError as UndefinedError,
)
