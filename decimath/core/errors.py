"""Error hierarchy for caller-input domain violations.

Every error is a ValueError subclass carrying a stable code, the
"module.function" that raised it, and a to_dict() with documented keys.
Base class DecimathError, three @final subclasses. None is retryable.
"""

from __future__ import annotations

from typing import ClassVar, Self, final


class DecimathError(ValueError):
    """Base error. NOT @final — has subclasses."""

    code: ClassVar[str] = "DECIMATH_ERROR"

    def __init__(self, message: str, *, source: str) -> None:
        super().__init__(message)
        self.message = message
        self.source = source  # "module.function" that produced this error

    def _fields(self) -> dict[str, str]:
        return {}

    def with_context(self, context: str) -> Self:
        """Return a copy with context prepended to message."""
        return type(self)(f"{context}: {self.message}", source=self.source, **self._fields())

    def to_dict(self) -> dict[str, object]:
        """Serialize to dict with stable keys."""
        return {
            "message": self.message,
            "code": self.code,
            "source": self.source,
            **self._fields(),
        }


@final
class InvalidArgumentError(DecimathError):
    """An argument is outside the domain of the operation."""

    code: ClassVar[str] = "INVALID_ARGUMENT"

    def __init__(self, message: str, *, source: str, argument: str, value: str) -> None:
        super().__init__(message, source=source)
        self.argument = argument
        self.value = value

    def _fields(self) -> dict[str, str]:
        return {"argument": self.argument, "value": self.value}


@final
class UndefinedError(DecimathError):
    """The operation has no defined decimal result for these arguments."""

    code: ClassVar[str] = "UNDEFINED"

    def __init__(self, message: str, *, source: str, operation: str) -> None:
        super().__init__(message, source=source)
        self.operation = operation

    def _fields(self) -> dict[str, str]:
        return {"operation": self.operation}


@final
class ExhaustedError(DecimathError):
    """A search ran past its bound without finding a value."""

    code: ClassVar[str] = "EXHAUSTED"

    def __init__(self, message: str, *, source: str, bound: str) -> None:
        super().__init__(message, source=source)
        self.bound = bound

    def _fields(self) -> dict[str, str]:
        return {"bound": self.bound}
