"""
Type definitions for vouch.

Provides the Ok/Err result type, the ValidationFailure record and the
ValidationError exception used by Result.unwrap().
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Any, Callable, Generic, NoReturn, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class ValidationFailure:
    """
    A rejected value.

    `field` is unset when a validator creates the failure; `fields()` fills
    it in with the key that produced it.
    """

    message: str
    field: str | None = None
    value: Any = None

    def with_field(self, field: str) -> ValidationFailure:
        """Return a copy naming the field that failed."""
        return replace(self, field=field)

    def with_value(self, value: Any) -> ValidationFailure:
        """Return a copy carrying the offending value."""
        return replace(self, value=value)

    def __str__(self) -> str:
        if self.field is None:
            return self.message
        return f"{self.field} {self.message}"


class ValidationError(Exception):
    """Raised by Err.unwrap() for callers that prefer exceptions."""

    def __init__(self, failure: ValidationFailure):
        super().__init__(str(failure))
        self.failure = failure


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error result containing a failure."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        if isinstance(self.error, ValidationFailure):
            raise ValidationError(self.error)
        raise ValidationError(ValidationFailure(str(self.error)))


# Type aliases
Value = Union[str, int, float, bool, date, datetime, Mapping, Sequence, None]
Result = Union[Ok[Any], Err[ValidationFailure]]
Validator = Callable[[Any], Result]
