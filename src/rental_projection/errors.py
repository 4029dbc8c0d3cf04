"""
Validation error and the success/failure result returned by the engine.

The engine never raises for bad inputs: it returns Err(ValidationError).
Callers branch on the variant, or call unwrap() to get an exception instead.
"""

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


class ValidationError(Exception):
    """Inputs rejected before any computation ran."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise self.error


Result = Union[Ok[T], Err[E]]
