"""Outcome: the universal return shape of every network operation.

An outcome is exactly one of ``Success(value)`` or ``Failure(error)``.
Both are frozen dataclasses so they compare by value, which keeps test
assertions such as ``assert outcome == Success(200)`` straightforward.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome carrying a typed value."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    @property
    def error(self) -> None:
        return None

    def map(self, fn: Callable[[T], U]) -> Success[U]:
        return Success(fn(self.value))

    def flat_map(self, fn: Callable[[T], Outcome[U]]) -> Outcome[U]:
        return fn(self.value)

    def unwrap(self) -> T:
        return self.value

    def value_or(self, default: Any) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    """Failed outcome carrying the error that caused it."""

    error: BaseException

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    @property
    def value(self) -> None:
        return None

    def map(self, fn: Callable[[Any], Any]) -> Failure:
        return self

    def flat_map(self, fn: Callable[[Any], Any]) -> Failure:
        return self

    def unwrap(self) -> NoReturn:
        raise self.error

    def value_or(self, default: U) -> U:
        return default


Outcome = Union[Success[T], Failure]


def catching(
    fn: Callable[[], T],
    wrap: Callable[[Exception], BaseException] | None = None,
    *,
    exceptions: tuple[type[Exception], ...] = (Exception,),
) -> Outcome[T]:
    """Run ``fn`` and capture its result or the exception it raised.

    Args:
        fn: Zero-argument callable to run
        wrap: Optional converter applied to a caught exception
        exceptions: Exception types to capture; anything else propagates

    Returns:
        ``Success`` with the return value, or ``Failure`` with the (wrapped) error
    """
    try:
        return Success(fn())
    except exceptions as exc:
        return Failure(wrap(exc) if wrap else exc)
