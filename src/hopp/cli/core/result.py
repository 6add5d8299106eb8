# hopp/cli/core/result.py
"""
Explicit success / failure values.

Used where a failure is an expected outcome that the caller inspects
(template substitution, metadata validation) rather than an exceptional
condition.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok[T], Err[E]]


def is_ok(result: Result) -> bool:
    return isinstance(result, Ok)
