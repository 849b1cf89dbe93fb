"""Result primitives: a two-variant tagged union over plain data.

``Success`` and ``Failure`` are deliberately unrelated classes. Neither has
behavior beyond what ``dataclass`` generates, so equality is structural and
instances survive pickling, copying, and ``as_dict``/``from_dict`` round trips
unchanged. All operations live in free functions (see ``combinators``).
"""

from __future__ import annotations

import dataclasses
from typing import Any, ClassVar, Final, Literal, TypeGuard

SUCCESS_TAG: Final = "ok"
FAILURE_TAG: Final = "err"


@dataclasses.dataclass(frozen=True, slots=True)
class Success[T]:
    """A successful outcome carrying ``value``."""

    kind: ClassVar[Literal["ok"]] = SUCCESS_TAG

    value: T


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[E]:
    """A failed outcome carrying ``error``."""

    kind: ClassVar[Literal["err"]] = FAILURE_TAG

    error: E


type Result[T, E] = Success[T] | Failure[E]


def success[T](value: T) -> Success[T]:
    """Wrap ``value`` in a success."""
    return Success(value)


def failure[E](error: E) -> Failure[E]:
    """Wrap ``error`` in a failure."""
    return Failure(error)


def is_success(result: Result[Any, Any]) -> TypeGuard[Success[Any]]:
    return isinstance(result, Success)


def is_failure(result: Result[Any, Any]) -> TypeGuard[Failure[Any]]:
    return isinstance(result, Failure)
