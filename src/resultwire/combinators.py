"""Pure functions over ``Result``.

Combinators never catch exceptions: if a caller-supplied function raises, the
exception reaches the caller unchanged. Converting exceptions into failures is
the job of ``resultwire.adapters`` alone.

``map`` and ``from_throwable`` look at what the supplied function returned and
switch to an awaitable result when it returned an awaitable. ``and_then`` and
``match`` hand back whatever the function returned. The ``async_*`` variants
are awaitable on both branches, which is what most async call sites want.
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any, overload

from resultwire.config import unwrap_keeps_error_enabled
from resultwire.errors import ConfigurationError, UnwrapError
from resultwire.result import Failure, Result, Success

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable

__all__ = [
    "and_then",
    "async_and_then",
    "async_map",
    "async_match",
    "combine_all",
    "combine_all_errors",
    "map",
    "map_error",
    "match",
    "or_else",
    "unsafe_unwrap",
    "unwrap_or",
]


async def _success_when_resolved[T](awaitable: Awaitable[T]) -> Success[T]:
    return Success(await awaitable)


@overload
def map[T, U, E](
    result: Result[T, E], f: Callable[[T], Awaitable[U]]
) -> Awaitable[Result[U, E]] | Failure[E]: ...


@overload
def map[T, U, E](result: Result[T, E], f: Callable[[T], U]) -> Result[U, E]: ...


def map(result: Result[Any, Any], f: Callable[[Any], Any]) -> Any:
    """Apply ``f`` to a success value; pass a failure through untouched.

    Example:
        map(success(5), lambda x: x * 2)      # Success(value=10)
        map(failure("boom"), lambda x: x * 2)  # Failure(error='boom')

    If ``f`` returns an awaitable, the return value is a coroutine resolving to
    ``Success`` of the awaited value. A failure is still returned as-is, so use
    ``async_map`` when the caller always needs something to await.
    """
    if isinstance(result, Failure):
        return result
    mapped = f(result.value)
    if inspect.isawaitable(mapped):
        return _success_when_resolved(mapped)
    return Success(mapped)


async def async_map[T, U, E](
    result: Result[T, E], f: Callable[[T], Awaitable[U]]
) -> Result[U, E]:
    """Awaitable form of ``map``; suspends only on the success path."""
    if isinstance(result, Failure):
        return result
    return Success(await f(result.value))


def map_error[T, E, F](result: Result[T, E], f: Callable[[E], F]) -> Result[T, F]:
    """Apply ``f`` to a failure payload; pass a success through untouched."""
    if isinstance(result, Failure):
        return Failure(f(result.error))
    return result


def unwrap_or[T, E](result: Result[T, E], default: T) -> T:
    return result.value if isinstance(result, Success) else default


def and_then[T, U, E](
    result: Result[T, E], f: Callable[[T], Result[U, E]]
) -> Result[U, E]:
    """Chain a fallible step onto a success.

    The result of ``f`` is returned as-is (no re-wrapping). A failure
    short-circuits without calling ``f``.

    Example:
        def reciprocal(x: float) -> Result[float, str]:
            return failure("division by zero") if x == 0 else success(1 / x)

        and_then(success(4), reciprocal)  # Success(value=0.25)
        and_then(success(0), reciprocal)  # Failure(error='division by zero')
    """
    if isinstance(result, Failure):
        return result
    return f(result.value)


async def async_and_then[T, U, E](
    result: Result[T, E], f: Callable[[T], Awaitable[Result[U, E]]]
) -> Result[U, E]:
    """Awaitable form of ``and_then``; the failure path never suspends."""
    if isinstance(result, Failure):
        return result
    return await f(result.value)


def or_else[T, E, F](
    result: Result[T, E], f: Callable[[E], Result[T, F]]
) -> Result[T, F]:
    """Fallback chaining: give a failure payload a second chance via ``f``."""
    if isinstance(result, Failure):
        return f(result.error)
    return result


def match[T, E, U](
    result: Result[T, E],
    on_success: Callable[[T], U],
    on_failure: Callable[[E], U],
) -> U:
    """Leave the Result world: call exactly one branch and return its value."""
    if isinstance(result, Failure):
        return on_failure(result.error)
    return on_success(result.value)


async def async_match[T, E, U](
    result: Result[T, E],
    on_success: Callable[[T], Awaitable[U]],
    on_failure: Callable[[E], Awaitable[U]],
) -> U:
    if isinstance(result, Failure):
        return await on_failure(result.error)
    return await on_success(result.value)


def combine_all[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Collect success values in order, stopping at the first failure.

    The first failure is returned unmodified and the rest of ``results`` is
    not consumed. An empty input yields ``Success([])``.
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Failure):
            return result
        values.append(result.value)
    return Success(values)


def combine_all_errors[T, E](
    results: Iterable[Result[T, E]],
) -> Result[list[T], list[E]]:
    """Scan every result; fail with all error payloads if any failed.

    Both partitions keep input order. Success values are dropped when at
    least one failure is present.
    """
    values: list[T] = []
    errors: list[E] = []
    for result in results:
        if isinstance(result, Failure):
            errors.append(result.error)
        else:
            values.append(result.value)
    if errors:
        return Failure(errors)
    return Success(values)


def unsafe_unwrap[T](result: Result[T, Any], *, keep_error: bool | None = None) -> T:
    """Return the success value or raise ``UnwrapError``.

    Only for call sites that already know the result is a success. By default
    the failure payload is discarded; pass ``keep_error=True`` (or enable
    ``Config.unwrap_keeps_error``) to attach it to the raised error.
    """
    if isinstance(result, Success):
        return result.value
    try:
        keep = unwrap_keeps_error_enabled(override=keep_error)
    except ConfigurationError as exc:
        raise UnwrapError(hint=exc.hint) from exc
    if not keep:
        raise UnwrapError()
    payload = result.error
    if isinstance(payload, BaseException):
        raise UnwrapError(error=payload) from payload
    raise UnwrapError(error=payload)
