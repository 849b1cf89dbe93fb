"""Boundary adapters: turn raised exceptions and failed awaitables into failures.

These are the only places in resultwire that catch. Only ``Exception``
subclasses are captured; cancellation, ``KeyboardInterrupt`` and
``SystemExit`` keep propagating.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Any, overload

from resultwire.result import Failure, Result, Success

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)

__all__ = ["from_async", "from_throwable"]


def _captured(exc: Exception, source: object) -> Failure[Exception]:
    logger.debug("Captured %s from %r: %s", type(exc).__name__, source, exc)
    return Failure(exc)


@overload
def from_throwable[T](
    f: Callable[[], Awaitable[T]],
) -> Awaitable[Result[T, Exception]] | Failure[Exception]: ...


@overload
def from_throwable[T](f: Callable[[], T]) -> Result[T, Exception]: ...


def from_throwable(f: Callable[[], Any]) -> Any:
    """Call ``f`` now and capture what it raises.

    Example:
        from_throwable(lambda: int("42"))    # Success(value=42)
        from_throwable(lambda: int("nope"))  # Failure(error=ValueError(...))

    When ``f`` returns an awaitable (for instance ``f`` is an ``async def``),
    a coroutine is returned instead; awaiting it yields ``Success`` of the
    resolved value or ``Failure`` of the exception it raised. The calling
    convention is picked from what ``f`` returns, not from a flag.
    """
    try:
        value = f()
    except Exception as exc:
        return _captured(exc, f)
    if inspect.isawaitable(value):
        return from_async(value)
    return Success(value)


async def from_async[T](awaitable: Awaitable[T]) -> Result[T, Exception]:
    """Await ``awaitable`` and report its outcome as a value.

    The returned coroutine never raises an ``Exception``: a failing
    ``awaitable`` becomes ``Failure(exc)``. ``asyncio.CancelledError`` is not
    an outcome of the computation and is re-raised.
    """
    try:
        value = await awaitable
    except Exception as exc:
        return _captured(exc, awaitable)
    return Success(value)
