"""Adapters that make any callable return a failable.

The wrapped callable's outcome is mapped exactly once:

- a failable result is passed through unchanged;
- any other result is wrapped with ``success``;
- an ``Exception`` (raised synchronously or while awaiting) becomes
  ``failure(exc)``.

``BaseException`` subclasses that are not ``Exception`` (``CancelledError``,
``KeyboardInterrupt``, ``SystemExit``) are not absorbed; cancelling a task
that awaits a wrapped call still cancels it.
"""

from __future__ import annotations

import functools
import inspect
import logging
from typing import TYPE_CHECKING, Any

from failable.config import get_settings_or_defaults
from failable.core import Failure, failure, is_failable, success

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from failable.core import FailableLike

log = logging.getLogger(__name__)

__all__ = ["make_it_failable", "make_it_failable_sync"]


def _to_failable(value: Any) -> FailableLike:
    if is_failable(value):
        return value
    return success(value)


def _absorb(fn: Callable[..., Any], exc: Exception) -> Failure[Exception]:
    if get_settings_or_defaults().log_absorbed_errors:
        log.debug(
            "Converted %s from %s into a failure",
            type(exc).__name__,
            getattr(fn, "__qualname__", fn),
            exc_info=exc,
        )
    return failure(exc)


def make_it_failable(
    fn: Callable[..., Awaitable[Any] | Any],
) -> Callable[..., Awaitable[FailableLike]]:
    """Wrap ``fn`` so that awaiting its result always yields a failable.

    ``fn`` may be a coroutine function or a plain callable returning either an
    awaitable or a value. Works as a decorator:

        @make_it_failable
        async def fetch_profile(user_id: int) -> dict[str, Any]:
            ...

        result = await fetch_profile(7)  # Success(...) or Failure(exc)
    """

    @functools.wraps(fn)
    async def wrapper(*args: Any, **kwargs: Any) -> FailableLike:
        try:
            outcome = fn(*args, **kwargs)
            if inspect.isawaitable(outcome):
                outcome = await outcome
        except Exception as exc:
            return _absorb(fn, exc)
        return _to_failable(outcome)

    return wrapper


def make_it_failable_sync(fn: Callable[..., Any]) -> Callable[..., FailableLike]:
    """Synchronous counterpart of ``make_it_failable`` for plain callables."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> FailableLike:
        try:
            outcome = fn(*args, **kwargs)
        except Exception as exc:
            return _absorb(fn, exc)
        return _to_failable(outcome)

    return wrapper
