"""Combinators over sequences of failables.

All of them consume their input once and keep its order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from failable.core import Success, is_failable, is_failure
from failable.errors import NotAFailableError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from failable.core import FailableLike

__all__ = ["any_failed", "extract_payloads", "first_failure", "flatten_results"]


def _checked(items: Iterable[Any]) -> Iterable[FailableLike]:
    for index, item in enumerate(items):
        if not is_failable(item):
            raise NotAFailableError(
                f"Item {index} is a {type(item).__name__}, not a failable",
                hint="Wrap plain values with success() before combining them.",
            )
        yield item


def any_failed(items: Iterable[Any]) -> bool:
    """Return True if at least one item is a failure."""
    return any(is_failure(item) for item in _checked(items))


def first_failure(items: Iterable[Any]) -> FailableLike | None:
    """Return the first failure in order, or None when nothing failed."""
    return next((item for item in _checked(items) if is_failure(item)), None)


def extract_payloads(items: Iterable[Any]) -> list[Any]:
    """Return every item's payload in order; empties contribute None."""
    return [item.payload for item in _checked(items)]


def flatten_results(items: Iterable[Any]) -> FailableLike:
    """Collapse many failables into one.

    Returns the first failure unchanged if there is one. Otherwise returns a
    success holding the list of all payloads; an empty input gives
    ``Success([])``.
    """
    payloads: list[Any] = []
    for item in _checked(items):
        if is_failure(item):
            return item
        payloads.append(item.payload)
    return Success(payloads)
