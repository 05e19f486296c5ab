"""Failable: a tri-state outcome of success, failure, or empty.

A failable is exactly one of three frozen variants:

- ``Success``: the operation worked and produced a payload.
- ``Failure``: the operation did not work; the payload describes why.
- ``Empty``: the operation worked but produced nothing; only ``meta`` is set.

``Empty`` counts as a success for ``is_success``. Calling ``success()``
without a payload yields an ``Empty``.

Classification is structural: anything exposing ``kind``, ``payload`` and
``meta`` attributes with a known ``kind`` tag is treated as a failable.

Usage:
    def parse_port(raw: str) -> Failable[int, str]:
        if not raw.isdigit():
            return failure(f"not a number: {raw!r}")
        return success(int(raw))

    match parse_port("8080"):
        case Success(port):
            print(f"listening on {port}")
        case Failure(reason):
            print(f"bad port: {reason}")
        case Empty():
            print("nothing to do")
"""

from __future__ import annotations

import dataclasses
from typing import (
    Any,
    ClassVar,
    Literal,
    Protocol,
    TypedDict,
    TypeGuard,
    overload,
    runtime_checkable,
)

from failable.errors import NotAFailableError

Kind = Literal["success", "failure", "empty"]

KINDS: frozenset[str] = frozenset({"success", "failure", "empty"})
_SUCCESS_LIKE: frozenset[str] = frozenset({"success", "empty"})


@dataclasses.dataclass(frozen=True, slots=True)
class Success[T]:
    """A successful outcome carrying a payload."""

    payload: T
    meta: Any = None

    kind: ClassVar[Literal["success"]] = "success"


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[E]:
    """A failed outcome; ``payload`` holds whatever describes the failure."""

    payload: E
    meta: Any = None

    kind: ClassVar[Literal["failure"]] = "failure"


@dataclasses.dataclass(frozen=True, slots=True)
class Empty:
    """A successful outcome with nothing to report beyond ``meta``."""

    meta: Any = None

    kind: ClassVar[Literal["empty"]] = "empty"

    @property
    def payload(self) -> None:
        return None


type Failable[T, E] = Success[T] | Failure[E] | Empty


@runtime_checkable
class FailableLike(Protocol):
    """Structural shape shared by every failable, whatever its class."""

    @property
    def kind(self) -> str: ...  # noqa: D102

    @property
    def payload(self) -> Any: ...  # noqa: D102

    @property
    def meta(self) -> Any: ...  # noqa: D102


class HydratedResult(TypedDict):
    """Plain-data form of a success or failure."""

    kind: Literal["success", "failure"]
    payload: Any


class HydratedEmpty(TypedDict):
    """Plain-data form of an empty."""

    kind: Literal["empty"]
    meta: Any


Hydrated = HydratedResult | HydratedEmpty


# --- Constructors ---


@overload
def success(payload: None = None, *, meta: Any = None) -> Empty: ...


@overload
def success[T](payload: T, *, meta: Any = None) -> Success[T]: ...


def success(payload: Any = None, *, meta: Any = None) -> Success[Any] | Empty:
    """Build a success. Without a payload this is the same state as ``empty``."""
    if payload is None:
        return Empty(meta=meta)
    return Success(payload, meta=meta)


def failure[E](payload: E = None, *, meta: Any = None) -> Failure[E]:  # type: ignore[assignment]
    """Build a failure around an opaque payload."""
    return Failure(payload, meta=meta)


def empty(meta: Any = None) -> Empty:
    """Build an empty success, optionally carrying metadata."""
    return Empty(meta=meta)


# --- Classification ---


def is_failable(value: object) -> TypeGuard[FailableLike]:
    """Return True if ``value`` has the shape of a failable.

    Plain dicts, lists, primitives and classes are never failables, even when
    they happen to carry similarly named keys or attributes.
    """
    if isinstance(value, type):
        return False
    if not isinstance(value, FailableLike):
        return False
    kind = getattr(value, "kind", None)
    return isinstance(kind, str) and kind in KINDS


def is_success(value: object) -> bool:
    """Return True for successes and empties; False for anything else."""
    return is_failable(value) and value.kind in _SUCCESS_LIKE


def is_failure(value: object) -> bool:
    """Return True only for failures."""
    return is_failable(value) and value.kind == "failure"


def is_empty(value: object) -> bool:
    """Return True for empties, including a success that carries no payload."""
    if not is_failable(value):
        return False
    if value.kind == "empty":
        return True
    return value.kind == "success" and value.payload is None


# --- Accessors ---


def _require_failable(value: object, *, operation: str) -> FailableLike:
    if not is_failable(value):
        raise NotAFailableError(
            f"{operation}() expects a failable, got {type(value).__name__}",
            hint="Build one with success(), failure() or empty().",
        )
    return value


def payload(value: object) -> Any:
    """Return the payload, or None when the failable carries none."""
    return _require_failable(value, operation="payload").payload


def meta(value: object) -> Any:
    """Return the metadata, or None when none was attached."""
    return _require_failable(value, operation="meta").meta


def kind_of(value: object) -> Kind:
    """Return the effective kind, folding payload-less successes into ``empty``."""
    item = _require_failable(value, operation="kind_of")
    if is_empty(item):
        return "empty"
    return "failure" if item.kind == "failure" else "success"


def hydrate(value: object) -> Hydrated:
    """Project a failable into a plain dict for logging or transport.

    Successes and failures become ``{"kind", "payload"}`` (payload present even
    when None); empties become ``{"kind", "meta"}`` with no payload key.
    """
    item = _require_failable(value, operation="hydrate")
    kind = kind_of(item)
    if kind == "empty":
        return {"kind": "empty", "meta": item.meta}
    return {"kind": kind, "payload": item.payload}


__all__ = [
    "KINDS",
    "Empty",
    "Failable",
    "FailableLike",
    "Failure",
    "Hydrated",
    "HydratedEmpty",
    "HydratedResult",
    "Kind",
    "Success",
    "empty",
    "failure",
    "hydrate",
    "is_empty",
    "is_failable",
    "is_failure",
    "is_success",
    "kind_of",
    "meta",
    "payload",
    "success",
]
