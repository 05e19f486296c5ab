"""Assertion helpers for using failables directly in test suites.

Each helper raises ``FailableAssertionError`` (an ``AssertionError``) on
mismatch, so pytest and unittest report it as an ordinary test failure. On
success the helpers return the inspected payload (or meta, for
``assert_empty``) so tests can keep working with it:

    user = assert_success(await load_user(42))
    assert user.name == "Ada"
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
import enum
import reprlib
from typing import Any, Final

from failable._equality import payloads_equal
from failable.config import get_settings_or_defaults
from failable.core import is_empty, is_failable, is_failure, is_success, kind_of
from failable.errors import FailableAssertionError

__all__ = [
    "assert_empty",
    "assert_failure",
    "assert_success",
    "assert_success_typed",
    "assert_success_which",
]


class _Unset(enum.Enum):
    UNSET = enum.auto()


# Distinguishes "no expectation" from an explicit None/False expectation.
_UNSET: Final = _Unset.UNSET

TypeSpec = str | type | tuple[type, ...]


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float | complex) and not isinstance(value, bool)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str | bytes)


def _is_object(value: Any) -> bool:
    return not (value is None or isinstance(value, str | bool) or _is_number(value))


_TYPE_ALIASES: Final[dict[str, Callable[[Any], bool]]] = {
    "string": lambda v: isinstance(v, str),
    "number": _is_number,
    "boolean": lambda v: isinstance(v, bool),
    "none": lambda v: v is None,
    "mapping": lambda v: isinstance(v, Mapping),
    "sequence": _is_sequence,
    "callable": callable,
    "object": _is_object,
}


def _describe(value: Any) -> str:
    """Short, recursion-safe repr bounded by ``Settings.repr_limit``."""
    limit = get_settings_or_defaults().repr_limit
    shortener = reprlib.Repr()
    shortener.maxlevel = 4
    shortener.maxstring = limit
    shortener.maxother = limit
    try:
        text = shortener.repr(value)
    except Exception:
        text = f"<unrepresentable {type(value).__name__}>"
    if len(text) > limit:
        text = text[: limit - 3] + "..."
    return text


def _describe_failable(value: Any) -> str:
    if not is_failable(value):
        return f"non-failable {type(value).__name__} {_describe(value)}"
    kind = kind_of(value)
    if kind == "empty":
        return f"empty with meta {_describe(value.meta)}"
    return f"{kind} with payload {_describe(value.payload)}"


def _fail_kind(expected_kind: str, value: Any) -> FailableAssertionError:
    return FailableAssertionError(
        f"Expected {expected_kind}, got {_describe_failable(value)}",
        actual=value,
    )


def _check_payload(kind: str, value: Any, expected: Any) -> None:
    if expected is _UNSET:
        return
    try:
        equal = payloads_equal(value.payload, expected)
    except RecursionError as exc:
        raise FailableAssertionError(
            f"Could not compare {kind} payload of type {type(value.payload).__name__}: "
            "its __eq__ recursed without end",
            actual=value,
            expected=expected,
            hint="Use assert_success_which with a predicate for cyclic objects.",
        ) from exc
    if not equal:
        raise FailableAssertionError(
            f"{kind.capitalize()} payload mismatch: expected {_describe(expected)}, "
            f"got {_describe(value.payload)}",
            actual=value,
            expected=expected,
        )


def _type_matches(value: Any, spec: TypeSpec) -> bool:
    if isinstance(spec, type | tuple):
        return isinstance(value, spec)
    if not isinstance(spec, str):
        raise TypeError(
            f"type spec must be a str, type or tuple of types, got {type(spec).__name__}"
        )
    alias = _TYPE_ALIASES.get(spec.lower())
    if alias is not None:
        return alias(value)
    for cls in type(value).__mro__:
        if spec in (cls.__name__, cls.__qualname__, f"{cls.__module__}.{cls.__qualname__}"):
            return True
    return False


def _spec_name(spec: TypeSpec) -> str:
    if isinstance(spec, type):
        return spec.__qualname__
    if isinstance(spec, tuple):
        return " | ".join(t.__qualname__ for t in spec)
    return spec


def assert_success(value: Any, expected: Any = _UNSET) -> Any:
    """Fail unless ``value`` is a success (or empty).

    When ``expected`` is given, the payload must also equal it structurally.
    An explicit ``expected=False`` or ``expected=None`` is a real expectation.
    """
    if not is_success(value):
        raise _fail_kind("a success", value)
    _check_payload("success", value, expected)
    return value.payload


def assert_success_which(predicate: Callable[[Any], object], value: Any) -> Any:
    """Fail unless ``value`` is a success whose payload satisfies ``predicate``.

    The payload is handed to ``predicate`` as-is and never traversed here, so
    self-referential payloads are fine.
    """
    if not is_success(value):
        raise _fail_kind("a success", value)
    if not predicate(value.payload):
        name = getattr(predicate, "__qualname__", None) or _describe(predicate)
        raise FailableAssertionError(
            f"Success payload {_describe(value.payload)} does not satisfy {name}",
            actual=value,
            expected=predicate,
        )
    return value.payload


def assert_success_typed(type_name: TypeSpec, value: Any) -> Any:
    """Fail unless ``value`` is a success whose payload has the given type.

    ``type_name`` may be a class or tuple of classes (checked with
    ``isinstance``), a class name found in the payload's MRO, or one of the
    category aliases ``string``, ``number``, ``boolean``, ``none``,
    ``mapping``, ``sequence``, ``callable`` and ``object`` (anything but
    strings, numbers, booleans and None).
    """
    if not is_success(value):
        raise _fail_kind("a success", value)
    if not _type_matches(value.payload, type_name):
        raise FailableAssertionError(
            f"Expected success payload of type {_spec_name(type_name)}, got "
            f"{type(value.payload).__name__} {_describe(value.payload)}",
            actual=value,
            expected=type_name,
        )
    return value.payload


def assert_failure(value: Any, expected: Any = _UNSET) -> Any:
    """Fail unless ``value`` is a failure; empties and successes both fail.

    When ``expected`` is given, the failure payload must equal it structurally.
    """
    if not is_failure(value):
        raise _fail_kind("a failure", value)
    _check_payload("failure", value, expected)
    return value.payload


def assert_empty(value: Any) -> Any:
    """Fail unless ``value`` is empty. Returns its meta."""
    if not is_empty(value):
        raise _fail_kind("an empty", value)
    return value.meta
