"""Structural equality for payload comparisons.

Iterative with a visited set of ``(id, id)`` pairs, so self-referential
payloads terminate instead of exhausting the stack.
"""

from __future__ import annotations

from collections.abc import Mapping
import dataclasses
from typing import Any, Literal

from failable.core import is_failable, kind_of

__all__ = ["payloads_equal"]

_ContainerKind = Literal["mapping", "list", "tuple", "failable", "dataclass"]


def _container_kind(value: Any) -> _ContainerKind | None:
    if is_failable(value):
        return "failable"
    if isinstance(value, Mapping):
        return "mapping"
    if isinstance(value, list):
        return "list"
    if isinstance(value, tuple):
        return "tuple"
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return "dataclass"
    return None


def _strict_keys(mapping: Mapping[Any, Any]) -> set[tuple[bool, Any]]:
    # Tags bool keys so True and 1 stay distinct.
    return {(isinstance(key, bool), key) for key in mapping}


def payloads_equal(left: Any, right: Any) -> bool:
    """Return True when ``left`` and ``right`` are structurally equal.

    - Mappings compare by keys and values; lists with lists, tuples with tuples.
    - Dataclass instances compare by type, then by their compared fields.
    - Nested failables compare by effective kind, payload and meta.
    - Booleans compare strictly, as values and as mapping keys: ``True``
      never equals ``1``.
    - Everything else falls back to ``==``.

    Objects whose own ``__eq__`` recurses through a cycle raise
    ``RecursionError`` from the ``==`` fallback.
    """
    stack: list[tuple[Any, Any]] = [(left, right)]
    seen: set[tuple[int, int]] = set()

    while stack:
        a, b = stack.pop()
        if a is b:
            continue

        if isinstance(a, bool) or isinstance(b, bool):
            if not (isinstance(a, bool) and isinstance(b, bool)) or a != b:
                return False
            continue

        kind = _container_kind(a)
        if kind != _container_kind(b):
            return False
        if kind is None:
            if not bool(a == b):
                return False
            continue

        pair = (id(a), id(b))
        if pair in seen:
            continue
        seen.add(pair)

        if kind == "failable":
            if kind_of(a) != kind_of(b):
                return False
            stack.append((a.payload, b.payload))
            stack.append((a.meta, b.meta))
        elif kind == "dataclass":
            if type(a) is not type(b):
                return False
            for field in dataclasses.fields(a):
                if field.compare:
                    stack.append((getattr(a, field.name), getattr(b, field.name)))
        elif kind == "mapping":
            if len(a) != len(b) or _strict_keys(a) != _strict_keys(b):
                return False
            stack.extend((a[key], b[key]) for key in a)
        else:
            if len(a) != len(b):
                return False
            stack.extend(zip(a, b, strict=True))

    return True
