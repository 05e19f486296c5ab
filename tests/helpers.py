"""Shared hypothesis strategies for failable property tests."""

from __future__ import annotations

from dataclasses import dataclass

from hypothesis import strategies as st

from failable import empty, failure, success

scalars = st.one_of(
    st.booleans(),
    st.integers(),
    st.floats(allow_nan=False),
    st.text(max_size=12),
)

payloads = st.recursive(
    st.one_of(st.none(), scalars),
    lambda children: st.one_of(
        st.lists(children, max_size=3),
        st.dictionaries(st.text(max_size=5), children, max_size=3),
    ),
    max_leaves=8,
)

present_payloads = payloads.filter(lambda p: p is not None)

metas = st.one_of(
    st.none(),
    st.text(max_size=12),
    st.dictionaries(st.text(max_size=5), scalars, max_size=3),
)

successes = st.builds(success, present_payloads, meta=metas)
failures = st.builds(failure, payloads, meta=metas)
empties = st.builds(empty, metas)
non_failures = st.one_of(successes, empties)
failables = st.one_of(successes, failures, empties)


@dataclass
class Node:
    """Linked node; ``ring`` makes one that points at itself."""

    value: int
    nxt: Node | None = None


def ring(value: int) -> Node:
    node = Node(value)
    node.nxt = node
    return node
