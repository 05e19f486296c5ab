"""Failable: tri-state results (success, failure, empty) for Python.

Public API:
    - success(), failure(), empty(): constructors
    - is_success(), is_failure(), is_empty(), is_failable(): predicates
    - payload(), meta(), hydrate(): accessors and plain-data projection
    - assert_*(): test helpers raising AssertionError on mismatch
    - any_failed(), first_failure(), extract_payloads(), flatten_results()
    - make_it_failable(): wrap a callable so it always returns a failable
"""

from __future__ import annotations

import logging

from failable.adapter import make_it_failable, make_it_failable_sync
from failable.assertions import (
    assert_empty,
    assert_failure,
    assert_success,
    assert_success_typed,
    assert_success_which,
)
from failable.combinators import (
    any_failed,
    extract_payloads,
    first_failure,
    flatten_results,
)
from failable.config import Settings, get_settings, settings_scope
from failable.core import (
    Empty,
    Failable,
    FailableLike,
    Failure,
    Hydrated,
    Success,
    empty,
    failure,
    hydrate,
    is_empty,
    is_failable,
    is_failure,
    is_success,
    kind_of,
    meta,
    payload,
    success,
)
from failable.errors import (
    ConfigurationError,
    FailableAssertionError,
    FailableError,
    NotAFailableError,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("failable")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("failable").addHandler(logging.NullHandler())

__all__ = [
    "ConfigurationError",
    "Empty",
    "Failable",
    "FailableAssertionError",
    "FailableError",
    "FailableLike",
    "Failure",
    "Hydrated",
    "NotAFailableError",
    "Settings",
    "Success",
    "any_failed",
    "assert_empty",
    "assert_failure",
    "assert_success",
    "assert_success_typed",
    "assert_success_which",
    "empty",
    "extract_payloads",
    "failure",
    "first_failure",
    "flatten_results",
    "get_settings",
    "hydrate",
    "is_empty",
    "is_failable",
    "is_failure",
    "is_success",
    "kind_of",
    "make_it_failable",
    "make_it_failable_sync",
    "meta",
    "payload",
    "settings_scope",
    "success",
]
