"""Exception hierarchy for Failable.

Domain failures are never raised; they travel as ``Failure`` values. The
exceptions here cover the two places the library does raise: assertion
helpers (test-time) and misuse at the API boundary.
"""

from __future__ import annotations

from typing import Any


class FailableError(Exception):
    """Base exception for all Failable errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    def __str__(self) -> str:
        msg = super().__str__()
        return f"{msg}. {self.hint}" if self.hint else msg


class FailableAssertionError(FailableError, AssertionError):
    """An assertion helper found a failable that did not match expectations.

    Subclasses ``AssertionError`` so pytest and unittest report it as a plain
    test failure.
    """

    def __init__(
        self,
        message: str,
        *,
        actual: Any = None,
        expected: Any = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.actual = actual
        self.expected = expected


class NotAFailableError(FailableError, TypeError):
    """A value that is not a failable was passed where one is required."""


class ConfigurationError(FailableError):
    """Settings validation or resolution failed."""
