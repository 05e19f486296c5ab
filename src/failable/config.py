"""Settings: a frozen pydantic model resolved from ``FAILABLE_*`` env vars.

Resolution order (highest wins):
1. ``settings_scope(...)`` overrides active in the current context
2. ``FAILABLE_*`` environment variables (after loading ``.env`` if present)
3. Field defaults
"""

from __future__ import annotations

from contextlib import contextmanager
import contextvars
from functools import cache
import logging
import os
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from failable.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping

log = logging.getLogger(__name__)

ENV_PREFIX = "FAILABLE_"


class Settings(BaseModel):
    """Library-wide knobs. Everything defaults to quiet, predictable behavior."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    #: Longest payload repr shown in an assertion message before truncation.
    repr_limit: int = Field(default=240, ge=16)
    #: Emit a DEBUG record whenever the adapter turns an exception into a failure.
    log_absorbed_errors: bool = False


_AMBIENT: contextvars.ContextVar[Settings | None] = contextvars.ContextVar(
    "failable_settings", default=None
)

_DOTENV_LOADED: bool = False


def _try_load_dotenv() -> None:
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    from dotenv import find_dotenv, load_dotenv

    load_dotenv(find_dotenv(usecwd=True))
    _DOTENV_LOADED = True


def load_env() -> Mapping[str, Any]:
    """Collect ``FAILABLE_*`` variables that name a known settings field.

    Values stay strings; pydantic coerces them against the schema.
    """
    found: dict[str, Any] = {}
    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX):
            continue
        name = key[len(ENV_PREFIX) :].lower()
        if name in Settings.model_fields:
            found[name] = value
    return found


def _validate(values: Mapping[str, Any]) -> Settings:
    try:
        return Settings.model_validate(dict(values))
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(p) for p in first.get("loc", ())) or "settings"
        raise ConfigurationError(
            f"Invalid setting {field!r}: {first.get('msg', 'validation failed')}",
            hint=f"Check {ENV_PREFIX}{field.upper()} or the override passed in.",
        ) from exc


@cache
def _resolved_settings() -> Settings:
    _try_load_dotenv()
    return _validate(load_env())


def get_settings() -> Settings:
    """Return the settings active in the current context."""
    ambient = _AMBIENT.get()
    if ambient is not None:
        return ambient
    return _resolved_settings()


def get_settings_or_defaults() -> Settings:
    """Like ``get_settings`` but falls back to defaults on invalid settings.

    For code paths that must not raise, such as the adapter absorbing an
    exception or an assertion building its message.
    """
    try:
        return get_settings()
    except ConfigurationError as exc:
        log.warning("Ignoring invalid failable settings, using defaults: %s", exc)
        return Settings()


def reset_settings() -> None:
    """Forget cached env resolution so the next lookup re-reads the environment."""
    _resolved_settings.cache_clear()


@contextmanager
def settings_scope(**overrides: Any) -> Generator[Settings]:
    """Temporarily override settings for the current thread or task.

    Example:
        with settings_scope(repr_limit=80):
            assert_success(result, expected)
    """
    base = get_settings()
    scoped = _validate({**base.model_dump(), **overrides})
    token = _AMBIENT.set(scoped)
    try:
        yield scoped
    finally:
        _AMBIENT.reset(token)


__all__ = [
    "ENV_PREFIX",
    "Settings",
    "get_settings",
    "get_settings_or_defaults",
    "load_env",
    "reset_settings",
    "settings_scope",
]
