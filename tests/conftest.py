"""Pytest configuration and fixtures.

Provides environment isolation for ``FAILABLE_*`` settings and keeps
python-dotenv from reading project ``.env`` files. All fixtures here are
autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
import logging
import os

import pytest

from failable.config import reset_settings

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.load_dotenv", lambda *_args, **_kwargs: False, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_settings_env(request, monkeypatch):
    """Clear FAILABLE_* variables and cached settings around every test.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if not request.node.get_closest_marker("allow_env_pollution"):
        for key in list(os.environ.keys()):
            if key.startswith("FAILABLE_"):
                monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture
def failable_debug_logs(caplog):
    """Capture DEBUG records from the failable logger (not autouse)."""
    caplog.set_level(logging.DEBUG, logger="failable")
    return caplog
