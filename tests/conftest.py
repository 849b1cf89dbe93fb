"""Pytest configuration and fixtures.

Provides environment isolation and config reset. All fixtures here are
autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
import os

import pytest

from resultwire.config import reset_config

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
            "resultwire.config.load_dotenv", lambda *_args, **_kwargs: False
        )


@pytest.fixture(autouse=True)
def isolate_resultwire_env(request, monkeypatch):
    """Clear RESULTWIRE_* variables so one test cannot configure another.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("RESULTWIRE_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def fresh_config():
    """Drop the cached Config before and after every test."""
    reset_config()
    yield
    reset_config()
