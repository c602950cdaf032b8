"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from objtools.config import runtime

_OBJTOOLS_ENV_VARS = ("OBJTOOLS_LOG_LEVEL", "OBJTOOLS_LOG_USER_FRIENDLY")


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keep host environment variables and .env files out of every test."""
    for name in _OBJTOOLS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", ())
    runtime.reset_default_values()
    yield
    runtime.reset_default_values()
