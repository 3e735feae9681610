"""Pytest configuration and fixtures."""

import os

import pytest

from envaccess.config import reload_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Drop any ENVACCESS_* diagnostics settings inherited from the shell.

    Tests that need tracing set the variables themselves and call
    `reload_settings()`.
    """

    for name in list(os.environ):
        if name.startswith("ENVACCESS_"):
            monkeypatch.delenv(name)
    reload_settings()
    yield
    monkeypatch.undo()
    reload_settings()
