import os

import pytest

from unilog.logger_registry import LoggerRegistry, set_registry


@pytest.fixture(autouse=True)
def fresh_registry():
    """Each test gets its own process-wide registry."""
    registry = LoggerRegistry()
    previous = set_registry(registry)
    yield registry
    set_registry(previous)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Ambient UNILOG_* variables must not leak into configuration."""
    for key in list(os.environ):
        if key.upper().startswith("UNILOG_"):
            monkeypatch.delenv(key)
