"""Shared pytest fixtures for calcula tests."""

import pytest

_ENV_VARS = ("CALCULA_PRECISION", "CALCULA_STRICT", "CALCULA_MAX_LINE", "CALCULA_LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep CALCULA_* settings from the developer's shell out of tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
