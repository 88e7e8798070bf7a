"""Pytest configuration and fixtures for frontdoor.

Every test starts from an environment with no RHO_* or DOCKER_* variables,
inside an empty working directory (so no .env is picked up), and with the
get_settings cache cleared.
"""

import os
from collections.abc import Iterator

import pytest

from frontdoor.core.config import get_settings

FAKE_HOME = "/home/fake"


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Remove service and Docker variables and isolate the working directory."""
    for name in list(os.environ):
        if name.upper().startswith(("RHO_", "DOCKER_")):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_home() -> str:
    """Home directory returned by the injected home_dir lookup."""
    return FAKE_HOME
