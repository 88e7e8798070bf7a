"""Tests for the startup context (log level first, then storage connect and bootstrap)."""

import logging
import os
import subprocess
import sys
from pathlib import Path
from unittest.mock import MagicMock, call

import pytest

from frontdoor.core import context as context_module
from frontdoor.core.config import Settings
from frontdoor.core.context import Context, create_context
from frontdoor.domain.enums import LogLevel

PROJECT_ROOT = Path(__file__).resolve().parents[2]


@pytest.fixture
def parent(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    """Parent mock recording setup_logging, the storage factory and bootstrap in order."""
    parent = MagicMock()
    parent.factory.return_value = parent.storage
    monkeypatch.setattr(context_module, "setup_logging", parent.setup_logging)
    return parent


def test_create_context_applies_log_level_before_storage(parent: MagicMock) -> None:
    settings = Settings(port=1234, log_level=LogLevel.DEBUG)

    ctx = create_context(parent.factory, settings=settings)

    assert parent.mock_calls == [
        call.setup_logging(LogLevel.INFO),
        call.setup_logging(LogLevel.DEBUG),
        call.factory(settings),
        call.storage.bootstrap(),
    ]
    assert ctx == Context(settings=settings, storage=parent.storage)
    assert ctx.listen_addr == ":1234"


def test_create_context_resolves_settings_when_not_given(
    monkeypatch: pytest.MonkeyPatch, parent: MagicMock
) -> None:
    """Without explicit settings, the cached process settings are used."""
    monkeypatch.setenv("RHO_PORT", "4000")
    monkeypatch.setenv("RHO_LOGLEVEL", "warn")

    ctx = create_context(parent.factory)

    assert ctx.settings.port == 4000
    assert parent.setup_logging.call_args_list == [call(LogLevel.INFO), call(LogLevel.WARN)]


def test_create_context_logs_summary_without_secret(
    parent: MagicMock, caplog: pytest.LogCaptureFixture
) -> None:
    settings = Settings(admin_name="admin", admin_key="hunter2")

    with caplog.at_level(logging.INFO, logger="frontdoor.core.context"):
        create_context(parent.factory, settings=settings)

    assert "Initializing with loaded settings" in caplog.text
    assert "admin account=admin" in caplog.text
    assert "hunter2" not in caplog.text


def test_create_context_propagates_storage_errors(parent: MagicMock) -> None:
    """A failed connection aborts startup; bootstrap is never attempted."""
    parent.factory.side_effect = ConnectionError("mongo unreachable")

    with pytest.raises(ConnectionError):
        create_context(parent.factory, settings=Settings())

    parent.storage.bootstrap.assert_not_called()
    assert parent.setup_logging.call_args_list == [call(LogLevel.INFO), call(LogLevel.INFO)]


def test_summary_reaches_stdout_in_fresh_process() -> None:
    """In a process with no logging configured, the summary is printed even at error level."""
    code = (
        "from unittest.mock import MagicMock\n"
        "from frontdoor.core.config import Settings\n"
        "from frontdoor.core.context import create_context\n"
        "create_context(MagicMock(), settings=Settings(log_level='error'))\n"
    )

    result = subprocess.run(
        [sys.executable, "-c", code],
        capture_output=True,
        text=True,
        check=True,
        env={**os.environ, "PYTHONPATH": str(PROJECT_ROOT)},
    )

    assert "Initializing with loaded settings" in result.stdout
    assert "port=8000" in result.stdout
    assert "Storage bootstrapped" not in result.stdout
