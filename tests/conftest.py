"""Shared fixtures."""

import logging

import pytest

from patterns import LogSink


@pytest.fixture(autouse=True)
def _reset_log_sink():
    """Each test starts without a shared LogSink."""
    LogSink.reset()
    yield
    LogSink.reset()


@pytest.fixture
def no_log_level_env(monkeypatch):
    monkeypatch.delenv("PATTERNS_LOG_LEVEL", raising=False)
    monkeypatch.setattr("patterns.config.load_dotenv", lambda *a, **kw: False)


@pytest.fixture
def patterns_caplog(caplog, monkeypatch):
    """caplog that also sees ``patterns`` records, which normally stop at the package logger."""
    monkeypatch.setattr(logging.getLogger("patterns"), "propagate", True)
    return caplog
