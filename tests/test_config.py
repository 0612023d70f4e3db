"""Tests for settings and logging setup."""

from __future__ import annotations

import logging

from vectorview.config import Settings
from vectorview.logging_setup import LOG_FORMAT, configure_logging


def test_defaults():
    s = Settings()
    assert s.preview_size == 100
    assert s.default_intrinsic_size == 100.0


def test_env_override(monkeypatch):
    monkeypatch.setenv("VECTORVIEW_PREVIEW_SIZE", "256")
    monkeypatch.setenv("VECTORVIEW_LOG_LEVEL", "warning")
    s = Settings()
    assert s.preview_size == 256
    assert s.log_level == "warning"


def test_configure_logging(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
    configure_logging("warning")
    assert calls["level"] == logging.WARNING
    assert calls["format"] == LOG_FORMAT


def test_configure_logging_exported():
    import vectorview

    assert vectorview.configure_logging is configure_logging
    assert "configure_logging" in vectorview.__all__


def test_configure_logging_unknown_level(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
    configure_logging("chatty")
    assert calls["level"] == logging.DEBUG
