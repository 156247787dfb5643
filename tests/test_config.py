"""Tests for environment parsing helpers."""

import pytest

from mailrelay.core import ConfigurationError
from mailrelay.core.config import _env_float, _env_int


def test_float_accepts_fractional_seconds(monkeypatch):
    monkeypatch.setenv("HTTP_TIMEOUT", "2.5")

    assert _env_float("HTTP_TIMEOUT", 20.0) == 2.5


def test_float_default_when_unset(monkeypatch):
    monkeypatch.delenv("HTTP_TIMEOUT", raising=False)

    assert _env_float("HTTP_TIMEOUT", 20.0) == 20.0


def test_float_rejects_garbage(monkeypatch):
    monkeypatch.setenv("HTTP_TIMEOUT", "soon")

    with pytest.raises(ConfigurationError, match="HTTP_TIMEOUT"):
        _env_float("HTTP_TIMEOUT", 20.0)


def test_int_rejects_fraction(monkeypatch):
    monkeypatch.setenv("PORT", "80.5")

    with pytest.raises(ConfigurationError, match="PORT"):
        _env_int("PORT", 3000)
