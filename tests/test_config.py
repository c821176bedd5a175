"""Tests for configuration defaults."""

import logging

import pytest

from library_lending import config


@pytest.mark.parametrize("raw,expected", [
    ("", 14),
    ("21", 21),
    ("0", 14),
    ("-3", 14),
    ("two weeks", 14),
])
def test_loan_days_from_env(monkeypatch, raw, expected):
    monkeypatch.setenv("LIBRARY_LOAN_DAYS", raw)
    assert config._loan_days_from_env() == expected


def test_loan_days_env_unset(monkeypatch):
    monkeypatch.delenv("LIBRARY_LOAN_DAYS", raising=False)
    assert config._loan_days_from_env() == config.FALLBACK_LOAN_DAYS


def test_configure_logging_installs_format(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
    config.configure_logging(logging.DEBUG)
    assert calls == {"level": logging.DEBUG, "format": config.LOG_FORMAT}
