"""Tests for settings and logging setup."""

import logging

import pytest

from user_crud_api.app.core.config import Settings
from user_crud_api.app.core.logging_config import setup_logging


def test_seed_user_names_strips_blanks():
    assert Settings(seed_users=" a ,b,, ").seed_user_names == ["a", "b"]


def test_seed_user_names_empty():
    assert Settings(seed_users="").seed_user_names == []


def test_seed_user_names_drops_duplicates():
    assert Settings(seed_users="a,b,a, b ,c").seed_user_names == ["a", "b", "c"]


@pytest.fixture
def fresh_root(monkeypatch):
    """Swap in an unconfigured root logger for the duration of a test.

    pytest attaches its capture handler to the root logger when the test
    body starts, so tests clear ``handlers`` before calling
    ``setup_logging``.
    """
    root = logging.RootLogger(logging.WARNING)
    monkeypatch.setattr(logging, "root", root)
    yield root
    for handler in root.handlers:
        handler.close()


def test_setup_logging_configures_once(fresh_root, tmp_path):
    fresh_root.handlers.clear()
    logfile = tmp_path / "api.log"
    setup_logging("debug", str(logfile))
    assert fresh_root.level == logging.DEBUG
    assert len(fresh_root.handlers) == 2
    assert logfile.exists()

    setup_logging("error")
    assert fresh_root.level == logging.DEBUG
    assert len(fresh_root.handlers) == 2


def test_setup_logging_unknown_level(fresh_root):
    fresh_root.handlers.clear()
    setup_logging("chatty")
    assert fresh_root.level == logging.INFO
    assert len(fresh_root.handlers) == 1


def test_setup_logging_skips_configured_root(fresh_root):
    fresh_root.handlers[:] = [logging.NullHandler()]
    setup_logging("debug")
    assert fresh_root.level == logging.WARNING
    assert len(fresh_root.handlers) == 1
