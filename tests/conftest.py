"""Shared pytest fixtures."""

import logging

import pytest

from xdir import xdg

XDG_VARS = [var for var, _ in xdg.KINDS.values()]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Process environment with no XDG overrides and HOME pointing at tmp_path."""
    for var in XDG_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


@pytest.fixture
def no_home(monkeypatch):
    """Environment in which the home directory cannot be determined."""
    for var in XDG_VARS + ["HOME", "USERPROFILE"]:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(xdg, "_account_home", lambda: None)


@pytest.fixture(autouse=True)
def reset_xdir_logger():
    logger = logging.getLogger("xdir")
    saved = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
