from __future__ import annotations

import pytest


@pytest.fixture()
def win_cwd() -> str:
    """
    Windows-style working directory snapshot used by resolve/relative tests.
    """
    return "c:\\home\\myself\\node"


@pytest.fixture()
def posix_cwd() -> str:
    return "/home/myself/node"


@pytest.fixture()
def clean_env(monkeypatch):
    """
    Remove crosspath configuration variables from the environment.
    """
    for key in ("CROSSPATH_SEP", "CROSSPATH_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
