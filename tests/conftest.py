"""Shared fixtures for the change solver tests."""

import pytest

from core.config import SolverSettings
from core.services.precompute import clear_precomputed


@pytest.fixture
def us_coins():
    return (1, 5, 10, 25)


@pytest.fixture
def settings(monkeypatch):
    """Settings isolated from any .env on the machine running the tests."""
    monkeypatch.delenv("CHANGE_SOLVER_MAX_TARGET", raising=False)
    monkeypatch.delenv("CHANGE_SOLVER_LOG_LEVEL", raising=False)
    return SolverSettings(_env_file=None)


@pytest.fixture(autouse=True)
def _fresh_memo():
    clear_precomputed()
    yield
    clear_precomputed()
