"""
Pytest configuration for unit tests.

Keeps the environment-driven flags off so output is deterministic, and
provides a Click runner plus an empty fake engine.
"""

import click.testing
import pytest

from tests.mocks import FakeEngine


@pytest.fixture(autouse=True)
def _quiet_env(monkeypatch):
    for var in ("DRI_DEBUG", "DRI_VERBOSE", "DRI_ENGINE"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture()
def runner() -> click.testing.CliRunner:
    """Click CliRunner for invoking CLI commands."""
    return click.testing.CliRunner()


@pytest.fixture()
def engine() -> FakeEngine:
    return FakeEngine()
