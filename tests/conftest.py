# tests/conftest.py

import logging

import pytest

from parsidate import ParsiDate, ParsiDateTime


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep PARSIDATE_* variables from the developer's shell out of the tests."""
    import os

    for key in list(os.environ):
        if key.startswith("PARSIDATE_"):
            monkeypatch.delenv(key, raising=False)
    yield
    # the CLI reconfigures the root logger; leave it quiet for the next test
    logging.getLogger().handlers.clear()


@pytest.fixture
def mordad_2():
    """1403/05/02 == 2024-07-23, a Tuesday in summer."""
    return ParsiDate(1403, 5, 2)


@pytest.fixture
def mordad_2_morning():
    return ParsiDateTime.new(1403, 5, 2, 10, 30, 15)
