"""Shared fixtures for the runtime tests."""

import pytest

from oruntime.config import FatalPolicy, RuntimeConfig, configure


@pytest.fixture(autouse=True)
def raise_on_fatal():
    """Turn fatal conditions into RuntimeAbort for in-process tests."""
    previous = configure(RuntimeConfig(fatal_policy=FatalPolicy.RAISE))
    yield
    configure(previous)
