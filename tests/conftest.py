"""Pytest configuration and shared fixtures."""

import logging
import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI attaches so they never outlive a test's streams."""
    yield
    logger = logging.getLogger("binary_calculator")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def calculator():
    """Provide a fresh BinaryCalculator instance."""
    from binary_calculator import BinaryCalculator

    return BinaryCalculator()


@pytest.fixture
def press():
    """Provide a helper that presses a sequence of keys on a calculator."""

    def _press(calc, *keys):
        state = calc.get_state()
        for key in keys:
            state = calc.press(key)
        return state

    return _press


@pytest.fixture
def sample_binaries():
    """Provide a set of interesting binary strings."""
    return [
        "0",
        "1",
        "10",
        "1010",
        "0b1111",
        "0B101",
        "11111111",
        "1" * 32,
        "1" + "0" * 31,
    ]
