"""Pytest configuration and shared fixtures."""

import pytest

from calday.config import reset_calday_config


@pytest.fixture(autouse=True)
def reset_config_for_all_tests():
    """Reset calday configuration before and after each test for isolation.

    The configuration is a module-level singleton that persists across tests.
    This fixture ensures each test starts with the defaults.
    """
    reset_calday_config()
    yield
    reset_calday_config()
