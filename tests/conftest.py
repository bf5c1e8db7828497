"""Pytest configuration and shared fixtures for liftkit tests."""

import pytest

from liftkit import reset_config


@pytest.fixture(autouse=True)
def default_config():
    """Run every test against the default configuration."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from liftkit import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from liftkit import Err

    return Err('reason')


@pytest.fixture
def calls():
    """Record of side effects, used to prove that skipped work never ran."""
    return []
