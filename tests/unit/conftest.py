"""
Pytest fixtures for unit tests.

Provides:
- A fake driver with no elements
- A submit button registered on it
"""

import pytest

from fakes import SUBMIT, FakeDriver, FakeElement


@pytest.fixture
def driver() -> FakeDriver:
    """Empty page titled "Home"."""
    return FakeDriver(title="Home")


@pytest.fixture
def submit(driver: FakeDriver) -> FakeElement:
    """A visible, enabled submit button registered under SUBMIT."""
    element = FakeElement(text="Send")
    driver.put(SUBMIT, element)
    return element
