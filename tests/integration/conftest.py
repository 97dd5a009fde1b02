"""
Pytest fixtures for live integration tests.

Provides:
- Selenium WebDriver connected to a remote Chrome (SELENIUM_URL)
- A helper that loads an inline HTML page into the browser

Every test here is skipped when the grid is not reachable, so the suite can
run on machines without a browser.
"""

from typing import Generator
from urllib.parse import quote

import pytest
import requests
from selenium import webdriver
from selenium.webdriver.remote.webdriver import WebDriver

from webdriver_conditions.config import SELENIUM_URL

GRID_PROBE_TIMEOUT = 2


def grid_is_ready(url: str = SELENIUM_URL) -> bool:
    """Ask the grid's /status endpoint whether it can accept sessions."""
    try:
        response = requests.get(f"{url.rstrip('/')}/status", timeout=GRID_PROBE_TIMEOUT)
        response.raise_for_status()
        return bool(response.json().get("value", {}).get("ready"))
    except (requests.RequestException, ValueError):
        return False


def pytest_collection_modifyitems(config, items):
    """Mark everything in this directory as integration."""
    for item in items:
        if "integration" in item.path.parts:
            item.add_marker(pytest.mark.integration)


@pytest.fixture(scope="session")
def browser() -> Generator[WebDriver, None, None]:
    """
    Create a Selenium WebDriver connected to the Chrome grid.

    This fixture is session-scoped so the browser persists across all tests,
    making the test suite faster.
    """
    if not grid_is_ready():
        pytest.skip(f"Selenium grid not ready at {SELENIUM_URL}")

    options = webdriver.ChromeOptions()
    # Recommended options for containerized Chrome
    options.add_argument("--no-sandbox")
    options.add_argument("--disable-dev-shm-usage")
    options.add_argument("--disable-gpu")
    options.add_argument("--window-size=1280,800")

    driver = webdriver.Remote(
        command_executor=SELENIUM_URL,
        options=options,
    )
    # No implicit wait: conditions must see lookups fail immediately
    driver.implicitly_wait(0)

    yield driver

    driver.quit()


@pytest.fixture
def load_page(browser: WebDriver):
    """
    Factory fixture that loads inline HTML.

    Usage:
        def test_something(browser, load_page):
            load_page("<title>T</title><p id='x'>hi</p>")
    """

    def _load(html: str) -> WebDriver:
        browser.get("data:text/html;charset=utf-8," + quote(html))
        return browser

    return _load
