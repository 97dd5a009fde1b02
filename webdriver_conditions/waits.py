"""Wait helpers that run conditions through Selenium's WebDriverWait."""

import logging

from selenium.common.exceptions import TimeoutException
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support.ui import WebDriverWait

from .condition import Condition
from .conditions import (
    element_to_be_clickable,
    not_,
    presence_of_element_located,
    visibility_of_element_located,
)
from .config import POLL_FREQUENCY, TIMEOUT_DEFAULT
from .exceptions import ConditionTimeoutError

log = logging.getLogger(__name__)


def create_wait(
    driver: WebDriver,
    timeout: float = TIMEOUT_DEFAULT,
    poll_frequency: float = POLL_FREQUENCY,
) -> WebDriverWait:
    """Create a WebDriverWait with standard poll frequency."""
    return WebDriverWait(driver, timeout, poll_frequency=poll_frequency)


def wait_until(
    driver: WebDriver,
    condition: Condition,
    timeout: float = TIMEOUT_DEFAULT,
    message: str = "",
):
    """Wait for ``condition`` and return its success value.

    Raises:
        ConditionTimeoutError: If the condition is not met within ``timeout``
    """
    wait = create_wait(driver, timeout)
    log.debug("Waiting up to %ss for %r", timeout, condition)
    try:
        return wait.until(condition)
    except TimeoutException as e:
        raise ConditionTimeoutError(condition, timeout, message) from e


def wait_until_not(
    driver: WebDriver,
    condition: Condition,
    timeout: float = TIMEOUT_DEFAULT,
    message: str = "",
) -> bool:
    """Wait for ``condition`` to stop being met.

    An element lookup failing with ``NoSuchElementException`` counts as no
    longer met. A ``PENDING`` outcome keeps the wait going.

    Raises:
        ConditionTimeoutError: If the condition still holds after ``timeout``
    """
    wait = create_wait(driver, timeout)
    log.debug("Waiting up to %ss for %r to stop holding", timeout, condition)

    def still_holds(d) -> bool:
        outcome = condition.apply(d)
        return outcome.is_met or outcome.is_pending

    try:
        wait.until_not(still_holds)
    except TimeoutException as e:
        raise ConditionTimeoutError(not_(condition), timeout, message) from e
    return True


def wait_for_element(driver: WebDriver, locator, timeout: float = TIMEOUT_DEFAULT) -> WebElement:
    """Wait for element to be present and return it."""
    return wait_until(driver, presence_of_element_located(locator), timeout)


def wait_for_visible(driver: WebDriver, locator, timeout: float = TIMEOUT_DEFAULT) -> WebElement:
    """Wait for element to be visible and return it."""
    return wait_until(driver, visibility_of_element_located(locator), timeout)


def wait_for_clickable(driver: WebDriver, locator, timeout: float = TIMEOUT_DEFAULT) -> WebElement:
    """Wait for element to be clickable and return it."""
    return wait_until(driver, element_to_be_clickable(locator), timeout)
