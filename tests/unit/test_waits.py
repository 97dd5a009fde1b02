"""
Tests for the WebDriverWait helpers.

These tests verify:
- Success values are returned from the wait
- Timeouts raise ConditionTimeoutError naming the condition
- Unexpected driver errors abort the wait immediately
"""

import time

import pytest
from selenium.common.exceptions import TimeoutException, WebDriverException
from selenium.webdriver.support.ui import WebDriverWait

from fakes import SUBMIT, FakeDriver, FakeElement
from webdriver_conditions import (
    ConditionTimeoutError,
    create_wait,
    presence_of_element_located,
    title_is,
    visibility_of_element_located,
    wait_for_clickable,
    wait_for_element,
    wait_for_visible,
    wait_until,
    wait_until_not,
)
from webdriver_conditions.condition import Condition
from webdriver_conditions.outcome import Outcome

SHORT = 0.05


class flaky_title(Condition):
    """Pending for the first ``misses`` calls, then checks the title."""

    def __init__(self, title: str, misses: int):
        object.__setattr__(self, "title", title)
        object.__setattr__(self, "misses", [misses])

    def apply(self, driver) -> Outcome:
        if self.misses[0] > 0:
            self.misses[0] -= 1
            return Outcome.pending()
        return Outcome.from_bool(driver.title == self.title)

    def __repr__(self) -> str:
        return f"flaky_title({self.title!r})"


class TestCreateWait:
    def test_returns_webdriver_wait(self, driver: FakeDriver):
        assert isinstance(create_wait(driver), WebDriverWait)

    def test_gives_up_after_timeout(self, driver: FakeDriver):
        """A never-met condition fails close to the timeout, not before."""
        wait = create_wait(driver, timeout=0.2, poll_frequency=0.01)
        started = time.monotonic()
        with pytest.raises(TimeoutException):
            wait.until(title_is("Away"))
        elapsed = time.monotonic() - started
        assert 0.2 <= elapsed < 1.5

    def test_polls_at_requested_frequency(self, driver: FakeDriver):
        condition = flaky_title("Home", misses=3)
        started = time.monotonic()
        assert create_wait(driver, timeout=1, poll_frequency=0.01).until(condition) is True
        assert time.monotonic() - started < 0.5


class TestWaitUntil:
    def test_returns_success_value(self, driver: FakeDriver, submit: FakeElement):
        assert wait_for_element(driver, SUBMIT, timeout=SHORT) is submit
        assert wait_for_visible(driver, SUBMIT, timeout=SHORT) is submit
        assert wait_for_clickable(driver, SUBMIT, timeout=SHORT) is submit

    def test_retries_while_pending(self, driver: FakeDriver):
        condition = flaky_title("Home", misses=2)
        assert wait_until(driver, condition, timeout=1) is True
        assert condition.misses == [0]

    def test_timeout_names_condition(self, driver: FakeDriver):
        with pytest.raises(ConditionTimeoutError) as excinfo:
            wait_until(driver, title_is("Away"), timeout=SHORT)
        assert "title_is('Away')" in str(excinfo.value)
        assert excinfo.value.timeout == SHORT
        assert excinfo.value.condition == title_is("Away")

    def test_timeout_is_selenium_timeout(self, driver: FakeDriver):
        with pytest.raises(TimeoutException):
            wait_until(driver, title_is("Away"), timeout=SHORT, message="still on Home")

    def test_custom_message(self, driver: FakeDriver):
        with pytest.raises(ConditionTimeoutError, match="still on Home"):
            wait_until(driver, title_is("Away"), timeout=SHORT, message="still on Home")

    def test_missing_element_times_out(self, driver: FakeDriver):
        """WebDriverWait ignores NoSuchElementException between polls."""
        with pytest.raises(ConditionTimeoutError):
            wait_for_element(driver, SUBMIT, timeout=SHORT)

    def test_unexpected_error_aborts_wait(self, driver: FakeDriver, submit: FakeElement):
        submit.error = WebDriverException("chrome not reachable")
        with pytest.raises(WebDriverException, match="chrome not reachable"):
            wait_for_visible(driver, SUBMIT, timeout=5)
        assert submit.queries == 1


class TestWaitUntilNot:
    def test_returns_true_once_condition_stops_holding(self, driver: FakeDriver):
        assert wait_until_not(driver, title_is("Away"), timeout=SHORT) is True

    def test_times_out_while_condition_holds(self, driver: FakeDriver):
        with pytest.raises(ConditionTimeoutError):
            wait_until_not(driver, title_is("Home"), timeout=SHORT)

    def test_absent_element_is_no_longer_present(self, driver: FakeDriver):
        """A lookup that finds nothing means the element has gone."""
        assert wait_until_not(driver, presence_of_element_located(SUBMIT), timeout=SHORT) is True

    def test_spinner_removed_from_page(self, driver: FakeDriver):
        assert wait_until_not(driver, visibility_of_element_located(SUBMIT), timeout=SHORT) is True

    def test_hidden_element_is_no_longer_visible(self, driver: FakeDriver, submit: FakeElement):
        submit.displayed = False
        assert wait_until_not(driver, visibility_of_element_located(SUBMIT), timeout=SHORT) is True

    def test_pending_keeps_waiting(self, driver: FakeDriver, submit: FakeElement):
        """A stale element mid-check is not proof the condition stopped holding."""
        submit.stale = True
        with pytest.raises(ConditionTimeoutError) as excinfo:
            wait_until_not(driver, visibility_of_element_located(SUBMIT), timeout=SHORT)
        assert "not_(visibility_of_element_located(" in str(excinfo.value)

    def test_present_element_times_out(self, driver: FakeDriver, submit: FakeElement):
        with pytest.raises(ConditionTimeoutError):
            wait_until_not(driver, presence_of_element_located(SUBMIT), timeout=SHORT)

    def test_unexpected_error_aborts_wait(self, driver: FakeDriver, submit: FakeElement):
        submit.error = WebDriverException("chrome not reachable")
        with pytest.raises(WebDriverException, match="chrome not reachable"):
            wait_until_not(driver, visibility_of_element_located(SUBMIT), timeout=5)
