"""Expected condition implementations, one class per condition kind.

Class names follow Selenium's ``expected_conditions`` module, so a condition
built here reads the same as the stock one at the call site::

    wait.until(visibility_of_element_located(Locator.id("submit")))

Conditions that look an element up and then query it a second time can lose
the element to a page redraw in between. Those report ``PENDING`` on
``StaleElementReferenceException`` so the wait loop simply tries again.
"""

import logging
from dataclasses import dataclass

from selenium.common.exceptions import (
    NoSuchElementException,
    StaleElementReferenceException,
)
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement

from .condition import Condition
from .exceptions import InvalidConditionError
from .locator import Locator, as_locator
from .outcome import Outcome

log = logging.getLogger(__name__)


def _require_text(value, argument: str = "text") -> str:
    if not isinstance(value, str):
        raise InvalidConditionError(f"{argument} must be a string, got {value!r}")
    return value


def _require_bool(value, argument: str = "selected") -> bool:
    if not isinstance(value, bool):
        raise InvalidConditionError(f"{argument} must be a bool, got {value!r}")
    return value


def _require_element(value) -> WebElement:
    if not isinstance(value, WebElement):
        raise InvalidConditionError(f"Expected a WebElement, got {value!r}")
    return value


def _require_condition(value) -> Condition:
    if not isinstance(value, Condition):
        raise InvalidConditionError(f"Expected a Condition, got {value!r}")
    return value


def _normalise_locator(self):
    object.__setattr__(self, "locator", as_locator(self.locator))


@dataclass(frozen=True, repr=False)
class title_is(Condition):
    """The page title equals ``title`` exactly (case-sensitive, untrimmed)."""

    title: str

    def __post_init__(self):
        _require_text(self.title, "title")

    def apply(self, driver: WebDriver) -> Outcome:
        return Outcome.from_bool(driver.title == self.title)


@dataclass(frozen=True, repr=False)
class presence_of_element_located(Condition):
    """An element is present in the DOM; it need not be visible.

    A missing element raises ``NoSuchElementException``.
    """

    locator: Locator

    def __post_init__(self):
        _normalise_locator(self)

    def apply(self, driver: WebDriver) -> Outcome:
        return Outcome.met(driver.find_element(*self.locator))


@dataclass(frozen=True, repr=False)
class visibility_of_element_located(Condition):
    """An element is present and visible.

    Visible is WebDriver's notion of displayed, which also requires a
    non-zero width and height. The success value is the element.
    """

    locator: Locator

    def __post_init__(self):
        _normalise_locator(self)

    def apply(self, driver: WebDriver) -> Outcome:
        element = driver.find_element(*self.locator)
        try:
            displayed = element.is_displayed()
        except StaleElementReferenceException:
            log.debug("%r: element went stale before visibility check", self)
            return Outcome.pending()
        return Outcome.met(element) if displayed else Outcome.unmet()


@dataclass(frozen=True, repr=False)
class visibility_of(Condition):
    """An element already in hand is visible."""

    element: WebElement

    def __post_init__(self):
        _require_element(self.element)

    def apply(self, driver: WebDriver) -> Outcome:
        return Outcome.met(self.element) if self.element.is_displayed() else Outcome.unmet()


@dataclass(frozen=True, repr=False)
class presence_of_all_elements_located(Condition):
    """At least one element matches; the success value is every match."""

    locator: Locator

    def __post_init__(self):
        _normalise_locator(self)

    def apply(self, driver: WebDriver) -> Outcome:
        elements = driver.find_elements(*self.locator)
        if not elements:
            return Outcome.unmet()
        return Outcome.met(list(elements))


@dataclass(frozen=True, repr=False)
class text_to_be_present_in_element(Condition):
    """The element's rendered text contains ``text``."""

    locator: Locator
    text: str

    def __post_init__(self):
        _normalise_locator(self)
        _require_text(self.text)

    def apply(self, driver: WebDriver) -> Outcome:
        try:
            element_text = driver.find_element(*self.locator).text
        except StaleElementReferenceException:
            log.debug("%r: element went stale before reading text", self)
            return Outcome.pending()
        return Outcome.from_bool(self.text in (element_text or ""))


@dataclass(frozen=True, repr=False)
class text_to_be_present_in_element_value(Condition):
    """The element's ``value`` attribute contains ``text``.

    An element with no ``value`` attribute does not satisfy the condition.
    """

    locator: Locator
    text: str

    def __post_init__(self):
        _normalise_locator(self)
        _require_text(self.text)

    def apply(self, driver: WebDriver) -> Outcome:
        try:
            value = driver.find_element(*self.locator).get_attribute("value")
        except StaleElementReferenceException:
            log.debug("%r: element went stale before reading value", self)
            return Outcome.pending()
        if value is None:
            return Outcome.unmet()
        return Outcome.from_bool(self.text in value)


@dataclass(frozen=True, repr=False)
class invisibility_of_element_located(Condition):
    """The element is either absent from the DOM or not displayed."""

    locator: Locator

    def __post_init__(self):
        _normalise_locator(self)

    def apply(self, driver: WebDriver) -> Outcome:
        try:
            return Outcome.from_bool(not driver.find_element(*self.locator).is_displayed())
        except NoSuchElementException:
            log.debug("%r: no matching element, counts as invisible", self)
            return Outcome.met(True)
        except StaleElementReferenceException:
            log.debug("%r: element went stale, counts as invisible", self)
            return Outcome.met(True)


@dataclass(frozen=True, repr=False)
class invisibility_of_element_with_text(Condition):
    """The element is absent, or its text is not exactly ``text``."""

    locator: Locator
    text: str

    def __post_init__(self):
        _normalise_locator(self)
        _require_text(self.text)

    def apply(self, driver: WebDriver) -> Outcome:
        try:
            return Outcome.from_bool(driver.find_element(*self.locator).text != self.text)
        except NoSuchElementException:
            log.debug("%r: no matching element, counts as invisible", self)
            return Outcome.met(True)
        except StaleElementReferenceException:
            log.debug("%r: element went stale, counts as invisible", self)
            return Outcome.met(True)


@dataclass(frozen=True, repr=False)
class element_to_be_clickable(Condition):
    """The element is visible and enabled; the success value is the element."""

    locator: Locator

    def __post_init__(self):
        _normalise_locator(self)

    def apply(self, driver: WebDriver) -> Outcome:
        visible = visibility_of_element_located(self.locator).apply(driver)
        if not visible.is_met:
            return visible
        element = visible.value
        try:
            enabled = element.is_enabled()
        except StaleElementReferenceException:
            log.debug("%r: element went stale before enabled check", self)
            return Outcome.pending()
        return Outcome.met(element) if enabled else Outcome.unmet()


@dataclass(frozen=True, repr=False)
class staleness_of(Condition):
    """The element is no longer attached to the DOM.

    Probes the handle with ``is_enabled()``: a stale error means the
    condition is met, a successful probe means it is not. Any other error
    propagates.
    """

    element: WebElement

    def __post_init__(self):
        _require_element(self.element)

    def apply(self, driver: WebDriver) -> Outcome:
        try:
            self.element.is_enabled()
        except StaleElementReferenceException:
            return Outcome.met(True)
        return Outcome.unmet()


@dataclass(frozen=True, repr=False)
class refreshed(Condition):
    """Wrap a two-step condition so a redraw between steps means "retry".

    The wrapped outcome passes through untouched; only a stale error raised
    while applying it is turned into ``PENDING``.
    """

    condition: Condition

    def __post_init__(self):
        _require_condition(self.condition)

    def apply(self, driver: WebDriver) -> Outcome:
        try:
            return self.condition.apply(driver)
        except StaleElementReferenceException:
            log.debug("%r: wrapped condition hit a stale element", self)
            return Outcome.pending()


@dataclass(frozen=True, repr=False)
class element_selection_state_is(Condition):
    """A known element's live selection state equals ``selected``."""

    element: WebElement
    selected: bool = True

    def __post_init__(self):
        _require_element(self.element)
        _require_bool(self.selected)

    def apply(self, driver: WebDriver) -> Outcome:
        return Outcome.from_bool(self.element.is_selected() == self.selected)


@dataclass(frozen=True, repr=False)
class element_located_selection_state_to_be(Condition):
    """The located element's selection state equals ``selected``."""

    locator: Locator
    selected: bool = True

    def __post_init__(self):
        _normalise_locator(self)
        _require_bool(self.selected)

    def apply(self, driver: WebDriver) -> Outcome:
        try:
            state = driver.find_element(*self.locator).is_selected()
        except StaleElementReferenceException:
            log.debug("%r: element went stale before selection check", self)
            return Outcome.pending()
        return Outcome.from_bool(state == self.selected)


@dataclass(frozen=True, repr=False)
class not_(Condition):
    """Logical negation: met while the wrapped condition is not met.

    Errors raised by the wrapped condition propagate unchanged.
    """

    condition: Condition

    def __post_init__(self):
        _require_condition(self.condition)

    def apply(self, driver: WebDriver) -> Outcome:
        return Outcome.from_bool(not self.condition.apply(driver).is_met)
