"""Named constructors for the canned expected conditions."""

from selenium.webdriver.remote.webelement import WebElement

from . import conditions
from .condition import Condition
from .exceptions import InvalidConditionError
from .locator import is_locator


class ExpectedConditions:
    """Canned conditions generally useful with ``WebDriverWait``.

    Usage:
        from webdriver_conditions import ExpectedConditions as EC

        wait.until(EC.element_to_be_clickable(Locator.css("button[type='submit']")))
    """

    @staticmethod
    def title_is(title: str) -> Condition:
        """The page title is exactly ``title``."""
        return conditions.title_is(title)

    @staticmethod
    def presence_of_element_located(locator) -> Condition:
        """An element is in the DOM. Success value: the element."""
        return conditions.presence_of_element_located(locator)

    @staticmethod
    def visibility_of_element_located(locator) -> Condition:
        """An element is in the DOM and visible. Success value: the element."""
        return conditions.visibility_of_element_located(locator)

    @staticmethod
    def visibility_of(element: WebElement) -> Condition:
        """A known element is visible. Success value: the same element."""
        return conditions.visibility_of(element)

    @staticmethod
    def presence_of_all_elements_located(locator) -> Condition:
        """At least one element matches. Success value: all matches."""
        return conditions.presence_of_all_elements_located(locator)

    @staticmethod
    def text_to_be_present_in_element(locator, text: str) -> Condition:
        return conditions.text_to_be_present_in_element(locator, text)

    @staticmethod
    def text_to_be_present_in_element_value(locator, text: str) -> Condition:
        return conditions.text_to_be_present_in_element_value(locator, text)

    @staticmethod
    def invisibility_of_element_located(locator) -> Condition:
        """The element is absent or hidden."""
        return conditions.invisibility_of_element_located(locator)

    @staticmethod
    def invisibility_of_element_with_text(locator, text: str) -> Condition:
        """The element is absent or no longer shows exactly ``text``."""
        return conditions.invisibility_of_element_with_text(locator, text)

    @staticmethod
    def element_to_be_clickable(locator) -> Condition:
        """The element is visible and enabled. Success value: the element."""
        return conditions.element_to_be_clickable(locator)

    @staticmethod
    def staleness_of(element: WebElement) -> Condition:
        """The element has been detached from the DOM."""
        return conditions.staleness_of(element)

    @staticmethod
    def refreshed(condition: Condition) -> Condition:
        """Treat a stale element inside ``condition`` as "not yet"."""
        return conditions.refreshed(condition)

    @staticmethod
    def element_to_be_selected(element_or_locator) -> Condition:
        return ExpectedConditions.element_selection_state_to_be(element_or_locator, True)

    @staticmethod
    def element_selection_state_to_be(element_or_locator, selected: bool) -> Condition:
        """The element's selection state equals ``selected``.

        Accepts either an element handle or a locator. Both variants query
        the live state on every call.
        """
        if isinstance(element_or_locator, WebElement):
            return conditions.element_selection_state_is(element_or_locator, selected)
        if is_locator(element_or_locator):
            return conditions.element_located_selection_state_to_be(
                element_or_locator, selected
            )
        raise InvalidConditionError(
            f"Expected a WebElement or a locator, got {element_or_locator!r}"
        )

    @staticmethod
    def not_(condition: Condition) -> Condition:
        """Logical opposite of ``condition``."""
        return conditions.not_(condition)
