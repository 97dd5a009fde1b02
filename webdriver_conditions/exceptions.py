"""Exceptions raised by the condition library itself.

Driver-side errors (``NoSuchElementException``,
``StaleElementReferenceException``) come from Selenium and are never wrapped.
"""

from selenium.common.exceptions import TimeoutException


class ConditionError(Exception):
    """Base exception for condition library failures."""

    pass


class InvalidConditionError(ConditionError, TypeError):
    """A condition was constructed with an argument of the wrong type."""

    pass


class ConfigurationError(ConditionError, ValueError):
    """An environment setting could not be parsed."""

    pass


class ConditionTimeoutError(ConditionError, TimeoutException):
    """A wait gave up before its condition was met."""

    def __init__(self, condition, timeout: float, message: str = ""):
        self.condition = condition
        self.timeout = timeout
        text = message or f"Timed out after {timeout}s waiting for {condition!r}"
        super().__init__(text)
