"""Locator value type: a strategy plus a selector string."""

from typing import NamedTuple

from selenium.webdriver.common.by import By

from .exceptions import InvalidConditionError

_STRATEGIES = frozenset(
    value for name, value in vars(By).items() if name.isupper() and isinstance(value, str)
)


class Locator(NamedTuple):
    """How to find one or more elements.

    Being a tuple, a Locator unpacks straight into
    ``driver.find_element(*locator)`` and compares equal to the plain
    ``(By.ID, "submit")`` tuples Selenium code already uses.
    """

    by: str
    value: str

    def __str__(self) -> str:
        return f"{self.by}={self.value!r}"

    @classmethod
    def id(cls, value: str) -> "Locator":
        return cls(By.ID, value)

    @classmethod
    def name(cls, value: str) -> "Locator":
        return cls(By.NAME, value)

    @classmethod
    def css(cls, value: str) -> "Locator":
        return cls(By.CSS_SELECTOR, value)

    @classmethod
    def xpath(cls, value: str) -> "Locator":
        return cls(By.XPATH, value)

    @classmethod
    def class_name(cls, value: str) -> "Locator":
        return cls(By.CLASS_NAME, value)

    @classmethod
    def tag_name(cls, value: str) -> "Locator":
        return cls(By.TAG_NAME, value)

    @classmethod
    def link_text(cls, value: str) -> "Locator":
        return cls(By.LINK_TEXT, value)

    @classmethod
    def partial_link_text(cls, value: str) -> "Locator":
        return cls(By.PARTIAL_LINK_TEXT, value)


def is_locator(obj) -> bool:
    """True for a Locator or a ``(strategy, selector)`` pair of strings."""
    return (
        isinstance(obj, tuple)
        and len(obj) == 2
        and obj[0] in _STRATEGIES
        and isinstance(obj[1], str)
    )


def as_locator(obj) -> Locator:
    """Normalise a locator-like value, rejecting anything else."""
    if isinstance(obj, Locator):
        return obj
    if is_locator(obj):
        return Locator(*obj)
    raise InvalidConditionError(
        f"Expected a locator such as (By.ID, 'submit'), got {obj!r}"
    )
