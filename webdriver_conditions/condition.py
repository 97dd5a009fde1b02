"""Base class shared by every expected condition."""

from dataclasses import dataclass, fields

from selenium.webdriver.remote.webdriver import WebDriver

from .outcome import Outcome


@dataclass(frozen=True)
class Condition:
    """An immutable predicate over the current browser state.

    Subclasses capture their parameters as dataclass fields and implement
    :meth:`apply`. Instances are callable with a driver, which makes them
    usable directly with ``WebDriverWait.until``: the call returns the
    success value, or ``False`` while the condition is unmet or pending.
    """

    def apply(self, driver: WebDriver) -> Outcome:
        raise NotImplementedError

    def __call__(self, driver: WebDriver):
        outcome = self.apply(driver)
        return outcome.value if outcome.is_met else False

    def __invert__(self) -> "Condition":
        from .conditions import not_

        return not_(self)

    def __repr__(self) -> str:
        args = ", ".join(repr(getattr(self, f.name)) for f in fields(self))
        return f"{type(self).__name__}({args})"
