"""Tri-state result of applying a condition once."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Status(Enum):
    """How a single evaluation of a condition ended."""

    MET = "met"
    UNMET = "unmet"  # evaluated, currently false
    PENDING = "pending"  # could not be evaluated yet, retry


@dataclass(frozen=True)
class Outcome:
    """Result of ``Condition.apply``.

    Only a ``MET`` outcome carries a value; it is also the only truthy one, so
    ``if condition.apply(driver):`` reads naturally. Hard failures are never
    an Outcome, they propagate as exceptions.
    """

    status: Status
    value: Any = None

    @classmethod
    def met(cls, value: Any = True) -> "Outcome":
        return cls(Status.MET, value)

    @classmethod
    def unmet(cls) -> "Outcome":
        return _UNMET

    @classmethod
    def pending(cls) -> "Outcome":
        return _PENDING

    @classmethod
    def from_bool(cls, flag: bool) -> "Outcome":
        return cls.met(True) if flag else _UNMET

    @property
    def is_met(self) -> bool:
        return self.status is Status.MET

    @property
    def is_pending(self) -> bool:
        return self.status is Status.PENDING

    def __bool__(self) -> bool:
        return self.is_met


_UNMET = Outcome(Status.UNMET)
_PENDING = Outcome(Status.PENDING)
