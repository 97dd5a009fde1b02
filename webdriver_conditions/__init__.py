"""Composable expected conditions for polling a Selenium WebDriver session."""

import logging

from .condition import Condition
from .conditions import (
    element_located_selection_state_to_be,
    element_selection_state_is,
    element_to_be_clickable,
    invisibility_of_element_located,
    invisibility_of_element_with_text,
    not_,
    presence_of_all_elements_located,
    presence_of_element_located,
    refreshed,
    staleness_of,
    text_to_be_present_in_element,
    text_to_be_present_in_element_value,
    title_is,
    visibility_of,
    visibility_of_element_located,
)
from .config import POLL_FREQUENCY, TIMEOUT_DEFAULT
from .exceptions import (
    ConditionError,
    ConditionTimeoutError,
    ConfigurationError,
    InvalidConditionError,
)
from .factory import ExpectedConditions
from .locator import Locator
from .log import init_logger
from .outcome import Outcome, Status
from .waits import (
    create_wait,
    wait_for_clickable,
    wait_for_element,
    wait_for_visible,
    wait_until,
    wait_until_not,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core types
    "Condition",
    "Outcome",
    "Status",
    "Locator",
    "ExpectedConditions",
    # Conditions
    "title_is",
    "presence_of_element_located",
    "visibility_of_element_located",
    "visibility_of",
    "presence_of_all_elements_located",
    "text_to_be_present_in_element",
    "text_to_be_present_in_element_value",
    "invisibility_of_element_located",
    "invisibility_of_element_with_text",
    "element_to_be_clickable",
    "staleness_of",
    "refreshed",
    "element_selection_state_is",
    "element_located_selection_state_to_be",
    "not_",
    # Exceptions
    "ConditionError",
    "InvalidConditionError",
    "ConfigurationError",
    "ConditionTimeoutError",
    # Waits
    "TIMEOUT_DEFAULT",
    "POLL_FREQUENCY",
    "create_wait",
    "wait_until",
    "wait_until_not",
    "wait_for_element",
    "wait_for_visible",
    "wait_for_clickable",
    # Logging
    "init_logger",
]
