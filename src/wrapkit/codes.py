"""Error code constants for wrapkit.

These constants prevent stringly-typed error codes and ensure
client code branches on the correct failure kinds.
"""

from enum import Enum


class WrapErrorCode(str, Enum):
    """Wrapping failure codes."""

    UNWRAPPABLE_TYPE = "UNWRAPPABLE_TYPE"
    KEY_COLLISION = "KEY_COLLISION"
    INVALID_TOP_LEVEL_RESULT = "INVALID_TOP_LEVEL_RESULT"
    DATE_FORMATTING_FAILURE = "DATE_FORMATTING_FAILURE"
    CYCLIC_REFERENCE = "CYCLIC_REFERENCE"
