"""Exceptions raised by the wrapping engine.

Every error carries a WrapErrorCode and the field path leading to the
offending value, e.g. ``crew[1].name`` or ``tags["x"]``. An empty path
denotes the root object.
"""

from typing import Optional

from wrapkit.codes import WrapErrorCode


def describe_path(path: str) -> str:
    """Render a field path for error messages."""
    return path if path else "<root>"


class WrapError(ValueError):
    """Base exception for wrapping failures."""
    code: WrapErrorCode

    def __init__(self, message: str, path: str = ""):
        self.path = path
        super().__init__(message)


class UnwrappableTypeError(WrapError):
    """Raised when a value matches none of the recognized shapes."""
    code = WrapErrorCode.UNWRAPPABLE_TYPE

    def __init__(self, value_type: str, path: str = "", reason: Optional[str] = None):
        self.value_type = value_type
        msg = f"Cannot wrap value of type {value_type} at {describe_path(path)}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg, path)


class KeyCollisionError(WrapError):
    """Raised when two fields or map entries resolve to the same key."""
    code = WrapErrorCode.KEY_COLLISION

    def __init__(self, key: str, container_type: str, path: str = ""):
        self.key = key
        self.container_type = container_type
        super().__init__(
            f"Duplicate key '{key}' while wrapping {container_type} at {describe_path(path)}",
            path,
        )


class InvalidTopLevelResultError(WrapError):
    """Raised when a top-level call does not produce a dict."""
    code = WrapErrorCode.INVALID_TOP_LEVEL_RESULT

    def __init__(self, result_type: str, path: str = ""):
        self.result_type = result_type
        super().__init__(
            f"Top-level object must wrap to a dict, got {result_type}",
            path,
        )


class DateFormattingError(WrapError):
    """Raised when the injected date formatter cannot render a value."""
    code = WrapErrorCode.DATE_FORMATTING_FAILURE

    def __init__(self, value_type: str, path: str = "", reason: Optional[str] = None):
        self.value_type = value_type
        msg = f"Date formatter failed for {value_type} at {describe_path(path)}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg, path)


class CyclicReferenceError(WrapError):
    """Raised when cycle detection finds an object nested inside itself."""
    code = WrapErrorCode.CYCLIC_REFERENCE

    def __init__(self, value_type: str, path: str = "", first_seen: str = ""):
        self.value_type = value_type
        self.first_seen = first_seen
        super().__init__(
            f"Cyclic reference to {value_type} at {describe_path(path)} "
            f"(already being wrapped at {describe_path(first_seen)})",
            path,
        )
