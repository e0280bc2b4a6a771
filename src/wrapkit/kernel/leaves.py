"""Leaf classification and the absent-value marker.

A leaf is a value that is already a terminal scalar: it is emitted as-is
(or as its plain string/bytes form) and never decomposed further.
"""

from decimal import Decimal
from pathlib import PurePath
from typing import Any, Tuple
from urllib.parse import ParseResult, SplitResult
from uuid import UUID

from pydantic import AnyUrl


class _Absent:
    """Marker for "no value": the owning map entry is omitted."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()

# Emitted unchanged
SCALAR_TYPES: Tuple[type, ...] = (str, bool, int, float, Decimal, bytes)

# Emitted as their string form
STRING_FORM_TYPES: Tuple[type, ...] = (UUID, PurePath, AnyUrl)

# Emitted as their reassembled URL
URL_PARTS_TYPES: Tuple[type, ...] = (SplitResult, ParseResult)


def is_leaf(value: Any) -> bool:
    """Return True if value needs no further decomposition."""
    return isinstance(
        value, SCALAR_TYPES + STRING_FORM_TYPES + URL_PARTS_TYPES + (bytearray, memoryview)
    )


def wrap_leaf(value: Any) -> Any:
    """Convert a leaf to its scalar form.

    Subclasses of the builtin scalars are narrowed to the builtin type so the
    produced tree holds plain values only. Mutable buffers are copied.
    """
    if isinstance(value, URL_PARTS_TYPES):
        return value.geturl()
    if isinstance(value, STRING_FORM_TYPES):
        return str(value)
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    for scalar_type in SCALAR_TYPES:
        if isinstance(value, scalar_type):
            return value if type(value) is scalar_type else scalar_type(value)
    return value


def child_path(path: str, name: str) -> str:
    """Path of a named field below path."""
    return f"{path}.{name}" if path else name


def index_path(path: str, index: int) -> str:
    """Path of a sequence element below path."""
    return f"{path}[{index}]"


def key_path(path: str, key: str) -> str:
    """Path of a map entry below path."""
    return f'{path}["{key}"]'
