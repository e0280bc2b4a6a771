"""Collection encoding: sequences, sets and custom-keyed maps."""

from collections.abc import Collection, Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Set

from .customization import WrappableKey
from .enums import is_raw_backed
from .errors import KeyCollisionError, UnwrappableTypeError
from .leaves import ABSENT, index_path, key_path

if TYPE_CHECKING:
    from .wrapper import Wrapper


def is_keyed_map(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_collection(value: Any) -> bool:
    """True for sized, iterable containers other than mappings and text."""
    return isinstance(value, Collection) and not isinstance(value, (Mapping, str, bytes, bytearray))


def to_key(key: Any, path: str = "") -> str:
    """Convert a map key to its output string.

    Accepted keys: WrappableKey implementations, enums (raw value or member
    name), str and int. bool keys are rejected as ambiguous.

    Raises:
        UnwrappableTypeError: If the key type has no string form
    """
    if isinstance(key, WrappableKey):
        converted = key.to_wrappable_key()
        if not isinstance(converted, str):
            raise UnwrappableTypeError(
                type(key).__name__, path,
                reason=f"to_wrappable_key() returned {type(converted).__name__}, expected str",
            )
        return converted
    if isinstance(key, Enum):
        return str(key.value) if is_raw_backed(type(key)) else key.name
    if isinstance(key, str):
        return str.__str__(key)
    if isinstance(key, int) and not isinstance(key, bool):
        return str(int(key))
    raise UnwrappableTypeError(
        type(key).__name__, path, reason="map keys must be str, int, Enum or WrappableKey"
    )


def wrap_sequence(wrapper: "Wrapper", values: Collection, path: str = "") -> List[Any]:
    """Wrap each element in iteration order, dropping absent ones."""
    wrapped: List[Any] = []
    for i, item in enumerate(values):
        result = wrapper.wrap(item, index_path(path, i))
        if result is not ABSENT:
            wrapped.append(result)
    return wrapped


def wrap_mapping(wrapper: "Wrapper", mapping: Mapping, path: str = "") -> Dict[str, Any]:
    """Wrap each value under its converted key, dropping absent values.

    Raises:
        KeyCollisionError: If two distinct keys convert to the same string
    """
    wrapped: Dict[str, Any] = {}
    used: Set[str] = set()
    for key, value in mapping.items():
        out_key = to_key(key, path)
        if out_key in used:
            raise KeyCollisionError(out_key, type(mapping).__name__, path)
        used.add(out_key)
        result = wrapper.wrap(value, key_path(path, out_key))
        if result is not ABSENT:
            wrapped[out_key] = result
    return wrapped
