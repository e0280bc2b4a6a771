"""Enum encoding.

Three shapes:
- raw-backed enums (a primitive mixed into the Enum class, e.g. IntEnum or
  ``class Kind(str, Enum)``) wrap to their raw value
- plain enums and field-less Variants wrap to their name
- Variants with a payload wrap to ``{name: payload}``

WrapCustomizable variants go through key_for_wrapping and wrap_property for
their payload fields; a dropped single field leaves an empty payload.
"""

from enum import Enum
from typing import TYPE_CHECKING, Any

from .customization import Variant
from .introspection import iter_fields
from .leaves import ABSENT, child_path, is_leaf, wrap_leaf

if TYPE_CHECKING:
    from .wrapper import Wrapper

RAW_VALUE_TYPES = (str, int, float, bytes)


def is_enumerated(value: Any) -> bool:
    return isinstance(value, (Enum, Variant))


def is_raw_backed(enum_type: type) -> bool:
    """True if the Enum class declares a primitive raw representation."""
    return issubclass(enum_type, RAW_VALUE_TYPES)


def raw_value(member: Enum) -> Any:
    """Raw value of a raw-backed member as a plain builtin."""
    value = member.value
    return wrap_leaf(value) if is_leaf(value) else value


def wrap_enum(wrapper: "Wrapper", value: Any, path: str = "") -> Any:
    """Encode an Enum member or a Variant instance."""
    if isinstance(value, Enum):
        if is_raw_backed(type(value)):
            return raw_value(value)
        return value.name

    name = type(value).variant_name
    fields = iter_fields(value, include_private=wrapper.session.options.include_private)
    if not fields:
        return name

    if len(fields) == 1:
        with wrapper.visiting(value, path):
            if wrapper.resolve_key(value, fields[0].name, child_path(path, name)) is None:
                payload = ABSENT
            else:
                payload = wrapper.wrap_field(value, fields[0], child_path(path, name))
        return {name: {} if payload is ABSENT else payload}

    return {name: wrapper.wrap_fields(value, child_path(path, name))}
