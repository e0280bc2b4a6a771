"""Recursive wrapping engine.

Turns an object graph into plain dicts, lists and scalars. Dispatch per
value, first match wins:

1. full override (WrapCustomizable.wrap overridden by the type)
2. None -> ABSENT (the owning entry is omitted)
3. Enum / Variant
4. leaf scalar
5. date, time, datetime, timedelta
6. mapping
7. sequence / set
8. introspectable object (dataclass, pydantic model, plain object)
9. otherwise UnwrappableTypeError

Enums come before leaves so that IntEnum / str-mixin members are reduced to
their raw value instead of passing through as enum instances.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, NamedTuple, Optional, Set

from pydantic import BaseModel, ConfigDict

from .containers import is_collection, is_keyed_map, wrap_mapping, wrap_sequence
from .customization import WrapCustomizable, overrides_full_wrap
from .dates import DateFormatterLike, is_temporal, wrap_date
from .enums import is_enumerated, wrap_enum
from .errors import CyclicReferenceError, KeyCollisionError, UnwrappableTypeError
from .introspection import FieldDescriptor, is_introspectable, is_named_tuple, iter_fields
from .leaves import ABSENT, child_path, is_leaf, wrap_leaf


class WrapOptions(BaseModel):
    """Engine switches shared by one wrapping call."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    detect_cycles: bool = False  # Raise CyclicReferenceError instead of recursing forever
    include_private: bool = False  # Keep "_"-prefixed attributes of plain objects


@dataclass(frozen=True)
class WrapSession:
    """Read-only state threaded through every recursive call."""
    context: Any = None
    date_formatter: Optional[DateFormatterLike] = None
    options: WrapOptions = field(default_factory=WrapOptions)


class HookFrame(NamedTuple):
    """A customization hook currently running inside a Wrapper."""
    wrapper: "Wrapper"
    owner: Any  # instance whose hook is running
    path: str  # path of owner


_active_hook: ContextVar[Optional[HookFrame]] = ContextVar("wrapkit_active_hook", default=None)


def active_hook() -> Optional[HookFrame]:
    """The innermost running hook of this thread or task, if any."""
    return _active_hook.get()


def _field_holding(owner: Any, value: Any) -> Optional[str]:
    """Name of the field of owner that holds value (by identity)."""
    if value is owner or not is_introspectable(owner):
        return None
    for descriptor in iter_fields(owner, include_private=True):
        if descriptor.value is value:
            return descriptor.name
    return None


class Wrapper:
    """Wraps values for one session."""

    def __init__(self, session: Optional[WrapSession] = None):
        self.session = session or WrapSession()
        self._active: Dict[int, str] = {}  # id(obj) -> path, only with detect_cycles

    @contextmanager
    def visiting(self, value: Any, path: str) -> Iterator[None]:
        """Mark value as being wrapped for the duration of the block."""
        if not self.session.options.detect_cycles:
            yield
            return
        marker = id(value)
        if marker in self._active:
            raise CyclicReferenceError(type(value).__name__, path, first_seen=self._active[marker])
        self._active[marker] = path
        try:
            yield
        finally:
            del self._active[marker]

    @contextmanager
    def running_hook(self, owner: Any, path: str) -> Iterator[None]:
        """Expose this wrapper to wrap_value() calls made by owner's hooks."""
        token = _active_hook.set(HookFrame(self, owner, path))
        try:
            yield
        finally:
            _active_hook.reset(token)

    def wrap(self, value: Any, path: str = "") -> Any:
        """Wrap any value; returns ABSENT for "no value".

        Raises:
            WrapError: On the first failure anywhere below value
        """
        session = self.session
        if overrides_full_wrap(value):
            with self.visiting(value, path), self.running_hook(value, path):
                result = value.wrap(session.context, session.date_formatter)
            return ABSENT if result is None else result
        if value is None or value is ABSENT:
            return ABSENT
        if is_enumerated(value):
            return wrap_enum(self, value, path)
        if is_leaf(value):
            return wrap_leaf(value)
        if is_temporal(value):
            return wrap_date(value, session.date_formatter, path)
        if is_keyed_map(value):
            with self.visiting(value, path):
                return wrap_mapping(self, value, path)
        if is_collection(value) and not is_named_tuple(value):
            with self.visiting(value, path):
                return wrap_sequence(self, value, path)
        if is_introspectable(value):
            return self.wrap_fields(value, path)
        raise UnwrappableTypeError(type(value).__name__, path)

    def wrap_nested(self, owner: Any, value: Any, path: str, name: Optional[str] = None) -> Any:
        """Wrap a value reached from inside owner's hook.

        The path is extended with ``name``, or with the field of owner holding
        value when no name is given.
        """
        if name is None:
            name = _field_holding(owner, value)
        return self.wrap(value, child_path(path, name) if name else path)

    def wrap_fields(self, obj: Any, path: str = "") -> Dict[str, Any]:
        """Wrap an object field by field into a dict.

        Raises:
            KeyCollisionError: If two fields resolve to the same key
            CyclicReferenceError: If obj is already being wrapped (detect_cycles)
        """
        with self.visiting(obj, path):
            return self.assemble_fields(obj, path)

    def assemble_fields(self, obj: Any, path: str = "") -> Dict[str, Any]:
        """Build the dict for obj without marking it as visited.

        Keys come from ``key_for_wrapping`` for WrapCustomizable types and are
        the field names otherwise. Dropped keys never touch their value.
        """
        wrapped: Dict[str, Any] = {}
        used: Set[str] = set()

        for descriptor in iter_fields(obj, include_private=self.session.options.include_private):
            key = self.resolve_key(obj, descriptor.name, path)
            if key is None:
                continue
            if key in used:
                raise KeyCollisionError(key, type(obj).__name__, path)
            used.add(key)

            result = self.wrap_field(obj, descriptor, path)
            if result is not ABSENT:
                wrapped[key] = result

        return wrapped

    def resolve_key(self, obj: Any, name: str, path: str = "") -> Optional[str]:
        """Output key for field ``name`` of obj; None drops the field.

        Raises:
            UnwrappableTypeError: If key_for_wrapping returns a non-string
        """
        if not isinstance(obj, WrapCustomizable):
            return name
        key = obj.key_for_wrapping(name)
        if key is not None and not isinstance(key, str):
            raise UnwrappableTypeError(
                type(obj).__name__, child_path(path, name),
                reason=f"key_for_wrapping() returned {type(key).__name__}, expected str",
            )
        return key

    def wrap_field(self, obj: Any, descriptor: FieldDescriptor, path: str = "") -> Any:
        """Wrap one field of obj, preferring a wrap_property override."""
        field_path = child_path(path, descriptor.name)
        if isinstance(obj, WrapCustomizable):
            session = self.session
            with self.running_hook(obj, path):
                result = obj.wrap_property(
                    descriptor.name, descriptor.value, session.context, session.date_formatter
                )
            if result is not None:
                return result
        return self.wrap(descriptor.value, field_path)
