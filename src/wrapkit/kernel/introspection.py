"""Field discovery for composite objects.

Produces ordered (name, value) Field Descriptors for an instance. Fields
declared on a class come before those inherited from its ancestors
(most-derived first); within one class, declaration order is kept.

Supported shapes, first match wins:
1. ``__wrap_fields__()`` returning (name, value) pairs
2. dataclass instances
3. pydantic models
4. named tuples
5. plain objects (``__slots__`` along the MRO, then ``__dict__`` attributes
   ordered by annotating class, unannotated ones in ``__dict__`` order)
"""

import dataclasses
import inspect
from types import ModuleType
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Sequence

from pydantic import BaseModel


class FieldDescriptor(NamedTuple):
    """One stored field of an instance."""
    name: str
    value: Any


def _dataclass_names(klass: type) -> Optional[List[str]]:
    if not dataclasses.is_dataclass(klass):
        return None
    return [f.name for f in dataclasses.fields(klass)]


def _pydantic_names(klass: type) -> Optional[List[str]]:
    if not (isinstance(klass, type) and issubclass(klass, BaseModel)) or klass is BaseModel:
        return None
    return list(klass.model_fields)


def _slot_names(klass: type) -> Optional[List[str]]:
    slots = klass.__dict__.get("__slots__")
    if slots is None:
        return None
    if isinstance(slots, str):
        slots = [slots]
    return [name for name in slots if name not in ("__dict__", "__weakref__")]


def _most_derived_first(cls: type, declared: Callable[[type], Optional[List[str]]]) -> List[str]:
    """Order field names by declaring class, most-derived first.

    ``declared(klass)`` returns every field visible on klass (own and
    inherited) or None when klass does not declare fields of this kind.
    """
    chain = [klass for klass in cls.__mro__ if declared(klass) is not None]
    ordered: List[str] = []
    seen = set()
    for i, klass in enumerate(chain):
        # Fields visible on any class further down the MRO
        inherited = set()
        for later in chain[i + 1:]:
            inherited.update(declared(later) or ())
        for name in declared(klass) or ():
            if name in inherited or name in seen:
                continue
            ordered.append(name)
            seen.add(name)
    return ordered


def _own_slots_first(cls: type) -> List[str]:
    ordered: List[str] = []
    for klass in cls.__mro__:
        for name in _slot_names(klass) or ():
            if name not in ordered:
                ordered.append(name)
    return ordered


def _own_annotations(klass: type) -> Dict[str, Any]:
    try:
        return inspect.get_annotations(klass)
    except NameError:
        # Deferred annotation naming an undefined type
        return {}


def _annotated_first(cls: type, attributes: Dict[str, Any]) -> List[str]:
    """Instance attributes ordered by the class annotating them, most-derived first.

    Unannotated attributes follow in ``__dict__`` order.
    """
    ordered: List[str] = []
    for klass in cls.__mro__:
        for name in _own_annotations(klass):
            if name in attributes and name not in ordered:
                ordered.append(name)
    ordered.extend(name for name in attributes if name not in ordered)
    return ordered


def is_introspectable(value: Any) -> bool:
    """True if value is an instance whose fields can be enumerated."""
    if isinstance(value, (type, ModuleType)) or inspect.isroutine(value):
        return False
    if hasattr(type(value), "__wrap_fields__"):
        return True
    if dataclasses.is_dataclass(value) or isinstance(value, BaseModel):
        return True
    if is_named_tuple(value):
        return True
    return hasattr(value, "__dict__") or bool(_own_slots_first(type(value)))


def iter_fields(obj: Any, include_private: bool = False) -> List[FieldDescriptor]:
    """Return the Field Descriptors of an instance.

    Args:
        obj: Instance to introspect
        include_private: Keep ``_``-prefixed attributes of plain objects

    Returns:
        Ordered list of FieldDescriptor, most-derived class fields first
    """
    cls = type(obj)

    custom = getattr(cls, "__wrap_fields__", None)
    if custom is not None:
        return [FieldDescriptor(name, value) for name, value in obj.__wrap_fields__()]

    if dataclasses.is_dataclass(obj):
        names: Sequence[str] = _most_derived_first(cls, _dataclass_names)
        return [FieldDescriptor(name, getattr(obj, name)) for name in names]

    if isinstance(obj, BaseModel):
        names = _most_derived_first(cls, _pydantic_names)
        return [FieldDescriptor(name, getattr(obj, name)) for name in names]

    if is_named_tuple(obj):
        return [FieldDescriptor(name, value) for name, value in zip(cls._fields, obj)]

    descriptors: List[FieldDescriptor] = []
    seen = set()
    for name in _own_slots_first(cls):
        if hasattr(obj, name):
            descriptors.append(FieldDescriptor(name, getattr(obj, name)))
            seen.add(name)
    attributes = getattr(obj, "__dict__", {})
    for name in _annotated_first(cls, attributes):
        if name not in seen:
            descriptors.append(FieldDescriptor(name, attributes[name]))
    if not include_private:
        descriptors = [d for d in descriptors if not d.name.startswith("_")]
    return descriptors


def is_named_tuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(type(value), "_fields")
