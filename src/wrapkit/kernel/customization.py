"""Customization capabilities a type may opt into.

- WrapCustomizable: rename or drop fields, override single field values, or
  replace the whole encoding of an instance.
- WrappableKey: allow instances to be used as keys of wrapped dicts.
- Variant: base for sum types whose cases carry a payload.
"""

from typing import Any, ClassVar, Optional, Protocol, runtime_checkable

from .keys import KeyStyle, format_key


class WrapCustomizable:
    """Mixin for types that customize how they are wrapped.

    Every hook has a default that keeps the standard behaviour, so subclasses
    only override what they need.
    """

    wrap_key_style: ClassVar[KeyStyle] = KeyStyle.MATCH_PROPERTY_NAME

    def key_for_wrapping(self, property_name: str) -> Optional[str]:
        """Return the output key for a field, or None to drop the field.

        The default applies ``wrap_key_style``. Overrides can call
        ``super().key_for_wrapping(name)`` to fall back to it.
        """
        return format_key(property_name, self.wrap_key_style)

    def wrap_property(
        self,
        property_name: str,
        original_value: Any,
        context: Any,
        date_formatter: Any,
    ) -> Any:
        """Return a replacement encoding for one field, or None for the default."""
        return None

    def wrap(self, context: Any = None, date_formatter: Any = None) -> Any:
        """Return the full encoding of this instance (None means absent).

        The engine only calls this when a subclass overrides it; the default
        runs the standard field-by-field encoding.
        """
        from .wrapper import WrapSession, Wrapper, active_hook

        frame = active_hook()
        if frame is not None and frame.owner is self:
            # Called from an override of this instance: stay in the running session
            return frame.wrapper.assemble_fields(self, frame.path)
        return Wrapper(WrapSession(context=context, date_formatter=date_formatter)).wrap_fields(self)


def overrides_full_wrap(value: Any) -> bool:
    """True if value's type replaces the default ``WrapCustomizable.wrap``."""
    return isinstance(value, WrapCustomizable) and type(value).wrap is not WrapCustomizable.wrap


@runtime_checkable
class WrappableKey(Protocol):
    """Objects usable as keys of wrapped dicts."""

    def to_wrappable_key(self) -> str:
        ...


def _default_variant_name(class_name: str) -> str:
    return class_name[:1].lower() + class_name[1:]


class Variant:
    """Base for payload-bearing enumerated values.

    Each case of a sum type is a subclass of a common Variant base; its
    fields are the payload::

        class Occupation(Variant):
            pass

        @dataclass
        class Developer(Occupation, name="developer"):
            favorite_language_name: str

        @dataclass
        class Lawyer(Occupation):
            pass

    ``Developer("Swift")`` wraps to ``{"developer": "Swift"}`` and
    ``Lawyer()`` to ``"lawyer"``.
    """

    variant_name: ClassVar[str] = ""

    def __init_subclass__(cls, name: Optional[str] = None, **kwargs: Any):
        super().__init_subclass__(**kwargs)
        cls.variant_name = name if name is not None else _default_variant_name(cls.__name__)
