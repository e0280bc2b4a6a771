"""Date codec: temporal values to scalars.

Formatting is delegated to an injected formatter. Any object with a
``format(value) -> str`` method works, as does a plain callable. Without a
formatter, values with an absolute numeric representation become numbers.
"""

from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Callable, Optional, Protocol, Union, runtime_checkable

from .errors import DateFormattingError, UnwrappableTypeError

TEMPORAL_TYPES = (datetime, date, time, timedelta)


@runtime_checkable
class DateFormatter(Protocol):
    """Anything able to render a temporal value as a string."""

    def format(self, value: Any) -> str:
        ...


DateFormatterLike = Union[DateFormatter, Callable[[Any], str]]


class IsoDateFormatter:
    """Formats dates and times as ISO 8601 strings."""

    def __init__(self, timespec: str = "auto"):
        self.timespec = timespec

    def format(self, value: Any) -> str:
        if isinstance(value, datetime):
            return value.isoformat(timespec=self.timespec)
        if isinstance(value, time):
            return value.isoformat(timespec=self.timespec)
        if isinstance(value, date):
            return value.isoformat()
        raise TypeError(f"IsoDateFormatter cannot format {type(value).__name__}")


class StrftimeDateFormatter:
    """Formats dates and times with a strftime pattern, e.g. ``%Y-%m-%d``."""

    def __init__(self, pattern: str):
        self.pattern = pattern

    def format(self, value: Any) -> str:
        return value.strftime(self.pattern)


def is_temporal(value: Any) -> bool:
    return isinstance(value, TEMPORAL_TYPES)


def _render(formatter: DateFormatterLike, value: Any) -> Any:
    if isinstance(formatter, DateFormatter):
        return formatter.format(value)
    return formatter(value)


def wrap_date(value: Any, date_formatter: Optional[DateFormatterLike], path: str = "") -> Any:
    """Encode a temporal value.

    With a formatter the result is its string output. Without one:
    - datetime -> POSIX timestamp (naive values are read as UTC)
    - timedelta -> total seconds
    - date / time -> UnwrappableTypeError (no absolute numeric form)

    Raises:
        DateFormattingError: If the formatter is a str, raises, or returns a non-string
        UnwrappableTypeError: If no formatter is set and no numeric form exists
    """
    type_name = type(value).__name__
    if isinstance(date_formatter, str):
        # str has a format() method but renders the pattern itself
        raise DateFormattingError(
            type_name, path, reason="date_formatter is a str; use StrftimeDateFormatter(pattern)"
        )
    if date_formatter is not None and not isinstance(value, timedelta):
        try:
            rendered = _render(date_formatter, value)
        except Exception as e:
            raise DateFormattingError(type_name, path, reason=str(e)) from e
        if not isinstance(rendered, str):
            raise DateFormattingError(
                type_name, path, reason=f"formatter returned {type(rendered).__name__}, expected str"
            )
        return rendered

    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.timestamp()
    if isinstance(value, timedelta):
        return value.total_seconds()
    raise UnwrappableTypeError(
        type_name, path, reason="no date formatter configured and no numeric representation"
    )
