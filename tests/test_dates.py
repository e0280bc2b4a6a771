"""Tests for the date codec."""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from typing import Any

import pytest

from wrapkit import (
    DateFormattingError,
    IsoDateFormatter,
    StrftimeDateFormatter,
    UnwrappableTypeError,
    wrap,
)
from wrapkit.kernel.dates import wrap_date


@dataclass
class Event:
    name: str
    at: Any


LAUNCH = datetime(1969, 7, 16, 13, 32, tzinfo=timezone.utc)


class TestWithFormatter:
    """A configured formatter renders temporal values to strings."""

    def test_iso_formatter(self):
        result = wrap(Event(name="launch", at=LAUNCH), date_formatter=IsoDateFormatter())
        assert result == {"name": "launch", "at": "1969-07-16T13:32:00+00:00"}

    def test_iso_formatter_date(self):
        result = wrap(Event(name="launch", at=date(1969, 7, 16)), date_formatter=IsoDateFormatter())
        assert result["at"] == "1969-07-16"

    def test_strftime_formatter(self):
        result = wrap(Event(name="launch", at=LAUNCH), date_formatter=StrftimeDateFormatter("%Y/%m/%d"))
        assert result["at"] == "1969/07/16"

    def test_callable_formatter(self):
        result = wrap(Event(name="launch", at=LAUNCH), date_formatter=lambda d: d.strftime("%H:%M"))
        assert result["at"] == "13:32"

    def test_formatter_shared_by_nested_values(self):
        @dataclass
        class Schedule:
            events: list

        schedule = Schedule(events=[Event("a", date(2020, 1, 1)), Event("b", date(2020, 1, 2))])
        result = wrap(schedule, date_formatter=IsoDateFormatter())
        assert [e["at"] for e in result["events"]] == ["2020-01-01", "2020-01-02"]

    def test_time_of_day(self):
        result = wrap(Event(name="alarm", at=time(7, 30)), date_formatter=IsoDateFormatter())
        assert result["at"] == "07:30:00"


class TestWithoutFormatter:
    """Without a formatter, only absolute values have a numeric form."""

    def test_aware_datetime_to_timestamp(self):
        assert wrap(Event(name="launch", at=LAUNCH))["at"] == LAUNCH.timestamp()

    def test_naive_datetime_read_as_utc(self):
        naive = datetime(1970, 1, 1, 0, 1)
        assert wrap(Event(name="epoch", at=naive))["at"] == 60.0

    def test_timedelta_to_seconds(self):
        assert wrap(Event(name="burn", at=timedelta(minutes=2)))["at"] == 120.0

    def test_bare_date_unwrappable(self):
        with pytest.raises(UnwrappableTypeError, match="no date formatter") as exc_info:
            wrap(Event(name="launch", at=date(1969, 7, 16)))
        assert exc_info.value.path == "at"


class TestFormattingFailure:
    """Formatter failures surface as DateFormattingError."""

    def test_formatter_raises(self):
        def broken(value):
            raise RuntimeError("boom")

        with pytest.raises(DateFormattingError, match="boom") as exc_info:
            wrap(Event(name="launch", at=LAUNCH), date_formatter=broken)
        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert exc_info.value.path == "at"

    def test_formatter_returns_non_string(self):
        with pytest.raises(DateFormattingError, match="expected str"):
            wrap_date(LAUNCH, lambda d: 42)

    def test_iso_formatter_rejects_non_temporal_values(self):
        with pytest.raises(DateFormattingError):
            wrap_date("not a date", IsoDateFormatter())

    def test_pattern_string_is_not_a_formatter(self):
        with pytest.raises(DateFormattingError, match="StrftimeDateFormatter") as exc_info:
            wrap(Event(name="launch", at=LAUNCH), date_formatter="%Y-%m-%d")
        assert exc_info.value.path == "at"
