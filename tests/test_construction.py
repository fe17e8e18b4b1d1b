"""TimeSpan construction tests."""

import copy
import pickle
from datetime import timedelta
from decimal import Decimal
from fractions import Fraction

import pytest

import pytimespan
from pytimespan import InvalidArgumentError, TimeSpan, Unit, UnsupportedUnitError

VALUES = [0, 1, 59, 3689, -42, 0.25, -1.5, 1e9]


class TestFactories:
    @pytest.mark.parametrize("value", VALUES)
    def test_from_seconds(self, value):
        assert TimeSpan.from_seconds(value).total_seconds() == value

    @pytest.mark.parametrize("value", VALUES)
    def test_from_minutes(self, value):
        assert TimeSpan.from_minutes(value).total_seconds() == value * 60

    @pytest.mark.parametrize("value", VALUES)
    def test_from_hours(self, value):
        assert TimeSpan.from_hours(value).total_seconds() == value * 3600

    def test_default_unit_is_seconds(self):
        assert TimeSpan(90).total_seconds() == 90.0

    def test_unit_argument(self):
        assert TimeSpan(2, Unit.MINUTES).total_seconds() == 120.0
        assert TimeSpan(2, Unit.HOURS).total_seconds() == 7200.0

    def test_unit_as_string(self):
        assert TimeSpan(2, "minutes").total_seconds() == 120.0

    def test_unknown_unit(self):
        with pytest.raises(UnsupportedUnitError, match="unsupported unit"):
            TimeSpan(2, "fortnights")

    def test_module_level_factories(self):
        assert pytimespan.from_seconds(30) == 30
        assert pytimespan.from_minutes(1) == 60
        assert pytimespan.from_hours(1) == 3600

    def test_from_timedelta(self):
        span = TimeSpan.from_timedelta(timedelta(hours=1, seconds=29))
        assert span.total_seconds() == 3629.0

    @pytest.mark.parametrize("value", [5, 5.0, "1m"])
    def test_from_timedelta_rejects_other_types(self, value):
        with pytest.raises(InvalidArgumentError, match="not a number"):
            TimeSpan.from_timedelta(value)

    def test_stored_as_float(self):
        assert type(TimeSpan(5).total_seconds()) is float


class TestNumericInputTypes:
    def test_decimal(self):
        assert TimeSpan(Decimal("1.5"), Unit.MINUTES) == 90

    def test_fraction(self):
        assert TimeSpan(Fraction(1, 4), Unit.HOURS) == 900

    def test_timespan(self):
        assert TimeSpan(TimeSpan(10), Unit.MINUTES) == 600

    @pytest.mark.parametrize("value", ["10", [10], object(), True])
    def test_rejects_non_numbers(self, value):
        with pytest.raises(InvalidArgumentError, match="not a number"):
            TimeSpan(value)


class TestNoneValue:
    @pytest.mark.parametrize(
        "factory",
        [
            TimeSpan,
            TimeSpan.from_seconds,
            TimeSpan.from_minutes,
            TimeSpan.from_hours,
            TimeSpan.from_timedelta,
            TimeSpan.parse,
            TimeSpan.parse_duration,
            pytimespan.from_seconds,
            pytimespan.from_minutes,
            pytimespan.from_hours,
            pytimespan.parse,
            pytimespan.parse_duration,
        ],
    )
    def test_none_is_rejected(self, factory):
        with pytest.raises(InvalidArgumentError, match="cannot be None"):
            factory(None)


class TestImmutability:
    def test_cannot_set_attributes(self):
        span = TimeSpan(5)
        with pytest.raises(AttributeError):
            span.extra = 1

    def test_pickle_preserves_value(self, one_hour_span):
        restored = pickle.loads(pickle.dumps(one_hour_span))
        assert isinstance(restored, TimeSpan)
        assert restored == one_hour_span

    def test_copy_preserves_value(self, one_hour_span):
        assert copy.copy(one_hour_span) == one_hour_span
        assert copy.deepcopy(one_hour_span) == one_hour_span
