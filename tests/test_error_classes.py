"""Error class hierarchy tests."""

import pytest

from pytimespan._errors import (
    InvalidArgumentError,
    InvalidDurationError,
    TimeSpanError,
    UnsupportedUnitError,
)


class TestTimeSpanErrorBase:
    def test_str_returns_user_message(self):
        err = TimeSpanError("user msg", "internal detail")
        assert str(err) == "user msg"

    def test_internal_returns_details(self):
        err = TimeSpanError("user msg", "internal detail")
        assert err.internal() == "internal detail"

    def test_internal_defaults_to_user_message(self):
        err = TimeSpanError("same message")
        assert err.internal() == "same message"

    def test_wrapped_exception(self):
        cause = ValueError("root cause")
        err = TimeSpanError("user msg", wrapped=cause)
        assert err.wrapped is cause

    def test_is_exception(self):
        assert isinstance(TimeSpanError("test"), Exception)


class TestErrorHierarchy:
    ALL_ERROR_CLASSES = [
        InvalidArgumentError,
        InvalidDurationError,
        UnsupportedUnitError,
    ]

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_is_subclass_of_timespan_error(self, cls):
        assert issubclass(cls, TimeSpanError)

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_is_value_error(self, cls):
        assert issubclass(cls, ValueError)

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_instantiation(self, cls):
        err = cls("test message", "internal detail")
        assert str(err) == "test message"
        assert err.internal() == "internal detail"

    def test_package_exports_errors(self):
        import pytimespan

        assert pytimespan.InvalidArgumentError is InvalidArgumentError
        assert pytimespan.InvalidDurationError is InvalidDurationError
        assert pytimespan.UnsupportedUnitError is UnsupportedUnitError
        assert pytimespan.TimeSpanError is TimeSpanError
