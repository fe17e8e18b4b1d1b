"""Exception hierarchy for time span construction and conversion."""


class TimeSpanError(Exception):
    """Base exception for time span errors.

    Provides dual messaging: a short user-facing message and internal
    details (the offending value, the rejected input) for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class InvalidArgumentError(TimeSpanError, ValueError):
    """Raised when a value is missing or has a type that cannot be a duration."""


class InvalidDurationError(TimeSpanError, ValueError):
    """Raised when text cannot be read as a duration."""


class UnsupportedUnitError(TimeSpanError, ValueError):
    """Raised when a unit name is not recognized."""


# User-facing error message constants
ERR_MSG_VALUE_REQUIRED = "value cannot be None"
ERR_MSG_NOT_A_NUMBER = "value is not a number"
ERR_MSG_INVALID_DURATION = "invalid duration value"
ERR_MSG_UNSUPPORTED_UNIT = "unsupported unit"
ERR_MSG_TEMPLATE_REQUIRED = "format template cannot be None"
