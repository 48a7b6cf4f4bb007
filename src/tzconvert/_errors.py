"""Exception hierarchy for timezone conversion."""


class TimeConversionError(Exception):
    """Base exception for timezone conversion errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging.
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


class UnknownTimeZoneError(TimeConversionError, LookupError):
    """Raised when a timezone identifier is not known to the registry."""


class InvalidLocalTimeError(TimeConversionError, ValueError):
    """Raised when a wall-clock time is ambiguous or does not exist in a zone."""


# Sanitized user-facing error message constants
ERR_MSG_UNKNOWN_TIMEZONE = "unknown timezone identifier"
ERR_MSG_AMBIGUOUS_TIME = "ambiguous local time"
ERR_MSG_NONEXISTENT_TIME = "non-existent local time"
