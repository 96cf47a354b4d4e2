"""Exception hierarchy for Internet Time conversion."""


class InternetTimeError(Exception):
    """Base exception for Internet Time conversion errors.

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


class InvalidDetailError(InternetTimeError):
    """Raised when a detail level is not a non-negative integer."""


class InvalidTimestampError(InternetTimeError):
    """Raised when a timestamp is not a finite real number."""


# Sanitized user-facing error message constants
ERR_MSG_INVALID_DETAIL = "detail level must be a non-negative integer"
ERR_MSG_INVALID_TIMESTAMP = "timestamp must be a finite number of milliseconds"
