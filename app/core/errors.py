# app/core/errors.py


class ReadingError(Exception):
    """Base class for failures that end a tarot reading request."""

    status_code = 500
    default_message = "Unknown error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ConfigurationError(ReadingError):
    default_message = "Service is not configured"


class CardServiceUnavailableError(ReadingError):
    default_message = "Failed to fetch tarot cards"


class InvalidCardDataError(ReadingError):
    default_message = "Invalid tarot card data"


class ModelCallError(ReadingError):
    default_message = "API error"


class EmptyReadingError(ReadingError):
    default_message = "No reading generated"
