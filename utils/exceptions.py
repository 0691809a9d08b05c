"""
Exception types raised while processing a chat request.
"""
from utils.constants import ErrorMessages


class ConfigurationError(Exception):
    """Required configuration is missing or malformed."""
    pass


class ClientInputError(Exception):
    """The caller sent something we cannot process. Reported back as a 400."""
    pass


class InvalidPayloadError(ClientInputError):
    """Request body is not valid JSON."""

    def __init__(self, message: str = ErrorMessages.INVALID_JSON):
        super().__init__(message)


class ChatValidationError(ClientInputError):
    """Required chat fields are missing or empty."""

    def __init__(self, message: str = ErrorMessages.MISSING_FIELDS):
        super().__init__(message)


class GenerationError(Exception):
    """Completion service returned no usable text."""

    def __init__(self, message: str = ErrorMessages.EMPTY_COMPLETION):
        super().__init__(message)
