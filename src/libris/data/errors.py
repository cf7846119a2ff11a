"""Custom exceptions for scene definition loading."""


class DataError(Exception):
    """Base exception for the data layer."""


class DataValidationError(DataError):
    """Raised when scene definitions fail structural validation."""
