"""Service-layer exceptions."""


class SessionStateError(Exception):
    """Raised when a session is used before the step it depends on."""
