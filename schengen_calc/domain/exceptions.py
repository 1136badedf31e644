"""Domain semantic exceptions."""


class DomainError(Exception):
    """Base domain exception."""

    code = "DOMAIN_ERROR"


class InvalidInterval(DomainError):
    """Raised when a date range ends before it starts."""

    code = "INVALID_INTERVAL"


class InvalidDuration(DomainError):
    """Raised when a requested stay length or search horizon is out of range."""

    code = "INVALID_DURATION"
