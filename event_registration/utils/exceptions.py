"""Custom exception classes."""
from typing import Optional


class EventsApiError(Exception):
    """Raised when the events API call fails or returns an unusable response."""

    def __init__(self, message: str, status_code: Optional[int] = None, server_error: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.server_error = server_error


class CompanyDisabledError(EventsApiError):
    """Raised when the events API denies access to a disabled company."""
    pass


class EventNotFoundError(Exception):
    """Raised when no event in the company's list matches the requested ID."""
    pass
