"""
Failure taxonomy for discovery and detail service calls.

Every failure is terminal for the call that raised it; callers decide how
it surfaces.
"""

from typing import Optional


class TripServiceError(Exception):
    """Base class for failures talking to the discovery/detail service."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TransportError(TripServiceError):
    """Raised on a non-2xx HTTP status or a network failure."""

    def __init__(self, status_code: Optional[int], detail: Optional[str] = None):
        if status_code is not None:
            message = f"HTTP error! status: {status_code}"
        else:
            message = f"Network error: {detail or 'request failed'}"
        super().__init__(message)
        self.status_code = status_code


class ApplicationError(TripServiceError):
    """Raised when the service answers with success=false."""

    pass


class ParseError(ApplicationError):
    """Raised when the response envelope is malformed."""

    pass
