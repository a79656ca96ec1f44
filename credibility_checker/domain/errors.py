"""Error types raised by the credibility checker."""

from enum import Enum
from typing import Optional


class CredibilityCheckerError(Exception):
    """Base class for all credibility checker errors."""


class ConfigurationError(CredibilityCheckerError):
    """Raised when a required setting, such as the API key, is missing."""


class UpstreamStatusClass(str, Enum):
    """Coarse classification of a failed upstream request."""

    BAD_REQUEST = "bad_request"  # 400: invalid key or malformed request
    UNAUTHORIZED = "unauthorized"  # 401/403: key rejected or quota exceeded
    GENERIC = "generic"  # any other non-2xx status
    NETWORK = "network"  # no response at all


class UpstreamRequestError(CredibilityCheckerError):
    """Raised when the fact-check API answers with a non-2xx status or is unreachable."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        status_class: UpstreamStatusClass = UpstreamStatusClass.GENERIC,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.status_class = status_class

    @classmethod
    def from_status(cls, status_code: int) -> "UpstreamRequestError":
        """Build the error matching an HTTP status code."""
        if status_code == 400:
            return cls(
                "Invalid API key or malformed request",
                status_code=status_code,
                status_class=UpstreamStatusClass.BAD_REQUEST,
            )
        if status_code in (401, 403):
            return cls(
                "API key unauthorized or quota exceeded",
                status_code=status_code,
                status_class=UpstreamStatusClass.UNAUTHORIZED,
            )
        return cls(
            f"API error: {status_code}",
            status_code=status_code,
            status_class=UpstreamStatusClass.GENERIC,
        )


class UpstreamParseError(CredibilityCheckerError):
    """Raised when the fact-check API response body is not structurally valid."""


class PersistenceReadError(CredibilityCheckerError):
    """Raised when persisted history cannot be decoded.

    The history store recovers from this locally; it never reaches callers.
    """
