"""Exception classes for ISD archive interactions.

This module defines a hierarchy of exception classes for handling
failures while locating, downloading, or decoding station files.
"""

from __future__ import annotations


class ArchiveError(Exception):
    """Error during an ISD archive request or while decoding its payload.

    Raised when a request fails due to network issues, a missing
    station, server errors, or a payload that cannot be decoded.
    """

    def __init__(self, code: int, message: str, url: str | None = None) -> None:
        """Initialize the exception.

        Args:
            code: HTTP status code or 0 when no response was received
            message: Human-readable error message
            url: Requested URL, for debugging
        """
        super().__init__(f"[{code}] {message}")
        self.code: int = code
        self.message: str = message
        self.url: str | None = url

    @property
    def is_client_error(self) -> bool:
        """Check if this is a client-side error (4xx).

        Returns:
            True for 400-499 status codes
        """
        return 400 <= self.code < 500

    @property
    def is_server_error(self) -> bool:
        """Check if this is a server-side error (5xx).

        Returns:
            True for 500-599 status codes
        """
        return self.code >= 500

    @classmethod
    def from_status(
        cls, status_code: int, message: str, url: str | None = None
    ) -> ArchiveError:
        """Create the error matching an HTTP status code.

        Args:
            status_code: HTTP status code
            message: Human-readable error message
            url: Requested URL

        Returns:
            Appropriate ArchiveError subclass
        """
        if status_code == 404:
            return StationNotFoundError(message, url=url)
        return cls(status_code, message, url)


class NetworkError(ArchiveError):
    """Raised when a network issue prevents reaching the archive."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        """Initialize with network error details.

        Args:
            message: Description of the network error
            original_error: The original exception that was caught
        """
        super().__init__(0, message)
        self.original_error = original_error


class StationNotFoundError(ArchiveError):
    """Raised when no station file exists for the requested WBAN and year."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(404, message, url)


class DecodeError(ArchiveError):
    """Raised when a downloaded station file cannot be decompressed or decoded."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        """Initialize with decoding error details.

        Args:
            message: Description of the decoding error
            original_error: The original exception that was caught
        """
        super().__init__(0, message)
        self.original_error = original_error
