"""
Exception Classes for the Pexels Client

This module defines the errors raised by pexelkit. Every failure inside the
client surfaces immediately to the caller as one of these types; nothing is
retried or swallowed.

All exceptions derive from PexelkitError so callers can catch the whole
family with a single except clause.
"""

from typing import Optional


class PexelkitError(Exception):
    """
    Base class for all pexelkit errors.

    Attributes:
        message (str): Explanation of the error
    """

    def __init__(self, message: str = "An error occurred in pexelkit.") -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(PexelkitError):
    """
    Exception raised when the client is misconfigured.

    Raised for an empty or missing API token and for configuration files
    that cannot be read.
    """

    def __init__(self, message: str = "pexelkit is not configured correctly.") -> None:
        super().__init__(message)


class NetworkError(PexelkitError):
    """
    Exception raised when the HTTP transport fails.

    Covers connection refusals, DNS failures, TLS errors and timeouts. The
    underlying requests exception is chained as ``__cause__``.

    Attributes:
        message (str): Explanation of the error
        url (Optional[str]): The URL that was being requested
    """

    def __init__(
        self,
        message: str = "The request could not be completed.",
        url: Optional[str] = None,
    ) -> None:
        if url:
            full_message = f"{message} URL: {url}"
        else:
            full_message = message

        super().__init__(full_message)
        self.message = message
        self.url = url


class ProtocolError(PexelkitError):
    """
    Exception raised when a response does not honour the API contract.

    Raised for non-2xx statuses, a missing or malformed
    ``X-Ratelimit-Remaining`` header, and bodies that are not valid JSON
    or do not decode into the expected record.

    Attributes:
        message (str): Explanation of the error
        status_code (Optional[int]): HTTP status of the offending response
    """

    def __init__(
        self,
        message: str = "The API returned an unexpected response.",
        status_code: Optional[int] = None,
    ) -> None:
        if status_code is not None:
            full_message = f"{message} Status: {status_code}"
        else:
            full_message = message

        super().__init__(full_message)
        self.message = message
        self.status_code = status_code


class NotFoundError(ProtocolError):
    """Exception raised when the API answers 404 for a photo or video ID."""

    def __init__(self, message: str = "The requested resource was not found.") -> None:
        super().__init__(message, status_code=404)


class EmptyResultError(PexelkitError):
    """
    Exception raised when a random-selection helper lands on an empty page.

    The curated and popular feeds have a finite number of pages, so a page
    index drawn at random can point past the end of the feed.
    """

    def __init__(self, message: str = "The selected page contains no items.") -> None:
        super().__init__(message)
