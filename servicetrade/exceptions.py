"""
Custom exception types for the ServiceTrade API client.

These exceptions allow callers to distinguish between a client that
was never given usable credentials, a login the server rejected, a
business error returned by an endpoint, and failures below the HTTP
layer (connection problems, undecodable or oddly shaped bodies).
"""

from __future__ import annotations

from typing import Any, Optional


class ServiceTradeError(Exception):
    """Base exception for all ServiceTrade client errors."""


class ConfigurationError(ServiceTradeError):
    """Raised when the client configuration is missing or inconsistent."""


class AuthenticationError(ServiceTradeError):
    """Raised when the login request is rejected or returns no session."""


class ApiError(ServiceTradeError):
    """Raised when a ServiceTrade endpoint returns an error status.

    Parameters
    ----------
    status : int
        The HTTP status code of the response.
    body : object, optional
        The decoded JSON body when the server sent one, otherwise the
        raw response text.
    url : str, optional
        The URL that produced the error, used in the message only.
    """

    def __init__(self, status: int, body: Any = None, url: Optional[str] = None) -> None:
        self.status = status
        self.body = body
        self.url = url
        target = f" for {url}" if url else ""
        super().__init__(f"{status} Error{target}: {body}")


class NetworkError(ServiceTradeError):
    """Raised when the HTTP exchange itself fails (connection, timeout)."""


class DecodeError(ServiceTradeError):
    """Raised when a response body is not valid JSON."""


class ProtocolError(ServiceTradeError):
    """Raised when valid JSON does not have the expected ``{"data": ...}`` shape."""


class ArgumentError(ServiceTradeError, ValueError):
    """Raised for invalid arguments detected before any request is made."""
