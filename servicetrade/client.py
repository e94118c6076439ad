"""
Client implementation for the ServiceTrade REST API.

This module defines the :class:`ServiceTradeClient` class which logs in
to ServiceTrade with a username and password, keeps the resulting
session cookie, and performs HTTP requests against the ServiceTrade
API endpoints.  When a request is rejected because the session has
expired the client logs in again and repeats the request once.

Usage
-----

.. code-block:: python

    from servicetrade import ServiceTradeClient

    client = ServiceTradeClient(username="me@example.com", password="secret")

    # Every successful response is wrapped in a ``data`` envelope
    payload = client.get("webhook", query={"page": 1, "per_page": 50})
    for hook in payload["data"]["webhooks"]:
        print(hook["hookUrl"])

Most callers will not use the client directly but go through the
resource classes in :mod:`servicetrade.resources`, which turn the
payloads into :class:`~servicetrade.hydration.Resource` objects.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

import requests

from .configuration import Configuration
from .exceptions import ApiError, DecodeError, NetworkError, ProtocolError
from .session import Session, SessionManager

logger = logging.getLogger(__name__)

Query = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]

# Statuses that mean the session is no longer accepted
_AUTH_FAILURE_STATUSES = frozenset({401, 403})


class ServiceTradeClient:
    """A client for the ServiceTrade REST API.

    Parameters
    ----------
    config : Configuration, optional
        Settings to use.  A blank configuration is created when omitted.
    **options
        Configuration fields (``base_url``, ``username``, ``password``,
        ``auth_token``, ``timeout``) applied on top of ``config``.

    Notes
    -----
    Credentials are checked lazily: constructing a client without them
    is allowed, and :class:`~servicetrade.exceptions.ConfigurationError`
    is raised by the first request instead.
    """

    def __init__(self, config: Optional[Configuration] = None, **options: Any) -> None:
        self.config = config if config is not None else Configuration()
        if options:
            self.config.configure(**options)
        self.session_manager = SessionManager(self.config)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    def configure(self, **options: Any) -> "ServiceTradeClient":
        """Update the configuration.  Any open session is discarded."""
        self.config.configure(**options)
        self.session_manager.invalidate()
        return self

    def reset(self) -> "ServiceTradeClient":
        """Clear the configuration and return to the unauthenticated state."""
        self.config.reset()
        self.session_manager.invalidate()
        return self

    def logout(self) -> None:
        """End the current session on the server, if one is open."""
        self.session_manager.logout()

    # ------------------------------------------------------------------
    # HTTP request helpers
    # ------------------------------------------------------------------
    def _prepare_url(self, path: str) -> str:
        """Build the full request URL from a relative or absolute path.

        Absolute URLs (starting with ``http://`` or ``https://``) are
        returned as-is; anything else is joined to ``base_url``.
        """
        if path.startswith("http://") or path.startswith("https://"):
            return path
        clean_path = path.lstrip("/")
        return f"{self.config.base_url.rstrip('/')}/{clean_path}"

    @staticmethod
    def _encode_query(query: Optional[Query]) -> List[Tuple[str, str]]:
        """Flatten query parameters into ordered ``(key, value)`` pairs.

        ``None`` values are dropped, booleans are sent as ``true`` or
        ``false`` and sequences are joined with commas, which is how
        ServiceTrade expects multi-valued filters such as
        ``serviceLineIds``.
        """
        if not query:
            return []
        items = query.items() if isinstance(query, Mapping) else query
        pairs: List[Tuple[str, str]] = []
        for key, value in items:
            if value is None:
                continue
            if isinstance(value, bool):
                value = "true" if value else "false"
            elif isinstance(value, (list, tuple, set, frozenset)):
                value = ",".join(str(v) for v in value)
            pairs.append((str(key), str(value)))
        return pairs

    def _dispatch(
        self,
        method: str,
        url: str,
        params: List[Tuple[str, str]],
        body: Optional[Any],
        session: Session,
    ) -> requests.Response:
        """Send one HTTP request carrying the cookie of ``session``."""
        headers: Dict[str, str] = {"Accept": "application/json"}
        if body is not None:
            headers["Content-Type"] = "application/json"
        headers.update(session.headers())
        logger.debug("%s %s params=%s", method, url, params)
        try:
            return requests.request(
                method=method,
                url=url,
                params=params or None,
                json=body,
                headers=headers,
                timeout=self.config.timeout,
            )
        except requests.RequestException as exc:
            raise NetworkError(f"Failed to connect to {url}: {exc}") from exc

    @staticmethod
    def _error_body(response: requests.Response) -> Any:
        """Return the decoded JSON error body, or the raw text."""
        try:
            return response.json()
        except ValueError:
            return response.text

    def send(
        self,
        method: str,
        path: str,
        query: Optional[Query] = None,
        body: Optional[Any] = None,
        *,
        envelope: bool = True,
    ) -> Any:
        """Perform an HTTP request against the ServiceTrade API.

        The request is sent with the current session, logging in first
        when necessary.  If the server answers 401 or 403 the session is
        dropped, a new one is opened and the request is sent one more
        time.  No other failure is retried.

        Parameters
        ----------
        method : str
            The HTTP verb, such as ``"GET"``, ``"POST"``, ``"PUT"`` or ``"DELETE"``.
        path : str
            The endpoint path relative to the base URL, e.g. ``"webhook/12"``.
        query : mapping or iterable of pairs, optional
            Query parameters, kept in the given order.
        body : object, optional
            A JSON-serialisable request body.
        envelope : bool, optional
            When true (the default) the response must be a JSON object
            with a top-level ``data`` member.  When false the decoded
            body is returned as-is, or ``None`` if it is empty or not
            JSON.

        Returns
        -------
        Any
            The decoded response payload.

        Raises
        ------
        ApiError
            For any error status, including a second authorization failure.
        NetworkError
            If the request could not be sent or timed out.
        DecodeError
            If the body of a successful response is not valid JSON.
        ProtocolError
            If the JSON lacks the ``data`` envelope.
        ConfigurationError, AuthenticationError
            If a session cannot be opened.
        """
        method = method.upper()
        session = self.session_manager.ensure_session()
        url = self._prepare_url(path)
        params = self._encode_query(query)

        response = self._dispatch(method, url, params, body, session)
        if response.status_code in _AUTH_FAILURE_STATUSES:
            logger.debug(
                "%s %s returned %s; logging in again", method, url, response.status_code
            )
            self.session_manager.invalidate()
            session = self.session_manager.ensure_session()
            response = self._dispatch(method, url, params, body, session)
            if response.status_code in _AUTH_FAILURE_STATUSES:
                self.session_manager.invalidate()

        if response.status_code >= 400:
            raise ApiError(response.status_code, self._error_body(response), url=url)

        return self._decode(response, url, envelope)

    @staticmethod
    def _decode(response: requests.Response, url: str, envelope: bool) -> Any:
        if not envelope:
            if not response.content:
                return None
            try:
                return response.json()
            except ValueError:
                return None

        if not response.content:
            raise ProtocolError(f"Empty response body from {url}")
        try:
            payload = response.json()
        except ValueError as exc:
            raise DecodeError(f"Invalid JSON in response from {url}: {exc}") from exc
        if not isinstance(payload, dict) or "data" not in payload:
            raise ProtocolError(f"Response from {url} has no 'data' envelope")
        return payload

    # ------------------------------------------------------------------
    # Public convenience methods
    # ------------------------------------------------------------------
    def get(self, path: str, *, query: Optional[Query] = None) -> Any:
        """Perform a GET request.

        See :meth:`send` for full parameter documentation.
        """
        return self.send("GET", path, query=query)

    def post(self, path: str, *, body: Optional[Any] = None, query: Optional[Query] = None) -> Any:
        """Perform a POST request.

        See :meth:`send` for full parameter documentation.
        """
        return self.send("POST", path, query=query, body=body)

    def put(self, path: str, *, body: Optional[Any] = None, query: Optional[Query] = None) -> Any:
        """Perform a PUT request.

        See :meth:`send` for full parameter documentation.
        """
        return self.send("PUT", path, query=query, body=body)

    def delete(self, path: str, *, query: Optional[Query] = None) -> Any:
        """Perform a DELETE request.

        The response body is not required to carry the ``data``
        envelope.  See :meth:`send` for full parameter documentation.
        """
        return self.send("DELETE", path, query=query, envelope=False)

    # ------------------------------------------------------------------
    # URL construction helpers
    # ------------------------------------------------------------------
    @staticmethod
    def build_path(segment: str, resource_id: Optional[Any] = None, *extra: Any) -> str:
        """Join an endpoint segment, optional id and further segments.

        >>> ServiceTradeClient.build_path("job", 123, "attachment")
        'job/123/attachment'
        """
        if not segment:
            raise ValueError("segment must not be empty")
        parts = [segment.strip("/")]
        if resource_id is not None:
            parts.append(str(resource_id))
        parts.extend(str(part).strip("/") for part in extra)
        return "/".join(parts)
