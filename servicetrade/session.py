"""
Session handling for the ServiceTrade API.

ServiceTrade authenticates with a classic login: ``POST /auth`` with a
username and password returns a session id which must accompany every
later request as the ``PHPSESSID`` cookie.  :class:`SessionManager`
owns that session.  It logs in lazily, hands out the cookie header, and
forgets the session when the transport reports an authorization
failure so that the next request logs in again.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import requests

from .configuration import Configuration
from .exceptions import ApiError, AuthenticationError, NetworkError

logger = logging.getLogger(__name__)

SESSION_COOKIE = "PHPSESSID"


@dataclass(frozen=True)
class Session:
    """An authenticated ServiceTrade session."""

    token: str
    authenticated_user_id: Optional[Any] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def headers(self) -> Dict[str, str]:
        """Return the cookie header that carries this session."""
        return {"Cookie": f"{SESSION_COOKIE}={self.token}"}


class SessionManager:
    """Owns the session token shared by every request of a client.

    Parameters
    ----------
    config : Configuration
        Settings providing the base URL and credentials.

    Notes
    -----
    The current session is a single mutable cell shared by all threads
    using the client, so reads and writes go through a lock.  Logging in
    happens outside the lock: two threads that find no session at the
    same time may both log in, and the last successful login wins.  The
    server treats repeated logins as harmless.
    """

    def __init__(self, config: Configuration) -> None:
        self.config = config
        self._session: Optional[Session] = None
        self._lock = threading.RLock()

    @property
    def session(self) -> Optional[Session]:
        with self._lock:
            return self._session

    @property
    def is_authenticated(self) -> bool:
        return self.session is not None

    # ------------------------------------------------------------------
    # State transitions
    # ------------------------------------------------------------------
    def ensure_session(self) -> Session:
        """Return the current session, logging in first if there is none.

        Raises
        ------
        ConfigurationError
            If the configuration holds no usable credentials.
        AuthenticationError
            If the server rejects the login or answers with something
            that is not a session.
        NetworkError
            If the auth endpoint cannot be reached.
        """
        current = self.session
        if current is not None:
            return current
        self.config.validate()
        if self.config.auth_token:
            new_session = Session(token=self.config.auth_token)
        else:
            new_session = self._login()
        with self._lock:
            self._session = new_session
        return new_session

    def invalidate(self) -> None:
        """Drop the current session; the next request will log in again."""
        with self._lock:
            if self._session is not None:
                logger.debug("Invalidating ServiceTrade session")
            self._session = None

    def credentials(self) -> Dict[str, str]:
        """Return the headers that carry the current session, if any."""
        current = self.session
        if current is None:
            return {}
        return current.headers()

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------
    def _auth_url(self) -> str:
        return f"{self.config.base_url.rstrip('/')}/auth"

    def _login(self) -> Session:
        """POST the configured username and password to ``/auth``."""
        url = self._auth_url()
        logger.debug("Logging in to %s as %s", url, self.config.username)
        try:
            response = requests.request(
                method="POST",
                url=url,
                json={"username": self.config.username, "password": self.config.password},
                headers={
                    "Accept": "application/json",
                    "Content-Type": "application/json",
                },
                timeout=self.config.timeout,
            )
        except requests.RequestException as exc:
            raise NetworkError(f"Failed to connect to auth server: {exc}") from exc

        if not response.ok:
            raise AuthenticationError(
                f"Authentication failed with status {response.status_code}: {response.text}"
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise AuthenticationError(
                "Authentication response was not valid JSON"
            ) from exc

        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, dict):
            raise AuthenticationError("Authentication response did not contain a data object")
        if data.get("authenticated") is False:
            raise AuthenticationError("Authentication was refused by the server")

        token = data.get("authToken") or payload.get("sessionId")
        if not token:
            raise AuthenticationError("Authentication response did not contain a session token")

        user = data.get("user")
        user_id = user.get("id") if isinstance(user, dict) else None
        logger.debug("Authenticated as user %s", user_id)
        return Session(token=str(token), authenticated_user_id=user_id)

    def logout(self) -> None:
        """End the server-side session with ``DELETE /auth`` and forget it.

        Does nothing when no session is open.  The local session is
        dropped even if the request fails.
        """
        if not self.is_authenticated:
            return
        url = self._auth_url()
        headers = {"Accept": "application/json"}
        headers.update(self.credentials())
        try:
            response = requests.request(
                method="DELETE", url=url, headers=headers, timeout=self.config.timeout
            )
        except requests.RequestException as exc:
            raise NetworkError(f"Failed to connect to {url}: {exc}") from exc
        finally:
            self.invalidate()
        # An expired session is already logged out
        if response.status_code >= 400 and response.status_code not in (401, 403):
            raise ApiError(response.status_code, response.text, url=url)
        logger.debug("Logged out of ServiceTrade")
