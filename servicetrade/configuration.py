"""
Connection settings for the ServiceTrade client.

A :class:`Configuration` holds the API base URL and the credentials
used to open a session.  It never talks to the network: problems such
as missing credentials are only reported when the session manager
calls :meth:`Configuration.validate` right before logging in.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Optional

from .exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://api.servicetrade.com/api"

# Environment variables read by Configuration.from_env
_ENV_VARS = {
    "base_url": "SERVICETRADE_BASE_URL",
    "username": "SERVICETRADE_USERNAME",
    "password": "SERVICETRADE_PASSWORD",
    "auth_token": "SERVICETRADE_AUTH_TOKEN",
    "timeout": "SERVICETRADE_TIMEOUT",
}


class Configuration:
    """Mutable settings shared by a client and its session manager.

    Parameters
    ----------
    base_url : str, optional
        Root of the REST API.  Defaults to the public ServiceTrade API.
    username : str, optional
        Login name used for ``POST /auth``.
    password : str, optional
        Password paired with ``username``.
    auth_token : str, optional
        A session token issued elsewhere.  When set, it is used as the
        session directly and no login request is made.
    timeout : float, optional
        Timeout in seconds for every HTTP request.  ``None`` waits
        indefinitely, matching ``requests``.

    Notes
    -----
    Exactly one authentication method may be configured: either the
    username/password pair or ``auth_token``.
    """

    _FIELDS = ("base_url", "username", "password", "auth_token", "timeout")

    def __init__(self, **options: Any) -> None:
        self.reset()
        self.configure(**options)

    def configure(self, **options: Any) -> "Configuration":
        """Set or overwrite the given fields and return ``self``."""
        unknown = set(options) - set(self._FIELDS)
        if unknown:
            raise ConfigurationError(
                "Unknown configuration option(s): %s" % ", ".join(sorted(unknown))
            )
        for name, value in options.items():
            setattr(self, name, value)
        return self

    def reset(self) -> "Configuration":
        """Restore the blank state: default base URL, no credentials."""
        self.base_url: str = DEFAULT_BASE_URL
        self.username: Optional[str] = None
        self.password: Optional[str] = None
        self.auth_token: Optional[str] = None
        self.timeout: Optional[float] = None
        return self

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "Configuration":
        """Build a configuration from ``SERVICETRADE_*`` environment variables."""
        environ = os.environ if environ is None else environ
        options: Dict[str, Any] = {}
        for name, var in _ENV_VARS.items():
            value = environ.get(var)
            if value:
                options[name] = value
        if "timeout" in options:
            try:
                options["timeout"] = float(options["timeout"])
            except ValueError as exc:
                raise ConfigurationError(
                    f"SERVICETRADE_TIMEOUT must be a number, got {options['timeout']!r}"
                ) from exc
        return cls(**options)

    @property
    def has_password_credentials(self) -> bool:
        return bool(self.username) and bool(self.password)

    def validate(self) -> None:
        """Check that exactly one authentication method is configured.

        Raises
        ------
        ConfigurationError
            If no credentials are set, only half of the username and
            password pair is set, both methods are set at once, or the
            base URL is empty.
        """
        if not self.base_url:
            raise ConfigurationError("base_url must be provided")
        partial = bool(self.username) != bool(self.password)
        if partial:
            raise ConfigurationError("username and password must be provided together")
        if self.has_password_credentials and self.auth_token:
            raise ConfigurationError(
                "Configure either username/password or auth_token, not both"
            )
        if not self.has_password_credentials and not self.auth_token:
            raise ConfigurationError(
                "No credentials configured; set username and password or auth_token"
            )

    def __repr__(self) -> str:
        # Never print secrets
        return (
            f"Configuration(base_url={self.base_url!r}, username={self.username!r}, "
            f"password={'***' if self.password else None}, "
            f"auth_token={'***' if self.auth_token else None}, timeout={self.timeout!r})"
        )
