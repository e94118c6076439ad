"""
The process-wide default client.

Resource classes use this client unless an explicit ``client=`` is
passed.  Configure it once at start-up::

    import servicetrade

    servicetrade.configure(username="me@example.com", password="secret")

and call :func:`reset` between tests so that no configuration or
session leaks from one test into the next.
"""

from __future__ import annotations

import threading
from typing import Any, Optional

from .client import ServiceTradeClient

_lock = threading.Lock()
_client: Optional[ServiceTradeClient] = None


def get_client() -> ServiceTradeClient:
    """Return the default client, creating an unconfigured one on first use."""
    global _client
    with _lock:
        if _client is None:
            _client = ServiceTradeClient()
        return _client


def configure(**options: Any) -> ServiceTradeClient:
    """Set fields on the default client's configuration."""
    return get_client().configure(**options)


def reset() -> ServiceTradeClient:
    """Blank the default configuration and drop its session."""
    return get_client().reset()


def resolve(client: Optional[ServiceTradeClient]) -> ServiceTradeClient:
    return client if client is not None else get_client()
