"""
Python client for interacting with the ServiceTrade REST API.

This package provides a :class:`ServiceTradeClient` that logs in with a
username and password, keeps the session cookie, and logs in again on
its own when the session expires.  On top of it, resource classes such
as :class:`Webhook` or :class:`JobItem` create, list, update and delete
ServiceTrade entities and expose the returned JSON as Python objects.

Examples
--------

```python
import servicetrade
from servicetrade import Webhook

servicetrade.configure(username="YOUR_USERNAME", password="YOUR_PASSWORD")

hooks = Webhook.list(page=1, per_page=50)
for hook in hooks:
    print(hook.id, hook.hook_url)

hook = Webhook.create({"hookUrl": "https://example.com/hook", "enabled": True})
hook = hook.update({"enabled": False})
hook.delete()
```

Passing ``client=`` to any operation uses that client instead of the
process-wide default, which is useful when talking to several accounts.
"""

from .client import ServiceTradeClient
from .configuration import DEFAULT_BASE_URL, Configuration
from .default import configure, get_client, reset
from .exceptions import (
    ApiError,
    ArgumentError,
    AuthenticationError,
    ConfigurationError,
    DecodeError,
    NetworkError,
    ProtocolError,
    ServiceTradeError,
)
from .hydration import Resource, camelize, hydrate, underscore
from .list_response import ListResponse, parse_list
from .resources import (
    VALID_ENTITY_TYPES,
    Appointment,
    Attachment,
    ExternalId,
    Job,
    JobItem,
    LibItem,
    ServiceLine,
    ServiceRequest,
    Webhook,
)
from .session import Session, SessionManager

__all__ = [
    "ServiceTradeClient",
    "Configuration",
    "DEFAULT_BASE_URL",
    "configure",
    "get_client",
    "reset",
    "Session",
    "SessionManager",
    "Resource",
    "hydrate",
    "underscore",
    "camelize",
    "ListResponse",
    "parse_list",
    "ServiceTradeError",
    "ConfigurationError",
    "AuthenticationError",
    "ApiError",
    "NetworkError",
    "DecodeError",
    "ProtocolError",
    "ArgumentError",
    "Appointment",
    "Attachment",
    "ExternalId",
    "Job",
    "JobItem",
    "LibItem",
    "ServiceLine",
    "ServiceRequest",
    "VALID_ENTITY_TYPES",
    "Webhook",
]

__version__ = "0.1.0"
