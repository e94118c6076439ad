"""
External identifiers linking ServiceTrade entities to other systems.

Each entity can carry one identifier per external system.  The
``/externalid`` endpoints read and write those identifiers, and can
look an entity up by one of them.  Only the entity types in
:data:`VALID_ENTITY_TYPES` are supported; anything else is rejected
with :class:`~servicetrade.exceptions.ArgumentError` before a request
is sent.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote

from ..client import ServiceTradeClient
from ..default import resolve
from ..exceptions import ArgumentError, ProtocolError

VALID_ENTITY_TYPES = (
    "asset",
    "company",
    "contact",
    "contract",
    "deficiency",
    "location",
    "job",
    "jobitem",
    "libitem",
    "quote",
    "user",
)


def validate_entity_type(entity_type: Any) -> str:
    """Return ``entity_type`` if it is supported, else raise ``ArgumentError``.

    The check is exact: ``"Location"`` is not ``"location"``.
    """
    if not isinstance(entity_type, str) or entity_type not in VALID_ENTITY_TYPES:
        raise ArgumentError(
            "Invalid entity type %r. Must be one of: %s"
            % (entity_type, ", ".join(VALID_ENTITY_TYPES))
        )
    return entity_type


def _data(response: Any) -> Dict[str, Any]:
    data = response.get("data")
    if not isinstance(data, dict):
        raise ProtocolError("External id response 'data' is not an object")
    return data


class ExternalId:
    OBJECT_NAME = "externalid"
    VALID_ENTITY_TYPES = VALID_ENTITY_TYPES

    @classmethod
    def resource_url(cls) -> str:
        return cls.OBJECT_NAME

    @classmethod
    def _path(cls, entity_type: Any, *segments: Any) -> str:
        validate_entity_type(entity_type)
        # Identifiers are free text and may contain "/", "?" or "#"
        quoted = [quote(str(segment), safe="") for segment in segments]
        return ServiceTradeClient.build_path(cls.OBJECT_NAME, None, entity_type, *quoted)

    @classmethod
    def get_all(
        cls, entity_type: str, entity_id: Any, *, client: Optional[ServiceTradeClient] = None
    ) -> Optional[Dict[str, Any]]:
        """All identifiers of one entity, as ``{system: value}``."""
        path = cls._path(entity_type, entity_id)
        return _data(resolve(client).send("GET", path)).get("values")

    @classmethod
    def get(
        cls,
        entity_type: str,
        entity_id: Any,
        external_system: str,
        *,
        client: Optional[ServiceTradeClient] = None,
    ) -> Any:
        """The identifier one external system uses for an entity."""
        path = cls._path(entity_type, entity_id, external_system)
        return _data(resolve(client).send("GET", path)).get("value")

    @classmethod
    def find_entity(
        cls,
        entity_type: str,
        external_system: str,
        value: Any,
        *,
        client: Optional[ServiceTradeClient] = None,
    ) -> Dict[str, Any]:
        """Reverse lookup: the raw entity known to ``external_system`` as ``value``."""
        path = cls._path(entity_type, external_system, value)
        return _data(resolve(client).send("GET", path))

    @classmethod
    def set(
        cls,
        entity_type: str,
        entity_id: Any,
        external_system: str,
        params: Optional[Mapping[str, Any]] = None,
        *,
        client: Optional[ServiceTradeClient] = None,
    ) -> Any:
        """Create or replace an identifier (``POST``); returns the stored value."""
        path = cls._path(entity_type, entity_id, external_system)
        response = resolve(client).send("POST", path, body=dict(params or {}))
        return _data(response).get("value")

    @classmethod
    def update(
        cls,
        entity_type: str,
        entity_id: Any,
        external_system: str,
        params: Optional[Mapping[str, Any]] = None,
        *,
        client: Optional[ServiceTradeClient] = None,
    ) -> Any:
        """Update an existing identifier (``PUT``); returns the stored value."""
        path = cls._path(entity_type, entity_id, external_system)
        response = resolve(client).send("PUT", path, body=dict(params or {}))
        return _data(response).get("value")

    @classmethod
    def remove(
        cls,
        entity_type: str,
        entity_id: Any,
        external_system: str,
        *,
        client: Optional[ServiceTradeClient] = None,
    ) -> Any:
        """Clear an identifier by storing an empty value."""
        return cls.update(entity_type, entity_id, external_system, {"value": ""}, client=client)
