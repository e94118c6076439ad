"""
Conversion of ServiceTrade JSON objects into resource instances.

ServiceTrade sends camel-cased keys (``hookUrl``, ``isGeneric``).  The
client exposes them under Python names (``hook_url``, ``is_generic``)
using one fixed transform, :func:`underscore`, applied to every key of
every resource.  Hydration is shallow: values that are themselves
objects or arrays (``job``, ``vendor``, ``entityEvents``) are kept as
the plain dicts and lists that came off the wire.
"""

from __future__ import annotations

import re
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple, Type, TypeVar

from .exceptions import ProtocolError

_UPPER_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")

R = TypeVar("R", bound="Resource")


def underscore(key: str) -> str:
    """Translate a wire key to its Python name.

    >>> underscore("hookUrl")
    'hook_url'
    >>> underscore("per_page")
    'per_page'
    """
    return _UPPER_BOUNDARY.sub("_", key).lower()


def camelize(name: str) -> str:
    """Inverse of :func:`underscore` for names it produced.

    >>> camelize("include_changesets")
    'includeChangesets'
    """
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def hydrate_attributes(json: Mapping[str, Any]) -> Dict[str, Any]:
    """Rename every key of ``json`` with :func:`underscore`; values are untouched."""
    return {underscore(str(key)): value for key, value in json.items()}


class _Field:
    """Read-only accessor for a declared resource field."""

    def __init__(self, name: str) -> None:
        self.name = name

    def __get__(self, instance: Optional["Resource"], owner: type) -> Any:
        if instance is None:
            return self
        return instance._attributes.get(self.name)

    def __set__(self, instance: "Resource", value: Any) -> None:
        raise AttributeError(f"{type(instance).__name__}.{self.name} is read-only")


class Resource:
    """Base class of every ServiceTrade resource.

    Subclasses declare their endpoint and their typed surface::

        class Webhook(Resource):
            OBJECT_NAME = "webhook"
            LIST_KEY = "webhooks"
            FIELDS = ("hook_url", "enabled", ...)

    Every name in ``FIELDS`` becomes a read-only attribute that returns
    ``None`` when the payload did not include it.  Keys the server sends
    beyond ``FIELDS`` are kept as well and can be read with
    :meth:`get` or ``resource["name"]``.

    Instances are immutable; operations that change a resource on the
    server return a new instance.
    """

    #: Endpoint path segment, e.g. ``"jobitem"``
    OBJECT_NAME: str = ""
    #: Key holding the array in list responses, e.g. ``"jobItems"``
    LIST_KEY: Optional[str] = None
    #: Declared field names, in Python naming
    FIELDS: Tuple[str, ...] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        for name in cls.FIELDS:
            existing = getattr(cls, name, None)
            if existing is None or isinstance(existing, _Field):
                setattr(cls, name, _Field(name))

    def __init__(self, data: Optional[Mapping[str, Any]] = None) -> None:
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise TypeError(
                f"{type(self).__name__} expects a JSON object, got {type(data).__name__}"
            )
        object.__setattr__(self, "_attributes", hydrate_attributes(data))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} instances are read-only")

    @classmethod
    def resource_url(cls) -> str:
        return cls.OBJECT_NAME

    @property
    def id(self) -> Any:
        return self._attributes.get("id")

    @property
    def uri(self) -> Optional[str]:
        return self._attributes.get("uri")

    @property
    def attributes(self) -> Dict[str, Any]:
        """A copy of every hydrated field, keyed by Python name."""
        return dict(self._attributes)

    def get(self, name: str, default: Any = None) -> Any:
        """Return any hydrated field, declared or not.

        ``name`` may be given in either naming convention.
        """
        return self._attributes.get(underscore(name), default)

    def to_dict(self, camel_case: bool = False) -> Dict[str, Any]:
        if camel_case:
            return {camelize(key): value for key, value in self._attributes.items()}
        return self.attributes

    def __getitem__(self, name: str) -> Any:
        return self._attributes[underscore(name)]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and underscore(name) in self._attributes

    def __iter__(self) -> Iterator[str]:
        return iter(self._attributes)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._attributes == other._attributes

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id!r}>"


def hydrate(resource_cls: Type[R], json: Any) -> R:
    """Build a ``resource_cls`` instance from a decoded JSON object.

    ``None`` yields an empty instance.  Never performs I/O.

    Raises
    ------
    ProtocolError
        If ``json`` is neither ``None`` nor a JSON object.
    """
    if json is None:
        return resource_cls()
    if not isinstance(json, Mapping):
        raise ProtocolError(
            f"Expected a JSON object for {resource_cls.__name__}, got {type(json).__name__}"
        )
    return resource_cls(json)
