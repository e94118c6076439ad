"""
Generic CRUD operations shared by every resource type.

Each operation is written once as a plain function taking the resource
class, which supplies the endpoint segment (``OBJECT_NAME``) and the
list array key (``LIST_KEY``).  Resource classes opt into the
operations they support by mixing in :class:`Create`, :class:`List`,
:class:`Update`, :class:`Delete` and :class:`Find`; the mixins only
forward to the functions below.

Every operation takes an optional ``client``.  Without one the
process-wide client from :func:`servicetrade.get_client` is used.
"""

from __future__ import annotations

import functools
from typing import Any, Callable, Dict, Mapping, Optional, Type, TypeVar

from .client import ServiceTradeClient
from .default import resolve
from .exceptions import ArgumentError
from .hydration import Resource, hydrate
from .list_response import ListResponse, parse_list

R = TypeVar("R", bound=Resource)

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 100


def _require_id(resource_id: Any) -> None:
    if resource_id is None or resource_id == "":
        raise ArgumentError("A resource id is required")


def _check_page(page: int, per_page: int) -> None:
    if isinstance(page, bool) or not isinstance(page, int) or page < 1:
        raise ArgumentError(f"page must be a positive integer, got {page!r}")
    if isinstance(per_page, bool) or not isinstance(per_page, int) or per_page < 1:
        raise ArgumentError(f"per_page must be a positive integer, got {per_page!r}")


def _list_key(resource_cls: Type[Resource]) -> str:
    return resource_cls.LIST_KEY or f"{resource_cls.OBJECT_NAME}s"


def find_resource(
    resource_cls: Type[R], resource_id: Any, *, client: Optional[ServiceTradeClient] = None
) -> R:
    """``GET /<segment>/<id>`` and hydrate the result."""
    _require_id(resource_id)
    path = ServiceTradeClient.build_path(resource_cls.OBJECT_NAME, resource_id)
    response = resolve(client).send("GET", path)
    return hydrate(resource_cls, response["data"])


def create_resource(
    resource_cls: Type[R],
    attrs: Optional[Mapping[str, Any]] = None,
    *,
    client: Optional[ServiceTradeClient] = None,
) -> R:
    """``POST /<segment>`` with ``attrs`` as the JSON body."""
    response = resolve(client).send("POST", resource_cls.OBJECT_NAME, body=dict(attrs or {}))
    return hydrate(resource_cls, response["data"])


def _fetch_page(
    resource_cls: Type[R],
    path: str,
    filters: Optional[Mapping[str, Any]],
    page: int,
    per_page: int,
    client: Optional[ServiceTradeClient],
) -> ListResponse[R]:
    _check_page(page, per_page)
    query: Dict[str, Any] = dict(filters or {})
    query["page"] = page
    query["per_page"] = per_page
    response = resolve(client).send("GET", path, query=query)
    return parse_list(resource_cls, response, _list_key(resource_cls), page, per_page)


def list_resources(
    resource_cls: Type[R],
    filters: Optional[Mapping[str, Any]] = None,
    page: int = DEFAULT_PAGE,
    per_page: int = DEFAULT_PER_PAGE,
    *,
    client: Optional[ServiceTradeClient] = None,
) -> ListResponse[R]:
    """``GET /<segment>`` with ``filters`` plus ``page`` and ``per_page``."""
    return _fetch_page(resource_cls, resource_cls.OBJECT_NAME, filters, page, per_page, client)


def list_scoped(
    resource_cls: Type[R],
    parent_segment: str,
    parent_id: Any,
    filters: Optional[Mapping[str, Any]] = None,
    page: int = DEFAULT_PAGE,
    per_page: int = DEFAULT_PER_PAGE,
    *,
    client: Optional[ServiceTradeClient] = None,
) -> ListResponse[R]:
    """``GET /<parent>/<parent_id>/<segment>``, e.g. the attachments of one job."""
    _require_id(parent_id)
    path = ServiceTradeClient.build_path(parent_segment, parent_id, resource_cls.OBJECT_NAME)
    return _fetch_page(resource_cls, path, filters, page, per_page, client)


def update_resource(
    resource_cls: Type[R],
    resource_id: Any,
    attrs: Optional[Mapping[str, Any]] = None,
    *,
    client: Optional[ServiceTradeClient] = None,
) -> R:
    """``PUT /<segment>/<id>`` and return the server's updated copy."""
    _require_id(resource_id)
    path = ServiceTradeClient.build_path(resource_cls.OBJECT_NAME, resource_id)
    response = resolve(client).send("PUT", path, body=dict(attrs or {}))
    return hydrate(resource_cls, response["data"])


def delete_resource(
    resource_cls: Type[Resource],
    resource_id: Any,
    *,
    client: Optional[ServiceTradeClient] = None,
) -> bool:
    """``DELETE /<segment>/<id>``.

    Any non-error response counts as success, whatever its body.
    """
    _require_id(resource_id)
    path = ServiceTradeClient.build_path(resource_cls.OBJECT_NAME, resource_id)
    resolve(client).delete(path)
    return True


class _ClassOrInstanceMethod:
    """Bind ``func(cls, resource_id, ...)`` two ways.

    On the class the caller passes the id (``Webhook.update(12, attrs)``);
    on an instance the instance's own id is used (``hook.update(attrs)``).
    """

    def __init__(self, func: Callable[..., Any]) -> None:
        self.func = func

    def __get__(self, instance: Optional[Resource], owner: type) -> Callable[..., Any]:
        if instance is None:
            return functools.partial(self.func, owner)
        return functools.partial(self.func, owner, instance.id)


class Find:
    @classmethod
    def find(cls, resource_id: Any, *, client: Optional[ServiceTradeClient] = None) -> Any:
        return find_resource(cls, resource_id, client=client)


class Create:
    @classmethod
    def create(
        cls,
        attrs: Optional[Mapping[str, Any]] = None,
        *,
        client: Optional[ServiceTradeClient] = None,
    ) -> Any:
        return create_resource(cls, attrs, client=client)


class List:
    @classmethod
    def list(
        cls,
        filters: Optional[Mapping[str, Any]] = None,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        *,
        client: Optional[ServiceTradeClient] = None,
    ) -> ListResponse[Any]:
        return list_resources(cls, filters, page, per_page, client=client)


class Update:
    @_ClassOrInstanceMethod
    def update(
        cls,
        resource_id: Any,
        attrs: Optional[Mapping[str, Any]] = None,
        *,
        client: Optional[ServiceTradeClient] = None,
    ) -> Any:
        return update_resource(cls, resource_id, attrs, client=client)


class Delete:
    @_ClassOrInstanceMethod
    def delete(
        cls, resource_id: Any, *, client: Optional[ServiceTradeClient] = None
    ) -> bool:
        return delete_resource(cls, resource_id, client=client)
