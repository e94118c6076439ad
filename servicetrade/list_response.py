"""
Paginated collections returned by ServiceTrade list endpoints.

A list endpoint answers with::

    {"data": {"<listKey>": [...], "total": 2, "page": 1, "per_page": 100}}

The name of the array key differs per endpoint (``webhooks``,
``jobItems``, ``servicelines``) and is not described by the payload
itself, so callers pass it in.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Iterator, List, Mapping, Optional, Type, TypeVar

from .exceptions import ProtocolError
from .hydration import Resource, hydrate

T = TypeVar("T", bound=Resource)


@dataclass(frozen=True)
class ListResponse(Generic[T]):
    """One page of hydrated resources.

    Only the requested page is held; fetch the next one by calling
    ``list`` again with ``page=response.page + 1``.
    """

    items: List[T] = field(default_factory=list)
    page: int = 1
    per_page: int = 100
    total: int = 0
    total_pages: Optional[int] = None

    @property
    def data(self) -> List[T]:
        """Alias of :attr:`items`."""
        return self.items

    @property
    def has_next_page(self) -> bool:
        if self.total_pages is not None:
            return self.page < self.total_pages
        return self.page * self.per_page < self.total

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> T:
        return self.items[index]


def _int_or(value: Any, default: int) -> int:
    """Coerce a pagination value, keeping ``default`` for absent or junk values."""
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def parse_list(
    resource_cls: Type[T],
    payload: Any,
    array_key: str,
    page: int = 1,
    per_page: int = 100,
) -> ListResponse[T]:
    """Turn a list payload into a :class:`ListResponse`.

    Parameters
    ----------
    resource_cls : type
        Resource class each element is hydrated into.
    payload : dict
        The decoded response body.
    array_key : str
        Key under ``payload["data"]`` holding the elements.
    page, per_page : int
        The pagination parameters of the request, used when the
        envelope omits them.

    Raises
    ------
    ProtocolError
        If ``data`` is missing or not an object, or if ``array_key``
        holds something other than an array.

    Notes
    -----
    Every element is kept even when the server sends more than was
    asked for; ``per_page`` then grows to the number of items.  A
    reported page number below 1 is replaced by the requested one.
    """
    data = payload.get("data") if isinstance(payload, Mapping) else None
    if not isinstance(data, Mapping):
        raise ProtocolError("List response has no 'data' object")

    raw_items = data.get(array_key)
    if raw_items is None:
        raw_items = []
    elif not isinstance(raw_items, list):
        raise ProtocolError(
            f"Expected an array under data.{array_key}, got {type(raw_items).__name__}"
        )

    items = [hydrate(resource_cls, item) for item in raw_items]
    reported_page = _int_or(data.get("page"), page)
    page = reported_page if reported_page >= 1 else page
    per_page = max(_int_or(data.get("per_page", data.get("perPage")), per_page), len(items))
    total_pages = data.get("totalPages")
    return ListResponse(
        items=items,
        page=page,
        per_page=per_page,
        total=_int_or(data.get("total"), len(items)),
        total_pages=_int_or(total_pages, 0) if total_pages is not None else None,
    )
