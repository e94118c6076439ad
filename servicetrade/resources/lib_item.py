"""Library items: the catalogue of parts and services job items refer to."""

from __future__ import annotations

from typing import Optional

from ..client import ServiceTradeClient
from ..hydration import Resource
from ..list_response import ListResponse
from ..operations import DEFAULT_PAGE, DEFAULT_PER_PAGE, Create, Delete, Find, List, Update


class LibItem(Create, List, Update, Delete, Find, Resource):
    OBJECT_NAME = "libitem"
    LIST_KEY = "libItems"
    FIELDS = ("name", "type", "code", "is_generic", "created", "updated")

    @classmethod
    def by_type(
        cls,
        item_type: str,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        *,
        client: Optional[ServiceTradeClient] = None,
    ) -> ListResponse["LibItem"]:
        return cls.list({"type": item_type}, page, per_page, client=client)

    @classmethod
    def by_code(
        cls,
        code: str,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        *,
        client: Optional[ServiceTradeClient] = None,
    ) -> ListResponse["LibItem"]:
        return cls.list({"code": code}, page, per_page, client=client)

    @classmethod
    def by_name(
        cls,
        name: str,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        *,
        client: Optional[ServiceTradeClient] = None,
    ) -> ListResponse["LibItem"]:
        return cls.list({"name": name}, page, per_page, client=client)

    @classmethod
    def generic_items(
        cls,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        *,
        client: Optional[ServiceTradeClient] = None,
    ) -> ListResponse["LibItem"]:
        return cls.list({"is_generic": True}, page, per_page, client=client)

    @classmethod
    def non_generic_items(
        cls,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        *,
        client: Optional[ServiceTradeClient] = None,
    ) -> ListResponse["LibItem"]:
        return cls.list({"is_generic": False}, page, per_page, client=client)

    def is_generic_item(self) -> bool:
        """Generic items stand in for ad-hoc parts with no catalogue entry."""
        return self.is_generic is True
