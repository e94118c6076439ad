"""Line items (labour, parts, materials) recorded against a job."""

from __future__ import annotations

from typing import Any, Optional

from ..client import ServiceTradeClient
from ..hydration import Resource
from ..list_response import ListResponse
from ..operations import DEFAULT_PAGE, DEFAULT_PER_PAGE, Create, Delete, Find, List, Update


class JobItem(Create, List, Update, Delete, Find, Resource):
    OBJECT_NAME = "jobitem"
    LIST_KEY = "jobItems"
    FIELDS = (
        "description",
        "cost",
        "used_on",
        "created",
        "updated",
        # Related objects
        "job",
        "lib_item",
        "vendor",
        # Present on some items only
        "quantity",
        "unit_price",
        "total",
        "type",
        "notes",
    )

    @classmethod
    def by_job(
        cls,
        job_id: Any,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        *,
        client: Optional[ServiceTradeClient] = None,
    ) -> ListResponse["JobItem"]:
        return cls.list({"job_id": job_id}, page, per_page, client=client)

    @classmethod
    def by_lib_item(
        cls,
        lib_item_id: Any,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        *,
        client: Optional[ServiceTradeClient] = None,
    ) -> ListResponse["JobItem"]:
        return cls.list({"lib_item_id": lib_item_id}, page, per_page, client=client)

    @classmethod
    def used_on_date(
        cls,
        date: Any,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        *,
        client: Optional[ServiceTradeClient] = None,
    ) -> ListResponse["JobItem"]:
        return cls.list({"used_on": date}, page, per_page, client=client)

    @classmethod
    def used_between(
        cls,
        start_date: Any,
        end_date: Any,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        *,
        client: Optional[ServiceTradeClient] = None,
    ) -> ListResponse["JobItem"]:
        filters = {"used_on_begin": start_date, "used_on_end": end_date}
        return cls.list(filters, page, per_page, client=client)

    def calculate_total(self) -> Optional[float]:
        """``quantity * unit_price``, or ``None`` if either is missing."""
        if self.quantity is None or self.unit_price is None:
            return None
        return self.quantity * self.unit_price

    def total_cost(self) -> Optional[float]:
        """The reported total, else the cost, else the calculated total."""
        for value in (self.total, self.cost):
            if value is not None:
                return value
        return self.calculate_total()
