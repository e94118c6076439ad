"""
Service requests: work to be done, tied to jobs, appointments and assets.

A service request moves through the statuses in :data:`VALID_STATUSES`.
Besides the generic CRUD operations the class offers list shortcuts for
the common filters and predicates over already-loaded fields.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Union

from ..client import ServiceTradeClient
from ..hydration import Resource
from ..list_response import ListResponse
from ..operations import DEFAULT_PAGE, DEFAULT_PER_PAGE, Create, Delete, Find, List, Update

VALID_STATUSES = ("open", "in_progress", "closed", "void", "canceled")


def _has_id(related: Any) -> bool:
    return isinstance(related, dict) and related.get("id") is not None


class ServiceRequest(Create, List, Update, Delete, Find, Resource):
    OBJECT_NAME = "servicerequest"
    LIST_KEY = "serviceRequests"
    FIELDS = (
        "description",
        "status",
        "completion_status",
        "estimated_price",
        "duration",
        "window_start",
        "window_end",
        "created",
        "updated",
        # Related objects
        "job",
        "appointment",
        "asset",
        "service_line",
        "location",
        "vendor",
        "customer",
        "assigned_user",
    )

    VALID_STATUSES = VALID_STATUSES

    # ------------------------------------------------------------------
    # Filters
    # ------------------------------------------------------------------
    @classmethod
    def by_job(
        cls,
        job_id: Any,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        *,
        client: Optional[ServiceTradeClient] = None,
    ) -> ListResponse["ServiceRequest"]:
        return cls.list({"job_id": job_id}, page, per_page, client=client)

    @classmethod
    def by_location(
        cls,
        location_id: Any,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        *,
        client: Optional[ServiceTradeClient] = None,
    ) -> ListResponse["ServiceRequest"]:
        return cls.list({"location_id": location_id}, page, per_page, client=client)

    @classmethod
    def by_status(
        cls,
        status: str,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        *,
        client: Optional[ServiceTradeClient] = None,
    ) -> ListResponse["ServiceRequest"]:
        return cls.list({"status": status}, page, per_page, client=client)

    @classmethod
    def by_appointment(
        cls,
        appointment_id: Any,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        *,
        client: Optional[ServiceTradeClient] = None,
    ) -> ListResponse["ServiceRequest"]:
        return cls.list({"appointment_id": appointment_id}, page, per_page, client=client)

    @classmethod
    def by_service_line(
        cls,
        service_line_ids: Union[Any, Iterable[Any]],
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        *,
        client: Optional[ServiceTradeClient] = None,
    ) -> ListResponse["ServiceRequest"]:
        """Filter by one service line id or several (sent comma-separated)."""
        if isinstance(service_line_ids, (list, tuple, set)):
            service_line_ids = ",".join(str(i) for i in service_line_ids)
        return cls.list({"service_line_ids": service_line_ids}, page, per_page, client=client)

    @classmethod
    def by_asset(
        cls,
        asset_id: Any,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        *,
        client: Optional[ServiceTradeClient] = None,
    ) -> ListResponse["ServiceRequest"]:
        return cls.list({"asset_id": asset_id}, page, per_page, client=client)

    @classmethod
    def open_requests(
        cls,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        *,
        client: Optional[ServiceTradeClient] = None,
    ) -> ListResponse["ServiceRequest"]:
        return cls.by_status("open", page, per_page, client=client)

    @classmethod
    def in_progress_requests(
        cls,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        *,
        client: Optional[ServiceTradeClient] = None,
    ) -> ListResponse["ServiceRequest"]:
        return cls.by_status("in_progress", page, per_page, client=client)

    @classmethod
    def closed_requests(
        cls,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        *,
        client: Optional[ServiceTradeClient] = None,
    ) -> ListResponse["ServiceRequest"]:
        return cls.by_status("closed", page, per_page, client=client)

    @classmethod
    def canceled_requests(
        cls,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        *,
        client: Optional[ServiceTradeClient] = None,
    ) -> ListResponse["ServiceRequest"]:
        return cls.by_status("canceled", page, per_page, client=client)

    @classmethod
    def void_requests(
        cls,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        *,
        client: Optional[ServiceTradeClient] = None,
    ) -> ListResponse["ServiceRequest"]:
        return cls.by_status("void", page, per_page, client=client)

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------
    def is_open(self) -> bool:
        return self.status == "open"

    def is_in_progress(self) -> bool:
        return self.status == "in_progress"

    def is_closed(self) -> bool:
        return self.status == "closed"

    def is_canceled(self) -> bool:
        return self.status == "canceled"

    def is_void(self) -> bool:
        return self.status == "void"

    def has_estimated_price(self) -> bool:
        return self.estimated_price is not None and self.estimated_price > 0

    def has_time_window(self) -> bool:
        return self.window_start is not None and self.window_end is not None

    def associated_with_job(self) -> bool:
        return _has_id(self.job)

    def associated_with_appointment(self) -> bool:
        return _has_id(self.appointment)

    def associated_with_asset(self) -> bool:
        return _has_id(self.asset)
