"""Scheduled visits by technicians to carry out a job."""

from __future__ import annotations

from typing import Any, Optional

from ..client import ServiceTradeClient
from ..hydration import Resource
from ..list_response import ListResponse
from ..operations import DEFAULT_PAGE, DEFAULT_PER_PAGE, Create, Delete, Find, List, Update


class Appointment(Create, List, Update, Delete, Find, Resource):
    OBJECT_NAME = "appointment"
    LIST_KEY = "appointments"
    FIELDS = (
        "status",
        "scheduled_date",
        "scheduled_time",
        "duration",
        "description",
        "created",
        "updated",
        # Related objects
        "job",
        "vendor",
        "customer",
        "location",
        "assigned_to",
        "assigned_office",
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
    ) -> ListResponse["Appointment"]:
        return cls.list({"job_id": job_id}, page, per_page, client=client)

    @classmethod
    def by_status(
        cls,
        status: str,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        *,
        client: Optional[ServiceTradeClient] = None,
    ) -> ListResponse["Appointment"]:
        return cls.list({"status": status}, page, per_page, client=client)

    @classmethod
    def by_vendor(
        cls,
        vendor_id: Any,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        *,
        client: Optional[ServiceTradeClient] = None,
    ) -> ListResponse["Appointment"]:
        return cls.list({"vendor_id": vendor_id}, page, per_page, client=client)

    @classmethod
    def by_customer(
        cls,
        customer_id: Any,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        *,
        client: Optional[ServiceTradeClient] = None,
    ) -> ListResponse["Appointment"]:
        return cls.list({"customer_id": customer_id}, page, per_page, client=client)

    @classmethod
    def by_location(
        cls,
        location_id: Any,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        *,
        client: Optional[ServiceTradeClient] = None,
    ) -> ListResponse["Appointment"]:
        return cls.list({"location_id": location_id}, page, per_page, client=client)

    @classmethod
    def scheduled_between(
        cls,
        start_date: Any,
        end_date: Any,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        *,
        client: Optional[ServiceTradeClient] = None,
    ) -> ListResponse["Appointment"]:
        """Appointments scheduled in a window; dates are passed through unchanged."""
        filters = {"scheduled_date_begin": start_date, "scheduled_date_end": end_date}
        return cls.list(filters, page, per_page, client=client)
