"""Files attached to jobs, locations and other entities."""

from __future__ import annotations

from typing import Any, Optional

from ..client import ServiceTradeClient
from ..hydration import Resource
from ..list_response import ListResponse
from ..operations import DEFAULT_PAGE, DEFAULT_PER_PAGE, Find, List, list_scoped


class Attachment(List, Find, Resource):
    OBJECT_NAME = "attachment"
    LIST_KEY = "attachments"
    FIELDS = (
        "name",
        "description",
        "file_type",
        "content_type",
        "size",
        "created",
        "updated",
        "category",
        "purpose",
        "url",
        "content_url",
        # Related objects
        "job",
        "location",
        "uploaded_by",
    )

    @classmethod
    def for_job(
        cls,
        job_id: Any,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        *,
        client: Optional[ServiceTradeClient] = None,
    ) -> ListResponse["Attachment"]:
        """List the attachments of one job (``GET /job/<id>/attachment``)."""
        return list_scoped(cls, "job", job_id, page=page, per_page=per_page, client=client)
