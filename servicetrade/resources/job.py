"""Jobs, the unit of work that appointments and items hang off."""

from __future__ import annotations

from typing import Optional

from ..client import ServiceTradeClient
from ..hydration import Resource
from ..list_response import ListResponse
from ..operations import DEFAULT_PAGE, DEFAULT_PER_PAGE, Find, List
from .attachment import Attachment


class Job(List, Find, Resource):
    OBJECT_NAME = "job"
    LIST_KEY = "jobs"
    FIELDS = ("name",)

    def attachments(
        self,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        *,
        client: Optional[ServiceTradeClient] = None,
    ) -> ListResponse[Attachment]:
        return Attachment.for_job(self.id, page=page, per_page=per_page, client=client)
