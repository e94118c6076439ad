"""Resource types of the ServiceTrade API."""

from .appointment import Appointment
from .attachment import Attachment
from .external_id import VALID_ENTITY_TYPES, ExternalId
from .job import Job
from .job_item import JobItem
from .lib_item import LibItem
from .service_line import ServiceLine
from .service_request import ServiceRequest
from .webhook import Webhook

__all__ = [
    "Appointment",
    "Attachment",
    "ExternalId",
    "Job",
    "JobItem",
    "LibItem",
    "ServiceLine",
    "ServiceRequest",
    "VALID_ENTITY_TYPES",
    "Webhook",
]
