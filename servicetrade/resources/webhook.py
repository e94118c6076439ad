"""Webhook subscriptions that push entity change events to a URL."""

from __future__ import annotations

from ..hydration import Resource
from ..operations import Create, Delete, Find, List, Update


class Webhook(Create, List, Update, Delete, Find, Resource):
    OBJECT_NAME = "webhook"
    LIST_KEY = "webhooks"
    FIELDS = (
        "hook_url",
        "enabled",
        "confirmed",
        "include_changesets",
        "entity_events",
        "created",
        "updated",
    )

    def is_enabled(self) -> bool:
        return self.enabled is True

    def is_confirmed(self) -> bool:
        return self.confirmed is True

    def includes_changesets(self) -> bool:
        return self.include_changesets is True
