"""Service lines: the trades and disciplines work is classified under."""

from __future__ import annotations

from ..hydration import Resource
from ..operations import Find, List


class ServiceLine(List, Find, Resource):
    OBJECT_NAME = "serviceline"
    LIST_KEY = "servicelines"
    FIELDS = ("name", "trade", "abbr", "icon")
