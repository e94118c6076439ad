"""Helpers for faking the ServiceTrade HTTP API in tests."""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import requests

BASE_URL = "https://api.servicetrade.com/api"
SESSION_ID = "test_session_123"

AUTH_PAYLOAD = {
    "sessionId": SESSION_ID,
    "data": {
        "authenticated": True,
        "authToken": SESSION_ID,
        "user": {"id": 1, "username": "test_user"},
    },
}


def make_response(status: int = 200, payload: Any = None, body: Optional[str] = None) -> requests.Response:
    """Build a real ``requests.Response`` with a JSON (or raw) body."""
    if body is None:
        body = "" if payload is None else json.dumps(payload)
    response = requests.Response()
    response.status_code = status
    response._content = body.encode("utf-8")
    response.encoding = "utf-8"
    response.headers["Content-Type"] = "application/json"
    return response


@dataclass
class RecordedCall:
    method: str
    path: str
    params: Optional[List[Tuple[str, str]]]
    json: Any
    headers: Dict[str, str]
    timeout: Optional[float]


class StubServer:
    """Stand-in for ``requests.request`` answering from canned routes.

    Each route holds a queue of responses; the last one repeats.  Queue
    an exception instance to have the call raise it.
    """

    def __init__(self, base_url: str = BASE_URL) -> None:
        self.base_url = base_url
        self.routes: Dict[Tuple[str, str], List[Any]] = {}
        self.calls: List[RecordedCall] = []

    def add(self, method: str, path: str, *responses: Any) -> None:
        self.routes.setdefault((method.upper(), path), []).extend(responses)

    def replace(self, method: str, path: str, *responses: Any) -> None:
        self.routes[(method.upper(), path)] = list(responses)

    def calls_to(self, method: str, path: str) -> List[RecordedCall]:
        return [c for c in self.calls if c.method == method.upper() and c.path == path]

    def __call__(self, method, url, params=None, json=None, headers=None, timeout=None, **kwargs):
        assert url.startswith(self.base_url), url
        path = url[len(self.base_url):]
        self.calls.append(RecordedCall(method, path, params, json, dict(headers or {}), timeout))
        queue = self.routes.get((method, path))
        if not queue:
            raise AssertionError(f"Unexpected request {method} {url}")
        result = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(result, BaseException):
            raise result
        return result
