"""Pytest fixtures shared by the whole suite."""

from unittest.mock import patch

import pytest

import servicetrade
from tests.utils import AUTH_PAYLOAD, StubServer, make_response


@pytest.fixture(autouse=True)
def default_client():
    """Reset and configure the process-wide client around every test."""
    servicetrade.reset()
    client = servicetrade.configure(username="test_user", password="test_password")
    yield client
    servicetrade.reset()


@pytest.fixture
def server():
    """Patch ``requests.request`` with a stub server that accepts logins."""
    stub = StubServer()
    stub.add("POST", "/auth", make_response(200, AUTH_PAYLOAD))
    with patch("requests.request", new=stub):
        yield stub
