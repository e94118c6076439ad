import pytest
import requests

from servicetrade import (
    ApiError,
    AuthenticationError,
    Configuration,
    ConfigurationError,
    NetworkError,
    SessionManager,
)
from tests.utils import SESSION_ID, make_response


@pytest.fixture
def manager():
    return SessionManager(Configuration(username="test_user", password="test_password"))


class TestSessionManager:
    """Test suite for SessionManager"""

    def test_starts_unauthenticated(self, manager):
        assert not manager.is_authenticated
        assert manager.session is None
        assert manager.credentials() == {}

    def test_login_posts_credentials(self, manager, server):
        session = manager.ensure_session()

        assert session.token == SESSION_ID
        assert session.authenticated_user_id == 1
        assert manager.is_authenticated

        (call,) = server.calls_to("POST", "/auth")
        assert call.json == {"username": "test_user", "password": "test_password"}
        assert call.headers["Accept"] == "application/json"
        assert call.headers["Content-Type"] == "application/json"

    def test_session_is_reused(self, manager, server):
        first = manager.ensure_session()
        second = manager.ensure_session()

        assert first is second
        assert len(server.calls_to("POST", "/auth")) == 1

    def test_credentials_carry_session_cookie(self, manager, server):
        manager.ensure_session()

        assert manager.credentials() == {"Cookie": f"PHPSESSID={SESSION_ID}"}

    def test_token_falls_back_to_session_id(self, manager, server):
        server.replace(
            "POST",
            "/auth",
            make_response(200, {"sessionId": "abc", "data": {"authenticated": True}}),
        )

        assert manager.ensure_session().token == "abc"

    def test_invalidate_returns_to_unauthenticated(self, manager, server):
        manager.ensure_session()
        manager.invalidate()

        assert not manager.is_authenticated
        manager.ensure_session()
        assert len(server.calls_to("POST", "/auth")) == 2

    def test_auth_token_skips_login(self, server):
        manager = SessionManager(Configuration(auth_token="preissued"))

        assert manager.ensure_session().token == "preissued"
        assert server.calls == []

    def test_missing_credentials(self, server):
        manager = SessionManager(Configuration())

        with pytest.raises(ConfigurationError):
            manager.ensure_session()
        assert server.calls == []

    @pytest.mark.parametrize(
        "response",
        [
            make_response(401, {"messages": {"error": ["bad credentials"]}}),
            make_response(500, body="oops"),
            make_response(200, body="<html>"),
            make_response(200, {"sessionId": "abc"}),
            make_response(200, {"data": {"authenticated": False, "authToken": "x"}}),
            make_response(200, {"data": {"authenticated": True}}),
        ],
    )
    def test_login_failures(self, manager, server, response):
        server.replace("POST", "/auth", response)

        with pytest.raises(AuthenticationError):
            manager.ensure_session()
        assert not manager.is_authenticated

    def test_login_connection_error(self, manager, server):
        server.replace("POST", "/auth", requests.ConnectionError("refused"))

        with pytest.raises(NetworkError):
            manager.ensure_session()
        assert not manager.is_authenticated

    def test_logout(self, manager, server):
        server.add("DELETE", "/auth", make_response(200, {"data": {}}))
        manager.ensure_session()

        manager.logout()

        assert not manager.is_authenticated
        (call,) = server.calls_to("DELETE", "/auth")
        assert call.headers["Cookie"] == f"PHPSESSID={SESSION_ID}"

    def test_logout_without_session_is_noop(self, manager, server):
        manager.logout()

        assert server.calls == []

    def test_logout_error_still_drops_session(self, manager, server):
        server.add("DELETE", "/auth", make_response(500, body="down"))
        manager.ensure_session()

        with pytest.raises(ApiError):
            manager.logout()
        assert not manager.is_authenticated
