import pytest

import servicetrade
from servicetrade import Configuration, ConfigurationError, DEFAULT_BASE_URL


class TestConfiguration:
    """Test suite for Configuration"""

    def test_defaults_are_blank(self):
        config = Configuration()

        assert config.base_url == DEFAULT_BASE_URL
        assert config.username is None
        assert config.password is None
        assert config.auth_token is None
        assert config.timeout is None

    def test_configure_overwrites_fields(self):
        config = Configuration(username="a", password="b")
        config.configure(username="c", timeout=5)

        assert config.username == "c"
        assert config.password == "b"
        assert config.timeout == 5

    def test_unknown_option_is_rejected(self):
        with pytest.raises(ConfigurationError):
            Configuration(user="a")

    def test_reset_is_idempotent(self):
        config = Configuration(username="a", password="b", base_url="http://localhost/api")
        config.reset()
        config.reset()

        assert config.base_url == DEFAULT_BASE_URL
        assert config.username is None
        assert config.password is None

    def test_validate_accepts_password_pair(self):
        Configuration(username="a", password="b").validate()

    def test_validate_accepts_auth_token(self):
        Configuration(auth_token="token").validate()

    @pytest.mark.parametrize(
        "options",
        [
            {},
            {"username": "a"},
            {"password": "b"},
            {"username": "a", "password": "b", "auth_token": "t"},
            {"username": "a", "password": "b", "base_url": ""},
        ],
    )
    def test_validate_rejects_bad_credentials(self, options):
        with pytest.raises(ConfigurationError):
            Configuration(**options).validate()

    def test_from_env(self):
        config = Configuration.from_env(
            {
                "SERVICETRADE_USERNAME": "env_user",
                "SERVICETRADE_PASSWORD": "env_pass",
                "SERVICETRADE_TIMEOUT": "12.5",
            }
        )

        assert config.username == "env_user"
        assert config.password == "env_pass"
        assert config.timeout == 12.5
        assert config.base_url == DEFAULT_BASE_URL

    def test_from_env_rejects_bad_timeout(self):
        with pytest.raises(ConfigurationError):
            Configuration.from_env({"SERVICETRADE_TIMEOUT": "soon"})

    def test_repr_hides_secrets(self):
        text = repr(Configuration(username="a", password="hunter2"))

        assert "hunter2" not in text
        assert "***" in text


class TestDefaultClient:
    """Test suite for the process-wide client handle"""

    def test_get_client_returns_same_instance(self):
        assert servicetrade.get_client() is servicetrade.get_client()

    def test_reset_clears_configuration_and_session(self, server):
        servicetrade.get_client().session_manager.ensure_session()
        assert servicetrade.get_client().session_manager.is_authenticated

        servicetrade.reset()

        client = servicetrade.get_client()
        assert client.config.username is None
        assert client.config.password is None
        assert not client.session_manager.is_authenticated

    def test_missing_credentials_fail_lazily(self, server):
        servicetrade.reset()

        with pytest.raises(ConfigurationError):
            servicetrade.Webhook.list()

        assert server.calls == []

    def test_missing_base_url_is_a_configuration_error(self, server):
        servicetrade.configure(base_url=None)

        with pytest.raises(ConfigurationError):
            servicetrade.Webhook.list()

        assert server.calls == []
