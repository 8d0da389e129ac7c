"""
Tests for the client configuration model and its validation rules.
"""

import pytest

from lavalink_client.config.models import ClientConfig, is_valid_host, validate_config
from lavalink_client.exceptions import (
    ConfigInvalid,
    InvalidConfig,
    InvalidHost,
    MissingIdentity,
)


class TestValidateConfig:
    """Test cases for validate_config."""

    def test_none_config(self):
        with pytest.raises(InvalidConfig):
            validate_config(None)

    def test_empty_config(self):
        with pytest.raises(InvalidConfig):
            validate_config(ClientConfig())

    @pytest.mark.parametrize(
        "host",
        ["invalid-host", "", "localhost", "example.c", "-bad.example.com", "example.com:", "127.0.0.1:123456", "http://example.com", "example.com\n"],
    )
    def test_invalid_host(self, host):
        config = ClientConfig(host=host, password="secret", client_id="TestClientId")
        with pytest.raises(InvalidHost):
            validate_config(config)

    @pytest.mark.parametrize(
        "host",
        ["127.0.0.1", "example.com", "example.com:2333", "10.0.0.5:443", "lavalink.node-1.example.org"],
    )
    def test_valid_host(self, host):
        config = ClientConfig(host=host, password="secret", client_id="TestClientId")
        validate_config(config)
        assert is_valid_host(host)

    def test_empty_client_id(self):
        config = ClientConfig(host="127.0.0.1", password="TestClientWithEmptyClientId")
        with pytest.raises(MissingIdentity):
            validate_config(config)

    @pytest.mark.parametrize("host", ["127.0.0.1", "not a host"])
    def test_empty_client_id_is_config_error_regardless_of_host(self, host):
        config = ClientConfig(host=host, password="secret")
        with pytest.raises(ConfigInvalid):
            validate_config(config)

    def test_non_positive_timeout(self):
        config = ClientConfig(host="127.0.0.1", password="secret", client_id="1", timeout=0)
        with pytest.raises(InvalidConfig):
            validate_config(config)

    def test_tls_only_is_not_empty(self):
        config = ClientConfig(tls=True)
        assert not config.is_empty()
        with pytest.raises(InvalidHost):
            config.validate()

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            validate_config(None)


class TestClientConfig:
    """Test cases for ClientConfig helpers."""

    def test_defaults(self):
        config = ClientConfig(host="127.0.0.1", client_id="1")
        assert config.tls is False
        assert config.timeout == 30.0
        assert config.client_name == "lavalink-client"

    def test_websocket_url_plain(self):
        config = ClientConfig(host="127.0.0.1:2333", client_id="1")
        assert config.get_websocket_url() == "ws://127.0.0.1:2333/v4/websocket"

    def test_websocket_url_tls(self):
        config = ClientConfig(host="lavalink.example.com", client_id="1", tls=True)
        assert config.get_websocket_url() == "wss://lavalink.example.com/v4/websocket"

    def test_headers(self, client_config):
        assert client_config.get_headers() == {
            "Authorization": "youshallnotpass",
            "User-Id": "123456789",
            "Client-Name": "lavalink-client",
        }

    def test_custom_client_name(self):
        config = ClientConfig(host="127.0.0.1", client_id="1", client_name="music-bot")
        assert config.get_headers()["Client-Name"] == "music-bot"

    def test_immutable(self, client_config):
        with pytest.raises(AttributeError):
            client_config.host = "example.com"
