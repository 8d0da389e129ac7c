"""
Configuration models for the Lavalink client.

This module defines the connection configuration dataclass and the pure
validation rules that gate every connection attempt.
"""

import re
from dataclasses import dataclass
from typing import Dict, Optional, Pattern

from lavalink_client.config.constants import (
    DEFAULT_CLIENT_NAME,
    DEFAULT_TIMEOUT,
    HEADER_AUTHORIZATION,
    HEADER_CLIENT_NAME,
    HEADER_USER_ID,
    WEBSOCKET_ENDPOINT,
)
from lavalink_client.exceptions import InvalidConfig, InvalidHost, MissingIdentity

# Host patterns, both with an optional trailing :port
DOMAIN_PATTERN: Pattern = re.compile(
    r"(?:[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?\.)+[a-zA-Z]{2,}(:\d{1,5})?"
)
IPV4_PATTERN: Pattern = re.compile(r"(?:\d{1,3}\.){3}\d{1,3}(:\d{1,5})?")


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings for a single Lavalink node.

    Attributes:
        host: Node address as ``domain[:port]`` or ``a.b.c.d[:port]``
        password: Value sent in the Authorization header
        client_id: Value sent in the User-Id header (the bot's user id)
        tls: Use ``wss://`` instead of ``ws://``
        timeout: Handshake deadline in seconds
        client_name: Value sent in the Client-Name header
    """

    host: str = ""
    password: str = ""
    client_id: str = ""
    tls: bool = False
    timeout: float = DEFAULT_TIMEOUT
    client_name: str = DEFAULT_CLIENT_NAME

    def is_empty(self) -> bool:
        """Check whether none of the connection fields were set."""
        return not (self.host or self.password or self.client_id or self.tls)

    def validate(self) -> None:
        """Validate this configuration. See :func:`validate_config`."""
        validate_config(self)

    def get_websocket_url(self) -> str:
        """Get the node's websocket URL for this configuration."""
        scheme = "wss" if self.tls else "ws"
        return f"{scheme}://{self.host}{WEBSOCKET_ENDPOINT}"

    def get_headers(self) -> Dict[str, str]:
        """Get the handshake headers that authenticate this client."""
        return {
            HEADER_AUTHORIZATION: self.password,
            HEADER_USER_ID: self.client_id,
            HEADER_CLIENT_NAME: self.client_name,
        }


def is_valid_host(host: str) -> bool:
    """Check whether host is a domain name or IPv4 address with optional port."""
    return bool(DOMAIN_PATTERN.fullmatch(host) or IPV4_PATTERN.fullmatch(host))


def validate_config(config: Optional[ClientConfig]) -> None:
    """Validate a client configuration without performing any I/O.

    Args:
        config: The configuration to check

    Raises:
        InvalidConfig: If the configuration is missing or entirely empty,
            or the timeout is not positive
        InvalidHost: If the host is neither a domain nor an IPv4 address
        MissingIdentity: If the client id is empty
    """
    if config is None or config.is_empty():
        raise InvalidConfig()

    if not is_valid_host(config.host):
        raise InvalidHost(f"client: host invalid: {config.host!r}")

    if not config.client_id:
        raise MissingIdentity()

    if config.timeout <= 0:
        raise InvalidConfig(f"client: timeout must be positive, got {config.timeout}")
