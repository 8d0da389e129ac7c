"""
Lavalink websocket client.

Connects to a Lavalink v4 node, authenticates, and routes the JSON events the
node pushes to handlers registered per operation tag.

Key components:
- client: ``LavalinkClient``, the connection lifecycle and dispatch loop.
- config: ``ClientConfig`` with host validation, environment loading and
  logging setup.
- handlers: ``HandlerRegistry``, the immutable operation tag to handler map.
- models: pydantic models for the envelope and the node's messages.
- exceptions: errors raised at construction and connect time.
"""

from lavalink_client.client import ConnectionState, LavalinkClient
from lavalink_client.config import (
    ClientConfig,
    configure_logging,
    load_client_config,
    validate_config,
)
from lavalink_client.exceptions import (
    AlreadyConnected,
    ConfigInvalid,
    DialFailure,
    InvalidConfig,
    InvalidHost,
    InvalidPassword,
    LavalinkClientError,
    LavalinkConnectionError,
    MissingIdentity,
    MissingLogSink,
    NotConnected,
)
from lavalink_client.handlers import HandlerRegistry, MessageHandlerFunc
from lavalink_client.models import MessageOp, RawGenericSocketMessage

__version__ = "0.1.0"

__all__ = [
    "AlreadyConnected",
    "ClientConfig",
    "ConfigInvalid",
    "ConnectionState",
    "DialFailure",
    "HandlerRegistry",
    "InvalidConfig",
    "InvalidHost",
    "InvalidPassword",
    "LavalinkClient",
    "LavalinkClientError",
    "LavalinkConnectionError",
    "MessageHandlerFunc",
    "MessageOp",
    "MissingIdentity",
    "MissingLogSink",
    "NotConnected",
    "RawGenericSocketMessage",
    "configure_logging",
    "load_client_config",
    "validate_config",
]
