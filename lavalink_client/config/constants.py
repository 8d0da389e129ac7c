"""
Constants and configuration values used throughout the client.

This module defines the defaults and protocol values shared by the connection
manager, the dispatch loop and the configuration loader.
"""

# Logger name used throughout the package
LOGGER_NAME = "lavalink_client"

# Handshake defaults
DEFAULT_TIMEOUT = 30.0  # seconds
DEFAULT_CLIENT_NAME = "lavalink-client"

# Lavalink v4 websocket endpoint
WEBSOCKET_ENDPOINT = "/v4/websocket"

# Handshake header names
HEADER_AUTHORIZATION = "Authorization"
HEADER_USER_ID = "User-Id"
HEADER_CLIENT_NAME = "Client-Name"

# Handshake rejection statuses
STATUS_INVALID_PASSWORD = 403
STATUS_INVALID_HOST = 404
