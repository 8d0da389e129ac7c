"""Exceptions raised by the Lavalink client.

Construction and connect-time problems are raised to the caller. Anything
that goes wrong inside the background dispatch loop is logged instead.
"""


class LavalinkClientError(Exception):
    """Base class for every error raised by this package."""


class ConfigInvalid(LavalinkClientError, ValueError):
    """The client configuration was rejected before any I/O was attempted."""


class InvalidConfig(ConfigInvalid):
    """The configuration is missing or entirely empty."""

    def __init__(self, message: str = "client: config nil or empty"):
        super().__init__(message)


class InvalidHost(ConfigInvalid):
    """The host is malformed, or the node answered the handshake with 404."""

    def __init__(self, message: str = "client: host invalid"):
        super().__init__(message)


class MissingIdentity(ConfigInvalid):
    """The client identity (User-Id header) is empty."""

    def __init__(self, message: str = "client: client id is not set"):
        super().__init__(message)


class MissingLogSink(LavalinkClientError, ValueError):
    """No logger was supplied to the client."""

    def __init__(self, message: str = "client: logger is nil"):
        super().__init__(message)


class LavalinkConnectionError(LavalinkClientError):
    """Base class for connection lifecycle errors."""


class DialFailure(LavalinkConnectionError):
    """The node answered the handshake with an unexpected status."""

    def __init__(self, message: str = "client: dial failed", status_code=None):
        super().__init__(message)
        self.status_code = status_code


class InvalidPassword(LavalinkConnectionError):
    """The node rejected the Authorization header (403)."""

    def __init__(self, message: str = "client: invalid password"):
        super().__init__(message)


class AlreadyConnected(LavalinkConnectionError):
    """connect() was called while a session is open or opening."""

    def __init__(self, message: str = "client: connection already established"):
        super().__init__(message)


class NotConnected(LavalinkConnectionError):
    """disconnect() was called without a live connection."""

    def __init__(self, message: str = "client: connection not established"):
        super().__init__(message)
