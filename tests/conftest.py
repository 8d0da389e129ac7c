"""
Pytest configuration file for the lavalink_client test suite.

This file contains fixtures that are shared across multiple test files.
"""

import logging
import os
from unittest.mock import AsyncMock, MagicMock

import pytest
from websockets.exceptions import ConnectionClosedOK

from lavalink_client.config.models import ClientConfig


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset logging configuration before each test"""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    logging.basicConfig(level=logging.NOTSET)
    yield


@pytest.fixture(autouse=True)
def skip_integration_when_no_node(request):
    if request.node.get_closest_marker("integration") and not (
        os.environ.get("LAVALINK_HOST") and os.environ.get("LAVALINK_PASSWORD")
    ):
        pytest.skip("Skipping integration tests: LAVALINK_HOST or LAVALINK_PASSWORD not set")


@pytest.fixture
def client_config():
    """A valid configuration for a local node."""
    return ClientConfig(host="127.0.0.1:2333", password="youshallnotpass", client_id="123456789")


@pytest.fixture
def mock_logger():
    """A logger double that records every call."""
    return MagicMock(spec=logging.Logger)


@pytest.fixture
def connection_closed():
    """The exception websockets raises once the peer closed the connection."""
    return ConnectionClosedOK(None, None)


@pytest.fixture
def make_websocket(connection_closed):
    """Build a websocket double whose recv() yields frames, then closes."""

    def _make(*frames, close=True):
        websocket = AsyncMock()
        side_effect = list(frames)
        if close:
            side_effect.append(connection_closed)
        websocket.recv.side_effect = side_effect
        return websocket

    return _make
