"""
Websocket client for a Lavalink audio node.

The client authenticates one persistent websocket connection to the node and
routes every JSON text frame it receives to a caller-supplied handler, chosen
by the frame's ``op`` field.

Usage:
    config = ClientConfig(host="127.0.0.1:2333", password="youshallnotpass", client_id="1234")
    client = LavalinkClient(config, {MessageOp.READY: on_ready}, configure_logging())

    dispatch_task = await client.connect()
    ...
    await client.disconnect()
    await client.wait_closed()

State transitions happen on the event loop without an intervening await, so
they are atomic with respect to other coroutines using the same client.
"""

import asyncio
import enum
import inspect
import logging
from typing import Any, Mapping, Optional, Union

import websockets
from pydantic import ValidationError
from websockets.exceptions import ConnectionClosed, InvalidStatus

from lavalink_client.config.constants import (
    STATUS_INVALID_HOST,
    STATUS_INVALID_PASSWORD,
)
from lavalink_client.config.models import ClientConfig, validate_config
from lavalink_client.exceptions import (
    AlreadyConnected,
    DialFailure,
    InvalidHost,
    InvalidPassword,
    MissingLogSink,
    NotConnected,
)
from lavalink_client.handlers.registry import HandlerRegistry, MessageHandlerFunc
from lavalink_client.models.lavalink_api import (
    MessageOp,
    RawGenericSocketMessage,
    ReadyMessage,
)


class ConnectionState(enum.Enum):
    """Lifecycle states of a client session."""

    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"


class LavalinkClient:
    """
    Client for one Lavalink node session.

    Attributes:
        config (ClientConfig): Validated connection settings
        handlers (HandlerRegistry): Operation tag to handler mapping
        session_id (str): Session id assigned by the node, empty until ``ready``
        state (ConnectionState): Current lifecycle state
    """

    def __init__(
        self,
        config: Optional[ClientConfig],
        handlers: Union[HandlerRegistry, Mapping[Any, MessageHandlerFunc], None],
        logger: Optional[Union[logging.Logger, logging.LoggerAdapter]],
    ):
        """
        Validate the configuration and build a disconnected client.

        No network I/O is performed.

        Args:
            config: Connection settings for the node
            handlers: Handlers keyed by operation tag, fixed for the client's lifetime
            logger: Logger the dispatch loop reports to

        Raises:
            InvalidConfig: If config is missing or empty
            InvalidHost: If the host is malformed
            MissingIdentity: If the client id is empty
            MissingLogSink: If no logger is given
        """
        validate_config(config)

        if logger is None:
            raise MissingLogSink()

        self._config = config
        self._handlers = HandlerRegistry.from_handlers(handlers)
        self._logger = logger

        self._websocket = None
        self._state = ConnectionState.DISCONNECTED
        self._session_id = ""
        self._dispatch_task: Optional[asyncio.Task] = None

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def handlers(self) -> HandlerRegistry:
        return self._handlers

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def is_connected(self) -> bool:
        return self._state is ConnectionState.CONNECTED

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def dispatch_task(self) -> Optional[asyncio.Task]:
        """The task running the dispatch loop of the latest session, if any."""
        return self._dispatch_task

    async def connect(self, timeout: Optional[float] = None) -> asyncio.Task:
        """
        Dial and authenticate the node, then start the dispatch loop.

        The dial is bounded by ``config.timeout`` for the handshake and, if
        given, by ``timeout`` for the whole call. Cancelling the awaiting task
        cancels the dial.

        Args:
            timeout: Overall deadline in seconds for this call

        Returns:
            asyncio.Task: The dispatch loop task. It is not awaited here.

        Raises:
            AlreadyConnected: If the client is connecting or connected
            InvalidPassword: If the node answers the handshake with 403
            InvalidHost: If the node answers the handshake with 404
            DialFailure: If the node answers with any other non-upgrade status
        """
        if self._state is not ConnectionState.DISCONNECTED:
            raise AlreadyConnected()

        self._state = ConnectionState.CONNECTING
        try:
            websocket = await self._dial(timeout)
        except BaseException:
            self._state = ConnectionState.DISCONNECTED
            raise

        self._websocket = websocket
        self._session_id = ""
        self._state = ConnectionState.CONNECTED
        self._logger.info(f"client: connected to {self._config.host}")

        self._dispatch_task = asyncio.create_task(
            self._listen(websocket), name=f"lavalink-dispatch-{self._config.host}"
        )
        return self._dispatch_task

    async def _dial(self, timeout: Optional[float]):
        url = self._config.get_websocket_url()
        self._logger.debug(f"client: dialing {url}")

        dial = websockets.connect(
            url,
            additional_headers=self._config.get_headers(),
            compression="deflate",
            open_timeout=self._config.timeout,
        )

        try:
            if timeout is None:
                return await dial
            return await asyncio.wait_for(dial, timeout)
        except InvalidStatus as e:
            status = e.response.status_code
            if status == STATUS_INVALID_PASSWORD:
                raise InvalidPassword() from e
            if status == STATUS_INVALID_HOST:
                raise InvalidHost("client: invalid host") from e
            raise DialFailure(
                f"client: handshake rejected with status {status}", status_code=status
            ) from e

    async def disconnect(self) -> None:
        """
        Close the connection to the node.

        The dispatch loop stops on its own once it observes the closure, which
        may happen after this returns; await ``wait_closed()`` to be sure.

        Raises:
            NotConnected: If there is no live connection
        """
        websocket = self._websocket
        if websocket is None:
            raise NotConnected()

        self._websocket = None
        self._state = ConnectionState.DISCONNECTED
        self._logger.info(f"client: disconnecting from {self._config.host}")
        await websocket.close()

    async def wait_closed(self) -> None:
        """Wait until the dispatch loop of the latest session has returned."""
        if self._dispatch_task is not None:
            await self._dispatch_task

    async def __aenter__(self) -> "LavalinkClient":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._websocket is not None:
            await self.disconnect()
        await self.wait_closed()

    def _clear_connection(self, websocket) -> None:
        """Drop the handle if it still belongs to the session that closed."""
        if self._websocket is websocket:
            self._websocket = None
            self._state = ConnectionState.DISCONNECTED

    async def _listen(self, websocket) -> None:
        """Read frames from websocket and route them until it closes."""
        if len(self._handlers) == 0:
            self._logger.warning("client: no events provided, no listeners will be started")
            return

        while True:
            try:
                message = await websocket.recv()
            except ConnectionClosed:
                self._logger.warning("client: connection closed, stopping listeners...")
                self._clear_connection(websocket)
                return
            except Exception as e:
                self._logger.error(f"client: error on read message: {e}")
                continue

            if not isinstance(message, str):
                continue

            try:
                raw = RawGenericSocketMessage.model_validate_json(message)
            except ValidationError as e:
                self._logger.error(f"client: error on unmarshal message: {e}")
                continue

            if raw.op == MessageOp.READY.value:
                self._record_session(message)

            await self._dispatch(raw.op, message.encode("utf-8"))

    def _record_session(self, message: str) -> None:
        try:
            ready = ReadyMessage.model_validate_json(message)
        except ValidationError as e:
            self._logger.warning(f"client: malformed ready message: {e}")
            return
        self._session_id = ready.sessionId
        self._logger.info(
            f"client: session {ready.sessionId} ready (resumed={ready.resumed})"
        )

    async def _dispatch(self, op: str, payload: bytes) -> None:
        handler = self._handlers.get(op)
        if handler is None:
            self._logger.debug(f'client: not found handler for event -> {op}')
            return

        try:
            result = handler(payload)
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            self._logger.error(f"client: error on handle event {op}: {e}")
            return

        self._logger.debug(f'client: event "{op}" parsed')
