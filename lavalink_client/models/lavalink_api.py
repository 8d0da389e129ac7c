"""
Pydantic models for the Lavalink v4 websocket message schemas.

The node pushes JSON text frames to the client. Every frame carries an ``op``
field naming the operation; the remaining fields depend on the operation.

The dispatch loop only decodes the envelope (:class:`RawGenericSocketMessage`)
to route the frame. Handlers receive the raw payload and can decode it with
the typed models below, e.g. ``ReadyMessage.model_validate_json(payload)``.
"""

import enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class MessageOp(str, enum.Enum):
    """Operation tags sent by the node."""

    READY = "ready"
    PLAYER_UPDATE = "playerUpdate"
    STATS = "stats"
    EVENT = "event"


class EventType(str, enum.Enum):
    """Values of the ``type`` field of ``event`` messages."""

    TRACK_START = "TrackStartEvent"
    TRACK_END = "TrackEndEvent"
    TRACK_EXCEPTION = "TrackExceptionEvent"
    TRACK_STUCK = "TrackStuckEvent"
    WEBSOCKET_CLOSED = "WebSocketClosedEvent"


class RawGenericSocketMessage(BaseModel):
    """Minimal envelope used to route a frame to its handler.

    Only the operation tag is read; operation-specific fields are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    op: str = Field(..., description="Operation tag")


class ReadyMessage(BaseModel):
    """Model for the ``ready`` message, sent once after the handshake.

    Example:
    {
      "op": "ready",
      "resumed": false,
      "sessionId": "la3kfsdf5eafe848"
    }
    """

    op: Literal[MessageOp.READY]
    resumed: bool = Field(..., description="Whether a previous session was resumed")
    sessionId: str = Field(..., description="Session id assigned by the node")


class PlayerState(BaseModel):
    """Playback state of one guild player."""

    time: int = Field(..., description="Unix timestamp in milliseconds")
    position: int = Field(0, description="Track position in milliseconds")
    connected: bool = Field(..., description="Whether the node is connected to the voice gateway")
    ping: int = Field(-1, description="Voice gateway ping in milliseconds, -1 if not connected")


class PlayerUpdateMessage(BaseModel):
    """Model for the ``playerUpdate`` message, sent at a fixed interval per player.

    Example:
    {
      "op": "playerUpdate",
      "guildId": "817327181659111454",
      "state": {"time": 1500467109, "position": 60000, "connected": true, "ping": 50}
    }
    """

    op: Literal[MessageOp.PLAYER_UPDATE]
    guildId: str
    state: PlayerState


class Memory(BaseModel):
    free: int
    used: int
    allocated: int
    reservable: int


class Cpu(BaseModel):
    cores: int
    systemLoad: float
    lavalinkLoad: float


class FrameStats(BaseModel):
    sent: int
    nulled: int
    deficit: int


class StatsMessage(BaseModel):
    """Model for the ``stats`` message, sent about once a minute."""

    op: Literal[MessageOp.STATS]
    players: int
    playingPlayers: int
    uptime: int = Field(..., description="Node uptime in milliseconds")
    memory: Memory
    cpu: Cpu
    frameStats: Optional[FrameStats] = None


class EventMessage(BaseModel):
    """Model for the ``event`` message.

    The fields beyond ``type`` and ``guildId`` depend on the event type and are
    kept as extra attributes. Known types parse to ``EventType`` members; types
    added by node plugins are kept as plain strings.
    """

    model_config = ConfigDict(extra="allow")

    op: Literal[MessageOp.EVENT]
    type: Union[EventType, str] = Field(
        ..., union_mode="left_to_right", description="Event type, plugin events stay strings"
    )
    guildId: str
