"""
Models for the messages a Lavalink node sends over its websocket.

```python
from lavalink_client.models import MessageOp, ReadyMessage

def on_ready(payload: bytes) -> None:
    ready = ReadyMessage.model_validate_json(payload)
    print(ready.sessionId)

handlers = {MessageOp.READY: on_ready}
```
"""

from lavalink_client.models.lavalink_api import (
    Cpu,
    EventMessage,
    EventType,
    FrameStats,
    Memory,
    MessageOp,
    PlayerState,
    PlayerUpdateMessage,
    RawGenericSocketMessage,
    ReadyMessage,
    StatsMessage,
)

__all__ = [
    "Cpu",
    "EventMessage",
    "EventType",
    "FrameStats",
    "Memory",
    "MessageOp",
    "PlayerState",
    "PlayerUpdateMessage",
    "RawGenericSocketMessage",
    "ReadyMessage",
    "StatsMessage",
]
