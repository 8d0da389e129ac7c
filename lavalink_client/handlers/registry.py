"""Handler registry for routing node messages by operation tag.

The registry maps an operation tag (``"ready"``, ``"stats"``, ...) to the
function that handles it. It is built once, before ``connect()``, and can not
be changed afterwards; the dispatch loop only reads from it.

Handlers receive the raw payload of the frame as ``bytes`` and decode it
themselves. They may be plain functions or coroutine functions. A handler
signals failure by raising; the dispatch loop logs the error and carries on.
"""

import enum
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Dict, Iterator, Mapping, Optional, Union

MessageHandlerFunc = Callable[[bytes], Union[None, Awaitable[None]]]


def _normalize_op(op: Any) -> str:
    """Convert an operation key to the tag string sent on the wire."""
    if isinstance(op, enum.Enum):
        return str(op.value)
    if not isinstance(op, str):
        raise TypeError(f"Operation tag must be a string, got {type(op).__name__}")
    return op


class HandlerRegistry(Mapping[str, MessageHandlerFunc]):
    """Immutable mapping from operation tag to handler.

    Tags are case-sensitive. ``MessageOp`` members are accepted as keys and
    stored under their wire value.
    """

    def __init__(self, handlers: Optional[Mapping[Any, MessageHandlerFunc]] = None):
        """Initialize the registry.

        Args:
            handlers: Mapping of operation tag to handler, None for no handlers

        Raises:
            TypeError: If a key is not a string or a handler is not callable
            ValueError: If two keys resolve to the same tag
        """
        table: Dict[str, MessageHandlerFunc] = {}
        for op, handler in (handlers or {}).items():
            tag = _normalize_op(op)
            if not callable(handler):
                raise TypeError(f"Handler for operation {tag!r} is not callable")
            if tag in table:
                raise ValueError(f"Duplicate handler for operation {tag!r}")
            table[tag] = handler
        self._handlers = MappingProxyType(table)

    @classmethod
    def from_handlers(
        cls, handlers: Union["HandlerRegistry", Mapping[Any, MessageHandlerFunc], None]
    ) -> "HandlerRegistry":
        """Return handlers as a registry, wrapping plain mappings."""
        if isinstance(handlers, cls):
            return handlers
        return cls(handlers)

    def __getitem__(self, op: str) -> MessageHandlerFunc:
        return self._handlers[op]

    def __iter__(self) -> Iterator[str]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)

    def __repr__(self) -> str:
        return f"HandlerRegistry({sorted(self._handlers)})"
