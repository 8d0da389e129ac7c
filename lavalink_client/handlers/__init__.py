"""Handlers package: the operation-tag registry consumed by the dispatch loop."""

from .registry import HandlerRegistry, MessageHandlerFunc

__all__ = ["HandlerRegistry", "MessageHandlerFunc"]
