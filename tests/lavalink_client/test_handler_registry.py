"""Unit tests for the HandlerRegistry class."""

from unittest.mock import MagicMock

import pytest

from lavalink_client.handlers.registry import HandlerRegistry
from lavalink_client.models.lavalink_api import MessageOp


@pytest.fixture
def ready_handler():
    return MagicMock()


class TestHandlerRegistry:
    """Test suite for the HandlerRegistry class."""

    def test_empty(self):
        registry = HandlerRegistry()
        assert len(registry) == 0
        assert registry.get("ready") is None

    def test_string_keys(self, ready_handler):
        registry = HandlerRegistry({"ready": ready_handler})
        assert registry["ready"] is ready_handler
        assert "ready" in registry
        assert list(registry) == ["ready"]

    def test_enum_keys_stored_by_value(self, ready_handler):
        registry = HandlerRegistry({MessageOp.READY: ready_handler})
        assert registry.get("ready") is ready_handler

    def test_keys_are_case_sensitive(self, ready_handler):
        registry = HandlerRegistry({"playerUpdate": ready_handler})
        assert registry.get("playerupdate") is None
        assert registry.get("playerUpdate") is ready_handler

    def test_not_callable(self):
        with pytest.raises(TypeError):
            HandlerRegistry({"ready": "not a function"})

    def test_non_string_key(self, ready_handler):
        with pytest.raises(TypeError):
            HandlerRegistry({42: ready_handler})

    def test_duplicate_tag(self, ready_handler):
        with pytest.raises(ValueError):
            HandlerRegistry({"ready": ready_handler, MessageOp.READY: MagicMock()})

    def test_immutable(self, ready_handler):
        registry = HandlerRegistry({"ready": ready_handler})
        with pytest.raises(TypeError):
            registry["stats"] = ready_handler
        with pytest.raises(TypeError):
            registry._handlers["stats"] = ready_handler

    def test_source_mapping_changes_do_not_leak(self, ready_handler):
        source = {"ready": ready_handler}
        registry = HandlerRegistry(source)
        source["stats"] = MagicMock()
        assert "stats" not in registry

    def test_from_handlers_reuses_registry(self, ready_handler):
        registry = HandlerRegistry({"ready": ready_handler})
        assert HandlerRegistry.from_handlers(registry) is registry

    def test_from_handlers_wraps_mapping_and_none(self, ready_handler):
        assert isinstance(HandlerRegistry.from_handlers({"ready": ready_handler}), HandlerRegistry)
        assert len(HandlerRegistry.from_handlers(None)) == 0
