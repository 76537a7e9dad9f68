"""Tests for :mod:`grapheditor.obs.events`."""

from __future__ import annotations

from grapheditor.obs.events import EventBus


def test_event_bus_emit_and_history():
    bus = EventBus()
    event = bus.emit(level="info", msg="Test", action="add_node", node_ids=[1], extras={"detail": 1})

    assert event.msg == "Test"
    assert event.to_dict()["node_ids"] == [1]
    assert list(bus.history()) == [event]


def test_event_bus_clear():
    bus = EventBus()
    bus.emit(level="info", msg="one")
    bus.clear()
    assert list(bus.history()) == []
