"""Observability primitives for the graph editor."""

from .events import Event, EventBus

__all__ = ["Event", "EventBus"]
