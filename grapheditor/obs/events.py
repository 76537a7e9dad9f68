"""Event bus primitives."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Iterable, List

from grapheditor.graph.ids import utc_now
from grapheditor.graph.model import NodeId


@dataclass
class Event:
    """Record of one executed editor action."""

    ts: str
    level: str
    msg: str
    action: str | None = None
    node_ids: List[NodeId] = field(default_factory=list)
    extras: dict | None = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class EventBus:
    """Append-only in-memory event bus."""

    events: List[Event] = field(default_factory=list)

    def emit(
        self,
        *,
        level: str,
        msg: str,
        action: str | None = None,
        node_ids: Iterable[NodeId] | None = None,
        extras: dict | None = None,
    ) -> Event:
        """Create and store a new :class:`Event`."""

        event = Event(
            ts=utc_now(),
            level=level,
            msg=msg,
            action=action,
            node_ids=list(node_ids or []),
            extras=extras,
        )
        self.events.append(event)
        return event

    def history(self) -> Iterable[Event]:
        """Return the chronological event history."""

        return tuple(self.events)

    def clear(self) -> None:
        self.events.clear()
