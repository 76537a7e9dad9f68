"""Action routing for the graph editor API."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Protocol, Tuple


class ActionHandler(Protocol):
    """Protocol representing a callable action handler."""

    def __call__(self, params: dict) -> dict:  # pragma: no cover - interface
        ...


def normalize_action(action: str) -> str:
    """Map ``export-edge-list`` and ``Export_Edge_List`` to ``export_edge_list``."""

    return action.strip().lower().replace("-", "_")


@dataclass
class ActionRouter:
    """Dispatch actions to their registered handlers."""

    registry: Dict[str, ActionHandler] = field(default_factory=dict)

    def register(self, action: str, handler: ActionHandler) -> None:
        """Register ``handler`` under ``action``, replacing any previous one."""

        self.registry[normalize_action(action)] = handler

    def actions(self) -> Tuple[str, ...]:
        return tuple(sorted(self.registry))

    def dispatch(self, action: str, params: dict) -> dict:
        """Execute the handler associated with ``action``."""

        handler = self.registry.get(normalize_action(action))
        if handler is None:
            raise KeyError(f"Unknown action: {action}")
        return handler(params)
