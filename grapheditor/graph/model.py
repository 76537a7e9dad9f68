"""Core data structures for the graph editor."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Union

NodeId = Union[int, str]


class IdentityKind(str, Enum):
    """The two kinds of value a node identity can take."""

    INTEGER = "integer"
    LABEL = "label"


def identity_kind(node_id: NodeId) -> IdentityKind:
    """Return the :class:`IdentityKind` of ``node_id``.

    ``bool`` is rejected even though it subclasses ``int``.
    """

    if isinstance(node_id, bool):
        raise TypeError("bool is not a valid node identity")
    if isinstance(node_id, int):
        return IdentityKind.INTEGER
    if isinstance(node_id, str):
        return IdentityKind.LABEL
    raise TypeError(f"Unsupported node identity type: {type(node_id).__name__}")


def identity_sort_key(node_id: NodeId) -> tuple[int, int | str]:
    """Total order over identities: integers first, then labels."""

    if identity_kind(node_id) is IdentityKind.INTEGER:
        return (0, node_id)
    return (1, node_id)


def coerce_identity(value: object) -> NodeId:
    """Validate ``value`` as a node identity and return it unchanged."""

    identity_kind(value)  # type: ignore[arg-type]
    return value  # type: ignore[return-value]


class EdgeKey(NamedTuple):
    """Ordered ``(source, target)`` pair used to key stored edges."""

    source: NodeId
    target: NodeId

    def reversed(self) -> "EdgeKey":
        return EdgeKey(self.target, self.source)


@dataclass
class Node:
    """A vertex placed on the canvas."""

    id: NodeId
    x: float
    y: float
    label: str = ""

    def __post_init__(self) -> None:
        if not self.label:
            self.label = str(self.id)

    def to_dict(self) -> dict:
        return {"id": self.id, "x": self.x, "y": self.y, "label": self.label}


@dataclass(frozen=True)
class Edge:
    """A connection between two nodes.

    Whether it is directed is decided by the owning graph, not the edge.
    """

    source: NodeId
    target: NodeId

    @property
    def key(self) -> EdgeKey:
        return EdgeKey(self.source, self.target)

    def to_dict(self) -> dict:
        return {"source": self.source, "target": self.target}


class GraphFormat(str, Enum):
    """Textual encodings the editor can import and export."""

    EDGE_LIST = "edge-list"
    ADJACENCY_LIST = "adjacency-list"
    ADJACENCY_MATRIX = "adjacency-matrix"

    @classmethod
    def coerce(cls, value: "str | GraphFormat") -> "GraphFormat":
        """Accept enum members, values or ``snake_case`` names."""

        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower().replace("_", "-")
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"Unsupported graph format: {value}") from None

    @property
    def description(self) -> str:
        return _FORMAT_HINTS[self][0]

    @property
    def example(self) -> str:
        return _FORMAT_HINTS[self][1]

    @property
    def filename(self) -> str:
        """Suggested download name for an export in this format."""

        return f"graph-{self.value}.txt"


_FORMAT_HINTS = {
    GraphFormat.EDGE_LIST: (
        'Enter edges, one per line (e.g., "1 2" or "A B")',
        "1 2\n2 3\n3 4",
    ),
    GraphFormat.ADJACENCY_LIST: (
        'Enter adjacency list (e.g., "1: 2 3" or "A: B C")',
        "1: 2 3\n2: 3\n3: 4",
    ),
    GraphFormat.ADJACENCY_MATRIX: (
        "Enter adjacency matrix (space-separated 0s and 1s)",
        "0 1 1 0\n0 0 1 0\n0 0 0 1\n0 0 0 0",
    ),
}


__all__ = [
    "Edge",
    "EdgeKey",
    "GraphFormat",
    "IdentityKind",
    "Node",
    "NodeId",
    "coerce_identity",
    "identity_kind",
    "identity_sort_key",
]
