"""Text codecs for the three supported graph encodings.

Every parser replaces the store's contents and works in two passes:

1. *discover* the ordered list of node identities (first seen wins) and
   place each one through the caller supplied ``layout`` function;
2. *link* every ``(source, target)`` pair found in the text.

Because nodes exist before any edge is added, an edge may reference a node
that only appears further down the input.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Protocol, Tuple

from .model import GraphFormat, NodeId, identity_sort_key
from .store import GraphStore

LOGGER = logging.getLogger(__name__)

Layout = Callable[[int, int], Tuple[float, float]]
Link = Tuple[NodeId, NodeId]


class GraphCodec(Protocol):
    """Protocol implemented by each format codec."""

    def discover(self, text: str) -> List[NodeId]:
        """Return node identities in discovery order."""

    def links(self, text: str) -> List[Link]:
        """Return the edges described by ``text`` in input order."""

    def export(self, store: GraphStore) -> str:
        """Serialise ``store`` into this codec's format."""


def _unique(items: Iterable[NodeId]) -> List[NodeId]:
    return list(dict.fromkeys(items))


def _populate(store: GraphStore, codec: GraphCodec, text: str, layout: Layout) -> None:
    store.clear()
    discovered = codec.discover(text)
    total = len(discovered)
    for index, node_id in enumerate(discovered):
        x, y = layout(index, total)
        store.add_node(x, y, label=node_id)
    for source, target in codec.links(text):
        store.add_edge(source, target)
    LOGGER.debug("Parsed %d node(s) and %d edge(s)", len(store.nodes), len(store.edges))


# ----------------------------------------------------------------------
# Edge list
# ----------------------------------------------------------------------


@dataclass(frozen=True)
class EdgeListCodec:
    """``"<source> <target>"`` per line; extra tokens are ignored."""

    def _pairs(self, text: str) -> List[Link]:
        pairs: List[Link] = []
        for number, line in enumerate(text.splitlines(), start=1):
            tokens = line.split()
            if len(tokens) < 2:
                if tokens:
                    LOGGER.debug("Skipping edge-list line %d: %r", number, line)
                continue
            pairs.append((tokens[0], tokens[1]))
        return pairs

    def discover(self, text: str) -> List[NodeId]:
        return _unique(node_id for pair in self._pairs(text) for node_id in pair)

    def links(self, text: str) -> List[Link]:
        return self._pairs(text)

    def export(self, store: GraphStore) -> str:
        return "\n".join(f"{edge.source} {edge.target}" for edge in store.edges.values())


# ----------------------------------------------------------------------
# Adjacency list
# ----------------------------------------------------------------------


@dataclass(frozen=True)
class AdjacencyListCodec:
    """``"<id>: <n1> <n2> ..."`` per line; isolated nodes survive a round trip."""

    def _entries(self, text: str) -> List[Tuple[str, List[str]]]:
        entries: List[Tuple[str, List[str]]] = []
        for number, line in enumerate(text.splitlines(), start=1):
            segments = line.split(":")
            if not any(segment.strip() for segment in segments):
                continue
            node_id = segments[0].strip()
            if not node_id:
                LOGGER.debug("Adjacency-list line %d has an empty node identifier: %r", number, line)
            neighbors = segments[1].split() if len(segments) > 1 else []
            entries.append((node_id, neighbors))
        return entries

    def discover(self, text: str) -> List[NodeId]:
        ordered: List[NodeId] = []
        for node_id, neighbors in self._entries(text):
            ordered.append(node_id)
            ordered.extend(neighbors)
        return _unique(ordered)

    def links(self, text: str) -> List[Link]:
        return [(node_id, neighbor) for node_id, neighbors in self._entries(text) for neighbor in neighbors]

    def export(self, store: GraphStore) -> str:
        adjacency: Dict[NodeId, List[NodeId]] = {node_id: [] for node_id in store.nodes}
        for edge in store.edges.values():
            adjacency.setdefault(edge.source, []).append(edge.target)
            if not store.directed:
                adjacency.setdefault(edge.target, []).append(edge.source)
        return "\n".join(
            f"{node_id}: {' '.join(str(neighbor) for neighbor in neighbors)}"
            for node_id, neighbors in adjacency.items()
        )


# ----------------------------------------------------------------------
# Adjacency matrix
# ----------------------------------------------------------------------


@dataclass(frozen=True)
class AdjacencyMatrixCodec:
    """Square ``0``/``1`` matrix; row ``i`` becomes the integer node ``i``."""

    def _rows(self, text: str) -> List[List[str]]:
        return [line.split() for line in text.splitlines() if line.strip()]

    def discover(self, text: str) -> List[NodeId]:
        return list(range(len(self._rows(text))))

    def links(self, text: str) -> List[Link]:
        rows = self._rows(text)
        size = len(rows)
        return [(i, j) for i, row in enumerate(rows) for j, cell in enumerate(row[:size]) if cell != "0"]

    def export(self, store: GraphStore) -> str:
        ordered = sorted(store.nodes, key=identity_sort_key)
        index = {node_id: position for position, node_id in enumerate(ordered)}
        matrix = [[0] * len(ordered) for _ in ordered]
        for edge in store.edges.values():
            i = index.get(edge.source)
            j = index.get(edge.target)
            if i is None or j is None:
                continue
            matrix[i][j] = 1
            if not store.directed:
                matrix[j][i] = 1
        return "\n".join(" ".join(str(cell) for cell in row) for row in matrix)


CODECS: Dict[GraphFormat, GraphCodec] = {
    GraphFormat.EDGE_LIST: EdgeListCodec(),
    GraphFormat.ADJACENCY_LIST: AdjacencyListCodec(),
    GraphFormat.ADJACENCY_MATRIX: AdjacencyMatrixCodec(),
}


def get_codec(fmt: str | GraphFormat) -> GraphCodec:
    return CODECS[GraphFormat.coerce(fmt)]


def parse(store: GraphStore, fmt: str | GraphFormat, text: str, layout: Layout) -> None:
    """Replace the contents of ``store`` with the graph encoded in ``text``."""

    _populate(store, get_codec(fmt), text, layout)


def export(store: GraphStore, fmt: str | GraphFormat) -> str:
    """Serialise ``store`` in ``fmt``."""

    return get_codec(fmt).export(store)


def parse_edge_list(store: GraphStore, text: str, layout: Layout) -> None:
    parse(store, GraphFormat.EDGE_LIST, text, layout)


def parse_adjacency_list(store: GraphStore, text: str, layout: Layout) -> None:
    parse(store, GraphFormat.ADJACENCY_LIST, text, layout)


def parse_adjacency_matrix(store: GraphStore, text: str, layout: Layout) -> None:
    parse(store, GraphFormat.ADJACENCY_MATRIX, text, layout)


def export_edge_list(store: GraphStore) -> str:
    return export(store, GraphFormat.EDGE_LIST)


def export_adjacency_list(store: GraphStore) -> str:
    return export(store, GraphFormat.ADJACENCY_LIST)


def export_adjacency_matrix(store: GraphStore) -> str:
    return export(store, GraphFormat.ADJACENCY_MATRIX)


__all__ = [
    "AdjacencyListCodec",
    "AdjacencyMatrixCodec",
    "CODECS",
    "EdgeListCodec",
    "GraphCodec",
    "Layout",
    "Link",
    "export",
    "export_adjacency_list",
    "export_adjacency_matrix",
    "export_edge_list",
    "get_codec",
    "parse",
    "parse_adjacency_list",
    "parse_adjacency_matrix",
    "parse_edge_list",
]
