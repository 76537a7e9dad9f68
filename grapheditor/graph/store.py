"""In-memory storage for the editor's single graph."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import networkx as nx

from .ids import next_default_id
from .model import Edge, EdgeKey, Node, NodeId

LOGGER = logging.getLogger(__name__)


@dataclass
class GraphStore:
    """Own the node and edge sets along with the global ``directed`` flag.

    ``nodes`` and ``edges`` are plain insertion-ordered dictionaries that
    callers may read directly for rendering and hit-testing. Mutations go
    through the methods below, which keep the invariants:

    * every stored edge references nodes that existed when it was added;
    * removing a node removes every edge touching it;
    * in undirected mode at most one orientation of a pair is stored.

    Toggling ``directed`` never rewrites stored edges, so switching from
    directed to undirected may leave both ``A -> B`` and ``B -> A`` behind.
    """

    nodes: Dict[NodeId, Node] = field(default_factory=dict)
    edges: Dict[EdgeKey, Edge] = field(default_factory=dict)
    directed: bool = False

    # ------------------------------------------------------------------
    # Nodes
    # ------------------------------------------------------------------

    def next_default_id(self) -> int:
        """Return the identity :meth:`add_node` assigns when no label is given."""

        return next_default_id(self.nodes)

    def add_node(self, x: float, y: float, label: Optional[NodeId] = None) -> NodeId:
        """Add a node at ``(x, y)`` and return its identity.

        An explicit ``label`` becomes the identity verbatim. If a node with
        that identity already exists it is kept untouched.
        """

        node_id = label if label is not None else self.next_default_id()
        if node_id not in self.nodes:
            self.nodes[node_id] = Node(id=node_id, x=x, y=y)
        return node_id

    def remove_node(self, node_id: NodeId) -> None:
        """Remove ``node_id`` and every edge it participates in."""

        if self.nodes.pop(node_id, None) is None:
            return
        dangling = [key for key, edge in self.edges.items() if node_id in (edge.source, edge.target)]
        for key in dangling:
            del self.edges[key]
        LOGGER.debug("Removed node %r with %d edge(s)", node_id, len(dangling))

    def move_node(self, node_id: NodeId, x: float, y: float) -> bool:
        """Update the position of an existing node."""

        node = self.nodes.get(node_id)
        if node is None:
            return False
        node.x = x
        node.y = y
        return True

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def add_edge(self, source: NodeId, target: NodeId) -> None:
        """Connect ``source`` to ``target`` if both nodes exist."""

        if source not in self.nodes or target not in self.nodes:
            return
        key = EdgeKey(source, target)
        if self.directed:
            self.edges[key] = Edge(source, target)
        elif key not in self.edges and key.reversed() not in self.edges:
            self.edges[key] = Edge(source, target)

    def has_edge(self, source: NodeId, target: NodeId) -> bool:
        key = EdgeKey(source, target)
        return key in self.edges or (not self.directed and key.reversed() in self.edges)

    def remove_edge(self, source: NodeId, target: NodeId) -> bool:
        """Remove the edge ``source -> target``.

        In undirected mode the reverse key is removed too, since either
        orientation may be the one that was stored.
        """

        key = EdgeKey(source, target)
        removed = self.edges.pop(key, None) is not None
        if not self.directed:
            removed = self.edges.pop(key.reversed(), None) is not None or removed
        return removed

    def neighbors(self, node_id: NodeId) -> List[NodeId]:
        """Return the neighbours listed for ``node_id`` in an adjacency list."""

        result: List[NodeId] = []
        for edge in self.edges.values():
            if edge.source == node_id:
                result.append(edge.target)
            if not self.directed and edge.target == node_id:
                result.append(edge.source)
        return result

    # ------------------------------------------------------------------
    # Whole-graph operations
    # ------------------------------------------------------------------

    def clear(self) -> None:
        """Empty both the node and edge sets."""

        self.nodes.clear()
        self.edges.clear()

    def set_directed(self, directed: bool) -> None:
        """Switch the global edge mode without touching stored edges."""

        self.directed = bool(directed)

    def to_networkx(self) -> nx.Graph:
        """Return a :mod:`networkx` copy of the current graph."""

        graph: nx.Graph = nx.DiGraph() if self.directed else nx.Graph()
        for node in self.nodes.values():
            graph.add_node(node.id, x=node.x, y=node.y, label=node.label)
        for edge in self.edges.values():
            graph.add_edge(edge.source, edge.target)
        return graph
