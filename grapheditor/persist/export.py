"""Interchange exports built on :mod:`networkx`."""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Literal

import networkx as nx

from grapheditor.graph.store import GraphStore

ExportFormat = Literal["graphml", "json"]


@dataclass
class GraphExporter:
    """Serialize the editor graph to formats other graph tools read."""

    store: GraphStore

    def export(self, *, format: ExportFormat = "json") -> str:
        """Export the graph to the requested ``format``."""

        graph = self.store.to_networkx()
        if format == "graphml":
            # GraphML node ids are strings; record the identity type alongside.
            relabeled = nx.relabel_nodes(graph, {node: str(node) for node in graph.nodes})
            for node in graph.nodes:
                relabeled.nodes[str(node)]["identity_kind"] = type(node).__name__
            return "\n".join(nx.generate_graphml(relabeled))
        if format == "json":
            return json.dumps(nx.node_link_data(graph, edges="edges"), ensure_ascii=False)
        raise ValueError(f"Unsupported export format: {format}")
