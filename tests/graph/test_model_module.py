"""Tests covering :mod:`grapheditor.graph.model`."""

from __future__ import annotations

import pytest

from grapheditor.graph.model import (
    Edge,
    EdgeKey,
    GraphFormat,
    IdentityKind,
    Node,
    coerce_identity,
    identity_kind,
    identity_sort_key,
)


def test_identity_kind_distinguishes_integers_and_labels():
    assert identity_kind(3) is IdentityKind.INTEGER
    assert identity_kind("3") is IdentityKind.LABEL


@pytest.mark.parametrize("value", [True, 1.5, None, ("a", "b")])
def test_coerce_identity_rejects_other_types(value):
    with pytest.raises(TypeError):
        coerce_identity(value)


def test_identity_sort_key_puts_integers_first():
    ordered = sorted(["b", 10, "a", 2], key=identity_sort_key)
    assert ordered == [2, 10, "a", "b"]


def test_edge_key_is_structural_not_string_based():
    assert EdgeKey("1-2", "3") != EdgeKey("1", "2-3")
    assert EdgeKey(1, 2) != EdgeKey("1", "2")
    assert EdgeKey("a", "b").reversed() == EdgeKey("b", "a")


def test_edge_exposes_its_key():
    edge = Edge("a", "b")
    assert edge.key == EdgeKey("a", "b")
    assert edge.to_dict() == {"source": "a", "target": "b"}


def test_node_label_defaults_to_identity_text():
    node = Node(id=7, x=1.0, y=2.0)
    assert node.label == "7"
    assert node.to_dict() == {"id": 7, "x": 1.0, "y": 2.0, "label": "7"}


def test_graph_format_coerce_accepts_names_and_values():
    assert GraphFormat.coerce("adjacency_matrix") is GraphFormat.ADJACENCY_MATRIX
    assert GraphFormat.coerce(" Edge-List ") is GraphFormat.EDGE_LIST
    assert GraphFormat.coerce(GraphFormat.ADJACENCY_LIST) is GraphFormat.ADJACENCY_LIST
    with pytest.raises(ValueError):
        GraphFormat.coerce("csv")


def test_graph_format_hints_and_filename():
    fmt = GraphFormat.ADJACENCY_LIST
    assert "adjacency list" in fmt.description
    assert fmt.example.splitlines()[0] == "1: 2 3"
    assert fmt.filename == "graph-adjacency-list.txt"
