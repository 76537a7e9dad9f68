"""Tests for :mod:`grapheditor.router`."""

from __future__ import annotations

import pytest

from grapheditor.api import GraphEditorApp
from grapheditor.graph.layout import origin_layout
from grapheditor.router import ActionRouter, normalize_action


def test_normalize_action():
    assert normalize_action(" Export-Edge-List ") == "export_edge_list"


def test_router_dispatches_registered_handler():
    router = ActionRouter()
    router.register("echo-params", lambda params: {"result": params})

    assert router.dispatch("echo_params", {"a": 1}) == {"result": {"a": 1}}
    assert router.actions() == ("echo_params",)


def test_router_dispatch_missing_action_raises():
    with pytest.raises(KeyError) as excinfo:
        ActionRouter().dispatch("unknown_action", {})
    assert "unknown_action" in str(excinfo.value)


def test_app_registers_default_actions():
    app = GraphEditorApp(layout=origin_layout)

    assert {"add_node", "add_edge", "parse", "export", "export_graph"}.issubset(app.router.actions())

    result = app.router.dispatch("add-node", {"x": 1, "y": 2})
    assert result["result"]["node_id"] == 1
    assert app.graph_store.nodes[1].x == 1.0
