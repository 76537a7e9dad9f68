"""Public API surface for the graph editor."""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from grapheditor.config import get_bool_env, get_float_env
from grapheditor.graph import codecs
from grapheditor.graph.codecs import Layout
from grapheditor.graph.layout import circular_layout
from grapheditor.graph.model import GraphFormat, NodeId, coerce_identity
from grapheditor.graph.store import GraphStore
from grapheditor.graph.validate import ensure_valid
from grapheditor.obs.events import EventBus
from grapheditor.persist.export import GraphExporter
from grapheditor.router import ActionRouter

LOGGER = logging.getLogger(__name__)


def _default_store() -> GraphStore:
    return GraphStore(directed=get_bool_env("GRAPH_EDITOR_DIRECTED", default=False))


def default_layout() -> Layout:
    """Circular layout sized from the configured canvas dimensions."""

    return circular_layout(
        get_float_env("GRAPH_EDITOR_CANVAS_WIDTH", 800.0),
        get_float_env("GRAPH_EDITOR_CANVAS_HEIGHT", 600.0),
        get_float_env("GRAPH_EDITOR_LAYOUT_RADIUS", 0.3),
    )


def _require(params: dict, key: str) -> object:
    if params.get(key) is None:
        raise KeyError(f"'{key}' is required")
    return params[key]


def _require_id(params: dict, key: str) -> NodeId:
    return coerce_identity(_require(params, key))


def _coordinate(params: dict, key: str) -> float:
    value = params.get(key)
    return 0.0 if value is None else float(value)


@dataclass
class GraphEditorApp:
    """Container wiring the graph store to the action router and event bus.

    Every call through :meth:`handle` runs under a per-instance lock so a
    single graph can be shared between concurrent callers.
    """

    graph_store: GraphStore = field(default_factory=_default_store)
    event_bus: EventBus = field(default_factory=EventBus)
    router: ActionRouter = field(default_factory=ActionRouter)
    layout: Layout = field(default_factory=default_layout)
    _lock: threading.RLock = field(default_factory=threading.RLock, init=False, repr=False)

    def __post_init__(self) -> None:
        self._register_default_actions()

    def handle(self, payload: dict) -> dict:
        """Dispatch an API payload and return a canonical response."""

        action = payload.get("action")
        if not action:
            raise KeyError("payload must include 'action'")
        params = payload.get("params") or {}
        with self._lock:
            result = self.router.dispatch(action, params)
            event = self.event_bus.emit(
                level="info",
                msg=f"Executed action '{action}'",
                action=action,
                node_ids=result.get("node_ids"),
            )
            graph = self.serialize_graph()
        return {
            "ok": True,
            "result": result.get("result", {}),
            "events": [event.to_dict()],
            "graph": graph,
        }

    def _register_default_actions(self) -> None:
        self.router.register("add_node", self._handle_add_node)
        self.router.register("remove_node", self._handle_remove_node)
        self.router.register("move_node", self._handle_move_node)
        self.router.register("add_edge", self._handle_add_edge)
        self.router.register("remove_edge", self._handle_remove_edge)
        self.router.register("has_edge", self._handle_has_edge)
        self.router.register("set_directed", self._handle_set_directed)
        self.router.register("clear", self._handle_clear)
        self.router.register("parse", self._handle_parse)
        self.router.register("export", self._handle_export)
        self.router.register("export_graph", self._handle_export_graph)
        self.router.register("describe_format", self._handle_describe_format)
        self.router.register("state", self._handle_state)

    # ------------------------------------------------------------------
    # Action handlers
    # ------------------------------------------------------------------

    def _handle_add_node(self, params: dict) -> dict:
        label = params.get("label")
        node_id = self.graph_store.add_node(
            _coordinate(params, "x"),
            _coordinate(params, "y"),
            label=coerce_identity(label) if label is not None else None,
        )
        return {"result": {"node_id": node_id}, "node_ids": [node_id]}

    def _handle_remove_node(self, params: dict) -> dict:
        node_id = _require_id(params, "node_id")
        existed = node_id in self.graph_store.nodes
        self.graph_store.remove_node(node_id)
        return {"result": {"removed": existed}, "node_ids": [node_id]}

    def _handle_move_node(self, params: dict) -> dict:
        node_id = _require_id(params, "node_id")
        moved = self.graph_store.move_node(
            node_id,
            float(_require(params, "x")),  # type: ignore[arg-type]
            float(_require(params, "y")),  # type: ignore[arg-type]
        )
        return {"result": {"moved": moved}, "node_ids": [node_id]}

    def _handle_add_edge(self, params: dict) -> dict:
        source = _require_id(params, "source")
        target = _require_id(params, "target")
        before = len(self.graph_store.edges)
        self.graph_store.add_edge(source, target)
        added = len(self.graph_store.edges) > before
        return {
            "result": {"added": added, "exists": self.graph_store.has_edge(source, target)},
            "node_ids": [source, target],
        }

    def _handle_remove_edge(self, params: dict) -> dict:
        source = _require_id(params, "source")
        target = _require_id(params, "target")
        removed = self.graph_store.remove_edge(source, target)
        return {"result": {"removed": removed}, "node_ids": [source, target]}

    def _handle_has_edge(self, params: dict) -> dict:
        source = _require_id(params, "source")
        target = _require_id(params, "target")
        return {"result": {"exists": self.graph_store.has_edge(source, target)}}

    def _handle_set_directed(self, params: dict) -> dict:
        directed = _require(params, "directed")
        if not isinstance(directed, bool):
            raise TypeError("'directed' must be a boolean")
        self.graph_store.set_directed(directed)
        return {"result": {"directed": self.graph_store.directed}}

    def _handle_clear(self, params: dict) -> dict:
        self.graph_store.clear()
        return {"result": {}}

    def _handle_parse(self, params: dict) -> dict:
        parsed = self.parse(
            format=_require(params, "format"),  # type: ignore[arg-type]
            text=params.get("text") or "",
            strict=bool(params.get("strict", False)),
        )
        return {
            "result": {
                "parsed": parsed,
                "node_count": len(self.graph_store.nodes),
                "edge_count": len(self.graph_store.edges),
            }
        }

    def _handle_export(self, params: dict) -> dict:
        fmt = GraphFormat.coerce(_require(params, "format"))  # type: ignore[arg-type]
        return {"result": {"text": self.export(format=fmt), "filename": fmt.filename}}

    def _handle_export_graph(self, params: dict) -> dict:
        fmt = params.get("format", "json")
        text = GraphExporter(self.graph_store).export(format=fmt)
        return {"result": {"text": text, "filename": f"graph.{fmt}"}}

    def _handle_describe_format(self, params: dict) -> dict:
        fmt = GraphFormat.coerce(_require(params, "format"))  # type: ignore[arg-type]
        return {"result": {"format": fmt.value, "description": fmt.description, "example": fmt.example}}

    def _handle_state(self, params: dict) -> dict:
        return {"result": self.serialize_graph()}

    # ------------------------------------------------------------------
    # High level operations
    # ------------------------------------------------------------------

    def parse(self, *, format: str | GraphFormat, text: str, strict: bool = False) -> bool:
        """Replace the graph with ``text`` decoded as ``format``.

        Blank input leaves the graph untouched and returns ``False``.
        """

        fmt = GraphFormat.coerce(format)
        if not text.strip():
            LOGGER.debug("Ignoring blank %s input", fmt.value)
            return False
        if strict:
            ensure_valid(fmt, text)
        codecs.parse(self.graph_store, fmt, text, self.layout)
        return True

    def export(self, *, format: str | GraphFormat) -> str:
        return codecs.export(self.graph_store, format)

    def serialize_graph(self) -> dict:
        return {
            "directed": self.graph_store.directed,
            "nodes": [node.to_dict() for node in self.graph_store.nodes.values()],
            "edges": [edge.to_dict() for edge in self.graph_store.edges.values()],
        }


_APP: GraphEditorApp | None = None


def _get_app() -> GraphEditorApp:
    global _APP
    if _APP is None:
        _APP = GraphEditorApp()
    return _APP


def GraphEditor_tool(payload: dict) -> dict:
    """Entry point exposed to external callers."""

    return _get_app().handle(payload)
