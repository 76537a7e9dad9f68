"""Graph subpackage containing the data model, store and format codecs."""

from .codecs import CODECS, export, parse
from .layout import circular_layout, origin_layout
from .model import Edge, EdgeKey, GraphFormat, IdentityKind, Node, NodeId
from .store import GraphStore
from .validate import FormatIssue, GraphFormatError, ensure_valid, validate

__all__ = [
    "CODECS",
    "Edge",
    "EdgeKey",
    "FormatIssue",
    "GraphFormat",
    "GraphFormatError",
    "GraphStore",
    "IdentityKind",
    "Node",
    "NodeId",
    "circular_layout",
    "ensure_valid",
    "export",
    "origin_layout",
    "parse",
    "validate",
]
