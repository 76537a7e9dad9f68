"""Graph editor package initialization.

This module exposes the primary entry point used by external callers (a UI
layer) to drive the in-memory graph and its text codecs.
"""

from .api import GraphEditor_tool, GraphEditorApp

__all__ = ["GraphEditorApp", "GraphEditor_tool"]
