"""Persistence utilities for the graph editor."""

from .export import GraphExporter

__all__ = ["GraphExporter"]
