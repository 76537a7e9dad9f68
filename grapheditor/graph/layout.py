"""Layout functions callers hand to the codecs when parsing.

The store itself never computes positions.
"""
from __future__ import annotations

import math

from .codecs import Layout


def circular_layout(width: float, height: float, radius_ratio: float = 0.3) -> Layout:
    """Place node ``index`` of ``total`` evenly on a circle around the canvas centre."""

    center_x = width / 2
    center_y = height / 2
    radius = min(width, height) * radius_ratio

    def _layout(index: int, total: int) -> tuple[float, float]:
        angle = (index / total) * 2 * math.pi if total else 0.0
        return center_x + math.cos(angle) * radius, center_y + math.sin(angle) * radius

    return _layout


def origin_layout(index: int, total: int) -> tuple[float, float]:
    return 0.0, 0.0
