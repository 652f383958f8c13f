"""Polygon rules keyed purely on the approximation's vertex count."""

from __future__ import annotations

from typing import Optional

from ..types import Contour, ShapeType
from .base import ShapeRule


class VertexCountRule(ShapeRule):
    """Matches any approximation with exactly ``vertex_count`` vertices.

    No aspect-ratio or angle check is made, so every quadrilateral counts as
    a rectangle.
    """

    def __init__(self, shape_type: ShapeType, vertex_count: int, confidence: float = 0.85) -> None:
        super().__init__(shape_type)
        self.vertex_count = vertex_count
        self.confidence = confidence

    def match(self, contour: Contour) -> Optional[float]:
        if contour.num_vertices != self.vertex_count:
            return None
        return self.confidence
