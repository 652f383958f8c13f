"""Circle detection via the enclosing-circle area ratio."""

from __future__ import annotations

from typing import Optional

from ..geometry import circularity_ratio
from ..types import Contour, ShapeType
from .base import ShapeRule


class CircleRule(ShapeRule):
    """Detects round outlines that fill most of their minimum enclosing circle."""

    def __init__(self, min_area_ratio: float = 0.85, min_vertices: int = 6) -> None:
        super().__init__(ShapeType.CIRCLE)
        self.min_area_ratio = min_area_ratio
        self.min_vertices = min_vertices

    def match(self, contour: Contour) -> Optional[float]:
        if contour.num_vertices < self.min_vertices:
            return None
        ratio = circularity_ratio(contour.area, contour.enclosing_circle.radius)
        if ratio <= self.min_area_ratio:
            return None
        # The ratio itself is the confidence; discretization can push it past 1.0.
        return ratio
