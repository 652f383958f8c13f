"""Five-pointed star detection from the pattern of turn angles."""

from __future__ import annotations

from typing import Optional

from ..geometry import mean_and_pstdev, partition_turn_angles, turn_angles
from ..types import Contour, ShapeType
from .base import ShapeRule


class StarRule(ShapeRule):
    """Detects stars as non-convex polygons alternating sharp and wide turns.

    A star approximation has ``vertex_count`` vertices whose turn angles fall
    into two equally sized buckets either side of ``angle_split``. Each bucket
    must be tight (population standard deviation below ``max_std_dev``); the
    confidence drops linearly with the combined spread and is not clipped.
    """

    def __init__(
        self,
        vertex_count: int = 10,
        angle_split: float = 120.0,
        max_std_dev: float = 30.0,
    ) -> None:
        super().__init__(ShapeType.STAR)
        self.vertex_count = vertex_count
        self.angle_split = angle_split
        self.max_std_dev = max_std_dev

    def match(self, contour: Contour) -> Optional[float]:
        if contour.num_vertices != self.vertex_count or contour.is_convex:
            return None

        inner, outer = partition_turn_angles(turn_angles(contour.points), self.angle_split)
        points_per_bucket = self.vertex_count // 2
        if len(inner) != points_per_bucket or len(outer) != points_per_bucket:
            return None

        _, inner_std = mean_and_pstdev(inner)
        _, outer_std = mean_and_pstdev(outer)
        if inner_std >= self.max_std_dev or outer_std >= self.max_std_dev:
            return None

        return 1 - (inner_std + outer_std) / (2 * self.max_std_dev)
