"""Small numeric helpers shared by the classification rules."""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

import numpy as np

from .types import Point


def turn_angle(p1: Point, p2: Point, p3: Point) -> float:
    """Angle at ``p2`` from the edge towards ``p1`` to the edge towards ``p3``.

    The result is in degrees, normalized into ``[0, 360)``.
    """

    angle = math.atan2(p3.y - p2.y, p3.x - p2.x) - math.atan2(p1.y - p2.y, p1.x - p2.x)
    degrees = math.degrees(angle)
    if degrees < 0:
        degrees += 360
    return degrees


def turn_angles(points: Sequence[Point]) -> List[float]:
    """Turn angle at every vertex of a closed polygon, in vertex order."""

    n = len(points)
    return [turn_angle(points[(j - 1) % n], points[j], points[(j + 1) % n]) for j in range(n)]


def partition_turn_angles(
    angles: Sequence[float], split: float = 120.0
) -> Tuple[List[float], List[float]]:
    """Split angles into (inner, outer) buckets around ``split``.

    Angles exactly equal to ``split`` belong to neither bucket.
    """

    inner = [angle for angle in angles if angle < split]
    outer = [angle for angle in angles if angle > split]
    return inner, outer


def mean_and_pstdev(values: Sequence[float]) -> Tuple[float, float]:
    """Mean and population standard deviation (divides by ``len(values)``)."""

    data = np.asarray(values, dtype=np.float64)
    if data.size == 0:
        raise ValueError("mean_and_pstdev requires at least one value")
    return float(data.mean()), float(data.std(ddof=0))


def circularity_ratio(area: float, radius: float) -> float:
    """Contour area relative to the area of its minimum enclosing circle."""

    circle_area = math.pi * radius * radius
    if circle_area == 0:
        return 0.0
    return area / circle_area
