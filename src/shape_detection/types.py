"""Common types used throughout the shape detection pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class ShapeType(str, Enum):
    """Geometric categories supported by the classifier."""

    CIRCLE = "circle"
    TRIANGLE = "triangle"
    RECTANGLE = "rectangle"
    PENTAGON = "pentagon"
    STAR = "star"


@dataclass(frozen=True)
class Point:
    """A 2D position in image pixel coordinates."""

    x: float
    y: float


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box, in pixels."""

    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True)
class EnclosingCircle:
    """Smallest circle containing every point of a contour."""

    center: Point
    radius: float


@dataclass(frozen=True)
class Moments:
    """The spatial moments needed to locate a contour's centroid."""

    m00: float
    m10: float
    m01: float

    @property
    def centroid(self) -> Optional[Point]:
        if self.m00 == 0:
            return None
        return Point(self.m10 / self.m00, self.m01 / self.m00)


@dataclass(frozen=True)
class Contour:
    """Features of one extracted outline, as supplied by the vision backend.

    ``points`` is the polygon approximation in traversal order. ``area`` and
    every other field describe the raw contour, not the approximation.
    """

    points: Tuple[Point, ...]
    area: float
    bounding_box: BoundingBox
    is_convex: bool
    enclosing_circle: EnclosingCircle
    moments: Moments

    @property
    def num_vertices(self) -> int:
        return len(self.points)

    @property
    def centroid(self) -> Optional[Point]:
        return self.moments.centroid


@dataclass(frozen=True)
class DetectedShape:
    """Represents a single classified contour."""

    shape_type: ShapeType
    confidence: float
    bounding_box: BoundingBox
    center: Point
    area: float

    def to_dict(self) -> Dict[str, Any]:
        box = self.bounding_box
        return {
            "type": self.shape_type.value,
            "confidence": self.confidence,
            "bounding_box": {"x": box.x, "y": box.y, "width": box.width, "height": box.height},
            "center": {"x": self.center.x, "y": self.center.y},
            "area": self.area,
        }


@dataclass(frozen=True)
class DetectionResult:
    """Outcome of one detection run over a single image."""

    shapes: Tuple[DetectedShape, ...]
    processing_time: float  # milliseconds
    image_width: int
    image_height: int

    def labels(self) -> List[str]:
        return [shape.shape_type.value for shape in self.shapes]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "shapes": [shape.to_dict() for shape in self.shapes],
            "processing_time": self.processing_time,
            "image_width": self.image_width,
            "image_height": self.image_height,
        }
