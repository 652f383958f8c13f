"""Classification rule exports."""

from .base import ShapeRule
from .circle import CircleRule
from .polygon import VertexCountRule
from .star import StarRule

__all__ = [
    "ShapeRule",
    "CircleRule",
    "VertexCountRule",
    "StarRule",
]
