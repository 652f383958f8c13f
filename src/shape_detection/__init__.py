"""Public exports for the shape detection package."""

from .classifier import ShapeClassifier
from .detector import ShapeDetector
from .exceptions import BackendUnavailableError, ShapeDetectionError
from .types import Contour, DetectedShape, DetectionResult, ShapeType

__all__ = [
    "ShapeClassifier",
    "ShapeDetector",
    "BackendUnavailableError",
    "ShapeDetectionError",
    "Contour",
    "DetectedShape",
    "DetectionResult",
    "ShapeType",
]
