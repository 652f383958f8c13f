"""Rule-based classification of a single extracted contour."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from .rules import CircleRule, ShapeRule, StarRule, VertexCountRule
from .types import Contour, DetectedShape, ShapeType

logger = logging.getLogger(__name__)


class ShapeClassifier:
    """Turns a contour into a labeled shape by trying each rule in order.

    The first rule that matches decides the category. Contours smaller than
    ``min_area`` are rejected before any rule runs. A contour that matches no
    rule is not an error: ``classify`` simply returns ``None``.
    """

    def __init__(
        self,
        rules: Optional[Sequence[ShapeRule]] = None,
        min_area: float = 100.0,
        clamp_confidence: bool = False,
    ) -> None:
        self.rules: List[ShapeRule] = list(rules if rules is not None else self._default_rules())
        self.min_area = min_area
        self.clamp_confidence = clamp_confidence

    def classify(self, contour: Contour) -> Optional[DetectedShape]:
        if contour.area < self.min_area:
            return None

        for rule in self.rules:
            confidence = rule.match(contour)
            if confidence is None:
                continue

            center = contour.centroid
            if center is None:
                logger.debug("Skipping %s with degenerate moments (m00 == 0)", rule.shape_type.value)
                return None

            if self.clamp_confidence:
                confidence = self._clip_confidence(confidence)
            return DetectedShape(
                shape_type=rule.shape_type,
                confidence=confidence,
                bounding_box=contour.bounding_box,
                center=center,
                area=contour.area,
            )

        logger.debug("No rule matched contour with %d vertices", contour.num_vertices)
        return None

    def classify_all(self, contours: Iterable[Contour]) -> List[DetectedShape]:
        """Classify contours in order, dropping the ones that match nothing."""

        shapes: List[DetectedShape] = []
        for contour in contours:
            shape = self.classify(contour)
            if shape is not None:
                shapes.append(shape)
        return shapes

    def supported_shapes(self) -> List[ShapeType]:
        return list(dict.fromkeys(rule.shape_type for rule in self.rules))

    def _clip_confidence(self, value: float) -> float:
        return float(max(0.0, min(1.0, value)))

    @staticmethod
    def _default_rules() -> Iterable[ShapeRule]:
        return (
            VertexCountRule(ShapeType.TRIANGLE, 3),
            VertexCountRule(ShapeType.RECTANGLE, 4),
            VertexCountRule(ShapeType.PENTAGON, 5),
            CircleRule(),
            StarRule(),
        )
