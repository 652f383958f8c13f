"""Turns an image into contour records through a vision backend."""

from __future__ import annotations

import logging
from typing import List

import numpy as np

from .backend import VisionBackend
from .types import BoundingBox, Contour, EnclosingCircle, Moments, Point

logger = logging.getLogger(__name__)


class ContourExtractor:
    """Extracts external contours and the features the classifier needs.

    Pipeline: grayscale, bilateral denoise, Canny edges, external contours.
    Each contour is simplified with a tolerance of ``approx_epsilon_factor``
    times its closed perimeter. Area, bounding box, enclosing circle, moments
    and convexity are measured on the raw contour.
    """

    def __init__(
        self,
        backend: VisionBackend,
        *,
        approx_epsilon_factor: float = 0.04,
        canny_low: float = 50,
        canny_high: float = 100,
        bilateral_diameter: int = 9,
        bilateral_sigma: float = 75,
    ) -> None:
        self.backend = backend
        self.approx_epsilon_factor = approx_epsilon_factor
        self.canny_low = canny_low
        self.canny_high = canny_high
        self.bilateral_diameter = bilateral_diameter
        self.bilateral_sigma = bilateral_sigma

    def extract(self, image: np.ndarray) -> List[Contour]:
        backend = self.backend
        gray = backend.grayscale(image)
        blurred = backend.denoise(gray, self.bilateral_diameter, self.bilateral_sigma, self.bilateral_sigma)
        edges = backend.edge_detect(blurred, self.canny_low, self.canny_high)
        raw_contours = backend.find_contours(edges)
        logger.debug("Found %d external contours", len(raw_contours))
        return [self.describe(raw) for raw in raw_contours]

    def describe(self, raw: np.ndarray) -> Contour:
        """Build a Contour record from one raw backend contour."""

        backend = self.backend
        perimeter = backend.arc_length(raw)
        approx = backend.approx_polygon(raw, self.approx_epsilon_factor * perimeter)
        points = tuple(Point(float(x), float(y)) for x, y in np.asarray(approx).reshape(-1, 2))

        x, y, w, h = backend.bounding_rect(raw)
        (cx, cy), radius = backend.min_enclosing_circle(raw)
        moments = backend.moments(raw)

        return Contour(
            points=points,
            area=backend.contour_area(raw),
            bounding_box=BoundingBox(x, y, w, h),
            is_convex=backend.is_convex(raw),
            enclosing_circle=EnclosingCircle(Point(cx, cy), radius),
            moments=Moments(float(moments["m00"]), float(moments["m10"]), float(moments["m01"])),
        )
