"""High level API that runs extraction and classification over an image."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import List, Optional

from .backend import ImageInput, OpenCVBackend, VisionBackend
from .classifier import ShapeClassifier
from .exceptions import BackendUnavailableError
from .extraction import ContourExtractor
from .types import DetectionResult, ShapeType

logger = logging.getLogger(__name__)


class ShapeDetector:
    """Finds and labels the geometric shapes in an image."""

    def __init__(
        self,
        backend: Optional[VisionBackend] = None,
        classifier: Optional[ShapeClassifier] = None,
        extractor: Optional[ContourExtractor] = None,
    ) -> None:
        if extractor is None:
            extractor = ContourExtractor(backend if backend is not None else OpenCVBackend())
        self.extractor = extractor
        self.classifier = classifier or ShapeClassifier()

    @property
    def backend(self) -> VisionBackend:
        return self.extractor.backend

    async def detect_shapes(self, image_input: ImageInput) -> DetectionResult:
        """Return every classified shape in the image, in contour discovery order.

        Raises:
            BackendUnavailableError: the vision backend cannot be used. Raised
                before the image is read; no partial result is produced.
        """

        start = time.perf_counter()
        self._require_backend()

        image = await asyncio.to_thread(self.backend.load_image, image_input)
        height, width = image.shape[:2]

        contours = self.extractor.extract(image)
        shapes = self.classifier.classify_all(contours)

        processing_time = (time.perf_counter() - start) * 1000
        logger.info(
            "Detected %d shapes among %d contours in %.2fms (%dx%d)",
            len(shapes),
            len(contours),
            processing_time,
            width,
            height,
        )
        return DetectionResult(
            shapes=tuple(shapes),
            processing_time=processing_time,
            image_width=int(width),
            image_height=int(height),
        )

    def detect_shapes_sync(self, image_input: ImageInput) -> DetectionResult:
        """Blocking variant of :meth:`detect_shapes` for scripts."""

        return asyncio.run(self.detect_shapes(image_input))

    def supported_shapes(self) -> List[ShapeType]:
        """Expose which shape types the configured rules can produce."""

        return self.classifier.supported_shapes()

    def _require_backend(self) -> None:
        backend = self.backend
        if backend is None:
            raise BackendUnavailableError()
        if not backend.is_available():
            raise BackendUnavailableError(f"{type(backend).__name__} is not usable")
