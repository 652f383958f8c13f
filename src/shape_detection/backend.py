"""Vision backend port and its OpenCV implementation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Sequence, Tuple, Union

import numpy as np
from PIL import Image

try:
    import cv2
    CV2_AVAILABLE = True
except ImportError:
    CV2_AVAILABLE = False

ImageInput = Union[str, Path, bytes, np.ndarray, Image.Image]


class VisionBackend(ABC):
    """Pixel-level capabilities the shape detector relies on."""

    @abstractmethod
    def is_available(self) -> bool:
        """Return whether every capability below can be called."""

    @abstractmethod
    def load_image(self, image_input: ImageInput) -> np.ndarray:
        """Decode an image input into an ndarray the other capabilities accept."""

    @abstractmethod
    def grayscale(self, image: np.ndarray) -> np.ndarray: ...

    @abstractmethod
    def denoise(self, gray: np.ndarray, diameter: int, sigma_color: float, sigma_space: float) -> np.ndarray: ...

    @abstractmethod
    def edge_detect(self, gray: np.ndarray, low: float, high: float) -> np.ndarray: ...

    @abstractmethod
    def find_contours(self, edges: np.ndarray) -> Sequence[np.ndarray]:
        """Return the external contours of a binary edge map."""

    @abstractmethod
    def approx_polygon(self, contour: np.ndarray, epsilon: float) -> np.ndarray: ...

    @abstractmethod
    def arc_length(self, contour: np.ndarray) -> float: ...

    @abstractmethod
    def contour_area(self, contour: np.ndarray) -> float: ...

    @abstractmethod
    def bounding_rect(self, contour: np.ndarray) -> Tuple[int, int, int, int]: ...

    @abstractmethod
    def min_enclosing_circle(self, contour: np.ndarray) -> Tuple[Tuple[float, float], float]: ...

    @abstractmethod
    def moments(self, contour: np.ndarray) -> dict: ...

    @abstractmethod
    def is_convex(self, contour: np.ndarray) -> bool: ...


class OpenCVBackend(VisionBackend):
    """VisionBackend backed by the ``cv2`` module.

    Constructing it never fails; ``is_available`` reports False when OpenCV
    is not installed or the installed build lacks a required function.
    """

    REQUIRED_FUNCTIONS = (
        "imdecode",
        "imread",
        "cvtColor",
        "bilateralFilter",
        "Canny",
        "findContours",
        "approxPolyDP",
        "arcLength",
        "contourArea",
        "boundingRect",
        "minEnclosingCircle",
        "moments",
        "isContourConvex",
    )

    def is_available(self) -> bool:
        return CV2_AVAILABLE and not self.missing_functions()

    def missing_functions(self) -> List[str]:
        if not CV2_AVAILABLE:
            return list(self.REQUIRED_FUNCTIONS)
        return [name for name in self.REQUIRED_FUNCTIONS if not hasattr(cv2, name)]

    def load_image(self, image_input: ImageInput) -> np.ndarray:
        """Accepts an ndarray, a PIL image, encoded bytes or a file path.

        Raises:
            FileNotFoundError: the path does not exist.
            ValueError: the bytes or file cannot be decoded as an image.
        """

        if isinstance(image_input, np.ndarray):
            return image_input.copy()
        if isinstance(image_input, Image.Image):
            return cv2.cvtColor(np.array(image_input.convert("RGB")), cv2.COLOR_RGB2BGR)
        if isinstance(image_input, bytes):
            raw = np.frombuffer(image_input, dtype=np.uint8)
            image = cv2.imdecode(raw, cv2.IMREAD_COLOR) if raw.size else None
            if image is None:
                raise ValueError(f"Undecodable image data ({len(image_input)} bytes)")
            return image

        path = Path(image_input)
        if not path.exists():
            raise FileNotFoundError(f"No image at {path}")
        image = cv2.imread(str(path), cv2.IMREAD_COLOR)
        if image is None:
            raise ValueError(f"Not a readable image file: {path}")
        return image

    def grayscale(self, image: np.ndarray) -> np.ndarray:
        if image.ndim == 2:
            return image
        code = cv2.COLOR_BGRA2GRAY if image.shape[2] == 4 else cv2.COLOR_BGR2GRAY
        return cv2.cvtColor(image, code)

    def denoise(self, gray: np.ndarray, diameter: int, sigma_color: float, sigma_space: float) -> np.ndarray:
        return cv2.bilateralFilter(gray, diameter, sigma_color, sigma_space)

    def edge_detect(self, gray: np.ndarray, low: float, high: float) -> np.ndarray:
        return cv2.Canny(gray, low, high)

    def find_contours(self, edges: np.ndarray) -> Sequence[np.ndarray]:
        contours, _ = cv2.findContours(edges, cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_SIMPLE)
        return contours

    def approx_polygon(self, contour: np.ndarray, epsilon: float) -> np.ndarray:
        return cv2.approxPolyDP(contour, epsilon, True)

    def arc_length(self, contour: np.ndarray) -> float:
        return float(cv2.arcLength(contour, True))

    def contour_area(self, contour: np.ndarray) -> float:
        return float(cv2.contourArea(contour))

    def bounding_rect(self, contour: np.ndarray) -> Tuple[int, int, int, int]:
        x, y, w, h = cv2.boundingRect(contour)
        return int(x), int(y), int(w), int(h)

    def min_enclosing_circle(self, contour: np.ndarray) -> Tuple[Tuple[float, float], float]:
        (cx, cy), radius = cv2.minEnclosingCircle(contour)
        return (float(cx), float(cy)), float(radius)

    def moments(self, contour: np.ndarray) -> dict:
        return cv2.moments(contour)

    def is_convex(self, contour: np.ndarray) -> bool:
        return bool(cv2.isContourConvex(contour))
