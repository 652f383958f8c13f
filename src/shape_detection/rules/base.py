"""Base classification rule definitions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..types import Contour, ShapeType


class ShapeRule(ABC):
    """Abstract base class for one step of the classification chain."""

    shape_type: ShapeType

    def __init__(self, shape_type: ShapeType) -> None:
        self.shape_type = shape_type

    @abstractmethod
    def match(self, contour: Contour) -> Optional[float]:
        """Return a confidence if the contour is this rule's shape, else ``None``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.shape_type.value})"
