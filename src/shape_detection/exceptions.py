"""Errors raised by the shape detection package."""


class ShapeDetectionError(Exception):
    """Base class for errors raised by the shape detection package."""


class BackendUnavailableError(ShapeDetectionError):
    """Thrown when the vision backend is missing and no contour can be extracted."""
    def __init__(self, reason: str = "no vision backend configured"):
        super().__init__(f'Vision backend unavailable: {reason}')
        self.reason = reason
