"""
Exceptions raised by the seam carver.

Every error is a precondition violation detected before any pixel is
touched, so a failed call leaves the image exactly as it was.
"""


class SeamCarverError(ValueError):
    """Base class for all seam carver errors."""


class MissingArgumentError(SeamCarverError):
    """A required argument (picture or seam) was None."""


class CoordinateOutOfRangeError(SeamCarverError, IndexError):
    """A pixel coordinate lies outside the current image."""

    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(
            f"Pixel ({x}, {y}) out of range for {width}x{height} image")
        self.x = x
        self.y = y


class InvalidSeamError(SeamCarverError):
    """Seam has the wrong length, an out-of-range entry, or a gap > 1."""


class DimensionExhaustedError(SeamCarverError):
    """The dimension a seam would shrink is already 1 pixel."""
