"""
Exception types raised by the seam carving engine.

All failures are synchronous and surfaced immediately; a failing call
leaves any picture it was handed unmodified.
"""


class SeamCarvingError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentError(SeamCarvingError, ValueError):
    """Malformed constructor or call input (negative ids, bad dimensions, ...)."""


class OutOfBoundsError(SeamCarvingError, IndexError):
    """A coordinate, vertex index or seam entry lies outside its valid range."""


class InvalidSeamError(SeamCarvingError, ValueError):
    """A seam does not fit the picture it is applied to."""


class ImageIOError(SeamCarvingError):
    """Reading or writing an image file failed."""
