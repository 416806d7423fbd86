"""Exceptions for morphological operators."""


class MorphologyError(ValueError):
    """Base exception for all morphology validation errors."""

    pass


class UnsupportedDepthError(MorphologyError):
    """Raised when an image is not 8-bit, 16-bit, 32-bit float or RGB."""

    pass


class UndefinedElementError(MorphologyError):
    """Raised when a structuring element cannot be generated or used.

    Covers even or out-of-range sizes, unknown shapes, and masks that have
    no center cell or no active cell.
    """

    pass


class NotBinaryError(MorphologyError):
    """Raised when a skeleton input is not a 0/255 binary image."""

    pass
