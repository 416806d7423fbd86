"""Hypothesis strategies for morphology operator testing."""

from ._binary_images import binary_images
from ._images import images
from ._shapes import image_shapes
from ._structuring_elements import structuring_elements

__all__ = [
    "binary_images",
    "image_shapes",
    "images",
    "structuring_elements",
]
