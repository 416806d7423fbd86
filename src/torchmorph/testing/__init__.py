"""Testing helpers for torchmorph operators."""

from torchmorph.testing import strategies

__all__ = [
    "strategies",
]
