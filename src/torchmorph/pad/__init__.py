"""Boundary handling for neighborhood operators."""

from torchmorph.pad._pad import PaddingMode, pad, sample

__all__ = [
    "PaddingMode",
    "pad",
    "sample",
]
