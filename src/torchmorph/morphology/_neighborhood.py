"""Shared neighborhood machinery for flat morphological reductions."""

from typing import Sequence

import torch
from torch import Tensor

from torchmorph.morphology._constants import PADDING_MODES
from torchmorph.morphology._exceptions import UndefinedElementError
from torchmorph.pad import pad


def as_real(input: Tensor) -> Tensor:
    """Return ``input`` as a floating tensor (integers become float32)."""
    if input.is_floating_point():
        return input
    return input.to(torch.float32)


def validate_structuring_element(
    structuring_element: Tensor,
    origin: Sequence[int] | None,
    name: str,
) -> tuple[int, int]:
    """Check a flat 2-D mask and return its anchor ``(row, column)``."""
    if structuring_element.dim() != 2:
        raise UndefinedElementError(
            f"{name}: structuring_element must be 2-dimensional, got "
            f"{structuring_element.dim()} dimensions"
        )
    if structuring_element.dtype != torch.bool:
        raise UndefinedElementError(
            f"{name}: structuring_element must have dtype torch.bool, got "
            f"{structuring_element.dtype}"
        )
    if not structuring_element.any():
        raise UndefinedElementError(
            f"{name}: structuring_element has no active cell"
        )

    m, n = structuring_element.shape
    if origin is None:
        if m % 2 == 0 or n % 2 == 0:
            raise UndefinedElementError(
                f"{name}: structuring_element of shape ({m}, {n}) has no "
                f"center cell; pass an explicit origin"
            )
        return m // 2, n // 2

    origin = tuple(origin)
    if len(origin) != 2 or not (0 <= origin[0] < m and 0 <= origin[1] < n):
        raise UndefinedElementError(
            f"{name}: origin {origin} lies outside the structuring element "
            f"of shape ({m}, {n})"
        )
    return origin


def neighborhood(
    input: Tensor,
    structuring_element: Tensor,
    *,
    origin: Sequence[int] | None,
    padding_mode: str,
    name: str,
) -> list[Tensor]:
    """Return one shifted view of ``input`` per active structuring-element cell.

    The view for cell ``(r, c)`` holds, at output position ``(y, x)``, the
    input sample ``(y + r - oy, x + c - ox)`` resolved by ``padding_mode``.
    With ``"replicate"`` this is exactly
    ``torchmorph.pad.sample(input, x + c - ox, y + r - oy)``. Views share
    storage with a single padded copy of the input and are never written
    to.
    """
    if input.dim() < 2:
        raise ValueError(
            f"{name}: input must have at least 2 dimensions, got "
            f"{input.dim()}"
        )

    if padding_mode not in PADDING_MODES:
        raise ValueError(
            f"{name}: padding_mode must be one of {list(PADDING_MODES)}, "
            f"got '{padding_mode}'"
        )

    oy, ox = validate_structuring_element(structuring_element, origin, name)
    m, n = structuring_element.shape
    ny, nx = input.shape[-2], input.shape[-1]

    padded = pad(
        input,
        (ox, n - 1 - ox, oy, m - 1 - oy),
        mode=padding_mode,
    )

    return [
        padded[..., r : r + ny, c : c + nx]
        for r, c in structuring_element.nonzero().tolist()
    ]
