"""Spur removal on binary skeletons."""

import torch
from loguru import logger
from torch import Tensor

from torchmorph.morphology._constants import FOREGROUND
from torchmorph.morphology._skeletonize import thin
from torchmorph.morphology._topology import (
    E,
    S,
    SE,
    SW,
    check_binary,
    neighbor_count,
    neighbors,
)

# Neighbors that come later in row-major order
_FORWARD = (E, SW, S, SE)


def _check_length(length: int, name: str) -> None:
    if isinstance(length, bool) or not isinstance(length, int):
        raise ValueError(
            f"{name}: length must be an integer, got {type(length).__name__}"
        )
    if length < 0:
        raise ValueError(f"{name}: length must be non-negative, got {length}")


def _prune(foreground: Tensor, length: int) -> Tensor:
    current = foreground.clone()
    for step in range(length):
        planes = neighbors(current)
        endpoints = current & (neighbor_count(planes) == 1)

        # Of two touching endpoints (a two-pixel component) keep the first
        # in raster order.
        partners = neighbors(endpoints)
        keep = torch.zeros_like(endpoints)
        for k in _FORWARD:
            keep |= partners[k]
        removable = endpoints & ~keep

        count = int(removable.sum())
        logger.debug("pruning round {}: removed {} endpoints", step + 1, count)
        if count == 0:
            break
        current = current & ~removable
    return current


def prune(input: Tensor, length: int) -> Tensor:
    r"""Remove spurs from a binary skeleton.

    Each round deletes every endpoint (a foreground pixel with exactly one
    foreground 8-neighbor) at once. After ``length`` rounds, branches
    shorter than ``length`` are gone and every other free end has
    retreated by ``length`` pixels along its arc.

    Pruning never deletes a whole connected component: isolated points
    have no neighbor and are not endpoints, and of a two-pixel component
    only the pixel later in raster order is removed. Closed loops have no
    endpoint and are left alone.

    Parameters
    ----------
    input : Tensor, shape (*, ny, nx)
        Binary 0/255 image, usually the output of :func:`skeletonize`.
    length : int
        Number of pruning rounds, ``length >= 0``. ``0`` returns a copy.

    Returns
    -------
    Tensor
        Pruned image with the dtype of ``input``; its foreground is a
        subset of the input foreground.

    Raises
    ------
    NotBinaryError
        If an image is not a 0/255 binary image.
    ValueError
        If ``length`` is negative or not an integer.
    """
    _check_length(length, "prune")
    check_binary(input, "prune")
    pruned = _prune(input == FOREGROUND, length)
    return pruned.to(input.dtype) * FOREGROUND


def skeletonize_and_prune(input: Tensor, length: int) -> Tensor:
    """Skeletonize a binary image, then prune spurs of up to ``length`` pixels.

    See :func:`skeletonize` and :func:`prune`. Validation of both the image
    and ``length`` happens before any thinning pass.
    """
    _check_length(length, "skeletonize_and_prune")
    check_binary(input, "skeletonize_and_prune")
    skeleton = thin(input == FOREGROUND)
    pruned = _prune(skeleton, length)
    return pruned.to(input.dtype) * FOREGROUND
