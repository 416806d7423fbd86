"""Morphological gradient."""

from typing import Sequence

from torch import Tensor

from torchmorph.morphology._dilation import dilation
from torchmorph.morphology._erosion import erosion


def gradient(
    input: Tensor,
    structuring_element: Tensor,
    *,
    origin: Sequence[int] | None = None,
    padding_mode: str = "replicate",
) -> Tensor:
    r"""Compute the morphological gradient ``dilation(f) - erosion(f)``.

    The result is large on edges and zero in flat regions. It is
    non-negative whenever the mask contains its origin.

    Parameters
    ----------
    input : Tensor, shape (*, ny, nx)
        Input image.
    structuring_element : Tensor
        Boolean mask.
    origin : Sequence[int], optional
        Anchor of the structuring element. Default is the center.
    padding_mode : str, optional
        One of ``"replicate"`` (default), ``"reflect"``, ``"circular"``.

    Returns
    -------
    Tensor
        Gradient image with the same shape as input.
    """
    dilated = dilation(
        input,
        structuring_element,
        origin=origin,
        padding_mode=padding_mode,
    )
    eroded = erosion(
        input,
        structuring_element,
        origin=origin,
        padding_mode=padding_mode,
    )
    return dilated - eroded
