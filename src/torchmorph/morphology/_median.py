"""Median filter over a structuring-element neighborhood."""

from typing import Sequence

import torch
from torch import Tensor

from torchmorph.morphology._neighborhood import as_real, neighborhood


def median(
    input: Tensor,
    structuring_element: Tensor,
    *,
    origin: Sequence[int] | None = None,
    padding_mode: str = "replicate",
) -> Tensor:
    r"""Compute the median of every structuring-element neighborhood.

    Parameters
    ----------
    input : Tensor, shape (*, ny, nx)
        Input image. Integer images are converted to ``float32``.
    structuring_element : Tensor
        Boolean mask of shape ``(m, n)``.
    origin : Sequence[int], optional
        Anchor ``(row, column)``. Default is the center.
    padding_mode : str, optional
        One of ``"replicate"`` (default), ``"reflect"``, ``"circular"``.

    Returns
    -------
    Tensor
        Filtered image with the same shape as input.

    Notes
    -----
    When the mask has an even number of active cells the **lower** of the
    two central order statistics is returned; the two are never averaged,
    so the output only contains values present in the input. Square, cross
    and disk elements always have an odd number of cells.
    """
    views = neighborhood(
        as_real(input),
        structuring_element,
        origin=origin,
        padding_mode=padding_mode,
        name="median",
    )

    # (*, ny, nx, k); torch.median picks the lower middle value
    stacked = torch.stack(views, dim=-1)
    return stacked.median(dim=-1).values
