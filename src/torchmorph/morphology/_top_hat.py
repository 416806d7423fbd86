"""White top-hat transform."""

from typing import Sequence

from torch import Tensor

from torchmorph.morphology._neighborhood import as_real
from torchmorph.morphology._opening import opening


def top_hat(
    input: Tensor,
    structuring_element: Tensor,
    *,
    origin: Sequence[int] | None = None,
    padding_mode: str = "replicate",
) -> Tensor:
    r"""Compute the top-hat ``f - opening(f)``.

    Keeps bright details smaller than the structuring element.

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
        Residual with the same shape as input. Non-negative when the
        structuring element is symmetric and contains its origin; the
        one-sided ``"shift"`` element can give negative values.

    See Also
    --------
    bottom_hat : Dark-detail counterpart.
    """
    opened = opening(
        input,
        structuring_element,
        origin=origin,
        padding_mode=padding_mode,
    )
    return as_real(input) - opened
