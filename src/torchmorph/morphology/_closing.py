"""Mathematical morphology closing operation."""

from typing import Sequence

from torch import Tensor

from torchmorph.morphology._dilation import dilation
from torchmorph.morphology._erosion import erosion


def closing(
    input: Tensor,
    structuring_element: Tensor,
    *,
    origin: Sequence[int] | None = None,
    padding_mode: str = "replicate",
) -> Tensor:
    r"""Compute 2-D morphological closing.

    Closing is dilation followed by erosion with the same structuring element.
    It fills small dark holes and smooths object boundaries while
    approximately preserving object sizes and shapes.

    Mathematical Definition
    -----------------------
    .. math::
        \varphi_B(f) = \varepsilon_B(\delta_B(f))

    Parameters
    ----------
    input : Tensor, shape (*, ny, nx)
        Input image.
    structuring_element : Tensor
        Boolean mask.
    origin : Sequence[int], optional
        Origin (anchor point) of the structuring element. Default is the center.
    padding_mode : str, optional
        One of ``"replicate"``, ``"reflect"``, ``"circular"``.
        Default: ``"replicate"``.

    Returns
    -------
    Tensor
        Closed image with the same shape as input.

    Notes
    -----
    - Closing is idempotent for symmetric elements.
    - Closing is extensive, ``closing(f, B) >= f``, for symmetric elements
      containing their origin.
    - Closing is the dual of opening: ``closing(f, B) = -opening(-f, B)``.

    See Also
    --------
    opening : Dual operation (erosion followed by dilation).
    bottom_hat : Residual ``closing(f, B) - f``.
    """
    dilated = dilation(
        input,
        structuring_element,
        origin=origin,
        padding_mode=padding_mode,
    )
    return erosion(
        dilated,
        structuring_element,
        origin=origin,
        padding_mode=padding_mode,
    )
