"""Mathematical morphology opening operation."""

from typing import Sequence

from torch import Tensor

from torchmorph.morphology._dilation import dilation
from torchmorph.morphology._erosion import erosion


def opening(
    input: Tensor,
    structuring_element: Tensor,
    *,
    origin: Sequence[int] | None = None,
    padding_mode: str = "replicate",
) -> Tensor:
    r"""Compute 2-D morphological opening.

    Opening is erosion followed by dilation with the same structuring element.
    It removes small bright spots and smooths object boundaries while
    approximately preserving object sizes and shapes.

    Mathematical Definition
    -----------------------
    .. math::
        \gamma_B(f) = \delta_B(\varepsilon_B(f))

    where :math:`\varepsilon_B` is erosion and :math:`\delta_B` is dilation.

    Parameters
    ----------
    input : Tensor, shape (*, ny, nx)
        Input image.
    structuring_element : Tensor
        Boolean mask.
    origin : Sequence[int], optional
        Origin (anchor point) of the structuring element. Default is the center.
    padding_mode : str, optional
        How to handle boundaries. One of ``"replicate"``, ``"reflect"``,
        ``"circular"``. Default: ``"replicate"``.

    Returns
    -------
    Tensor
        Opened image with the same shape as input.

    Examples
    --------
    Remove small bright features:

    >>> image = torch.rand(64, 64)
    >>> se = generate_structuring_element("square", 3)
    >>> opened = opening(image, se)

    Notes
    -----
    - Opening is idempotent for symmetric elements:
      ``opening(opening(f, B), B) = opening(f, B)``.
    - Opening is anti-extensive, ``opening(f, B) <= f``, for symmetric
      elements containing their origin. The one-sided ``"shift"`` element
      moves features and is neither idempotent nor anti-extensive.

    See Also
    --------
    closing : Dual operation (dilation followed by erosion).
    top_hat : Residual ``f - opening(f, B)``.

    References
    ----------
    .. [1] J. Serra, "Image Analysis and Mathematical Morphology", Academic Press, 1982.
    """
    eroded = erosion(
        input,
        structuring_element,
        origin=origin,
        padding_mode=padding_mode,
    )
    return dilation(
        eroded,
        structuring_element,
        origin=origin,
        padding_mode=padding_mode,
    )
