"""Mathematical morphology dilation operation."""

from typing import Sequence

import torch
from torch import Tensor

from torchmorph.morphology._neighborhood import as_real, neighborhood


def dilation(
    input: Tensor,
    structuring_element: Tensor,
    *,
    origin: Sequence[int] | None = None,
    padding_mode: str = "replicate",
) -> Tensor:
    r"""Compute 2-D flat morphological dilation.

    Dilation expands bright regions (or shrinks dark regions) in an image
    according to the structuring element.

    Mathematical Definition
    -----------------------
    .. math::
        \delta_B(f)(y, x) = \max_{(r, c) \in B} f(y + r - o_y, x + c - o_x)

    The neighborhood is the one used by :func:`erosion`; the mask is not
    reflected. For the symmetric shapes (square, cross, disk) this is the
    textbook dilation.

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
        Dilated image with the same shape as input.

    Examples
    --------
    >>> image = torch.zeros(5, 5)
    >>> image[2, 2] = 1.0
    >>> dilation(image, generate_structuring_element("cross", 3))
    tensor([[0., 0., 0., 0., 0.],
            [0., 0., 1., 0., 0.],
            [0., 1., 1., 1., 0.],
            [0., 0., 1., 0., 0.],
            [0., 0., 0., 0., 0.]])

    Notes
    -----
    - Dilation is the dual of erosion for symmetric masks:
      ``dilation(f, B) = -erosion(-f, B)``.

    See Also
    --------
    erosion : Minimum over the same neighborhood.

    References
    ----------
    .. [1] J. Serra, "Image Analysis and Mathematical Morphology", Academic Press, 1982.
    .. [2] P. Soille, "Morphological Image Analysis", Springer, 2004.
    """
    views = neighborhood(
        as_real(input),
        structuring_element,
        origin=origin,
        padding_mode=padding_mode,
        name="dilation",
    )

    output = views[0].clone()
    for view in views[1:]:
        output = torch.maximum(output, view)
    return output
