"""Mathematical morphology erosion operation."""

from typing import Sequence

import torch
from torch import Tensor

from torchmorph.morphology._neighborhood import as_real, neighborhood


def erosion(
    input: Tensor,
    structuring_element: Tensor,
    *,
    origin: Sequence[int] | None = None,
    padding_mode: str = "replicate",
) -> Tensor:
    r"""Compute 2-D flat morphological erosion.

    Erosion shrinks bright regions (or expands dark regions) in an image
    according to the structuring element.

    Mathematical Definition
    -----------------------
    .. math::
        \varepsilon_B(f)(y, x) = \min_{(r, c) \in B} f(y + r - o_y, x + c - o_x)

    where :math:`B` is the set of active cells of the structuring element
    and :math:`(o_y, o_x)` its origin.

    Parameters
    ----------
    input : Tensor, shape (*, ny, nx)
        Input image. The two trailing dimensions are spatial; leading
        dimensions are independent images. Integer images are converted to
        ``float32``.
    structuring_element : Tensor
        Boolean mask of shape ``(m, n)``, see
        :func:`generate_structuring_element`.
    origin : Sequence[int], optional
        Anchor ``(row, column)`` of the structuring element. Default is the
        center ``(m // 2, n // 2)``, which requires odd side lengths.
    padding_mode : str, optional
        How out-of-range neighbors are resolved. One of:

        - ``"replicate"``: Clamp to the nearest edge pixel (default).
        - ``"reflect"``: Mirror about the edge.
        - ``"circular"``: Wrap around (periodic boundary).

    Returns
    -------
    Tensor
        Eroded image with the same shape as input.

    Raises
    ------
    ValueError
        If ``input`` has fewer than 2 dimensions or ``padding_mode`` is
        unknown.
    UndefinedElementError
        If the structuring element is not a usable 2-D boolean mask.

    Examples
    --------
    >>> image = torch.zeros(7, 7)
    >>> image[1:6, 1:6] = 255.0
    >>> se = generate_structuring_element("square", 3)
    >>> erosion(image, se)[2:5, 2:5].eq(255).all()
    tensor(True)

    Notes
    -----
    - Every output pixel depends only on the input, never on other output
      pixels.
    - Erosion with a mask containing its origin is anti-extensive:
      ``erosion(f, B) <= f``.

    See Also
    --------
    dilation : Maximum over the same neighborhood.
    erode_bug : Legacy in-place 3x3 variant.

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
        name="erosion",
    )

    output = views[0].clone()
    for view in views[1:]:
        output = torch.minimum(output, view)
    return output
