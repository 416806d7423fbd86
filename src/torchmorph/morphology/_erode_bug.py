"""Legacy in-place 3x3 erosion kept for regression comparison."""

import torch
from torch import Tensor

from torchmorph.morphology._neighborhood import as_real
from torchmorph.pad import pad


def _vertical_min3(column: Tensor) -> Tensor:
    # min over rows y-1, y, y+1 with edge replication; column is (*, ny)
    padded = pad(column, (1, 1), mode="replicate")
    return torch.minimum(
        torch.minimum(padded[..., :-2], padded[..., 1:-1]), padded[..., 2:]
    )


def erode_bug(input: Tensor) -> Tensor:
    r"""Erode with a fixed 3x3 square, writing results back in place.

    This reproduces a historical erosion that stored each minimum in the
    buffer it was still reading from. Pixels are visited column by column
    (``x`` outer loop, ``y`` inner loop), so when pixel ``(x, y)`` is
    computed its left column and the pixel above it already hold eroded
    values. Dark pixels therefore propagate right and down through the
    whole image instead of growing by one pixel. Out-of-range neighbors use
    edge replication.

    The result is pointwise less than or equal to the standard 3x3 erosion
    and is meant for regression comparison only; use :func:`erosion` for
    actual filtering.

    Parameters
    ----------
    input : Tensor, shape (*, ny, nx)
        Input image. Integer images are converted to ``float32``.

    Returns
    -------
    Tensor
        Image with the same shape as input.

    Notes
    -----
    The scan is vectorized per column. With ``L`` the already updated left
    column, ``C`` the original current column and ``R`` the original right
    column, the in-place recurrence

    .. math::
        out[y] = \min(m[y], out[y - 1]), \quad
        m[y] = \min_{|dy| \le 1}(L[y + dy], C[y + dy], R[y + dy])

    is a cumulative minimum of ``m`` down the column.
    """
    if input.dim() < 2:
        raise ValueError(
            f"erode_bug: input must have at least 2 dimensions, got "
            f"{input.dim()}"
        )

    original = as_real(input)
    output = original.clone()
    nx = original.shape[-1]

    for x in range(nx):
        left = output[..., :, x - 1] if x > 0 else original[..., :, 0]
        right = original[..., :, min(x + 1, nx - 1)]
        window = torch.minimum(
            torch.minimum(
                _vertical_min3(left),
                _vertical_min3(original[..., :, x]),
            ),
            _vertical_min3(right),
        )
        output[..., :, x] = torch.cummin(window, dim=-1).values

    return output
