"""8-neighborhood helpers for binary thinning and pruning."""

import torch
from torch import Tensor

from torchmorph.morphology._constants import BACKGROUND, FOREGROUND
from torchmorph.morphology._exceptions import NotBinaryError
from torchmorph.pad import pad

# Ring order, counter-clockwise starting east: (row step, column step)
E, NE, N, NW, W, SW, S, SE = range(8)

RING: tuple[tuple[int, int], ...] = (
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
    (0, -1),
    (1, -1),
    (1, 0),
    (1, 1),
)


def check_binary(input: Tensor, name: str) -> None:
    """Raise :class:`NotBinaryError` unless every image is a 0/255 image.

    Each image (trailing two dimensions) must have minimum ``0`` and
    maximum ``255`` and contain no other value.
    """
    if input.dim() < 2:
        raise ValueError(
            f"{name}: input must have at least 2 dimensions, got "
            f"{input.dim()}"
        )
    if input.numel() == 0:
        raise NotBinaryError(f"{name}: only binary image (0/255) supported")

    minimum = input.amin(dim=(-2, -1))
    maximum = input.amax(dim=(-2, -1))
    if (
        not (minimum == BACKGROUND).all()
        or not (maximum == FOREGROUND).all()
        or not ((input == BACKGROUND) | (input == FOREGROUND)).all()
    ):
        raise NotBinaryError(f"{name}: only binary image (0/255) supported")


def neighbors(foreground: Tensor) -> list[Tensor]:
    """Return the 8 neighbor planes of a boolean image in ring order.

    Pixels outside the image count as background.
    """
    ny, nx = foreground.shape[-2], foreground.shape[-1]
    padded = pad(foreground, 1, mode="constant", value=False)
    return [
        padded[..., 1 + dr : 1 + dr + ny, 1 + dc : 1 + dc + nx]
        for dr, dc in RING
    ]


def neighbor_count(planes: list[Tensor]) -> Tensor:
    return torch.stack(planes, dim=0).sum(dim=0)


def connectivity_number(planes: list[Tensor]) -> Tensor:
    r"""Yokoi 8-connectivity number of every pixel.

    .. math::
        C_8 = \sum_{k \in \{E, N, W, S\}}
            \bar{x}_k - \bar{x}_k \bar{x}_{k+1} \bar{x}_{k+2}

    with :math:`\bar{x} = 1 - x`. It counts the 8-connected foreground
    groups around a pixel that would be separated by removing it; a
    border pixel with ``C_8 == 1`` is simple.
    """
    background = [~p for p in planes]
    total = torch.zeros(planes[0].shape, dtype=torch.int64, device=planes[0].device)
    for k in (E, N, W, S):
        corner = background[k + 1] & background[(k + 2) % 8]
        total += (background[k] & ~corner).to(torch.int64)
    return total
