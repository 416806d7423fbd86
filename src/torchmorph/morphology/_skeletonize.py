"""Topology-preserving thinning of binary images."""

import torch
from loguru import logger
from torch import Tensor

from torchmorph.morphology._constants import FOREGROUND
from torchmorph.morphology._topology import (
    E,
    N,
    S,
    W,
    check_binary,
    connectivity_number,
    neighbor_count,
    neighbors,
)

# Sub-iteration order of one pass: north, south, east, west border points
_BORDERS = (N, S, E, W)


def _thinning_step(foreground: Tensor, border: int) -> Tensor:
    """Classify the pixels removable from ``foreground`` in one sub-iteration.

    ``foreground`` is only read, so every pixel is judged against the same
    buffer.
    """
    planes = neighbors(foreground)
    count = neighbor_count(planes)
    return (
        foreground
        & ~planes[border]
        & (count >= 2)
        & (connectivity_number(planes) == 1)
    )


def thin(foreground: Tensor) -> Tensor:
    """Thin a boolean image to its fixed point.

    Returns a new boolean tensor; ``foreground`` is left untouched.
    """
    current = foreground.clone()
    passes = 0
    while True:
        passes += 1
        removed = 0
        for border in _BORDERS:
            removable = _thinning_step(current, border)
            count = int(removable.sum())
            if count:
                current = current & ~removable
                removed += count
        logger.debug("thinning pass {}: removed {} pixels", passes, removed)
        if removed == 0:
            return current


def skeletonize(input: Tensor) -> Tensor:
    r"""Reduce a binary image to a 1-pixel-wide topological skeleton.

    Repeated passes of four directional sub-iterations (north, south,
    east, west border pixels). In a sub-iteration a foreground pixel is
    deleted when

    - its neighbor on that side is background,
    - it has at least two foreground 8-neighbors (it is neither an
      endpoint nor an isolated point), and
    - its 8-connectivity number is 1, so deleting it does not split its
      neighborhood.

    All deletions of a sub-iteration are decided on the buffer as it was
    when the sub-iteration started and are committed afterwards, so the
    result does not depend on scan order. Passes repeat until a full pass
    deletes nothing.

    The skeleton is one pixel wide except where topology forbids it: a
    2x2 foreground block in which every pixel has connectivity number 2
    (for example the hub of an X whose four arms leave from the block
    corners) has no removable pixel and is kept.

    Parameters
    ----------
    input : Tensor, shape (*, ny, nx)
        Binary image with values ``0`` and ``255`` only; every image must
        contain both values. Pixels outside the image are background.

    Returns
    -------
    Tensor
        Skeleton with the dtype of ``input`` and values ``0``/``255``.
        Connected components and holes are preserved.

    Raises
    ------
    NotBinaryError
        If an image is not a 0/255 binary image.

    Examples
    --------
    >>> image = torch.zeros(7, 9, dtype=torch.uint8)
    >>> image[2:5, 1:8] = 255
    >>> skeletonize(image)[3]
    tensor([  0, 255, 255, 255, 255, 255, 255, 255,   0], dtype=torch.uint8)

    References
    ----------
    .. [1] A. Rosenfeld, "A characterization of parallel thinning
           algorithms", Information and Control 29, 1975.
    .. [2] S. Yokoi, J. Toriwaki, T. Fukumura, "Topological properties in
           digitized binary pictures", Systems Computers Controls 4, 1973.
    """
    check_binary(input, "skeletonize")
    skeleton = thin(input == FOREGROUND)
    return skeleton.to(input.dtype) * FOREGROUND
