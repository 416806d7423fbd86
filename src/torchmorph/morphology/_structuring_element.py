"""Structuring-element generation."""

from typing import Literal

import torch
from torch import Tensor

from torchmorph.morphology._constants import (
    MAX_SIZE,
    MIN_SIZE,
    SHAPES,
    SHIFT_DIRECTIONS,
)
from torchmorph.morphology._exceptions import UndefinedElementError

Shape = Literal["square", "cross", "disk", "shift"]

ShiftDirection = Literal["south_east", "south_west", "north_east", "north_west"]


def generate_structuring_element(
    shape: Shape,
    size: int,
    *,
    direction: ShiftDirection = "south_east",
    device: torch.device | str | None = None,
) -> Tensor:
    r"""Generate a flat square structuring element.

    Parameters
    ----------
    shape : str
        One of ``"square"``, ``"cross"``, ``"disk"``, ``"shift"``
        (case-insensitive).

        - ``"square"``: every cell active.
        - ``"cross"``: center row and center column.
        - ``"disk"``: cells at Euclidean distance at most ``size / 2`` from
          the center.
        - ``"shift"``: the half-diagonal leaving the center in
          ``direction``, center excluded. Eroding with it reads only
          pixels on one side, so image content moves the opposite way.

    size : int
        Odd side length in ``[1, 31]``.
    direction : str, optional
        Direction of the ``"shift"`` diagonal, one of ``"south_east"``
        (down-right, default), ``"south_west"``, ``"north_east"``,
        ``"north_west"``. Ignored by the other shapes.
    device : torch.device or str, optional
        Device of the returned mask.

    Returns
    -------
    Tensor
        Boolean tensor of shape ``(size, size)``; index ``[r, c]`` is the
        offset ``(r - size // 2, c - size // 2)`` from the anchor.

    Raises
    ------
    UndefinedElementError
        If ``size`` is even or outside ``[1, 31]``, or if ``shape`` or
        ``direction`` is unknown.

    Examples
    --------
    >>> generate_structuring_element("cross", 3).int()
    tensor([[0, 1, 0],
            [1, 1, 1],
            [0, 1, 0]], dtype=torch.int32)

    >>> generate_structuring_element("shift", 5).int()
    tensor([[0, 0, 0, 0, 0],
            [0, 0, 0, 0, 0],
            [0, 0, 0, 0, 0],
            [0, 0, 0, 1, 0],
            [0, 0, 0, 0, 1]], dtype=torch.int32)

    Notes
    -----
    For ``size == 1`` every shape, including ``"shift"``, is the single
    anchor cell.
    """
    if (
        isinstance(size, bool)
        or not isinstance(size, int)
        or size % 2 == 0
        or not MIN_SIZE <= size <= MAX_SIZE
    ):
        raise UndefinedElementError(
            f"undefined structuring element: size must be an odd integer "
            f"in [{MIN_SIZE}, {MAX_SIZE}], got {size!r}"
        )

    name = shape.lower() if isinstance(shape, str) else shape
    if name not in SHAPES:
        raise UndefinedElementError(
            f"undefined structuring element: shape must be one of "
            f"{list(SHAPES)}, got {shape!r}"
        )

    center = size // 2
    offsets = torch.arange(size, device=device) - center
    rows = offsets.view(-1, 1)
    cols = offsets.view(1, -1)

    if name == "square":
        return torch.ones(size, size, dtype=torch.bool, device=device)

    if name == "cross":
        return (rows == 0) | (cols == 0)

    if name == "disk":
        # Compare squared distances: 4 * (r^2 + c^2) <= size^2
        return 4 * (rows**2 + cols**2) <= size * size

    if direction not in SHIFT_DIRECTIONS:
        raise UndefinedElementError(
            f"undefined structuring element: shift direction must be one "
            f"of {list(SHIFT_DIRECTIONS)}, got {direction!r}"
        )

    se = torch.zeros(size, size, dtype=torch.bool, device=device)
    if size == 1:
        se[0, 0] = True
        return se

    step_r, step_c = SHIFT_DIRECTIONS[direction]
    for k in range(1, center + 1):
        se[center + k * step_r, center + k * step_c] = True
    return se
