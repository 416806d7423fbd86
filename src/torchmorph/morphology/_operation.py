"""Enumeration of the mask-based operators and their dispatch table."""

import enum
from typing import Callable, Sequence

from torch import Tensor

from torchmorph.morphology._bottom_hat import bottom_hat
from torchmorph.morphology._closing import closing
from torchmorph.morphology._dilation import dilation
from torchmorph.morphology._erosion import erosion
from torchmorph.morphology._gradient import gradient
from torchmorph.morphology._median import median
from torchmorph.morphology._opening import opening
from torchmorph.morphology._top_hat import top_hat


class Operation(str, enum.Enum):
    """Morphological operators parameterized by a structuring element."""

    EROSION = "erosion"
    DILATION = "dilation"
    OPENING = "opening"
    CLOSING = "closing"
    GRADIENT = "gradient"
    TOP_HAT = "top_hat"
    BOTTOM_HAT = "bottom_hat"
    MEDIAN = "median"


_OPERATIONS: dict[Operation, Callable[..., Tensor]] = {
    Operation.EROSION: erosion,
    Operation.DILATION: dilation,
    Operation.OPENING: opening,
    Operation.CLOSING: closing,
    Operation.GRADIENT: gradient,
    Operation.TOP_HAT: top_hat,
    Operation.BOTTOM_HAT: bottom_hat,
    Operation.MEDIAN: median,
}


def morphology(
    input: Tensor,
    structuring_element: Tensor,
    operation: Operation | str,
    *,
    origin: Sequence[int] | None = None,
    padding_mode: str = "replicate",
) -> Tensor:
    """Apply the operator tagged by ``operation``.

    Parameters
    ----------
    input : Tensor, shape (*, ny, nx)
        Input image.
    structuring_element : Tensor
        Boolean mask.
    operation : Operation or str
        Operator tag. Strings are converted with ``Operation(operation)``,
        so ``"top_hat"`` selects :attr:`Operation.TOP_HAT`.
    origin : Sequence[int], optional
        Anchor of the structuring element. Default is the center.
    padding_mode : str, optional
        One of ``"replicate"`` (default), ``"reflect"``, ``"circular"``.

    Returns
    -------
    Tensor
        Result of the selected operator.

    Raises
    ------
    ValueError
        If ``operation`` is not a known tag.
    """
    operator = _OPERATIONS[Operation(operation)]
    return operator(
        input,
        structuring_element,
        origin=origin,
        padding_mode=padding_mode,
    )
