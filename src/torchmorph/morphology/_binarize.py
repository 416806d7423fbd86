"""Post-filter thresholding."""

import torch
from torch import Tensor

from torchmorph.morphology._constants import BACKGROUND, FOREGROUND


def binarize(input: Tensor, threshold: float) -> Tensor:
    """Map pixels strictly above ``threshold`` to 255 and the rest to 0.

    The output keeps the dtype of ``input``.

    Examples
    --------
    >>> binarize(torch.tensor([[10.0, 100.0, 101.0]]), 100.0)
    tensor([[  0.,   0., 255.]])
    """
    return torch.where(
        input > threshold,
        torch.tensor(FOREGROUND, dtype=input.dtype, device=input.device),
        torch.tensor(BACKGROUND, dtype=input.dtype, device=input.device),
    )
