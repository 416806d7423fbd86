from typing import Literal

import torch
from torch import Tensor

PaddingMode = Literal[
    "constant",
    "replicate",
    "reflect",
    "circular",
]

_MODES = ("constant", "replicate", "reflect", "circular")


def _source_index(
    size: int, before: int, after: int, mode: str, device: torch.device
) -> Tensor:
    # Maps every padded coordinate back onto a coordinate of the input.
    index = torch.arange(-before, size + after, device=device)

    if mode == "replicate":
        return index.clamp(0, size - 1)

    if mode == "circular":
        return torch.remainder(index, size)

    # reflect: mirror about the edge samples without repeating them
    if size == 1:
        return torch.zeros_like(index)
    period = 2 * (size - 1)
    index = torch.remainder(index, period)
    return torch.where(index >= size, period - index, index)


def pad(
    input: Tensor,
    padding: int | tuple[int, int] | tuple[int, ...],
    mode: PaddingMode = "constant",
    value: float = 0.0,
) -> Tensor:
    """
    Pad the trailing dimensions of a tensor.

    Parameters
    ----------
    input : Tensor
        Input tensor of any shape and dtype.
    padding : int or tuple of int
        Padding amounts. Accepts:

        - ``int``: Same padding on both sides of the last two dimensions
        - ``(before, after)``: Padding of the last dimension
        - PyTorch-style ``(left_n, right_n, ..., left_0, right_0)``: Pairs
          for trailing dimensions in reverse order

    mode : str, default "constant"
        Padding mode. One of:

        - ``"constant"``: Fill with ``value``
        - ``"replicate"``: Repeat edge values
        - ``"reflect"``: Mirror about the edge (edge value not repeated)
        - ``"circular"``: Wrap around (periodic boundary)

    value : float, default 0.0
        Fill value for ``mode="constant"``. Cast to ``input.dtype``, so
        ``False``/``True`` pad boolean tensors.

    Returns
    -------
    Tensor
        Padded tensor.

    Examples
    --------
    >>> x = torch.tensor([1, 2, 3])
    >>> pad(x, (2, 1), mode="replicate")
    tensor([1, 1, 1, 2, 3, 3])

    >>> x = torch.tensor([1, 2, 3, 4])
    >>> pad(x, (2, 2), mode="reflect")
    tensor([3, 2, 1, 2, 3, 4, 3, 2])

    >>> x = torch.tensor([1, 2, 3])
    >>> pad(x, (1, 2), mode="circular")
    tensor([3, 1, 2, 3, 1, 2])

    Notes
    -----
    Non-constant modes are implemented as index maps, so they work for any
    dtype (including ``bool`` and integer images) and for padding wider
    than the input itself.

    See Also
    --------
    sample : Read a single pixel under edge replication.
    torch.nn.functional.pad : PyTorch's built-in padding.
    """
    if mode not in _MODES:
        raise ValueError(
            f"pad: mode must be one of {list(_MODES)}, got '{mode}'"
        )

    if isinstance(padding, int):
        padding_list = [padding] * 4
    else:
        padding_list = list(padding)

    if len(padding_list) % 2 != 0:
        raise ValueError(
            f"pad: padding must contain an even number of values, "
            f"got {len(padding_list)}"
        )

    num_dims = len(padding_list) // 2
    if num_dims > input.dim():
        raise ValueError(
            f"pad: padding covers {num_dims} dimensions but input has "
            f"only {input.dim()}"
        )

    if any(p < 0 for p in padding_list):
        raise ValueError("pad: padding amounts must be non-negative")

    output = input
    for k in range(num_dims):
        dim = input.dim() - 1 - k
        before, after = padding_list[2 * k], padding_list[2 * k + 1]
        if before == 0 and after == 0:
            continue

        size = output.shape[dim]
        if mode == "constant":
            shape = list(output.shape)
            shape[dim] = size + before + after
            padded = output.new_full(shape, value)
            padded.narrow(dim, before, size).copy_(output)
            output = padded
        else:
            if size == 0:
                raise ValueError(
                    f"pad: cannot use mode '{mode}' on an empty dimension"
                )
            index = _source_index(size, before, after, mode, output.device)
            output = output.index_select(dim, index)

    return output


def sample(input: Tensor, x: int, y: int) -> Tensor:
    """Read pixel ``(x, y)`` of the trailing ``(ny, nx)`` plane.

    Out-of-range coordinates are clamped to the nearest edge, so a read
    never fabricates a value outside the image. Leading dimensions are
    kept.
    """
    ny, nx = input.shape[-2], input.shape[-1]
    x = min(max(x, 0), nx - 1)
    y = min(max(y, 0), ny - 1)
    return input[..., y, x]
