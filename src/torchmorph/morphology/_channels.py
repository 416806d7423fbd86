"""Splitting host images into planes and putting results back together."""

from typing import Literal

import torch
from loguru import logger
from torch import Tensor

from torchmorph.morphology._binarize import binarize
from torchmorph.morphology._erode_bug import erode_bug
from torchmorph.morphology._exceptions import (
    UndefinedElementError,
    UnsupportedDepthError,
)
from torchmorph.morphology._neighborhood import validate_structuring_element
from torchmorph.morphology._operation import Operation, morphology

ImageKind = Literal["gray8", "gray16", "gray32", "rgb"]

_GRAY_KINDS: dict[torch.dtype, str] = {
    torch.uint8: "gray8",
    torch.uint16: "gray16",
    torch.int16: "gray16",
    torch.float32: "gray32",
}

ERODE_BUG = "erode_bug"


def image_kind(image: Tensor) -> ImageKind:
    """Classify a host image as 8-bit, 16-bit, 32-bit float or RGB.

    Grayscale images are 2-D ``(ny, nx)``; RGB images are ``uint8`` of
    shape ``(ny, nx, 3)``.

    Raises
    ------
    UnsupportedDepthError
        For any other dtype or layout.
    """
    if image.dim() == 2 and image.dtype in _GRAY_KINDS:
        return _GRAY_KINDS[image.dtype]
    if image.dim() == 3 and image.shape[-1] == 3 and image.dtype == torch.uint8:
        return "rgb"
    raise UnsupportedDepthError(
        f"only 8-bit, 16-bit, RGB or 32-bit images are supported, got "
        f"dtype {image.dtype} with shape {tuple(image.shape)}"
    )


def split_channels(image: Tensor) -> list[Tensor]:
    """Split an image into independent ``float32`` planes of shape ``(ny, nx)``."""
    kind = image_kind(image)
    if kind == "rgb":
        return [image[..., c].to(torch.float32) for c in range(3)]
    return [image.to(torch.float32)]


def merge_channels(planes: list[Tensor], kind: ImageKind) -> Tensor:
    """Reassemble planes produced by :func:`split_channels`.

    RGB planes are stacked on a trailing channel dimension; values are not
    clipped or cast back to the source depth.
    """
    if kind == "rgb":
        if len(planes) != 3:
            raise ValueError(
                f"merge_channels: rgb needs 3 planes, got {len(planes)}"
            )
        return torch.stack(planes, dim=-1)
    if len(planes) != 1:
        raise ValueError(
            f"merge_channels: {kind} needs 1 plane, got {len(planes)}"
        )
    return planes[0]


def process(
    image: Tensor,
    operation: Operation | str,
    structuring_element: Tensor | None = None,
    *,
    threshold: float | None = None,
    padding_mode: str = "replicate",
) -> Tensor:
    """Run one operator on a host image, channel by channel.

    Parameters
    ----------
    image : Tensor
        8-bit, 16-bit or 32-bit float grayscale image ``(ny, nx)``, or an
        8-bit RGB image ``(ny, nx, 3)``.
    operation : Operation or str
        An :class:`Operation` tag, or ``"erode_bug"`` for the legacy
        fixed 3x3 erosion (which takes no structuring element).
    structuring_element : Tensor, optional
        Boolean mask; required for every :class:`Operation`.
    threshold : float, optional
        If given, the result is binarized: ``> threshold`` becomes 255,
        everything else 0.
    padding_mode : str, optional
        Boundary handling of the mask-based operators.

    Returns
    -------
    Tensor
        ``float32`` result with the layout of ``image``. No clipping to the
        source depth is performed.

    Raises
    ------
    UnsupportedDepthError
        If ``image`` is not one of the four accepted kinds.
    UndefinedElementError
        If a mask-based operation is requested without a usable mask.
    """
    kind = image_kind(image)

    if operation == ERODE_BUG:

        def apply(plane: Tensor) -> Tensor:
            return erode_bug(plane)

    else:
        tag = Operation(operation)
        if structuring_element is None:
            raise UndefinedElementError(
                f"process: operation '{tag.value}' needs a structuring element"
            )
        validate_structuring_element(structuring_element, None, "process")

        def apply(plane: Tensor) -> Tensor:
            return morphology(
                plane,
                structuring_element,
                tag,
                padding_mode=padding_mode,
            )

    logger.debug(
        "processing {} image of shape {} with {}",
        kind,
        tuple(image.shape),
        operation,
    )

    planes = [apply(plane) for plane in split_channels(image)]
    if threshold is not None:
        planes = [binarize(plane, threshold) for plane in planes]
    return merge_channels(planes, kind)
