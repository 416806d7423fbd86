"""Mathematical morphology on 2-D rasters.

This module provides flat grayscale morphology driven by structuring
elements, binary skeletonization and pruning, and the channel plumbing
needed to run them on 8-bit, 16-bit, 32-bit float and RGB images.

Operations
----------
generate_structuring_element : Square, cross, disk or shift mask.
erosion : Minimum over the structuring element.
dilation : Maximum over the structuring element.
median : Median over the structuring element.
opening : Erosion followed by dilation.
closing : Dilation followed by erosion.
gradient : Dilation minus erosion.
top_hat : Image minus its opening.
bottom_hat : Closing minus the image.
erode_bug : Legacy in-place 3x3 erosion.
skeletonize : Thinning of a 0/255 binary image.
prune : Spur removal on a skeleton.
skeletonize_and_prune : Both of the above.
morphology : Dispatch on an :class:`Operation` tag.
process : Run an operation on a host image, channel by channel.
"""

from torchmorph.morphology._binarize import binarize
from torchmorph.morphology._bottom_hat import bottom_hat
from torchmorph.morphology._channels import (
    image_kind,
    merge_channels,
    process,
    split_channels,
)
from torchmorph.morphology._closing import closing
from torchmorph.morphology._dilation import dilation
from torchmorph.morphology._erode_bug import erode_bug
from torchmorph.morphology._erosion import erosion
from torchmorph.morphology._exceptions import (
    MorphologyError,
    NotBinaryError,
    UndefinedElementError,
    UnsupportedDepthError,
)
from torchmorph.morphology._gradient import gradient
from torchmorph.morphology._median import median
from torchmorph.morphology._opening import opening
from torchmorph.morphology._operation import Operation, morphology
from torchmorph.morphology._prune import prune, skeletonize_and_prune
from torchmorph.morphology._skeletonize import skeletonize
from torchmorph.morphology._structuring_element import (
    generate_structuring_element,
)
from torchmorph.morphology._top_hat import top_hat

__all__ = [
    "MorphologyError",
    "NotBinaryError",
    "Operation",
    "UndefinedElementError",
    "UnsupportedDepthError",
    "binarize",
    "bottom_hat",
    "closing",
    "dilation",
    "erode_bug",
    "erosion",
    "generate_structuring_element",
    "gradient",
    "image_kind",
    "median",
    "merge_channels",
    "morphology",
    "opening",
    "process",
    "prune",
    "skeletonize",
    "skeletonize_and_prune",
    "split_channels",
    "top_hat",
]
