"""torchmorph: PyTorch operators for mathematical morphology."""

from loguru import logger

from . import (
    morphology,
    pad,
)

# Library logging stays silent until an application opts in with
# ``logger.enable("torchmorph")``.
logger.disable("torchmorph")

__all__ = [
    "morphology",
    "pad",
]

__version__ = "0.1.0"
