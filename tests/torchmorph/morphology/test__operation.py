"""Tests for operator dispatch."""

import pytest
import torch

from torchmorph.morphology import (
    Operation,
    bottom_hat,
    closing,
    dilation,
    erosion,
    generate_structuring_element,
    gradient,
    median,
    morphology,
    opening,
    top_hat,
)

DIRECT = {
    Operation.EROSION: erosion,
    Operation.DILATION: dilation,
    Operation.OPENING: opening,
    Operation.CLOSING: closing,
    Operation.GRADIENT: gradient,
    Operation.TOP_HAT: top_hat,
    Operation.BOTTOM_HAT: bottom_hat,
    Operation.MEDIAN: median,
}


class TestOperation:
    def test_closed_set(self):
        assert {op.value for op in Operation} == {
            "erosion",
            "dilation",
            "opening",
            "closing",
            "gradient",
            "top_hat",
            "bottom_hat",
            "median",
        }

    @pytest.mark.parametrize("operation", list(Operation))
    def test_dispatch_matches_direct_call(self, operation):
        image = torch.rand(12, 12)
        se = generate_structuring_element("disk", 5)
        assert torch.equal(
            morphology(image, se, operation), DIRECT[operation](image, se)
        )

    def test_string_tag(self):
        image = torch.rand(6, 6)
        se = generate_structuring_element("square", 3)
        assert torch.equal(
            morphology(image, se, "top_hat"), top_hat(image, se)
        )

    def test_padding_mode_forwarded(self):
        image = torch.tensor([[5.0, 1.0, 2.0, 3.0, 4.0]])
        se = torch.ones(1, 3, dtype=torch.bool)
        result = morphology(image, se, "dilation", padding_mode="circular")
        assert result[0, -1].item() == 5.0

    def test_unknown_tag(self):
        image = torch.rand(6, 6)
        se = generate_structuring_element("square", 3)
        with pytest.raises(ValueError):
            morphology(image, se, "Top Hat")
