"""Tests for morphological erosion."""

import hypothesis
import pytest
import torch

from torchmorph.morphology import (
    UndefinedElementError,
    dilation,
    erosion,
    generate_structuring_element,
)
from torchmorph.pad import sample
from torchmorph.testing.strategies import images, structuring_elements


class TestErosionShape:
    """Tests for shape handling."""

    def test_2d_image(self):
        """2D image erosion."""
        image = torch.rand(64, 64)
        se = generate_structuring_element("square", 3)
        result = erosion(image, se)
        assert result.shape == (64, 64)

    def test_2d_batch(self):
        """Batch of 2D images."""
        batch = torch.rand(8, 64, 64)
        se = generate_structuring_element("disk", 5)
        result = erosion(batch, se)
        assert result.shape == (8, 64, 64)

    def test_channel_batch(self):
        """Batch with channel dimension (B, C, H, W)."""
        images = torch.rand(4, 3, 32, 32)
        se = generate_structuring_element("cross", 3)
        result = erosion(images, se)
        assert result.shape == (4, 3, 32, 32)

    def test_element_larger_than_image(self):
        """A 31x31 element on a tiny image uses edge replication."""
        image = torch.tensor([[1.0, 2.0], [3.0, 4.0]])
        se = generate_structuring_element("square", 31)
        result = erosion(image, se)
        assert torch.equal(result, torch.ones(2, 2))

    def test_batch_matches_single(self):
        batch = torch.rand(3, 10, 12)
        se = generate_structuring_element("disk", 5)
        result = erosion(batch, se)
        for i in range(3):
            assert torch.equal(result[i], erosion(batch[i], se))


class TestErosionKnownValues:
    """Tests for known erosion values."""

    def test_constant_image(self):
        """Erosion of constant image equals the constant."""
        image = torch.full((10, 10), 5.0)
        se = generate_structuring_element("disk", 7)
        result = erosion(image, se)
        assert torch.allclose(result, image)

    def test_square_shrinks_to_center(self):
        """A 5x5 square eroded by a 3x3 square leaves its 3x3 center."""
        image = torch.zeros(9, 9)
        image[2:7, 2:7] = 255.0
        se = generate_structuring_element("square", 3)
        result = erosion(image, se)
        expected = torch.zeros(9, 9)
        expected[3:6, 3:6] = 255.0
        assert torch.equal(result, expected)

    def test_minimum_over_neighborhood(self):
        """Erosion computes local minimum."""
        image = torch.tensor(
            [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [7.0, 8.0, 9.0]]
        )
        se = generate_structuring_element("square", 3)
        result = erosion(image, se)
        assert result[1, 1].item() == 1.0
        # Bottom-right corner sees rows 1-2, columns 1-2 plus replicas
        assert result[2, 2].item() == 5.0

    def test_cross_ignores_corners(self):
        image = torch.full((3, 3), 9.0)
        image[0, 0] = 0.0
        se = generate_structuring_element("cross", 3)
        assert erosion(image, se)[1, 1].item() == 9.0

    def test_shift_reads_south_east(self):
        """Eroding with the shift element moves content up and left."""
        image = torch.arange(30.0).reshape(5, 6)
        se = generate_structuring_element("shift", 3)
        result = erosion(image, se)
        torch.testing.assert_close(result[:-1, :-1], image[1:, 1:])
        # The last row and column read clamped neighbors
        torch.testing.assert_close(result[-1, :-1], image[-1, 1:])

    def test_explicit_origin(self):
        """A two-cell element anchored on its left cell."""
        image = torch.tensor([[4.0, 1.0, 3.0, 2.0]])
        se = torch.ones(1, 2, dtype=torch.bool)
        result = erosion(image, se, origin=(0, 0))
        expected = torch.tensor([[1.0, 1.0, 2.0, 2.0]])
        assert torch.equal(result, expected)


class TestErosionPaddingModes:
    """Tests for different padding modes."""

    def test_replicate_padding(self):
        """Replicate padding extends edge values."""
        image = torch.ones(5, 5) * 2.0
        se = generate_structuring_element("square", 3)
        result = erosion(image, se, padding_mode="replicate")
        assert torch.allclose(result, image)

    def test_circular_padding(self):
        """Circular padding wraps the opposite edge in."""
        image = torch.tensor([[5.0, 6.0, 7.0, 1.0]])
        se = torch.ones(1, 3, dtype=torch.bool)
        result = erosion(image, se, padding_mode="circular")
        assert result[0, 0].item() == 1.0

    def test_unknown_padding_mode(self):
        image = torch.rand(5, 5)
        se = generate_structuring_element("square", 3)
        with pytest.raises(ValueError, match="padding_mode must be one of"):
            erosion(image, se, padding_mode="zeros")


class TestErosionEdgeReplication:
    """Replicate padding reads the same pixels as clamped ``sample`` calls."""

    @staticmethod
    def _reference(image, se, origin):
        oy, ox = origin
        ny, nx = image.shape
        cells = se.nonzero().tolist()
        output = torch.empty_like(image)
        for y in range(ny):
            for x in range(nx):
                output[y, x] = min(
                    sample(image, x + c - ox, y + r - oy) for r, c in cells
                )
        return output

    @pytest.mark.parametrize(
        "shape,size", [("square", 3), ("disk", 5), ("shift", 5)]
    )
    def test_matches_clamped_reads(self, shape, size):
        generator = torch.Generator().manual_seed(3)
        image = torch.randint(0, 256, (6, 8), generator=generator).float()
        se = generate_structuring_element(shape, size)
        center = (size // 2, size // 2)
        result = erosion(image, se)
        assert torch.equal(result, self._reference(image, se, center))

    def test_matches_clamped_reads_with_corner_origin(self):
        generator = torch.Generator().manual_seed(4)
        image = torch.randint(0, 256, (5, 7), generator=generator).float()
        se = torch.ones(2, 3, dtype=torch.bool)
        result = erosion(image, se, origin=(0, 0))
        assert torch.equal(result, self._reference(image, se, (0, 0)))


class TestErosionValidation:
    """Invalid inputs are rejected before any computation."""

    def test_1d_input(self):
        se = generate_structuring_element("square", 3)
        with pytest.raises(ValueError, match="at least 2 dimensions"):
            erosion(torch.rand(10), se)

    def test_float_element(self):
        with pytest.raises(UndefinedElementError, match="torch.bool"):
            erosion(torch.rand(5, 5), torch.ones(3, 3))

    def test_even_element_without_origin(self):
        with pytest.raises(UndefinedElementError, match="center cell"):
            erosion(torch.rand(5, 5), torch.ones(2, 2, dtype=torch.bool))

    def test_empty_element(self):
        with pytest.raises(UndefinedElementError, match="no active cell"):
            erosion(torch.rand(5, 5), torch.zeros(3, 3, dtype=torch.bool))

    def test_origin_outside(self):
        se = torch.ones(3, 3, dtype=torch.bool)
        with pytest.raises(UndefinedElementError, match="origin"):
            erosion(torch.rand(5, 5), se, origin=(3, 0))


class TestErosionProperties:
    """Order properties."""

    @hypothesis.given(images(), structuring_elements())
    @hypothesis.settings(max_examples=50, deadline=None)
    def test_between_erosion_and_dilation(self, image, se):
        """erosion(I) <= I <= dilation(I) for centered elements."""
        assert (erosion(image, se) <= image).all()
        assert (image <= dilation(image, se)).all()

    @hypothesis.given(images(), structuring_elements())
    @hypothesis.settings(max_examples=50, deadline=None)
    def test_duality(self, image, se):
        """dilation(I) == 255 - erosion(255 - I) for symmetric elements."""
        assert torch.equal(
            dilation(image, se), 255.0 - erosion(255.0 - image, se)
        )


class TestErosionScipyComparison:
    """Comparison with scipy.ndimage grey erosion."""

    @pytest.mark.parametrize("shape", ["square", "cross", "disk"])
    @pytest.mark.parametrize("size", [1, 3, 5, 9])
    def test_matches_grey_erosion(self, shape, size):
        ndimage = pytest.importorskip("scipy.ndimage")
        generator = torch.Generator().manual_seed(size)
        image = torch.randint(0, 256, (17, 23), generator=generator).double()
        se = generate_structuring_element(shape, size)
        expected = ndimage.grey_erosion(
            image.numpy(), footprint=se.numpy(), mode="nearest"
        )
        torch.testing.assert_close(
            erosion(image, se), torch.from_numpy(expected)
        )


class TestErosionDtypes:
    """Tests for different data types."""

    def test_float32(self):
        image = torch.rand(16, 16, dtype=torch.float32)
        result = erosion(image, generate_structuring_element("square", 3))
        assert result.dtype == torch.float32

    def test_float64(self):
        image = torch.rand(16, 16, dtype=torch.float64)
        result = erosion(image, generate_structuring_element("square", 3))
        assert result.dtype == torch.float64

    def test_uint8_becomes_float32(self):
        image = torch.randint(0, 256, (16, 16), dtype=torch.uint8)
        result = erosion(image, generate_structuring_element("square", 3))
        assert result.dtype == torch.float32

    def test_does_not_modify_input(self):
        image = torch.rand(8, 8)
        before = image.clone()
        result = erosion(image, generate_structuring_element("square", 1))
        result += 1.0
        assert torch.equal(image, before)


class TestErosionGradients:
    """Tests for gradient computation."""

    def test_gradient_flows(self):
        """Verify gradients flow back correctly."""
        image = torch.rand(16, 16, requires_grad=True)
        se = generate_structuring_element("square", 3)
        result = erosion(image, se)
        loss = result.sum()
        loss.backward()
        assert image.grad is not None
        assert not torch.isnan(image.grad).any()
