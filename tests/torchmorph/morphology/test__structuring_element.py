"""Tests for structuring-element generation."""

import pytest
import torch

from torchmorph.morphology import (
    UndefinedElementError,
    generate_structuring_element,
)

ODD_SIZES = list(range(1, 32, 2))


class TestStructuringElementShape:
    """Every generated mask is a centered square boolean matrix."""

    @pytest.mark.parametrize("shape", ["square", "cross", "disk", "shift"])
    @pytest.mark.parametrize("size", ODD_SIZES)
    def test_square_boolean(self, shape, size):
        se = generate_structuring_element(shape, size)
        assert se.shape == (size, size)
        assert se.dtype == torch.bool
        assert se.any()

    @pytest.mark.parametrize("shape", ["square", "cross", "disk"])
    @pytest.mark.parametrize("size", ODD_SIZES)
    def test_center_active(self, shape, size):
        se = generate_structuring_element(shape, size)
        assert se[size // 2, size // 2].item()

    @pytest.mark.parametrize("shape", ["square", "cross", "disk"])
    @pytest.mark.parametrize("size", ODD_SIZES)
    def test_symmetric(self, shape, size):
        se = generate_structuring_element(shape, size)
        assert torch.equal(se, se.flip(0, 1))
        assert torch.equal(se, se.t())

    def test_case_insensitive(self):
        torch.testing.assert_close(
            generate_structuring_element("Disk", 5),
            generate_structuring_element("disk", 5),
        )


class TestStructuringElementKnownValues:
    """Exact cell membership."""

    def test_square(self):
        assert generate_structuring_element("square", 5).all()

    def test_cross(self):
        expected = torch.tensor(
            [
                [0, 0, 1, 0, 0],
                [0, 0, 1, 0, 0],
                [1, 1, 1, 1, 1],
                [0, 0, 1, 0, 0],
                [0, 0, 1, 0, 0],
            ],
            dtype=torch.bool,
        )
        assert torch.equal(generate_structuring_element("cross", 5), expected)

    def test_disk_3_is_full(self):
        """Corners of a 3x3 lie at sqrt(2) <= 1.5 from the center."""
        assert generate_structuring_element("disk", 3).all()

    def test_disk_5(self):
        expected = torch.tensor(
            [
                [0, 1, 1, 1, 0],
                [1, 1, 1, 1, 1],
                [1, 1, 1, 1, 1],
                [1, 1, 1, 1, 1],
                [0, 1, 1, 1, 0],
            ],
            dtype=torch.bool,
        )
        assert torch.equal(generate_structuring_element("disk", 5), expected)

    def test_disk_within_radius(self):
        size = 15
        se = generate_structuring_element("disk", size)
        offsets = torch.arange(size) - size // 2
        distance = (offsets.view(-1, 1) ** 2 + offsets.view(1, -1) ** 2).float()
        assert torch.equal(se, distance.sqrt() <= size / 2)

    def test_shift_default_south_east(self):
        se = generate_structuring_element("shift", 5)
        assert se.nonzero().tolist() == [[3, 3], [4, 4]]
        assert not se[2, 2].item()

    @pytest.mark.parametrize(
        "direction,cells",
        [
            ("south_west", [[3, 1], [4, 0]]),
            ("north_east", [[0, 4], [1, 3]]),
            ("north_west", [[0, 0], [1, 1]]),
        ],
    )
    def test_shift_directions(self, direction, cells):
        se = generate_structuring_element("shift", 5, direction=direction)
        assert se.nonzero().tolist() == cells

    def test_shift_is_asymmetric(self):
        se = generate_structuring_element("shift", 7)
        assert not torch.equal(se, se.flip(0, 1))
        assert se.sum().item() == 3

    def test_shift_size_one(self):
        se = generate_structuring_element("shift", 1)
        assert se.tolist() == [[True]]


class TestStructuringElementErrors:
    """Undefined elements are rejected before any filtering."""

    @pytest.mark.parametrize("size", [0, 2, 4, 30, 32, 33, -1])
    def test_bad_size(self, size):
        with pytest.raises(UndefinedElementError, match="undefined"):
            generate_structuring_element("square", size)

    @pytest.mark.parametrize("size", [3.0, "3", True, None])
    def test_non_integer_size(self, size):
        with pytest.raises(UndefinedElementError):
            generate_structuring_element("square", size)

    def test_unknown_shape(self):
        with pytest.raises(UndefinedElementError, match="shape"):
            generate_structuring_element("hexagon", 3)

    def test_unknown_direction(self):
        with pytest.raises(UndefinedElementError, match="direction"):
            generate_structuring_element("shift", 3, direction="up")

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            generate_structuring_element("square", 2)
