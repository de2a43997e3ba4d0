"""Tests for the Picture pixel grid: access, copy, seam removal and highlighting."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import torch
import pytest
from seam_carving.color import Color, SEAM_COLOR
from seam_carving.picture import Picture
from seam_carving.errors import InvalidArgumentError, InvalidSeamError, OutOfBoundsError

from conftest import make_picture, make_random_picture, row_colors, column_colors


class TestConstruction:
    def test_solid_fill(self):
        picture = Picture(4, 2, fill=Color(7, 8, 9))
        assert (picture.width, picture.height) == (4, 2)
        assert all(picture.get(x, y) == Color(7, 8, 9) for x in range(4) for y in range(2))

    @pytest.mark.parametrize("width,height", [(0, 3), (3, 0), (-1, 2), (2.0, 2)])
    def test_rejects_bad_dimensions(self, width, height):
        with pytest.raises(InvalidArgumentError):
            Picture(width, height)

    def test_from_buffer_is_row_major(self):
        picture = make_picture([[(1, 1, 1), (2, 2, 2), (3, 3, 3)],
                                [(4, 4, 4), (5, 5, 5), (6, 6, 6)]])
        assert (picture.width, picture.height) == (3, 2)
        assert picture.get(2, 0) == Color(3, 3, 3)
        assert picture.get(0, 1) == Color(4, 4, 4)

    def test_from_buffer_drops_alpha(self):
        picture = Picture.from_buffer(2, 1, [1, 2, 3, 9, 4, 5, 6, 0], channels=4)
        assert picture.get(0, 0) == Color(1, 2, 3)
        assert picture.get(1, 0) == Color(4, 5, 6)

    def test_from_buffer_accepts_bytes(self):
        picture = Picture.from_buffer(1, 1, bytes([10, 20, 30]))
        assert picture.get(0, 0) == Color(10, 20, 30)

    def test_from_buffer_rejects_wrong_length(self):
        with pytest.raises(InvalidArgumentError):
            Picture.from_buffer(2, 2, [0] * 11)

    def test_from_buffer_rejects_out_of_range_values(self):
        with pytest.raises(InvalidArgumentError):
            Picture.from_buffer(1, 1, [0, 300, 0])

    def test_from_tensor_float_intensities(self):
        image = torch.zeros(3, 2, 2)
        image[0] = 1.0
        picture = Picture.from_tensor(image)
        assert picture.get(1, 1) == Color(255, 0, 0)

    def test_from_tensor_rejects_wrong_shape(self):
        with pytest.raises(InvalidArgumentError):
            Picture.from_tensor(torch.zeros(4, 2, 2, dtype=torch.uint8))


class TestAccess:
    def test_get_out_of_bounds(self):
        picture = Picture(3, 2)
        for x, y in [(-1, 0), (3, 0), (0, -1), (0, 2)]:
            with pytest.raises(OutOfBoundsError):
                picture.get(x, y)

    def test_set_then_get(self):
        picture = Picture(3, 2)
        picture.set(2, 1, Color(9, 8, 7))
        assert picture.get(2, 1) == Color(9, 8, 7)
        assert picture.get(1, 1) == Color(0, 0, 0)

    def test_set_out_of_bounds(self):
        with pytest.raises(OutOfBoundsError):
            Picture(3, 2).set(3, 0, Color(1, 1, 1))


class TestCopy:
    def test_copy_is_equal(self, random_picture):
        assert random_picture.copy() == random_picture

    def test_copy_shares_no_state(self, random_picture):
        clone = random_picture.copy()
        original = random_picture.get(0, 0)
        clone.set(0, 0, Color(1, 2, 3) if original != Color(1, 2, 3) else Color(4, 5, 6))
        clone.remove_vertical_seam([0] * clone.height)
        assert random_picture.get(0, 0) == original
        assert random_picture.width == 8

    def test_to_tensor_is_a_copy(self, random_picture):
        tensor = random_picture.to_tensor()
        tensor.zero_()
        assert random_picture != Picture(8, 6)


class TestBuffer:
    def test_round_trip(self, random_picture):
        width, height, data = random_picture.to_buffer(alpha=False)
        assert Picture.from_buffer(width, height, data) == random_picture

    def test_round_trip_with_alpha(self, random_picture):
        width, height, data = random_picture.to_buffer()
        assert Picture.from_buffer(width, height, data, channels=4) == random_picture

    def test_alpha_is_opaque(self, random_picture):
        width, height, data = random_picture.to_buffer(alpha=True)
        assert data.dtype == np.uint8
        assert data.shape == (width * height * 4,)
        assert (data[3::4] == 255).all()

    def test_buffer_layout(self):
        picture = make_picture([[(1, 2, 3), (4, 5, 6)]])
        _, _, data = picture.to_buffer(alpha=False)
        assert data.tolist() == [1, 2, 3, 4, 5, 6]

    def test_buffer_is_detached(self):
        picture = Picture(1, 1)
        _, _, data = picture.to_buffer(alpha=False)
        data[:] = 200
        assert picture.get(0, 0) == Color(0, 0, 0)


class TestRemoveVerticalSeam:
    def test_preserves_non_seam_pixels(self, random_picture):
        original = random_picture.copy()
        seam = [3, 4, 4, 5, 4, 3]
        random_picture.remove_vertical_seam(seam)

        assert (random_picture.width, random_picture.height) == (7, 6)
        for y in range(6):
            expected = row_colors(original, y)
            del expected[seam[y]]
            assert row_colors(random_picture, y) == expected

    def test_first_and_last_columns(self):
        picture = make_picture([[(0, 0, 0), (1, 1, 1), (2, 2, 2)],
                                [(3, 3, 3), (4, 4, 4), (5, 5, 5)]])
        picture.remove_vertical_seam([0, 2])
        assert row_colors(picture, 0) == [Color(1, 1, 1), Color(2, 2, 2)]
        assert row_colors(picture, 1) == [Color(3, 3, 3), Color(4, 4, 4)]

    def test_wrong_length(self, random_picture):
        with pytest.raises(InvalidSeamError):
            random_picture.remove_vertical_seam([0] * 5)
        assert random_picture.width == 8

    def test_entry_out_of_bounds_leaves_picture_unchanged(self, random_picture):
        original = random_picture.copy()
        with pytest.raises(OutOfBoundsError):
            random_picture.remove_vertical_seam([0, 0, 0, 0, 0, 8])
        with pytest.raises(OutOfBoundsError):
            random_picture.remove_vertical_seam([-1, 0, 0, 0, 0, 0])
        assert random_picture == original

    def test_width_one_cannot_shrink(self):
        picture = Picture(1, 3)
        with pytest.raises(InvalidSeamError):
            picture.remove_vertical_seam([0, 0, 0])
        assert picture.width == 1


class TestRemoveHorizontalSeam:
    def test_preserves_non_seam_pixels(self, random_picture):
        original = random_picture.copy()
        seam = [0, 1, 2, 3, 4, 5, 5, 4]
        random_picture.remove_horizontal_seam(seam)

        assert (random_picture.width, random_picture.height) == (8, 5)
        for x in range(8):
            expected = column_colors(original, x)
            del expected[seam[x]]
            assert column_colors(random_picture, x) == expected

    def test_wrong_length(self, random_picture):
        with pytest.raises(InvalidSeamError):
            random_picture.remove_horizontal_seam([0] * 6)

    def test_entry_out_of_bounds(self, random_picture):
        with pytest.raises(OutOfBoundsError):
            random_picture.remove_horizontal_seam([0] * 7 + [6])
        assert random_picture.height == 6

    def test_height_one_cannot_shrink(self):
        with pytest.raises(InvalidSeamError):
            Picture(2, 1).remove_horizontal_seam([0, 0])


class TestHighlight:
    def test_vertical_highlight_marks_one_pixel_per_row(self, random_picture):
        original = random_picture.copy()
        seam = [1, 2, 3, 3, 2, 1]
        random_picture.highlight_vertical_seam(seam)

        assert (random_picture.width, random_picture.height) == (8, 6)
        for y in range(6):
            for x in range(8):
                if x == seam[y]:
                    assert random_picture.get(x, y) == SEAM_COLOR
                else:
                    assert random_picture.get(x, y) == original.get(x, y)

    def test_horizontal_highlight_marks_one_pixel_per_column(self):
        picture = Picture(4, 3)
        seam = [0, 1, 2, 2]
        picture.highlight_horizontal_seam(seam)

        changed = [(x, y) for x in range(4) for y in range(3) if picture.get(x, y) != Color(0, 0, 0)]
        assert changed == [(x, seam[x]) for x in range(4)]
        assert all(picture.get(x, y) == SEAM_COLOR for x, y in changed)

    def test_highlight_validates(self, random_picture):
        with pytest.raises(InvalidSeamError):
            random_picture.highlight_horizontal_seam([0, 0])
        with pytest.raises(OutOfBoundsError):
            random_picture.highlight_vertical_seam([0, 0, 0, 0, 0, 9])
