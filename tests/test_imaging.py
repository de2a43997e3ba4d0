"""Tests for the Pillow / numpy adaptors."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import pytest
from PIL import Image
from seam_carving.color import Color
from seam_carving.carver import SeamCarver
from seam_carving.imaging import (picture_from_array, picture_to_array, picture_from_image,
                                  picture_to_image, load_picture, save_picture)
from seam_carving.errors import ImageIOError, InvalidArgumentError

from conftest import make_random_picture


class TestArrays:
    def test_array_round_trip(self, random_picture):
        array = picture_to_array(random_picture)
        assert array.shape == (6, 8, 3)
        assert picture_from_array(array) == random_picture

    def test_array_indexing_matches_picture(self):
        array = np.zeros((2, 3, 3), dtype=np.uint8)
        array[1, 2] = (10, 20, 30)
        picture = picture_from_array(array)
        assert (picture.width, picture.height) == (3, 2)
        assert picture.get(2, 1) == Color(10, 20, 30)

    def test_rgba_array_alpha_dropped(self):
        array = np.full((2, 2, 4), 7, dtype=np.uint8)
        picture = picture_from_array(array)
        assert picture.get(0, 0) == Color(7, 7, 7)
        assert (picture_to_array(picture, alpha=True)[:, :, 3] == 255).all()

    def test_rejects_grayscale_array(self):
        with pytest.raises(InvalidArgumentError):
            picture_from_array(np.zeros((4, 4), dtype=np.uint8))


class TestPillow:
    def test_image_round_trip(self, random_picture):
        image = picture_to_image(random_picture)
        assert image.size == (8, 6)
        assert image.mode == 'RGB'
        assert picture_from_image(image) == random_picture

    def test_grayscale_image_is_converted(self):
        image = Image.new('L', (3, 2), color=90)
        picture = picture_from_image(image)
        assert picture.get(2, 1) == Color(90, 90, 90)

    def test_save_and_load(self, tmp_path):
        picture = make_random_picture(10, 7, seed=5)
        path = tmp_path / "picture.png"
        save_picture(picture, path)
        assert load_picture(path) == picture

    def test_carved_result_saves_at_new_size(self, tmp_path):
        carver = SeamCarver(make_random_picture(10, 7, seed=6))
        carver.carve(columns=2, rows=1)
        path = tmp_path / "carved.png"
        save_picture(carver.picture, path)
        with Image.open(path) as image:
            assert image.size == (8, 6)

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(ImageIOError):
            load_picture(tmp_path / "missing.png")

    def test_load_non_image(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("not an image")
        with pytest.raises(ImageIOError):
            load_picture(path)
