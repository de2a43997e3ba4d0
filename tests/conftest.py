"""Shared test fixtures for the seam carving test suite."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest
from seam_carving.color import Color
from seam_carving.picture import Picture


def make_picture(rows):
    """Picture from nested lists: rows[y][x] = (r, g, b)."""
    H, W = len(rows), len(rows[0])
    data = [channel for row in rows for pixel in row for channel in pixel]
    return Picture.from_buffer(W, H, data)


def make_random_picture(W, H, seed=0):
    """Picture with uniformly random colors."""
    generator = torch.Generator().manual_seed(seed)
    image = torch.randint(0, 256, (3, H, W), generator=generator)
    return Picture.from_tensor(image)


def row_colors(picture, y):
    return [picture.get(x, y) for x in range(picture.width)]


def column_colors(picture, x):
    return [picture.get(x, y) for y in range(picture.height)]


@pytest.fixture
def bright_center():
    """3x3 black picture with a single white pixel in the middle."""
    picture = Picture(3, 3)
    picture.set(1, 1, Color(255, 255, 255))
    return picture


@pytest.fixture
def random_picture():
    """Random 8x6 picture."""
    return make_random_picture(8, 6, seed=42)
