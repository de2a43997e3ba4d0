"""
Mutable pixel grid.

A Picture stores its pixels as a (3, H, W) uint8 tensor, the channel-first
layout used for images throughout this package. The tensor is the single
source of truth for the picture's size, so width/height can never disagree
with the grid.

Picture is the only component allowed to change the size of the grid:
seam removal shrinks it by exactly one row or column in place.
"""

import logging
import operator
import time
from typing import List, Sequence, Tuple

import numpy as np
import torch

from .color import BLACK, SEAM_COLOR, Color
from .errors import InvalidArgumentError, InvalidSeamError, OutOfBoundsError

logger = logging.getLogger(__name__)


def _check_dimension(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an int, got {value!r}")
    if value <= 0:
        raise InvalidArgumentError(f"{name} must be positive, got {value}")


class Picture:
    """
    Rectangular RGB picture.

    Pixels are addressed as (x, y) with 0 <= x < width (column) and
    0 <= y < height (row).
    """

    def __init__(self, width: int, height: int, fill: Color = BLACK):
        """
        Create a solid-color picture.

        Args:
            width: Number of columns (> 0)
            height: Number of rows (> 0)
            fill: Color of every pixel
        """
        _check_dimension('width', width)
        _check_dimension('height', height)
        if not isinstance(fill, Color):
            raise InvalidArgumentError(f"fill must be a Color, got {fill!r}")

        self._pixels = torch.tensor(fill.as_tuple(), dtype=torch.uint8)
        self._pixels = self._pixels.view(3, 1, 1).expand(3, height, width).clone()

    @classmethod
    def _wrap(cls, pixels: torch.Tensor) -> 'Picture':
        picture = cls.__new__(cls)
        picture._pixels = pixels
        return picture

    @classmethod
    def from_tensor(cls, image: torch.Tensor) -> 'Picture':
        """
        Build a picture from an image tensor.

        Args:
            image: (3, H, W) tensor. Integer tensors must hold values in
                [0, 255]; floating point tensors are read as [0, 1] intensities.

        Returns:
            New picture owning a copy of the data
        """
        if not isinstance(image, torch.Tensor):
            raise InvalidArgumentError(f"Expected a torch.Tensor, got {type(image).__name__}")
        if image.dim() != 3 or image.shape[0] != 3:
            raise InvalidArgumentError(f"Expected shape (3, H, W), got {tuple(image.shape)}")
        if image.shape[1] == 0 or image.shape[2] == 0:
            raise InvalidArgumentError(f"Picture must be non-empty, got {tuple(image.shape)}")

        if image.is_floating_point():
            pixels = (image.clamp(0.0, 1.0) * 255).round().to(torch.uint8)
        else:
            if image.min().item() < 0 or image.max().item() > 255:
                raise InvalidArgumentError("Integer pixel values must be in [0, 255]")
            pixels = image.to(torch.uint8)

        return cls._wrap(pixels.detach().cpu().clone(memory_format=torch.contiguous_format))

    @classmethod
    def from_buffer(cls, width: int, height: int, data, channels: int = 3) -> 'Picture':
        """
        Ingest a flat row-major pixel buffer.

        Args:
            width: Number of columns (> 0)
            height: Number of rows (> 0)
            data: width * height * channels integers in [0, 255]; any
                sequence, bytes object or numpy array
            channels: 3 for RGB, 4 for RGBA (alpha is dropped)

        Returns:
            New picture
        """
        _check_dimension('width', width)
        _check_dimension('height', height)
        if channels not in (3, 4):
            raise InvalidArgumentError(f"channels must be 3 or 4, got {channels!r}")

        if isinstance(data, (bytes, bytearray, memoryview)):
            arr = np.frombuffer(data, dtype=np.uint8)
        else:
            arr = np.asarray(data).ravel()

        expected = width * height * channels
        if arr.size != expected:
            raise InvalidArgumentError(
                f"Buffer holds {arr.size} values, expected {expected} "
                f"({width}x{height}x{channels})")
        if arr.dtype.kind not in 'iu':
            raise InvalidArgumentError(f"Buffer values must be integers, got dtype {arr.dtype}")
        if arr.min() < 0 or arr.max() > 255:
            raise InvalidArgumentError("Buffer values must be in [0, 255]")

        rgb = arr.astype(np.uint8).reshape(height, width, channels)[:, :, :3]
        pixels = torch.from_numpy(np.ascontiguousarray(rgb.transpose(2, 0, 1)))
        return cls._wrap(pixels.clone())

    @property
    def width(self) -> int:
        return self._pixels.shape[2]

    @property
    def height(self) -> int:
        return self._pixels.shape[1]

    def _check_coordinates(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBoundsError(
                f"Pixel ({x}, {y}) outside picture of size {self.width}x{self.height}")

    def get(self, x: int, y: int) -> Color:
        """Color of the pixel at column x, row y."""
        self._check_coordinates(x, y)
        r, g, b = self._pixels[:, y, x].tolist()
        return Color(r, g, b)

    def set(self, x: int, y: int, color: Color) -> None:
        """Overwrite the pixel at column x, row y."""
        self._check_coordinates(x, y)
        if not isinstance(color, Color):
            raise InvalidArgumentError(f"Expected a Color, got {color!r}")
        self._pixels[:, y, x] = torch.tensor(color.as_tuple(), dtype=torch.uint8)

    def copy(self) -> 'Picture':
        """Independent deep copy; no storage is shared with this picture."""
        return Picture._wrap(self._pixels.clone())

    def to_tensor(self) -> torch.Tensor:
        """Copy of the pixel data as a (3, H, W) uint8 tensor."""
        return self._pixels.clone()

    def to_buffer(self, alpha: bool = True) -> Tuple[int, int, np.ndarray]:
        """
        Export the picture as a flat row-major buffer.

        Args:
            alpha: Emit RGBA with a fully opaque alpha channel, else RGB

        Returns:
            (width, height, data) with data a flat uint8 numpy array
        """
        rgb = self._pixels.permute(1, 2, 0).numpy()
        if alpha:
            opaque = np.full((self.height, self.width, 1), 255, dtype=np.uint8)
            rgb = np.concatenate([rgb, opaque], axis=2)
        return self.width, self.height, np.array(rgb).ravel()

    # ------------------------------------------------------------------
    # Seams
    # ------------------------------------------------------------------

    def _validate_seam(self, seam: Sequence[int], direction: str) -> List[int]:
        """Check a seam against the current size and return it as plain ints."""
        if direction == 'vertical':
            length, limit, axis = self.height, self.width, 'width'
        else:
            length, limit, axis = self.width, self.height, 'height'

        if len(seam) != length:
            raise InvalidSeamError(
                f"{direction.capitalize()} seam must have length {length}, got {len(seam)}")

        indices = []
        for i, value in enumerate(seam):
            try:
                index = operator.index(value)
            except TypeError:
                raise OutOfBoundsError(
                    f"Seam entry {i} must be an integer, got {value!r}") from None
            if not 0 <= index < limit:
                raise OutOfBoundsError(
                    f"Seam entry {i} is {index}, outside [0, {limit}) for picture {axis}")
            indices.append(index)
        return indices

    def remove_horizontal_seam(self, seam: Sequence[int]) -> None:
        """
        Remove one pixel per column, shrinking the height by one.

        Args:
            seam: Row index to delete for each column (length == width)
        """
        rows = self._validate_seam(seam, 'horizontal')
        if self.height == 1:
            raise InvalidSeamError("Cannot remove a horizontal seam from a picture of height 1")

        start = time.perf_counter()
        C, H, W = self._pixels.shape
        carved = torch.empty(C, H - 1, W, dtype=self._pixels.dtype)

        for j in range(W):
            row = rows[j]
            carved[:, :row, j] = self._pixels[:, :row, j]
            carved[:, row:, j] = self._pixels[:, row + 1:, j]

        self._pixels = carved
        logger.debug("Removed horizontal seam in %.4fs, picture is now %dx%d",
                     time.perf_counter() - start, self.width, self.height)

    def remove_vertical_seam(self, seam: Sequence[int]) -> None:
        """
        Remove one pixel per row, shrinking the width by one.

        Args:
            seam: Column index to delete for each row (length == height)
        """
        cols = self._validate_seam(seam, 'vertical')
        if self.width == 1:
            raise InvalidSeamError("Cannot remove a vertical seam from a picture of width 1")

        start = time.perf_counter()
        C, H, W = self._pixels.shape
        carved = torch.empty(C, H, W - 1, dtype=self._pixels.dtype)

        for i in range(H):
            col = cols[i]
            carved[:, i, :col] = self._pixels[:, i, :col]
            carved[:, i, col:] = self._pixels[:, i, col + 1:]

        self._pixels = carved
        logger.debug("Removed vertical seam in %.4fs, picture is now %dx%d",
                     time.perf_counter() - start, self.width, self.height)

    def highlight_horizontal_seam(self, seam: Sequence[int]) -> None:
        """Paint the seam (one row index per column) with the marker color."""
        rows = self._validate_seam(seam, 'horizontal')
        marker = torch.tensor(SEAM_COLOR.as_tuple(), dtype=torch.uint8).unsqueeze(1)
        self._pixels[:, torch.tensor(rows), torch.arange(self.width)] = marker

    def highlight_vertical_seam(self, seam: Sequence[int]) -> None:
        """Paint the seam (one column index per row) with the marker color."""
        cols = self._validate_seam(seam, 'vertical')
        marker = torch.tensor(SEAM_COLOR.as_tuple(), dtype=torch.uint8).unsqueeze(1)
        self._pixels[:, torch.arange(self.height), torch.tensor(cols)] = marker

    def __eq__(self, other):
        if not isinstance(other, Picture):
            return NotImplemented
        return self._pixels.shape == other._pixels.shape and torch.equal(self._pixels, other._pixels)

    __hash__ = None

    def __repr__(self):
        return f"Picture(width={self.width}, height={self.height})"
