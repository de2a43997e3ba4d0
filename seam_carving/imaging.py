"""
Conversion between pictures and Pillow images / numpy arrays.

These adaptors sit at the boundary with surrounding tooling (viewers,
file formats). The carving engine itself never touches files.
"""

import logging

import numpy as np
from PIL import Image, UnidentifiedImageError

from .errors import ImageIOError, InvalidArgumentError
from .picture import Picture

logger = logging.getLogger(__name__)


def picture_from_array(array: np.ndarray) -> Picture:
    """
    Build a picture from an (H, W, 3) or (H, W, 4) uint8 array.

    Alpha, if present, is dropped.
    """
    array = np.asarray(array)
    if array.ndim != 3 or array.shape[2] not in (3, 4):
        raise InvalidArgumentError(f"Expected shape (H, W, 3|4), got {array.shape}")
    H, W, C = array.shape
    return Picture.from_buffer(W, H, array.reshape(-1), channels=C)


def picture_to_array(picture: Picture, alpha: bool = False) -> np.ndarray:
    """Pixel data as an (H, W, 3) uint8 array, or (H, W, 4) with opaque alpha."""
    width, height, data = picture.to_buffer(alpha=alpha)
    return data.reshape(height, width, 4 if alpha else 3)


def picture_from_image(image: Image.Image) -> Picture:
    """Build a picture from a Pillow image of any mode."""
    return picture_from_array(np.array(image.convert('RGB'), dtype=np.uint8))


def picture_to_image(picture: Picture) -> Image.Image:
    """Render a picture as an RGB Pillow image."""
    return Image.fromarray(picture_to_array(picture))


def load_picture(path) -> Picture:
    """Read an image file into a picture."""
    try:
        with Image.open(path) as img:
            picture = picture_from_image(img)
    except FileNotFoundError as ex:
        raise ImageIOError(f"Input not found: {path}") from ex
    except (UnidentifiedImageError, OSError) as ex:
        raise ImageIOError(f"Failed to open image '{path}': {ex}") from ex

    logger.debug("Loaded %s (%dx%d)", path, picture.width, picture.height)
    return picture


def save_picture(picture: Picture, path) -> None:
    """Write a picture to an image file; the format follows the extension."""
    try:
        picture_to_image(picture).save(path)
    except (ValueError, OSError) as ex:
        raise ImageIOError(f"Failed to save image '{path}': {ex}") from ex
    logger.debug("Saved %s (%dx%d)", path, picture.width, picture.height)
