"""Immutable RGB color value."""

from dataclasses import dataclass
from typing import Tuple

from .errors import InvalidArgumentError


def _check_channel(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"Channel {name} must be an int, got {value!r}")
    if not 0 <= value <= 255:
        raise InvalidArgumentError(f"Channel {name} must be in [0, 255], got {value}")


@dataclass(frozen=True)
class Color:
    """8-bit per channel RGB color. Equality is structural."""

    r: int
    g: int
    b: int

    def __post_init__(self):
        _check_channel('r', self.r)
        _check_channel('g', self.g)
        _check_channel('b', self.b)

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)


BLACK = Color(0, 0, 0)

# Marker used when previewing a seam
SEAM_COLOR = Color(255, 0, 0)
