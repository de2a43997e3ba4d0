"""
Content-aware image resizing by seam carving.

Seams of minimum dual-gradient energy are found by reducing the search to a
shortest path in an acyclic edge-weighted digraph, then removed one at a time.
"""

__version__ = "0.1.0"

from .errors import (
    SeamCarvingError,
    InvalidArgumentError,
    OutOfBoundsError,
    InvalidSeamError,
    ImageIOError,
)
from .color import Color, SEAM_COLOR
from .picture import Picture
from .digraph import DirectedEdge, EdgeWeightedDigraph
from .shortest_path import TopologicalSort, AcyclicShortestPath
from .energy import BORDER_ENERGY, pixel_energy, dual_gradient_energy
from .carver import SeamCarver, build_seam_digraph
from .imaging import (
    picture_from_array,
    picture_to_array,
    picture_from_image,
    picture_to_image,
    load_picture,
    save_picture,
)

__all__ = [
    'SeamCarvingError',
    'InvalidArgumentError',
    'OutOfBoundsError',
    'InvalidSeamError',
    'ImageIOError',
    'Color',
    'SEAM_COLOR',
    'Picture',
    'DirectedEdge',
    'EdgeWeightedDigraph',
    'TopologicalSort',
    'AcyclicShortestPath',
    'BORDER_ENERGY',
    'pixel_energy',
    'dual_gradient_energy',
    'SeamCarver',
    'build_seam_digraph',
    'picture_from_array',
    'picture_to_array',
    'picture_from_image',
    'picture_to_image',
    'load_picture',
    'save_picture',
]
