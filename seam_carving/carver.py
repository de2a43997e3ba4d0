"""
Seam carver: energy, seam search and seam removal on a private picture.

Seam search is reduced to a shortest path problem on a DAG with
W * H + 2 vertices. Pixel (x, y) is vertex y * W + x; vertex W * H is a
super-source and W * H + 1 a super-sink.

For a vertical seam the layers of the DAG are the rows:
- source -> every pixel of row 0, weight 0
- pixel (c, r) -> (c - 1, r + 1), (c, r + 1), (c + 1, r + 1), weight E(c, r)
- every pixel of the last row -> sink, weight E(c, H - 1)

A horizontal seam is the same construction with rows and columns swapped.
Weighting each edge by the energy of the pixel it leaves turns the
"weights on vertices" problem into an ordinary edge-weighted one; every
pixel on the path contributes its energy exactly once.
"""

import logging
import time
from typing import Callable, List, Sequence

from .digraph import DirectedEdge, EdgeWeightedDigraph
from .energy import dual_gradient_energy, pixel_energy
from .errors import InvalidArgumentError, InvalidSeamError
from .picture import Picture
from .shortest_path import AcyclicShortestPath

logger = logging.getLogger(__name__)

DIRECTIONS = ('vertical', 'horizontal')

# Offsets of the three pixels a seam may step to in the next layer
_NEIGHBOR_OFFSETS = (-1, 0, 1)


def _check_direction(direction: str) -> None:
    if direction not in DIRECTIONS:
        raise InvalidArgumentError(f"Invalid direction: {direction!r}")


def build_seam_digraph(energy: List[List[float]], direction: str = 'vertical') -> EdgeWeightedDigraph:
    """
    Build the seam-search DAG for an energy map.

    Args:
        energy: Energy per pixel, indexed energy[y][x]
        direction: 'vertical' (one pixel per row) or 'horizontal' (one per column)

    Returns:
        Digraph with source W * H and sink W * H + 1
    """
    _check_direction(direction)
    H, W = len(energy), len(energy[0])
    source, sink = W * H, W * H + 1

    if direction == 'vertical':
        n_layers, n_positions = H, W
        vertex: Callable[[int, int], int] = lambda layer, pos: layer * W + pos
        weight: Callable[[int, int], float] = lambda layer, pos: energy[layer][pos]
    else:
        n_layers, n_positions = W, H
        vertex = lambda layer, pos: pos * W + layer
        weight = lambda layer, pos: energy[pos][layer]

    digraph = EdgeWeightedDigraph(W * H + 2)
    last = n_layers - 1

    for pos in range(n_positions):
        digraph.add_edge(DirectedEdge(source, vertex(0, pos), 0.0))
        digraph.add_edge(DirectedEdge(vertex(last, pos), sink, weight(last, pos)))

    for layer in range(last):
        for pos in range(n_positions):
            origin = vertex(layer, pos)
            cost = weight(layer, pos)
            for offset in _NEIGHBOR_OFFSETS:
                target = pos + offset
                if 0 <= target < n_positions:
                    digraph.add_edge(DirectedEdge(origin, vertex(layer + 1, target), cost))

    return digraph


class SeamCarver:
    """
    Content-aware resizing of a picture by seam removal.

    The carver works on its own copy of the picture, so the caller's
    picture is never modified. Instances are not thread-safe.
    """

    def __init__(self, picture: Picture):
        if not isinstance(picture, Picture):
            raise InvalidArgumentError(f"Expected a Picture, got {type(picture).__name__}")
        self._picture = picture.copy()

    @property
    def picture(self) -> Picture:
        """Current picture (the carver's own instance)."""
        return self._picture

    @property
    def width(self) -> int:
        return self._picture.width

    @property
    def height(self) -> int:
        return self._picture.height

    def energy(self, x: int, y: int) -> float:
        """Dual-gradient energy of the pixel at column x, row y."""
        return pixel_energy(self._picture, x, y)

    def energy_map(self):
        """Energy of every pixel as an (H, W) float64 tensor."""
        return dual_gradient_energy(self._picture.to_tensor())

    # ------------------------------------------------------------------
    # Seam search
    # ------------------------------------------------------------------

    def find_seam(self, direction: str = 'vertical') -> List[int]:
        """
        Find a seam of minimum total energy.

        Args:
            direction: 'vertical' returns one column index per row,
                'horizontal' one row index per column

        Returns:
            Seam indices
        """
        _check_direction(direction)
        start = time.perf_counter()

        W = self.width
        digraph = build_seam_digraph(self.energy_map().tolist(), direction)
        sink = digraph.vertex_count - 1
        source = sink - 1
        logger.debug("Seam digraph (%s): %d vertices, %d edges",
                     direction, digraph.vertex_count, digraph.edge_count)

        seam = []
        for edge in AcyclicShortestPath(digraph, source).path_to(sink):
            if edge.to_vertex == sink:
                break
            if direction == 'vertical':
                seam.append(edge.to_vertex % W)
            else:
                seam.append(edge.to_vertex // W)

        logger.debug("Found %s seam in %.4fs", direction, time.perf_counter() - start)
        return seam

    def find_vertical_seam(self) -> List[int]:
        """Column index to remove for each row (length == height)."""
        return self.find_seam('vertical')

    def find_horizontal_seam(self) -> List[int]:
        """Row index to remove for each column (length == width)."""
        return self.find_seam('horizontal')

    # ------------------------------------------------------------------
    # Seam removal and preview
    # ------------------------------------------------------------------

    def _check_length(self, seam: Sequence[int], expected: int, direction: str) -> None:
        if len(seam) != expected:
            raise InvalidSeamError(
                f"{direction.capitalize()} seam must have length {expected}, got {len(seam)}")

    def remove_horizontal_seam(self, seam: Sequence[int]) -> None:
        self._check_length(seam, self.width, 'horizontal')
        self._picture.remove_horizontal_seam(seam)

    def remove_vertical_seam(self, seam: Sequence[int]) -> None:
        self._check_length(seam, self.height, 'vertical')
        self._picture.remove_vertical_seam(seam)

    def highlight_horizontal_seam(self, seam: Sequence[int]) -> None:
        """Paint the seam red without changing the picture size."""
        self._check_length(seam, self.width, 'horizontal')
        self._picture.highlight_horizontal_seam(seam)

    def highlight_vertical_seam(self, seam: Sequence[int]) -> None:
        """Paint the seam red without changing the picture size."""
        self._check_length(seam, self.height, 'vertical')
        self._picture.highlight_vertical_seam(seam)

    def carve(self, columns: int = 0, rows: int = 0) -> Picture:
        """
        Remove seams one at a time: `columns` vertical seams, then `rows`
        horizontal ones.

        Returns:
            The carver's picture after carving
        """
        for name, count, size in (('columns', columns, self.width), ('rows', rows, self.height)):
            if isinstance(count, bool) or not isinstance(count, int) or count < 0:
                raise InvalidArgumentError(f"{name} must be a non-negative int, got {count!r}")
            if count >= size:
                raise InvalidArgumentError(
                    f"Cannot remove {count} {name} from a picture with {size}")

        for _ in range(columns):
            self.remove_vertical_seam(self.find_vertical_seam())
        for _ in range(rows):
            self.remove_horizontal_seam(self.find_horizontal_seam())

        logger.info("Carved %d columns and %d rows, picture is now %dx%d",
                    columns, rows, self.width, self.height)
        return self._picture

    def format_energy_matrix(self) -> str:
        """Energy of every pixel as a text table, one row per line."""
        energy = self.energy_map().tolist()
        return "\n".join(" ".join(f"{e:8.2f}" for e in row) for row in energy)
