"""Adjacency-matrix graph representation backed by a NumPy grid."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from .data import Edge, EdgeStream, Weight
from .exceptions import VertexOutOfRangeError

# Cell value meaning "no edge". Weights are finite, so NaN never collides with one.
NO_EDGE = np.nan


def _as_weight(value: float) -> Weight:
    # Hand back ints for integral cells so weights compare like the parsed input.
    return int(value) if float(value).is_integer() else float(value)


class AdjacencyMatrixGraph:
    """Graph stored as a ``vertex_count x vertex_count`` grid of edge weights.

    Cell ``[u, v]`` holds the weight of edge (u, v) or NaN when there is no
    edge. Undirected graphs keep the grid symmetric. When several input edges
    target the same cell the last one written wins.

    Space is O(V^2) regardless of the number of edges. has_edge() and weight()
    are O(1); neighbors() and degree() scan a full row and cost O(V).

    Instances are immutable; build them with build_adjacency_matrix().
    """

    __slots__ = ("_directed", "_matrix")

    def __init__(self, matrix: NDArray[np.float64], directed: bool):
        matrix.flags.writeable = False
        self._matrix = matrix
        self._directed = directed

    @property
    def vertex_count(self) -> int:
        return self._matrix.shape[0]

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def edge_count(self) -> int:
        """Number of distinct edges stored (cells for directed, cell pairs for undirected)."""
        present = ~np.isnan(self._matrix)
        if self._directed:
            return int(np.count_nonzero(present))
        return int(np.count_nonzero(np.triu(present)))

    def __len__(self) -> int:
        return self._matrix.shape[0]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertex_count={self.vertex_count}, "
            f"edge_count={self.edge_count}, directed={self._directed})"
        )

    def _check_vertex(self, v: int) -> None:
        if not 0 <= v < self._matrix.shape[0]:
            raise VertexOutOfRangeError(
                f"Vertex {v} outside the valid range [0, {self._matrix.shape[0]})",
                vertex=v,
                vertex_count=self._matrix.shape[0],
            )

    def has_edge(self, u: int, v: int) -> bool:
        """Return True if cell ``[u, v]`` holds an edge.

        Raises:
            VertexOutOfRangeError: If either index is not in ``[0, vertex_count)``.
        """
        self._check_vertex(u)
        self._check_vertex(v)
        return not np.isnan(self._matrix[u, v])

    def weight(self, u: int, v: int) -> Weight | None:
        """Return the weight in cell ``[u, v]``, or None for "no edge"."""
        self._check_vertex(u)
        self._check_vertex(v)
        value = self._matrix[u, v]
        if np.isnan(value):
            return None
        return _as_weight(value)

    def neighbors(self, v: int) -> tuple[tuple[int, Weight], ...]:
        """Return ``(neighbor, weight)`` pairs for row v in ascending neighbor order."""
        self._check_vertex(v)
        row = self._matrix[v]
        return tuple((int(j), _as_weight(row[j])) for j in np.flatnonzero(~np.isnan(row)))

    def degree(self, v: int) -> int:
        """Return the number of occupied cells in row v."""
        self._check_vertex(v)
        return int(np.count_nonzero(~np.isnan(self._matrix[v])))

    def edges(self) -> tuple[Edge, ...]:
        """Return the stored edges in row-major order.

        Undirected graphs report each mirrored pair once, as ``u <= v``.
        """
        present = ~np.isnan(self._matrix)
        if not self._directed:
            present = np.triu(present)
        rows, cols = np.nonzero(present)
        return tuple(
            Edge(int(u), int(v), _as_weight(self._matrix[u, v])) for u, v in zip(rows, cols)
        )

    def to_numpy(self) -> NDArray[np.float64]:
        """Return a read-only view of the weight grid (NaN marks missing edges)."""
        return self._matrix.view()


def build_adjacency_matrix(stream: EdgeStream) -> AdjacencyMatrixGraph:
    """Build an AdjacencyMatrixGraph from a parsed edge stream.

    Args:
        stream: Validated edge stream. It is only read, never modified.

    Returns:
        A new, independent AdjacencyMatrixGraph owning its own grid.

    Example:
        >>> from adjacency_graphs.parser import parse_edge_stream_string
        >>> graph = build_adjacency_matrix(parse_edge_stream_string("3 2\\n0 1\\n1 2\\n"))
        >>> graph.has_edge(0, 1), graph.has_edge(0, 2)
        (True, False)
    """
    n = stream.vertex_count
    matrix = np.full((n, n), NO_EDGE, dtype=np.float64)
    for edge in stream.edges:
        matrix[edge.u, edge.v] = edge.weight
        if not stream.directed:
            matrix[edge.v, edge.u] = edge.weight
    return AdjacencyMatrixGraph(matrix, directed=stream.directed)
