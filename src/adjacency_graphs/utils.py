"""Utility functions for comparing and inspecting the two graph representations."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .adjacency_list import AdjacencyListGraph
from .adjacency_matrix import AdjacencyMatrixGraph

if TYPE_CHECKING:
    from .builder import GraphPair

try:
    import networkx as nx  # type: ignore[import-untyped,unused-ignore]

    _HAS_NETWORKX = True
except ImportError:
    _HAS_NETWORKX = False


@dataclass
class ConsistencyReport:
    """Result of cross-checking an adjacency list against an adjacency matrix.

    Attributes:
        is_consistent: True if both graphs describe the same edges.
        errors: List of disagreement messages (empty if consistent).
        list_only: (u, v) pairs present in the list but missing from the matrix.
        matrix_only: (u, v) pairs present in the matrix but missing from the list.
        weight_mismatches: (u, v) pairs whose weights differ between the two.
    """

    is_consistent: bool
    errors: list[str]
    list_only: list[tuple[int, int]]
    matrix_only: list[tuple[int, int]]
    weight_mismatches: list[tuple[int, int]]


@dataclass
class RepresentationStats:
    """Size figures contrasting the two representations of one graph.

    Attributes:
        vertex_count: Number of vertices.
        edge_count: Edges accepted from the input (parallel edges counted each time).
        list_slots: Total (neighbor, weight) entries held by the adjacency list.
        list_bytes: Approximate memory held by the adjacency list containers.
        matrix_cells: Cells allocated by the matrix (vertex_count squared).
        matrix_occupied: Cells holding an edge.
        matrix_bytes: Bytes held by the matrix grid.
        density: matrix_occupied / matrix_cells (0.0 for an empty graph).
    """

    vertex_count: int
    edge_count: int
    list_slots: int
    list_bytes: int
    matrix_cells: int
    matrix_occupied: int
    matrix_bytes: int
    density: float


def check_consistency(pair: GraphPair) -> ConsistencyReport:
    """Verify that the list and matrix of a GraphPair describe the same graph.

    Every (neighbor, weight) entry in the list must be backed by a matrix cell
    holding the same weight (the last one written for parallel edges), and
    every occupied matrix cell must appear in the list.

    Args:
        pair: Graphs built from one edge stream.

    Returns:
        ConsistencyReport listing any disagreement.
    """
    adj_list = pair.adjacency_list
    matrix = pair.adjacency_matrix
    errors: list[str] = []
    list_only: list[tuple[int, int]] = []
    matrix_only: list[tuple[int, int]] = []
    weight_mismatches: list[tuple[int, int]] = []

    if adj_list.vertex_count != matrix.vertex_count:
        errors.append(
            f"Vertex count mismatch: list has {adj_list.vertex_count}, "
            f"matrix has {matrix.vertex_count}"
        )
        return ConsistencyReport(False, errors, list_only, matrix_only, weight_mismatches)
    if adj_list.directed != matrix.directed:
        errors.append(
            f"Directedness mismatch: list directed={adj_list.directed}, "
            f"matrix directed={matrix.directed}"
        )

    for u in range(adj_list.vertex_count):
        # The last entry per neighbor is the one the matrix must hold.
        expected: dict[int, Any] = {}
        for v, w in adj_list.neighbors(u):
            expected[v] = w
        actual = dict(matrix.neighbors(u))

        for v, w in expected.items():
            if v not in actual:
                list_only.append((u, v))
                errors.append(f"Edge ({u}, {v}) in adjacency list but not in matrix")
            elif actual[v] != w:
                weight_mismatches.append((u, v))
                errors.append(
                    f"Edge ({u}, {v}) weight differs: list {w}, matrix {actual[v]}"
                )
        for v in actual:
            if v not in expected:
                matrix_only.append((u, v))
                errors.append(f"Edge ({u}, {v}) in matrix but not in adjacency list")

    return ConsistencyReport(
        is_consistent=not errors,
        errors=errors,
        list_only=list_only,
        matrix_only=matrix_only,
        weight_mismatches=weight_mismatches,
    )


def representation_stats(pair: GraphPair) -> RepresentationStats:
    """Measure the space taken by each representation of a GraphPair.

    List bytes are estimated from the container objects (the outer tuple, one
    tuple per vertex, one pair tuple per slot); the shared int/float objects
    are not counted. Matrix bytes are the grid's ``nbytes``.
    """
    adj_list = pair.adjacency_list
    grid = pair.adjacency_matrix.to_numpy()
    vertices = range(adj_list.vertex_count)

    neighbor_tuples = [adj_list.neighbors(v) for v in vertices]
    list_slots = sum(len(entries) for entries in neighbor_tuples)
    list_bytes = sys.getsizeof(tuple(neighbor_tuples)) + sum(
        sys.getsizeof(entries) + sum(sys.getsizeof(entry) for entry in entries)
        for entries in neighbor_tuples
    )

    matrix_cells = int(grid.size)
    matrix_occupied = sum(pair.adjacency_matrix.degree(v) for v in vertices)

    return RepresentationStats(
        vertex_count=adj_list.vertex_count,
        edge_count=adj_list.edge_count,
        list_slots=list_slots,
        list_bytes=list_bytes,
        matrix_cells=matrix_cells,
        matrix_occupied=matrix_occupied,
        matrix_bytes=int(grid.nbytes),
        density=matrix_occupied / matrix_cells if matrix_cells else 0.0,
    )


def to_networkx(graph: AdjacencyListGraph | AdjacencyMatrixGraph) -> Any:
    """Export either representation to a networkx graph with ``weight`` attributes.

    Adjacency lists with parallel edges become MultiGraph / MultiDiGraph so no
    edge is lost; matrices always map to Graph / DiGraph.

    Raises:
        ImportError: If networkx is not installed.
    """
    if not _HAS_NETWORKX:
        raise ImportError(
            "networkx export requires optional dependencies. "
            "Install with: pip install 'adjacency-graphs[visualization]'"
        )

    edges = graph.edges()
    multi = isinstance(graph, AdjacencyListGraph) and len(
        {(e.u, e.v) if graph.directed else frozenset((e.u, e.v)) for e in edges}
    ) < len(edges)

    if graph.directed:
        G = nx.MultiDiGraph() if multi else nx.DiGraph()
    else:
        G = nx.MultiGraph() if multi else nx.Graph()

    G.add_nodes_from(range(graph.vertex_count))
    for edge in edges:
        G.add_edge(edge.u, edge.v, weight=edge.weight)
    return G
