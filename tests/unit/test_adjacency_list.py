"""Tests for the adjacency-list representation."""

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from adjacency_graphs.adjacency_list import AdjacencyListGraph, build_adjacency_list  # noqa: E402
from adjacency_graphs.data import Edge, EdgeStream, ParserOptions  # noqa: E402
from adjacency_graphs.exceptions import VertexOutOfRangeError  # noqa: E402
from adjacency_graphs.parser import parse_edge_stream_string  # noqa: E402


def _build(content: str, directed: bool = False) -> AdjacencyListGraph:
    return build_adjacency_list(
        parse_edge_stream_string(content, ParserOptions(directed=directed))
    )


def test_path_graph_degrees():
    """Test the three-vertex path 0 - 1 - 2."""
    graph = _build("3 2\n0 1\n1 2\n")

    assert graph.vertex_count == 3
    assert [graph.degree(v) for v in range(3)] == [1, 2, 1]
    assert graph.neighbors(1) == ((0, 1), (2, 1))


def test_neighbors_keep_input_order():
    """Test that neighbors are listed in the order edges appeared."""
    graph = _build("4 3\n0 1\n0 3 2\n0 2\n")

    assert graph.neighbors(0) == ((1, 1), (3, 2), (2, 1))
    assert graph.neighbors(3) == ((0, 2),)


def test_directed_edges_stored_once():
    """Test that directed edges only appear at their tail."""
    graph = _build("3 2\n0 1\n2 0\n", directed=True)

    assert graph.directed is True
    assert graph.neighbors(0) == ((1, 1),)
    assert graph.neighbors(1) == ()
    assert graph.neighbors(2) == ((0, 1),)


def test_undirected_self_loop_occupies_one_slot():
    """Test that a self-loop is not appended twice to the same vertex."""
    graph = _build("2 1\n1 1 4\n")

    assert graph.neighbors(1) == ((1, 4),)
    assert graph.degree(1) == 1
    assert graph.degree(0) == 0


def test_parallel_edges_kept():
    """Test that repeated edges are all stored."""
    graph = _build("2 2\n0 1 3\n0 1 9\n")

    assert graph.neighbors(0) == ((1, 3), (1, 9))
    assert graph.degree(0) == 2
    assert graph.degree(1) == 2
    assert graph.edge_count == 2


def test_has_edge_and_weight():
    """Test the linear-scan edge queries."""
    graph = _build("3 2\n0 1 3\n1 0 9\n")

    assert graph.has_edge(0, 1)
    assert graph.has_edge(1, 0)
    assert not graph.has_edge(0, 2)
    # Last matching entry wins, like the matrix.
    assert graph.weight(0, 1) == 9
    assert graph.weight(0, 2) is None


def test_edges_in_input_order():
    """Test that edges() reproduces the parsed edges."""
    graph = _build("3 3\n2 1\n0 1 5\n1 1\n")

    assert graph.edges() == (Edge(2, 1, 1), Edge(0, 1, 5), Edge(1, 1, 1))
    assert graph.edge_count == 3


def test_len_and_iteration():
    """Test container protocol over vertex indices."""
    graph = _build("3 0\n")

    assert len(graph) == 3
    assert list(graph) == [0, 1, 2]
    assert all(graph.neighbors(v) == () for v in graph)


@pytest.mark.parametrize("vertex", [-1, 3, 100])
def test_neighbors_out_of_range(vertex):
    """Test VertexOutOfRangeError for invalid query vertices."""
    graph = _build("3 1\n0 1\n")

    with pytest.raises(VertexOutOfRangeError) as exc_info:
        graph.neighbors(vertex)

    assert exc_info.value.vertex == vertex
    assert exc_info.value.vertex_count == 3
    assert exc_info.value.line_number is None


def test_degree_and_has_edge_out_of_range():
    """Test that every query validates its vertex arguments."""
    graph = _build("2 1\n0 1\n")

    with pytest.raises(VertexOutOfRangeError):
        graph.degree(2)
    with pytest.raises(VertexOutOfRangeError):
        graph.has_edge(0, 2)
    with pytest.raises(VertexOutOfRangeError):
        graph.weight(5, 0)


def test_empty_graph():
    """Test a graph with no vertices."""
    graph = _build("0\n")

    assert graph.vertex_count == 0
    assert graph.edges() == ()
    with pytest.raises(VertexOutOfRangeError):
        graph.neighbors(0)


def test_neighbor_sequences_are_tuples():
    """Test that built neighbor sequences are immutable."""
    graph = _build("3 2\n0 1\n1 2\n")

    assert all(isinstance(graph.neighbors(v), tuple) for v in graph)


def test_build_from_hand_made_stream():
    """Test building directly from an EdgeStream without the parser."""
    stream = EdgeStream(vertex_count=2, edges=(Edge(0, 1, 2.5),), directed=False)
    graph = build_adjacency_list(stream)

    assert graph.neighbors(0) == ((1, 2.5),)
    assert graph.neighbors(1) == ((0, 2.5),)


def test_repr_mentions_counts():
    graph = _build("3 2\n0 1\n1 2\n")

    assert "vertex_count=3" in repr(graph)
    assert "edge_count=2" in repr(graph)
