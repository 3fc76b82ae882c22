"""Graph builder: one edge stream in, two independent representations out."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TextIO

from .adjacency_list import AdjacencyListGraph, build_adjacency_list
from .adjacency_matrix import AdjacencyMatrixGraph, build_adjacency_matrix
from .data import EdgeStream, ParserOptions
from .parser import parse_edge_stream_string, read_edge_stream

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GraphPair:
    """Both representations of one parsed graph.

    The two graphs share no mutable state with each other or with the parser.

    Attributes:
        adjacency_list: The adjacency-list representation.
        adjacency_matrix: The adjacency-matrix representation.
    """

    adjacency_list: AdjacencyListGraph
    adjacency_matrix: AdjacencyMatrixGraph

    @property
    def vertex_count(self) -> int:
        return self.adjacency_list.vertex_count

    @property
    def directed(self) -> bool:
        return self.adjacency_list.directed


def build_graphs(stream: EdgeStream) -> GraphPair:
    """Build the adjacency-list and adjacency-matrix graphs for an edge stream.

    Each builder receives the same immutable stream and writes only to its own
    output structure.

    Args:
        stream: Parsed and validated edge stream.

    Returns:
        GraphPair holding the two freshly built graphs.

    Examples:
        >>> from adjacency_graphs.parser import parse_edge_stream_string
        >>> pair = build_graphs(parse_edge_stream_string("2 2\\n0 1\\n0 1 7\\n"))
        >>> pair.adjacency_list.degree(0), pair.adjacency_matrix.weight(0, 1)
        (2, 7)
    """
    adjacency_list = build_adjacency_list(stream)
    adjacency_matrix = build_adjacency_matrix(stream)

    if logger.isEnabledFor(logging.INFO):
        logger.info(
            "Built %s graph representations",
            "directed" if stream.directed else "undirected",
            extra={
                "vertices": stream.vertex_count,
                "edges": stream.edge_count,
                "matrix_edges": adjacency_matrix.edge_count,
            },
        )

    return GraphPair(adjacency_list=adjacency_list, adjacency_matrix=adjacency_matrix)


def build_graphs_from_string(content: str, options: ParserOptions | None = None) -> GraphPair:
    """Parse a graph description string and build both representations.

    Raises:
        GraphParseError: Any parser error, before either graph is built.
    """
    return build_graphs(parse_edge_stream_string(content, options))


def build_graphs_from_stream(stream: TextIO, options: ParserOptions | None = None) -> GraphPair:
    """Parse an open text stream and build both representations.

    Raises:
        GraphParseError: Any parser error, before either graph is built.
    """
    return build_graphs(read_edge_stream(stream, options))
