"""High-level entrypoints for the adjacency_graphs library."""

from .adjacency_list import AdjacencyListGraph, build_adjacency_list
from .adjacency_matrix import AdjacencyMatrixGraph, build_adjacency_matrix
from .builder import GraphPair, build_graphs, build_graphs_from_stream, build_graphs_from_string
from .data import Edge, EdgeStream, ParserOptions
from .exceptions import (
    EdgeCountMismatchError,
    GraphError,
    GraphParseError,
    MalformedEdgeError,
    MalformedHeaderError,
    ParserConfigurationError,
    VertexOutOfRangeError,
)
from .io import format_edges, load_edge_stream, load_graphs, save_graph
from .parser import parse_edge_stream, parse_edge_stream_string, read_edge_stream
from .utils import (
    ConsistencyReport,
    RepresentationStats,
    check_consistency,
    representation_stats,
    to_networkx,
)
from .visualization import visualize_graphs

__version__ = "0.1.0"

__all__ = [
    # Main API
    "build_graphs",
    "build_graphs_from_string",
    "build_graphs_from_stream",
    "load_graphs",
    "GraphPair",
    # Parsing
    "parse_edge_stream",
    "parse_edge_stream_string",
    "read_edge_stream",
    "load_edge_stream",
    "ParserOptions",
    "Edge",
    "EdgeStream",
    # Representations
    "AdjacencyListGraph",
    "AdjacencyMatrixGraph",
    "build_adjacency_list",
    "build_adjacency_matrix",
    # Output
    "format_edges",
    "save_graph",
    # Utilities
    "check_consistency",
    "representation_stats",
    "to_networkx",
    "ConsistencyReport",
    "RepresentationStats",
    # Visualization
    "visualize_graphs",
    # Exceptions
    "GraphError",
    "GraphParseError",
    "MalformedHeaderError",
    "MalformedEdgeError",
    "VertexOutOfRangeError",
    "EdgeCountMismatchError",
    "ParserConfigurationError",
    # Version
    "__version__",
]
