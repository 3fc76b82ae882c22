"""File I/O helpers for plain-text graph descriptions."""

from __future__ import annotations

from pathlib import Path

from .adjacency_list import AdjacencyListGraph
from .adjacency_matrix import AdjacencyMatrixGraph
from .builder import GraphPair, build_graphs
from .data import EdgeStream, ParserOptions
from .exceptions import GraphParseError
from .parser import read_edge_stream


def load_edge_stream(path: str | Path, options: ParserOptions | None = None) -> EdgeStream:
    """Load and parse a graph description from a UTF-8 text file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        GraphParseError: If the file is not valid UTF-8, or any parse error.
    """
    path = Path(path)
    try:
        fh = path.open("r", encoding="utf-8")
    except FileNotFoundError as e:
        raise FileNotFoundError(f"Graph file not found: {path}") from e
    with fh:
        try:
            return read_edge_stream(fh, options)
        except UnicodeDecodeError as e:
            raise GraphParseError(f"Not valid UTF-8 text: {e.reason}") from e


def load_graphs(path: str | Path, options: ParserOptions | None = None) -> GraphPair:
    """Load a graph description file and build both representations."""
    # Parse fully before building so a bad file never yields a half-built pair.
    return build_graphs(load_edge_stream(path, options))


def format_edges(
    graph: AdjacencyListGraph | AdjacencyMatrixGraph, index_base: int = 0
) -> list[str]:
    """Render every edge of a graph as a ``"u v weight"`` line.

    Args:
        graph: Either representation.
        index_base: Added to each vertex index, so 1 reproduces 1-based input files.

    Returns:
        One line per edge in the graph's own enumeration order.
    """
    return [
        f"{edge.u + index_base} {edge.v + index_base} {edge.weight}" for edge in graph.edges()
    ]


def save_graph(
    path: str | Path,
    graph: AdjacencyListGraph | AdjacencyMatrixGraph,
    index_base: int = 0,
) -> None:
    """Write a graph back out in the parser's input format.

    The header carries both counts, so the file can be read back with
    ``ParserOptions(require_edge_count=True, index_base=index_base)``.
    """
    lines = format_edges(graph, index_base)
    with Path(path).open("w", encoding="utf-8") as fh:
        fh.write(f"{graph.vertex_count} {len(lines)}\n")
        for line in lines:
            fh.write(line + "\n")
