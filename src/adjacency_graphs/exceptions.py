"""Custom exceptions for the adjacency_graphs library."""

from __future__ import annotations


class GraphError(Exception):
    """Base exception for all adjacency_graphs errors.

    All custom exceptions in the adjacency_graphs package inherit from this class,
    allowing callers to catch every parse, validation, and query error with a
    single except clause.

    Example:
        try:
            graphs = build_graphs_from_string(text)
        except GraphError as e:
            print(f"Graph error: {e}")
    """


class GraphParseError(GraphError):
    """Raised when the textual graph description cannot be turned into an edge stream.

    Every parse error carries the 1-based line number of the offending input line
    (None when the problem concerns the input as a whole, e.g. a count mismatch)
    and a human-readable reason. ``str(error)`` renders both as ``"Line N: reason"``.

    Attributes:
        line_number: Physical input line that triggered the error, or None.
        reason: Description of what was wrong with the input.
    """

    def __init__(self, reason: str, line_number: int | None = None):
        """Initialize with a reason and optional line number."""
        self.reason = reason
        self.line_number = line_number
        if line_number is None:
            super().__init__(reason)
        else:
            super().__init__(f"Line {line_number}: {reason}")


class MalformedHeaderError(GraphParseError):
    """Raised when the header line cannot be parsed as the vertex (and edge) count.

    Example:
        MalformedHeaderError("Expected '<vertices> [<edges>]', got: 'three 2'", line_number=1)
    """


class MalformedEdgeError(GraphParseError):
    """Raised when an edge line has the wrong number of fields or a bad field.

    This includes:
    - Fewer than two or more than three whitespace-separated fields
    - Endpoints that are not integers
    - Weights that are not finite numbers

    Example:
        MalformedEdgeError("Endpoint 'x' is not an integer", line_number=4)
    """


class VertexOutOfRangeError(GraphParseError):
    """Raised when a vertex index falls outside ``[0, vertex_count)``.

    The parser raises it for edge endpoints (with a line number); the graph
    representations raise it for query arguments (without one).

    Attributes:
        vertex: The offending vertex index, as seen by the caller.
        vertex_count: Number of vertices in the graph.
    """

    def __init__(
        self,
        reason: str,
        line_number: int | None = None,
        vertex: int | None = None,
        vertex_count: int | None = None,
    ):
        """Initialize with reason, optional line number and range details."""
        super().__init__(reason, line_number)
        self.vertex = vertex
        self.vertex_count = vertex_count


class EdgeCountMismatchError(GraphParseError):
    """Raised when the declared edge count disagrees with the edge lines present.

    Treated as a hard error: neither representation is built from an input whose
    header contradicts its body.

    Attributes:
        declared: Edge count from the header.
        actual: Number of edge lines found.
    """

    def __init__(
        self,
        reason: str,
        line_number: int | None = None,
        declared: int | None = None,
        actual: int | None = None,
    ):
        """Initialize with reason and the two disagreeing counts."""
        super().__init__(reason, line_number)
        self.declared = declared
        self.actual = actual


class ParserConfigurationError(GraphError):
    """Raised when parser options are invalid.

    This includes:
    - An index base other than 0 or 1
    - An empty or whitespace comment prefix
    - A non-finite default weight

    Example:
        ParserConfigurationError("index_base must be 0 or 1, got 2")
    """
