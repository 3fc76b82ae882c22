"""Core data structures shared by the parser and both graph representations."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .exceptions import ParserConfigurationError

# Edge weights keep the numeric type they were written with in the input.
Weight = int | float


def fits_float64(weight: Weight) -> bool:
    """Return True if the float64 matrix grid can hold ``weight`` exactly."""
    try:
        return math.isfinite(weight) and float(weight) == weight
    except OverflowError:
        return False


@dataclass(frozen=True)
class Edge:
    """One parsed edge between two vertex indices.

    Attributes:
        u: First endpoint (the tail for directed graphs), 0-based.
        v: Second endpoint (the head for directed graphs), 0-based.
        weight: Edge weight. Defaults to 1 when the input omits it.

    Examples:
        >>> Edge(0, 1)
        Edge(u=0, v=1, weight=1)

        >>> Edge(2, 2, weight=0.5)  # Self-loops are allowed
        Edge(u=2, v=2, weight=0.5)
    """

    u: int
    v: int
    weight: Weight = 1

    @property
    def is_self_loop(self) -> bool:
        return self.u == self.v


@dataclass(frozen=True)
class EdgeStream:
    """Validated output of the parser: a vertex count plus an ordered edge tuple.

    The edge tuple is immutable, so the adjacency-list and adjacency-matrix
    builders can both read it without either one being able to affect the other.
    Every endpoint is already known to lie in ``[0, vertex_count)``.

    Attributes:
        vertex_count: Number of vertices declared in the header.
        edges: Edges in input order.
        directed: Whether edges are ordered pairs.
        declared_edge_count: Edge count from the header, or None if the header
                             only carried the vertex count.
    """

    vertex_count: int
    edges: tuple[Edge, ...]
    directed: bool = False
    declared_edge_count: int | None = None

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def __len__(self) -> int:
        return len(self.edges)


@dataclass
class ParserOptions:
    """Configuration options for the edge stream parser.

    Attributes:
        directed: Treat each edge line ``u v`` as the ordered pair u -> v (default: False).
                  Undirected graphs store both directions in the adjacency list and
                  mirror every matrix cell.
        index_base: Index of the first vertex in the input file (default: 0).
                   - 0: vertices are written as 0..V-1
                   - 1: vertices are written as 1..V and shifted down while parsing
        comment_prefix: Lines whose first non-blank character(s) match this prefix are
                       skipped (default: "#"). None disables comment handling.
        require_edge_count: Reject headers that only carry the vertex count (default: False).
        require_weight: Reject edge lines that omit the weight (default: False).
        default_weight: Weight given to edges written without one (default: 1).

    Examples:
        >>> # Defaults: undirected, 0-based, '#' comments, optional counts and weights
        >>> options = ParserOptions()

        >>> # Strict 1-based "V E" header with "u v w" edge lines
        >>> options = ParserOptions(
        ...     index_base=1,
        ...     require_edge_count=True,
        ...     require_weight=True,
        ... )
    """

    directed: bool = False
    index_base: int = 0
    comment_prefix: str | None = "#"
    require_edge_count: bool = False
    require_weight: bool = False
    default_weight: Weight = 1

    def __post_init__(self) -> None:
        if self.index_base not in (0, 1):
            raise ParserConfigurationError(
                f"index_base must be 0 or 1, got {self.index_base!r}. "
                f"It states whether input vertices are numbered from 0 or from 1."
            )
        if self.comment_prefix is not None and not self.comment_prefix.strip():
            raise ParserConfigurationError(
                "comment_prefix must be a non-blank string or None."
            )
        if isinstance(self.default_weight, bool) or not isinstance(
            self.default_weight, (int, float)
        ):
            raise ParserConfigurationError(
                f"default_weight must be a number, got {self.default_weight!r}."
            )
        if not fits_float64(self.default_weight):
            raise ParserConfigurationError(
                "default_weight must be finite and exactly representable as a float64, "
                f"got {self.default_weight}."
            )
