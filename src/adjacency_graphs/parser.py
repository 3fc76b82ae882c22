"""Edge stream parser for the plain-text graph format.

Input Format:
    # <comment lines - ignored>
    <num_vertices> [<num_edges>]
    <u> <v> [<weight>]
    ...

Example:
    # Path on three vertices
    3 2
    0 1
    1 2 5

Notes:
    - Vertex indices are 0-based unless ParserOptions.index_base is 1; the
      resulting EdgeStream is always 0-based
    - Blank lines and comment lines may appear anywhere, including before the header
    - Omitted weights default to ParserOptions.default_weight (1)
    - A declared edge count must match the number of edge lines exactly
    - Self-loops and repeated edges are kept as written
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable
from typing import TextIO

from .data import Edge, EdgeStream, ParserOptions, Weight, fits_float64
from .exceptions import (
    EdgeCountMismatchError,
    MalformedEdgeError,
    MalformedHeaderError,
    VertexOutOfRangeError,
)

logger = logging.getLogger(__name__)

# ASCII digits only: int() and float() also take "1_0" and non-ASCII digits.
_INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")
_NUMBER_TOKEN = re.compile(
    r"[+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def parse_edge_stream_string(content: str, options: ParserOptions | None = None) -> EdgeStream:
    """Parse a graph description held in a string.

    Args:
        content: Text in the edge-list format described in this module.
        options: Parser configuration. If None, uses defaults.

    Returns:
        EdgeStream with the declared vertex count and the parsed edges.

    Raises:
        MalformedHeaderError: If the header is missing or not one/two counts.
        MalformedEdgeError: If an edge line has bad fields.
        VertexOutOfRangeError: If an endpoint lies outside the declared vertex range.
        EdgeCountMismatchError: If the declared edge count disagrees with the body.

    Example:
        >>> stream = parse_edge_stream_string("3 2\\n0 1\\n1 2\\n")
        >>> stream.vertex_count, len(stream.edges)
        (3, 2)
    """
    return parse_edge_stream(content.splitlines(), options)


def read_edge_stream(stream: TextIO, options: ParserOptions | None = None) -> EdgeStream:
    """Parse a graph description from an already-open text stream.

    The caller owns the stream: this function neither opens nor closes it.
    """
    return parse_edge_stream(stream, options)


def parse_edge_stream(
    lines: Iterable[str], options: ParserOptions | None = None
) -> EdgeStream:
    """Parse an iterable of text lines into a validated EdgeStream.

    Lines may keep their trailing newlines. Parsing stops at the first invalid
    line; no partial result is ever returned.
    """
    options = options or ParserOptions()

    vertex_count: int | None = None
    declared_edges: int | None = None
    edges: list[Edge] = []

    for line_num, raw_line in enumerate(lines, start=1):
        line = raw_line.strip()

        # Skip empty lines and comments
        if not line:
            continue
        if options.comment_prefix is not None and line.startswith(options.comment_prefix):
            continue

        tokens = line.split()

        if vertex_count is None:
            vertex_count, declared_edges = _parse_header(tokens, line, line_num, options)
            continue

        edges.append(_parse_edge(tokens, line, line_num, vertex_count, options))

    if vertex_count is None:
        raise MalformedHeaderError(
            "No header found. Input must start with a '<vertices> [<edges>]' line."
        )

    if declared_edges is not None and declared_edges != len(edges):
        raise EdgeCountMismatchError(
            f"Edge count mismatch: header declares {declared_edges} edges, "
            f"but {len(edges)} edge lines found.",
            declared=declared_edges,
            actual=len(edges),
        )

    logger.debug(
        "Parsed edge stream: %d vertices, %d edges (directed=%s)",
        vertex_count,
        len(edges),
        options.directed,
    )

    return EdgeStream(
        vertex_count=vertex_count,
        edges=tuple(edges),
        directed=options.directed,
        declared_edge_count=declared_edges,
    )


def _parse_integer(token: str) -> int | None:
    if not _INTEGER_TOKEN.fullmatch(token):
        return None
    try:
        return int(token)
    except ValueError:
        # Past the interpreter's int string conversion limit.
        return None


def _parse_header(
    tokens: list[str], line: str, line_num: int, options: ParserOptions
) -> tuple[int, int | None]:
    expected = "'<vertices> <edges>'" if options.require_edge_count else "'<vertices> [<edges>]'"
    allowed = (2,) if options.require_edge_count else (1, 2)
    if len(tokens) not in allowed:
        raise MalformedHeaderError(
            f"Invalid header format. Expected {expected}, got: {line}", line_num
        )

    counts = []
    for token in tokens:
        value = _parse_integer(token)
        if value is None:
            raise MalformedHeaderError(
                f"Invalid header format. Count '{token}' is not an integer.", line_num
            )
        if value < 0:
            raise MalformedHeaderError(f"Counts cannot be negative, got {value}", line_num)
        counts.append(value)

    vertex_count = counts[0]
    declared_edges = counts[1] if len(counts) == 2 else None
    return vertex_count, declared_edges


def _parse_edge(
    tokens: list[str], line: str, line_num: int, vertex_count: int, options: ParserOptions
) -> Edge:
    allowed = (3,) if options.require_weight else (2, 3)
    if len(tokens) not in allowed:
        expected = "'<u> <v> <weight>'" if options.require_weight else "'<u> <v> [<weight>]'"
        raise MalformedEdgeError(
            f"Invalid edge format. Expected {expected}, got: {line}", line_num
        )

    endpoints = []
    for token in tokens[:2]:
        written = _parse_integer(token)
        if written is None:
            raise MalformedEdgeError(f"Endpoint '{token}' is not an integer", line_num)

        vertex = written - options.index_base
        if not 0 <= vertex < vertex_count:
            low = options.index_base
            raise VertexOutOfRangeError(
                f"Vertex {written} outside the valid range "
                f"[{low}, {vertex_count + low}) for {vertex_count} vertices",
                line_num,
                vertex=written,
                vertex_count=vertex_count,
            )
        endpoints.append(vertex)

    weight = _parse_weight(tokens[2], line_num) if len(tokens) == 3 else options.default_weight
    return Edge(endpoints[0], endpoints[1], weight)


def _parse_weight(token: str, line_num: int) -> Weight:
    # Integer literals stay integers; anything else must be a finite float.
    # Both must survive the float64 matrix grid unchanged.
    if _INTEGER_TOKEN.fullmatch(token):
        weight = _parse_integer(token)
        if weight is None or not fits_float64(weight):
            raise MalformedEdgeError(
                f"Weight '{token}' cannot be stored exactly as a float64",
                line_num,
            )
        return weight
    if not _NUMBER_TOKEN.fullmatch(token):
        raise MalformedEdgeError(f"Weight '{token}' is not a number", line_num)
    value = float(token)
    if not math.isfinite(value):
        raise MalformedEdgeError(f"Weight '{token}' must be finite", line_num)
    return value
