"""Command-line entry point: build both representations of a graph file and print them."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from .data import ParserOptions
from .exceptions import GraphError
from .io import format_edges, load_graphs
from .utils import representation_stats

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_GRAPH_ERROR = 1
EXIT_IO_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="adjacency-graphs",
        description="Build adjacency-list and adjacency-matrix graphs from an edge-list file",
    )
    parser.add_argument("path", help="Graph file: '<vertices> [<edges>]' header, then '<u> <v> [<weight>]' lines")
    parser.add_argument("--directed", action="store_true", help="Treat edges as ordered pairs")
    parser.add_argument(
        "--one-based",
        action="store_true",
        help="Vertices in the file are numbered from 1 (default: from 0)",
    )
    parser.add_argument(
        "--comment-prefix",
        default="#",
        help="Skip lines starting with this prefix (default: '#')",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Require the edge count in the header and a weight on every edge line",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print size figures for both representations",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v for INFO, -vv for DEBUG)",
    )
    return parser


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity >= 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(levelname)-8s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    index_base = 1 if args.one_based else 0
    try:
        options = ParserOptions(
            directed=args.directed,
            index_base=index_base,
            comment_prefix=args.comment_prefix,
            require_edge_count=args.strict,
            require_weight=args.strict,
        )
        logger.debug("Parser options: %s", options)
        pair = load_graphs(args.path, options)
    except GraphError as e:
        print(f"error: {args.path}: {e}", file=sys.stderr)
        return EXIT_GRAPH_ERROR
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_IO_ERROR

    print("Edges of the adjacency-matrix graph:")
    for line in format_edges(pair.adjacency_matrix, index_base):
        print(line)
    print("Edges of the adjacency-list graph:")
    for line in format_edges(pair.adjacency_list, index_base):
        print(line)

    if args.stats:
        stats = representation_stats(pair)
        print(f"\nVertices: {stats.vertex_count}  Edges: {stats.edge_count}")
        print(f"  {'Representation':<18}{'Entries':>10}{'Bytes':>12}")
        print(f"  {'adjacency list':<18}{stats.list_slots:>10}{stats.list_bytes:>12}")
        print(f"  {'adjacency matrix':<18}{stats.matrix_cells:>10}{stats.matrix_bytes:>12}")
        print(f"  Matrix density: {stats.density:.1%}")

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
