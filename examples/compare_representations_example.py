"""Build both representations of a sample graph and compare them.

Key insights:
- Adjacency list: O(V + E) memory, edge lookup scans one neighbor list
- Adjacency matrix: O(V^2) memory, edge lookup is a single cell read
- The gap widens as the graph gets larger and sparser
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from adjacency_graphs import (  # noqa: E402
    build_graphs_from_string,
    check_consistency,
    load_graphs,
    representation_stats,
)


def format_bytes(bytes_val: float) -> str:
    """Format bytes as human-readable string."""
    for unit in ["B", "KB", "MB", "GB"]:
        if abs(bytes_val) < 1024.0:
            return f"{bytes_val:.2f} {unit}"
        bytes_val /= 1024.0
    return f"{bytes_val:.2f} TB"


def sparse_ring(vertex_count: int) -> str:
    """Return the text of a cycle on vertex_count vertices."""
    lines = [f"{vertex_count} {vertex_count}"]
    lines.extend(f"{v} {(v + 1) % vertex_count}" for v in range(vertex_count))
    return "\n".join(lines) + "\n"


def main() -> None:
    parser = argparse.ArgumentParser(description="Compare adjacency list and matrix sizes")
    parser.add_argument("--ring-size", type=int, default=1000, help="Vertices in the sparse ring")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v for INFO, -vv for DEBUG)",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose >= 2 else logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)-8s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    base_dir = Path(__file__).resolve().parent
    graph_path = base_dir / "sample_graph.txt"

    pair = load_graphs(graph_path)
    report = check_consistency(pair)
    print(f"Loaded {graph_path.name}: {pair.vertex_count} vertices, consistent={report.is_consistent}")

    for v in range(pair.vertex_count):
        print(f"  vertex {v}: list {pair.adjacency_list.neighbors(v)}")

    ring = build_graphs_from_string(sparse_ring(args.ring_size))
    stats = representation_stats(ring)
    print(f"\nRing with {stats.vertex_count} vertices and {stats.edge_count} edges:")
    print(f"  adjacency list:   {stats.list_slots:>10} slots  {format_bytes(stats.list_bytes)}")
    print(f"  adjacency matrix: {stats.matrix_cells:>10} cells  {format_bytes(stats.matrix_bytes)}")
    print(f"  matrix density:   {stats.density:.3%}")

    # Time a batch of has_edge lookups in each representation.
    lookups = range(0, args.ring_size, max(1, args.ring_size // 500))
    start = time.perf_counter()
    for v in lookups:
        ring.adjacency_list.has_edge(v, (v + 1) % args.ring_size)
    list_time = time.perf_counter() - start
    start = time.perf_counter()
    for v in lookups:
        ring.adjacency_matrix.has_edge(v, (v + 1) % args.ring_size)
    matrix_time = time.perf_counter() - start
    print(f"  {len(lookups)} has_edge lookups: list {list_time * 1e3:.2f} ms, matrix {matrix_time * 1e3:.2f} ms")


if __name__ == "__main__":
    main()
