"""Side-by-side plots of a graph and its adjacency matrix.

This module draws the node-link picture of a GraphPair next to a heat map of
its adjacency matrix, using matplotlib and networkx.

Example:
    >>> from adjacency_graphs import build_graphs_from_string, visualize_graphs
    >>>
    >>> pair = build_graphs_from_string("4 4\\n0 1\\n1 2\\n2 3\\n3 0 2\\n")
    >>> fig = visualize_graphs(pair)
    >>> fig.savefig("graph.png")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .utils import to_networkx

if TYPE_CHECKING:
    from .builder import GraphPair

logger = logging.getLogger(__name__)

# Check for optional dependencies
try:
    import matplotlib.pyplot as plt
    import networkx as nx  # type: ignore[import-untyped,unused-ignore]
    import numpy as np
    from matplotlib.figure import Figure

    _HAS_VISUALIZATION_DEPS = True
except ImportError:
    _HAS_VISUALIZATION_DEPS = False
    Figure = Any  # type: ignore[misc, assignment]


def _check_dependencies() -> None:
    """Check if visualization dependencies are installed."""
    if not _HAS_VISUALIZATION_DEPS:
        msg = (
            "Visualization requires optional dependencies. "
            "Install with: pip install 'adjacency-graphs[visualization]'"
        )
        raise ImportError(msg)


def visualize_graphs(
    pair: GraphPair,
    layout: str = "spring",
    figsize: tuple[float, float] = (14, 6),
    node_size: int = 600,
    font_size: int = 10,
    show_weights: bool = True,
    title: str | None = None,
) -> Figure:
    """Plot the node-link drawing and the adjacency matrix of a graph side by side.

    The left panel draws the graph, with parallel edges collapsed into one
    line. The right panel shows the matrix grid, with empty cells left blank
    and occupied cells colored by weight.

    Args:
        pair: Graphs to plot
        layout: Graph layout algorithm ("spring", "circular", "kamada_kawai", "shell")
        figsize: Figure size (width, height) in inches
        node_size: Size of node markers
        font_size: Font size for labels
        show_weights: Whether to label edges and matrix cells with their weights
        title: Custom title for the figure (default: "Adjacency list vs. adjacency matrix")

    Returns:
        matplotlib Figure object

    Raises:
        ImportError: If matplotlib or networkx are not installed
    """
    _check_dependencies()

    G = to_networkx(pair.adjacency_matrix)
    grid = pair.adjacency_matrix.to_numpy()

    fig, (graph_ax, matrix_ax) = plt.subplots(1, 2, figsize=figsize)

    # Compute layout
    layout_funcs = {
        "spring": nx.spring_layout,
        "circular": nx.circular_layout,
        "kamada_kawai": nx.kamada_kawai_layout,
        "shell": nx.shell_layout,
    }
    if layout not in layout_funcs:
        logger.warning(f"Unknown layout '{layout}', using 'spring'")
        layout = "spring"

    try:
        pos = layout_funcs[layout](G)
    except Exception as e:
        logger.warning(f"Layout '{layout}' failed: {e}, using 'spring'")
        pos = nx.spring_layout(G)

    nx.draw_networkx_nodes(G, pos, node_color="lightblue", node_size=node_size, ax=graph_ax)
    nx.draw_networkx_labels(G, pos, font_size=font_size, ax=graph_ax)
    nx.draw_networkx_edges(
        G,
        pos,
        edge_color="gray",
        arrows=pair.directed,
        arrowsize=15,
        ax=graph_ax,
    )
    if show_weights:
        edge_labels = {(u, v): f"{w:g}" for u, v, w in G.edges(data="weight")}
        nx.draw_networkx_edge_labels(
            G, pos, edge_labels=edge_labels, font_size=font_size - 2, ax=graph_ax
        )
    graph_ax.set_title(
        f"Graph ({pair.adjacency_list.edge_count} edges)", fontsize=12
    )
    graph_ax.axis("off")

    # NaN cells are masked and render blank.
    occupied = ~np.isnan(grid)
    if occupied.any():
        image = matrix_ax.imshow(
            np.ma.masked_invalid(grid), cmap="viridis", interpolation="nearest"
        )
        fig.colorbar(image, ax=matrix_ax, label="weight")
    if pair.vertex_count:
        matrix_ax.set_xlim(-0.5, pair.vertex_count - 0.5)
        matrix_ax.set_ylim(pair.vertex_count - 0.5, -0.5)
    ticks = range(pair.vertex_count)
    matrix_ax.set_xticks(list(ticks))
    matrix_ax.set_yticks(list(ticks))
    matrix_ax.set_xlabel("v")
    matrix_ax.set_ylabel("u")
    if show_weights:
        for u, v in zip(*np.nonzero(occupied)):
            matrix_ax.text(
                v, u, f"{grid[u, v]:g}", ha="center", va="center",
                color="white", fontsize=font_size - 2,
            )
    matrix_ax.set_title(
        f"Adjacency matrix ({pair.vertex_count}x{pair.vertex_count} cells)", fontsize=12
    )

    fig.suptitle(title or "Adjacency list vs. adjacency matrix", fontsize=14, fontweight="bold")
    plt.tight_layout()
    return fig
