"""
DP matrix visualization for pairalign.

This module draws the score matrix as an annotated heatmap with every
recorded backpointer overlaid as an arrow from a cell toward its
predecessor.  Edges on an optimal path are drawn bold; traceback start
cells are outlined.

Functions:
    - plot_score_matrix: heatmap of one AlignmentResult
"""

from typing import Dict, Optional, Tuple

import numpy as np
import matplotlib.pyplot as plt
import seaborn as sns
from matplotlib.patches import Rectangle

from .colors import (
    NT_COLOR,
    HEATMAP_COLORMAPS,
    INACTIVE_EDGE_COLOR,
    OPTIMAL_EDGE_COLOR,
    TERMINAL_CELL_COLOR,
)
from .utils import draw_shortened_arrow

grid_color_map = HEATMAP_COLORMAPS['diverging']


def plot_score_matrix(
    result,  # AlignmentResult
    ax: Optional[plt.Axes] = None,
    nt_color_map: Optional[Dict[str, str]] = None,
    figsize: Tuple[int, int] = (8, 6),
    colormap: str = grid_color_map,
    annotate: bool = True,
    show_edges: bool = True,
    optimal_only: bool = False,
    edge_color: str = INACTIVE_EDGE_COLOR,
    optimal_color: str = OPTIMAL_EDGE_COLOR,
    terminal_color: str = TERMINAL_CELL_COLOR,
    title: Optional[str] = None,
) -> plt.Figure:
    """
    Plot the score matrix of an alignment result as a heatmap with its
    backpointer edges.

    Parameters
    ----------
    result : AlignmentResult
        Result from align_global, align_local or align.
    ax : matplotlib Axes, optional
        Axes to draw on.  A new figure is created if None.
    nt_color_map : dict, optional
        Mapping of symbols to tick label colors.
    figsize : tuple
        Figure size when a new figure is created.
    colormap : str
        Seaborn/matplotlib colormap name for scores.
    annotate : bool
        Write each cell's score in the cell.
    show_edges : bool
        Draw the backpointer arrows.
    optimal_only : bool
        Draw only edges marked optimal.
    edge_color, optimal_color : str
        Colors of non-optimal and optimal edges.
    terminal_color : str
        Outline color of the traceback start cells.
    title : str, optional
        Axes title; defaults to the mode and optimal score.

    Returns
    -------
    fig : matplotlib.figure.Figure
    """
    matrix = result.matrix
    if nt_color_map is None:
        nt_color_map = NT_COLOR

    scores = matrix.scores.astype(float)
    bound = max(float(np.abs(scores).max()), 1.0)

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    cmap = sns.color_palette(colormap, as_cmap=True)
    xticklabels = [""] + list(matrix.seq2)
    yticklabels = [""] + list(matrix.seq1)

    sns.heatmap(
        scores,
        ax=ax,
        cmap=cmap,
        center=0,
        vmin=-bound,
        vmax=bound,
        square=True,
        cbar=False,
        annot=annotate,
        fmt=".0f",
        xticklabels=xticklabels,
        yticklabels=yticklabels,
    )
    ax.set_xlabel("seq2 (columns)")
    ax.set_ylabel("seq1 (rows)")
    ax.tick_params(top=True, bottom=False, labeltop=True, labelbottom=False)
    ax.xaxis.set_label_position("top")

    for tick, lab in zip(ax.get_xticklabels(), xticklabels):
        tick.set_rotation(0)
        tick.set_color(nt_color_map.get(lab, "black"))
        tick.set_fontweight("bold")
    for tick, lab in zip(ax.get_yticklabels(), yticklabels):
        tick.set_rotation(0)
        tick.set_va("center")
        tick.set_color(nt_color_map.get(lab, "black"))
        tick.set_fontweight("bold")

    # Arrows point from a cell toward its predecessor, as in traceback
    if show_edges:
        for i, j, pred in matrix.edges():
            if optimal_only and not pred.is_optimal:
                continue
            draw_shortened_arrow(
                ax,
                (j + 0.5, i + 0.5),
                (pred.col + 0.5, pred.row + 0.5),
                color=optimal_color if pred.is_optimal else edge_color,
                node_radius=0.3,
                edge_shrink_factor=1.0,
                linewidth=2.5 if pred.is_optimal else 1.0,
                alpha=0.95 if pred.is_optimal else 0.6,
                zorder=3 if pred.is_optimal else 2,
            )

    for i, j in result.terminals:
        ax.add_patch(Rectangle(
            (j, i), 1, 1,
            fill=False, edgecolor=terminal_color, linewidth=3, zorder=4,
        ))

    if title is None:
        title = f"{result.mode.value.capitalize()} alignment, score {result.score}"
    ax.set_title(title)

    fig.tight_layout()
    return fig
