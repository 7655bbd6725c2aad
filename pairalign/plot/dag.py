"""
Alignment DAG visualization.

The filled score matrix is drawn as a grid DAG: one node per cell with
its score, one arrow per recorded backpointer (from predecessor to
cell, in the direction of the DP fill).  Backpointers on an optimal
path are drawn bold and colored by move type; the others are faded.

Usage:
    result = align_global("GAATTC", "GATTA")
    fig, ax = draw_alignment_dag(result)
    AlignmentDagPlotter(result).draw_alignment_path(ax, result.alignments[0])
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

import matplotlib.pyplot as plt
from matplotlib.patches import Circle

from .colors import NT_COLOR, EDGE_COLORS, INACTIVE_EDGE_COLOR, TERMINAL_CELL_COLOR
from .utils import draw_shortened_arrow, edge_color
from ..traceback import Alignment, alignment_path


@dataclass
class AlignmentDagStyle:
    """Configuration for DAG drawing styles.

    Attributes
    ----------
    node_radius : float
        Radius of node circles.
    spacing : float
        Grid cell spacing.
    edge_shrink_factor : float
        Factor to shrink edges from node centers (prevents overlap with nodes).
    mutation_scale : float
        Arrow head size.
    edge_linewidth : float
        Line width for non-optimal backpointers.
    optimal_linewidth : float
        Line width for optimal backpointers.
    edge_alpha : float
        Alpha for non-optimal backpointers.
    optimal_alpha : float
        Alpha for optimal backpointers.
    inactive_color : str
        Color for non-optimal backpointers.
    edge_colors : dict
        Colors of optimal edges by kind: "match", "mismatch", "gap".
    node_fc, node_ec : str
        Node face and edge colors.
    terminal_fc, terminal_ec : str
        Colors for traceback start cells.
    nt_colors : dict
        Mapping of symbols to colors for axis labels.
    """
    node_radius: float = 0.28
    spacing: float = 1.0
    edge_shrink_factor: float = 1.2
    mutation_scale: float = 12.0
    edge_linewidth: float = 1.0
    optimal_linewidth: float = 2.5
    edge_alpha: float = 0.35
    optimal_alpha: float = 0.9

    inactive_color: str = INACTIVE_EDGE_COLOR
    edge_colors: Dict[str, str] = field(default_factory=lambda: dict(EDGE_COLORS))

    node_fc: str = "white"
    node_ec: str = "black"
    terminal_fc: str = "#ffffd0"
    terminal_ec: str = TERMINAL_CELL_COLOR

    nt_colors: Dict[str, str] = field(default_factory=lambda: NT_COLOR.copy())


class AlignmentDagPlotter:
    """Draw the backpointer DAG of an AlignmentResult.

    Parameters
    ----------
    result : AlignmentResult
        Result whose matrix (with is_optimal flags) is drawn.
    style : AlignmentDagStyle, optional
        Style configuration. If None, uses defaults.
    """

    def __init__(self, result, style: Optional[AlignmentDagStyle] = None):
        self.result = result
        self.matrix = result.matrix
        self.style = style or AlignmentDagStyle()

        n, m = self.matrix.shape
        self._coords: Dict[Tuple[int, int], Tuple[float, float]] = {
            (i, j): (j * self.style.spacing, i * self.style.spacing)
            for i in range(n)
            for j in range(m)
        }

    @property
    def coords(self) -> Dict[Tuple[int, int], Tuple[float, float]]:
        """Return the coordinate mapping (i, j) -> (x, y)."""
        return self._coords

    def _step_score(self, frm: Tuple[int, int], to: Tuple[int, int]) -> float:
        return self.matrix[to].score - self.matrix[frm].score

    def draw_edges(self, ax: plt.Axes, optimal_only: bool = False) -> None:
        """Draw every recorded backpointer, optimal ones highlighted."""
        s = self.style
        for i, j, pred in self.matrix.edges():
            if optimal_only and not pred.is_optimal:
                continue
            frm, to = (pred.row, pred.col), (i, j)
            if pred.is_optimal:
                color = edge_color(pred.move_from(i, j), self._step_score(frm, to), s.edge_colors)
                lw, alpha, z = s.optimal_linewidth, s.optimal_alpha, 3
            else:
                color, lw, alpha, z = s.inactive_color, s.edge_linewidth, s.edge_alpha, 2
            draw_shortened_arrow(
                ax, self._coords[frm], self._coords[to],
                color=color,
                node_radius=s.node_radius,
                edge_shrink_factor=s.edge_shrink_factor,
                mutation_scale=s.mutation_scale,
                linewidth=lw,
                alpha=alpha,
                zorder=z,
            )

    def draw_nodes(self, ax: plt.Axes) -> None:
        """Draw one circle per cell with its score; terminal cells highlighted."""
        s = self.style
        terminals = set(self.result.terminals)
        for (i, j), (x, y) in self._coords.items():
            is_terminal = (i, j) in terminals
            ax.add_patch(Circle(
                (x, y), radius=s.node_radius,
                facecolor=s.terminal_fc if is_terminal else s.node_fc,
                edgecolor=s.terminal_ec if is_terminal else s.node_ec,
                linewidth=2.0 if is_terminal else 1.0,
                zorder=4,
            ))
            ax.text(x, y, f"{self.matrix[i, j].score:g}", ha="center", va="center",
                    fontsize=9, fontweight="bold", zorder=5)

    def draw_labels(self, ax: plt.Axes) -> None:
        """Label seq1 down the rows and seq2 across the columns."""
        s = self.style
        half = 0.5 * s.spacing
        for i, base in enumerate(self.matrix.seq1, start=1):
            x0, y0 = self._coords[(i, 0)]
            ax.text(x0 - half - s.node_radius, y0 - half, base,
                    ha="right", va="center",
                    color=s.nt_colors.get(base, "black"),
                    fontsize=10, fontweight="bold")
        for j, base in enumerate(self.matrix.seq2, start=1):
            x0, y0 = self._coords[(0, j)]
            ax.text(x0 - half, y0 - half - s.node_radius, base,
                    ha="center", va="bottom",
                    color=s.nt_colors.get(base, "black"),
                    fontsize=10, fontweight="bold")

    def draw(self, ax: plt.Axes, optimal_only: bool = False) -> Dict[Tuple[int, int], Tuple[float, float]]:
        """Draw edges, nodes and labels, and configure the axes.

        Returns
        -------
        coords : dict
            Mapping (i, j) -> (x, y) plot coordinates.
        """
        self.draw_edges(ax, optimal_only=optimal_only)
        self.draw_nodes(ax)
        self.draw_labels(ax)

        n, m = self.matrix.shape
        spacing = self.style.spacing
        ax.set_aspect("equal", adjustable="box")
        ax.set_xticks([])
        ax.set_yticks([])
        ax.set_xlim(-spacing, m * spacing)
        ax.set_ylim(n * spacing, -spacing)
        return self._coords

    def draw_alignment_path(
        self,
        ax: plt.Axes,
        alignment: Alignment,
        end: Optional[Tuple[int, int]] = None,
        color: str = "black",
        linewidth: float = 4.0,
        alpha: float = 0.35,
    ) -> None:
        """Overlay the path of one alignment ending at `end`.

        `end` defaults to the terminal cell the alignment was traced
        from; ValueError if `alignment` is not in the result.
        """
        if end is None:
            end = self.result.end_of(alignment)
        path = alignment_path(alignment, end)
        xs = [self._coords[c][0] for c in path]
        ys = [self._coords[c][1] for c in path]
        ax.plot(xs, ys, color=color, linewidth=linewidth, alpha=alpha,
                solid_capstyle="round", zorder=1)


def draw_alignment_dag(
    result,
    ax: Optional[plt.Axes] = None,
    optimal_only: bool = False,
    title: Optional[str] = None,
    figsize: Tuple[int, int] = (8, 6),
    style: Optional[AlignmentDagStyle] = None,
    show: bool = False,
) -> Tuple[plt.Figure, plt.Axes]:
    """Convenience function to draw the DAG of an alignment result.

    Parameters
    ----------
    result : AlignmentResult
        Result to draw.
    ax : matplotlib Axes, optional
        Axes to draw on; a new figure is created if None.
    optimal_only : bool
        If True, draw only backpointers on optimal paths.
    title : str, optional
        Axes title.
    figsize : tuple
        Figure size when a new figure is created.
    style : AlignmentDagStyle, optional
        Style configuration.
    show : bool
        If True, call plt.show().

    Returns
    -------
    fig, ax : matplotlib Figure and Axes

    Examples
    --------
    >>> result = align_local("GAATTC", "GATTA")
    >>> fig, ax = draw_alignment_dag(result, optimal_only=True)
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    AlignmentDagPlotter(result, style).draw(ax, optimal_only=optimal_only)

    if title:
        ax.set_title(title, fontsize=12)
    else:
        ax.set_title(f"Alignment DAG for X='{result.matrix.seq1}', Y='{result.matrix.seq2}'")

    if show:
        plt.show()

    return fig, ax
