"""
Shared utilities for pairalign plotting.

Functions:
    - draw_shortened_arrow: arrow between two points that stops short of the nodes
    - edge_color: color of a backpointer edge by move type and score
"""

from typing import Dict, Tuple

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import FancyArrowPatch

from .colors import EDGE_COLORS


# =============================================================================
# ARROW DRAWING HELPERS
# =============================================================================

def draw_shortened_arrow(
    ax: plt.Axes,
    p0: Tuple[float, float],
    p1: Tuple[float, float],
    color: str,
    node_radius: float,
    edge_shrink_factor: float = 1.2,
    mutation_scale: float = 10.0,
    linewidth: float = 1.0,
    alpha: float = 0.7,
    arrowstyle: str = "->",
    zorder: int = 2,
) -> FancyArrowPatch:
    """
    Add an arrow from p0 to p1 to `ax`, trimmed at both ends by
    node_radius * edge_shrink_factor so the head and tail stay clear of
    the cell markers.  Returns the FancyArrowPatch.
    """
    p0 = np.asarray(p0, dtype=float)
    p1 = np.asarray(p1, dtype=float)
    direction = p1 - p0
    length = np.hypot(*direction) or 1.0
    offset = direction * (node_radius * edge_shrink_factor / length)

    start = tuple(p0 + offset)
    end = tuple(p1 - offset)

    arrow = FancyArrowPatch(
        start, end,
        arrowstyle=arrowstyle,
        mutation_scale=mutation_scale,
        linewidth=linewidth,
        color=color,
        alpha=alpha,
        zorder=zorder,
    )
    ax.add_patch(arrow)
    return arrow


def edge_color(move: str, step_score: float, colors: Dict[str, str] = EDGE_COLORS) -> str:
    """Gap edges use the gap color; diagonal edges are match or mismatch by sign."""
    if move != "diag":
        return colors["gap"]
    return colors["match"] if step_score > 0 else colors["mismatch"]
