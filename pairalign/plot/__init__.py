"""
pairalign plotting package.

This package renders the annotated score matrix of an AlignmentResult.

Submodules:
    - plot.colors: Color constants for all visualization
    - plot.utils: Shared utility functions
    - plot.matrix: Score matrix heatmap with backpointer arrows
    - plot.dag: DAG visualization of cells and backpointers

Example imports:
    from pairalign.plot import plot_score_matrix  # top-level re-export
    from pairalign.plot.dag import AlignmentDagPlotter  # direct submodule
    from pairalign.plot.colors import NT_COLOR  # color constants
"""

from .colors import (
    NT_COLOR,
    EDGE_COLORS,
    INACTIVE_EDGE_COLOR,
    OPTIMAL_EDGE_COLOR,
    TERMINAL_CELL_COLOR,
    HEATMAP_COLORMAPS,
)

from .utils import (
    draw_shortened_arrow,
    edge_color,
)

from .matrix import plot_score_matrix

from .dag import (
    AlignmentDagStyle,
    AlignmentDagPlotter,
    draw_alignment_dag,
)


__all__ = [
    # Colors
    "NT_COLOR",
    "EDGE_COLORS",
    "INACTIVE_EDGE_COLOR",
    "OPTIMAL_EDGE_COLOR",
    "TERMINAL_CELL_COLOR",
    "HEATMAP_COLORMAPS",
    # Utils
    "draw_shortened_arrow",
    "edge_color",
    # Matrix
    "plot_score_matrix",
    # DAG
    "AlignmentDagStyle",
    "AlignmentDagPlotter",
    "draw_alignment_dag",
]
