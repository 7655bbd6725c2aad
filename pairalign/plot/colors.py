"""
Color constants for pairalign plotting.

This module defines all color schemes used across the plotting library.
"""

# =============================================================================
# SYMBOL COLORS
# =============================================================================

# Nucleotide colors for axis labels; other symbols are drawn in black
NT_COLOR = {
    "A": "#74AB86",  # soft green
    "C": "#6E93C0",  # soft blue
    "G": "#C19A5A",  # soft warm ochre
    "T": "#C26F6F",  # soft red
    "U": "#C26F6F",
    "": "#000000",
}


# =============================================================================
# EDGE COLORS
# =============================================================================

# Backpointer edges by move type
EDGE_COLORS = dict(
    match="#16946C",     # vivid teal green
    mismatch="#D45500",  # vivid orange-brown
    gap="#396CB4",       # vivid indigo-blue
)

# Edges recorded in the matrix but not on any optimal path
INACTIVE_EDGE_COLOR = "#B0B0B0"

# Optimal-path overlay on heatmaps
OPTIMAL_EDGE_COLOR = "#00C22A"
TERMINAL_CELL_COLOR = "#FFCC00"


# =============================================================================
# HEATMAP COLORMAPS
# =============================================================================
HEATMAP_COLORMAPS = {
    'default': 'Reds',
    'diverging': 'RdBu_r',
}
