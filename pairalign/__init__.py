"""
pairalign: pairwise sequence alignment with full traceback enumeration.
"""

import logging

# =============================================================================
# CORE ALIGNMENT
# =============================================================================

from .aligners import (
    AlignmentResult,
    align,
    align_global,
    align_local,
    run_alignment,
)

from .dp_core import (
    AlignmentMode,
    Cell,
    Predecessor,
    ScoreMatrix,
    fill_matrix,
)

from .traceback import (
    Alignment,
    alignment_path,
    traceback_all,
    traceback_with_ends,
)


# =============================================================================
# SCORING
# =============================================================================

from .scoring import ScoringScheme, score
from .matrices import SubstitutionMatrix, load_table


# =============================================================================
# VALIDATION AND DISPLAY
# =============================================================================

from .validation import (
    nw_score,
    sw_score,
    alignment_score,
    check_alignment_validity,
    count_optimal_paths,
    naive_global_alignments,
)

from .formatting import format_alignments, format_matrix


# =============================================================================
# PLOTTING (requires both matplotlib and seaborn -- install with pip install pairalign[plot])
# =============================================================================
def _missing_plot_dep(func_name: str) -> ImportError:
    return ImportError(
        f"{func_name} requires plotting dependencies.\n"
        'Install with: pip install "pairalign[plot]"'
    )

try:
    from .plot import (
        AlignmentDagPlotter,
        AlignmentDagStyle,
        draw_alignment_dag,
        plot_score_matrix,
    )
    PLOT_AVAILABLE = True
except ImportError:
    # These will raise ImportError if accessed without matplotlib/seaborn
    class AlignmentDagPlotter:
        def __init__(*args, **kwargs):
            raise _missing_plot_dep("AlignmentDagPlotter")
    class AlignmentDagStyle:
        def __init__(*args, **kwargs):
            raise _missing_plot_dep("AlignmentDagStyle")
    def draw_alignment_dag(*args, **kwargs):
        raise _missing_plot_dep("draw_alignment_dag")
    def plot_score_matrix(*args, **kwargs):
        raise _missing_plot_dep("plot_score_matrix")
    PLOT_AVAILABLE = False


logging.getLogger(__name__).addHandler(logging.NullHandler())


__all__ = [
    # Core alignment
    "AlignmentResult",
    "align",
    "align_global",
    "align_local",
    "run_alignment",
    # DP core
    "AlignmentMode",
    "Cell",
    "Predecessor",
    "ScoreMatrix",
    "fill_matrix",
    # Traceback
    "Alignment",
    "alignment_path",
    "traceback_all",
    "traceback_with_ends",
    # Scoring
    "ScoringScheme",
    "score",
    "SubstitutionMatrix",
    "load_table",
    # Validation
    "nw_score",
    "sw_score",
    "alignment_score",
    "check_alignment_validity",
    "count_optimal_paths",
    "naive_global_alignments",
    # Display
    "format_alignments",
    "format_matrix",
    # Plotting
    "PLOT_AVAILABLE",
    "AlignmentDagPlotter",
    "AlignmentDagStyle",
    "draw_alignment_dag",
    "plot_score_matrix",
]
