"""
formatting.py — plain-text rendering of alignment results

  - format_alignments : alignments as stacked row pairs, blank-line separated.
  - format_matrix     : the DP table with scores and backpointer arrows.

In format_matrix each cell shows its score followed by one arrow per
predecessor edge.  Edges on an optimal path use the double arrows
(⇖ ⇑ ⇐); other recorded edges use the single arrows (↖ ↑ ←).
"""

from __future__ import annotations

from typing import Iterable, List

from .dp_core import Cell, ScoreMatrix
from .traceback import Alignment

ARROWS = {"diag": "↖", "up": "↑", "left": "←"}
OPTIMAL_ARROWS = {"diag": "⇖", "up": "⇑", "left": "⇐"}


def format_alignments(alignments: Iterable[Alignment]) -> str:
    return "\n\n".join(str(aln) for aln in alignments)


def _cell_text(cell: Cell, i: int, j: int) -> str:
    arrows = []
    for pred in cell.predecessors or ():
        glyphs = OPTIMAL_ARROWS if pred.is_optimal else ARROWS
        arrows.append(glyphs[pred.move_from(i, j)])
    return f"{cell.score}{''.join(arrows)}"


def format_matrix(matrix: ScoreMatrix) -> str:
    """
    Render the score matrix as an aligned text table.

    seq2 labels the columns and seq1 labels the rows; row 0 and
    column 0 are the boundary cells and carry no symbol.
    """
    n, m = len(matrix.seq1), len(matrix.seq2)
    body: List[List[str]] = [
        [_cell_text(matrix[i, j], i, j) for j in range(m + 1)]
        for i in range(n + 1)
    ]
    header = ["", ""] + list(matrix.seq2)
    rows = [header] + [
        [matrix.seq1[i - 1] if i > 0 else ""] + body[i]
        for i in range(n + 1)
    ]
    width = max(len(text) for row in rows for text in row)
    return "\n".join(
        " ".join(text.rjust(width) for text in row).rstrip()
        for row in rows
    )
