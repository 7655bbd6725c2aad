"""
dp_core.py — score matrix construction with full backpointers

This module fills the (n+1, m+1) DP grid for global (Needleman-Wunsch)
and local (Smith-Waterman) alignment with a linear gap penalty.  Every
cell keeps *all* predecessors that attain its score, tested in the
fixed order diag, up, left, so that traceback can enumerate every
optimal alignment.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from .scoring import ScoringScheme

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Cells and the score matrix
# ---------------------------------------------------------------------------

@dataclass
class Predecessor:
    """
    A backpointer edge from a cell to the earlier cell (row, col).

    is_optimal is set by traceback once the edge is known to lie on at
    least one optimal path.
    """
    row: int
    col: int
    is_optimal: bool = False

    def move_from(self, i: int, j: int) -> str:
        """Name of the move from (row, col) into (i, j): "diag", "up" or "left"."""
        di, dj = i - self.row, j - self.col
        if (di, dj) == (1, 1):
            return "diag"
        if (di, dj) == (1, 0):
            return "up"
        if (di, dj) == (0, 1):
            return "left"
        raise ValueError(f"({self.row}, {self.col}) is not a predecessor of ({i}, {j})")


@dataclass
class Cell:
    """
    One DP cell.

    predecessors is None for base cases: the origin, and in local mode
    every cell whose score is zero.
    """
    score: int
    predecessors: Optional[List[Predecessor]] = None


@dataclass
class ScoreMatrix:
    """
    DP grid of cells for aligning seq1 (rows) against seq2 (columns).

    Cells are addressed as matrix[i, j] with 0 ≤ i ≤ len(seq1) and
    0 ≤ j ≤ len(seq2).  Predecessors refer to cells by index only.
    """
    seq1: str
    seq2: str
    mode: "AlignmentMode"
    cells: List[List[Cell]]

    def __getitem__(self, ij: Tuple[int, int]) -> Cell:
        i, j = ij
        return self.cells[i][j]

    @property
    def shape(self) -> Tuple[int, int]:
        return len(self.seq1) + 1, len(self.seq2) + 1

    @property
    def scores(self) -> NDArray:
        """Cell scores as an (n+1, m+1) array."""
        return np.array([[cell.score for cell in row] for row in self.cells])

    def edges(self) -> Iterator[Tuple[int, int, Predecessor]]:
        """Yield (i, j, predecessor) for every recorded backpointer."""
        for i, row in enumerate(self.cells):
            for j, cell in enumerate(row):
                for pred in cell.predecessors or ():
                    yield i, j, pred

    def optimal_edges(self) -> List[Tuple[Tuple[int, int], Tuple[int, int]]]:
        """Edges marked optimal, as ((row, col) of predecessor, (i, j))."""
        return [((p.row, p.col), (i, j)) for i, j, p in self.edges() if p.is_optimal]


# ---------------------------------------------------------------------------
# Alignment modes
# ---------------------------------------------------------------------------

class AlignmentMode(Enum):
    """
    Global and local alignment share the recurrence and differ only in
    boundary conditions, the zero floor, and where traceback stops.
    """
    GLOBAL = "global"
    LOCAL = "local"

    @classmethod
    def from_name(cls, name) -> "AlignmentMode":
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).lower())
        except ValueError:
            raise ValueError(f"Unknown alignment mode: {name!r} (expected 'global' or 'local')") from None

    @property
    def floor(self) -> Optional[int]:
        """Lower bound on cell scores, or None if unbounded."""
        return 0 if self is AlignmentMode.LOCAL else None

    def boundary_cell(self, i: int, j: int, gap: int) -> Cell:
        """Cell for row 0 or column 0."""
        if self is AlignmentMode.LOCAL or (i == 0 and j == 0):
            return Cell(score=0)
        if j == 0:
            return Cell(score=i * gap, predecessors=[Predecessor(i - 1, 0)])
        return Cell(score=j * gap, predecessors=[Predecessor(0, j - 1)])

    def is_base(self, matrix: ScoreMatrix, i: int, j: int) -> bool:
        """True where traceback stops."""
        if self is AlignmentMode.GLOBAL:
            return i == 0 and j == 0
        return matrix[i, j].score == 0


# ---------------------------------------------------------------------------
# Initialization and per-cell update
# ---------------------------------------------------------------------------

def init_matrix(
    seq1: str,
    seq2: str,
    scoring: ScoringScheme,
    mode: AlignmentMode,
) -> ScoreMatrix:
    """
    Allocate the DP grid with boundary conditions for `mode`.

    Global: row 0 and column 0 hold multiples of the gap penalty, each
    pointing back toward the origin.  Local: boundary cells are zero
    base cases.  Inner cells are placeholders until cell_update runs.
    """
    n, m = len(seq1), len(seq2)
    cells = [
        [
            mode.boundary_cell(i, j, scoring.gap) if i == 0 or j == 0 else Cell(score=0)
            for j in range(m + 1)
        ]
        for i in range(n + 1)
    ]
    return ScoreMatrix(seq1=seq1, seq2=seq2, mode=mode, cells=cells)


def cell_update(matrix: ScoreMatrix, scoring: ScoringScheme, i: int, j: int) -> int:
    """
    Fill inner cell (i, j) and return its score.

    Every candidate equal to the best of diag/up/left becomes a
    predecessor, in that order.  In local mode the score is floored at
    zero; the floor itself never adds an edge, and a zero cell keeps no
    predecessors.
    """
    diag = matrix[i - 1, j - 1].score + scoring.pair_score(matrix.seq1, matrix.seq2, i, j)
    up   = matrix[i - 1, j].score + scoring.gap  # seq1 symbol vs gap
    left = matrix[i, j - 1].score + scoring.gap  # gap vs seq2 symbol

    best = max(diag, up, left)
    floor = matrix.mode.floor
    cell_score = best if floor is None else max(floor, best)

    predecessors = None
    if floor is None or cell_score > floor:
        predecessors = []
        if diag == best:
            predecessors.append(Predecessor(i - 1, j - 1))
        if up == best:
            predecessors.append(Predecessor(i - 1, j))
        if left == best:
            predecessors.append(Predecessor(i, j - 1))

    matrix.cells[i][j] = Cell(score=cell_score, predecessors=predecessors)
    return cell_score


# ---------------------------------------------------------------------------
# Top-level fill
# ---------------------------------------------------------------------------

def fill_matrix(
    seq1: str,
    seq2: str,
    scoring: ScoringScheme,
    mode: AlignmentMode,
) -> Tuple[ScoreMatrix, List[Tuple[int, int]]]:
    """
    Fill the DP grid and select the traceback start cells.

    Returns
    -------
    matrix : ScoreMatrix
        Filled grid with all tying predecessors recorded.
    terminals : list of (i, j)
        Global: [(n, m)].  Local: every inner cell attaining the maximum
        score, in row-major order.  The origin seeds the local set, so
        that an all-zero (or empty) matrix still yields the empty
        alignment.
    """
    n, m = len(seq1), len(seq2)
    matrix = init_matrix(seq1, seq2, scoring, mode)

    best_score = 0
    terminals: List[Tuple[int, int]] = [(n, m)] if mode is AlignmentMode.GLOBAL else [(0, 0)]

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            cell_score = cell_update(matrix, scoring, i, j)
            if mode is AlignmentMode.GLOBAL:
                continue
            if cell_score > best_score:
                best_score = cell_score
                terminals = [(i, j)]
            elif cell_score == best_score:
                terminals.append((i, j))

    logger.debug(
        "Filled %s matrix %dx%d, %d terminal cell(s)",
        mode.value, n + 1, m + 1, len(terminals),
    )
    return matrix, terminals
