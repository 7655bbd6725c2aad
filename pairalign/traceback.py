"""
traceback.py — enumerate every optimal alignment from a filled ScoreMatrix

Traceback walks the predecessor edges depth-first from each terminal
cell back to a base case, building aligned strings right to left.
Every edge whose subtree reaches a base case is marked optimal, which
the display layer uses to highlight the optimal paths.

The number of optimal paths can grow exponentially with the number of
tied cells.  Paths are enumerated exhaustively, without memoization, so
this is meant for short sequences.
"""

from __future__ import annotations

import logging
from typing import Dict, List, NamedTuple, Sequence, Tuple

from . import default
from .dp_core import ScoreMatrix

logger = logging.getLogger(__name__)


class Alignment(NamedTuple):
    """
    One optimal alignment: seq1 and seq2 with gaps inserted.

    Both strings have the same length.  str(alignment) stacks the two
    rows on separate lines.
    """
    seq1: str
    seq2: str

    def __str__(self) -> str:
        return f"{self.seq1}\n{self.seq2}"


def traceback_with_ends(
    matrix: ScoreMatrix,
    terminals: Sequence[Tuple[int, int]],
    gap: str = default.GAP,
) -> Tuple[List[Alignment], List[Tuple[int, int]]]:
    """
    Enumerate all optimal alignments reachable from `terminals`.

    Terminals are traced in the given order; predecessors are followed
    in the order they were recorded (diag, up, left).  Side effect:
    sets is_optimal on every edge that lies on a completed path.

    Parameters
    ----------
    matrix : ScoreMatrix
        Filled matrix from dp_core.fill_matrix.
    terminals : sequence of (i, j)
        Cells to start traceback from.
    gap : str
        Gap marker inserted into the aligned strings.

    Returns
    -------
    alignments : list of Alignment
        Distinct alignments in order of first discovery.
    ends : list of (i, j)
        For each alignment, the terminal it was first traced from.
    """
    seq1, seq2, mode = matrix.seq1, matrix.seq2, matrix.mode
    found: List[Alignment] = []
    found_ends: List[Tuple[int, int]] = []

    def _trace(i: int, j: int, aln1: str, aln2: str) -> bool:
        if mode.is_base(matrix, i, j):
            found.append(Alignment(aln1, aln2))
            return True

        found_path = False
        for pred in matrix[i, j].predecessors or ():
            move = pred.move_from(i, j)
            if move == "diag":
                ok = _trace(i - 1, j - 1, seq1[i - 1] + aln1, seq2[j - 1] + aln2)
            elif move == "up":
                ok = _trace(i - 1, j, seq1[i - 1] + aln1, gap + aln2)
            else:
                ok = _trace(i, j - 1, gap + aln1, seq2[j - 1] + aln2)

            if ok:
                pred.is_optimal = True
                found_path = True
        return found_path

    for i, j in terminals:
        _trace(i, j, "", "")
        found_ends.extend([(i, j)] * (len(found) - len(found_ends)))

    first_end: Dict[Alignment, Tuple[int, int]] = {}
    for aln, aln_end in zip(found, found_ends):
        first_end.setdefault(aln, aln_end)
    logger.debug("Traceback found %d path(s), %d distinct alignment(s)", len(found), len(first_end))
    return list(first_end), list(first_end.values())


def traceback_all(
    matrix: ScoreMatrix,
    terminals: Sequence[Tuple[int, int]],
    gap: str = default.GAP,
) -> List[Alignment]:
    """Distinct optimal alignments reachable from `terminals`; see traceback_with_ends."""
    return traceback_with_ends(matrix, terminals, gap)[0]


def alignment_path(
    alignment: Alignment,
    end: Tuple[int, int],
    gap: str = default.GAP,
) -> List[Tuple[int, int]]:
    """
    Matrix cells visited by `alignment` when it ends at cell `end`.

    Returns
    -------
    list of (i, j)
        Path from the start cell to `end`, inclusive.
    """
    i, j = end
    path = [(i, j)]
    for a, b in zip(reversed(alignment.seq1), reversed(alignment.seq2)):
        if a != gap:
            i -= 1
        if b != gap:
            j -= 1
        path.append((i, j))
    path.reverse()
    return path
