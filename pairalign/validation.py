"""
validation.py — independent baselines and checks for pairalign

This module provides independent score-only implementations of
Needleman-Wunsch (nw_score) and Smith-Waterman (sw_score), a brute-force
enumerator of global alignments for tiny inputs, and small helpers for
checking the alignments returned by the aligners.

The goals are:

  1. Verify that the optimal score in the filled matrix matches a plain
     NW/SW recurrence on (seq1, seq2).

  2. Verify that every enumerated alignment is well formed and rescores
     to the optimal score, and that the set of global alignments equals
     the set of optimal alignments found by exhaustive enumeration.

nw_score/sw_score reimplement the recurrences directly and do not use
dp_core, so that bugs in dp_core cannot mask each other during testing.
"""

from functools import lru_cache
from typing import Dict, List, Sequence, Set, Tuple

import numpy as np

from . import default
from .dp_core import AlignmentMode, ScoreMatrix
from .scoring import ScoringScheme
from .traceback import Alignment


# ---------------------------------------------------------------------------
# Score-only baselines
# ---------------------------------------------------------------------------

def _score_table(seq1: str, seq2: str, scoring: ScoringScheme) -> np.ndarray:
    """σ(seq1_i, seq2_j) for all 1-based i, j, as an (n, m) array."""
    n, m = len(seq1), len(seq2)
    S = np.zeros((n, m))
    for i in range(1, n + 1):
        for j in range(1, m + 1):
            S[i - 1, j - 1] = scoring.pair_score(seq1, seq2, i, j)
    return S


def nw_score(seq1: str, seq2: str, scoring: ScoringScheme) -> float:
    """
    Global Needleman-Wunsch score with a linear gap penalty.
    """
    n, m = len(seq1), len(seq2)
    g = scoring.gap
    S = _score_table(seq1, seq2, scoring)

    F = np.zeros((n + 1, m + 1))
    F[:, 0] = np.arange(n + 1) * g
    F[0, :] = np.arange(m + 1) * g
    for i in range(1, n + 1):
        for j in range(1, m + 1):
            F[i, j] = max(F[i - 1, j - 1] + S[i - 1, j - 1], F[i - 1, j] + g, F[i, j - 1] + g)
    return float(F[n, m])


def sw_score(seq1: str, seq2: str, scoring: ScoringScheme) -> float:
    """
    Local Smith-Waterman score with a linear gap penalty.
    """
    n, m = len(seq1), len(seq2)
    g = scoring.gap
    S = _score_table(seq1, seq2, scoring)

    H = np.zeros((n + 1, m + 1))
    for i in range(1, n + 1):
        for j in range(1, m + 1):
            H[i, j] = max(0.0, H[i - 1, j - 1] + S[i - 1, j - 1], H[i - 1, j] + g, H[i, j - 1] + g)
    return float(H.max())


# ---------------------------------------------------------------------------
# Alignment checks
# ---------------------------------------------------------------------------

def alignment_score(
    alignment: Alignment,
    scoring: ScoringScheme,
    gap: str = default.GAP,
) -> int:
    """
    Rescore an alignment column by column from its strings.
    """
    total = 0
    for a, b in zip(alignment.seq1, alignment.seq2):
        if a == gap or b == gap:
            total += scoring.gap
        else:
            total += scoring.pair_score(a, b, 1, 1)
    return total


def check_alignment_validity(
    result,
    scoring: ScoringScheme,
    gap: str = default.GAP,
) -> Tuple[bool, str]:
    """
    Check that every alignment in `result` (an AlignmentResult) is well
    formed:

        1. both rows have the same length,
        2. no column pairs a gap with a gap,
        3. the rescored value equals result.score,
        4. removing gaps gives seq1/seq2 themselves (global) or a
           contiguous substring of them (local).

    Returns
    -------
    (ok, message) : (bool, str)
    """
    seq1, seq2 = result.matrix.seq1, result.matrix.seq2
    is_global = result.mode is AlignmentMode.GLOBAL

    for aln in result.alignments:
        if len(aln.seq1) != len(aln.seq2):
            return False, f"Row lengths differ: {aln.seq1!r} vs {aln.seq2!r}"
        for k, (a, b) in enumerate(zip(aln.seq1, aln.seq2)):
            if a == gap and b == gap:
                return False, f"Double gap at column {k} in {aln.seq1!r}/{aln.seq2!r}"
        rescored = alignment_score(aln, scoring, gap=gap)
        if rescored != result.score:
            return False, f"Rescored {rescored} != reported {result.score} for {aln.seq1!r}/{aln.seq2!r}"
        ungapped1 = aln.seq1.replace(gap, "")
        ungapped2 = aln.seq2.replace(gap, "")
        if is_global and (ungapped1 != seq1 or ungapped2 != seq2):
            return False, f"Global alignment does not span the inputs: {aln.seq1!r}/{aln.seq2!r}"
        if not is_global and (ungapped1 not in seq1 or ungapped2 not in seq2):
            return False, f"Local alignment is not a substring of the inputs: {aln.seq1!r}/{aln.seq2!r}"
    return True, "ok"


def count_optimal_paths(
    matrix: ScoreMatrix,
    terminals: Sequence[Tuple[int, int]],
) -> int:
    """
    Number of predecessor paths from `terminals` to a base case.

    Counted with memoization over the predecessor DAG, so it is cheap
    even when the paths themselves are too many to enumerate.
    """
    mode = matrix.mode

    @lru_cache(maxsize=None)
    def _count(i: int, j: int) -> int:
        if mode.is_base(matrix, i, j):
            return 1
        return sum(_count(p.row, p.col) for p in matrix[i, j].predecessors or ())

    return sum(_count(i, j) for i, j in terminals)


# ---------------------------------------------------------------------------
# Brute force
# ---------------------------------------------------------------------------

def naive_global_alignments(
    seq1: str,
    seq2: str,
    scoring: ScoringScheme,
    gap: str = default.GAP,
) -> Tuple[int, Set[Alignment]]:
    """
    Enumerate every global alignment of seq1 and seq2 and keep the best.

    The number of alignments grows like the Delannoy numbers, so this is
    only usable for sequences of a handful of symbols.

    Returns
    -------
    best : int
        Optimal global score.
    optimal : set of Alignment
        All alignments attaining it.
    """
    by_score: Dict[int, List[Alignment]] = {}

    def _extend(i: int, j: int, aln1: str, aln2: str, total: int) -> None:
        if i == len(seq1) and j == len(seq2):
            by_score.setdefault(total, []).append(Alignment(aln1, aln2))
            return
        if i < len(seq1) and j < len(seq2):
            _extend(i + 1, j + 1, aln1 + seq1[i], aln2 + seq2[j],
                    total + scoring.pair_score(seq1, seq2, i + 1, j + 1))
        if i < len(seq1):
            _extend(i + 1, j, aln1 + seq1[i], aln2 + gap, total + scoring.gap)
        if j < len(seq2):
            _extend(i, j + 1, aln1 + gap, aln2 + seq2[j], total + scoring.gap)

    _extend(0, 0, "", "", 0)
    best = max(by_score)
    return best, set(by_score[best])
