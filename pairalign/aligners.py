"""
aligners.py — User-facing alignment entry points

Each function builds a ScoringScheme, fills the score matrix for the
requested mode, enumerates all optimal alignments by traceback, and
returns an AlignmentResult holding both the alignments and the
annotated matrix.

The engine is total: any strings and numeric parameters are accepted,
unknown substitution matrices fall back to match/mismatch scoring, and
empty sequences give degenerate matrices.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Tuple, Union

from . import default
from .dp_core import AlignmentMode, ScoreMatrix, fill_matrix
from .matrices import SubstitutionMatrix
from .scoring import ScoringScheme
from .traceback import Alignment, traceback_with_ends

logger = logging.getLogger(__name__)


@dataclass
class AlignmentResult:
    """
    Result of a single alignment run.

    Attributes
    ----------
    alignments : list of Alignment
        Distinct optimal alignments, in first-discovery order.

    matrix : ScoreMatrix
        Filled score matrix; predecessor edges on optimal paths have
        is_optimal set.

    score : int
        Optimal alignment score.

    terminals : list of (i, j)
        Cells traceback started from.

    mode : AlignmentMode
        GLOBAL or LOCAL.

    ends : list of (i, j)
        Parallel to alignments: the terminal cell each alignment was
        traced from.
    """
    alignments: List[Alignment]
    matrix: ScoreMatrix
    score: int
    terminals: List[Tuple[int, int]]
    mode: AlignmentMode
    ends: List[Tuple[int, int]] = field(default_factory=list)

    def end_of(self, alignment: Alignment) -> Tuple[int, int]:
        """
        Terminal cell `alignment` ends at.

        Raises
        ------
        ValueError
            If `alignment` is not one of this result's alignments.
        """
        try:
            return self.ends[self.alignments.index(alignment)]
        except (ValueError, IndexError):
            raise ValueError(f"{alignment!r} is not an alignment of this result") from None

    def to_strings(self) -> List[str]:
        """Each alignment as its two rows joined by a newline."""
        return [str(aln) for aln in self.alignments]


# ---------------------------------------------------------------------------
# Core driver
# ---------------------------------------------------------------------------

def run_alignment(
    seq1: str,
    seq2: str,
    scoring: ScoringScheme,
    mode: AlignmentMode,
) -> AlignmentResult:
    """
    Fill the matrix for `mode`, trace back from its terminal cells and
    collect the result.
    """
    matrix, terminals = fill_matrix(seq1, seq2, scoring, mode)
    alignments, ends = traceback_with_ends(matrix, terminals)
    i, j = terminals[0]
    result = AlignmentResult(
        alignments=alignments,
        matrix=matrix,
        score=matrix[i, j].score,
        terminals=terminals,
        mode=mode,
        ends=ends,
    )
    logger.debug(
        "%s alignment of %d x %d symbols: score %s, %d alignment(s)",
        mode.value, len(seq1), len(seq2), result.score, len(alignments),
    )
    return result


# ---------------------------------------------------------------------------
# Global (Needleman-Wunsch)
# ---------------------------------------------------------------------------

def align_global(
    seq1: str,
    seq2: str,
    match_score: int = default.MATCH_SCORE,
    mismatch_score: int = default.MISMATCH_SCORE,
    gap_penalty: int = default.GAP_PENALTY,
    substitution_matrix: Union[str, SubstitutionMatrix] = default.SUBSTITUTION_MATRIX,
) -> AlignmentResult:
    """
    Global alignment of seq1 (rows) against seq2 (columns).

    Every returned alignment spans both sequences end to end; traceback
    runs from (n, m) to (0, 0).
    """
    scoring = ScoringScheme(match_score, mismatch_score, gap_penalty, substitution_matrix)
    return run_alignment(seq1, seq2, scoring, AlignmentMode.GLOBAL)


# ---------------------------------------------------------------------------
# Local (Smith-Waterman)
# ---------------------------------------------------------------------------

def align_local(
    seq1: str,
    seq2: str,
    match_score: int = default.MATCH_SCORE,
    mismatch_score: int = default.MISMATCH_SCORE,
    gap_penalty: int = default.GAP_PENALTY,
    substitution_matrix: Union[str, SubstitutionMatrix] = default.SUBSTITUTION_MATRIX,
) -> AlignmentResult:
    """
    Local alignment: best-scoring subregions of seq1 and seq2.

    Traceback starts from every cell holding the maximum score and stops
    at the first zero-score cell.
    """
    scoring = ScoringScheme(match_score, mismatch_score, gap_penalty, substitution_matrix)
    return run_alignment(seq1, seq2, scoring, AlignmentMode.LOCAL)


def align(
    seq1: str,
    seq2: str,
    mode: Union[str, AlignmentMode] = AlignmentMode.GLOBAL,
    **params,
) -> AlignmentResult:
    """
    Dispatch to align_global or align_local by mode name.

    Raises
    ------
    ValueError
        If `mode` is neither "global" nor "local".
    """
    if AlignmentMode.from_name(mode) is AlignmentMode.GLOBAL:
        return align_global(seq1, seq2, **params)
    return align_local(seq1, seq2, **params)
