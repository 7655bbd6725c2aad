"""
scoring.py — pairwise substitution scores

score() resolves the score for aligning seq1[i-1] against seq2[j-1]
either from a flat match/mismatch rule or from a named substitution
matrix, falling back to the flat rule whenever the matrix has no entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from . import default
from .matrices import SubstitutionMatrix, load_table, table_score


def score(
    seq1: str,
    seq2: str,
    i: int,
    j: int,
    match_score: int,
    mismatch_score: int,
    matrix_name: Union[str, SubstitutionMatrix] = default.SUBSTITUTION_MATRIX,
) -> int:
    """
    Return σ(seq1_i, seq2_j) for 1-based positions i, j.

    With no substitution matrix the symbols are compared exactly (case
    sensitive). With a matrix both symbols are uppercased and looked up;
    an unknown matrix or a pair missing from it uses the match/mismatch
    rule instead.
    """
    a = seq1[i - 1]
    b = seq2[j - 1]
    table = load_table(SubstitutionMatrix.from_name(matrix_name))
    if table is not None:
        value = table_score(table, a.upper(), b.upper())
        if value is not None:
            return value
    return match_score if a == b else mismatch_score


@dataclass
class ScoringScheme:
    """
    Scoring parameters for one alignment run.

    Attributes
    ----------
    match, mismatch : int
        Diagonal scores for identical / differing symbols when no
        substitution matrix applies.
    gap : int
        Linear gap penalty (typically negative).
    matrix : SubstitutionMatrix
        Substitution matrix; plain names are resolved on construction.
    """
    match: int = default.MATCH_SCORE
    mismatch: int = default.MISMATCH_SCORE
    gap: int = default.GAP_PENALTY
    matrix: Union[str, SubstitutionMatrix] = SubstitutionMatrix.NONE

    def __post_init__(self):
        self.matrix = SubstitutionMatrix.from_name(self.matrix)

    def pair_score(self, seq1: str, seq2: str, i: int, j: int) -> int:
        """Score for the diagonal move into DP cell (i, j)."""
        return score(seq1, seq2, i, j, self.match, self.mismatch, self.matrix)
