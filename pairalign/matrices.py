"""
matrices.py — named substitution matrices

The set of matrices that can be selected is closed:

  - SubstitutionMatrix : enum of the supported names plus NONE.
  - load_table         : returns the Biopython score table for a name.
  - table_score        : looks up an ordered symbol pair in a table.

BLOSUM50, BLOSUM62 and PAM250 are read from the data bundled with
Biopython. PAM40 and PAM120 are not part of that distribution and are
shipped in NCBI format under pairalign/data/.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

from Bio.Align import substitution_matrices

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"


class SubstitutionMatrix(Enum):
    """Substitution matrices selectable for scoring."""
    NONE = "none"
    BLOSUM50 = "BLOSUM50"
    BLOSUM62 = "BLOSUM62"
    PAM40 = "PAM40"
    PAM120 = "PAM120"
    PAM250 = "PAM250"

    @classmethod
    def from_name(cls, name: Union[str, "SubstitutionMatrix", None]) -> "SubstitutionMatrix":
        """
        Resolve a matrix name. Unrecognized names resolve to NONE, so
        scoring falls back to match/mismatch.
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            logger.debug("Unknown substitution matrix %r, using match/mismatch scoring", name)
            return cls.NONE


@lru_cache(maxsize=None)
def load_table(matrix: SubstitutionMatrix) -> Optional[substitution_matrices.Array]:
    """
    Load the score table for `matrix`, or None for SubstitutionMatrix.NONE.

    Returns
    -------
    Bio.Align.substitution_matrices.Array
        Two-dimensional table indexed by pairs of uppercase symbols.
    """
    if matrix is SubstitutionMatrix.NONE:
        return None
    bundled = DATA_DIR / matrix.value
    if bundled.exists():
        logger.debug("Reading %s from %s", matrix.value, bundled)
        return substitution_matrices.read(str(bundled))
    return substitution_matrices.load(matrix.value)


def table_score(table: substitution_matrices.Array, a: str, b: str) -> Optional[int]:
    """Score of the ordered pair (a, b), or None if either symbol is not in the table."""
    alphabet = table.alphabet
    if len(a) != 1 or len(b) != 1 or a not in alphabet or b not in alphabet:
        return None
    return int(table[a, b])
