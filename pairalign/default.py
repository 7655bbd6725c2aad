"""
default.py — Default parameters for pairalign

Provides the simple +1/-1/-1 match/mismatch/gap scheme and the example
sequences that are used throughout examples, the CLI and tests.
"""

# Gap marker used in aligned strings
GAP = "-"

# Match/mismatch/gap scoring
MATCH_SCORE = 1
MISMATCH_SCORE = -1
GAP_PENALTY = -1

## No substitution matrix: arithmetic match/mismatch scoring
SUBSTITUTION_MATRIX = "none"

# Example input
SEQ1 = "GAATTC"
SEQ2 = "GATTA"

def align_params(*, substitution_matrix: str = SUBSTITUTION_MATRIX) -> dict:
    """
    Bundle default scoring parameters into a dict for easy unpacking.

    Parameters:
        substitution_matrix (str): Name of a substitution matrix, or "none".

    Usage:
        result = align_global(X, Y, **align_params(substitution_matrix="BLOSUM62"))"""
    return {
        "match_score": MATCH_SCORE,
        "mismatch_score": MISMATCH_SCORE,
        "gap_penalty": GAP_PENALTY,
        "substitution_matrix": substitution_matrix,
    }
