"""
conftest.py — Shared pytest fixtures for the pairalign test suite

Provides common scoring parameters and random number generators used
across all test modules.
"""

import pytest
import numpy as np

from pairalign.scoring import ScoringScheme


# ---------------------------------------------------------------------------
# Default scoring fixtures (match default.py)
# ---------------------------------------------------------------------------

@pytest.fixture
def default_bases() -> np.ndarray:
    """Default DNA alphabet."""
    return np.array(["A", "C", "G", "T"])


@pytest.fixture
def scoring_params() -> dict:
    """Keyword arguments for align_global / align_local: +1/-1/-1, no matrix."""
    return {
        "match_score": 1,
        "mismatch_score": -1,
        "gap_penalty": -1,
        "substitution_matrix": "none",
    }


@pytest.fixture
def scoring(scoring_params) -> ScoringScheme:
    """The same parameters as a ScoringScheme."""
    return ScoringScheme(
        match=scoring_params["match_score"],
        mismatch=scoring_params["mismatch_score"],
        gap=scoring_params["gap_penalty"],
        matrix=scoring_params["substitution_matrix"],
    )


# ---------------------------------------------------------------------------
# Random number generator fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def rng():
    """Seeded random generator for reproducible tests."""
    return np.random.default_rng(888)


@pytest.fixture
def rng_alt():
    """Alternative seed for diversity in randomized tests."""
    return np.random.default_rng(123)


# ---------------------------------------------------------------------------
# Sequence generation helpers
# ---------------------------------------------------------------------------

@pytest.fixture
def random_dna_factory(default_bases):
    """Factory fixture returning a function to generate random DNA strings."""
    def _random_dna(length: int, rng: np.random.Generator) -> str:
        return "".join(rng.choice(default_bases, size=length))
    return _random_dna
