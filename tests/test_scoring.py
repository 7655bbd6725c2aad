"""
test_scoring.py — Tests for the scoring model and substitution matrices
"""

import itertools

import pytest

from pairalign.matrices import SubstitutionMatrix, load_table, table_score
from pairalign.scoring import ScoringScheme, score


class TestMatchMismatch:
    """Scoring without a substitution matrix."""

    def test_match(self):
        assert score("GA", "TA", 2, 2, 3, -2, "none") == 3

    def test_mismatch(self):
        assert score("GA", "TA", 1, 1, 3, -2, "none") == -2

    def test_case_sensitive_without_matrix(self):
        """Without a matrix, 'a' and 'A' are different symbols."""
        assert score("a", "A", 1, 1, 1, -1, "none") == -1
        assert score("a", "a", 1, 1, 1, -1, "none") == 1

    def test_positions_are_one_based(self):
        seq1, seq2 = "ACG", "TCA"
        assert score(seq1, seq2, 2, 2, 5, -4) == 5
        assert score(seq1, seq2, 1, 3, 5, -4) == 5
        assert score(seq1, seq2, 3, 1, 5, -4) == -4


class TestSubstitutionMatrices:
    """Scoring with the named tables."""

    KNOWN_VALUES = [
        # (matrix, a, b, expected)
        ("BLOSUM62", "A", "A", 4),
        ("BLOSUM62", "W", "W", 11),
        ("BLOSUM62", "A", "R", -1),
        ("BLOSUM50", "A", "A", 5),
        ("BLOSUM50", "W", "W", 15),
        ("PAM250", "W", "W", 17),
        ("PAM250", "C", "C", 12),
        ("PAM120", "W", "W", 12),
        ("PAM120", "A", "A", 3),
        ("PAM40", "W", "W", 13),
        ("PAM40", "A", "A", 6),
    ]

    @pytest.mark.parametrize("matrix,a,b,expected", KNOWN_VALUES)
    def test_known_values(self, matrix, a, b, expected):
        assert score(a, b, 1, 1, 1, -1, matrix) == expected

    def test_lookup_is_case_normalized(self):
        assert score("a", "r", 1, 1, 1, -1, "BLOSUM62") == -1
        assert score("w", "W", 1, 1, 1, -1, "BLOSUM62") == 11

    @pytest.mark.parametrize("pair", [("J", "J"), ("J", "A"), ("1", "1"), ("O", "U")])
    def test_pair_missing_from_table_falls_back(self, pair):
        """Symbols outside the table score as with no matrix at all."""
        a, b = pair
        for match, mismatch in [(1, -1), (7, -3)]:
            assert score(a, b, 1, 1, match, mismatch, "BLOSUM62") == \
                score(a, b, 1, 1, match, mismatch, "none")

    def test_fallback_compares_original_case(self):
        """The fallback rule sees the symbols as given, not uppercased."""
        assert score("j", "J", 1, 1, 1, -1, "BLOSUM62") == -1

    @pytest.mark.parametrize("name", ["BLOSUM45", "blosum62", "", "PAM"])
    def test_unknown_matrix_behaves_as_none(self, name):
        assert SubstitutionMatrix.from_name(name) is SubstitutionMatrix.NONE
        assert score("A", "A", 1, 1, 2, -3, name) == 2
        assert score("A", "W", 1, 1, 2, -3, name) == -3

    @pytest.mark.parametrize("matrix", [m for m in SubstitutionMatrix if m is not SubstitutionMatrix.NONE])
    def test_tables_are_symmetric(self, matrix):
        table = load_table(matrix)
        letters = [c for c in table.alphabet if c != "*"]
        for a, b in itertools.combinations(letters, 2):
            assert table_score(table, a, b) == table_score(table, b, a), (matrix, a, b)

    def test_none_has_no_table(self):
        assert load_table(SubstitutionMatrix.NONE) is None

    def test_table_score_rejects_unknown_symbols(self):
        table = load_table(SubstitutionMatrix.BLOSUM62)
        assert table_score(table, "J", "A") is None
        assert table_score(table, "A", "-") is None
        assert table_score(table, "A", "A") == 4


class TestScoringScheme:
    """ScoringScheme bundles parameters and resolves matrix names."""

    def test_defaults(self):
        s = ScoringScheme()
        assert (s.match, s.mismatch, s.gap) == (1, -1, -1)
        assert s.matrix is SubstitutionMatrix.NONE

    def test_resolves_names(self):
        assert ScoringScheme(matrix="PAM250").matrix is SubstitutionMatrix.PAM250
        assert ScoringScheme(matrix="nonsense").matrix is SubstitutionMatrix.NONE
        assert ScoringScheme(matrix=SubstitutionMatrix.PAM40).matrix is SubstitutionMatrix.PAM40

    def test_pair_score_delegates(self):
        s = ScoringScheme(match=2, mismatch=-5, gap=-1, matrix="BLOSUM62")
        assert s.pair_score("AW", "AW", 2, 2) == 11
        assert s.pair_score("J", "J", 1, 1) == 2
        assert s.pair_score("J", "B", 1, 1) == -5
