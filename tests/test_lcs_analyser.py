"""Unit tests for the LCS similarity analyser."""

import random

import numpy as np
import pytest

from dna_cst_package import (
    LETTERS, lcs_length, lcs_similarities, lcs_table, lcs_witness,
    similarity, similarity_analyser
)


def scalar_lcs_table(x: str, y: str) -> list:
    """Fills the LCS table cell by cell with the textbook recurrence."""
    table = [[0] * (len(y) + 1) for _ in range(len(x) + 1)]
    for i in range(len(x)):
        for j in range(len(y)):
            if x[i] == y[j]:
                table[i + 1][j + 1] = table[i][j] + 1
            else:
                table[i + 1][j + 1] = max(table[i + 1][j], table[i][j + 1])
    return table


def is_subsequence(sub: str, s: str) -> bool:
    it = iter(s)
    return all(ch in it for ch in sub)


def random_dna(min_len: int = 0, max_len: int = 30) -> str:
    return "".join(random.choices(LETTERS, k=random.randint(min_len, max_len)))


class TestLcsTable:
    """The vectorised table agrees with the cell-by-cell recurrence."""

    def test_matches_scalar_recurrence(self) -> None:
        random.seed(7)
        for _ in range(50):
            x, y = random_dna(), random_dna()
            assert lcs_table(x, y).tolist() == scalar_lcs_table(x, y), (x, y)

    def test_shape_includes_empty_prefixes(self) -> None:
        assert lcs_table("ACGT", "AGT").shape == (5, 4)

    def test_empty_input_gives_zero_row(self) -> None:
        assert lcs_table("", "ACG").tolist() == [[0, 0, 0, 0]]


class TestWitness:
    """Witness recovery and its tie-break."""

    def test_known_witness(self) -> None:
        assert lcs_witness("ACGT", "AGT") == "AGT"

    def test_no_common_letter(self) -> None:
        assert lcs_witness("AAAA", "TTTT") == ""

    def test_ties_move_left(self) -> None:
        # "AC" and "CA" share LCS length 1 two ways; dropping from y first keeps "C".
        assert lcs_witness("AC", "CA") == "C"

    def test_ties_move_left_reversed(self) -> None:
        assert lcs_witness("CA", "AC") == "A"

    def test_witness_is_valid_common_subsequence(self) -> None:
        random.seed(11)
        for _ in range(50):
            x, y = random_dna(1), random_dna(1)
            witness = lcs_witness(x, y)
            assert is_subsequence(witness, x) and is_subsequence(witness, y)
            assert len(witness) == lcs_length(x, y)


class TestSimilarity:
    """Similarity ratios on in-memory sequences."""

    def test_known_ratio(self) -> None:
        assert similarity("ACGT", "AGT") == 0.75

    def test_disjoint_sequences(self) -> None:
        assert similarity("AAAA", "TTTT") == 0.0

    def test_identical_sequences(self) -> None:
        assert similarity("GATTACA", "GATTACA") == 1.0

    def test_empty_sequence(self) -> None:
        assert similarity("", "ACGT") == 0.0

    def test_length_is_symmetric(self) -> None:
        random.seed(3)
        for _ in range(50):
            x, y = random_dna(), random_dna()
            assert lcs_length(x, y) == lcs_length(y, x)

    def test_bounds(self) -> None:
        random.seed(5)
        for _ in range(50):
            assert 0.0 <= similarity(random_dna(1), random_dna(1)) <= 1.0

    def test_batch(self) -> None:
        result = lcs_similarities(["ACGT", "AAAA", "ACGT"], ["AGT", "TTTT", "ACGT"])
        np.testing.assert_allclose(result, [0.75, 0.0, 1.0])

    def test_batch_empty(self) -> None:
        assert lcs_similarities([], []).size == 0

    def test_batch_length_mismatch(self) -> None:
        with pytest.raises(ValueError):
            lcs_similarities(["ACGT"], [])


class TestSimilarityAnalyser:
    """File-based analysis and witness output."""

    def test_returns_ratio(self, write_sequence, tmp_path) -> None:
        f1 = write_sequence("x.txt", "AC GT\n")
        f2 = write_sequence("y.txt", "A\nGT\n")
        assert similarity_analyser(f1, f2, str(tmp_path / "out.txt")) == 0.75

    def test_writes_witness_line(self, write_sequence, tmp_path) -> None:
        out = tmp_path / "out.txt"
        similarity_analyser(write_sequence("x.txt", "ACGT"), write_sequence("y.txt", "AGT"), str(out))
        assert out.read_text() == "AGT\n"

    def test_overwrites_existing_output(self, write_sequence, tmp_path) -> None:
        out = tmp_path / "out.txt"
        out.write_text("old content\nmore\n")
        similarity_analyser(write_sequence("x.txt", "AAAA"), write_sequence("y.txt", "TTTT"), str(out))
        assert out.read_text() == "\n"

    def test_missing_input_returns_zero(self, write_sequence, tmp_path) -> None:
        f1 = write_sequence("x.txt", "ACGT")
        assert similarity_analyser(f1, str(tmp_path / "absent.txt"), str(tmp_path / "out.txt")) == 0.0

    def test_empty_input_is_reported(self, write_sequence, tmp_path, log_messages) -> None:
        f1 = write_sequence("x.txt", "ACGT")
        f2 = write_sequence("y.txt", "  \n")
        similarity_analyser(f1, f2, str(tmp_path / "out.txt"))
        assert any("empty" in m for m in log_messages)

    def test_empty_input_writes_nothing(self, write_sequence, tmp_path) -> None:
        out = tmp_path / "out.txt"
        similarity_analyser(write_sequence("x.txt", ""), write_sequence("y.txt", "ACGT"), str(out))
        assert not out.exists()

    def test_unwritable_output_still_scores(self, write_sequence, tmp_path, log_messages) -> None:
        f1 = write_sequence("x.txt", "ACGT")
        f2 = write_sequence("y.txt", "AGT")
        score = similarity_analyser(f1, f2, str(tmp_path / "no_such_dir" / "out.txt"))
        assert score == 0.75 and any("Could not write" in m for m in log_messages)
