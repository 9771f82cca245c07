"""Unit tests for the candidate set, grid model and validation."""

import pytest
import numpy as np
from fixpoint.core.board import SudokuGrid, Fixed, Open
from fixpoint.core.candidates import CandidateSet
from fixpoint.core.errors import MalformedInputError
from fixpoint.core.validator import is_valid_placement, find_conflicts, validate_solution
from fixpoint.puzzles import CLASSIC, CLASSIC_SOLUTION


class TestCandidateSet:
    """Tests for CandidateSet."""

    def test_full(self):
        """Test the full set holds every digit."""
        s = CandidateSet.full()
        assert s.count() == 9
        assert list(s) == list(range(1, 10))
        assert all(s.contains(v) for v in range(1, 10))

    def test_remove(self):
        """Test removal, including removing an absent digit."""
        s = CandidateSet.full()
        s.remove(5)
        assert not s.contains(5)
        assert 5 not in s
        assert len(s) == 8

        s.remove(5)
        assert len(s) == 8

    def test_sole_member(self):
        """Test the unique remaining member query."""
        s = CandidateSet.of([7])
        assert s.sole_member() == 7

        s = CandidateSet.full()
        for v in range(1, 9):
            s.remove(v)
        assert s.sole_member() == 9

    def test_sole_member_requires_singleton(self):
        """Test sole_member refuses sets with zero or several digits."""
        with pytest.raises(ValueError):
            CandidateSet.of([1, 2]).sole_member()
        with pytest.raises(ValueError):
            CandidateSet.empty().sole_member()

    def test_difference_update(self):
        """Test removing a whole set of digits."""
        s = CandidateSet.full()
        s.difference_update(CandidateSet.of([1, 3, 9]))
        assert list(s) == [2, 4, 5, 6, 7, 8]

    def test_out_of_range_digit(self):
        """Test digits outside 1-9 are rejected."""
        with pytest.raises(ValueError):
            CandidateSet.full().remove(0)
        with pytest.raises(ValueError):
            CandidateSet.full().contains(10)
        assert 10 not in CandidateSet.full()

    def test_issubset(self):
        """Test subset comparison."""
        assert CandidateSet.of([2, 4]).issubset(CandidateSet.of([1, 2, 4]))
        assert not CandidateSet.of([2, 5]).issubset(CandidateSet.of([1, 2, 4]))
        assert CandidateSet.empty().issubset(CandidateSet.empty())


class TestSudokuGrid:
    """Tests for SudokuGrid class."""

    def test_from_matrix(self):
        """Test blanks become full open cells and digits become fixed."""
        grid = SudokuGrid.from_string(CLASSIC)
        assert grid.cell(0, 0) == Fixed(5)
        assert grid.cell(0, 2) == Open(CandidateSet.full())
        assert grid.count_fixed() == 30
        assert grid.count_open() == 51
        assert not grid.is_solved()

    def test_from_string_dots(self):
        """Test '.' is accepted as a blank."""
        grid = SudokuGrid.from_string("." * 80 + "9")
        assert grid.cell(8, 8) == Fixed(9)
        assert grid.count_open() == 80

    def test_to_string_round_trip(self):
        """Test converting grid to string."""
        assert SudokuGrid.from_string(CLASSIC).to_string() == CLASSIC

    @pytest.mark.parametrize("matrix", [
        [[0] * 9] * 8,
        [[0] * 8] * 9,
        [[0] * 9] * 8 + [[0] * 8],
        [],
    ])
    def test_malformed_shape(self, matrix):
        """Test wrong shapes raise MalformedInputError."""
        with pytest.raises(MalformedInputError):
            SudokuGrid.from_matrix(matrix)

    def test_malformed_values(self):
        """Test out-of-range and non-integer values are rejected."""
        matrix = [[0] * 9 for _ in range(9)]
        matrix[4][4] = 10
        with pytest.raises(MalformedInputError):
            SudokuGrid.from_matrix(matrix)

        matrix[4][4] = -1
        with pytest.raises(MalformedInputError):
            SudokuGrid.from_matrix(matrix)

        with pytest.raises(MalformedInputError):
            SudokuGrid.from_matrix(np.full((9, 9), 0.5))

    def test_malformed_string(self):
        """Test bad strings are rejected."""
        with pytest.raises(MalformedInputError):
            SudokuGrid.from_string("0" * 80)
        with pytest.raises(MalformedInputError):
            SudokuGrid.from_string("x" + "0" * 80)

    def test_malformed_input_is_value_error(self):
        """Test MalformedInputError can be caught as ValueError."""
        with pytest.raises(ValueError):
            SudokuGrid.from_string("")

    def test_clone_is_deep(self):
        """Test clones share no state with the original."""
        grid = SudokuGrid.from_string(CLASSIC)
        copy = grid.clone()
        assert copy == grid

        copy.fix(0, 2, 4)
        s = CandidateSet.full()
        s.remove(1)
        copy.set_candidates(0, 3, s)

        assert grid.cell(0, 2) == Open(CandidateSet.full())
        assert grid.cell(0, 3) == Open(CandidateSet.full())
        assert copy != grid

    def test_peers(self):
        """Test each cell has 20 distinct peers."""
        peers = SudokuGrid.peers(4, 4)
        assert len(peers) == 20
        assert (4, 4) not in peers
        assert (4, 0) in peers
        assert (0, 4) in peers
        assert (3, 5) in peers
        assert (0, 0) not in peers

    def test_unit_helpers(self):
        """Test row, column and box iteration helpers."""
        assert SudokuGrid.row_positions(2)[0] == (2, 0)
        assert SudokuGrid.column_positions(2)[8] == (8, 2)
        assert SudokuGrid.box_positions(4, 7) == [
            (3, 6), (3, 7), (3, 8),
            (4, 6), (4, 7), (4, 8),
            (5, 6), (5, 7), (5, 8),
        ]
        assert SudokuGrid.box_index(4, 7) == 5

    def test_is_valid(self):
        """Test grid validation."""
        grid = SudokuGrid.blank()
        assert grid.is_valid()

        grid.fix(0, 0, 5)
        grid.fix(0, 8, 5)
        assert not grid.is_valid()

    def test_to_matrix(self):
        """Test the solved grid comes back as plain integer lists."""
        matrix = SudokuGrid.from_string(CLASSIC_SOLUTION).to_matrix()
        assert matrix[0] == [5, 3, 4, 6, 7, 8, 9, 1, 2]
        assert all(isinstance(v, int) for row in matrix for v in row)

    def test_str(self):
        """Test pretty printing marks blanks with dots."""
        text = str(SudokuGrid.from_string(CLASSIC))
        assert text.splitlines()[1] == "| 5 3 . | . 7 . | . . . |"


class TestValidator:
    """Tests for validation utilities."""

    def test_is_valid_placement(self):
        """Test placement validation."""
        grid = SudokuGrid.blank()
        grid.fix(0, 0, 5)

        # Can't place 5 in same row
        assert not is_valid_placement(grid, 0, 5, 5)

        # Can't place 5 in same column
        assert not is_valid_placement(grid, 5, 0, 5)

        # Can't place 5 in same box
        assert not is_valid_placement(grid, 1, 1, 5)

        # Can place different value
        assert is_valid_placement(grid, 0, 5, 7)

    def test_find_conflicts(self):
        """Test duplicate givens are reported per unit."""
        grid = SudokuGrid.from_string("55" + "0" * 79)
        conflicts = find_conflicts(grid)
        assert ("row", 0, 5) in conflicts
        assert ("box", 0, 5) in conflicts
        assert all(c.value == 5 for c in conflicts)

        assert find_conflicts(SudokuGrid.from_string(CLASSIC)) == []

    def test_validate_solution(self):
        """Test solutions must be complete, valid and keep the givens."""
        puzzle = SudokuGrid.from_string(CLASSIC)
        solution = SudokuGrid.from_string(CLASSIC_SOLUTION)
        assert validate_solution(puzzle, solution)

        other = SudokuGrid.from_string("1" + CLASSIC[1:])
        assert not validate_solution(other, solution)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
