"""Sudoku grid model: a 9x9 matrix of fixed digits and open candidate sets."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Set, Tuple, Union

import numpy as np

from .candidates import CandidateSet, FULL_MASK
from .errors import MalformedInputError

SIZE = 9
BOX_SIZE = 3

Position = Tuple[int, int]


@dataclass(frozen=True)
class Fixed:
    """A cell whose digit is determined."""
    value: int


@dataclass(frozen=True)
class Open:
    """A cell still choosing between its candidates."""
    candidates: CandidateSet


Cell = Union[Fixed, Open]


class SudokuGrid:
    """
    A 9x9 Sudoku grid in row-major order.

    Two arrays back the grid:
    - ``values`` holds the digit of each fixed cell and 0 for open cells.
    - ``masks`` holds the candidate mask of each open cell (ignored when fixed).

    Use :meth:`from_matrix` or :meth:`from_string` to build a grid from a puzzle.
    """

    size = SIZE
    box_size = BOX_SIZE

    def __init__(self, values: np.ndarray, masks: np.ndarray):
        self.values = values
        self.masks = masks

    @classmethod
    def blank(cls) -> SudokuGrid:
        """A grid with every cell open on all nine digits."""
        return cls(
            np.zeros((SIZE, SIZE), dtype=np.int32),
            np.full((SIZE, SIZE), FULL_MASK, dtype=np.uint16),
        )

    @classmethod
    def from_matrix(cls, matrix: Union[Sequence[Sequence[int]], np.ndarray]) -> SudokuGrid:
        """
        Build a grid from a 9x9 matrix of integers.

        Args:
            matrix: Nested sequence or array; 0 marks a blank cell, 1-9 a given.

        Raises:
            MalformedInputError: On a wrong shape, non-integer or out-of-range value.
        """
        try:
            arr = np.asarray(matrix)
        except ValueError as e:
            raise MalformedInputError(f"Grid is not a rectangular matrix: {e}") from e

        if arr.shape != (SIZE, SIZE):
            raise MalformedInputError(f"Grid shape must be ({SIZE}, {SIZE}), got {arr.shape}")
        if arr.dtype == np.bool_ or not np.issubdtype(arr.dtype, np.integer):
            raise MalformedInputError(f"Grid values must be integers, got dtype {arr.dtype}")
        if arr.min() < 0 or arr.max() > SIZE:
            raise MalformedInputError(f"Grid values must be 0-{SIZE}, got range {arr.min()}..{arr.max()}")

        grid = cls.blank()
        grid.values = arr.astype(np.int32)
        return grid

    @classmethod
    def from_string(cls, s: str) -> SudokuGrid:
        """
        Create a grid from an 81-character string.

        '0' or '.' mark blanks, '1'-'9' are givens.
        """
        if len(s) != SIZE * SIZE:
            raise MalformedInputError(f"String length must be {SIZE * SIZE}, got {len(s)}")

        digits = []
        for idx, c in enumerate(s):
            if c in "0.":
                digits.append(0)
            elif c in "123456789":
                digits.append(int(c))
            else:
                raise MalformedInputError(f"Unexpected character {c!r} at position {idx}")

        return cls.from_matrix(np.array(digits, dtype=np.int32).reshape(SIZE, SIZE))

    def clone(self) -> SudokuGrid:
        """Deep copy of all 81 cells."""
        return SudokuGrid(self.values.copy(), self.masks.copy())

    # Cell access

    def cell(self, row: int, col: int) -> Cell:
        value = int(self.values[row, col])
        if value:
            return Fixed(value)
        return Open(CandidateSet(int(self.masks[row, col])))

    def is_fixed(self, row: int, col: int) -> bool:
        return self.values[row, col] != 0

    def is_solved_cell(self, row: int, col: int) -> bool:
        return self.is_fixed(row, col)

    def value(self, row: int, col: int) -> int:
        """Digit of a fixed cell, 0 when open."""
        return int(self.values[row, col])

    def candidates(self, row: int, col: int) -> CandidateSet:
        """Copy of an open cell's candidate set."""
        if self.is_fixed(row, col):
            raise ValueError(f"Cell ({row}, {col}) is fixed to {self.value(row, col)}")
        return CandidateSet(int(self.masks[row, col]))

    def set_candidates(self, row: int, col: int, candidates: CandidateSet) -> None:
        self.values[row, col] = 0
        self.masks[row, col] = candidates.mask

    def fix(self, row: int, col: int, value: int) -> None:
        if value < 1 or value > SIZE:
            raise ValueError(f"Value must be 1-{SIZE}, got {value}")
        self.values[row, col] = value

    # Iteration helpers

    @staticmethod
    def positions() -> Iterator[Position]:
        """All cells in row-major order."""
        for r in range(SIZE):
            for c in range(SIZE):
                yield r, c

    @staticmethod
    def row_positions(row: int) -> List[Position]:
        return [(row, c) for c in range(SIZE)]

    @staticmethod
    def column_positions(col: int) -> List[Position]:
        return [(r, col) for r in range(SIZE)]

    @staticmethod
    def box_positions(row: int, col: int) -> List[Position]:
        """Cells of the 3x3 box containing (row, col)."""
        box_row = (row // BOX_SIZE) * BOX_SIZE
        box_col = (col // BOX_SIZE) * BOX_SIZE
        return [(box_row + i, box_col + j) for i in range(BOX_SIZE) for j in range(BOX_SIZE)]

    @staticmethod
    def box_index(row: int, col: int) -> int:
        """Box number 0-8, counted row-major."""
        return (row // BOX_SIZE) * BOX_SIZE + (col // BOX_SIZE)

    @classmethod
    def peers(cls, row: int, col: int) -> Set[Position]:
        """Cells sharing a row, column or box with (row, col), excluding itself."""
        peers = set(cls.row_positions(row))
        peers.update(cls.column_positions(col))
        peers.update(cls.box_positions(row, col))
        peers.remove((row, col))
        return peers

    def units(self) -> Iterator[np.ndarray]:
        """Digit arrays of every row, column and box."""
        for i in range(SIZE):
            yield self.values[i, :]
            yield self.values[:, i]
        for box_row in range(0, SIZE, BOX_SIZE):
            for box_col in range(0, SIZE, BOX_SIZE):
                yield self.values[box_row:box_row + BOX_SIZE, box_col:box_col + BOX_SIZE].flatten()

    # Whole-grid queries

    def count_open(self) -> int:
        return int(np.sum(self.values == 0))

    def count_fixed(self) -> int:
        return int(np.sum(self.values != 0))

    def is_solved(self) -> bool:
        """True once every cell is fixed."""
        return self.count_open() == 0

    def is_valid(self) -> bool:
        """True if no digit repeats among the fixed cells of any row, column or box."""
        for unit in self.units():
            non_zero = unit[unit != 0]
            if len(non_zero) != len(set(non_zero.tolist())):
                return False
        return True

    def to_matrix(self) -> List[List[int]]:
        """Digits as nested lists, 0 for open cells."""
        return self.values.tolist()

    def to_array(self) -> np.ndarray:
        return self.values.copy()

    def to_string(self) -> str:
        return "".join(str(v) for v in self.values.flatten().tolist())

    def __str__(self) -> str:
        """Pretty-print the grid."""
        lines = []
        horizontal_sep = '+' + (('-' * (BOX_SIZE * 2 + 1)) + '+') * BOX_SIZE

        for i in range(SIZE):
            if i % BOX_SIZE == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j in range(SIZE):
                val = self.values[i, j]
                row_str += ' .' if val == 0 else f' {val}'
                if (j + 1) % BOX_SIZE == 0:
                    row_str += ' |'

            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"SudokuGrid(fixed={self.count_fixed()}, open={self.count_open()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuGrid):
            return NotImplemented
        if not np.array_equal(self.values, other.values):
            return False
        open_cells = self.values == 0
        return np.array_equal(self.masks[open_cells], other.masks[open_cells])
