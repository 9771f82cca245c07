"""Validation utilities for Sudoku grids."""

from __future__ import annotations
from typing import List, NamedTuple, TYPE_CHECKING

from .board import SIZE, BOX_SIZE

if TYPE_CHECKING:
    from .board import SudokuGrid


class Conflict(NamedTuple):
    """A digit appearing more than once in one row, column or box."""
    unit: str
    index: int
    value: int


def is_valid_placement(grid: SudokuGrid, row: int, col: int, value: int) -> bool:
    """
    Check if fixing ``value`` at (row, col) keeps the grid consistent.

    Args:
        grid: The Sudoku grid.
        row: Row index.
        col: Column index.
        value: Value to check (1 to 9).

    Returns:
        True if no fixed peer already holds the value.
    """
    if value < 1 or value > SIZE:
        return False

    return all(grid.value(r, c) != value for r, c in grid.peers(row, col))


def find_conflicts(grid: SudokuGrid) -> List[Conflict]:
    """
    List every repeated digit among the fixed cells.

    Boxes are numbered 0-8 row-major.
    """
    conflicts = []

    def scan(unit: str, index: int, digits: List[int]) -> None:
        seen = set()
        for d in digits:
            if d == 0:
                continue
            if d in seen:
                conflicts.append(Conflict(unit, index, d))
            seen.add(d)

    for i in range(SIZE):
        scan("row", i, grid.values[i, :].tolist())
    for j in range(SIZE):
        scan("column", j, grid.values[:, j].tolist())
    for b in range(SIZE):
        box_row = (b // BOX_SIZE) * BOX_SIZE
        box_col = (b % BOX_SIZE) * BOX_SIZE
        scan("box", b, grid.values[box_row:box_row + BOX_SIZE, box_col:box_col + BOX_SIZE].flatten().tolist())

    return conflicts


def validate_solution(puzzle: SudokuGrid, solution: SudokuGrid) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The original puzzle.
        solution: The proposed solution.

    Returns:
        True if the solution is complete, conflict-free and keeps every given.
    """
    for r, c in puzzle.positions():
        if puzzle.is_fixed(r, c) and puzzle.value(r, c) != solution.value(r, c):
            return False

    return solution.is_solved() and solution.is_valid()
