"""Guess selection and the possibility removal applied when a guess fails."""

from __future__ import annotations
from typing import NamedTuple, Optional

from ..core.board import SudokuGrid


class Guess(NamedTuple):
    """A tentative assignment of ``value`` to the cell at (row, column)."""
    value: int
    row: int
    column: int


def select_guess(grid: SudokuGrid) -> Optional[Guess]:
    """
    Pick the first open cell in row-major order and its lowest candidate.

    Returns None when every cell is fixed.
    """
    for r, c in grid.positions():
        if not grid.is_fixed(r, c):
            lowest = next(iter(grid.candidates(r, c)))
            return Guess(lowest, r, c)
    return None


def remove_possibility(grid: SudokuGrid, guess: Guess) -> bool:
    """
    Exclude a failed guess from its cell in a checkpoint snapshot.

    If a single candidate remains the cell is fixed to it.

    Returns:
        False if the cell has no candidate left, meaning the snapshot
        itself is contradictory.

    Raises:
        ValueError: If the target cell is already fixed.
    """
    candidates = grid.candidates(guess.row, guess.column)
    candidates.remove(guess.value)

    if candidates.is_empty():
        return False

    if candidates.count() == 1:
        grid.fix(guess.row, guess.column, candidates.sole_member())
    else:
        grid.set_candidates(guess.row, guess.column, candidates)
    return True
