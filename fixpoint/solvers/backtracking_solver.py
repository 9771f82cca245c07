"""Propagate-and-backtrack solver driven by an explicit checkpoint stack."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Union

import numpy as np

from .base_solver import BaseSolver
from .guess import Guess, select_guess, remove_possibility
from .propagation import propagate
from ..core.board import SudokuGrid
from ..core.errors import UnsolvableError
from ..core.validator import find_conflicts


class SearchState(Enum):
    """States of the backtracking controller."""
    PROPAGATING = "propagating"
    SOLVED = "solved"
    CONTRADICTION = "contradiction"
    BACKTRACK_EXHAUSTED = "backtrack_exhausted"
    DONE = "done"


@dataclass
class Checkpoint:
    """Grid as it stood right before ``guess`` was forced into it."""
    snapshot: SudokuGrid
    guess: Guess


class BacktrackingSolver(BaseSolver):
    """
    Chronological backtracking over propagated grids.

    Each decision forces the lowest candidate of the first open cell and
    propagates to a fixpoint. The grid before the decision is kept on the
    frontier; when propagation hits a contradiction the newest checkpoint is
    popped, the failed digit excluded from its cell, and the snapshot
    re-propagated. Unwinding continues until a snapshot survives or the
    frontier is empty, in which case the puzzle has no solution.

    Stats:
    - iterations: guesses forced into a working grid
    - nodes_explored: checkpoints pushed
    - backtracks: checkpoints popped
    - extra["max_depth"]: deepest frontier reached
    - extra["sweeps"]: propagation sweeps run
    """

    name = "Propagate+Backtrack"

    def __init__(self, check_givens: bool = True):
        """
        Initialize the solver.

        Args:
            check_givens: If True, report puzzles whose givens already repeat
                          a digit in a row, column or box as unsolvable before
                          searching. Propagation never compares two fixed cells,
                          so without this check such puzzles can come back
                          "solved" with the duplicate intact.
        """
        super().__init__()
        self.check_givens = check_givens
        self.frontier: List[Checkpoint] = []
        self.working: Optional[SudokuGrid] = None
        self.guess: Optional[Guess] = None

    def _solve(self, grid: SudokuGrid) -> Optional[SudokuGrid]:
        self.frontier = []
        self.working = None
        self.guess = None
        self.stats.extra["max_depth"] = 0
        self.stats.extra["sweeps"] = 0

        if self.check_givens:
            conflicts = find_conflicts(grid)
            if conflicts:
                self.stats.extra["conflicts"] = [c._asdict() for c in conflicts]
                return None

        state = self._start(grid)
        while state not in (SearchState.DONE, SearchState.BACKTRACK_EXHAUSTED):
            if state is SearchState.PROPAGATING:
                state = self._step()
            elif state is SearchState.CONTRADICTION:
                state = self._backtrack()
            elif state is SearchState.SOLVED:
                state = SearchState.DONE if self.working.is_valid() else SearchState.CONTRADICTION

        if state is SearchState.DONE:
            return self.working
        return None

    def _start(self, grid: SudokuGrid) -> SearchState:
        """Propagate the puzzle itself, then take the first decision."""
        if not propagate(grid, self.stats):
            return SearchState.BACKTRACK_EXHAUSTED
        return self._decide(grid)

    def _decide(self, snapshot: SudokuGrid) -> SearchState:
        """
        Push a checkpoint for the next guess on a propagated grid.

        The snapshot is kept on the frontier untouched; the guess is applied
        to a clone that becomes the working grid.
        """
        guess = select_guess(snapshot)
        if guess is None:
            self.working = snapshot
            return SearchState.SOLVED

        self.frontier.append(Checkpoint(snapshot, guess))
        self.working = snapshot.clone()
        self.guess = guess

        self.stats.nodes_explored += 1
        self.stats.extra["max_depth"] = max(self.stats.extra["max_depth"], len(self.frontier))
        return SearchState.PROPAGATING

    def _step(self) -> SearchState:
        """Force the current guess into the working grid and propagate."""
        self.stats.iterations += 1

        guess = self.guess
        self.working.fix(guess.row, guess.column, guess.value)

        if not propagate(self.working, self.stats):
            return SearchState.CONTRADICTION
        return self._decide(self.working)

    def _backtrack(self) -> SearchState:
        """Unwind the frontier until a checkpoint survives its failed guess."""
        while self.frontier:
            checkpoint = self.frontier.pop()
            self.stats.backtracks += 1

            snapshot = checkpoint.snapshot
            if remove_possibility(snapshot, checkpoint.guess) and propagate(snapshot, self.stats):
                return self._decide(snapshot)

        return SearchState.BACKTRACK_EXHAUSTED


def solve_matrix(matrix: Union[Sequence[Sequence[int]], np.ndarray]) -> List[List[int]]:
    """
    Solve a 9x9 matrix of digits, 0 for blanks.

    Returns:
        The solved matrix.

    Raises:
        MalformedInputError: If the matrix is not 9x9 with values 0-9.
        UnsolvableError: If the puzzle has no solution.
    """
    grid = SudokuGrid.from_matrix(matrix)
    solution, stats = BacktrackingSolver().solve(grid)
    if solution is None:
        raise UnsolvableError(
            f"Puzzle has no solution (explored {stats.nodes_explored} checkpoints, "
            f"{stats.backtracks} backtracks)"
        )
    return solution.to_matrix()
