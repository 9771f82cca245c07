"""Solvers module for Sudoku puzzles."""

from .base_solver import BaseSolver, SolverStats, Outcome
from .propagation import SweepResult, sweep, propagate
from .guess import Guess, select_guess, remove_possibility
from .backtracking_solver import BacktrackingSolver, Checkpoint, SearchState, solve_matrix

__all__ = [
    "BaseSolver",
    "SolverStats",
    "Outcome",
    "SweepResult",
    "sweep",
    "propagate",
    "Guess",
    "select_guess",
    "remove_possibility",
    "BacktrackingSolver",
    "Checkpoint",
    "SearchState",
    "solve_matrix",
]
