"""Sudoku solver alternating constraint propagation with backtracking search."""

from .core import SudokuGrid, CandidateSet, MalformedInputError, UnsolvableError
from .solvers import BacktrackingSolver, Outcome, solve_matrix

__all__ = [
    "SudokuGrid",
    "CandidateSet",
    "MalformedInputError",
    "UnsolvableError",
    "BacktrackingSolver",
    "Outcome",
    "solve_matrix",
]
