"""Core module for the Sudoku grid model and validation."""

from .candidates import CandidateSet
from .board import SudokuGrid, Fixed, Open, SIZE, BOX_SIZE
from .errors import MalformedInputError, UnsolvableError
from .validator import is_valid_placement, find_conflicts, validate_solution

__all__ = [
    "CandidateSet",
    "SudokuGrid",
    "Fixed",
    "Open",
    "SIZE",
    "BOX_SIZE",
    "MalformedInputError",
    "UnsolvableError",
    "is_valid_placement",
    "find_conflicts",
    "validate_solution",
]
