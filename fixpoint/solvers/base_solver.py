"""Base solver interface and common utilities."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Dict, Any
import time
import tracemalloc

from ..core.board import SudokuGrid


class Outcome(Enum):
    """Terminal result of a solver run."""
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    # Core metrics
    outcome: Optional[Outcome] = None
    time_seconds: float = 0.0
    memory_bytes: int = 0
    iterations: int = 0

    # Search metrics
    backtracks: int = 0
    nodes_explored: int = 0

    # Additional metadata
    algorithm: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def solved(self) -> bool:
        return self.outcome is Outcome.SOLVED

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "outcome": self.outcome.value if self.outcome else None,
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            "algorithm": self.algorithm,
            **self.extra
        }


class BaseSolver(ABC):
    """Abstract base class for Sudoku solvers."""

    name: str = "BaseSolver"

    def __init__(self):
        self.stats = SolverStats(algorithm=self.name)

    def solve(self, grid: SudokuGrid) -> tuple[Optional[SudokuGrid], SolverStats]:
        """
        Solve a Sudoku puzzle with timing and memory tracking.

        Args:
            grid: The puzzle to solve. It is not modified.

        Returns:
            Tuple of (solution or None, stats). A None solution comes with
            ``stats.outcome == Outcome.UNSOLVABLE``.
        """
        self.stats = SolverStats(algorithm=self.name)

        tracemalloc.start()
        start_time = time.perf_counter()

        try:
            solution = self._solve(grid.clone())
        finally:
            self.stats.time_seconds = time.perf_counter() - start_time
            _, peak = tracemalloc.get_traced_memory()
            tracemalloc.stop()
            self.stats.memory_bytes = peak

        self.stats.outcome = Outcome.SOLVED if solution is not None else Outcome.UNSOLVABLE
        return solution, self.stats

    @abstractmethod
    def _solve(self, grid: SudokuGrid) -> Optional[SudokuGrid]:
        """
        Internal solve method to be implemented by subclasses.

        Args:
            grid: A copy of the puzzle to solve (can be modified).

        Returns:
            The solved grid, or None if the puzzle has no solution.
        """
        pass

    def reset_stats(self) -> None:
        """Reset solver statistics."""
        self.stats = SolverStats(algorithm=self.name)
