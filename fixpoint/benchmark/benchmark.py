"""Benchmarking framework for timing the solver over a set of puzzles."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional
import json
import os

from tqdm import tqdm

from ..core.board import SudokuGrid
from ..puzzles import PUZZLES
from ..solvers import BaseSolver, BacktrackingSolver


@dataclass
class BenchmarkResult:
    """Results from a single benchmark run."""
    puzzle: str
    run: int
    algorithm: str
    outcome: str
    time_seconds: float
    memory_bytes: int
    iterations: int
    backtracks: int
    nodes_explored: int
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def solved(self) -> bool:
        return self.outcome == "solved"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle": self.puzzle,
            "run": self.run,
            "algorithm": self.algorithm,
            "outcome": self.outcome,
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "memory_mb": self.memory_bytes / (1024 * 1024),
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            **self.extra
        }


class Benchmark:
    """
    Runs a solver repeatedly over named puzzles and collects its stats.
    """

    def __init__(
        self,
        puzzles: Optional[Dict[str, str]] = None,
        solver: Optional[BaseSolver] = None,
        repeat: int = 1
    ):
        """
        Initialize the benchmark.

        Args:
            puzzles: Dict of puzzle_name -> 81-char puzzle string (default: bundled set).
            solver: Solver instance (default: BacktrackingSolver).
            repeat: Number of runs per puzzle.

        Raises:
            MalformedInputError: If any puzzle string is malformed.
        """
        if repeat < 1:
            raise ValueError(f"repeat must be at least 1, got {repeat}")

        self.puzzles: Dict[str, SudokuGrid] = {
            name: SudokuGrid.from_string(s)
            for name, s in (puzzles if puzzles is not None else PUZZLES).items()
        }
        self.solver = solver or BacktrackingSolver()
        self.repeat = repeat
        self.results: List[BenchmarkResult] = []

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Run every puzzle ``repeat`` times.

        Returns:
            List of BenchmarkResult objects.
        """
        self.results = []

        pbar = tqdm(total=len(self.puzzles) * self.repeat, desc="Benchmarking", disable=not show_progress)

        for name, puzzle in self.puzzles.items():
            for run in range(self.repeat):
                self.results.append(self._run_single(name, run, puzzle))
                pbar.update(1)

        pbar.close()
        return self.results

    def _run_single(self, name: str, run: int, puzzle: SudokuGrid) -> BenchmarkResult:
        """Run the solver once on a single puzzle."""
        _, stats = self.solver.solve(puzzle)
        return BenchmarkResult(
            puzzle=name,
            run=run,
            algorithm=self.solver.name,
            outcome=stats.outcome.value,
            time_seconds=stats.time_seconds,
            memory_bytes=stats.memory_bytes,
            iterations=stats.iterations,
            backtracks=stats.backtracks,
            nodes_explored=stats.nodes_explored,
            extra=dict(stats.extra)
        )

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        summary = {
            "algorithm": self.solver.name,
            "repeat": self.repeat,
            "results_by_puzzle": {}
        }

        for name in self.puzzles:
            puzzle_results = [r for r in self.results if r.puzzle == name]
            if not puzzle_results:
                continue

            times = [r.time_seconds for r in puzzle_results]
            memory = [r.memory_bytes for r in puzzle_results]

            # The search is deterministic, so counters agree across runs.
            first = puzzle_results[0]
            summary["results_by_puzzle"][name] = {
                "outcome": first.outcome,
                "avg_time_seconds": sum(times) / len(times),
                "max_time_seconds": max(times),
                "min_time_seconds": min(times),
                "avg_memory_mb": sum(memory) / len(memory) / (1024 * 1024),
                "nodes_explored": first.nodes_explored,
                "backtracks": first.backtracks,
                "runs": len(puzzle_results)
            }

        return summary

    def save_results(self, output_dir: str) -> None:
        """Save raw results and the summary as JSON files."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "benchmark_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "benchmark_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        print(f"Results saved to {output_dir}")
