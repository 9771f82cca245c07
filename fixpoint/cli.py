"""Command-line interface for the fixpoint Sudoku solver."""

import argparse
import sys

from .benchmark import Benchmark
from .core.board import SudokuGrid
from .core.errors import MalformedInputError
from .puzzles import PUZZLES, DEFAULT_PUZZLE
from .solvers import BacktrackingSolver

EXIT_MALFORMED = 1
EXIT_UNSOLVABLE = 2


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Sudoku solver using constraint propagation and backtracking",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve the bundled default puzzle
  python -m fixpoint.cli solve

  # Solve a puzzle string with statistics
  python -m fixpoint.cli solve --puzzle "530070000600195000..." --verbose

  # Time the bundled puzzles, 5 runs each
  python -m fixpoint.cli benchmark --repeat 5 --output results/
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a Sudoku puzzle")
    source = solve_parser.add_mutually_exclusive_group()
    source.add_argument(
        "--puzzle", "-p", type=str, default=None,
        help="Puzzle string (81 chars, 0 or . for empty cells)"
    )
    source.add_argument(
        "--name", "-n", choices=sorted(PUZZLES), default=DEFAULT_PUZZLE,
        help=f"Bundled puzzle to solve (default: {DEFAULT_PUZZLE})"
    )
    solve_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show detailed solving statistics"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Time the solver over puzzles")
    bench_parser.add_argument(
        "--puzzle", "-p", type=str, action="append", default=None,
        help="Puzzle string to include; repeatable (default: all bundled puzzles)"
    )
    bench_parser.add_argument(
        "--repeat", "-r", type=int, default=1,
        help="Runs per puzzle (default: 1)"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Directory for JSON results (default: don't save)"
    )
    bench_parser.add_argument(
        "--no-progress", action="store_true",
        help="Hide the progress bar"
    )

    # List command
    subparsers.add_parser("list", help="List bundled puzzles")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "solve":
        cmd_solve(args)
    elif args.command == "benchmark":
        cmd_benchmark(args)
    elif args.command == "list":
        cmd_list(args)


def cmd_solve(args):
    """Handle the solve command."""
    puzzle_str = args.puzzle if args.puzzle is not None else PUZZLES[args.name]
    try:
        grid = SudokuGrid.from_string(puzzle_str)
    except MalformedInputError as e:
        print(f"Error parsing puzzle: {e}")
        sys.exit(EXIT_MALFORMED)

    print("Input puzzle:")
    print(grid)
    print()

    solver = BacktrackingSolver()
    solution, stats = solver.solve(grid)

    if stats.solved:
        print(f"✓ Solved in {stats.time_seconds:.4f}s")
        if args.verbose:
            _print_stats(stats)
        print(solution)
    else:
        print("✗ No solution")
        if args.verbose:
            _print_stats(stats)
            for conflict in stats.extra.get("conflicts", []):
                print(f"  Duplicate {conflict['value']} in {conflict['unit']} {conflict['index']}")
        sys.exit(EXIT_UNSOLVABLE)


def _print_stats(stats):
    print(f"  Time: {stats.time_seconds:.4f}s")
    print(f"  Guesses: {stats.iterations:,}")
    print(f"  Checkpoints: {stats.nodes_explored:,}")
    print(f"  Backtracks: {stats.backtracks:,}")
    print(f"  Max depth: {stats.extra.get('max_depth', 0)}")
    print(f"  Sweeps: {stats.extra.get('sweeps', 0):,}")
    print(f"  Memory: {stats.memory_bytes / 1024:.2f} KB")


def cmd_benchmark(args):
    """Handle the benchmark command."""
    puzzles = None
    if args.puzzle:
        puzzles = {f"puzzle_{i}": p for i, p in enumerate(args.puzzle, 1)}

    try:
        benchmark = Benchmark(puzzles=puzzles, repeat=args.repeat)
    except MalformedInputError as e:
        print(f"Error parsing puzzle: {e}")
        sys.exit(EXIT_MALFORMED)

    print("=" * 60)
    print("SUDOKU SOLVER BENCHMARK")
    print("=" * 60)
    print(f"Puzzles: {', '.join(benchmark.puzzles)}")
    print(f"Runs per puzzle: {args.repeat}")
    print("=" * 60)

    benchmark.run(show_progress=not args.no_progress)
    summary = benchmark.get_summary()

    print("\nBy Puzzle:")
    print("-" * 50)
    for name, stats in summary["results_by_puzzle"].items():
        print(f"\n{name}: {stats['outcome']}")
        print(f"  Avg Time: {stats['avg_time_seconds']:.4f}s")
        print(f"  Checkpoints: {stats['nodes_explored']:,}")
        print(f"  Backtracks: {stats['backtracks']:,}")
        print(f"  Avg Memory: {stats['avg_memory_mb']:.2f} MB")

    if args.output:
        benchmark.save_results(args.output)

    print("\n" + "=" * 60)
    print("Benchmark complete!")


def cmd_list(args):
    """Handle the list command."""
    for name, puzzle in PUZZLES.items():
        clues = sum(1 for c in puzzle if c != "0")
        marker = " (default)" if name == DEFAULT_PUZZLE else ""
        print(f"{name:<10} {clues:>2} clues{marker}")


if __name__ == "__main__":
    main()
