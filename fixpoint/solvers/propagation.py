"""Constraint propagation: single sweeps and the fixpoint loop around them."""

from __future__ import annotations
from enum import Enum
from typing import List, Optional, Tuple

from ..core.board import SudokuGrid, SIZE
from ..core.candidates import CandidateSet
from .base_solver import SolverStats


class SweepResult(Enum):
    """Outcome of one propagation sweep."""
    NO_CHANGE = "no_change"
    CHANGED = "changed"
    CONTRADICTION = "contradiction"


def _fixed_digits(grid: SudokuGrid) -> Tuple[List[CandidateSet], List[CandidateSet], List[CandidateSet]]:
    """Digits held by fixed cells, gathered per row, column and box."""
    rows = [CandidateSet.empty() for _ in range(SIZE)]
    cols = [CandidateSet.empty() for _ in range(SIZE)]
    boxes = [CandidateSet.empty() for _ in range(SIZE)]

    for r, c in grid.positions():
        value = grid.value(r, c)
        if value:
            rows[r].add(value)
            cols[c].add(value)
            boxes[grid.box_index(r, c)].add(value)

    return rows, cols, boxes


def sweep(grid: SudokuGrid) -> SweepResult:
    """
    Run one row-major elimination pass over the grid, in place.

    Every open cell loses the digits of its fixed peers. A cell left with a
    single candidate is fixed on the spot, so cells visited later in the same
    pass already see it as a fixed peer.

    On an emptied candidate set the pass stops at once and reports
    CONTRADICTION; the grid is then partially updated and must be discarded.

    Returns:
        CHANGED if at least one cell was fixed, NO_CHANGE otherwise.
    """
    rows, cols, boxes = _fixed_digits(grid)
    changed = False

    for r, c in grid.positions():
        if grid.is_fixed(r, c):
            continue

        b = grid.box_index(r, c)
        candidates = grid.candidates(r, c)
        candidates.difference_update(rows[r])
        candidates.difference_update(cols[c])
        candidates.difference_update(boxes[b])

        if candidates.is_empty():
            return SweepResult.CONTRADICTION

        if candidates.count() == 1:
            value = candidates.sole_member()
            grid.fix(r, c, value)
            rows[r].add(value)
            cols[c].add(value)
            boxes[b].add(value)
            changed = True
        else:
            grid.set_candidates(r, c, candidates)

    return SweepResult.CHANGED if changed else SweepResult.NO_CHANGE


def propagate(grid: SudokuGrid, stats: Optional[SolverStats] = None) -> bool:
    """
    Sweep until nothing changes.

    Args:
        grid: Grid to propagate in place.
        stats: Optional stats object; sweeps are counted in ``extra["sweeps"]``.

    Returns:
        True at a fixpoint (solved or not), False on contradiction.
    """
    while True:
        result = sweep(grid)
        if stats is not None:
            stats.extra["sweeps"] = stats.extra.get("sweeps", 0) + 1

        if result is SweepResult.CONTRADICTION:
            return False
        if result is SweepResult.NO_CHANGE:
            return True
