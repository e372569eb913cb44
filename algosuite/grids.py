"""Breadth-first searches over rectangular grids."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, MutableSequence, Sequence

__all__ = [
    "solve_surrounded",
    "num_islands",
    "pacific_atlantic",
    "max_area_of_island",
    "oranges_rotting",
]

_STEPS = ((-1, 0), (0, -1), (0, 1), (1, 0))

Cell = tuple[int, int]


def _shape(grid: Sequence[Sequence[object]]) -> tuple[int, int]:
    if not grid:
        raise ValueError("grid must have at least one row")
    return len(grid), len(grid[0])


def _neighbours(row: int, col: int, rows: int, cols: int) -> Iterator[Cell]:
    for dr, dc in _STEPS:
        r, c = row + dr, col + dc
        if 0 <= r < rows and 0 <= c < cols:
            yield r, c


def _flood(
    grid: Sequence[Sequence[object]], starts: Iterable[Cell], target: object
) -> set[Cell]:
    """Return every cell equal to ``target`` connected to one of ``starts``."""
    rows, cols = _shape(grid)
    seen = {cell for cell in starts if grid[cell[0]][cell[1]] == target}
    queue = deque(seen)
    while queue:
        row, col = queue.popleft()
        for r, c in _neighbours(row, col, rows, cols):
            if (r, c) not in seen and grid[r][c] == target:
                seen.add((r, c))
                queue.append((r, c))
    return seen


def _border(rows: int, cols: int) -> Iterator[Cell]:
    for r in range(rows):
        yield r, 0
        yield r, cols - 1
    for c in range(cols):
        yield 0, c
        yield rows - 1, c


def solve_surrounded(board: Sequence[MutableSequence[str]]) -> None:
    """Flip to ``X``, in place, every ``O`` region that does not touch the border."""
    rows, cols = _shape(board)
    if cols == 0:
        return
    safe = _flood(board, _border(rows, cols), "O")
    for r, line in enumerate(board):
        for c, value in enumerate(line):
            if value == "O" and (r, c) not in safe:
                line[c] = "X"


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Return how many groups of connected ``'1'`` cells the grid holds."""
    _shape(grid)
    seen: set[Cell] = set()
    count = 0
    for r, line in enumerate(grid):
        for c, value in enumerate(line):
            if value == "1" and (r, c) not in seen:
                seen |= _flood(grid, [(r, c)], "1")
                count += 1
    return count


def _uphill(heights: Sequence[Sequence[int]], starts: Iterable[Cell]) -> set[Cell]:
    rows, cols = _shape(heights)
    seen = set(starts)
    queue = deque(seen)
    while queue:
        row, col = queue.popleft()
        for r, c in _neighbours(row, col, rows, cols):
            if (r, c) not in seen and heights[r][c] >= heights[row][col]:
                seen.add((r, c))
                queue.append((r, c))
    return seen


def pacific_atlantic(heights: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the cells whose water can reach both oceans, in row-major order.

    The Pacific borders the top and left edges, the Atlantic the bottom and
    right edges; water flows to neighbours of equal or lower height.
    """
    rows, cols = _shape(heights)
    pacific = _uphill(
        heights, [(0, c) for c in range(cols)] + [(r, 0) for r in range(rows)]
    )
    atlantic = _uphill(
        heights,
        [(rows - 1, c) for c in range(cols)] + [(r, cols - 1) for r in range(rows)],
    )
    return [[r, c] for r in range(rows) for c in range(cols) if (r, c) in pacific & atlantic]


def max_area_of_island(grid: Sequence[Sequence[int]]) -> int:
    """Return the size of the largest group of connected ``1`` cells."""
    _shape(grid)
    seen: set[Cell] = set()
    best = 0
    for r, line in enumerate(grid):
        for c, value in enumerate(line):
            if value == 1 and (r, c) not in seen:
                island = _flood(grid, [(r, c)], 1)
                seen |= island
                best = max(best, len(island))
    return best


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Return the minutes until no fresh orange is left, or -1 if some never rot.

    Cells hold 0 (empty), 1 (fresh) or 2 (rotten); rot spreads to the four
    neighbours each minute. The grid itself is left unchanged.
    """
    rows, cols = _shape(grid)
    fresh = {(r, c) for r, line in enumerate(grid) for c, v in enumerate(line) if v == 1}
    queue = deque(
        (r, c) for r, line in enumerate(grid) for c, v in enumerate(line) if v == 2
    )
    minutes = 0
    while queue and fresh:
        for _ in range(len(queue)):
            row, col = queue.popleft()
            for cell in _neighbours(row, col, rows, cols):
                if cell in fresh:
                    fresh.discard(cell)
                    queue.append(cell)
        minutes += 1
    return -1 if fresh else minutes