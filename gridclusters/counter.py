"""Count clusters of orthogonally connected truthy cells in a rectangular grid."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, MutableSequence, Sequence

MAX_CELLS = 2**31
"""Largest number of cells a grid may hold."""

MAX_QUEUE_SIZE = 100_000
"""Largest number of cells the breadth-first search may hold waiting at once."""

_NEIGHBOUR_OFFSETS = ((1, 0), (-1, 0), (0, 1), (0, -1))


class QueueSizeExceededError(RuntimeError):
    """Raised when the breadth-first search queue grows past MAX_QUEUE_SIZE."""


def validate_grid(grid: Sequence[Sequence[object]]) -> tuple[int, int]:
    """Check that the grid is non-empty, rectangular and not too large.

    Returns the grid's ``(rows, cols)``; raises ValueError otherwise.
    """
    rows = len(grid)
    if rows == 0 or len(grid[0]) == 0:
        raise ValueError("Grid cannot be empty or contain empty rows.")

    cols = len(grid[0])
    if rows > MAX_CELLS // cols:
        raise ValueError("The number of cells exceeds 2^31 (maximum allowed cells).")

    if any(len(row) != cols for row in grid):
        raise ValueError("All rows in the grid must have the same number of cells.")

    return rows, cols


def _flood(
    start_row: int,
    start_col: int,
    rows: int,
    cols: int,
    claim: Callable[[int, int], bool],
) -> None:
    """Breadth-first walk from a claimed start cell, claiming every reachable cell.

    ``claim(row, col)`` must mark the cell as visited and return True when the
    cell belongs to the cluster and has not been visited before.
    """
    waiting = deque([(start_row, start_col)])
    while waiting:
        row, col = waiting.popleft()
        for row_delta, col_delta in _NEIGHBOUR_OFFSETS:
            new_row = row + row_delta
            new_col = col + col_delta
            if 0 <= new_row < rows and 0 <= new_col < cols and claim(new_row, new_col):
                waiting.append((new_row, new_col))
        if len(waiting) > MAX_QUEUE_SIZE:
            raise QueueSizeExceededError(
                f"Queue size exceeded max limit ({MAX_QUEUE_SIZE}), aborting BFS."
            )


def count_clusters(grid: Sequence[Sequence[object]]) -> int:
    """Count clusters without modifying the grid, tracking visits separately."""
    rows, cols = validate_grid(grid)
    visited = [bytearray(cols) for _ in range(rows)]

    def claim(row: int, col: int) -> bool:
        if grid[row][col] and not visited[row][col]:
            visited[row][col] = 1
            return True
        return False

    result = 0
    for row_index, row in enumerate(grid):
        for col_index, cell in enumerate(row):
            if cell and not visited[row_index][col_index]:
                visited[row_index][col_index] = 1
                _flood(row_index, col_index, rows, cols, claim)
                result += 1
    return result


def count_clusters_in_place(grid: Sequence[MutableSequence[object]]) -> int:
    """Count clusters, clearing every visited cell of the grid to False."""
    rows, cols = validate_grid(grid)

    def claim(row: int, col: int) -> bool:
        if grid[row][col]:
            grid[row][col] = False
            return True
        return False

    result = 0
    for row_index, row in enumerate(grid):
        for col_index in range(cols):
            if row[col_index]:
                row[col_index] = False
                _flood(row_index, col_index, rows, cols, claim)
                result += 1
    return result