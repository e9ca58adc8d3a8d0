"""Command line front end that prints cluster counts for grids."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from gridclusters.counter import (
    QueueSizeExceededError,
    count_clusters,
    count_clusters_in_place,
)

EXAMPLE_GRIDS: tuple[tuple[tuple[int, ...], ...], ...] = (
    (
        (1, 0, 0, 0),
        (0, 1, 1, 0),
        (1, 1, 0, 1),
        (0, 0, 1, 1),
    ),
    (
        (1, 0, 0, 0, 0),
        (1, 0, 1, 1, 0),
        (0, 1, 0, 1, 0),
        (0, 1, 1, 1, 0),
        (0, 0, 0, 0, 1),
    ),
)


def parse_grid(text: str) -> list[list[bool]]:
    """Parse a grid written as lines of '0' and '1' characters."""
    grid = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        cells = "".join(line.split())
        if not cells:
            continue
        unknown = set(cells) - {"0", "1"}
        if unknown:
            raise ValueError(
                f"line {line_number}: unexpected character {sorted(unknown)[0]!r}"
            )
        grid.append([cell == "1" for cell in cells])
    return grid


def _report(grid: Sequence[Sequence[object]]) -> None:
    working = [list(row) for row in grid]
    print(f"Clusters (without modification): {count_clusters(working)}")
    print(f"Clusters (direct modification): {count_clusters_in_place(working)}")


def main(argv: Sequence[str] | None = None) -> int:
    """Print cluster counts for the given grid files, or for built-in examples."""
    parser = argparse.ArgumentParser(
        prog="gridclusters",
        description="Count clusters of connected 1 cells in grids of 0 and 1.",
    )
    parser.add_argument(
        "files",
        nargs="*",
        type=Path,
        help="grid files, one row of 0/1 characters per line",
    )
    args = parser.parse_args(argv)

    try:
        if args.files:
            grids = [parse_grid(path.read_text()) for path in args.files]
        else:
            grids = list(EXAMPLE_GRIDS)
        for grid in grids:
            _report(grid)
    except (OSError, ValueError, QueueSizeExceededError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())