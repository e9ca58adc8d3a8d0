# gridclusters

Count clusters of connected true cells in a two-dimensional grid.
Two cells belong to the same cluster when they are neighbours up, down, left
or right; diagonal neighbours do not connect. Any truthy value counts as a
filled cell.

## Installation

```
pip install gridclusters
```

## Usage

```python
from gridclusters.counter import count_clusters, count_clusters_in_place

grid = [
    [1, 0, 0, 0],
    [0, 1, 1, 0],
    [1, 1, 0, 1],
    [0, 0, 1, 1],
]

count_clusters(grid)           # 3, grid left unchanged
count_clusters_in_place(grid)  # 3, visited cells are set to False
```

`count_clusters` keeps its own record of visited cells and leaves the grid as
it was. `count_clusters_in_place` marks cells as visited by setting them to
`False` in the grid it is given, so the rows must be mutable; after the call
every cell of the grid is false.

### Validation and limits

Both functions first check the grid with `validate_grid`, which returns the
grid's `(rows, cols)` and raises `ValueError` when:

- the grid has no rows, or its first row is empty;
- it holds more than 2^31 cells (`MAX_CELLS`);
- its rows are not all the same length.

The breadth-first search behind each count keeps its queue at no more than
100,000 cells (`MAX_QUEUE_SIZE`). A cluster whose search front grows beyond
that raises `QueueSizeExceededError`, a subclass of `RuntimeError`.

## Command line

```
gridclusters
```

With no arguments it prints the cluster counts of two built-in sample grids,
once with each counting method:

```
Clusters (without modification): 3
Clusters (direct modification): 3
Clusters (without modification): 3
Clusters (direct modification): 3
```

```
gridclusters grid1.txt grid2.txt
```

reads each file as a grid, one row of `0` and `1` characters per line, and
prints the same two lines for each. Whitespace within a line is ignored and
blank lines are skipped. Any other character, an unreadable file, an invalid
grid or an oversized search queue prints `error: ...` to standard error and
exits with status 1.

The same parser is available as `gridclusters.cli.parse_grid(text)`, which
returns a list of lists of booleans.

## What it does not do

Only the count of clusters is reported: the package does not label cells,
list the cells of each cluster or report cluster sizes, and it does not
connect cells diagonally.

## Running the tests

```
pip install -e ".[test]"
pytest
```