import pytest

from gridclusters.cli import EXAMPLE_GRIDS, main, parse_grid
from gridclusters.counter import count_clusters


def _expected_lines(grid):
    count = count_clusters(grid)
    return [
        f"Clusters (without modification): {count}",
        f"Clusters (direct modification): {count}",
    ]


def test_examples_printed_without_arguments(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    expected = [line for grid in EXAMPLE_GRIDS for line in _expected_lines(grid)]
    assert lines == expected


def test_example_counts_pinned(capsys):
    main([])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Clusters (without modification): 3"
    assert lines[3] == "Clusters (direct modification): 3"


def test_parse_grid_reads_rows():
    assert parse_grid("101\n\n0 1 0\n") == [[True, False, True], [False, True, False]]


def test_parse_grid_rejects_unknown_characters():
    with pytest.raises(ValueError, match="unexpected character 'x'"):
        parse_grid("10\n1x\n")


def test_grid_file_counts(tmp_path, capsys):
    path = tmp_path / "grid.txt"
    path.write_text("110\n100\n001\n")
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == _expected_lines(parse_grid(path.read_text()))
    assert lines[0] == "Clusters (without modification): 2"


def test_irregular_grid_file_fails(tmp_path, capsys):
    path = tmp_path / "grid.txt"
    path.write_text("11\n111\n11\n")
    assert main([str(path)]) == 1
    err = capsys.readouterr().err
    assert "All rows in the grid must have the same number of cells." in err


def test_empty_grid_file_fails(tmp_path, capsys):
    path = tmp_path / "empty.txt"
    path.write_text("\n\n")
    assert main([str(path)]) == 1
    assert "cannot be empty" in capsys.readouterr().err


def test_missing_file_fails(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert capsys.readouterr().err.startswith("error:")