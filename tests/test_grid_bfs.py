import pytest

from contestlib.grid_bfs import NO_CELL, GridBFS

GRID = ["....", "....", "...."]


def test_single_source_manhattan():
    bfs = GridBFS(GRID)
    dist = bfs.bfs([(0, 0)])
    for r in range(3):
        for c in range(4):
            assert dist[r][c] == r + c


def test_multi_source_takes_nearest():
    bfs = GridBFS(GRID)
    sources = [(0, 0), (2, 3)]
    dist = bfs.bfs(sources)
    for r in range(3):
        for c in range(4):
            assert dist[r][c] == min(abs(r - sr) + abs(c - sc) for sr, sc in sources)


def test_parents_form_shortest_path_tree():
    bfs = GridBFS(GRID)
    bfs.bfs([(1, 2)])
    assert bfs.parent[1][2] == NO_CELL
    for r in range(3):
        for c in range(4):
            if (r, c) == (1, 2):
                continue
            pr, pc = bfs.parent[r][c]
            assert abs(pr - r) + abs(pc - c) == 1
            assert bfs.dist[pr][pc] == bfs.dist[r][c] - 1


def test_valid():
    bfs = GridBFS(GRID)
    assert bfs.valid(2, 3) is True
    assert bfs.valid(3, 0) is False
    assert bfs.valid(0, -1) is False


def test_empty_grid_returns_empty_table():
    assert GridBFS([]).bfs([]) == []


def test_source_outside_grid_raises():
    with pytest.raises(IndexError):
        GridBFS(GRID).bfs([(5, 5)])