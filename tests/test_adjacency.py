import pytest

from wordgrid.adjacency import build_adjacency, clear_adjacency_cache
from wordgrid.errors import InvalidShape


def test_corner_edge_and_center_counts():
    graph = build_adjacency(3, 3)
    assert graph[0] == (1, 3, 4)
    assert len(graph[1]) == 5
    assert graph[4] == (0, 1, 2, 3, 5, 6, 7, 8)


def test_two_by_two_fully_connected():
    graph = build_adjacency(2, 2)
    for idx in range(4):
        assert set(graph[idx]) == {0, 1, 2, 3} - {idx}


def test_symmetric_and_no_self_loops():
    graph = build_adjacency(4, 6)
    assert len(graph) == 24
    for i, neighbors in enumerate(graph):
        assert i not in neighbors
        for j in neighbors:
            assert i in graph[j]


def test_rectangular_no_row_wrap():
    graph = build_adjacency(2, 3)
    # cell 2 is the end of row 0; cell 3 starts row 1
    assert 3 not in graph[2]
    assert graph[2] == (1, 4, 5)


def test_single_cell():
    assert build_adjacency(1, 1) == ((),)


def test_cached_per_shape():
    clear_adjacency_cache()
    first = build_adjacency(5, 5)
    assert build_adjacency(5, 5) is first
    assert build_adjacency(5, 4) is not first


@pytest.mark.parametrize("rows, cols", [(0, 3), (3, 0), (-1, 2)])
def test_invalid_shape(rows, cols):
    with pytest.raises(InvalidShape):
        build_adjacency(rows, cols)
