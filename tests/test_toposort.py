import random

import pytest

from classicalgos.toposort import CycleError, topological_sort


def test_diamond():
    assert topological_sort(4, [(0, 1), (0, 2), (1, 3), (2, 3)]) == [0, 1, 2, 3]


def test_isolated_vertices_in_order():
    assert topological_sort(3, []) == [0, 1, 2]


def test_empty_graph():
    assert topological_sort(0, []) == []


def test_duplicate_edges_count_once():
    assert topological_sort(2, [(1, 0), (1, 0)]) == [1, 0]


@pytest.mark.parametrize("seed", range(10))
def test_random_dag_respects_edges(seed):
    rng = random.Random(seed)
    n = 12
    labels = list(range(n))
    rng.shuffle(labels)
    edges = [
        (labels[i], labels[j])
        for i in range(n)
        for j in range(i + 1, n)
        if rng.random() < 0.3
    ]
    order = topological_sort(n, edges)
    assert sorted(order) == list(range(n))
    position = {v: i for i, v in enumerate(order)}
    assert all(position[u] < position[v] for u, v in edges)


def test_cycle_raises_with_partial_order():
    with pytest.raises(CycleError) as info:
        topological_sort(4, [(0, 1), (1, 2), (2, 1)])
    assert info.value.order == [0, 3]
    assert isinstance(info.value, ValueError)


def test_self_loop_is_a_cycle():
    with pytest.raises(CycleError) as info:
        topological_sort(1, [(0, 0)])
    assert info.value.order == []


def test_vertex_out_of_range():
    with pytest.raises(ValueError):
        topological_sort(2, [(0, 2)])


def test_negative_vertex_count():
    with pytest.raises(ValueError):
        topological_sort(-1, [])