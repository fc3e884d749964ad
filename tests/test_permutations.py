import math

import pytest

from classicalgos.permutations import johnson_trotter


def test_three_elements_in_minimal_change_order():
    assert list(johnson_trotter(3)) == [
        (1, 2, 3),
        (1, 3, 2),
        (3, 1, 2),
        (3, 2, 1),
        (2, 3, 1),
        (2, 1, 3),
    ]


@pytest.mark.parametrize("n", range(1, 7))
def test_all_permutations_are_produced_once(n):
    perms = list(johnson_trotter(n))
    assert len(perms) == math.factorial(n)
    assert len(set(perms)) == len(perms)
    assert all(sorted(p) == list(range(1, n + 1)) for p in perms)


@pytest.mark.parametrize("n", range(1, 7))
def test_first_is_identity(n):
    assert next(johnson_trotter(n)) == tuple(range(1, n + 1))


@pytest.mark.parametrize("n", range(2, 7))
def test_consecutive_permutations_differ_by_adjacent_swap(n):
    perms = list(johnson_trotter(n))
    for before, after in zip(perms, perms[1:]):
        changed = [i for i, (a, b) in enumerate(zip(before, after)) if a != b]
        assert len(changed) == 2
        i, j = changed
        assert j == i + 1
        assert before[i] == after[j] and before[j] == after[i]


def test_zero_elements_yield_one_empty_permutation():
    assert list(johnson_trotter(0)) == [()]


def test_single_element():
    assert list(johnson_trotter(1)) == [(1,)]


def test_negative_count_is_rejected():
    with pytest.raises(ValueError):
        list(johnson_trotter(-1))