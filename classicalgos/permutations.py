"""Permutations in minimal-change order by the Johnson-Trotter algorithm."""

from __future__ import annotations

from collections.abc import Iterator

_LEFT = -1


def johnson_trotter(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every permutation of ``1..n``, each one adjacent swap from the last.

    The first permutation is the identity. Each step moves the largest mobile
    element one place in its direction, then reverses the direction of every
    larger element.
    """
    if n < 0:
        raise ValueError("number of elements must not be negative")
    values = list(range(1, n + 1))
    directions = dict.fromkeys(values, _LEFT)
    yield tuple(values)
    while True:
        mobile: int | None = None
        for index, value in enumerate(values):
            target = index + directions[value]
            if (
                0 <= target < n
                and values[target] < value
                and (mobile is None or value > values[mobile])
            ):
                mobile = index
        if mobile is None:
            return
        moved = values[mobile]
        target = mobile + directions[moved]
        values[mobile], values[target] = values[target], moved
        for other in values:
            if other > moved:
                directions[other] = -directions[other]
        yield tuple(values)