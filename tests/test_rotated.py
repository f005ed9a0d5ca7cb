import pytest
import numpy as np

from search_variants.data_loader import generate_rotated, rotate
from search_variants.rotated import (
    count_rotations,
    find_pivot,
    find_pivot_with_duplicates,
    search_rotated,
)
from search_variants.searches import search_full_scan


def brute_force_pivot(seq):
    drops = [i for i in range(len(seq) - 1) if seq[i] > seq[i + 1]]
    assert len(drops) <= 1
    return drops[0] if drops else -1


def test_rotation_count_examples():
    assert count_rotations([4, 5, 6, 7, 0, 1, 2, 3]) == 4
    assert count_rotations([0, 1, 2, 3, 4, 5, 6, 7]) == 0
    assert find_pivot([0, 1, 2, 3, 4, 5, 6, 7]) == -1
    assert count_rotations([4, 4, 5, 5, 5, 6, 7, 7, 7, 0, 1, 2, 3], allow_duplicates=True) == 9


@pytest.mark.parametrize("seq, expected", [
    ([], -1),
    ([1], -1),
    ([1, 2], -1),
    ([2, 1], 0),
    ([3, 1, 2], 0),
    ([2, 3, 1], 1),
    ([1, 2, 3, 4, 5, 0], 4),
    ([5, 0, 1, 2, 3, 4], 0),
])
def test_find_pivot_small(seq, expected):
    assert find_pivot(seq) == expected
    assert find_pivot_with_duplicates(seq) == expected


@pytest.mark.parametrize("seq, expected", [
    ([2, 2, 2, 2], -1),
    ([1, 1, 2, 1], 2),
    ([2, 1, 1, 1], 0),
    ([1, 1, 1, 2, 1, 1], 3),
    ([1, 2, 1, 1, 1, 1], 1),
    ([3, 3, 1, 3], 1),
    ([3, 1, 3, 3, 3], 0),
])
def test_find_pivot_with_duplicates_boundary_pivots(seq, expected):
    assert find_pivot_with_duplicates(seq) == expected


def test_find_pivot_unique_against_brute_force():
    rng = np.random.default_rng(3)
    for _ in range(300):
        seq, k = generate_rotated(int(rng.integers(1, 50)), rng)
        assert find_pivot(seq) == brute_force_pivot(seq)
        assert count_rotations(seq) == k


def test_find_pivot_with_duplicates_against_brute_force():
    """Heavily duplicated rotations, including all-equal runs around the pivot."""
    rng = np.random.default_rng(5)
    for _ in range(2000):
        size = int(rng.integers(1, 25))
        base = sorted(int(v) for v in rng.integers(0, int(rng.integers(1, 5)), size=size))
        seq = rotate(base, int(rng.integers(0, size)))
        pivot = find_pivot_with_duplicates(seq)
        assert pivot == brute_force_pivot(seq)
        assert rotate(seq, -(pivot + 1)) == base


def test_search_rotated():
    seq = [4, 5, 6, 7, 0, 1, 2, 3]
    for i, value in enumerate(seq):
        assert search_rotated(seq, value) == i
    assert search_rotated(seq, 8) == -1
    assert search_rotated(seq, -1) == -1
    assert search_rotated([], 3) == -1
    assert search_rotated([0, 1, 2], 2) == 2


def test_search_rotated_against_full_scan():
    rng = np.random.default_rng(9)
    for _ in range(300):
        duplicates = bool(rng.random() < 0.5)
        seq, _ = generate_rotated(int(rng.integers(1, 40)), rng, duplicates=duplicates)
        for target in range(-1, max(seq) + 2):
            found = search_rotated(seq, target, allow_duplicates=duplicates)
            if search_full_scan(seq, target) == -1:
                assert found == -1
            else:
                assert seq[found] == target
