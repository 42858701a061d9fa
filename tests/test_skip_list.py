import random

import pytest

from dsalgo.skip_list import MAX_LEVELS, SkipList


class _FixedCoin:
    def __init__(self, outcome):
        self.outcome = outcome

    def randrange(self, _stop):
        return self.outcome


def _example_list(seed):
    skip = SkipList(rng=random.Random(seed))
    for i in range(10, -1, -1):
        skip.insert(i)
    skip.insert(13)
    skip.insert(4)
    return skip


@pytest.mark.parametrize("seed", [0, 1, 2, 42])
def test_example_searches(seed):
    skip = _example_list(seed)
    for present in (4, 8, 2, 1):
        assert skip.search(present) is True
    for absent in (30, -1, 600):
        assert skip.search(absent) is False


@pytest.mark.parametrize("seed", [0, 7, 99])
def test_bottom_level_is_sorted(seed):
    skip = _example_list(seed)
    expected = sorted(list(range(11)) + [13, 4])
    assert list(skip) == expected
    assert skip.levels()[-1] == expected
    assert len(skip) == len(expected)


@pytest.mark.parametrize("seed", [3, 11, 123])
def test_upper_levels_are_sorted_subsequences(seed):
    rng = random.Random(seed)
    values = [rng.randrange(1000) for _ in range(200)]
    skip = SkipList(values, rng=random.Random(seed))
    levels = skip.levels()
    assert len(levels) <= MAX_LEVELS
    for upper, lower in zip(levels, levels[1:]):
        assert upper == sorted(upper)
        remaining = iter(lower)
        assert all(item in remaining for item in upper)


def test_always_promote_caps_height():
    skip = SkipList([5, 3, 9], rng=_FixedCoin(1))
    levels = skip.levels()
    assert len(levels) == MAX_LEVELS
    assert all(level == [3, 5, 9] for level in levels)


def test_never_promote_single_level():
    skip = SkipList([5, 3, 9], rng=_FixedCoin(0))
    assert skip.levels() == [[3, 5, 9]]


def test_empty_search_and_contains():
    skip = SkipList()
    assert skip.search(1) is False
    assert 1 not in skip
    assert len(skip) == 0
    assert skip.levels() == []


def test_duplicates_kept():
    skip = SkipList([2, 2, 1], rng=random.Random(5))
    assert list(skip) == [1, 2, 2]
    assert 2 in skip


def test_string_values():
    skip = SkipList(["pear", "apple", "fig"], rng=random.Random(1))
    assert list(skip) == ["apple", "fig", "pear"]
    assert "fig" in skip
    assert "kiwi" not in skip