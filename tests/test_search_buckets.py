import random

import pytest

from contestlib.search_buckets import SearchBuckets


def naive(values, start, end, value):
    return sum(v < value for v in values[start:end])


@pytest.mark.parametrize("n", [0, 1, 5, 37, 120])
def test_all_ranges_match_naive(n):
    rng = random.Random(n)
    values = [rng.randint(0, 30) for _ in range(n)]
    buckets = SearchBuckets(values)
    for start in range(n + 1):
        for end in range(start, n + 1, 3):
            value = rng.randint(-1, 31)
            assert buckets.count_less_than(start, end, value) == naive(values, start, end, value)


@pytest.mark.parametrize("seed", range(5))
def test_modify_then_count(seed):
    rng = random.Random(seed)
    n = rng.randint(1, 150)
    values = [rng.randint(0, 50) for _ in range(n)]
    buckets = SearchBuckets(values)
    for _ in range(300):
        if rng.random() < 0.5:
            i = rng.randrange(n)
            values[i] = rng.randint(0, 50)
            buckets.modify(i, values[i])
        else:
            start = rng.randint(0, n)
            end = rng.randint(start, n)
            value = rng.randint(0, 51)
            assert buckets.count_less_than(start, end, value) == naive(values, start, end, value)
    assert buckets.values == values


def test_prefix_count():
    values = [5, 1, 4, 1, 5, 9, 2, 6]
    buckets = SearchBuckets(values)
    for length in range(len(values) + 1):
        assert buckets.prefix_count_less_than(length, 5) == naive(values, 0, length, 5)


def test_errors():
    buckets = SearchBuckets([3, 1, 2])
    with pytest.raises(IndexError):
        buckets.count_less_than(2, 1, 0)
    with pytest.raises(IndexError):
        buckets.count_less_than(0, 4, 0)
    with pytest.raises(IndexError):
        buckets.modify(3, 7)