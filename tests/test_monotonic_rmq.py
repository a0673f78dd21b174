import math

import pytest
from hypothesis import given, strategies as st

from contestlib.monotonic_rmq import MonotonicRMQ, rmq_every_k


@given(st.data())
def test_windows_match_slices(data):
    values = data.draw(st.lists(st.integers(-100, 100), min_size=1, max_size=40))
    k = data.draw(st.integers(1, len(values)))
    mins = rmq_every_k(values, k)
    maxs = rmq_every_k(values, k, maximum_mode=True)
    assert len(mins) == len(values) - k + 1
    for i, (lo, hi) in enumerate(zip(mins, maxs)):
        assert lo == min(values[i:i + k])
        assert hi == max(values[i:i + k])


def test_add_returns_sequential_indices_and_has_index():
    rmq = MonotonicRMQ()
    assert [rmq.add(v) for v in (4, 2, 7)] == [0, 1, 2]
    assert rmq.has_index(2)
    assert not rmq.has_index(3)
    assert rmq.has_count(1)
    assert rmq.query_count(3) == 2
    assert rmq.query_count(1) == 7


def test_empty_queries_return_infinities():
    assert MonotonicRMQ().query_index(0) == math.inf
    assert MonotonicRMQ(maximum_mode=True).query_index(0) == -math.inf


def test_queries_past_all_entries_are_empty():
    rmq = MonotonicRMQ()
    rmq.add(1)
    assert rmq.query_index(5) == math.inf


def test_decreasing_custom_index_rejected():
    rmq = MonotonicRMQ()
    rmq.add(1, index=5)
    with pytest.raises(ValueError):
        rmq.add(2, index=3)


def test_decreasing_query_rejected():
    rmq = MonotonicRMQ()
    rmq.add(1)
    rmq.add(2)
    rmq.query_index(1)
    with pytest.raises(ValueError):
        rmq.query_index(0)


@pytest.mark.parametrize("k", [0, 4])
def test_invalid_window_size(k):
    with pytest.raises(ValueError):
        rmq_every_k([1, 2, 3], k)