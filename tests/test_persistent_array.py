import pytest
from hypothesis import given, strategies as st

from contestlib.persistent_array import PersistentArray


def test_initial_values_are_readable():
    data = [5, 3, 8, 1, 9, 2, 7]
    arr = PersistentArray(data)
    assert len(arr) == len(data)
    assert [arr.get(PersistentArray.INITIAL_ROOT, i) for i in range(len(data))] == data


def test_update_keeps_old_version():
    data = list(range(10))
    arr = PersistentArray(data)
    root = PersistentArray.INITIAL_ROOT
    new_root = arr.update(root, 4, 100)
    assert arr.get(new_root, 4) == 100
    assert arr.get(root, 4) == data[4]
    assert [arr.get(new_root, i) for i in range(10) if i != 4] == [x for x in data if x != 4]


def test_single_element():
    arr = PersistentArray(["a"])
    r = arr.update(1, 0, "b")
    assert arr.get(1, 0) == "a"
    assert arr.get(r, 0) == "b"


@given(
    st.integers(min_value=1, max_value=40).flatmap(
        lambda n: st.tuples(
            st.lists(st.integers(), min_size=n, max_size=n),
            st.lists(
                st.tuples(
                    st.integers(min_value=0, max_value=1000),
                    st.integers(min_value=0, max_value=n - 1),
                    st.integers(),
                ),
                max_size=30,
            ),
        )
    )
)
def test_matches_versioned_list_model(case):
    initial, ops = case
    arr = PersistentArray(initial)
    versions = [(PersistentArray.INITIAL_ROOT, list(initial))]
    for pick, index, value in ops:
        root, model = versions[pick % len(versions)]
        new_model = list(model)
        new_model[index] = value
        versions.append((arr.update(root, index, value), new_model))
    for root, model in versions:
        assert [arr.get(root, i) for i in range(len(model))] == model


def test_bad_index_raises():
    arr = PersistentArray([1, 2, 3])
    with pytest.raises(IndexError):
        arr.get(1, 3)
    with pytest.raises(IndexError):
        arr.update(1, -1, 0)


def test_bad_root_raises():
    arr = PersistentArray([1, 2, 3])
    with pytest.raises(ValueError):
        arr.get(0, 0)
    with pytest.raises(ValueError):
        arr.get(1000, 0)


def test_empty_array_has_no_indices():
    arr = PersistentArray([])
    assert len(arr) == 0
    with pytest.raises((IndexError, ValueError)):
        arr.get(1, 0)