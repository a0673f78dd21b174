import math

import pytest
from hypothesis import assume, given, strategies as st

from contestlib.crt import chinese_remainder_theorem, chinese_remainder_theorem_list, inv_mod


@given(st.integers(min_value=1, max_value=10**12), st.integers(min_value=1, max_value=10**12))
def test_inv_mod_is_inverse(a, m):
    assume(math.gcd(a, m) == 1)
    x = inv_mod(a, m)
    assert 0 <= x < m
    assert (a * x) % m == 1 % m


def test_inv_mod_not_coprime():
    with pytest.raises(ValueError):
        inv_mod(6, 9)


@given(st.data())
def test_crt_pair(data):
    m1 = data.draw(st.integers(min_value=1, max_value=10**9))
    m2 = data.draw(st.integers(min_value=1, max_value=10**9))
    assume(math.gcd(m1, m2) == 1)
    a1 = data.draw(st.integers(min_value=0, max_value=m1 - 1))
    a2 = data.draw(st.integers(min_value=0, max_value=m2 - 1))
    result = chinese_remainder_theorem(a1, m1, a2, m2)
    assert 0 <= result < m1 * m2
    assert result % m1 == a1
    assert result % m2 == a2
    assert result == chinese_remainder_theorem_list([a1, a2], [m1, m2])


def test_crt_small_example():
    assert chinese_remainder_theorem(2, 3, 3, 5) == 8


def test_crt_list_three_moduli():
    residues, moduli = [1, 2, 3], [5, 7, 11]
    result = chinese_remainder_theorem_list(residues, moduli)
    assert 0 <= result < math.prod(moduli)
    assert [result % m for m in moduli] == residues


def test_crt_not_coprime():
    with pytest.raises(ValueError):
        chinese_remainder_theorem(1, 4, 3, 6)


def test_crt_residue_out_of_range():
    with pytest.raises(ValueError):
        chinese_remainder_theorem(5, 3, 1, 5)


def test_crt_list_length_mismatch():
    with pytest.raises(ValueError):
        chinese_remainder_theorem_list([1, 2], [3])


def test_crt_list_empty():
    with pytest.raises(ValueError):
        chinese_remainder_theorem_list([], [])