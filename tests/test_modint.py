import pytest
from hypothesis import given, strategies as st

from contestlib.modint import ModInt, MOD_998244353, MOD_1E9_7

M = MOD_998244353
ints = st.integers(min_value=-(10**30), max_value=10**30)


@given(ints)
def test_value_is_reduced_into_range(a):
    x = ModInt(a)
    assert 0 <= x.val < M
    assert (x.val - a) % M == 0


def test_negative_one_wraps():
    assert ModInt(-1, M).val == M - 1


@given(ints, ints)
def test_arithmetic_matches_integers(a, b):
    x, y = ModInt(a), ModInt(b)
    assert (x + y).val == (a + b) % M
    assert (x - y).val == (a - b) % M
    assert (x * y).val == (a * b) % M
    assert (-x).val == (-a) % M


@given(ints, ints)
def test_mixed_with_plain_ints(a, b):
    x = ModInt(a)
    assert (x + b) == (b + x)
    assert (b - x).val == (b - a) % M
    assert (x * b).val == (a * b) % M


@given(st.integers(min_value=1, max_value=M - 1))
def test_inverse(a):
    x = ModInt(a)
    assert x * x.inv() == 1


@given(st.integers(min_value=1, max_value=MOD_1E9_7 - 1))
def test_inverse_other_prime(a):
    x = ModInt(a, MOD_1E9_7)
    assert (x * x.inv()).val == 1


def test_inverse_of_zero_is_zero():
    assert ModInt(0).inv().val == 0


@given(ints, st.integers(min_value=1, max_value=M - 1))
def test_division_round_trip(a, b):
    x, y = ModInt(a), ModInt(b)
    assert (x / y) * y == x
    assert (a / y) * y == x


@given(st.integers(min_value=1, max_value=M - 1), st.integers(min_value=0, max_value=10**6))
def test_pow_matches_builtin(a, p):
    assert ModInt(a).pow(p).val == pow(a, p, M)
    assert (ModInt(a) ** p).val == pow(a, p, M)


@given(st.integers(min_value=1, max_value=M - 1), st.integers(min_value=1, max_value=1000))
def test_negative_pow(a, p):
    x = ModInt(a)
    assert x.pow(-p) * x.pow(p) == 1


def test_zero_to_zero_is_one():
    assert ModInt(0).pow(0).val == 1


def test_inverse_requires_prime_modulus():
    with pytest.raises(ValueError):
        ModInt(3, 12).inv()


def test_mixed_moduli_rejected():
    with pytest.raises(ValueError):
        ModInt(1, M) + ModInt(1, MOD_1E9_7)


def test_nonpositive_modulus_rejected():
    with pytest.raises(ValueError):
        ModInt(1, 0)


def test_comparisons_and_equality():
    assert ModInt(3) < ModInt(5)
    assert ModInt(5) >= ModInt(5)
    assert ModInt(M + 2) == 2
    assert ModInt(4) != ModInt(5)
    assert int(ModInt(M + 7)) == 7
    assert str(ModInt(M + 7)) == str(7)