import pytest
from hypothesis import given
from hypothesis import strategies as st

from contestlib.primes import miller_rabin, sieve

SIEVE = sieve(20000)


def trial_division(n):
    if n < 2:
        return False
    d = 2
    while d * d <= n:
        if n % d == 0:
            return False
        d += 1
    return True


def test_sieve_of_zero_covers_zero_and_one():
    result = sieve(0)
    assert result.prime == [False, False]
    assert result.primes == []
    assert result.smallest_factor == [0, 0]


def test_primes_below_hundred_count():
    assert len(sieve(100).primes) == 25


def test_primes_list_matches_flags():
    assert SIEVE.primes == [i for i, flag in enumerate(SIEVE.prime) if flag]
    assert SIEVE.maximum == 20000


def test_smallest_factor_is_smallest_prime_divisor():
    result = sieve(600)
    for i in range(2, 601):
        f = result.smallest_factor[i]
        assert i % f == 0
        assert result.prime[f]
        assert all(i % q for q in range(2, f))


def test_sieve_matches_trial_division():
    result = sieve(3000)
    assert result.prime == [trial_division(i) for i in range(3001)]


def test_miller_rabin_agrees_with_sieve():
    assert [miller_rabin(i) for i in range(20001)] == SIEVE.prime


@given(st.integers(0, 20000))
def test_miller_rabin_agrees_with_sieve_sampled(n):
    assert miller_rabin(n) == SIEVE.prime[n]


@pytest.mark.parametrize("bound", [341531, 1050535501])
def test_around_base_thresholds(bound):
    for n in range(bound - 40, bound + 40):
        assert miller_rabin(n) == trial_division(n)


def test_mersenne_primes():
    assert miller_rabin(2**31 - 1)
    assert miller_rabin(2**61 - 1)


def test_products_are_composite():
    p, q = SIEVE.primes[-1], SIEVE.primes[-2]
    assert not miller_rabin(p * q)
    assert not miller_rabin((2**31 - 1) ** 2)
    assert not miller_rabin(23 * 89)
    assert not miller_rabin(3 * 11 * 17)


def test_large_input_rejected():
    with pytest.raises(ValueError):
        miller_rabin(2**64)