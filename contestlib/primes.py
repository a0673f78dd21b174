"""Primality testing and a linear-time sieve."""

from __future__ import annotations

from dataclasses import dataclass

_SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29)
_LIMIT = 1 << 64

# Deterministic base sets for inputs below each bound.
_BASES = (
    (341531, (9345883071009581737,)),
    (1050535501, (336781006125, 9639812373923155)),
    (350269456337, (4230279247111683200, 14694767155120705706, 16641139526367750375)),
    (55245642489451, (2, 141889084524735, 1199124725622454117, 11096072698276303650)),
    (7999252175582851, (2, 4130806001517, 149795463772692060, 186635894390467037, 3967304179347715805)),
    (
        585226005592931977,
        (2, 123635709730000, 9233062284813009, 43835965440333360, 761179012939631437, 1263739024124850375),
    ),
)
_FALLBACK_BASES = (2, 325, 9375, 28178, 450775, 9780504, 1795265022)


def _bases_for(n: int) -> tuple[int, ...]:
    for bound, bases in _BASES:
        if n < bound:
            return bases
    return _FALLBACK_BASES


def miller_rabin(n: int) -> bool:
    """Deterministic primality test for ``n < 2**64``."""
    if n >= _LIMIT:
        raise ValueError("miller_rabin is only deterministic below 2**64")
    if n < 2:
        return False
    for p in _SMALL_PRIMES:
        if n % p == 0:
            return n == p

    m = n - 1
    r = (m & -m).bit_length() - 1
    d = m >> r
    for a in _bases_for(n):
        a %= n
        if a == 0:
            continue
        x = pow(a, d, n)
        if x == 1 or x == m:
            continue
        for _ in range(r - 1):
            x = x * x % n
            if x == m:
                break
        if x != m:
            return False
    return True


@dataclass(frozen=True)
class SieveResult:
    """Sieve tables for ``0..maximum``."""

    smallest_factor: list[int]
    prime: list[bool]
    primes: list[int]

    @property
    def maximum(self) -> int:
        return len(self.prime) - 1


def sieve(maximum: int) -> SieveResult:
    """Linear sieve: primality, smallest prime factor and the primes up to ``maximum``."""
    maximum = max(maximum, 1)
    smallest_factor = [0] * (maximum + 1)
    prime = [True] * (maximum + 1)
    prime[0] = prime[1] = False
    primes: list[int] = []

    for i in range(2, maximum + 1):
        if prime[i]:
            smallest_factor[i] = i
            primes.append(i)
        for p in primes:
            if p > smallest_factor[i] or i * p > maximum:
                break
            prime[i * p] = False
            smallest_factor[i * p] = p

    return SieveResult(smallest_factor, prime, primes)