"""Modular inverses and the Chinese remainder theorem."""

from __future__ import annotations

from typing import Sequence


def inv_mod(a: int, m: int) -> int:
    """Inverse of ``a`` modulo ``m`` in ``[0, m)``; ``a`` and ``m`` must be coprime."""
    if m <= 0:
        raise ValueError("modulus must be positive")
    g, r, x, y = m, a % m, 0, 1
    while r != 0:
        q = g // r
        g, r = r, g % r
        x, y = y, x - q * y
    if g != 1:
        raise ValueError(f"{a} has no inverse modulo {m}")
    return x % m


def chinese_remainder_theorem(a1: int, m1: int, a2: int, m2: int) -> int:
    """The number in ``[0, m1 * m2)`` that is ``a1`` mod ``m1`` and ``a2`` mod ``m2``."""
    if m1 <= 0 or m2 <= 0:
        raise ValueError("moduli must be positive")
    if not (0 <= a1 < m1 and 0 <= a2 < m2):
        raise ValueError("residues must lie in [0, modulus)")
    if m1 < m2:
        a1, m1, a2, m2 = a2, m2, a1, m1
    k = (a2 - a1) * inv_mod(m1, m2) % m2
    return a1 + k * m1


def chinese_remainder_theorem_list(residues: Sequence[int], moduli: Sequence[int]) -> int:
    """Combine pairwise coprime congruences ``x = residues[i] (mod moduli[i])``."""
    if len(residues) != len(moduli):
        raise ValueError("residues and moduli must have the same length")
    if not moduli:
        raise ValueError("at least one congruence is required")
    result, mod = residues[0], moduli[0]
    for a, m in zip(residues[1:], moduli[1:]):
        result = chinese_remainder_theorem(result, mod, a, m)
        mod *= m
    return result