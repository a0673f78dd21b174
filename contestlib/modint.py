"""Integers modulo a fixed modulus, with arithmetic operators."""

from __future__ import annotations

from functools import lru_cache

MOD_998244353 = 998244353
MOD_1E9_7 = 10**9 + 7
DEFAULT_MOD = MOD_998244353


@lru_cache(maxsize=None)
def _is_prime(n: int) -> bool:
    if n < 2:
        return False
    p = 2
    while p * p <= n:
        if n % p == 0:
            return False
        p += p % 2 + 1
    return True


class ModInt:
    """An integer reduced modulo ``mod``; immutable and hashable."""

    __slots__ = ("val", "mod")

    def __init__(self, value: int | ModInt = 0, mod: int = DEFAULT_MOD) -> None:
        if mod <= 0:
            raise ValueError("modulus must be positive")
        if isinstance(value, ModInt):
            value = value.val
        self.val = int(value) % mod
        self.mod = mod

    def _coerce(self, other: object) -> int:
        if isinstance(other, ModInt):
            if other.mod != self.mod:
                raise ValueError("cannot combine values with different moduli")
            return other.val
        if isinstance(other, int):
            return other % self.mod
        return NotImplemented  # type: ignore[return-value]

    def _make(self, value: int) -> ModInt:
        return ModInt(value, self.mod)

    def __add__(self, other: object) -> ModInt:
        v = self._coerce(other)
        if v is NotImplemented:
            return NotImplemented
        return self._make(self.val + v)

    __radd__ = __add__

    def __sub__(self, other: object) -> ModInt:
        v = self._coerce(other)
        if v is NotImplemented:
            return NotImplemented
        return self._make(self.val - v)

    def __rsub__(self, other: object) -> ModInt:
        v = self._coerce(other)
        if v is NotImplemented:
            return NotImplemented
        return self._make(v - self.val)

    def __mul__(self, other: object) -> ModInt:
        v = self._coerce(other)
        if v is NotImplemented:
            return NotImplemented
        return self._make(self.val * v)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> ModInt:
        v = self._coerce(other)
        if v is NotImplemented:
            return NotImplemented
        return self * self._make(v).inv()

    def __rtruediv__(self, other: object) -> ModInt:
        v = self._coerce(other)
        if v is NotImplemented:
            return NotImplemented
        return self._make(v) * self.inv()

    def __neg__(self) -> ModInt:
        return self._make(-self.val)

    def __pos__(self) -> ModInt:
        return self

    def __pow__(self, p: int) -> ModInt:
        return self.pow(p)

    def _compare_value(self, other: object) -> int:
        return self._coerce(other)

    def __eq__(self, other: object) -> bool:
        v = self._coerce(other)
        if v is NotImplemented:
            return NotImplemented
        return self.val == v

    def __lt__(self, other: object) -> bool:
        v = self._coerce(other)
        if v is NotImplemented:
            return NotImplemented
        return self.val < v

    def __le__(self, other: object) -> bool:
        v = self._coerce(other)
        if v is NotImplemented:
            return NotImplemented
        return self.val <= v

    def __gt__(self, other: object) -> bool:
        v = self._coerce(other)
        if v is NotImplemented:
            return NotImplemented
        return self.val > v

    def __ge__(self, other: object) -> bool:
        v = self._coerce(other)
        if v is NotImplemented:
            return NotImplemented
        return self.val >= v

    def __hash__(self) -> int:
        return hash(self.val)

    def __bool__(self) -> bool:
        return self.val != 0

    def __int__(self) -> int:
        return self.val

    def __float__(self) -> float:
        return float(self.val)

    def __str__(self) -> str:
        return str(self.val)

    def __repr__(self) -> str:
        return f"ModInt({self.val}, {self.mod})"

    def inv(self) -> ModInt:
        """Multiplicative inverse; the modulus must be prime. The inverse of 0 is 0."""
        if not _is_prime(self.mod):
            raise ValueError(f"modulus {self.mod} is not prime")
        return self._make(pow(self.val, self.mod - 2, self.mod))

    def pow(self, p: int) -> ModInt:
        """Raise to the integer power ``p``; negative powers use the inverse."""
        if p < 0:
            return self.inv().pow(-p)
        return self._make(pow(self.val, p, self.mod))