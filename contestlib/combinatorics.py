"""Factorials, binomial coefficients and permutations modulo a prime."""

from __future__ import annotations

from contestlib.modint import DEFAULT_MOD, ModInt


class Combinatorics:
    """Lazily grown factorial tables modulo a prime ``mod``."""

    def __init__(self, mod: int = DEFAULT_MOD) -> None:
        self.mod = mod
        self._factorial = [1]
        self._inv_factorial = [1]

    def prepare_factorials(self, maximum: int) -> None:
        """Make sure the tables cover every index up to ``maximum``."""
        prepared = len(self._factorial) - 1
        if maximum <= prepared:
            return
        # Grow by at least 1% so that stepping up one at a time stays cheap.
        maximum = max(maximum, int(1.01 * prepared))
        mod = self.mod
        fact = self._factorial
        for i in range(prepared + 1, maximum + 1):
            fact.append(i * fact[-1] % mod)

        inverses = [ModInt(fact[maximum], mod).inv().val]
        for i in range(maximum - 1, prepared, -1):
            inverses.append((i + 1) * inverses[-1] % mod)
        self._inv_factorial.extend(reversed(inverses))

    def _wrap(self, value: int) -> ModInt:
        return ModInt(value, self.mod)

    def factorial(self, n: int) -> ModInt:
        if n < 0:
            return self._wrap(0)
        self.prepare_factorials(n)
        return self._wrap(self._factorial[n])

    def inv_factorial(self, n: int) -> ModInt:
        if n < 0:
            return self._wrap(0)
        self.prepare_factorials(n)
        return self._wrap(self._inv_factorial[n])

    def choose(self, n: int, r: int) -> ModInt:
        if r < 0 or r > n:
            return self._wrap(0)
        self.prepare_factorials(n)
        return self._wrap(
            self._factorial[n] * self._inv_factorial[r] * self._inv_factorial[n - r]
        )

    def permute(self, n: int, r: int) -> ModInt:
        if r < 0 or r > n:
            return self._wrap(0)
        self.prepare_factorials(n)
        return self._wrap(self._factorial[n] * self._inv_factorial[n - r])

    def inv_choose(self, n: int, r: int) -> ModInt:
        if not 0 <= r <= n:
            raise ValueError("inv_choose requires 0 <= r <= n")
        self.prepare_factorials(n)
        return self._wrap(
            self._inv_factorial[n] * self._factorial[r] * self._factorial[n - r]
        )

    def inv_permute(self, n: int, r: int) -> ModInt:
        if not 0 <= r <= n:
            raise ValueError("inv_permute requires 0 <= r <= n")
        self.prepare_factorials(n)
        return self._wrap(self._inv_factorial[n] * self._factorial[n - r])