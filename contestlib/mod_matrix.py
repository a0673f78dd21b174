"""Dense matrices and column vectors over the integers modulo a prime."""

from __future__ import annotations

from typing import Iterable, Iterator, Union

from contestlib.modint import DEFAULT_MOD, ModInt

Scalar = Union[int, ModInt]


def _reduce(value: Scalar, mod: int) -> int:
    if isinstance(value, ModInt):
        if value.mod != mod:
            raise ValueError("cannot combine values with different moduli")
        return value.val
    return int(value) % mod


def _check_mod(mod: int) -> None:
    if mod <= 0:
        raise ValueError("modulus must be positive")


class ModColumnVector:
    """A column of residues modulo ``mod``."""

    __slots__ = ("values", "mod")

    def __init__(self, values: Iterable[Scalar] = (), mod: int = DEFAULT_MOD) -> None:
        _check_mod(mod)
        self.mod = mod
        self.values = [_reduce(v, mod) for v in values]

    @property
    def rows(self) -> int:
        return len(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    def __getitem__(self, index: int) -> int:
        return self.values[index]

    def __setitem__(self, index: int, value: Scalar) -> None:
        self.values[index] = _reduce(value, self.mod)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModColumnVector):
            return NotImplemented
        return self.mod == other.mod and self.values == other.values

    def __repr__(self) -> str:
        return f"ModColumnVector({self.values}, mod={self.mod})"


class ModMatrix:
    """A rows-by-cols matrix of residues modulo ``mod``.

    Entries are read and written as ``m[i, j]``; ``m[i]`` gives row ``i`` as a tuple.
    """

    __slots__ = ("rows", "cols", "mod", "_values")

    def __init__(self, values: Iterable[Iterable[Scalar]] = (), mod: int = DEFAULT_MOD) -> None:
        _check_mod(mod)
        rows = [[_reduce(v, mod) for v in row] for row in values]
        cols = len(rows[0]) if rows else 0
        if any(len(row) != cols for row in rows):
            raise ValueError("all rows must have the same length")
        self.mod = mod
        self.rows = len(rows)
        self.cols = cols
        self._values = rows

    @classmethod
    def _from_rows(cls, rows: list[list[int]], cols: int, mod: int) -> ModMatrix:
        matrix = cls.__new__(cls)
        matrix.mod = mod
        matrix.rows = len(rows)
        matrix.cols = cols
        matrix._values = rows
        return matrix

    @staticmethod
    def zeros(rows: int, cols: int | None = None, mod: int = DEFAULT_MOD) -> ModMatrix:
        """A zero matrix; ``cols`` defaults to ``rows``."""
        _check_mod(mod)
        if cols is None or cols < 0:
            cols = rows
        if rows < 0:
            raise ValueError("rows must be non-negative")
        return ModMatrix._from_rows([[0] * cols for _ in range(rows)], cols, mod)

    @staticmethod
    def identity(n: int, mod: int = DEFAULT_MOD) -> ModMatrix:
        """The ``n`` by ``n`` identity matrix."""
        result = ModMatrix.zeros(n, n, mod)
        for i, row in enumerate(result._values):
            row[i] = 1 % mod
        return result

    def __getitem__(self, key: int | tuple[int, int]) -> int | tuple[int, ...]:
        if isinstance(key, tuple):
            i, j = key
            return self._values[i][j]
        return tuple(self._values[key])

    def __setitem__(self, key: tuple[int, int], value: Scalar) -> None:
        i, j = key
        self._values[i][j] = _reduce(value, self.mod)

    def tolist(self) -> list[list[int]]:
        return [list(row) for row in self._values]

    def is_square(self) -> bool:
        return self.rows == self.cols

    def copy(self) -> ModMatrix:
        return ModMatrix._from_rows(self.tolist(), self.cols, self.mod)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModMatrix):
            return NotImplemented
        return (
            self.mod == other.mod
            and self.rows == other.rows
            and self.cols == other.cols
            and self._values == other._values
        )

    def _same_shape(self, other: ModMatrix) -> None:
        if self.mod != other.mod:
            raise ValueError("cannot combine matrices with different moduli")
        if self.rows != other.rows or self.cols != other.cols:
            raise ValueError("matrix dimensions do not match")

    def _matmul(self, other: ModMatrix) -> ModMatrix:
        if self.mod != other.mod:
            raise ValueError("cannot combine matrices with different moduli")
        if self.cols != other.rows:
            raise ValueError("matrix dimensions do not match for multiplication")
        mod = self.mod
        if other.rows == 0:
            return ModMatrix.zeros(self.rows, other.cols, mod)
        columns = list(zip(*other._values))
        rows = [
            [sum(x * y for x, y in zip(row, col)) % mod for col in columns]
            for row in self._values
        ]
        return ModMatrix._from_rows(rows, other.cols, mod)

    def _matvec(self, column: ModColumnVector) -> ModColumnVector:
        if self.mod != column.mod:
            raise ValueError("cannot combine values with different moduli")
        if self.cols != column.rows:
            raise ValueError("matrix and vector dimensions do not match")
        mod = self.mod
        result = ModColumnVector((), mod)
        result.values = [sum(x * y for x, y in zip(row, column.values)) % mod for row in self._values]
        return result

    def _scale(self, mult: Scalar) -> ModMatrix:
        m = _reduce(mult, self.mod)
        rows = [[v * m % self.mod for v in row] for row in self._values]
        return ModMatrix._from_rows(rows, self.cols, self.mod)

    def __mul__(self, other: object) -> ModMatrix | ModColumnVector:
        if isinstance(other, ModMatrix):
            return self._matmul(other)
        if isinstance(other, ModColumnVector):
            return self._matvec(other)
        if isinstance(other, (int, ModInt)):
            return self._scale(other)
        return NotImplemented

    def __rmul__(self, other: object) -> ModMatrix:
        if isinstance(other, (int, ModInt)):
            return self._scale(other)
        return NotImplemented

    def __add__(self, other: object) -> ModMatrix:
        if not isinstance(other, ModMatrix):
            return NotImplemented
        self._same_shape(other)
        mod = self.mod
        rows = [[(x + y) % mod for x, y in zip(r1, r2)] for r1, r2 in zip(self._values, other._values)]
        return ModMatrix._from_rows(rows, self.cols, mod)

    def __sub__(self, other: object) -> ModMatrix:
        if not isinstance(other, ModMatrix):
            return NotImplemented
        self._same_shape(other)
        mod = self.mod
        rows = [[(x - y) % mod for x, y in zip(r1, r2)] for r1, r2 in zip(self._values, other._values)]
        return ModMatrix._from_rows(rows, self.cols, mod)

    def pow(self, p: int) -> ModMatrix:
        """Raise a square matrix to the non-negative power ``p``."""
        if p < 0:
            raise ValueError("matrix power must be non-negative")
        if not self.is_square():
            raise ValueError("only square matrices can be raised to a power")
        base, result = self, ModMatrix.identity(self.rows, self.mod)
        while p > 0:
            if p & 1:
                result = result._matmul(base)
            p >>= 1
            if p > 0:
                base = base._matmul(base)
        return result

    def __pow__(self, p: int) -> ModMatrix:
        return self.pow(p)

    def format(self) -> str:
        """Rows as space-separated lines, followed by a blank line."""
        body = "".join(" ".join(map(str, row)) + "\n" for row in self._values if row)
        return body + "\n"

    def __repr__(self) -> str:
        return f"ModMatrix({self._values}, mod={self.mod})"