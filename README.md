# contestlib

A library of algorithms and data structures of the kind used in programming
contests, in plain Python with no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Contents

### Modular arithmetic and number theory

- `contestlib.modint.ModInt(value, mod)`: an immutable integer reduced modulo
  `mod` (default 998244353), with the usual arithmetic and comparison
  operators, `inv()` and `pow(p)`. `inv()` raises `ValueError` when the
  modulus is not prime; negative powers go through the inverse.
- `contestlib.crt`: `inv_mod(a, m)`, `chinese_remainder_theorem(a1, m1, a2, m2)`
  for two coprime moduli, and `chinese_remainder_theorem_list(residues, moduli)`
  for any number of pairwise coprime moduli. Residues must lie in
  `[0, modulus)`; bad input raises `ValueError`.
- `contestlib.combinatorics.Combinatorics(mod)`: factorial tables grown on
  demand, with `factorial`, `inv_factorial`, `choose`, `permute`,
  `inv_choose` and `inv_permute`, each returning a `ModInt`.
- `contestlib.mod_matrix`: `ModMatrix` (entries read and written as
  `m[i, j]`, with `+`, `-`, `*` by a matrix, a `ModColumnVector` or a
  scalar, `pow(p)`, `ModMatrix.zeros`, `ModMatrix.identity` and `format()`)
  and `ModColumnVector`.
- `contestlib.fraction.Fraction(numer, denom)`: fractions kept in lowest terms
  with a non-negative denominator. A zero denominator stands for a signed
  infinity; `0/0` raises `ZeroDivisionError`.
- `contestlib.primes`: `miller_rabin(n)`, a deterministic primality test for
  `n < 2**64`, and `sieve(maximum)`, a linear sieve returning a `SieveResult`
  with `smallest_factor`, `prime` and `primes`.

### Range queries

- `contestlib.monotonic_rmq`: `MonotonicRMQ` (sliding minimum, or maximum with
  `maximum_mode=True`) and `rmq_every_k(values, k, maximum_mode)`.
- `contestlib.cartesian_tree.build_cartesian_tree(values, compare)`: the parent
  of every index, `-1` for the root.
- `contestlib.fenwick.FenwickTree(n)`: point updates, prefix, range and suffix
  sums, `get`, `set` and `find_last_prefix` (also usable as an ordered
  multiset of indices).
- `contestlib.seg_tree.SegTree(n)`: a lazy segment tree over the immutable
  `Segment` and `SegmentChange` types in `contestlib.segments`. It supports
  range add and range assignment, and summarises ranges by maximum, sum and the
  largest difference between neighbours; `find_last_subarray` does a binary
  search on the tree.
- `contestlib.persistent_array.PersistentArray(values)`: every update returns a
  new root and all earlier versions stay readable; the first version has
  root `1`.
- `contestlib.search_buckets.SearchBuckets(initial)`: counts entries below a
  value in a range, with point assignment, by sorted square-root buckets.
- `contestlib.mo.solve_queries(values, queries, state_factory)`: offline range
  queries in Mo's order over `MoQuery` ranges; the default `PowerSumState`
  answers the sum of `count(x) ** 2 * x` over a window.

### Graphs

- `contestlib.two_sat`: `SCC` (Tarjan's algorithm, components in reverse
  topological order) and a `TwoSat` solver with `implies`, `either`,
  `set_value`, `equal`, `unequal`, `create_and`, `create_or`,
  `create_at_most_one` and `create_at_most_one_of`.
- `contestlib.bfs.ZeroOneBFS(n)`: shortest paths on graphs with edge weights 0
  or 1; unreachable nodes get `INF`.
- `contestlib.dijkstra.Dijkstra(n)`: shortest paths with non-negative weights;
  unreachable nodes get `UNREACHABLE`.
- `contestlib.grid_bfs.GridBFS(grid)`: shortest paths between the cells of a
  grid, moving in four directions with every cell passable.

## Example

```python
from contestlib.combinatorics import Combinatorics
from contestlib.fenwick import FenwickTree
from contestlib.primes import miller_rabin

combo = Combinatorics(998244353)
print(combo.choose(10, 3))  # 120

tree = FenwickTree(5)
tree.update(2, 7)
print(tree.query(3))  # 7

print(miller_rabin(998244353))  # True
```

## What is not included

- There is no sparse-table or block range-minimum structure for static arrays,
  and nothing for lowest common ancestors, tree distances or diameters.
- It is a library only: there are no command-line programs reading problem
  input from standard input.