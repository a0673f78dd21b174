"""Algorithms and data structures for competitive programming: modular
arithmetic, primes, range queries, segment trees, 2-SAT and shortest paths."""

__version__ = "0.1.0"