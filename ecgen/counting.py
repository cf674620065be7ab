"""Closed-form counts for the enumerated classes.

These are used to cross-check that an enumeration is exhaustive: a Gray code
session visits ``2**n`` states, a combination session ``comb(n, k)``, a
permutation session ``factorial(n)``, and a set partition session
``stirling2nd(n, k)`` or ``bell(n)``.
"""

from __future__ import annotations

import math
from functools import lru_cache

from ecgen.exceptions import check_size


def factorial(n: int) -> int:
    """Return ``n!``."""
    return math.factorial(check_size("n", n))


def comb(n: int, k: int) -> int:
    """Return the binomial coefficient ``C(n, k)``; zero when ``k > n``."""
    return math.comb(check_size("n", n), check_size("k", k))


def stirling2nd(n: int, k: int) -> int:
    """Stirling number of the second kind ``S(n, k)``.

    Number of ways to partition an ``n``-element set into ``k`` non-empty
    blocks. ``S(0, 0) == 1``; ``S(n, 0) == 0`` for ``n > 0``; zero when
    ``k > n``.

    Example:
        >>> stirling2nd(5, 3)
        25
    """
    check_size("n", n)
    check_size("k", k)
    if k > n:
        return 0
    return _stirling2nd(n, k)


@lru_cache(maxsize=None)
def _stirling2nd(n: int, k: int) -> int:
    if k == n:
        return 1
    if k == 0:
        return 0
    # S(n, k) = S(n-1, k-1) + k * S(n-1, k)
    row = [1] + [0] * k
    for i in range(1, n + 1):
        for j in range(min(i, k), 0, -1):
            row[j] = row[j - 1] + j * row[j]
        row[0] = 0
    return row[k]


def bell(n: int) -> int:
    """Bell number ``B(n)``: the number of partitions of an ``n``-element set."""
    check_size("n", n)
    # Bell triangle
    row = [1]
    for _ in range(n):
        nxt = [row[-1]]
        for value in row:
            nxt.append(nxt[-1] + value)
        row = nxt
    return row[0]
