"""Permutations by transpositions.

Two engines visit all ``n!`` arrangements of a sequence:

- Steinhaus-Johnson-Trotter (``sjt_gen``/``sjt``): adjacent transpositions,
  driven by a direction flag per element.
- Ehrlich (``ehr_gen``/``ehr``): star transpositions ``(0, j)``, driven by
  mobility counters and a focus array (Knuth, TAOCP 7.2.1.2, Algorithm E).

The two engines visit the arrangements in different orders.
"""

from __future__ import annotations

from typing import Iterator, List, MutableSequence

from ecgen.exceptions import check_size
from ecgen.logging import get_logger, log_session

logger = get_logger(__name__)

LEFT = -1
RIGHT = 1


def sjt_gen(n: int) -> Iterator[int]:
    """Generate the adjacent swaps of the Steinhaus-Johnson-Trotter order.

    Each yielded ``i`` means: swap positions ``i`` and ``i + 1``. The final
    swap returns the arrangement to where it started, so for ``n >= 2`` the
    sequence has exactly ``n!`` items and a consumer may treat every yield as
    "visit the current arrangement, then swap". For ``n < 2`` nothing is
    yielded.

    Args:
        n: Number of elements.

    Raises:
        InvalidArgument: If ``n`` is negative.
    """
    check_size("n", n)
    log_session(logger, "SJT", n=n)
    return _sjt_swaps(n)


def _sjt_swaps(n: int) -> Iterator[int]:
    if n < 2:
        return
    perm = list(range(n))  # element at each position
    pos = list(range(n))  # position of each element
    direction = [LEFT] * n
    while True:
        # largest mobile element: its neighbor in its direction is smaller
        m = n - 1
        while m > 0:
            p = pos[m]
            q = p + direction[m]
            if 0 <= q < n and perm[q] < m:
                break
            m -= 1
        if m == 0:
            yield 0
            return
        other = perm[q]
        perm[p], perm[q] = other, m
        pos[m], pos[other] = q, p
        yield min(p, q)
        for e in range(m + 1, n):
            direction[e] = -direction[e]


def sjt(lst: MutableSequence) -> Iterator[MutableSequence]:
    """Generate all permutations of ``lst`` in place by adjacent swaps.

    ``lst`` is yielded ``n!`` times (once when ``n < 2``). After the
    generator is exhausted ``lst`` is back in its original order.

    Example:
        >>> [''.join(s) for s in sjt(list("abc"))]
        ['abc', 'acb', 'cab', 'cba', 'bca', 'bac']
    """
    n = len(lst)
    return _sjt_states(lst, sjt_gen(n))


def _sjt_states(lst: MutableSequence, swaps: Iterator[int]) -> Iterator[MutableSequence]:
    if len(lst) < 2:
        yield lst
        return
    for i in swaps:
        yield lst
        lst[i], lst[i + 1] = lst[i + 1], lst[i]


def ehr_gen(n: int) -> Iterator[int]:
    """Generate the star transpositions of Ehrlich's method.

    Each yielded ``j`` means: swap positions ``0`` and ``j``. The sequence
    has ``n! - 1`` items; the starting arrangement counts as the first
    permutation.

    Args:
        n: Number of elements.

    Raises:
        InvalidArgument: If ``n`` is negative.
    """
    check_size("n", n)
    log_session(logger, "Ehrlich", n=n)
    return _ehr_swaps(n)


def _ehr_swaps(n: int) -> Iterator[int]:
    if n < 2:
        return
    c: List[int] = [0] * (n + 1)  # c[0] is never used
    b = list(range(n))
    while True:
        k = 1
        while c[k] == k:
            c[k] = 0
            k += 1
        if k == n:
            return
        c[k] += 1
        yield b[k]
        # reverse b[1:k]
        i, j = 1, k - 1
        while i < j:
            b[i], b[j] = b[j], b[i]
            i += 1
            j -= 1


def ehr(lst: MutableSequence) -> Iterator[MutableSequence]:
    """Generate all permutations of ``lst`` in place by star transpositions.

    ``lst`` is yielded ``n!`` times, starting with its current order.
    """
    return _ehr_states(lst, ehr_gen(len(lst)))


def _ehr_states(lst: MutableSequence, swaps: Iterator[int]) -> Iterator[MutableSequence]:
    yield lst
    for j in swaps:
        lst[0], lst[j] = lst[j], lst[0]
        yield lst
