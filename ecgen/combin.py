"""Combinations by homogeneous revolving door (EMK).

All ``C(n, k)`` binary strings of length ``n`` and weight ``k`` are visited
starting from ``1^k 0^(n-k)``. Each step swaps a 1 and a 0; the pair
``(i, j)`` means position ``i`` loses its 1 and position ``j`` gains it.

Reference: Eades, Hickey and Read; also Knuth, TAOCP 7.2.1.3.
"""

from __future__ import annotations

from typing import Iterator, MutableSequence, Optional, Tuple

from ecgen.exceptions import InvalidArgument, check_subset_size
from ecgen.logging import get_logger, log_session

logger = get_logger(__name__)

Swap = Tuple[int, int]


def emk_gen(n: int, k: int) -> Iterator[Swap]:
    """Generate the swaps that visit all combinations in EMK order.

    Args:
        n: Length of the binary string.
        k: Number of ones.

    Returns:
        Iterator over ``C(n, k) - 1`` swap pairs.

    Raises:
        InvalidArgument: If ``n`` or ``k`` is negative or ``k > n``.
    """
    check_subset_size(n, k)
    log_session(logger, "EMK", n=n, k=k)
    return _emk_gen(n, k)


def emk_neg(n: int, k: int) -> Iterator[Swap]:
    """Generate the EMK swaps in reverse, from the last combination back to ``1^k 0^(n-k)``."""
    check_subset_size(n, k)
    return _emk_neg(n, k)


def _emk_gen(n: int, k: int) -> Iterator[Swap]:
    if n <= k or k == 0:
        return
    if k == 1:
        for i in range(n - 1):
            yield i, i + 1
        return
    yield from _emk_gen(n - 1, k)
    yield n - 2, n - 1
    yield from _emk_neg(n - 2, k - 1)
    yield k - 2, n - 2
    yield from _emk_gen(n - 2, k - 2)


def _emk_neg(n: int, k: int) -> Iterator[Swap]:
    if n <= k or k == 0:
        return
    if k == 1:
        for i in range(n - 2, -1, -1):
            yield i + 1, i
        return
    yield from _emk_neg(n - 2, k - 2)
    yield n - 2, k - 2
    yield from _emk_gen(n - 2, k - 1)
    yield n - 1, n - 2
    yield from _emk_neg(n - 1, k)


def emk(lst: MutableSequence, k: Optional[int] = None) -> Iterator[MutableSequence]:
    """Generate all combinations in place, starting from ``lst``.

    ``lst`` must hold its ones (truthy elements) packed at the front. It is
    yielded once per combination and two elements are swapped between
    yields.

    Args:
        lst: Initial container; its length is ``n`` and its weight ``k``.
        k: Expected weight. When given it must match the container.

    Raises:
        InvalidArgument: On weight mismatch or when the ones are not packed
            at the front.
    """
    n = len(lst)
    weight = sum(1 for x in lst if x)
    if k is None:
        k = weight
    check_subset_size(n, k)
    if weight != k:
        raise InvalidArgument(f"container has weight {weight}, expected k={k}")
    if not all(lst[:k]) or any(lst[k:]):
        raise InvalidArgument("the ones must be packed at the front of the container")
    log_session(logger, "EMK", n=n, k=k)
    return _emk_states(lst, _emk_gen(n, k))


def _emk_states(lst: MutableSequence, swaps: Iterator[Swap]) -> Iterator[MutableSequence]:
    yield lst
    for i, j in swaps:
        lst[i], lst[j] = lst[j], lst[i]
        yield lst
