"""Set partitions as restricted-growth strings (RGS).

A set partition of ``{0, ..., n-1}`` is encoded as a string ``a`` where
``a[i]`` is the block holding element ``i`` and blocks are numbered in order
of their smallest element, so ``a[0] == 0`` and
``a[i] <= 1 + max(a[:i])``. The partitions of a 4-element set, for example:

    1 block:  0000
    2 blocks: 0001 0010 0100 0111 0011 0101 0110
    3 blocks: 0122 0121 0112 0120 0102 0012
    4 blocks: 0123

Every step below moves one element to another block, i.e. changes one
position of the string. Deltas are ``(position, new_label)`` pairs.

With ``k`` fixed the order is Ruskey's Gray code, built from the lists
``S(n, k, p)`` and their reversals ``S'(n, k, p)``:

1. first(S(n,k,0)) = first(S(n,k,1)) = 0^(n-k) 0 1 2 ... (k-1)
2. last(S(n,k,0)) = 0^(n-k) 1 2 ... (k-1) 0
3. last(S(n,k,1)) = 0 1 2 ... (k-1) 0^(n-k)

The recursive helpers work on 1-based positions; the public generators shift
them to 0-based.

Reference:
    Frank Ruskey. Simple combinatorial Gray codes constructed by reversing
    sublists. Lecture Notes in Computer Science, #762, 201-208.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from ecgen.exceptions import check_size, check_subset_size
from ecgen.logging import get_logger, log_session

logger = get_logger(__name__)

Move = Tuple[int, int]


def initial_rgs(n: int, k: Optional[int] = None) -> List[int]:
    """Return the first restricted-growth string of a session.

    ``0^(n-k) 0 1 ... (k-1)`` when ``k`` is given, all zeros otherwise.
    """
    check_size("n", n)
    if k is None or k == 0:
        return [0] * n
    check_subset_size(n, k)
    return [0] * (n - k) + list(range(k))


def set_partition_gen(n: int, k: Optional[int] = None) -> Iterator[Move]:
    """Generate the moves visiting all partitions of an ``n``-set.

    Args:
        n: Number of elements.
        k: Number of blocks. When omitted every partition is visited,
            ``bell(n)`` in total.

    Returns:
        Iterator over ``(position, new_label)`` moves, one fewer than the
        number of partitions, starting from ``initial_rgs(n, k)``.

    Raises:
        InvalidArgument: If ``n`` or ``k`` is negative or ``k > n``.
    """
    check_size("n", n)
    if k is None:
        log_session(logger, "Set partition", n=n, k="any")
        return _rgs_all(n)
    check_subset_size(n, k)
    log_session(logger, "Set partition", n=n, k=k)
    return _shift(_set_partition_moves(n, k))


def set_partition(n: int, k: Optional[int] = None) -> Iterator[List[int]]:
    """Generate all partitions of an ``n``-set as one in-place RGS list.

    Yields ``stirling2nd(n, k)`` times (``bell(n)`` when ``k`` is omitted).
    Nothing is yielded for the empty class ``k == 0 < n``.
    """
    moves = set_partition_gen(n, k)
    return _rgs_states(initial_rgs(n, k), moves, empty=(k == 0 and n > 0))


def _rgs_states(
    rgs: List[int], moves: Iterator[Move], empty: bool = False
) -> Iterator[List[int]]:
    if empty:
        return
    yield rgs
    for pos, label in moves:
        rgs[pos] = label
        yield rgs


def _shift(moves: Iterator[Move]) -> Iterator[Move]:
    for x, y in moves:
        yield x - 1, y


def _rgs_all(n: int) -> Iterator[Move]:
    # Reflected prefix extension: for the t-th prefix (max label m) the last
    # label runs 0, m+1, m, ..., 1 when t is even and 1, ..., m+1, 0 when odd.
    if n < 2:
        return
    last = n - 1
    prefix = [0] * last
    prefix_moves = _rgs_all(last)
    even = True
    while True:
        m = max(prefix)
        if even:
            labels = range(m + 1, 0, -1)
        else:
            labels = list(range(2, m + 2)) + [0]
        for label in labels:
            yield last, label
        move = next(prefix_moves, None)
        if move is None:
            return
        pos, label = move
        prefix[pos] = label
        yield move
        even = not even


def _set_partition_moves(n: int, k: int) -> Iterator[Move]:
    if not 1 < k < n:
        return
    if k % 2 == 0:
        yield from _gen0_even(n, k)
    else:
        yield from _gen0_odd(n, k)


def _gen0_even(n: int, k: int) -> Iterator[Move]:
    """S(n,k,0), even k."""
    if k > 2:
        yield from _gen0_odd(n - 1, k - 1)  # S(n-1, k-1, 0).(k-1)
    yield n - 1, k - 1
    if k < n - 1:
        yield from _gen1_even(n - 1, k)  # S(n-1, k, 1).(k-1)
        yield n, k - 2
        yield from _neg1_even(n - 1, k)  # S'(n-1, k, 1).(k-2)
        for i in range(k - 3, 0, -2):
            yield n, i
            yield from _gen1_even(n - 1, k)  # S(n-1, k, 1).i
            yield n, i - 1
            yield from _neg1_even(n - 1, k)  # S'(n-1, k, 1).(i-1)
    else:
        yield n, k - 2
        for i in range(k - 3, 0, -2):
            yield n, i
            yield n, i - 1


def _neg0_even(n: int, k: int) -> Iterator[Move]:
    """S'(n,k,0), even k."""
    if k < n - 1:
        for i in range(1, k - 2, 2):
            yield from _gen1_even(n - 1, k)  # S(n-1, k, 1).(i-1)
            yield n, i
            yield from _neg1_even(n - 1, k)  # S'(n-1, k, 1).i
            yield n, i + 1
        yield from _gen1_even(n - 1, k)  # S(n-1, k, 1).(k-2)
        yield n, k - 1
        yield from _neg1_even(n - 1, k)  # S'(n-1, k, 1).(k-1)
    else:
        for i in range(1, k - 2, 2):
            yield n, i
            yield n, i + 1
        yield n, k - 1
    yield n - 1, 0
    if k > 3:
        yield from _neg0_odd(n - 1, k - 1)  # S'(n-1, k-1, 0).(k-1)


def _gen1_even(n: int, k: int) -> Iterator[Move]:
    """S(n,k,1), even k."""
    if k > 3:
        yield from _gen1_odd(n - 1, k - 1)
    yield k, k - 1
    if k < n - 1:
        yield from _neg1_even(n - 1, k)
        yield n, k - 2
        yield from _gen1_even(n - 1, k)
        for i in range(k - 3, 0, -2):
            yield n, i
            yield from _neg1_even(n - 1, k)
            yield n, i - 1
            yield from _gen1_even(n - 1, k)
    else:
        yield n, k - 2
        for i in range(k - 3, 0, -2):
            yield n, i
            yield n, i - 1


def _neg1_even(n: int, k: int) -> Iterator[Move]:
    """S'(n,k,1), even k."""
    if k < n - 1:
        for i in range(1, k - 2, 2):
            yield from _neg1_even(n - 1, k)
            yield n, i
            yield from _gen1_even(n - 1, k)
            yield n, i + 1
        yield from _neg1_even(n - 1, k)
        yield n, k - 1
        yield from _gen1_even(n - 1, k)
    else:
        for i in range(1, k - 2, 2):
            yield n, i
            yield n, i + 1
        yield n, k - 1
    yield k, 0
    if k > 3:
        yield from _neg1_odd(n - 1, k - 1)


def _gen0_odd(n: int, k: int) -> Iterator[Move]:
    """S(n,k,0), odd k."""
    yield from _gen1_even(n - 1, k - 1)
    yield k, k - 1
    if k < n - 1:
        yield from _neg1_odd(n - 1, k)
        for i in range(k - 2, 0, -2):
            yield n, i
            yield from _gen1_odd(n - 1, k)
            yield n, i - 1
            yield from _neg1_odd(n - 1, k)
    else:
        for i in range(k - 2, 0, -2):
            yield n, i
            yield n, i - 1


def _neg0_odd(n: int, k: int) -> Iterator[Move]:
    """S'(n,k,0), odd k."""
    if k < n - 1:
        for i in range(1, k - 1, 2):
            yield from _gen1_odd(n - 1, k)
            yield n, i
            yield from _neg1_odd(n - 1, k)
            yield n, i + 1
        yield from _gen1_odd(n - 1, k)
    else:
        for i in range(1, k - 1, 2):
            yield n, i
            yield n, i + 1
    yield k, 0
    yield from _neg1_even(n - 1, k - 1)


def _gen1_odd(n: int, k: int) -> Iterator[Move]:
    """S(n,k,1), odd k."""
    yield from _gen0_even(n - 1, k - 1)
    yield n - 1, k - 1
    if k < n - 1:
        yield from _gen1_odd(n - 1, k)
        for i in range(k - 2, 0, -2):
            yield n, i
            yield from _neg1_odd(n - 1, k)
            yield n, i - 1
            yield from _gen1_odd(n - 1, k)
    else:
        for i in range(k - 2, 0, -2):
            yield n, i
            yield n, i - 1


def _neg1_odd(n: int, k: int) -> Iterator[Move]:
    """S'(n,k,1), odd k."""
    if k < n - 1:
        for i in range(1, k - 1, 2):
            yield from _neg1_odd(n - 1, k)
            yield n, i
            yield from _gen1_odd(n - 1, k)
            yield n, i + 1
        yield from _neg1_odd(n - 1, k)
    else:
        for i in range(1, k - 1, 2):
            yield n, i
            yield n, i + 1
    yield n - 1, 0
    yield from _neg0_even(n - 1, k - 1)
