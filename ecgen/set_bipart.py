"""Partitions of a set into exactly two blocks.

Specialisation of Ruskey's Gray code (see ``ecgen.set_partition``) to
``k == 2``. With two blocks a move is a plain label flip, so the generator
yields only the position whose label changes. Sessions start from
``0^(n-1) 1`` and visit ``stirling2nd(n, 2) == 2**(n-1) - 1`` strings.
"""

from __future__ import annotations

from typing import Iterator, List

from ecgen.exceptions import check_subset_size
from ecgen.logging import get_logger, log_session

logger = get_logger(__name__)


def set_bipart_gen(n: int) -> Iterator[int]:
    """Generate the label flips visiting all two-block partitions.

    Raises:
        InvalidArgument: If ``n < 2``.
    """
    check_subset_size(n, 2)
    log_session(logger, "Bipartition", n=n)
    return _shift(_gen0(n))


def set_bipart(n: int) -> Iterator[List[int]]:
    """Generate all two-block partitions as one in-place RGS list."""
    flips = set_bipart_gen(n)
    return _bipart_states([0] * (n - 1) + [1], flips)


def _bipart_states(rgs: List[int], flips: Iterator[int]) -> Iterator[List[int]]:
    yield rgs
    for pos in flips:
        rgs[pos] = 1 - rgs[pos]
        yield rgs


def _shift(flips: Iterator[int]) -> Iterator[int]:
    for x in flips:
        yield x - 1


def _gen0(n: int) -> Iterator[int]:
    """S(n,2,0)."""
    if n < 3:
        return
    yield n - 1
    yield from _gen1(n - 1)  # S(n-1, 2, 1).1
    yield n
    yield from _neg1(n - 1)  # S'(n-1, 2, 1).0


def _gen1(n: int) -> Iterator[int]:
    """S(n,2,1)."""
    if n < 3:
        return
    yield 2
    yield from _neg1(n - 1)
    yield n
    yield from _gen1(n - 1)


def _neg1(n: int) -> Iterator[int]:
    """S'(n,2,1)."""
    if n < 3:
        return
    yield from _neg1(n - 1)
    yield n
    yield from _gen1(n - 1)
    yield 2
