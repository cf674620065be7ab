"""Binary reflected Gray code (BRGC).

The reflected code for ``n`` bits is defined recursively as the code for
``n - 1`` bits, a flip of bit ``n - 1``, then the ``n - 1`` bit code again.
Unrolled, the bit flipped at step ``t`` (1-based) is the index of the lowest
set bit of ``t``, so each step costs O(1).

Example:
    >>> lst = [0, 0, 0]
    >>> for i in brgc_gen(len(lst)):
    ...     lst[i] ^= 1
"""

from __future__ import annotations

from typing import Callable, Iterator, List, MutableSequence

from ecgen.exceptions import check_size
from ecgen.logging import get_logger, log_session

logger = get_logger(__name__)


def brgc_gen(n: int) -> Iterator[int]:
    """Generate the bit flips of the reflected Gray code.

    Args:
        n: Number of bits.

    Returns:
        Iterator over the ``2**n - 1`` indices to flip, starting from the
        all-zero codeword.

    Raises:
        InvalidArgument: If ``n`` is negative.
    """
    check_size("n", n)
    log_session(logger, "BRGC", n=n)
    return _brgc_flips(n)


def _brgc_flips(n: int) -> Iterator[int]:
    for t in range(1, 1 << n):
        yield (t & -t).bit_length() - 1


def brgc(
    n: int, factory: Callable[[List[int]], MutableSequence] = list
) -> Iterator[MutableSequence]:
    """Generate all ``2**n`` codewords in a single in-place container.

    The container is created as ``factory([0] * n)`` and yielded once per
    codeword, starting with all zeros. Exactly one element changes between
    yields; flipped values keep their element type, so ``bytearray``,
    lists of bools and numpy arrays work as well as lists of ints.

    Args:
        n: Number of bits.
        factory: Callable building the container from a list of zeros.

    Raises:
        InvalidArgument: If ``n`` is negative.
    """
    flips = brgc_gen(n)
    return _brgc_states(factory([0] * n), flips)


def _brgc_states(lst: MutableSequence, flips: Iterator[int]) -> Iterator[MutableSequence]:
    yield lst
    for i in flips:
        lst[i] = type(lst[i])(not lst[i])
        yield lst
