"""Global pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Any, Callable, Hashable, Iterable, List

import pytest


@pytest.fixture
def snapshot() -> Callable[..., List[Hashable]]:
    """Return a helper that copies every state of a materializing session.

    Materializing sessions yield the same container each time, so states must
    be copied before the session advances.
    """

    def _snapshot(states: Iterable[Any], key: Callable[[Any], Hashable] = tuple):
        return [key(state) for state in states]

    return _snapshot


def diff_positions(a: Any, b: Any) -> List[int]:
    """Return the positions where two equal-length states differ."""
    return [i for i, (x, y) in enumerate(zip(a, b)) if x != y]


@pytest.fixture
def diff() -> Callable[[Any, Any], List[int]]:
    return diff_positions
