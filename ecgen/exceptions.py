"""Error types and argument validation shared by the enumeration engines."""

from __future__ import annotations


class InvalidArgument(ValueError):
    """Raised when an enumeration session cannot be constructed.

    Covers negative sizes, ``k > n``, and initial containers that do not hold
    the expected starting configuration. Raised eagerly at construction time;
    a session that constructs successfully never raises while iterating.
    """


def check_size(name: str, value: int) -> int:
    """Validate a non-negative integer size parameter.

    Args:
        name: Parameter name used in the error message.
        value: Value to validate.

    Returns:
        The validated value.

    Raises:
        InvalidArgument: If ``value`` is not an integer or is negative.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidArgument(f"{name} must be non-negative, got {value}")
    return value


def check_subset_size(n: int, k: int) -> None:
    """Validate ``0 <= k <= n``.

    Raises:
        InvalidArgument: If either size is invalid or ``k > n``.
    """
    check_size("n", n)
    check_size("k", k)
    if k > n:
        raise InvalidArgument(f"k must not exceed n, got n={n}, k={k}")
