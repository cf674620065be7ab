"""Command-line interface for ecgen."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from itertools import islice
from time import perf_counter
from typing import Any, Callable, Iterator, List, Optional

from ecgen.combin import emk
from ecgen.config import RENDER_CONFIG
from ecgen.counting import bell, comb, factorial, stirling2nd
from ecgen.exceptions import InvalidArgument, check_size, check_subset_size
from ecgen.gray_code import brgc
from ecgen.logging import get_logger, set_global_log_level
from ecgen.perm import ehr, sjt
from ecgen.set_bipart import set_bipart
from ecgen.set_partition import set_partition

logger = get_logger(__name__)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _plural(n: int, singular: str, plural: Optional[str] = None) -> str:
    """Return grammatically correct unit for count n."""
    if n == 1:
        return singular
    return plural or (singular + "s")


def _render_items(state: Any) -> str:
    return " ".join(str(x) for x in state)


def _render_rgs(state: Any) -> str:
    if all(x < 10 for x in state):
        return "".join(str(x) for x in state)
    return _render_items(state)


def _session(args: argparse.Namespace) -> tuple[Iterator[Any], int, Callable[[Any], str]]:
    """Build the materializing session, its expected size and a state renderer.

    Raises:
        InvalidArgument: If the command's sizes or the output limit are invalid.
    """
    if args.limit is not None:
        check_size("limit", args.limit)
    command = args.command
    if command == "gray":
        return brgc(args.n), 2 ** args.n, RENDER_CONFIG.render_bits
    if command == "combin":
        check_subset_size(args.n, args.k)
        lst = [1] * args.k + [0] * (args.n - args.k)
        return emk(lst, args.k), comb(args.n, args.k), RENDER_CONFIG.render_bits
    if command in ("sjt", "ehr"):
        check_size("n", args.n)
        items: List[Any] = list(args.items) if args.items else list(range(args.n))
        if len(items) != args.n:
            raise InvalidArgument(
                f"expected {args.n} items, got {len(items)}"
            )
        engine = sjt if command == "sjt" else ehr
        return engine(items), factorial(args.n), _render_items
    if command == "setpart":
        session = set_partition(args.n, args.k)
        total = bell(args.n) if args.k is None else stirling2nd(args.n, args.k)
        return session, total, _render_rgs
    if command == "bipart":
        return set_bipart(args.n), stirling2nd(args.n, 2), _render_rgs
    raise InvalidArgument(f"unknown command: {command}")


def _run(args: argparse.Namespace) -> None:
    """Run one enumeration command and print its states or count."""
    _start_time = perf_counter()
    try:
        session, expected, render = _session(args)
    except InvalidArgument as e:
        logger.error(f"Invalid arguments: {e}")
        print(f"❌ ERROR: {e}")
        sys.exit(1)

    if args.count:
        visited = sum(1 for _ in session)
        print(f"{visited} {_plural(visited, 'state')} (expected {expected})")
    else:
        limit = RENDER_CONFIG.clamp_states(expected) if args.limit is None else args.limit
        if limit < expected:
            logger.warning(f"Output truncated to {limit} of {expected} states")
        if args.json:
            states = [list(state) for state in islice(session, limit)]
            print(json.dumps(states))
        else:
            for state in islice(session, limit):
                print(render(state))

    _elapsed = perf_counter() - _start_time
    logger.info(
        f"Enumerated {args.command} ({expected} {_plural(expected, 'state')}) in {_format_duration(_elapsed)}"
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``ecgen`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="ecgen",
        description="Enumerate combinatorial objects by minimal changes.",
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress informational logs"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{gray,combin,sjt,ehr,setpart,bipart}",
        help="Available commands",
    )

    gray_parser = subparsers.add_parser("gray", help="Binary reflected Gray code")
    gray_parser.add_argument("n", type=int, help="Number of bits")

    combin_parser = subparsers.add_parser(
        "combin", help="Combinations by revolving door (EMK)"
    )
    combin_parser.add_argument("n", type=int, help="Length of the binary string")
    combin_parser.add_argument("k", type=int, help="Number of ones")

    sjt_parser = subparsers.add_parser(
        "sjt", help="Permutations by adjacent transpositions"
    )
    ehr_parser = subparsers.add_parser(
        "ehr", help="Permutations by star transpositions (Ehrlich)"
    )
    for p in (sjt_parser, ehr_parser):
        p.add_argument("n", type=int, help="Number of elements")
        p.add_argument(
            "--items",
            nargs="+",
            default=None,
            help="Elements to permute (default: 0..n-1)",
        )

    setpart_parser = subparsers.add_parser(
        "setpart", help="Set partitions as restricted growth strings"
    )
    setpart_parser.add_argument("n", type=int, help="Number of elements")
    setpart_parser.add_argument(
        "k", type=int, nargs="?", default=None, help="Number of blocks (default: any)"
    )

    bipart_parser = subparsers.add_parser(
        "bipart", help="Set partitions into two blocks"
    )
    bipart_parser.add_argument("n", type=int, help="Number of elements")

    for p in (
        gray_parser,
        combin_parser,
        sjt_parser,
        ehr_parser,
        setpart_parser,
        bipart_parser,
    ):
        p.add_argument(
            "--count",
            "-c",
            action="store_true",
            help="Print only the number of states visited",
        )
        p.add_argument("--json", action="store_true", help="Print states as JSON")
        p.add_argument(
            "--limit",
            "-l",
            type=int,
            default=None,
            help=f"Maximum number of states to print (default: {RENDER_CONFIG.max_states})",
        )

    # Determine effective arguments (support both direct calls and module entrypoint)
    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    _run(args)


if __name__ == "__main__":
    main()
