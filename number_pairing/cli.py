"""Command-line entry point.

Usage:
    number-pairing --sum 8
    number-pairing --sum 12.5 --no-other --verbose
"""

from __future__ import annotations

import argparse
from typing import Sequence

from .report import format_result, format_rounds
from .search import solve
from .utils import DEFAULT_SUM, MAX_OTHER_DISPLAYED, MAX_ROUNDS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="number-pairing",
        description="Split a sum into two numbers maximizing |a-b| * a * b",
    )
    parser.add_argument('--sum', type=float, default=DEFAULT_SUM, help='Fixed sum of the two numbers')
    parser.add_argument('--no-other', action='store_true', help='Do not collect other top results')
    parser.add_argument('--max-other', type=int, default=MAX_OTHER_DISPLAYED,
                        help='Number of other top results to print')
    parser.add_argument('--max-rounds', type=int, default=MAX_ROUNDS, help='Cap on refinement rounds')
    parser.add_argument('--verbose', action='store_true', help='Print every refinement round')
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.sum < 0:
        parser.error("--sum must be non-negative")
    if args.max_rounds < 1:
        parser.error("--max-rounds must be at least 1")

    result = solve(args.sum, not args.no_other, max_rounds=args.max_rounds)

    if args.verbose:
        print(format_rounds(result))
    print(format_result(result, max_other=args.max_other))
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
