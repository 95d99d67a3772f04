"""Command-line front end for a few of the array drills."""

import argparse
from collections.abc import Sequence

from dsadrills.arrays_easy import (
    missing_number_hashing,
    missing_number_linear,
    union_merge,
    union_sorted,
)
from dsadrills.arrays_medium import (
    longest_positive_subarray_with_sum,
    longest_subarray_with_sum,
)


def _joined(values: Sequence[int]) -> str:
    return " ".join(str(value) for value in values)


def _run_missing(args: argparse.Namespace) -> None:
    print(
        "Missing number using brute force solution : "
        f"{missing_number_linear(args.numbers)}"
    )
    print(f"missing value using hashing : {missing_number_hashing(args.numbers)}")


def _run_union(args: argparse.Namespace) -> None:
    print(_joined(union_sorted(args.first, args.second)))
    print("Using 2 pointer approach")
    print(_joined(union_merge(args.first, args.second)))


def _run_longest(args: argparse.Namespace) -> None:
    positive_only = longest_positive_subarray_with_sum(args.numbers, args.k)
    any_sign = longest_subarray_with_sum(args.numbers, args.k)
    print(f"Longest Subarray Length is (solution for +ve numbers) is {positive_only}")
    print(f"Longest Subarray Length is for both -ve and +ve numbers {any_sign}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dsadrills", description="Run array drills on integers."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    missing = commands.add_parser(
        "missing", help="find the value of 0..n absent from n numbers"
    )
    missing.add_argument("numbers", nargs="*", type=int)
    missing.set_defaults(handler=_run_missing)

    union = commands.add_parser("union", help="union of two integer lists")
    union.add_argument("--first", nargs="*", type=int, default=[])
    union.add_argument("--second", nargs="*", type=int, default=[])
    union.set_defaults(handler=_run_union)

    longest = commands.add_parser(
        "longest", help="longest subarray adding up to k"
    )
    longest.add_argument("k", type=int)
    longest.add_argument("numbers", nargs="*", type=int)
    longest.set_defaults(handler=_run_longest)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments, run the chosen drill and print its results."""
    args = _build_parser().parse_args(argv)
    args.handler(args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())