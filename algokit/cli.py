"""Command line entry point: LCS length and array sorting."""

from __future__ import annotations

import argparse
from typing import List, Optional

from algokit.dynamic import lcs_length
from algokit.sorting import merge_sort, quick_sort

DEFAULT_ARRAY = (5, 3, 8, 4, 2, 7, 1, 6)

_SORTERS = {"quick": quick_sort, "merge": merge_sort}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="algokit", description="Classic algorithms.")
    commands = parser.add_subparsers(dest="command", required=True)

    lcs = commands.add_parser("lcs", help="length of the longest common subsequence")
    lcs.add_argument("first", nargs="?", help="first string (prompted if omitted)")
    lcs.add_argument("second", nargs="?", help="second string (prompted if omitted)")

    sort = commands.add_parser("sort", help="sort integers")
    sort.add_argument("--method", choices=sorted(_SORTERS), default="quick")
    sort.add_argument("numbers", nargs="*", type=int)
    return parser


def _read_word(prompt: str) -> str:
    try:
        tokens = input(prompt).split()
    except EOFError:
        return ""
    return tokens[0] if tokens else ""


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line tool and return its exit status."""
    args = _build_parser().parse_args(argv)
    if args.command == "lcs":
        first = args.first if args.first is not None else _read_word("Enter first string: ")
        second = args.second if args.second is not None else _read_word("Enter second string: ")
        print(f"Length of LCS: {lcs_length(first, second)}")
    else:
        numbers = args.numbers or list(DEFAULT_ARRAY)
        ordered = _SORTERS[args.method](numbers)
        print("Sorted array: " + " ".join(map(str, ordered)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())