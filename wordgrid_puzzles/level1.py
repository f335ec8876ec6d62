"""Compare two columns of location IDs: pairwise distance and similarity."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Iterable, Sequence


def parse_lists(lines: Iterable[str]) -> tuple[list[int], list[int]]:
    """Split lines of two whitespace-separated integers into two columns.

    Blank lines are skipped; a line with fewer than two integers raises ValueError.
    """
    left: list[int] = []
    right: list[int] = []
    for line in lines:
        fields = line.split()
        if not fields:
            continue
        if len(fields) < 2:
            raise ValueError(f"expected two numbers, got {line!r}")
        left.append(int(fields[0]))
        right.append(int(fields[1]))
    return left, right


def total_distance(left: Sequence[int], right: Sequence[int]) -> int:
    """Sum of absolute differences between the sorted columns, paired in order."""
    if len(left) != len(right):
        raise ValueError("both lists must have the same length")
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def similarity_score(left: Iterable[int], right: Iterable[int]) -> int:
    """Sum of each left value times how often it appears in the right column."""
    counts = Counter(right)
    return sum(value * counts[value] for value in left)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compare two location ID lists.")
    parser.add_argument("path", nargs="?", default="input.txt")
    parser.add_argument("--part", type=int, choices=(1, 2), default=2)
    args = parser.parse_args(argv)

    try:
        with open(args.path, encoding="utf-8") as handle:
            left, right = parse_lists(handle)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.part == 1:
        print(total_distance(left, right))
    else:
        print(similarity_score(left, right))
    return 0


if __name__ == "__main__":
    sys.exit(main())