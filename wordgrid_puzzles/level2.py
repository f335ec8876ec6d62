"""Classify reactor reports as safe, optionally tolerating one bad level."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence


def parse_reports(lines: Iterable[str]) -> list[list[int]]:
    """Parse each line into a report of integer levels."""
    return [[int(token) for token in line.split()] for line in lines]


def is_safe(levels: Sequence[int]) -> bool:
    """True if levels strictly move one way by steps of 1 to 3."""
    if len(levels) < 2:
        return False
    diffs = [b - a for a, b in zip(levels, levels[1:])]
    return all(1 <= d <= 3 for d in diffs) or all(-3 <= d <= -1 for d in diffs)


def is_safe_with_dampener(levels: Sequence[int]) -> bool:
    """True if the report is safe, or becomes safe when one level is removed."""
    levels = list(levels)
    if is_safe(levels):
        return True
    return any(
        is_safe(levels[:index] + levels[index + 1 :]) for index in range(len(levels))
    )


def count_safe(reports: Iterable[Sequence[int]], dampener: bool = True) -> int:
    """Number of safe reports."""
    check = is_safe_with_dampener if dampener else is_safe
    return sum(1 for report in reports if check(report))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count safe reports.")
    parser.add_argument("path", nargs="?", default="input2.txt")
    parser.add_argument("--part", type=int, choices=(1, 2), default=2)
    args = parser.parse_args(argv)

    try:
        with open(args.path, encoding="utf-8") as handle:
            reports = parse_reports(handle)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(count_safe(reports, dampener=args.part == 2))
    return 0


if __name__ == "__main__":
    sys.exit(main())