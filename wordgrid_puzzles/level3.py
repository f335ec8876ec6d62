"""Sum the valid mul(X,Y) instructions in corrupted memory."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Sequence

_INSTRUCTION = re.compile(r"do\(\)|don't\(\)|mul\(([0-9]{1,3}),([0-9]{1,3})\)")


def sum_multiplications(lines: Iterable[str], conditionals: bool = True) -> int:
    """Sum the products of every valid mul(X,Y), X and Y of 1 to 3 digits.

    With conditionals, don't() disables and do() re-enables later
    instructions; the state carries across lines.
    """
    total = 0
    enabled = True
    for line in lines:
        for match in _INSTRUCTION.finditer(line):
            instruction = match.group(0)
            if instruction == "do()":
                enabled = True
            elif instruction == "don't()":
                enabled = False
            elif enabled or not conditionals:
                total += int(match.group(1)) * int(match.group(2))
    return total


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sum mul instructions.")
    parser.add_argument("path", nargs="?", default="input3.txt")
    parser.add_argument("--part", type=int, choices=(1, 2), default=2)
    args = parser.parse_args(argv)

    try:
        with open(args.path, encoding="utf-8") as handle:
            total = sum_multiplications(handle, conditionals=args.part == 2)
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(total)
    return 0


if __name__ == "__main__":
    sys.exit(main())