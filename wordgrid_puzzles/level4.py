"""Word search: count XMAS in any direction and X-shaped MAS crosses."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

_DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0), (1, 1), (1, -1), (-1, 1), (-1, -1))
_WORD = "XMAS"
_MAS_ENDS = {"MS", "SM"}


class GridError(ValueError):
    """Raised when the grid rows do not all have the same length."""


def read_grid(lines: Iterable[str]) -> list[str]:
    """Strip line breaks, drop empty lines and check that the grid is rectangular."""
    grid = [row for row in (line.replace("\r", "").replace("\n", "") for line in lines) if row]
    if grid and any(len(row) != len(grid[0]) for row in grid):
        raise GridError("Inconsistent row lengths.")
    return grid


def _spells(grid: Sequence[str], row: int, col: int, dr: int, dc: int) -> bool:
    rows = len(grid)
    for step, letter in enumerate(_WORD):
        r, c = row + step * dr, col + step * dc
        if not (0 <= r < rows and 0 <= c < len(grid[r])) or grid[r][c] != letter:
            return False
    return True


def count_xmas(grid: Sequence[str]) -> int:
    """Occurrences of XMAS horizontally, vertically or diagonally, either way round."""
    return sum(
        1
        for r, row in enumerate(grid)
        for c in range(len(row))
        for dr, dc in _DIRECTIONS
        if _spells(grid, r, c, dr, dc)
    )


def count_x_mas(grid: Sequence[str]) -> int:
    """Number of A cells whose two diagonals both read MAS or SAM."""
    count = 0
    for r in range(1, len(grid) - 1):
        above, row, below = grid[r - 1], grid[r], grid[r + 1]
        for c in range(1, len(row) - 1):
            if row[c] != "A":
                continue
            if (
                above[c - 1] + below[c + 1] in _MAS_ENDS
                and above[c + 1] + below[c - 1] in _MAS_ENDS
            ):
                count += 1
    return count


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Search the word grid.")
    parser.add_argument("path", nargs="?", default="input4.txt")
    parser.add_argument("--part", type=int, choices=(1, 2), default=2)
    args = parser.parse_args(argv)

    try:
        with open(args.path, encoding="utf-8", newline="") as handle:
            grid = read_grid(handle)
    except (OSError, GridError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(count_xmas(grid) if args.part == 1 else count_x_mas(grid))
    return 0


if __name__ == "__main__":
    sys.exit(main())