# wordgrid_puzzles

Solvers for four small text puzzles, usable from the command line or as a
library. No dependencies beyond the Python standard library (3.10 or later).

## Install

```
pip install .
```

## Commands

Each puzzle has its own command. Each takes an optional input path and a
`--part` option (`1` or `2`, default `2`), reads the file and prints the answer.

```
wordgrid-level1 [PATH] [--part {1,2}]    # PATH defaults to input.txt
wordgrid-level2 [PATH] [--part {1,2}]    # PATH defaults to input2.txt
wordgrid-level3 [PATH] [--part {1,2}]    # PATH defaults to input3.txt
wordgrid-level4 [PATH] [--part {1,2}]    # PATH defaults to input4.txt
```

- **level1**: two whitespace-separated columns of integers per line.
  Part 1 prints the total distance: both columns sorted, paired in order,
  absolute differences summed. Part 2 prints the similarity score: each left
  number times how often it appears in the right column, summed.
- **level2**: one report of integer levels per line. A report is safe when
  its levels strictly increase or strictly decrease by steps of 1 to 3.
  Part 1 counts safe reports; part 2 also counts reports that become safe
  when one level is removed.
- **level3**: corrupted memory text. Part 1 sums the products of every valid
  `mul(X,Y)` instruction, X and Y having 1 to 3 digits. Part 2 does the same
  but honours `don't()` and `do()`, which switch later instructions off and
  on, across line breaks.
- **level4**: a rectangular letter grid. Part 1 counts `XMAS` horizontally,
  vertically or diagonally, forwards or backwards. Part 2 counts "X-MAS"
  shapes: an `A` whose two diagonals both read `MAS` or `SAM`.

If the file cannot be read, or its contents are malformed (a line in level1
with fewer than two numbers, a non-integer token, grid rows of differing
lengths), the command prints `Error: ...` to standard error and exits with
status 1.

## Library use

```python
from wordgrid_puzzles import level1, level2, level3, level4

left, right = level1.parse_lists(["3   4", "4   3", "2   5"])
level1.total_distance(left, right)
level1.similarity_score(left, right)

reports = level2.parse_reports(["7 6 4 2 1", "1 3 2 4 5"])
level2.is_safe(reports[0])
level2.is_safe_with_dampener(reports[1])
level2.count_safe(reports, dampener=True)

level3.sum_multiplications(["xmul(2,4)don't()mul(5,5)do()mul(8,5)"],
                           conditionals=True)

grid = level4.read_grid(["MMS", "MAS", "MMS"])
level4.count_xmas(grid)
level4.count_x_mas(grid)
```

Notes:

- `level1.parse_lists` skips blank lines and raises `ValueError` for a line
  with fewer than two numbers; `level1.total_distance` raises `ValueError`
  when the columns differ in length.
- `level2.is_safe` returns `False` for reports with fewer than two levels.
- `level4.read_grid` strips line breaks, drops blank lines and raises
  `level4.GridError` (a `ValueError`) when the rows differ in length.

## Tests

```
pip install .[test]
pytest
```