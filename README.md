# cactpot

A helper for the Mini Cactpot scratch card. The card is a 3×3 grid that holds
the numbers 1 to 9, each of them once. You reveal up to four cells and then
pick one of the eight lines: three rows, three columns and two diagonals. The
payout depends on the sum of the three numbers on the line you pick.

From the cells you have revealed so far, `cactpot` works out every sum each
line can still have and the payout for each of those sums. For every line it
then gives the average payout, the best possible payout and how likely that
best payout is. Once four cells are revealed, it marks the line that scores
best.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
cactpot [BOARD] [--sort {avg,max}] [--hover LINE]
```

`BOARD` lists the cells from left to right and top to bottom, one character
per cell:

- the digits `1` to `9` are revealed numbers;
- `.`, `-`, `_` or `0` is a hidden cell;
- spaces, tabs, newlines, `,`, `|` and `/` are ignored, so `1.. .5. ..9` and
  `1..,.5.,..9` mean the same board.

If fewer than nine cells are given, the rest are hidden. Leaving `BOARD` out
means an empty board. A board with more than nine cells, a repeated number or
any other character is rejected with an error message.

The command prints the grid and then the payout table:

```
$ cactpot 1...5...9
 1   .   .
 .   5   .
 .   .   9

Line       Avg    Max  Max %
...
```

In the grid, hidden cells are shown as `.`. Once four cells are revealed the
cells of the best line are wrapped in `[ ]`.

Options:

- `--sort avg` or `--sort max` (default `max`) chooses the column by which
  the table is ordered, highest first, and by which the best line is chosen.
  Lines that tie keep their fixed order.
- `--hover LINE` highlights one line in the grid by wrapping its cells in
  `( )`. `LINE` is 1 to 8, in the fixed order Row 1, Row 2, Row 3, Col 1,
  Col 2, Col 3, Diag 1, Diag 2. A cell that is both highlighted and on the
  best line is shown in `{ }`.

The table has one line for each board line, with the columns `Line`, `Avg`
(the average payout, rounded down), `Max` (the best possible payout) and
`Max %` (the share of possible sums that give the best payout).

## Library

`cactpot.logic` holds the board and the payout calculations.

```python
from cactpot.logic import Board, SortBy, payout_for_sum, possible_line_sums

payout_for_sum(6)    # 10000
payout_for_sum(5)    # 0, a sum that can never occur

board = Board().with_cell(0, 1)
sums = possible_line_sums(board)
sums[0]              # the 13 sums the top row can still reach, 6 to 18
```

`Board` is immutable and always holds nine cells, each an `int` from 1 to 9
or `None`. Its members:

- `cells` – the nine cell values, left to right and top to bottom
- `used()` – the numbers already revealed, in cell order
- `filled_count()` / `max_inputs_reached()` – how many cells are revealed,
  and whether the limit of four has been reached
- `with_cell(index, value)` – a new board with one cell replaced
- `possible_line_payouts()` – the possible payouts for each of the eight lines
- `rows(sort_by)` – one `TableRow` per line (`index`, `line_label`, `avg`,
  `max`, `percent`), sorted by a `SortBy` choice (`SortBy.AVG` or
  `SortBy.MAX`)
- `best_line_cells(sort_by)` – the cell indices of the best line once four
  cells are revealed, otherwise `None`

Creating a board with a value outside 1 to 9 raises `ValueError`;
`with_cell` with an index outside 0 to 8 raises `IndexError`. A `Board` does
not itself reject repeated numbers; `cactpot.cli.parse_board` does.

`prepare_rows(payouts)` builds the table rows from a list of payouts per
line, and `sort_rows(rows, sort_by)` orders them, highest first.

`cactpot.grid` holds the cell editing rules:

- `next_number(board, index, direction)` steps a cell to the next or previous
  number not used elsewhere on the board; an empty cell takes the smallest
  free number going `ScrollDirection.UP` and the largest going
  `ScrollDirection.DOWN`. At either end the value stays as it is.
- `scroll_direction(delta)` turns a scroll delta into a direction: negative
  is up, anything else down.
- `scroll_cell(board, index, delta)` and `clear_cell(board, index)` return
  the board after a scroll or after emptying a cell.
- `cell_editable(board, index)` tells whether a cell may still change: once
  four cells are revealed, only those four can. `scroll_cell` and
  `clear_cell` return the board unchanged for a cell that may not.

`cactpot.cli` also offers `parse_board(text)`, `render_grid(board, sort_by,
hovered)` and `render_table(board, sort_by)`, which the command uses.

## What it does not do

There is no interactive screen. The command shows a single board given on
the command line; stepping through numbers with a scroll wheel or clearing
cells by pointing at them is available only through the functions in
`cactpot.grid`, for a caller to drive.

## Payouts

| Sum | Payout | Sum | Payout |
|----:|-------:|----:|-------:|
|   6 |  10000 |  16 |     72 |
|   7 |     36 |  17 |    180 |
|   8 |    720 |  18 |    119 |
|   9 |    360 |  19 |     36 |
|  10 |     80 |  20 |    306 |
|  11 |    252 |  21 |   1080 |
|  12 |    108 |  22 |    144 |
|  13 |     72 |  23 |   1800 |
|  14 |     54 |  24 |   3600 |
|  15 |    180 |     |        |