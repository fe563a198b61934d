"""Command-line front end: show the board and the payout table."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from cactpot.logic import LINES, MAX_NUM, MIN_NUM, NUM_CELLS, GRID_SIZE, Board, SortBy

_EMPTY_MARKS = frozenset(".-_0")
_SEPARATORS = frozenset(" \t\n,|/")


def parse_board(text: str) -> Board:
    """Read a board from digits, one per cell; '.', '-', '_' or '0' mark empty cells."""
    cells: list[Optional[int]] = []
    for char in text:
        if char in _SEPARATORS:
            continue
        if char in _EMPTY_MARKS:
            cells.append(None)
        elif char.isdigit() and MIN_NUM <= int(char) <= MAX_NUM:
            cells.append(int(char))
        else:
            raise ValueError(f"unexpected character in board: {char!r}")
    if len(cells) > NUM_CELLS:
        raise ValueError(f"board has more than {NUM_CELLS} cells")
    revealed = [n for n in cells if n is not None]
    if len(revealed) != len(set(revealed)):
        raise ValueError("board repeats a number")
    return Board(cells)


def render_grid(
    board: Board,
    sort_by: SortBy,
    hovered: Optional[Sequence[int]] = None,
) -> str:
    """Draw the grid; best-line cells in [ ], hovered in ( ), both in { }."""
    best = set(board.best_line_cells(sort_by) or ())
    hover = set(hovered or ())
    rendered = []
    for index, value in enumerate(board.cells):
        text = "." if value is None else str(value)
        if index in best and index in hover:
            left, right = "{", "}"
        elif index in best:
            left, right = "[", "]"
        elif index in hover:
            left, right = "(", ")"
        else:
            left, right = " ", " "
        rendered.append(f"{left}{text}{right}")
    lines = [
        " ".join(rendered[start:start + GRID_SIZE])
        for start in range(0, NUM_CELLS, GRID_SIZE)
    ]
    return "\n".join(lines)


def render_table(board: Board, sort_by: SortBy) -> str:
    """Draw the payout table, one line per board line, sorted as requested."""
    lines = [f"{'Line':<7}{'Avg':>7}{'Max':>7}{'Max %':>7}"]
    for row in board.rows(sort_by):
        percent = f"{row.percent:.0f}%"
        lines.append(f"{row.line_label:<7}{row.avg:>7}{row.max:>7}{percent:>7}")
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="cactpot",
        description="Show expected Mini Cactpot payouts for a partly revealed board.",
    )
    parser.add_argument(
        "board",
        nargs="?",
        default="",
        help="cells left to right, top to bottom; digits or '.' for hidden",
    )
    parser.add_argument(
        "--sort",
        choices=[s.value for s in SortBy],
        default=SortBy.MAX.value,
        help="column to rank lines by",
    )
    parser.add_argument(
        "--hover",
        type=int,
        choices=range(1, len(LINES) + 1),
        metavar="LINE",
        help="highlight a line by its number in the table order (1-8)",
    )
    args = parser.parse_args(argv)
    try:
        board = parse_board(args.board)
    except ValueError as exc:
        parser.error(str(exc))
    sort_by = SortBy(args.sort)
    hovered = LINES[args.hover - 1] if args.hover else None
    out = sys.stdout
    out.write(render_grid(board, sort_by, hovered) + "\n\n")
    out.write(render_table(board, sort_by) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())