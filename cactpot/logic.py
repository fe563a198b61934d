"""Board state, line sums and payout statistics for the Mini Cactpot."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from itertools import combinations
from typing import Iterable, Optional, Sequence

MIN_NUM = 1
MAX_NUM = 9
GRID_SIZE = 3
NUM_CELLS = GRID_SIZE * GRID_SIZE
MAX_INPUTS = 4

# Cell indices of every line: rows, columns, then diagonals.
LINES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)

LINE_LABELS: tuple[str, ...] = (
    "Row 1",
    "Row 2",
    "Row 3",
    "Col 1",
    "Col 2",
    "Col 3",
    "Diag 1",
    "Diag 2",
)

PAYOUTS: dict[int, int] = {
    6: 10000,
    7: 36,
    8: 720,
    9: 360,
    10: 80,
    11: 252,
    12: 108,
    13: 72,
    14: 54,
    15: 180,
    16: 72,
    17: 180,
    18: 119,
    19: 36,
    20: 306,
    21: 1080,
    22: 144,
    23: 1800,
    24: 3600,
}


def payout_for_sum(total: int) -> int:
    """Return the MGP payout for a line summing to ``total`` (0 if none)."""
    return PAYOUTS.get(total, 0)


class SortBy(Enum):
    """Column by which the payout table is ordered."""

    AVG = "avg"
    MAX = "max"


@dataclass(frozen=True)
class TableRow:
    """Payout statistics for one line of the board."""

    index: int
    line_label: str
    avg: int
    max: int
    percent: float


@dataclass(frozen=True)
class Board:
    """A 3x3 board; each cell holds a revealed number or None."""

    cells: tuple[Optional[int], ...] = ()

    def __post_init__(self) -> None:
        values = tuple(self.cells)[:NUM_CELLS]
        for value in values:
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"cell value must be an int or None, got {value!r}")
            if not MIN_NUM <= value <= MAX_NUM:
                raise ValueError(
                    f"cell value must be between {MIN_NUM} and {MAX_NUM}, got {value}"
                )
        padded = values + (None,) * (NUM_CELLS - len(values))
        object.__setattr__(self, "cells", padded)

    def used(self) -> list[int]:
        """Numbers currently revealed, in cell order."""
        return [n for n in self.cells if n is not None]

    def filled_count(self) -> int:
        return sum(1 for n in self.cells if n is not None)

    def max_inputs_reached(self) -> bool:
        return self.filled_count() >= MAX_INPUTS

    def with_cell(self, index: int, value: Optional[int]) -> "Board":
        """Return a copy of the board with one cell replaced."""
        if not 0 <= index < NUM_CELLS:
            raise IndexError(f"cell index out of range: {index}")
        cells = list(self.cells)
        cells[index] = value
        return Board(cells)

    def possible_line_payouts(self) -> list[list[int]]:
        return [
            [payout_for_sum(total) for total in sums]
            for sums in possible_line_sums(self)
        ]

    def rows(self, sort_by: SortBy) -> list[TableRow]:
        return sort_rows(prepare_rows(self.possible_line_payouts()), sort_by)

    def best_line_cells(self, sort_by: SortBy) -> Optional[tuple[int, int, int]]:
        """The best line's cells once enough numbers are revealed, else None."""
        rows = self.rows(sort_by)
        if self.max_inputs_reached():
            return LINES[rows[0].index]
        return None


def possible_line_sums(board: Board) -> list[list[int]]:
    """Every distinct sum each line can still take, sorted ascending."""
    used = set(board.used())
    unused = [n for n in range(MIN_NUM, MAX_NUM + 1) if n not in used]
    result: list[list[int]] = []
    for line in LINES:
        values = [board.cells[i] for i in line]
        known = sum(v for v in values if v is not None)
        missing = values.count(None)
        if not missing:
            result.append([known])
            continue
        sums = {known + sum(combo) for combo in combinations(unused, missing)}
        result.append(sorted(sums))
    return result


def prepare_rows(payouts: Iterable[Sequence[int]]) -> list[TableRow]:
    """Summarise each line's possible payouts as a table row."""
    rows = []
    for index, values in enumerate(payouts):
        values = list(values)
        if values:
            avg = sum(values) // len(values)
            top = max(values)
            percent = values.count(top) / len(values) * 100.0
        else:
            avg, top, percent = 0, 0, float("nan")
        label = LINE_LABELS[index] if index < len(LINE_LABELS) else ""
        rows.append(TableRow(index, label, avg, top, percent))
    return rows


def sort_rows(rows: Iterable[TableRow], sort_by: SortBy) -> list[TableRow]:
    """Order rows by the chosen column, highest first; ties keep their order."""
    if sort_by is SortBy.AVG:
        return sorted(rows, key=lambda row: row.avg, reverse=True)
    return sorted(rows, key=lambda row: row.max, reverse=True)