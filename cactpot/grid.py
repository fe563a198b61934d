"""Cell editing on the board: scrolling through numbers and clearing."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from cactpot.logic import MAX_NUM, MIN_NUM, NUM_CELLS, Board


class ScrollDirection(Enum):
    UP = "up"
    DOWN = "down"


def scroll_direction(delta: float) -> ScrollDirection:
    """A negative wheel delta scrolls up, anything else down."""
    return ScrollDirection.UP if delta < 0 else ScrollDirection.DOWN


def _check_index(index: int) -> None:
    if not 0 <= index < NUM_CELLS:
        raise IndexError(f"cell index out of range: {index}")


def next_number(board: Board, index: int, direction: ScrollDirection) -> Optional[int]:
    """The value a cell takes after one scroll step, skipping numbers in use."""
    _check_index(index)
    current = board.cells[index]
    used = set(board.used())
    available = [
        n for n in range(MIN_NUM, MAX_NUM + 1) if n not in used or n == current
    ]
    if current is None:
        if not available:
            return None
        return min(available) if direction is ScrollDirection.UP else max(available)
    if current not in available:
        return current
    pos = available.index(current)
    if direction is ScrollDirection.UP:
        return available[pos + 1] if pos + 1 < len(available) else current
    return available[pos - 1] if pos > 0 else current


def cell_editable(board: Board, index: int) -> bool:
    """Revealed cells stay editable; empty ones only until the input limit."""
    _check_index(index)
    return not board.max_inputs_reached() or board.cells[index] is not None


def scroll_cell(board: Board, index: int, delta: float) -> Board:
    """Apply a wheel movement to a cell, returning the resulting board."""
    if not cell_editable(board, index):
        return board
    value = next_number(board, index, scroll_direction(delta))
    return board.with_cell(index, value)


def clear_cell(board: Board, index: int) -> Board:
    """Empty a cell, returning the resulting board."""
    if not cell_editable(board, index):
        return board
    return board.with_cell(index, None)