import math

import pytest

from cactpot.logic import (
    LINES,
    MAX_NUM,
    NUM_CELLS,
    Board,
    SortBy,
    TableRow,
    payout_for_sum,
    possible_line_sums,
    prepare_rows,
    sort_rows,
)


def full_board():
    return Board(list(range(1, 10)))


def test_payout_for_sum_known():
    assert payout_for_sum(6) == 10000
    assert payout_for_sum(7) == 36
    assert payout_for_sum(24) == 3600


def test_payout_for_sum_unknown():
    assert payout_for_sum(5) == 0
    assert payout_for_sum(25) == 0


def test_possible_line_sums_all_known():
    sums = possible_line_sums(full_board())
    assert sums[0] == [6]
    assert sums[1] == [15]
    assert sums[2] == [24]
    assert sums[3] == [12]


def test_possible_line_sums_with_unknowns():
    board = Board([1, None, None, None, None, None, None, None, None])
    sums = possible_line_sums(board)
    assert len(sums[0]) == 13
    assert all(6 <= s <= 18 for s in sums[0])


def test_possible_line_sums_sorted_and_unique():
    for sums in possible_line_sums(Board([5, None, 2])):
        assert sums == sorted(set(sums))


def test_board_pads_and_truncates():
    assert Board().cells == (None,) * NUM_CELLS
    assert Board([3]).cells[0] == 3
    assert len(Board([1, 2, 3, 4, 5, 6, 7, 8, 9, 1]).cells) == NUM_CELLS


def test_board_rejects_out_of_range():
    with pytest.raises(ValueError):
        Board([0])
    with pytest.raises(ValueError):
        Board([MAX_NUM + 1])


def test_used_and_filled_count():
    board = Board([None, 4, None, 7])
    assert board.used() == [4, 7]
    assert board.filled_count() == 2
    assert not board.max_inputs_reached()
    assert Board([1, 2, 3, 4]).max_inputs_reached()


def test_with_cell_returns_new_board():
    board = Board()
    updated = board.with_cell(4, 5)
    assert updated.cells[4] == 5
    assert board.cells[4] is None
    with pytest.raises(IndexError):
        board.with_cell(NUM_CELLS, 1)


def test_prepare_rows():
    rows = prepare_rows([[10000], [36, 72]])
    assert rows[0] == TableRow(0, "Row 1", 10000, 10000, 100.0)
    assert rows[1] == TableRow(1, "Row 2", 54, 72, 50.0)


def test_prepare_rows_empty_values():
    (row,) = prepare_rows([[]])
    assert row.avg == 0 and row.max == 0
    assert math.isnan(row.percent)


def test_sort_rows_is_stable_and_descending():
    rows = [
        TableRow(0, "Row 1", 10, 50, 100.0),
        TableRow(1, "Row 2", 30, 50, 100.0),
        TableRow(2, "Row 3", 20, 90, 100.0),
    ]
    by_max = sort_rows(rows, SortBy.MAX)
    assert [r.index for r in by_max] == [2, 0, 1]
    by_avg = sort_rows(rows, SortBy.AVG)
    assert [r.index for r in by_avg] == [1, 2, 0]


@pytest.mark.parametrize("sort_by", list(SortBy))
def test_rows_ordered(sort_by):
    rows = Board([1, None, None, None, 5]).rows(sort_by)
    assert len(rows) == len(LINES)
    key = "avg" if sort_by is SortBy.AVG else "max"
    values = [getattr(r, key) for r in rows]
    assert values == sorted(values, reverse=True)
    assert all(0 < r.percent <= 100 for r in rows)


def test_best_line_cells():
    assert Board([1, 2, 3]).best_line_cells(SortBy.MAX) is None
    assert full_board().best_line_cells(SortBy.MAX) == LINES[0]
    assert full_board().best_line_cells(SortBy.AVG) == LINES[0]


def test_possible_line_payouts_match_sums():
    board = Board([2, None, 6])
    payouts = board.possible_line_payouts()
    sums = possible_line_sums(board)
    assert payouts == [[payout_for_sum(s) for s in line] for line in sums]