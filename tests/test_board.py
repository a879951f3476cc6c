import random

import pytest

from conftest import fill_row, vertical_strip
from ledtris_board import Board, Cell
from ledtris_piece import Piece, VARIANTS


def reference_is_free(board, shape, col, row):
    for y, r in enumerate(shape):
        for x, v in enumerate(r):
            if not v:
                continue
            bx, by = col + x, row + y
            if not 0 <= bx < board.width or by >= board.height:
                return False
            if by >= 0 and board.cell(bx, by) is not None:
                return False
    return True


def test_dimensions_fixed():
    b = Board()
    assert (b.width, b.height) == (10, 20)
    assert all(cell is None for row in b.snapshot() for cell in row)


@pytest.mark.parametrize("w,h", [(0, 20), (10, 0), (-1, 5)])
def test_bad_dimensions(w, h):
    with pytest.raises(ValueError):
        Board(w, h)


def test_is_free_matches_definition():
    rnd = random.Random(5)
    b = Board()
    for _ in range(40):
        b.lock(Piece("panel", [[1]], rnd.randrange(10), rnd.randrange(20), (1, 1, 1), (2, 2, 2)))
    shapes = [[list(r) for r in v.shape] for v in VARIANTS.values()]
    for _ in range(2000):
        shape = rnd.choice(shapes)
        col, row = rnd.randint(-3, 11), rnd.randint(-4, 21)
        assert b.is_free(shape, col, row) == reference_is_free(b, shape, col, row)


def test_cells_above_top_skip_occupancy_but_not_walls():
    b = Board()
    fill_row(b, 0)
    strip = [[1], [1], [1], [1]]
    assert b.is_free(strip, 5, -4)
    assert not b.is_free(strip, 5, -3)
    assert not b.is_free(strip, -1, -4)
    assert not b.is_free(strip, 10, -4)


def test_floor_is_blocking():
    b = Board()
    assert b.is_free([[1, 1, 1, 1]], 0, 19)
    assert not b.is_free([[1, 1, 1, 1]], 0, 20)


def test_lock_writes_display_data_and_drops_hidden_cells():
    b = Board()
    b.lock(vertical_strip(2, -2))
    v = VARIANTS["strip"]
    assert b.cell(2, 0) == Cell(v.primary_color, v.glow_color, "strip")
    assert b.cell(2, 1) == Cell(v.primary_color, v.glow_color, "strip")
    assert b.cell(2, 2) is None
    assert sum(cell is not None for row in b.snapshot() for cell in row) == 2


def test_clear_single_row_shifts_rows_down():
    b = Board()
    fill_row(b, 19, skip={9})
    b.lock(Piece("panel", [[1]], 5, 17, (1, 1, 1), (2, 2, 2)))
    b.lock(Piece("panel", [[1]], 9, 19, (1, 1, 1), (2, 2, 2)))
    assert b.clear_full_lines() == 1
    assert b.cell(5, 18) is not None
    assert b.cell(5, 17) is None
    assert all(b.cell(x, 0) is None for x in range(10))
    assert [b.cell(x, 19) for x in range(10)] == [None] * 10


def test_clear_separated_rows():
    b = Board()
    fill_row(b, 19)
    fill_row(b, 18, skip={0})
    fill_row(b, 17)
    assert b.clear_full_lines() == 2
    assert b.is_row_full(19) is False
    assert b.cell(0, 19) is None and b.cell(1, 19) is not None
    assert all(b.cell(x, 18) is None for x in range(10))


def test_clear_is_idempotent():
    b = Board()
    for r in (16, 17, 18, 19):
        fill_row(b, r)
    fill_row(b, 15, skip={3})
    assert b.clear_full_lines() == 4
    assert b.clear_full_lines() == 0


def test_clear_resets_every_cell():
    b = Board()
    fill_row(b, 10)
    b.clear()
    assert all(cell is None for row in b.snapshot() for cell in row)


def test_snapshot_is_a_copy():
    b = Board()
    snap = b.snapshot()
    snap[0][0] = "x"
    assert b.cell(0, 0) is None
