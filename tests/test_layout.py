from ledtris_config import CONFIG
from ledtris_layout import compute_dims


def test_default_dims():
    d = compute_dims()
    assert d.cell == CONFIG["CELL_SIZE"]
    assert (d.board_w, d.board_h) == (10 * d.cell, 20 * d.cell)
    assert d.total_w == d.margin * 3 + d.board_w + d.panel_w
    assert d.total_h == d.margin * 2 + d.board_h
    assert d.panel_x == d.board_x + d.board_w + d.margin


def test_preview_frame_inside_panel():
    d = compute_dims()
    assert d.preview_size >= 4 * d.preview_cell
    assert d.panel_x <= d.preview_x
    assert d.preview_x + d.preview_size <= d.panel_x + d.panel_w
