# ledtris_layout.py
from dataclasses import dataclass
from ledtris_config import CONFIG
from ledtris_piece import COLS, ROWS


@dataclass
class Dims:
    cell: int
    preview_cell: int
    margin: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int
    preview_x: int
    preview_y: int
    preview_size: int


def compute_dims(cols: int = COLS, rows: int = ROWS) -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    preview_cell = int(CONFIG["PREVIEW_CELL"])
    margin = 16
    panel_w = 220

    board_w = cols * cell
    board_h = rows * cell

    total_w = margin + board_w + margin + panel_w + margin
    total_h = margin + board_h + margin

    board_x = margin
    board_y = margin
    panel_x = board_x + board_w + margin
    panel_y = margin

    # preview frame fits the widest catalog shape (4 cells) with a cell of air
    preview_size = preview_cell * 5
    preview_x = panel_x + (panel_w - preview_size) // 2
    preview_y = panel_y + 180

    return Dims(
        cell=cell, preview_cell=preview_cell, margin=margin, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=board_x, board_y=board_y,
        panel_x=panel_x, panel_y=panel_y,
        preview_x=preview_x, preview_y=preview_y, preview_size=preview_size,
    )
