
"""Board: fixed grid of locked cells, collision test, line clearing"""
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ledtris_piece import COLS, ROWS, Color, Piece


@dataclass(frozen=True)
class Cell:
    primary_color: Color
    glow_color: Color
    variant_id: str


Grid = List[List[Optional[Cell]]]


class Board:
    def __init__(self, width: int = COLS, height: int = ROWS):
        if width <= 0 or height <= 0:
            raise ValueError(f"board dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._rows: Grid = [[None] * width for _ in range(height)]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def cell(self, col: int, row: int) -> Optional[Cell]:
        return self._rows[row][col]

    def snapshot(self) -> Grid:
        return [row[:] for row in self._rows]

    def clear(self) -> None:
        for row in self._rows:
            for x in range(self._width):
                row[x] = None

    def is_row_full(self, row: int) -> bool:
        return all(self._rows[row][x] is not None for x in range(self._width))

    def is_free(self, shape: Sequence[Sequence[int]], origin_col: int, origin_row: int) -> bool:
        """Return True if ``shape`` fits at the origin.

        Cells above the top edge only have to be inside the side walls; they
        are never tested against locked cells.
        """
        for y, row in enumerate(shape):
            for x, v in enumerate(row):
                if not v:
                    continue
                bx, by = origin_col + x, origin_row + y
                if bx < 0 or bx >= self._width or by >= self._height:
                    return False
                if by >= 0 and self._rows[by][bx] is not None:
                    return False
        return True

    def lock(self, piece: Piece) -> None:
        """Copy the piece's cells into the grid; cells above the top are dropped."""
        cell = Cell(piece.primary_color, piece.glow_color, piece.variant_id)
        for y, row in enumerate(piece.shape):
            for x, v in enumerate(row):
                if v:
                    by = piece.origin_row + y
                    if by >= 0:
                        self._rows[by][piece.origin_col + x] = cell

    def clear_full_lines(self) -> int:
        """Remove full rows bottom to top and return how many went away.

        After a removal the same index holds the row that was above it, so
        it is examined again before moving up.
        """
        cleared = 0
        y = self._height - 1
        while y >= 0:
            if self.is_row_full(y):
                del self._rows[y]
                self._rows.insert(0, [None] * self._width)
                cleared += 1
            else:
                y -= 1
        return cleared

    def __repr__(self) -> str:
        lines = ["".join("#" if c else "." for c in row) for row in self._rows]
        return "Board(\n  " + "\n  ".join(lines) + "\n)"
