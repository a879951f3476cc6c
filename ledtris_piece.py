
"""Piece catalog, piece model, rotation and the piece factory"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ledtris_rng import UniformRandom

COLS, ROWS = 10, 20

Color = Tuple[int, int, int]
Shape = List[List[int]]


@dataclass(frozen=True)
class PieceVariant:
    id: str
    shape: Tuple[Tuple[int, ...], ...]
    primary_color: Color
    glow_color: Color


# LED lamps, named after the fixture they look like
VARIANTS: Dict[str, PieceVariant] = {
    "spotlight": PieceVariant(
        "spotlight",
        ((0, 1, 0),
         (1, 1, 1)),
        (255, 250, 205), (255, 248, 220)),
    "panel": PieceVariant(
        "panel",
        ((1, 1),
         (1, 1)),
        (135, 206, 235), (176, 224, 230)),
    "strip": PieceVariant(
        "strip",
        ((1, 1, 1, 1),),
        (255, 179, 71), (255, 215, 0)),
    "bulb": PieceVariant(
        "bulb",
        ((1, 0),
         (1, 0),
         (1, 1)),
        (255, 210, 63), (255, 255, 0)),
    "tube": PieceVariant(
        "tube",
        ((1, 1, 0),
         (0, 1, 1)),
        (240, 248, 255), (255, 255, 255)),
}

VARIANT_IDS: Tuple[str, ...] = tuple(VARIANTS)


def variant(variant_id: str) -> PieceVariant:
    return VARIANTS[variant_id]


def rotate_cw(mat: Shape) -> Shape:
    """Return ``mat`` turned 90 degrees clockwise; ``rotated[c][rows-1-r] = mat[r][c]``."""
    rows, cols = len(mat), len(mat[0])
    rotated = [[0] * rows for _ in range(cols)]
    for r in range(rows):
        for c in range(cols):
            rotated[c][rows - 1 - r] = mat[r][c]
    return rotated


@dataclass
class Piece:
    variant_id: str
    shape: Shape
    origin_col: int
    origin_row: int
    primary_color: Color
    glow_color: Color

    @property
    def width(self) -> int:
        return len(self.shape[0])

    @property
    def height(self) -> int:
        return len(self.shape)

    def cells(self) -> List[Tuple[int, int]]:
        """Board (col, row) of every set cell, including rows above the board."""
        out = []
        for r, row in enumerate(self.shape):
            for c, v in enumerate(row):
                if v:
                    out.append((self.origin_col + c, self.origin_row + r))
        return out

    @staticmethod
    def spawn(variant_id: str, board_width: int = COLS) -> "Piece":
        v = VARIANTS[variant_id]
        shape = [list(row) for row in v.shape]
        x = board_width // 2 - len(shape[0]) // 2
        return Piece(variant_id, shape, x, 0, v.primary_color, v.glow_color)


_default_rng = UniformRandom()


def create_piece(rng: Optional[UniformRandom] = None, board_width: int = COLS) -> Piece:
    """Draw a variant uniformly at random and spawn it at the top center."""
    rng = rng or _default_rng
    return Piece.spawn(rng.next_variant(), board_width)
