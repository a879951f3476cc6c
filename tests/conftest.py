import pytest

from ledtris_board import Board
from ledtris_engine import Engine
from ledtris_highscore import MemoryHighScoreStore
from ledtris_piece import Piece, VARIANTS


class RecordingTimer:
    def __init__(self):
        self.calls = []

    def start(self, interval_ms):
        self.calls.append(("start", interval_ms))

    def stop(self):
        self.calls.append(("stop",))


class ScriptedRandom:
    """Hands out the given variant ids in order, then repeats the last one."""
    def __init__(self, *ids):
        self.ids = list(ids)

    def next_variant(self):
        if len(self.ids) > 1:
            return self.ids.pop(0)
        return self.ids[0]


def fill_row(board, row, skip=()):
    shape = [[0 if x in skip else 1 for x in range(board.width)]]
    v = VARIANTS["panel"]
    board.lock(Piece("panel", shape, 0, row, v.primary_color, v.glow_color))


def vertical_strip(col, row):
    v = VARIANTS["strip"]
    return Piece("strip", [[1], [1], [1], [1]], col, row, v.primary_color, v.glow_color)


@pytest.fixture
def timer():
    return RecordingTimer()


@pytest.fixture
def store():
    return MemoryHighScoreStore()


@pytest.fixture
def make_engine(timer, store):
    def make(*ids, board=None):
        return Engine(board=board or Board(), rng=ScriptedRandom(*(ids or ("panel",))),
                      timer=timer, high_scores=store)
    return make
