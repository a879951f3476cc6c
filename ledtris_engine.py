
"""Game engine: current/next piece, score and level, drop tick, game over"""
import enum
import logging
from dataclasses import dataclass
from typing import Optional

from ledtris_board import Board
from ledtris_highscore import MemoryHighScoreStore
from ledtris_piece import Piece, create_piece, rotate_cw
from ledtris_rng import UniformRandom

log = logging.getLogger(__name__)

INITIAL_DROP_MS = 1000
MIN_DROP_MS = 100
DROP_STEP_MS = 100
LINES_PER_LEVEL = 10


def level_for(lines: int) -> int:
    return lines // LINES_PER_LEVEL + 1


def drop_interval_ms(level: int) -> int:
    return max(MIN_DROP_MS, INITIAL_DROP_MS - (level - 1) * DROP_STEP_MS)


class GameStatus(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass
class GameState:
    score: int = 0
    level: int = 1
    lines_cleared: int = 0
    drop_interval_ms: int = INITIAL_DROP_MS
    status: GameStatus = GameStatus.IDLE

    @property
    def running(self) -> bool:
        # a paused game is still a game in progress
        return self.status in (GameStatus.RUNNING, GameStatus.PAUSED)

    @property
    def paused(self) -> bool:
        return self.status is GameStatus.PAUSED

    @property
    def game_over(self) -> bool:
        return self.status is GameStatus.GAME_OVER


class NullTimer:
    """Timer that never fires. For headless use; tick() is then driven by hand."""
    def start(self, interval_ms: int) -> None:
        pass

    def stop(self) -> None:
        pass


class Engine:
    """Owns the board, the current and next pieces and the game counters.

    Commands (start, pause, resume, toggle_pause, reset, move, rotate, tick)
    run to completion and never raise for an illegal request: they simply do
    nothing. move and rotate report whether they applied.

    The engine does not know how ticks are scheduled. It only tells its timer
    to start(interval_ms) or stop(); whoever owns the timer calls tick().
    """

    def __init__(self, board: Optional[Board] = None, rng: Optional[UniformRandom] = None,
                 timer=None, high_scores=None):
        self.board = board if board is not None else Board()
        self.rng = rng if rng is not None else UniformRandom()
        self.timer = timer if timer is not None else NullTimer()
        self.high_scores = high_scores if high_scores is not None else MemoryHighScoreStore()

        self.state = GameState()
        self.current: Optional[Piece] = None
        self.next_piece: Optional[Piece] = None
        self.new_record = False
        self.high_score = self._read_high_score()

        # bumped on every observable change; the renderer polls these
        self.revision = 0
        self.next_revision = 0
        self._new_next()

    # ---------- queries ----------
    @property
    def status(self) -> GameStatus:
        return self.state.status

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def level(self) -> int:
        return self.state.level

    @property
    def lines_cleared(self) -> int:
        return self.state.lines_cleared

    @property
    def drop_interval_ms(self) -> int:
        return self.state.drop_interval_ms

    @property
    def running(self) -> bool:
        return self.state.running

    @property
    def paused(self) -> bool:
        return self.state.paused

    @property
    def game_over(self) -> bool:
        return self.state.game_over

    # ---------- commands ----------
    def start(self) -> None:
        if self.state.running:
            return
        self.state = GameState(status=GameStatus.RUNNING)
        self.board.clear()
        self.new_record = False
        if self.next_piece is None:
            self._new_next()
        self.current = self.next_piece
        self._new_next()
        self.timer.start(self.state.drop_interval_ms)
        log.debug("game started with %s, next %s", self.current.variant_id, self.next_piece.variant_id)
        self._changed()

    def pause(self) -> None:
        if self.state.status is not GameStatus.RUNNING:
            return
        self.state.status = GameStatus.PAUSED
        self.timer.stop()
        log.debug("paused")
        self._changed()

    def resume(self) -> None:
        if self.state.status is not GameStatus.PAUSED:
            return
        self.state.status = GameStatus.RUNNING
        self.timer.start(self.state.drop_interval_ms)
        log.debug("resumed at %d ms", self.state.drop_interval_ms)
        self._changed()

    def toggle_pause(self) -> None:
        if self.state.paused:
            self.resume()
        else:
            self.pause()

    def reset(self) -> None:
        self.timer.stop()
        self.state = GameState()
        self.board.clear()
        self.current = None
        self.new_record = False
        self._new_next()
        log.debug("reset")
        self._changed()

    def move(self, dx: int, dy: int) -> bool:
        p = self.current
        if self.state.status is not GameStatus.RUNNING or p is None:
            return False
        if not self.board.is_free(p.shape, p.origin_col + dx, p.origin_row + dy):
            return False
        p.origin_col += dx
        p.origin_row += dy
        self._changed()
        return True

    def rotate(self) -> bool:
        """Rotate clockwise in place. No kicks: a blocked rotation is refused."""
        p = self.current
        if self.state.status is not GameStatus.RUNNING or p is None:
            return False
        rotated = rotate_cw(p.shape)
        if not self.board.is_free(rotated, p.origin_col, p.origin_row):
            return False
        p.shape = rotated
        self._changed()
        return True

    def tick(self) -> None:
        """One drop step: fall a row, or lock and bring in the next piece."""
        p = self.current
        if self.state.status is not GameStatus.RUNNING or p is None:
            return
        if self.board.is_free(p.shape, p.origin_col, p.origin_row + 1):
            p.origin_row += 1
            self._changed()
            return
        self._lock_current()

    # ---------- internals ----------
    def _lock_current(self):
        self.board.lock(self.current)
        cleared = self.board.clear_full_lines()
        if cleared:
            self._score_lines(cleared)
        self.current = self.next_piece
        self._new_next()
        p = self.current
        if not self.board.is_free(p.shape, p.origin_col, p.origin_row):
            self._game_over()
        self._changed()

    def _score_lines(self, n: int):
        s = self.state
        s.score += n
        s.lines_cleared += n
        level = level_for(s.lines_cleared)
        if level > s.level:
            s.level = level
            s.drop_interval_ms = drop_interval_ms(level)
            self.timer.start(s.drop_interval_ms)
            log.debug("level %d, drop interval %d ms", level, s.drop_interval_ms)

    def _game_over(self):
        self.state.status = GameStatus.GAME_OVER
        self.timer.stop()
        log.info("game over: score %d, lines %d, level %d",
                 self.state.score, self.state.lines_cleared, self.state.level)
        if self.state.score > self.high_score:
            self.high_score = self.state.score
            self.new_record = True
            log.info("new high score %d", self.high_score)
            try:
                self.high_scores.save(self.high_score)
            except OSError as e:
                log.warning("could not persist high score: %s", e)

    def _new_next(self):
        self.next_piece = create_piece(self.rng, self.board.width)
        self.next_revision += 1

    def _read_high_score(self) -> int:
        try:
            return max(0, int(self.high_scores.load()))
        except (OSError, ValueError, TypeError) as e:
            log.warning("could not read high score: %s", e)
            return 0

    def _changed(self):
        self.revision += 1
