
"""
Rendering helpers for LEDtris.

- Every lamp cell is a pre-rendered sprite (dark housing, radial glow from the
  primary color to the glow color, bright center), cached per color pair.
- Static background (grid + panel frame + preview frame) is drawn once.
- Locked cells live on a cached board surface rebuilt only when the grid changes.
- HUD text and the next-piece preview are re-rendered only when their values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ledtris_board import Grid
from ledtris_engine import Engine
from ledtris_layout import Dims
from ledtris_piece import Color, Piece

HOUSING = (51, 51, 51)
# rgba(0,0,0,0.8) composited over the housing
HOUSING_EDGE = tuple(int(c * 0.2) for c in HOUSING)
BACKGROUND = (12, 12, 16)
GRID = (38, 38, 44)
TEXT = (235, 235, 220)
TEXT_DIM = (170, 170, 160)


def _lerp(a: Color, b: Color, t: float) -> Color:
    return tuple(int(a[i] + (b[i] - a[i]) * t) for i in range(3))


def _glow_at(t: float, primary: Color, glow: Color) -> Color:
    """Radial gradient stops: 0 primary, 0.7 glow, 1 dark edge."""
    if t <= 0.7:
        return _lerp(primary, glow, t / 0.7)
    return _lerp(glow, HOUSING_EDGE, (t - 0.7) / 0.3)


def make_led_sprite(size: int, primary: Color, glow: Color, mini: bool = False) -> pygame.Surface:
    s = pygame.Surface((size, size), pygame.SRCALPHA)
    s.fill(HOUSING_EDGE if not mini else (0, 0, 0, 0))
    c = size / 2
    steps = max(4, int(c))
    for i in range(steps, 0, -1):
        t = i / steps
        pygame.draw.circle(s, _glow_at(t, primary, glow), (c, c), c * t)
    light = pygame.Surface((size, size), pygame.SRCALPHA)
    if mini:
        pygame.draw.circle(light, (255, 255, 255, 153), (c, c), max(1, size / 6))
    else:
        r = size / 4
        for i in range(8, 0, -1):
            t = i / 8
            alpha = int(255 * (0.9 - 0.6 * t))
            pygame.draw.circle(light, (255, 255, 255, alpha), (c, c), max(1, r * t))
        pygame.draw.rect(light, (255, 255, 255, 77), (0, 0, size, size), 1)
    s.blit(light, (0, 0))
    return s


@dataclass
class HudCache:
    score: int = -1
    high: int = -1
    level: int = -1
    lines: int = -1
    next_rev: int = -1
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    high_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    next_label: Optional[pygame.Surface] = None
    preview: Optional[pygame.Surface] = None
    controls: Optional[list] = None


class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self._make_static()
        self.led_cache: Dict[Tuple[Color, Color, int, bool], pygame.Surface] = {}
        self.hud = HudCache()
        # Board surface cache (only locked cells)
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self._last_grid: Optional[Grid] = None

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BACKGROUND)
        cols, rows = d.board_w // d.cell, d.board_h // d.cell
        for x in range(cols + 1):
            X = d.board_x + x * d.cell
            pygame.draw.line(self.bg, GRID, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(rows + 1):
            Y = d.board_y + y * d.cell
            pygame.draw.line(self.bg, GRID, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (22, 22, 30), panel_rect)
        pygame.draw.rect(self.bg, (60, 60, 72), panel_rect, 1)
        frame = pygame.Rect(d.preview_x, d.preview_y, d.preview_size, d.preview_size)
        pygame.draw.rect(self.bg, (8, 8, 12), frame)
        pygame.draw.rect(self.bg, (60, 60, 72), frame, 1)

    def led(self, primary: Color, glow: Color, size: int, mini: bool = False) -> pygame.Surface:
        key = (primary, glow, size, mini)
        s = self.led_cache.get(key)
        if s is None:
            s = self.led_cache[key] = make_led_sprite(size, primary, glow, mini)
        return s

    def redraw_static(self, screen: pygame.Surface):
        screen.blit(self.bg, (0, 0))

    # ---------- Board surface cache ----------
    def update_board_surface(self, grid: Grid):
        """Rebuild the locked-cell surface if the grid changed since last time."""
        if grid == self._last_grid:
            return
        self.board_surface.fill((0, 0, 0, 0))
        c = self.dims.cell
        for y, row in enumerate(grid):
            for x, cell in enumerate(row):
                if cell:
                    sprite = self.led(cell.primary_color, cell.glow_color, c - 2)
                    self.board_surface.blit(sprite, (x * c + 1, y * c + 1))
        self._last_grid = grid

    def blit_board_surface(self, screen: pygame.Surface):
        screen.blit(self.board_surface, (self.dims.board_x, self.dims.board_y))

    def draw_piece(self, screen: pygame.Surface, piece: Piece):
        d = self.dims
        sprite = self.led(piece.primary_color, piece.glow_color, d.cell - 2)
        for bx, by in piece.cells():
            if by >= 0:
                screen.blit(sprite, (d.board_x + bx * d.cell + 1, d.board_y + by * d.cell + 1))

    def _render_preview(self, piece: Piece) -> pygame.Surface:
        d = self.dims
        pc = d.preview_cell
        s = pygame.Surface((d.preview_size, d.preview_size), pygame.SRCALPHA)
        offx = (d.preview_size - piece.width * pc) // 2
        offy = (d.preview_size - piece.height * pc) // 2
        sprite = self.led(piece.primary_color, piece.glow_color, pc - 1, mini=True)
        for y, row in enumerate(piece.shape):
            for x, v in enumerate(row):
                if v:
                    s.blit(sprite, (offx + x * pc, offy + y * pc))
        return s

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, engine: Engine):
        d = self.dims
        f = self.font
        h = self.hud
        if h.title is None:
            h.title = f.render("LEDtris", True, TEXT)
            h.next_label = f.render("Next:", True, TEXT)
        if engine.score != h.score:
            h.score = engine.score
            h.score_s = f.render(f"Score: {h.score}", True, TEXT)
        if engine.high_score != h.high:
            h.high = engine.high_score
            h.high_s = f.render(f"High score: {h.high}", True, TEXT)
        if engine.level != h.level:
            h.level = engine.level
            h.level_s = f.render(f"Level: {h.level}", True, TEXT)
        if engine.lines_cleared != h.lines:
            h.lines = engine.lines_cleared
            h.lines_s = f.render(f"Lines: {h.lines}", True, TEXT)
        if engine.next_revision != h.next_rev:
            h.next_rev = engine.next_revision
            h.preview = self._render_preview(engine.next_piece) if engine.next_piece else None
        x = d.panel_x + 12
        screen.blit(h.title, (x, d.panel_y + 12))
        screen.blit(h.score_s, (x, d.panel_y + 44))
        screen.blit(h.high_s, (x, d.panel_y + 68))
        screen.blit(h.level_s, (x, d.panel_y + 92))
        screen.blit(h.lines_s, (x, d.panel_y + 116))
        screen.blit(h.next_label, (x, d.preview_y - 24))
        if h.preview:
            screen.blit(h.preview, (d.preview_x, d.preview_y))
        if not h.controls:
            h.controls = [
                f.render("Controls:", True, TEXT),
                f.render("←/→ Move", True, TEXT_DIM),
                f.render("↓ Step down", True, TEXT_DIM),
                f.render("↑ Rotate", True, TEXT_DIM),
                f.render("Space Pause", True, TEXT_DIM),
                f.render("Enter Start • R Reset", True, TEXT_DIM),
                f.render("Esc Quit", True, TEXT_DIM),
            ]
        y = d.preview_y + d.preview_size + 24
        for surf in h.controls:
            screen.blit(surf, (x, y)); y += 20

    def draw(self, screen: pygame.Surface, engine: Engine):
        self.redraw_static(screen)
        self.update_board_surface(engine.board.snapshot())
        self.blit_board_surface(screen)
        if engine.current is not None:
            self.draw_piece(screen, engine.current)
        self.draw_panel_hud(screen, engine)
