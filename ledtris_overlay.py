
import pygame
from ledtris_engine import Engine, GameStatus
from ledtris_layout import Dims


class Overlay:
    """Banner over the board for every state except a running game."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font

    def lines_for(self, engine: Engine):
        if engine.status is GameStatus.IDLE:
            return [("LEDtris", True), ("Press Enter to start", False)]
        if engine.status is GameStatus.PAUSED:
            return [("PAUSED", True), ("Space to resume", False)]
        if engine.status is GameStatus.GAME_OVER:
            out = [("GAME OVER", True), (f"Final score: {engine.score}", False)]
            if engine.new_record:
                out.append(("NEW HIGH SCORE!", False))
            out.append(("Enter to play again", False))
            return out
        return []

    def draw(self, screen: pygame.Surface, engine: Engine):
        items = self.lines_for(engine)
        if not items:
            return
        d = self.dims
        s = pygame.Surface((d.board_w, d.board_h), pygame.SRCALPHA)
        s.fill((0, 0, 0, 190))
        screen.blit(s, (d.board_x, d.board_y))
        cx = d.board_x + d.board_w // 2
        y = d.board_y + d.board_h // 2 - 20 * len(items)
        for text, big in items:
            col = (255, 215, 0) if text == "NEW HIGH SCORE!" else (255, 250, 205)
            surf = (self.big_font if big else self.font).render(text, True, col)
            screen.blit(surf, surf.get_rect(center=(cx, y)))
            y += 44 if big else 28
