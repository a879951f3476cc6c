
"""Keyboard to engine command mapping"""
from typing import Callable, Dict

import pygame
from ledtris_engine import Engine

KEYMAP: Dict[int, Callable[[Engine], object]] = {
    pygame.K_LEFT: lambda e: e.move(-1, 0),
    pygame.K_RIGHT: lambda e: e.move(1, 0),
    pygame.K_DOWN: lambda e: e.move(0, 1),
    pygame.K_UP: lambda e: e.rotate(),
    pygame.K_SPACE: lambda e: e.toggle_pause(),
    pygame.K_p: lambda e: e.toggle_pause(),
    pygame.K_RETURN: lambda e: e.start(),
    pygame.K_KP_ENTER: lambda e: e.start(),
    pygame.K_r: lambda e: e.reset(),
}


def handle_key(engine: Engine, key: int) -> bool:
    """Run the command bound to ``key``. Returns False for unbound keys."""
    action = KEYMAP.get(key)
    if action is None:
        return False
    action(engine)
    return True
