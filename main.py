
import argparse
import logging
import sys

import pygame
from ledtris_config import CONFIG
from ledtris_engine import Engine
from ledtris_highscore import JsonHighScoreStore
from ledtris_input import handle_key
from ledtris_layout import compute_dims
from ledtris_overlay import Overlay
from ledtris_render import RenderAssets
from ledtris_rng import UniformRandom
from ledtris_timer import DROP_EVENT, PygameDropTimer

log = logging.getLogger("ledtris")


def get_args(argv=None):
    parser = argparse.ArgumentParser("""LEDtris, a falling-block game with LED lamps""")
    parser.add_argument("--seed", type=int, default=CONFIG["SEED"],
                        help="seed for the piece randomizer")
    parser.add_argument("--scores", type=str, default=CONFIG["HIGH_SCORE_PATH"],
                        help="JSON file holding the high score")
    parser.add_argument("--cell-size", type=int, default=CONFIG["CELL_SIZE"])
    parser.add_argument("--log-level", type=str, default=CONFIG["LOG_LEVEL"],
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main(argv=None):
    args = get_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    CONFIG["SEED"] = args.seed
    CONFIG["HIGH_SCORE_PATH"] = args.scores
    CONFIG["CELL_SIZE"] = args.cell_size

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, DROP_EVENT])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("LEDtris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)

    render = RenderAssets(dims, font)
    overlay = Overlay(dims, font, big_font)
    clock = pygame.time.Clock()

    engine = Engine(rng=UniformRandom(args.seed),
                    timer=PygameDropTimer(),
                    high_scores=JsonHighScoreStore(args.scores))
    log.info("high score %d loaded from %s", engine.high_score, args.scores)

    while True:
        clock.tick(CONFIG["FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                engine.timer.stop()
                pygame.quit(); return 0
            if e.type == DROP_EVENT:
                engine.tick()
            elif e.type == pygame.KEYDOWN:
                if e.key == pygame.K_ESCAPE:
                    engine.timer.stop()
                    pygame.quit(); return 0
                handle_key(engine, e.key)

        render.draw(screen, engine)
        overlay.draw(screen, engine)
        pygame.display.flip()


if __name__ == '__main__':
    sys.exit(main())
