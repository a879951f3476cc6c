
import os

CONFIG = {
    "CELL_SIZE": 30,
    "PREVIEW_CELL": 20,
    "FPS": 60,
    "SEED": None,
    "HIGH_SCORE_PATH": os.path.join(os.path.expanduser("~"), ".ledtris", "highscore.json"),
    "HIGH_SCORE_KEY": "ledtris_high_score",
    "LOG_LEVEL": "WARNING",
}
