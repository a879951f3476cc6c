
"""High score persistence: one integer under a fixed key in a JSON file"""
import json
import logging
from pathlib import Path
from typing import Optional, Union

from ledtris_config import CONFIG

log = logging.getLogger(__name__)


class MemoryHighScoreStore:
    def __init__(self, value: int = 0):
        self.value = value

    def load(self) -> int:
        return self.value

    def save(self, value: int) -> None:
        self.value = value


class JsonHighScoreStore:
    """Key-value file store. A missing or broken file reads as 0."""

    def __init__(self, path: Union[str, Path, None] = None, key: Optional[str] = None):
        self.path = Path(path or CONFIG["HIGH_SCORE_PATH"]).expanduser()
        self.key = key or CONFIG["HIGH_SCORE_KEY"]

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object in {self.path}")
        return data

    def load(self) -> int:
        try:
            value = self._read().get(self.key, 0)
        except (OSError, ValueError) as e:
            log.warning("could not read high score from %s: %s", self.path, e)
            return 0
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            log.warning("ignoring invalid high score %r in %s", value, self.path)
            return 0
        return value

    def save(self, value: int) -> None:
        try:
            data = self._read()
        except (OSError, ValueError):
            data = {}
        data[self.key] = int(value)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        except OSError as e:
            log.warning("could not write high score to %s: %s", self.path, e)
            return
        log.debug("saved high score %d to %s", value, self.path)
