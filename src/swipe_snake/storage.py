from pathlib import Path
from typing import Dict
import json
import logging

from .config import HIGH_SCORE_KEY

logger = logging.getLogger(__name__)


class HighScoreStore:
    """
    Best score kept in a small JSON key-value file, the desktop stand-in for
    browser local storage. Values are stored as integer strings.

    Storage problems never reach the game: reads fall back to 0 and failed
    writes are logged, leaving the caller's in-memory value as the only copy.
    """

    def __init__(self, path: Path, key: str = HIGH_SCORE_KEY):
        self.path = Path(path)
        self.key = key

    def _read_all(self) -> Dict[str, str]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as exc:
            logger.warning("Could not read %s: %s", self.path, exc)
            return {}
        return data if isinstance(data, dict) else {}

    def load(self) -> int:
        raw = self._read_all().get(self.key)
        try:
            value = int(str(raw))
        except ValueError:
            if raw is not None:
                logger.warning("Ignoring stored %s=%r", self.key, raw)
            return 0
        return max(value, 0)

    def save(self, value: int) -> bool:
        """Overwrite the stored score. Returns False if the write failed."""
        data = self._read_all()
        data[self.key] = str(int(value))
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        except OSError as exc:
            logger.warning("High score kept in memory only, write to %s failed: %s", self.path, exc)
            return False
        logger.debug("Saved %s=%d to %s", self.key, value, self.path)
        return True
