"""Best score kept as a single decimal number in a text file."""
import logging
from pathlib import Path

from termsnake import config

logger = logging.getLogger(__name__)


class HighScoreStore:
    def __init__(self, path=config.HIGHSCORE_FILE):
        self.path = Path(path)

    def load(self):
        """Return the saved score, or 0 if the file is missing or unreadable."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return 0
        except OSError as exc:
            logger.warning("cannot read %s: %s", self.path, exc)
            return 0

        try:
            score = int(text.strip())
        except ValueError:
            logger.warning("ignoring garbled high score file %s", self.path)
            return 0
        return max(score, 0)

    def save(self, score):
        """Write the score; return False instead of raising on I/O errors."""
        try:
            self.path.write_text(f"{score}", encoding="utf-8")
        except OSError as exc:
            logger.warning("cannot write %s: %s", self.path, exc)
            return False
        logger.info("saved high score %d to %s", score, self.path)
        return True
