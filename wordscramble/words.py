from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, List

logger = logging.getLogger(__name__)

class FileWordSource:
    """Root words read from a text file, one per line.

    ``load`` lets ``OSError`` through when the file is missing or unreadable;
    the caller decides what to fall back to.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> List[str]:
        with self.path.open('r', encoding='utf-8') as f:
            words = f.read().split('\n')
        logger.debug("Loaded %s start words from %s", len(words), self.path)
        return words

class StaticWordSource:
    def __init__(self, words: Iterable[str]):
        self.words = list(words)

    def load(self) -> List[str]:
        return list(self.words)
