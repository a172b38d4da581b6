from __future__ import annotations
import logging
from pathlib import Path
from typing import Callable, Iterable, Set

from wordfreq import top_n_list

logger = logging.getLogger(__name__)

# Any callable taking (word, language) works as an oracle; tests pass plain functions.
Oracle = Callable[[str, str], bool]

# Number of words to load from wordfreq
DEFAULT_SIZE = 100000

class DictionaryService:
    def __init__(self, words: Iterable[str], language: str = 'en'):
        # Store lowercase words
        self._words: Set[str] = {w.strip().lower() for w in words if w.strip()}
        self.language = language.lower()

    @classmethod
    def from_wordfreq(cls, language: str = 'en', size: int = DEFAULT_SIZE) -> 'DictionaryService':
        words = [w for w in top_n_list(language, size, wordlist='best') if w.isalpha()]
        logger.info("Loaded %s dictionary words (%s) from wordfreq", len(words), language)
        return cls(words, language=language)

    @classmethod
    def load_from_txt(cls, path: Path, language: str = 'en') -> 'DictionaryService':
        if not path.exists():
            raise FileNotFoundError(f"Dictionary file not found: {path}")
        words: Set[str] = set()
        with path.open('rb') as f:
            for lineno, raw in enumerate(f, 1):
                try:
                    w = raw.decode('utf-8').strip().lower()
                except UnicodeDecodeError:
                    logger.warning("Skipping undecodable line %s in %s", lineno, path)
                    continue
                if w and w.isalpha():
                    words.add(w)
        logger.info("Loaded %s dictionary words (%s) from %s", len(words), language, path)
        return cls(words, language=language)

    def __len__(self) -> int:
        return len(self._words)

    def is_valid_word(self, word: str, language: str = 'en') -> bool:
        if not word:
            return False
        if language.lower() != self.language:
            logger.debug("No %s dictionary loaded (have %s)", language, self.language)
            return False
        return word.lower() in self._words

    def __call__(self, word: str, language: str = 'en') -> bool:
        return self.is_valid_word(word, language)
