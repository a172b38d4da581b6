from __future__ import annotations
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

DATA_DIR = Path(__file__).resolve().parent / 'data'

def _origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(',') if o.strip()] or ['*']

def _optional_path(raw: Optional[str]) -> Optional[Path]:
    return Path(raw) if raw and raw.strip() else None

@dataclass(frozen=True)
class Settings:
    start_words_path: Path = DATA_DIR / 'start.txt'
    # None means the wordfreq list for `language`
    dictionary_path: Optional[Path] = None
    dictionary_size: int = 100000
    language: str = 'en'
    max_sessions: int = 10000
    log_level: str = 'INFO'
    cors_origins: List[str] = field(default_factory=lambda: ['*'])

    @classmethod
    def from_env(cls) -> 'Settings':
        return cls(
            start_words_path=Path(os.getenv('WORDSCRAMBLE_START_WORDS', str(DATA_DIR / 'start.txt'))),
            dictionary_path=_optional_path(os.getenv('WORDSCRAMBLE_DICTIONARY')),
            dictionary_size=int(os.getenv('WORDSCRAMBLE_DICTIONARY_SIZE', '100000')),
            language=os.getenv('WORDSCRAMBLE_LANGUAGE', 'en').strip().lower() or 'en',
            max_sessions=int(os.getenv('WORDSCRAMBLE_MAX_SESSIONS', '10000')),
            log_level=os.getenv('WORDSCRAMBLE_LOG_LEVEL', 'INFO').strip().upper() or 'INFO',
            cors_origins=_origins(os.getenv('WORDSCRAMBLE_CORS_ORIGINS', '*')),
        )
