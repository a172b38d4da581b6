from __future__ import annotations
import logging
import random
import uuid
from typing import Optional, Sequence

from .dictionary import Oracle
from .schemas import Accepted, Ignored, Rejected, ScoredWord, SessionState, SubmitResult

logger = logging.getLogger(__name__)

FALLBACK_ROOT_WORD = 'silkworm'
PREFIX_LENGTH = 3

def normalize(raw: str) -> str:
    return raw.lower().strip()

def is_original(word: str, used_words: Sequence[str]) -> bool:
    return word not in used_words

def is_possible(word: str, root_word: str) -> bool:
    letters = list(root_word)
    for letter in word:
        if letter in letters:
            letters.remove(letter)
        else:
            return False
    return True

def is_real(word: str, oracle: Oracle, language: str = 'en') -> bool:
    return oracle(word, language)

def is_start(word: str, root_word: str, prefix_length: int = PREFIX_LENGTH) -> bool:
    # Short words are exempt. Anything sharing the root's prefix is
    # rejected, the root word included.
    if len(root_word) < prefix_length or len(word) < prefix_length:
        return True
    return root_word[:prefix_length] != word[:prefix_length]

def score(word: str) -> int:
    if len(word) <= 3:
        return 1
    if len(word) <= 5:
        return 3
    return 5

def validate(word: str, session: SessionState, oracle: Oracle, language: str = 'en') -> Optional[Rejected]:
    """Run the checks in order and return the first rejection, or None."""
    if not is_original(word, session.usedWords):
        return Rejected(reason='used', title='Word used already', message='Be more original')
    if not is_possible(word, session.rootWord):
        return Rejected(reason='impossible', title='Word not possible',
                        message=f"You can't spell that word from '{session.rootWord}'!")
    if not is_real(word, oracle, language):
        return Rejected(reason='unknown', title='Word not recognized',
                        message="You can't just make them up, you know!")
    if not is_start(word, session.rootWord):
        return Rejected(reason='prefix', title='First letter of the word',
                        message="You can't just take the first letters...")
    return None

def submit(raw: str, session: SessionState, oracle: Oracle,
           language: str = 'en') -> SubmitResult:
    word = normalize(raw)
    if not word:
        return Ignored()
    rejection = validate(word, session, oracle, language)
    if rejection:
        logger.debug("Session %s rejected %r: %s", session.id, word, rejection.reason)
        return rejection
    entry = ScoredWord(word=word, points=score(word))
    logger.debug("Session %s accepted %r (+%s)", session.id, word, entry.points)
    return Accepted(session=session.with_entry(entry), entry=entry)

def pick_root_word(word_source, rng=random) -> str:
    try:
        candidates = [w.strip().lower() for w in word_source.load()]
    except OSError as e:
        logger.warning("Start words unavailable (%s), using %r", e, FALLBACK_ROOT_WORD)
        return FALLBACK_ROOT_WORD
    candidates = [w for w in candidates if w]
    if not candidates:
        logger.warning("Start word list is empty, using %r", FALLBACK_ROOT_WORD)
        return FALLBACK_ROOT_WORD
    return rng.choice(candidates)

def start_session(word_source, session_id: Optional[str] = None, rng=random) -> SessionState:
    session = SessionState(id=session_id or uuid.uuid4().hex, rootWord=pick_root_word(word_source, rng))
    logger.info("Session %s started with root word %r", session.id, session.rootWord)
    return session
