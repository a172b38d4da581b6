from __future__ import annotations
import logging
import random
from typing import Dict, Optional

from ..config import Settings
from ..dictionary import DictionaryService, Oracle
from ..game_logic import start_session, submit
from ..schemas import Accepted, Rejected, SessionState, SubmitResult
from ..words import FileWordSource

logger = logging.getLogger(__name__)

class SessionNotFound(KeyError):
    pass

class GameManager:
    def __init__(self, sio, oracle: Oracle, word_source, language: str = 'en', rng=random,
                 max_sessions: int = 10000):
        self.sio = sio
        self.oracle = oracle
        self.word_source = word_source
        self.language = language
        self.rng = rng
        self.max_sessions = max_sessions
        self.sessions: Dict[str, SessionState] = {}

    @classmethod
    def from_settings(cls, sio, settings: Settings) -> 'GameManager':
        if settings.dictionary_path:
            dictionary = DictionaryService.load_from_txt(settings.dictionary_path, language=settings.language)
        else:
            dictionary = DictionaryService.from_wordfreq(settings.language, settings.dictionary_size)
        return cls(sio, dictionary, FileWordSource(settings.start_words_path),
                   language=settings.language, max_sessions=settings.max_sessions)

    def get(self, session_id: str) -> SessionState:
        try:
            return self.sessions[session_id]
        except KeyError:
            raise SessionNotFound(session_id) from None

    def start_session(self, session_id: Optional[str] = None) -> SessionState:
        # Restarting an existing id replaces its state wholesale
        session = start_session(self.word_source, session_id=session_id, rng=self.rng)
        self._store(session)
        return session

    def _store(self, session: SessionState):
        # Least recently used sessions go first once the cap is reached
        self.sessions.pop(session.id, None)
        while self.sessions and len(self.sessions) >= self.max_sessions:
            evicted = next(iter(self.sessions))
            del self.sessions[evicted]
            logger.info("Session %s evicted (limit %s)", evicted, self.max_sessions)
        self.sessions[session.id] = session

    def get_or_start(self, session_id: str) -> SessionState:
        if session_id not in self.sessions:
            return self.start_session(session_id)
        return self.sessions[session_id]

    def submit(self, session_id: str, raw: str) -> SubmitResult:
        result = submit(raw, self.get(session_id), self.oracle, self.language)
        if isinstance(result, Accepted):
            self._store(result.session)
        return result

    def end_session(self, session_id: str) -> bool:
        return self.sessions.pop(session_id, None) is not None

    def is_valid_word(self, word: str) -> bool:
        return self.oracle(word.strip().lower(), self.language)

    async def publish_state(self, session_id: str):
        state = self.get(session_id)
        await self.sio.emit('game:state', state.model_dump(), room=session_id)

    async def publish_result(self, session_id: str, result: SubmitResult):
        if isinstance(result, Accepted):
            await self.sio.emit('word:accepted', {
                'entry': result.entry.model_dump(),
                'state': result.session.model_dump(),
            }, room=session_id)
        elif isinstance(result, Rejected):
            await self.sio.emit('word:rejected', result.model_dump(exclude={'status'}), room=session_id)
