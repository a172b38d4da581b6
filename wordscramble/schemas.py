from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field, computed_field
from typing import Annotated, List, Literal, Tuple, Union

RejectReason = Literal['used', 'impossible', 'unknown', 'prefix']

class ScoredWord(BaseModel):
    model_config = ConfigDict(frozen=True)

    word: str
    points: int

class SessionState(BaseModel):
    # Entries are most-recent-first; words and points stay paired.
    model_config = ConfigDict(frozen=True)

    id: str
    rootWord: str
    entries: Tuple[ScoredWord, ...] = ()

    @computed_field
    @property
    def score(self) -> int:
        return sum(e.points for e in self.entries)

    @property
    def usedWords(self) -> List[str]:
        return [e.word for e in self.entries]

    @property
    def scores(self) -> List[int]:
        return [e.points for e in self.entries]

    def with_entry(self, entry: ScoredWord) -> 'SessionState':
        return self.model_copy(update={'entries': (entry,) + self.entries})

class Accepted(BaseModel):
    status: Literal['accepted'] = 'accepted'
    session: SessionState
    entry: ScoredWord

class Rejected(BaseModel):
    status: Literal['rejected'] = 'rejected'
    reason: RejectReason
    title: str
    message: str

class Ignored(BaseModel):
    status: Literal['ignored'] = 'ignored'

SubmitResult = Annotated[Union[Accepted, Rejected, Ignored], Field(discriminator='status')]

class WordSubmission(BaseModel):
    word: str
