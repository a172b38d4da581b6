from typing import Union

from fastapi import APIRouter, Depends, HTTPException, Request

from wordscramble.managers.game import GameManager, SessionNotFound
from wordscramble.schemas import Accepted, Ignored, Rejected, SessionState, WordSubmission

router = APIRouter(prefix="/sessions", tags=["sessions"])

def get_games(request: Request) -> GameManager:
    return request.app.state.games

def _session_or_404(games: GameManager, session_id: str) -> SessionState:
    try:
        return games.get(session_id)
    except SessionNotFound:
        raise HTTPException(status_code=404, detail=f"Session {session_id} not found")

@router.post("", response_model=SessionState)
async def create_session(games: GameManager = Depends(get_games)):
    return games.start_session()

@router.get("/{session_id}", response_model=SessionState)
async def read_session(session_id: str, games: GameManager = Depends(get_games)):
    return _session_or_404(games, session_id)

@router.post("/{session_id}/restart", response_model=SessionState)
async def restart_session(session_id: str, games: GameManager = Depends(get_games)):
    _session_or_404(games, session_id)
    return games.start_session(session_id)

@router.post("/{session_id}/words", response_model=Union[Accepted, Rejected, Ignored])
async def submit_word(session_id: str, body: WordSubmission, games: GameManager = Depends(get_games)):
    _session_or_404(games, session_id)
    return games.submit(session_id, body.word)

@router.delete("/{session_id}")
async def delete_session(session_id: str, games: GameManager = Depends(get_games)):
    games.end_session(session_id)
    return {"ok": True}
