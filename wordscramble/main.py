from __future__ import annotations
import logging

import socketio
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings
from .managers.game import GameManager
from .routers import sessions

settings = Settings.from_env()

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Socket.IO server (ASGI)
sio = socketio.AsyncServer(async_mode='asgi', cors_allowed_origins=settings.cors_origins)
app = FastAPI(title="Word Scramble Server", version="0.1.0")

# Mount Socket.IO ASGI application
asgi_app = socketio.ASGIApp(sio, other_asgi_app=app)

# CORS for REST
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

games = GameManager.from_settings(sio, settings)
app.state.games = games
app.include_router(sessions.router)

# Dictionary validation REST endpoint
@app.get('/dict/validate')
async def validate_word(word: str, manager: GameManager = Depends(sessions.get_games)):
    return { 'word': word.strip().lower(), 'valid': manager.is_valid_word(word) }

# Socket.IO Events
@sio.event
async def connect(sid, environ, auth=None):
    games.start_session(sid)
    await games.publish_state(sid)

@sio.event
async def disconnect(sid):
    games.end_session(sid)

@sio.on('game:start')
async def game_start(sid, *args):
    games.start_session(sid)
    await games.publish_state(sid)

@sio.on('game:restart')
async def game_restart(sid, *args):
    await game_start(sid)

@sio.on('game:state')
async def game_state(sid, *args):
    games.get_or_start(sid)
    await games.publish_state(sid)

@sio.on('game:submit')
async def game_submit(sid, payload=None):
    raw = payload.get('word', '') if isinstance(payload, dict) else payload
    if not isinstance(raw, str):
        logger.debug("Ignoring non-text submission from %s: %r", sid, payload)
        return
    games.get_or_start(sid)
    result = games.submit(sid, raw)
    await games.publish_result(sid, result)

# Export ASGI app for uvicorn
application = asgi_app

# For local running: uvicorn wordscramble.main:application --reload --host 0.0.0.0 --port 8000
