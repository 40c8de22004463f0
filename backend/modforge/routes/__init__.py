from __future__ import annotations

from fastapi import APIRouter

from . import chat, files, functions, health, projects, ws

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(functions.router)
api_router.include_router(projects.router)
api_router.include_router(files.router)
api_router.include_router(chat.router)

ws_router = ws.router

__all__ = ["api_router", "ws_router"]
