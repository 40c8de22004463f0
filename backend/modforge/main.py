from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from modforge.config import settings
from modforge.database import close_db, init_db
from modforge.routes import api_router, ws_router
from modforge.services.chat_service import ChatService
from modforge.services.notification_service import NotificationService

load_dotenv()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Initialize database
    await init_db()

    # Initialize services
    notification_service = NotificationService(settings.notification_history_limit)
    chat_service = ChatService()

    app.state.notification_service = notification_service
    app.state.chat_service = chat_service
    logger.info("ModForge backend started")

    try:
        yield
    finally:
        await notification_service.shutdown()
        await chat_service.shutdown()
        await close_db()


def create_app() -> FastAPI:
    app = FastAPI(
        title="ModForge Workbench Backend",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix=settings.api_prefix)
    app.include_router(ws_router)

    return app


app = create_app()
