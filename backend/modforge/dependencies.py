from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Header, HTTPException, WebSocket, status
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.requests import HTTPConnection

from modforge.database import get_db
from modforge.models.project import Project
from modforge.repositories.file_repository import FileRepository
from modforge.repositories.project_repository import ProjectNotFoundError, ProjectRepository
from modforge.services.chat_service import ChatService
from modforge.services.claude_service import ClaudeService
from modforge.services.fallback_generator import FallbackGenerator
from modforge.services.file_manager import FileManager
from modforge.services.generation_gateway import GenerationGateway
from modforge.services.notification_service import NotificationService
from modforge.services.project_service import ProjectService

AsyncDBSession = Annotated[AsyncSession, Depends(get_db)]


async def get_current_user_id(
    x_user_id: Annotated[str | None, Header()] = None,
) -> str:
    """Caller identity as forwarded by the auth layer in front of the service."""
    user_id = (x_user_id or "").strip()
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required. Provide the caller id via the X-User-Id header.",
        )
    return user_id


CurrentUserId = Annotated[str, Depends(get_current_user_id)]


def get_websocket_user_id(websocket: WebSocket) -> str | None:
    """Caller identity for WebSocket handshakes.

    Browsers cannot set headers on a WebSocket, so a ``user_id`` query
    parameter is accepted as well.
    """
    user_id = websocket.headers.get("x-user-id") or websocket.query_params.get("user_id")
    return (user_id or "").strip() or None


WebSocketUserId = Annotated[str | None, Depends(get_websocket_user_id)]


def get_notification_service(connection: HTTPConnection) -> NotificationService:
    return connection.app.state.notification_service


def get_chat_service(connection: HTTPConnection) -> ChatService:
    return connection.app.state.chat_service


def get_claude_service() -> ClaudeService:
    return ClaudeService()


def get_fallback_generator() -> FallbackGenerator:
    return FallbackGenerator()


def get_generation_gateway(
    claude_service: Annotated[ClaudeService, Depends(get_claude_service)],
    fallback_generator: Annotated[FallbackGenerator, Depends(get_fallback_generator)],
) -> GenerationGateway:
    return GenerationGateway([claude_service, fallback_generator])


def get_project_repository(db: AsyncDBSession) -> ProjectRepository:
    return ProjectRepository(db)


def get_file_repository(db: AsyncDBSession) -> FileRepository:
    return FileRepository(db)


def get_project_service(
    repository: Annotated[ProjectRepository, Depends(get_project_repository)],
    file_repository: Annotated[FileRepository, Depends(get_file_repository)],
    notification_service: Annotated[NotificationService, Depends(get_notification_service)],
) -> ProjectService:
    return ProjectService(
        repository=repository,
        file_repository=file_repository,
        notification_service=notification_service,
    )


NotificationServiceDep = Annotated[NotificationService, Depends(get_notification_service)]
ChatServiceDep = Annotated[ChatService, Depends(get_chat_service)]
GenerationGatewayDep = Annotated[GenerationGateway, Depends(get_generation_gateway)]
ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]


async def get_owned_project(
    project_id: str,
    service: ProjectServiceDep,
    user_id: CurrentUserId,
) -> Project:
    try:
        return await service.get_project(project_id, user_id=user_id)
    except ProjectNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


OwnedProject = Annotated[Project, Depends(get_owned_project)]


def get_file_manager(project: OwnedProject, service: ProjectServiceDep) -> FileManager:
    return service.file_manager(project.id)


FileManagerDep = Annotated[FileManager, Depends(get_file_manager)]
