from __future__ import annotations

import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect, status

from modforge.dependencies import ProjectServiceDep, WebSocketUserId
from modforge.repositories.project_repository import ProjectNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.websocket("/ws/{project_id}")
async def project_notifications(
    websocket: WebSocket,
    project_id: str,
    service: ProjectServiceDep,
    user_id: WebSocketUserId,
) -> None:
    """Stream a project's notifications to its owner: history first, then live."""
    if user_id is None:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    try:
        await service.get_project(project_id, user_id=user_id)
    except ProjectNotFoundError:
        logger.warning("Refused notification stream for %s to %s", project_id, user_id)
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    await websocket.accept()

    notifications = service.notification_service
    subscription = await notifications.subscribe(project_id)
    try:
        for notification in subscription.history:
            await websocket.send_json(notification.model_dump(mode="json"))

        while True:
            notification = await subscription.queue.get()
            await websocket.send_json(notification.model_dump(mode="json"))
    except WebSocketDisconnect:
        return
    finally:
        await notifications.unsubscribe(project_id, subscription.queue)
