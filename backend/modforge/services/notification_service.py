from __future__ import annotations

import asyncio
import logging
from collections import deque
from dataclasses import dataclass

from modforge.models.notification import Notification, NotificationVariant

logger = logging.getLogger(__name__)


@dataclass
class Subscription:
    queue: asyncio.Queue[Notification]
    history: list[Notification]


class NotificationService:
    """Fans user notifications out to WebSocket subscribers and keeps recent history."""

    def __init__(self, history_limit: int = 200):
        self._history_limit = history_limit
        self._subscribers: dict[str, list[asyncio.Queue[Notification]]] = {}
        self._history: dict[str, deque[Notification]] = {}
        self._lock = asyncio.Lock()

    async def subscribe(self, project_id: str) -> Subscription:
        queue: asyncio.Queue[Notification] = asyncio.Queue()
        async with self._lock:
            subscribers = self._subscribers.setdefault(project_id, [])
            subscribers.append(queue)
            history = list(self._history.get(project_id, []))
        return Subscription(queue=queue, history=history)

    async def unsubscribe(self, project_id: str, queue: asyncio.Queue[Notification]) -> None:
        async with self._lock:
            subscribers = self._subscribers.get(project_id)
            if not subscribers:
                return
            try:
                subscribers.remove(queue)
            except ValueError:  # queue already removed
                return
            if not subscribers:
                self._subscribers.pop(project_id, None)

    async def publish(self, notification: Notification) -> None:
        async with self._lock:
            history = self._history.get(notification.project_id)
            if history is None:
                history = deque(maxlen=self._history_limit)
                self._history[notification.project_id] = history
            history.append(notification)
            subscribers = list(self._subscribers.get(notification.project_id, []))

        for queue in subscribers:
            await queue.put(notification)

    async def notify(
        self,
        project_id: str,
        title: str,
        description: str | None = None,
        *,
        destructive: bool = False,
    ) -> Notification:
        notification = Notification(
            project_id=project_id,
            title=title,
            description=description,
            variant=(
                NotificationVariant.DESTRUCTIVE if destructive else NotificationVariant.DEFAULT
            ),
        )
        logger.debug("Notification for %s: %s", project_id, title)
        await self.publish(notification)
        return notification

    def history(self, project_id: str) -> list[Notification]:
        return list(self._history.get(project_id, []))

    async def forget(self, project_id: str) -> None:
        """Drop the stored history of a project that no longer exists."""
        async with self._lock:
            self._history.pop(project_id, None)

    async def shutdown(self) -> None:
        async with self._lock:
            self._subscribers.clear()
            self._history.clear()
