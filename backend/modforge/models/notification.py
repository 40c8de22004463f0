from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(UTC)


class NotificationVariant(str, Enum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


class Notification(BaseModel):
    """Transient user-facing report published to WebSocket subscribers."""

    project_id: str
    title: str
    description: str | None = None
    variant: NotificationVariant = NotificationVariant.DEFAULT
    timestamp: datetime = Field(default_factory=_utcnow)
