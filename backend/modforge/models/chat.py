from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(UTC)


class CurrentFileContext(BaseModel):
    """The file open in the editor when a prompt is sent."""

    name: str
    type: str = "java"
    content: str = ""


class GeneratedCode(BaseModel):
    """A generated source file proposed by a code generator."""

    model_config = ConfigDict(populate_by_name=True)

    code: str
    explanation: str
    filename: str
    file_type: str = Field(default="java", alias="fileType")


class ChatMessageType(str, Enum):
    USER = "user"
    AI = "ai"


class ChatMessage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    type: ChatMessageType
    content: str
    timestamp: datetime = Field(default_factory=_utcnow)
    file_context: str | None = Field(default=None, alias="fileContext")
    generated_code: GeneratedCode | None = Field(default=None, alias="generatedCode")
