from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from uuid import uuid4

from modforge.models.chat import (
    ChatMessage,
    ChatMessageType,
    CurrentFileContext,
)
from modforge.services.generation_gateway import GenerationGateway

logger = logging.getLogger(__name__)

GENERATION_FAILED_MESSAGE = "Sorry, I couldn't generate code for that request. Please try again."


@dataclass(slots=True)
class ChatTurn:
    user_message: ChatMessage
    ai_message: ChatMessage


class ChatService:
    """Per-project chat history kept for the lifetime of the process."""

    def __init__(self) -> None:
        self._messages: dict[str, list[ChatMessage]] = {}
        self._lock = asyncio.Lock()

    async def _append(self, project_id: str, message: ChatMessage) -> None:
        async with self._lock:
            self._messages.setdefault(project_id, []).append(message)

    def list_messages(self, project_id: str) -> list[ChatMessage]:
        return list(self._messages.get(project_id, []))

    def get_message(self, project_id: str, message_id: str) -> ChatMessage | None:
        return next(
            (message for message in self._messages.get(project_id, []) if message.id == message_id),
            None,
        )

    async def send(
        self,
        project_id: str,
        prompt: str,
        gateway: GenerationGateway,
        current_file: CurrentFileContext | None = None,
        project_context: str | None = None,
    ) -> ChatTurn:
        user_message = ChatMessage(
            id=uuid4().hex,
            type=ChatMessageType.USER,
            content=prompt,
            file_context=current_file.name if current_file else None,
        )
        await self._append(project_id, user_message)

        generated = await gateway.generate(prompt, current_file, project_context)
        if generated is None:
            ai_message = ChatMessage(
                id=uuid4().hex,
                type=ChatMessageType.AI,
                content=GENERATION_FAILED_MESSAGE,
            )
        else:
            ai_message = ChatMessage(
                id=uuid4().hex,
                type=ChatMessageType.AI,
                content=generated.explanation,
                generated_code=generated,
            )
        await self._append(project_id, ai_message)
        return ChatTurn(user_message=user_message, ai_message=ai_message)

    async def clear(self, project_id: str) -> None:
        async with self._lock:
            self._messages.pop(project_id, None)
        logger.debug("Cleared chat history for %s", project_id)

    async def shutdown(self) -> None:
        async with self._lock:
            self._messages.clear()
