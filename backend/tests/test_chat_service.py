from unittest.mock import AsyncMock, MagicMock

import pytest

from modforge.models.chat import ChatMessageType, CurrentFileContext
from modforge.services.chat_service import GENERATION_FAILED_MESSAGE, ChatService
from modforge.services.fallback_generator import FallbackGenerator
from modforge.services.generation_gateway import GenerationGateway


@pytest.mark.asyncio
async def test_send_records_user_and_ai_messages():
    service = ChatService()
    gateway = GenerationGateway([FallbackGenerator()])
    current = CurrentFileContext(name="Main.java", type="java", content="class Main {}")

    turn = await service.send("p1", "Create a block", gateway, current)

    assert turn.user_message.type == ChatMessageType.USER
    assert turn.user_message.file_context == "Main.java"
    assert turn.ai_message.type == ChatMessageType.AI
    assert turn.ai_message.generated_code.filename == "CustomBlock.java"
    assert turn.ai_message.content == turn.ai_message.generated_code.explanation
    assert [m.id for m in service.list_messages("p1")] == [
        turn.user_message.id,
        turn.ai_message.id,
    ]
    assert service.get_message("p1", turn.ai_message.id) == turn.ai_message


@pytest.mark.asyncio
async def test_failed_generation_yields_apology():
    service = ChatService()
    gateway = MagicMock()
    gateway.generate = AsyncMock(return_value=None)

    turn = await service.send("p1", "anything", gateway)

    assert turn.ai_message.content == GENERATION_FAILED_MESSAGE
    assert turn.ai_message.generated_code is None


@pytest.mark.asyncio
async def test_clear_only_affects_one_project():
    service = ChatService()
    gateway = GenerationGateway([FallbackGenerator()])
    await service.send("p1", "item", gateway)
    await service.send("p2", "item", gateway)

    await service.clear("p1")

    assert service.list_messages("p1") == []
    assert len(service.list_messages("p2")) == 2
    assert service.get_message("p1", "missing") is None
