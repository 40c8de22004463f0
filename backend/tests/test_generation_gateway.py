from unittest.mock import AsyncMock, MagicMock

import pytest

from modforge.models.chat import CurrentFileContext, GeneratedCode
from modforge.services.fallback_generator import FallbackGenerator
from modforge.services.generation_gateway import (
    EMPTY_REVIEW_MESSAGE,
    REVIEW_UNAVAILABLE_MESSAGE,
    GenerationGateway,
)


def _remote(*, available: bool = True) -> MagicMock:
    remote = MagicMock()
    remote.is_available = available
    remote.generate = AsyncMock(side_effect=RuntimeError("connection reset"))
    remote.review = AsyncMock(side_effect=RuntimeError("connection reset"))
    return remote


@pytest.mark.asyncio
async def test_generate_falls_back_when_remote_raises():
    remote = _remote()
    gateway = GenerationGateway([remote, FallbackGenerator()])

    result = await gateway.generate("Create a block that heals players")

    remote.generate.assert_awaited_once()
    assert result is not None
    assert result.filename.endswith(".java")
    assert result.explanation


@pytest.mark.asyncio
async def test_unavailable_remote_is_skipped():
    remote = _remote(available=False)
    gateway = GenerationGateway([remote, FallbackGenerator()])

    result = await gateway.generate("Add a ruby item")

    remote.generate.assert_not_awaited()
    assert result is not None
    assert result.filename == "CustomItem.java"


@pytest.mark.asyncio
async def test_remote_result_is_preferred():
    remote = _remote()
    remote.generate = AsyncMock(
        return_value=GeneratedCode(
            code="class Ruby {}", explanation="Ruby item", filename="Ruby.java", file_type="java"
        )
    )
    gateway = GenerationGateway([remote, FallbackGenerator()])
    context = CurrentFileContext(name="Main.java", type="java", content="class Main {}")

    result = await gateway.generate("Add a ruby item", context, "forge mod")

    remote.generate.assert_awaited_once_with("Add a ruby item", context, "forge mod")
    assert result.filename == "Ruby.java"


@pytest.mark.asyncio
async def test_generate_returns_none_when_every_provider_fails():
    gateway = GenerationGateway([_remote()])

    assert await gateway.generate("anything") is None


@pytest.mark.asyncio
async def test_review_of_empty_code():
    remote = _remote()
    gateway = GenerationGateway([remote, FallbackGenerator()])

    assert await gateway.review("", "Main.java", "java") == EMPTY_REVIEW_MESSAGE
    remote.review.assert_not_awaited()


@pytest.mark.asyncio
async def test_review_falls_back_to_heuristics():
    gateway = GenerationGateway([_remote(), FallbackGenerator()])

    review = await gateway.review("public class Main {}", "Main.java", "java")

    assert review.startswith("## Code Review for Main.java")


@pytest.mark.asyncio
async def test_review_unavailable_when_every_provider_fails():
    gateway = GenerationGateway([_remote()])

    assert await gateway.review("class A {}", "A.java", "java") == REVIEW_UNAVAILABLE_MESSAGE
