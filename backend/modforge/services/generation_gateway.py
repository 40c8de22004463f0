from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from modforge.models.chat import CurrentFileContext, GeneratedCode

logger = logging.getLogger(__name__)

EMPTY_REVIEW_MESSAGE = "No code provided for review. Please select a file with content."
REVIEW_UNAVAILABLE_MESSAGE = (
    "Code review is currently unavailable. "
    "Please check syntax and formatting, and try again later."
)


class CodeGenerator(Protocol):
    @property
    def is_available(self) -> bool: ...

    async def generate(
        self,
        prompt: str,
        current_file: CurrentFileContext | None = None,
        project_context: str | None = None,
    ) -> GeneratedCode: ...

    async def review(self, code: str, filename: str, file_type: str) -> str: ...


class GenerationGateway:
    """Tries each available provider in order until one answers."""

    def __init__(self, providers: Sequence[CodeGenerator]):
        self.providers = list(providers)

    def _available(self) -> list[CodeGenerator]:
        return [provider for provider in self.providers if provider.is_available]

    async def generate(
        self,
        prompt: str,
        current_file: CurrentFileContext | None = None,
        project_context: str | None = None,
    ) -> GeneratedCode | None:
        for provider in self._available():
            try:
                result = await provider.generate(prompt, current_file, project_context)
            except Exception:
                logger.warning(
                    "Generation with %s failed, trying next provider",
                    type(provider).__name__,
                    exc_info=True,
                )
                continue
            logger.info("Generated %s with %s", result.filename, type(provider).__name__)
            return result

        logger.error("Every code generator failed for prompt %r", prompt[:50])
        return None

    async def review(self, code: str, filename: str, file_type: str) -> str:
        if not code:
            return EMPTY_REVIEW_MESSAGE

        for provider in self._available():
            try:
                return await provider.review(code, filename, file_type)
            except Exception:
                logger.warning(
                    "Review with %s failed, trying next provider",
                    type(provider).__name__,
                    exc_info=True,
                )

        logger.error("Every code reviewer failed for %s", filename)
        return REVIEW_UNAVAILABLE_MESSAGE
