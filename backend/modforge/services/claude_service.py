from __future__ import annotations

import json
import logging
import os
import re
from typing import Any

from claude_agent_sdk import (
    AssistantMessage,
    ClaudeSDKClient,
    ResultMessage,
    TextBlock,
)
from pydantic import ValidationError

from modforge.models.chat import CurrentFileContext, GeneratedCode
from modforge.services.fallback_generator import suggest_file_type, suggest_filename
from modforge.tools.builders import (
    GENERATION_SYSTEM_PROMPT,
    REVIEW_SYSTEM_PROMPT,
    build_claude_options,
)

logger = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"```(?:[a-zA-Z]+)?\n?([\s\S]*?)```")


class ClaudeServiceUnavailable(RuntimeError):
    """Raised when the Claude Agent SDK cannot be used (e.g., missing API key)."""


class ClaudeService:
    """Thin wrapper around the Claude Agent SDK for one-shot generation and review."""

    @property
    def is_available(self) -> bool:
        return bool(os.getenv("ANTHROPIC_API_KEY"))

    async def generate(
        self,
        prompt: str,
        current_file: CurrentFileContext | None = None,
        project_context: str | None = None,
    ) -> GeneratedCode:
        """Ask Claude for a source file and parse its JSON reply."""
        text = await self._query(
            self._compose_generation_prompt(prompt, current_file, project_context),
            GENERATION_SYSTEM_PROMPT,
        )
        return self._parse_generation(text, prompt, current_file)

    async def review(self, code: str, filename: str, file_type: str) -> str:
        prompt = (
            f"Please review this {file_type} file ({filename}):\n\n"
            f"```{file_type}\n{code}\n```\n\n"
            "Provide feedback on code quality, best practices, potential issues, "
            "and suggestions for improvement."
        )
        return await self._query(prompt, REVIEW_SYSTEM_PROMPT)

    async def _query(self, prompt: str, system_prompt: str) -> str:
        if not self.is_available:
            raise ClaudeServiceUnavailable("Claude API key is not configured")

        options = build_claude_options(system_prompt)
        text_blocks: list[str] = []
        async with ClaudeSDKClient(options=options) as client:
            await client.query(prompt=prompt)

            async for message in client.receive_messages():
                if isinstance(message, AssistantMessage):
                    text_blocks.extend(self._text_of(message))
                elif isinstance(message, ResultMessage):
                    logger.debug(
                        "Claude query finished (cost=%s)",
                        getattr(message, "total_cost_usd", None),
                    )
                    break

        text = "\n".join(text_blocks).strip()
        if not text:
            raise ClaudeServiceUnavailable("Claude returned an empty reply")
        return text

    def _text_of(self, message: Any) -> list[str]:
        return [
            block.text
            for block in getattr(message, "content", [])
            if isinstance(block, TextBlock)
        ]

    def _compose_generation_prompt(
        self,
        prompt: str,
        current_file: CurrentFileContext | None,
        project_context: str | None,
    ) -> str:
        if current_file is not None:
            file_section = (
                f"File: {current_file.name}\n"
                f"Type: {current_file.type}\n"
                f"Content: {current_file.content}"
            )
        else:
            file_section = "No current file selected"
        return (
            f"PROJECT CONTEXT:\n{project_context or 'General Minecraft mod project'}\n\n"
            f"CURRENT FILE CONTEXT:\n{file_section}\n\n"
            f"User prompt: {prompt}"
        )

    def _parse_generation(
        self,
        text: str,
        prompt: str,
        current_file: CurrentFileContext | None,
    ) -> GeneratedCode:
        candidate = text
        fenced = _CODE_FENCE.search(text)
        if fenced and not text.lstrip().startswith("{"):
            candidate = fenced.group(1)

        try:
            payload = json.loads(candidate)
            return GeneratedCode.model_validate(payload)
        except (ValueError, ValidationError):
            logger.debug("Claude reply is not structured JSON; wrapping plain text")

        code = fenced.group(1).strip() if fenced else text
        return GeneratedCode(
            code=code,
            explanation=f'Generated code based on your request: "{prompt[:100]}"',
            filename=suggest_filename(prompt, current_file),
            file_type=suggest_file_type(prompt, current_file),
        )
