"""Claude Agent SDK configuration builder.

Generation and review are single-shot text completions, so the agent gets no
tools and a Minecraft-modding system prompt.
"""

from __future__ import annotations

import logging

from claude_agent_sdk import ClaudeAgentOptions

from modforge.config import settings

logger = logging.getLogger(__name__)


GENERATION_SYSTEM_PROMPT = (
    "You are an expert Minecraft mod developer specializing in Java development for "
    "Forge, Fabric, Quilt, and NeoForge platforms. "
    "Generate clean, working Minecraft mod code that follows best practices, with proper "
    "imports, annotations and registration. "
    "Respond ONLY with a JSON object containing: "
    '"code" (the generated Java/JSON code), '
    '"explanation" (brief explanation of what the code does), '
    '"filename" (suggested filename) and '
    '"fileType" (one of java, json, mcmeta, properties, toml, gradle).'
)

REVIEW_SYSTEM_PROMPT = (
    "You are an expert code reviewer specializing in Minecraft modding and Java development. "
    "Review the file covering code quality and best practices, Minecraft modding specific "
    "issues, potential bugs or improvements, performance and security considerations. "
    "Be constructive and specific in your feedback."
)


def build_claude_options(system_prompt: str) -> ClaudeAgentOptions:
    """Build Claude Agent options for a tool-less, single-turn query.

    Args:
        system_prompt: Instructions for the agent.

    Returns:
        Configured ClaudeAgentOptions with no tools enabled.
    """
    logger.debug("Building Claude options (model=%s)", settings.claude_model or "default")

    options = ClaudeAgentOptions(
        allowed_tools=[],
        max_turns=settings.claude_max_turns,
        system_prompt=system_prompt,
    )

    if settings.claude_model:
        options.model = settings.claude_model

    return options
