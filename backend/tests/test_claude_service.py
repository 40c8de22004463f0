import pytest

from modforge.models.chat import CurrentFileContext
from modforge.services.claude_service import ClaudeService, ClaudeServiceUnavailable


@pytest.fixture
def service():
    return ClaudeService()


def test_availability_follows_api_key(service, monkeypatch):
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    assert not service.is_available

    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-test")
    assert service.is_available


@pytest.mark.asyncio
async def test_query_without_key_raises(service, monkeypatch):
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)

    with pytest.raises(ClaudeServiceUnavailable):
        await service.generate("Create a block")


def test_parse_json_reply(service):
    text = (
        '{"code": "class Ruby {}", "explanation": "A ruby", '
        '"filename": "Ruby.java", "fileType": "java"}'
    )

    result = service._parse_generation(text, "ruby", None)

    assert result.filename == "Ruby.java"
    assert result.code == "class Ruby {}"


def test_parse_fenced_json_reply(service):
    text = (
        "Here you go:\n```json\n"
        '{"code": "{}", "explanation": "Model", "filename": "ruby.json", "fileType": "json"}\n'
        "```"
    )

    result = service._parse_generation(text, "ruby model", None)

    assert result.filename == "ruby.json"
    assert result.file_type == "json"


def test_parse_plain_code_reply(service):
    text = "Sure!\n```java\npublic class Ruby {}\n```"
    current = CurrentFileContext(name="Gem.java", type="java")

    result = service._parse_generation(text, "make it shiny", current)

    assert result.code == "public class Ruby {}"
    assert result.filename == "GemGenerated.java"
    assert result.file_type == "java"
    assert result.explanation.startswith("Generated code based on your request")


def test_generation_prompt_includes_context(service):
    current = CurrentFileContext(name="Gem.java", type="java", content="class Gem {}")

    prompt = service._compose_generation_prompt("add ore", current, "forge mod 'Gems'")

    assert "forge mod 'Gems'" in prompt
    assert "File: Gem.java" in prompt
    assert prompt.endswith("User prompt: add ore")
    assert "No current file selected" in service._compose_generation_prompt("x", None, None)
