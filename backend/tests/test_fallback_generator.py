import json

import pytest

from modforge.models.chat import CurrentFileContext
from modforge.services.fallback_generator import (
    FallbackGenerator,
    review_score,
    suggest_file_type,
    suggest_filename,
)


@pytest.fixture
def generator():
    return FallbackGenerator()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("prompt", "filename", "file_type"),
    [
        ("Create a block that heals players", "CustomBlock.java", "java"),
        ("Add a magic item", "CustomItem.java", "java"),
        ("Spawn a friendly entity", "CustomEntity.java", "java"),
        ("Write a recipe for rubies", "custom_recipe.json", "json"),
        ("Handle the login event", "CustomEventHandler.java", "java"),
        ("Make something cool", "GeneratedCode.java", "java"),
    ],
)
async def test_generate_picks_template_by_keyword(generator, prompt, filename, file_type):
    result = await generator.generate(prompt)

    assert result.filename == filename
    assert result.file_type == file_type
    assert result.explanation.startswith("⚠️ Generated template")
    assert result.code


@pytest.mark.asyncio
async def test_block_keyword_wins_over_item(generator):
    result = await generator.generate("A block that drops an item")

    assert result.filename == "CustomBlock.java"
    assert "A block that drops an item" in result.code


@pytest.mark.asyncio
async def test_recipe_template_is_valid_json(generator):
    result = await generator.generate("recipe")

    assert json.loads(result.code)["type"] == "minecraft:crafting_shaped"


def test_suggestions_use_current_file():
    current = CurrentFileContext(name="Ruby.java", type="java", content="")

    assert suggest_filename("do the thing", current) == "RubyGenerated.java"
    assert suggest_filename("do the thing") == "Generated.java"
    assert suggest_file_type("update the build script") == "gradle"
    assert suggest_file_type("tweak it", CurrentFileContext(name="a.toml", type="toml")) == "toml"


def test_review_score():
    assert review_score(1, False, False) == 7
    assert review_score(150, True, False) == 9
    assert review_score(150, True, True) == 10


@pytest.mark.asyncio
async def test_review_java(generator):
    review = await generator.review("public class Main {}", "Main.java", "java")

    assert "### Java Code Analysis" in review
    assert "- Add JavaDoc comments for public methods and classes" in review
    assert "**Code Quality Score**: 7/10" in review
    assert review.endswith("🟡 **Status**: Decent code with room for improvement")


@pytest.mark.asyncio
async def test_review_invalid_json(generator):
    review = await generator.review("{not json", "bad.json", "json")

    assert "❌ **Syntax Error**" in review


@pytest.mark.asyncio
async def test_review_gradle_by_filename(generator):
    code = "repositories { mavenCentral() }\ndependencies { minecraft 'forge' }"

    review = await generator.review(code, "build.gradle", "text")

    assert "### Gradle Build File Analysis" in review
    assert "✅ **Mod Loader**" in review


@pytest.mark.asyncio
async def test_review_full_score(generator):
    code = (
        "// Loads the mod configuration from disk\n"
        "public class Loader {\n"
        "    void load() { try { read(); } catch (Exception e) { } }\n"
        "}\n"
    )

    review = await generator.review(code, "Loader.java", "java")

    assert "**Code Quality Score**: 10/10" in review
    assert review.endswith("🟢 **Status**: Good quality code with solid structure")
