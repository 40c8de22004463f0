from __future__ import annotations

import json
import re

from modforge.models.chat import CurrentFileContext, GeneratedCode

TEMPLATE_NOTICE = "⚠️ Generated template {kind} (AI temporarily unavailable)."


def suggest_filename(prompt: str, current_file: CurrentFileContext | None = None) -> str:
    lower_prompt = prompt.lower()
    if "block" in lower_prompt:
        return "CustomBlock.java"
    if "item" in lower_prompt:
        return "CustomItem.java"
    if "entity" in lower_prompt:
        return "CustomEntity.java"
    if "recipe" in lower_prompt:
        return "custom_recipe.json"
    if "model" in lower_prompt:
        return "custom_model.json"
    if current_file is not None and current_file.name:
        stem = re.sub(r"\.[^/.]+$", "", current_file.name)
        return f"{stem}Generated.java"
    return "Generated.java"


def suggest_file_type(prompt: str, current_file: CurrentFileContext | None = None) -> str:
    lower_prompt = prompt.lower()
    if any(keyword in lower_prompt for keyword in ("recipe", "model", "json")):
        return "json"
    if "gradle" in lower_prompt or "build" in lower_prompt:
        return "gradle"
    if "properties" in lower_prompt:
        return "properties"
    if current_file is not None and current_file.type:
        return current_file.type
    return "java"


class FallbackGenerator:
    """Deterministic template generator used when no remote model is reachable."""

    @property
    def is_available(self) -> bool:
        return True

    async def generate(
        self,
        prompt: str,
        current_file: CurrentFileContext | None = None,
        project_context: str | None = None,
    ) -> GeneratedCode:
        lower_prompt = prompt.lower()
        excerpt = prompt[:50]

        if "block" in lower_prompt:
            return GeneratedCode(
                code=self._block_template(excerpt),
                explanation=self._explanation("block class"),
                filename="CustomBlock.java",
                file_type="java",
            )
        if "item" in lower_prompt:
            return GeneratedCode(
                code=self._item_template(excerpt),
                explanation=self._explanation("item class"),
                filename="CustomItem.java",
                file_type="java",
            )
        if "entity" in lower_prompt:
            return GeneratedCode(
                code=self._entity_template(excerpt),
                explanation=self._explanation("entity class"),
                filename="CustomEntity.java",
                file_type="java",
            )
        if "recipe" in lower_prompt:
            return GeneratedCode(
                code=self._recipe_template(),
                explanation=self._explanation("crafting recipe"),
                filename="custom_recipe.json",
                file_type="json",
            )
        if "event" in lower_prompt:
            return GeneratedCode(
                code=self._event_template(excerpt),
                explanation=self._explanation("event handler"),
                filename="CustomEventHandler.java",
                file_type="java",
            )

        return GeneratedCode(
            code=self._default_template(prompt),
            explanation=(
                f"{TEMPLATE_NOTICE.format(kind='code')} Please customize this template "
                f"based on your requirements: {prompt[:100]}"
            ),
            filename="GeneratedCode.java",
            file_type="java",
        )

    def _explanation(self, kind: str) -> str:
        return (
            f"{TEMPLATE_NOTICE.format(kind=kind)} "
            "This is a basic template that needs customization."
        )

    def _block_template(self, excerpt: str) -> str:
        return f"""package com.example.mod.block;

import net.minecraft.world.level.block.Block;
import net.minecraft.world.level.block.SoundType;
import net.minecraft.world.level.block.state.BlockBehaviour;

public class CustomBlock extends Block {{
    public CustomBlock() {{
        super(BlockBehaviour.Properties.of()
            .strength(3.0F, 4.0F)
            .sound(SoundType.STONE)
            .requiresCorrectToolForDrops());
    }}

    // TODO: Add custom block functionality based on: {excerpt}...
}}"""

    def _item_template(self, excerpt: str) -> str:
        return f"""package com.example.mod.item;

import net.minecraft.world.item.Item;
import net.minecraft.world.item.Rarity;

public class CustomItem extends Item {{
    public CustomItem() {{
        super(new Item.Properties()
            .stacksTo(64)
            .rarity(Rarity.COMMON));
    }}

    // TODO: Add custom item functionality based on: {excerpt}...
}}"""

    def _entity_template(self, excerpt: str) -> str:
        return f"""package com.example.mod.entity;

import net.minecraft.world.entity.EntityType;
import net.minecraft.world.entity.ai.goal.FloatGoal;
import net.minecraft.world.entity.ai.goal.LookAtPlayerGoal;
import net.minecraft.world.entity.ai.goal.RandomLookAroundGoal;
import net.minecraft.world.entity.ai.goal.WaterAvoidingRandomStrollGoal;
import net.minecraft.world.entity.animal.Animal;
import net.minecraft.world.entity.player.Player;
import net.minecraft.world.level.Level;

public abstract class CustomEntity extends Animal {{
    protected CustomEntity(EntityType<? extends Animal> entityType, Level level) {{
        super(entityType, level);
    }}

    @Override
    protected void registerGoals() {{
        this.goalSelector.addGoal(0, new FloatGoal(this));
        this.goalSelector.addGoal(1, new WaterAvoidingRandomStrollGoal(this, 1.0D));
        this.goalSelector.addGoal(2, new LookAtPlayerGoal(this, Player.class, 6.0F));
        this.goalSelector.addGoal(3, new RandomLookAroundGoal(this));
    }}

    // TODO: Add custom entity behaviour based on: {excerpt}...
}}"""

    def _recipe_template(self) -> str:
        return json.dumps(
            {
                "type": "minecraft:crafting_shaped",
                "pattern": ["XXX", "XYX", "XXX"],
                "key": {"X": {"item": "minecraft:stone"}, "Y": {"item": "minecraft:diamond"}},
                "result": {"item": "mymod:example_item", "count": 1},
            },
            indent=2,
        )

    def _event_template(self, excerpt: str) -> str:
        return f"""package com.example.mod.event;

import net.minecraftforge.event.entity.player.PlayerEvent;
import net.minecraftforge.eventbus.api.SubscribeEvent;
import net.minecraftforge.fml.common.Mod;

@Mod.EventBusSubscriber
public class CustomEventHandler {{

    @SubscribeEvent
    public static void onPlayerJoin(PlayerEvent.PlayerLoggedInEvent event) {{
        // TODO: Handle the event based on: {excerpt}...
    }}
}}"""

    def _default_template(self, prompt: str) -> str:
        return f"""package com.example.mod;

/**
 * ⚠️ TEMPLATE CODE - AI temporarily unavailable
 * Generated for: {prompt[:80]}...
 *
 * This is a basic template that should be customized for your specific needs.
 */
public class GeneratedCode {{

    public void customMethod() {{
        // TODO: Implement functionality for: {prompt[:50]}...
        System.out.println("Custom code executed!");
    }}
}}"""

    async def review(self, code: str, filename: str, file_type: str) -> str:
        """Heuristic markdown review with a quality score out of 10."""
        code_length = len(code)
        lines = len(code.split("\n"))
        has_comments = "//" in code or "/*" in code
        has_error_handling = any(token in code for token in ("try", "catch", "throw"))
        has_logging = any(token in code for token in ("logger", "log", "System.out"))

        parts = [f"## Code Review for {filename}\n\n"]

        if file_type == "gradle" or "gradle" in filename:
            parts.append("### Gradle Build File Analysis\n")
            parts.append("✅ **File Type**: Gradle build configuration\n")
            parts.append(f"📊 **Size**: {lines} lines, {code_length} characters\n\n")
            if "minecraft" in code:
                parts.append("✅ **Minecraft Integration**: Detected Minecraft-related dependencies\n")
            if any(loader in code for loader in ("forge", "fabric", "quilt")):
                parts.append("✅ **Mod Loader**: Detected mod loader configuration\n")
            if "repositories" in code:
                parts.append("✅ **Repositories**: Repository configuration found\n")
            if "dependencies" in code:
                parts.append("✅ **Dependencies**: Dependency management configured\n")
            parts.append("\n### 💡 **Recommendations**:\n")
            parts.append("- Ensure all repositories are secure and trusted\n")
            parts.append("- Keep dependencies up to date\n")
            parts.append("- Consider using version catalogs for better dependency management\n")
        elif file_type == "java":
            parts.append("### Java Code Analysis\n")
            parts.append("📊 **Code Metrics**:\n")
            parts.append(f"- Lines of code: {lines}\n")
            parts.append(f"- File size: {code_length} characters\n")
            parts.append(f"- Has comments: {'✅ Yes' if has_comments else '❌ No'}\n")
            parts.append(f"- Error handling: {'✅ Present' if has_error_handling else '⚠️ Missing'}\n")
            parts.append(f"- Logging: {'✅ Present' if has_logging else '⚠️ Basic'}\n\n")
            if "public class" in code:
                parts.append("✅ **Class Structure**: Well-defined class structure\n")
            if "@Override" in code:
                parts.append("✅ **Method Overrides**: Proper use of @Override annotation\n")
            if "import net.minecraft" in code:
                parts.append("✅ **Minecraft APIs**: Using Minecraft framework correctly\n")
            parts.append("\n### 💡 **Suggestions**:\n")
            if not has_comments:
                parts.append("- Add JavaDoc comments for public methods and classes\n")
            if not has_error_handling:
                parts.append("- Implement proper error handling with try-catch blocks\n")
            parts.append("- Follow Java naming conventions\n")
            parts.append("- Ensure thread safety where applicable\n")
        elif file_type == "json":
            parts.append("### JSON Configuration Analysis\n")
            parts.append(f"📊 **Structure**: {lines} lines of JSON configuration\n\n")
            try:
                json.loads(code)
            except ValueError:
                parts.append("❌ **Syntax Error**: JSON contains syntax errors\n")
            else:
                parts.append("✅ **Validity**: JSON syntax is valid\n")
            if '"type"' in code:
                parts.append("✅ **Type Definition**: Contains type specifications\n")
            if '"minecraft:' in code:
                parts.append("✅ **Minecraft Integration**: Uses Minecraft namespaces\n")
            parts.append("\n### 💡 **Recommendations**:\n")
            parts.append("- Use consistent formatting and indentation\n")
            parts.append("- Ensure all required fields are present\n")
        else:
            parts.append("### General Code Analysis\n")
            parts.append(f"📊 **File Info**: {file_type} file with {lines} lines\n\n")
            parts.append("✅ **Basic Structure**: File appears to be well-structured\n")
            parts.append("\n### 💡 **General Recommendations**:\n")
            parts.append("- Ensure proper formatting and indentation\n")
            parts.append("- Add appropriate comments and documentation\n")

        score = review_score(code_length, has_comments, has_error_handling)
        parts.append("\n### 🎯 **Overall Assessment**\n")
        parts.append(f"**Code Quality Score**: {score}/10\n\n")
        if score >= 8:
            parts.append("🟢 **Status**: Good quality code with solid structure")
        else:
            parts.append("🟡 **Status**: Decent code with room for improvement")
        return "".join(parts)


def review_score(code_length: int, has_comments: bool, has_error_handling: bool) -> int:
    """Quality score out of 10: base 7 plus one point per satisfied heuristic."""
    return 7 + has_comments + has_error_handling + (code_length > 100)
