"""Catalogue of single-file templates offered by "New file from template"."""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

TemplateCategory = Literal["java", "resource", "data", "config"]


@dataclass(frozen=True, slots=True)
class TemplateDescriptor:
    name: str
    extension: str
    template: str
    category: TemplateCategory


TEMPLATE_CATALOGUE: tuple[TemplateDescriptor, ...] = (
    TemplateDescriptor("Main Mod Class", ".java", "mainMod", "java"),
    TemplateDescriptor("Block Class", ".java", "block", "java"),
    TemplateDescriptor("Item Class", ".java", "item", "java"),
    TemplateDescriptor("Entity Class", ".java", "entity", "java"),
    TemplateDescriptor("Event Handler", ".java", "eventHandler", "java"),
    TemplateDescriptor("Config Class", ".java", "config", "java"),
    TemplateDescriptor("Block Model", ".json", "blockModel", "resource"),
    TemplateDescriptor("Item Model", ".json", "itemModel", "resource"),
    TemplateDescriptor("Blockstate", ".json", "blockstate", "resource"),
    TemplateDescriptor("Language File", ".json", "lang", "resource"),
    TemplateDescriptor("Recipe", ".json", "recipe", "data"),
    TemplateDescriptor("Loot Table", ".json", "lootTable", "data"),
    TemplateDescriptor("Advancement", ".json", "advancement", "data"),
    TemplateDescriptor("Tag", ".json", "tag", "data"),
    TemplateDescriptor("Gradle Build", ".gradle", "buildGradle", "config"),
    TemplateDescriptor("Mod Metadata", ".toml", "modsToml", "config"),
    TemplateDescriptor("Properties", ".properties", "properties", "config"),
)


def get_descriptor(template: str) -> TemplateDescriptor | None:
    for descriptor in TEMPLATE_CATALOGUE:
        if descriptor.template == template:
            return descriptor
    return None


def with_extension(file_name: str, descriptor: TemplateDescriptor) -> str:
    if file_name.endswith(descriptor.extension):
        return file_name
    return f"{file_name}{descriptor.extension}"


def _stem(file_name: str) -> str:
    head, dot, _ = file_name.rpartition(".")
    return head if dot and head else file_name


def _json(payload: object) -> str:
    return json.dumps(payload, indent=2)


def _main_mod(stem: str, mod_id: str) -> str:
    return f"""@Mod("{mod_id}")
public class {stem} {{
    public static final String MODID = "{mod_id}";

    public {stem}() {{
        // Register the setup method for modloading
        FMLJavaModLoadingContext.get().getModEventBus()
            .addListener(this::setup);
    }}

    private void setup(final FMLCommonSetupEvent event) {{
        // Pre-init code here
        LOGGER.info("Hello from {stem}!");
    }}
}}"""


def _block(stem: str, mod_id: str) -> str:
    return f"""public class {stem} extends Block {{
    public {stem}(Properties properties) {{
        super(properties);
    }}

    // Add custom block behavior here
}}"""


def _item(stem: str, mod_id: str) -> str:
    return f"""public class {stem} extends Item {{
    public {stem}(Properties properties) {{
        super(properties);
    }}

    // Add custom item behavior here
}}"""


def _entity(stem: str, mod_id: str) -> str:
    return f"""public class {stem} extends PathfinderMob {{
    public {stem}(EntityType<? extends PathfinderMob> entityType, Level level) {{
        super(entityType, level);
    }}

    @Override
    protected void registerGoals() {{
        this.goalSelector.addGoal(0, new FloatGoal(this));
        this.goalSelector.addGoal(1, new WaterAvoidingRandomStrollGoal(this, 1.0D));
    }}
}}"""


def _event_handler(stem: str, mod_id: str) -> str:
    return f"""@Mod.EventBusSubscriber(modid = "{mod_id}")
public class {stem} {{

    @SubscribeEvent
    public static void onPlayerJoin(PlayerEvent.PlayerLoggedInEvent event) {{
        // Handle player join events
    }}
}}"""


def _config(stem: str, mod_id: str) -> str:
    return f"""public class {stem} {{
    public static final ForgeConfigSpec.Builder BUILDER = new ForgeConfigSpec.Builder();
    public static final ForgeConfigSpec SPEC;

    public static final ForgeConfigSpec.BooleanValue EXAMPLE_SETTING;

    static {{
        EXAMPLE_SETTING = BUILDER
            .comment("An example configuration setting for {mod_id}")
            .define("example_setting", true);

        SPEC = BUILDER.build();
    }}
}}"""


def _block_model(stem: str, mod_id: str) -> str:
    return _json({"parent": "block/cube_all", "textures": {"all": f"{mod_id}:block/{stem}"}})


def _item_model(stem: str, mod_id: str) -> str:
    return _json({"parent": "item/generated", "textures": {"layer0": f"{mod_id}:item/{stem}"}})


def _blockstate(stem: str, mod_id: str) -> str:
    return _json({"variants": {"": {"model": f"{mod_id}:block/{stem}"}}})


def _lang(stem: str, mod_id: str) -> str:
    return _json(
        {
            f"item.{mod_id}.example_item": "Example Item",
            f"block.{mod_id}.example_block": "Example Block",
            f"itemGroup.{mod_id}": "Example Mod",
        }
    )


def _recipe(stem: str, mod_id: str) -> str:
    return _json(
        {
            "type": "minecraft:crafting_shaped",
            "pattern": ["###", "###", "###"],
            "key": {"#": {"item": "minecraft:iron_ingot"}},
            "result": {"item": f"{mod_id}:{stem}", "count": 1},
        }
    )


def _loot_table(stem: str, mod_id: str) -> str:
    return _json(
        {
            "type": "minecraft:block",
            "pools": [
                {
                    "rolls": 1,
                    "entries": [{"type": "minecraft:item", "name": f"{mod_id}:{stem}"}],
                }
            ],
        }
    )


def _advancement(stem: str, mod_id: str) -> str:
    return _json(
        {
            "display": {
                "icon": {"item": f"{mod_id}:{stem}"},
                "title": "Getting Started",
                "description": "Welcome to the mod!",
                "frame": "task",
            },
            "criteria": {
                "has_item": {
                    "trigger": "minecraft:inventory_changed",
                    "conditions": {"items": [{"items": [f"{mod_id}:{stem}"]}]},
                }
            },
            "requirements": [["has_item"]],
        }
    )


def _tag(stem: str, mod_id: str) -> str:
    return _json({"replace": False, "values": [f"{mod_id}:{stem}"]})


def _build_gradle(stem: str, mod_id: str) -> str:
    return f"""plugins {{
    id 'eclipse'
    id 'maven-publish'
    id 'net.minecraftforge.gradle' version '5.1.+'
}}

version = '1.0.0'
group = 'com.yourname.{mod_id}'
archivesBaseName = '{mod_id}'

java.toolchain.languageVersion = JavaLanguageVersion.of(17)"""


def _mods_toml(stem: str, mod_id: str) -> str:
    return f"""modLoader="javafml"
loaderVersion="[47,)"
license="MIT"

[[mods]]
modId="{mod_id}"
version="${{file.jarVersion}}"
displayName="{mod_id}"
"""


def _properties(stem: str, mod_id: str) -> str:
    return f"""org.gradle.jvmargs=-Xmx3G
org.gradle.daemon=false
mod_version=1.0.0
maven_group=com.yourname.{mod_id}"""


_RENDERERS: dict[str, Callable[[str, str], str]] = {
    "mainMod": _main_mod,
    "block": _block,
    "item": _item,
    "entity": _entity,
    "eventHandler": _event_handler,
    "config": _config,
    "blockModel": _block_model,
    "itemModel": _item_model,
    "blockstate": _blockstate,
    "lang": _lang,
    "recipe": _recipe,
    "lootTable": _loot_table,
    "advancement": _advancement,
    "tag": _tag,
    "buildGradle": _build_gradle,
    "modsToml": _mods_toml,
    "properties": _properties,
}


def render_file_template(template: str, file_name: str, mod_id: str) -> str:
    """Render *template* for *file_name*; unknown templates render empty."""
    renderer = _RENDERERS.get(template)
    if renderer is None:
        return ""
    return renderer(_stem(file_name), mod_id)
