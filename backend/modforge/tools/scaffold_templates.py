"""Sample mod project layout used by the scaffolding function and ``scaffold_sample``."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field

from modforge.models.project import Platform, derive_mod_id

NEXT_STEPS = [
    "Review generated mod configuration",
    "Add textures to assets/textures/ folders",
    "Implement your first custom block or item",
    "Configure mod metadata in mods.toml",
    "Build and test your mod with gradlew runClient",
]

PLACEHOLDER_TEXTURE = "# Placeholder texture file"


@dataclass(slots=True)
class ProjectStructure:
    files: list[str]
    project_structure: dict[str, str]
    next_steps: list[str] = field(default_factory=lambda: list(NEXT_STEPS))


def class_prefix(project_name: str) -> str:
    return re.sub(r"[^A-Za-z0-9]", "", project_name) or "Example"


def generate_project_structure(
    project_name: str,
    platform: Platform,
    minecraft_version: str,
    description: str | None = None,
    mod_id: str | None = None,
) -> ProjectStructure:
    """Build the path -> content map for a fresh mod project.

    Insertion order is the order files are presented and created in. The mod
    id is derived from *project_name* unless given explicitly.
    """

    mod_id = mod_id or derive_mod_id(project_name)
    main_class = f"{class_prefix(project_name)}Mod"
    package_path = f"com/yourname/{mod_id}"
    java_root = f"src/main/java/{package_path}"
    assets = f"src/main/resources/assets/{mod_id}"
    data = f"src/main/resources/data/{mod_id}"
    summary = description or "A Minecraft mod"

    structure: dict[str, str] = {
        "build.gradle": _build_gradle(platform, minecraft_version, mod_id),
        "gradle.properties": _gradle_properties(platform, minecraft_version, mod_id),
        "settings.gradle": f"rootProject.name = '{mod_id}'",
        "gradlew": _GRADLEW,
        "gradlew.bat": _GRADLEW_BAT,
        "README.md": _readme(project_name, description),
        ".gitignore": _GITIGNORE,
        f"{java_root}/{main_class}.java": _main_class(platform, main_class, mod_id),
        f"{java_root}/registry/ModItems.java": _mod_items(mod_id),
        f"{java_root}/registry/ModBlocks.java": _mod_blocks(mod_id),
        f"{java_root}/registry/ModEntities.java": _mod_entities(mod_id),
        f"{java_root}/events/CommonEvents.java": _common_events(mod_id),
        f"{java_root}/config/ModConfig.java": _mod_config(mod_id),
        "src/main/resources/META-INF/mods.toml": _mods_toml(mod_id, summary),
        "src/main/resources/pack.mcmeta": _json(
            {"pack": {"description": "Mod resources", "pack_format": 15}}
        ),
        f"{assets}/lang/en_us.json": _json(
            {
                f"item.{mod_id}.example_item": "Example Item",
                f"block.{mod_id}.example_block": "Example Block",
                f"itemGroup.{mod_id}": "Example Mod",
            }
        ),
        f"{assets}/textures/item/example_item.png": PLACEHOLDER_TEXTURE,
        f"{assets}/textures/block/example_block.png": PLACEHOLDER_TEXTURE,
        f"{assets}/models/item/example_item.json": _json(
            {"parent": "item/generated", "textures": {"layer0": f"{mod_id}:item/example_item"}}
        ),
        f"{assets}/models/block/example_block.json": _json(
            {"parent": "block/cube_all", "textures": {"all": f"{mod_id}:block/example_block"}}
        ),
        f"{assets}/blockstates/example_block.json": _json(
            {"variants": {"": {"model": f"{mod_id}:block/example_block"}}}
        ),
        f"{data}/recipes/example_item.json": _recipe(mod_id),
        f"{data}/loot_tables/blocks/example_block.json": _loot_table(mod_id),
        f"{data}/tags/blocks/example_block_tag.json": _json(
            {"replace": False, "values": [f"{mod_id}:example_block"]}
        ),
        f"{data}/advancements/root.json": _advancement(mod_id),
        f"src/test/java/{package_path}/ModTests.java": _test_class(mod_id),
    }

    if platform == Platform.FABRIC:
        structure["src/main/resources/fabric.mod.json"] = _fabric_mod_json(
            mod_id, main_class, summary, minecraft_version
        )
    elif platform == Platform.QUILT:
        structure["src/main/resources/quilt.mod.json"] = _quilt_mod_json(
            mod_id, main_class, summary
        )

    return ProjectStructure(files=list(structure), project_structure=structure)


def _json(payload: object) -> str:
    return json.dumps(payload, indent=2)


def _build_gradle(platform: Platform, minecraft_version: str, mod_id: str) -> str:
    if platform == Platform.FABRIC:
        return """plugins {
    id 'fabric-loom' version '1.4-SNAPSHOT'
    id 'maven-publish'
}

version = project.mod_version
group = project.maven_group

repositories {
    maven {
        name = 'ParchmentMC'
        url = 'https://maven.parchmentmc.org'
    }
}

dependencies {
    minecraft "com.mojang:minecraft:${project.minecraft_version}"
    mappings loom.officialMojangMappings()
    modImplementation "net.fabricmc:fabric-loader:${project.loader_version}"
    modImplementation "net.fabricmc.fabric-api:fabric-api:${project.fabric_version}"
}"""
    if platform == Platform.QUILT:
        return """plugins {
    id 'org.quiltmc.loom' version '1.4.+'
}

version = project.mod_version
group = project.maven_group

dependencies {
    minecraft "com.mojang:minecraft:${project.minecraft_version}"
    mappings loom.officialMojangMappings()
    modImplementation "org.quiltmc:quilt-loader:${project.loader_version}"
    modImplementation "org.quiltmc.quilted-fabric-api:quilted-fabric-api:${project.fabric_version}"
}"""
    if platform == Platform.NEOFORGE:
        return f"""plugins {{
    id 'net.neoforged.gradle' version '7.0.80'
    id 'maven-publish'
}}

version = '1.0.0'
group = 'com.yourname.{mod_id}'

java.toolchain.languageVersion = JavaLanguageVersion.of(21)

minecraft {{
    mappings channel: 'official', version: '{minecraft_version}'
}}"""
    return f"""plugins {{
    id 'eclipse'
    id 'maven-publish'
    id 'net.minecraftforge.gradle' version '5.1.+'
}}

version = '1.0.0'
group = 'com.yourname.{mod_id}'
archivesBaseName = '{mod_id}'

java.toolchain.languageVersion = JavaLanguageVersion.of(17)

minecraft {{
    mappings channel: 'official', version: '{minecraft_version}'
    runs {{
        client {{
            workingDirectory project.file('run')
            property 'forge.logging.markers', 'REGISTRIES'
            property 'forge.logging.console.level', 'debug'
            mods {{
                {mod_id} {{
                    source sourceSets.main
                }}
            }}
        }}
    }}
}}

dependencies {{
    minecraft 'net.minecraftforge:forge:{minecraft_version}-47.2.0'
}}"""


def _gradle_properties(platform: Platform, minecraft_version: str, mod_id: str) -> str:
    loader_version = "0.14.24" if platform == Platform.FABRIC else "0.19.3"
    return f"""org.gradle.jvmargs=-Xmx3G
org.gradle.daemon=false
minecraft_version={minecraft_version}
mod_version=1.0.0
maven_group=com.yourname.{mod_id}
loader_version={loader_version}
fabric_version=0.91.0+{minecraft_version}"""


_GRADLEW = """#!/bin/sh
# Gradle wrapper script for Unix systems
GRADLE_APP_NAME="Gradle"
exec gradle "$@"
"""

_GRADLEW_BAT = """@echo off
rem Gradle wrapper script for Windows
gradle %*"""

_GITIGNORE = """# Build output
build/
.gradle/
run/

# IDE files
.idea/
*.iml
*.ipr
*.iws
.vscode/

# OS files
.DS_Store
Thumbs.db

# Logs
logs/
*.log"""


def _readme(project_name: str, description: str | None) -> str:
    return f"""# {project_name}

{description or "A Minecraft mod built with Forge"}

## Building

Run `./gradlew build` to build the mod.

## Development

Run `./gradlew runClient` to start a development client.

## License

This mod is licensed under MIT License."""


def _main_class(platform: Platform, main_class: str, mod_id: str) -> str:
    package = f"package com.yourname.{mod_id};"
    if platform in (Platform.FABRIC, Platform.QUILT):
        if platform == Platform.FABRIC:
            imports = "import net.fabricmc.api.ModInitializer;"
            signature = "public void onInitialize()"
        else:
            imports = (
                "import org.quiltmc.loader.api.ModContainer;\n"
                "import org.quiltmc.qsl.base.api.entrypoint.ModInitializer;"
            )
            signature = "public void onInitialize(ModContainer mod)"
        return f"""{package}

{imports}

public class {main_class} implements ModInitializer {{
    @Override
    {signature} {{
        // Mod initialization code here
    }}
}}"""
    if platform == Platform.NEOFORGE:
        return f"""{package}

import net.neoforged.bus.api.IEventBus;
import net.neoforged.fml.common.Mod;
import net.neoforged.fml.event.lifecycle.FMLCommonSetupEvent;

@Mod("{mod_id}")
public class {main_class} {{
    public {main_class}(IEventBus modEventBus) {{
        modEventBus.addListener(this::setup);
    }}

    private void setup(final FMLCommonSetupEvent event) {{
        // Mod setup code here
    }}
}}"""
    return f"""{package}

import net.minecraftforge.common.MinecraftForge;
import net.minecraftforge.fml.common.Mod;
import net.minecraftforge.fml.event.lifecycle.FMLCommonSetupEvent;
import net.minecraftforge.fml.javafmlmod.FMLJavaModLoadingContext;

@Mod("{mod_id}")
public class {main_class} {{
    public {main_class}() {{
        FMLJavaModLoadingContext.get().getModEventBus().addListener(this::setup);
        MinecraftForge.EVENT_BUS.register(this);
    }}

    private void setup(final FMLCommonSetupEvent event) {{
        // Mod setup code here
    }}
}}"""


def _mod_items(mod_id: str) -> str:
    return f"""package com.yourname.{mod_id}.registry;

import net.minecraft.world.item.Item;
import net.minecraftforge.registries.DeferredRegister;
import net.minecraftforge.registries.ForgeRegistries;
import net.minecraftforge.registries.RegistryObject;

public class ModItems {{
    public static final DeferredRegister<Item> ITEMS = DeferredRegister.create(ForgeRegistries.ITEMS, "{mod_id}");

    // Example item registration
    public static final RegistryObject<Item> EXAMPLE_ITEM = ITEMS.register("example_item",
        () -> new Item(new Item.Properties()));
}}"""


def _mod_blocks(mod_id: str) -> str:
    return f"""package com.yourname.{mod_id}.registry;

import net.minecraft.world.level.block.Block;
import net.minecraft.world.level.block.state.BlockBehaviour;
import net.minecraftforge.registries.DeferredRegister;
import net.minecraftforge.registries.ForgeRegistries;
import net.minecraftforge.registries.RegistryObject;

public class ModBlocks {{
    public static final DeferredRegister<Block> BLOCKS = DeferredRegister.create(ForgeRegistries.BLOCKS, "{mod_id}");

    // Example block registration
    public static final RegistryObject<Block> EXAMPLE_BLOCK = BLOCKS.register("example_block",
        () -> new Block(BlockBehaviour.Properties.of().strength(3.0F)));
}}"""


def _mod_entities(mod_id: str) -> str:
    return f"""package com.yourname.{mod_id}.registry;

import net.minecraft.world.entity.EntityType;
import net.minecraftforge.registries.DeferredRegister;
import net.minecraftforge.registries.ForgeRegistries;

public class ModEntities {{
    public static final DeferredRegister<EntityType<?>> ENTITIES = DeferredRegister.create(ForgeRegistries.ENTITY_TYPES, "{mod_id}");

    // Entity registrations will go here
}}"""


def _common_events(mod_id: str) -> str:
    return f"""package com.yourname.{mod_id}.events;

import net.minecraftforge.event.entity.player.PlayerEvent;
import net.minecraftforge.eventbus.api.SubscribeEvent;
import net.minecraftforge.fml.common.Mod;

@Mod.EventBusSubscriber(modid = "{mod_id}")
public class CommonEvents {{

    @SubscribeEvent
    public static void onPlayerJoin(PlayerEvent.PlayerLoggedInEvent event) {{
        // Handle player join events
    }}
}}"""


def _mod_config(mod_id: str) -> str:
    return f"""package com.yourname.{mod_id}.config;

import net.minecraftforge.common.ForgeConfigSpec;

public class ModConfig {{
    public static final ForgeConfigSpec.Builder BUILDER = new ForgeConfigSpec.Builder();
    public static final ForgeConfigSpec SPEC;

    // Example config option
    public static final ForgeConfigSpec.BooleanValue EXAMPLE_SETTING;

    static {{
        EXAMPLE_SETTING = BUILDER
            .comment("An example configuration setting")
            .define("example_setting", true);

        SPEC = BUILDER.build();
    }}
}}"""


def _mods_toml(mod_id: str, description: str) -> str:
    return f"""modLoader="javafml"
loaderVersion="[47,)"
license="MIT"

[[mods]]
modId="{mod_id}"
version="${{file.jarVersion}}"
displayName="{mod_id}"
description='''{description}'''

[[dependencies.{mod_id}]]
modId="forge"
mandatory=true
versionRange="[47,)"
ordering="NONE"
side="BOTH"
"""


def _recipe(mod_id: str) -> str:
    return _json(
        {
            "type": "minecraft:crafting_shaped",
            "pattern": ["XXX", "XYX", "XXX"],
            "key": {"X": {"item": "minecraft:stone"}, "Y": {"item": "minecraft:diamond"}},
            "result": {"item": f"{mod_id}:example_item", "count": 1},
        }
    )


def _loot_table(mod_id: str) -> str:
    return _json(
        {
            "type": "minecraft:block",
            "pools": [
                {
                    "rolls": 1,
                    "entries": [{"type": "minecraft:item", "name": f"{mod_id}:example_block"}],
                }
            ],
        }
    )


def _advancement(mod_id: str) -> str:
    return _json(
        {
            "display": {
                "icon": {"item": f"{mod_id}:example_item"},
                "title": "Getting Started",
                "description": "Welcome to the mod!",
                "frame": "task",
                "show_toast": True,
                "announce_to_chat": True,
                "hidden": False,
            },
            "criteria": {
                "has_item": {
                    "trigger": "minecraft:inventory_changed",
                    "conditions": {"items": [{"items": [f"{mod_id}:example_item"]}]},
                }
            },
            "requirements": [["has_item"]],
        }
    )


def _test_class(mod_id: str) -> str:
    return f"""package com.yourname.{mod_id};

import org.junit.jupiter.api.Test;
import static org.junit.jupiter.api.Assertions.*;

public class ModTests {{

    @Test
    public void testModInitialization() {{
        assertTrue(true, "Mod should initialize successfully");
    }}
}}"""


def _fabric_mod_json(
    mod_id: str, main_class: str, description: str, minecraft_version: str
) -> str:
    return _json(
        {
            "schemaVersion": 1,
            "id": mod_id,
            "version": "${version}",
            "name": mod_id,
            "description": description,
            "authors": ["Your Name"],
            "contact": {},
            "license": "MIT",
            "icon": f"assets/{mod_id}/icon.png",
            "environment": "*",
            "entrypoints": {"main": [f"com.yourname.{mod_id}.{main_class}"]},
            "depends": {
                "fabricloader": ">=0.14.0",
                "minecraft": f"~{minecraft_version}",
                "java": ">=17",
                "fabric-api": "*",
            },
        }
    )


def _quilt_mod_json(mod_id: str, main_class: str, description: str) -> str:
    return _json(
        {
            "schema_version": 1,
            "quilt_loader": {
                "group": f"com.yourname.{mod_id}",
                "id": mod_id,
                "version": "${version}",
                "metadata": {
                    "name": mod_id,
                    "description": description,
                    "contributors": {"Your Name": "Owner"},
                    "contact": {},
                    "license": "MIT",
                },
                "intermediate_mappings": "net.fabricmc:intermediary",
                "entrypoints": {"init": [f"com.yourname.{mod_id}.{main_class}"]},
                "depends": [
                    {"id": "quilt_loader", "version": ">=0.19.0"},
                    {"id": "quilted_fabric_api", "version": ">=7.0.0"},
                    {"id": "minecraft", "version": ">=1.20.0"},
                ],
            },
        }
    )
