from __future__ import annotations

import re
from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, Field

DEFAULT_MOD_ID = "mymod"

_MOD_ID_STRIP = re.compile(r"[^a-z0-9]")


def _utcnow() -> datetime:
    return datetime.now(UTC)


def derive_mod_id(name: str) -> str:
    """Lower-case *name* and drop every character outside ``[a-z0-9]``."""
    return _MOD_ID_STRIP.sub("", name.lower()) or DEFAULT_MOD_ID


class Platform(str, Enum):
    """Mod loaders a project can target."""

    FORGE = "forge"
    FABRIC = "fabric"
    QUILT = "quilt"
    NEOFORGE = "neoforge"


class ProjectStatus(str, Enum):
    ACTIVE = "active"
    BUILDING = "building"
    ERROR = "error"
    COMPLETED = "completed"


class Project(BaseModel):
    """Domain representation of a mod project."""

    id: str
    user_id: str
    name: str
    description: str | None = None
    platform: Platform = Platform.FORGE
    minecraft_version: str
    mod_id: str
    status: ProjectStatus = ProjectStatus.ACTIVE
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    def describe(self) -> str:
        """Free-text context handed to the code generator."""
        summary = (
            f"{self.platform.value} mod '{self.name}' for Minecraft "
            f"{self.minecraft_version} (mod id: {self.mod_id})"
        )
        if self.description:
            summary = f"{summary}. {self.description}"
        return summary
