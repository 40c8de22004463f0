from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, Field

FOLDER_FILE_TYPE = "folder"
DEFAULT_FILE_TYPE = "text"

_EXTENSION_FILE_TYPES = {
    "java": "java",
    "json": "json",
    "mcmeta": "mcmeta",
    "properties": "properties",
    "toml": "toml",
    "gradle": "gradle",
    "bat": "bat",
    "sh": "sh",
    "md": "md",
}

_NAMED_FILE_TYPES = {
    ".gitignore": "gitignore",
    "gradlew": "sh",
}


def _utcnow() -> datetime:
    return datetime.now(UTC)


def file_type_for(name: str) -> str:
    """Classify *name* for icon/editor-mode selection."""
    if name in _NAMED_FILE_TYPES:
        return _NAMED_FILE_TYPES[name]
    _, dot, extension = name.rpartition(".")
    if not dot:
        return DEFAULT_FILE_TYPE
    return _EXTENSION_FILE_TYPES.get(extension.lower(), DEFAULT_FILE_TYPE)


class FileRecord(BaseModel):
    """Canonical model of one file or directory in a project tree."""

    id: str
    project_id: str
    path: str
    name: str
    content: str = ""
    file_type: str = DEFAULT_FILE_TYPE
    is_directory: bool = False
    parent_path: str | None = None
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)
