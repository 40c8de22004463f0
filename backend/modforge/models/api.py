from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .chat import ChatMessage, CurrentFileContext
from .file_record import DEFAULT_FILE_TYPE, FileRecord
from .project import Platform, Project, ProjectStatus


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# Remote functions


class GenerateCodeRequest(_CamelModel):
    prompt: str = Field(..., min_length=1, max_length=4096)
    current_file: CurrentFileContext | None = Field(default=None, alias="currentFile")
    project_context: str | None = Field(default=None, alias="projectContext")


class ReviewCodeRequest(_CamelModel):
    code: str = ""
    filename: str = "untitled"
    file_type: str = Field(default="java", alias="fileType")


class ReviewCodeResponse(BaseModel):
    review: str


class ProjectScaffoldingRequest(_CamelModel):
    project_name: str = Field(..., min_length=1, max_length=255, alias="projectName")
    platform: Platform
    minecraft_version: str = Field(..., min_length=1, alias="minecraftVersion")
    description: str | None = None


class ProjectScaffoldingResponse(_CamelModel):
    success: bool = True
    project_name: str = Field(alias="projectName")
    platform: Platform
    minecraft_version: str = Field(alias="minecraftVersion")
    files: list[str] = Field(default_factory=list)
    project_structure: dict[str, str] = Field(default_factory=dict, alias="projectStructure")
    next_steps: list[str] = Field(default_factory=list, alias="nextSteps")


# Projects


class ProjectCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=2048)
    platform: Platform = Platform.FORGE
    minecraft_version: str | None = Field(
        default=None,
        description="Target Minecraft version; the configured default when omitted",
    )
    scaffold: bool = True


class ProjectCreateResponse(BaseModel):
    project: Project
    scaffolded: bool
    file_count: int = 0


class ProjectListResponse(BaseModel):
    """Response for listing user projects."""

    projects: list[Project] = Field(default_factory=list)


class ProjectStatusUpdateRequest(BaseModel):
    status: ProjectStatus


# Files


class FileCreateRequest(BaseModel):
    name: str
    path: str
    content: str = ""
    file_type: str = DEFAULT_FILE_TYPE
    is_directory: bool = False
    parent_path: str | None = None


class FolderCreateRequest(BaseModel):
    name: str
    parent_path: str | None = None


class TemplateFileCreateRequest(BaseModel):
    template: str
    name: str
    parent_path: str | None = None
    mod_id: str | None = None


class TemplateInfo(BaseModel):
    name: str
    extension: str
    template: str
    category: Literal["java", "resource", "data", "config"]


class TemplateListResponse(BaseModel):
    templates: list[TemplateInfo] = Field(default_factory=list)


class FileUpdateRequest(BaseModel):
    content: str
    new_path: str | None = None


class FileMoveRequest(BaseModel):
    target_path: str | None = Field(
        default=None,
        description="Folder to drop the file into; the project root when omitted",
    )


class FileListResponse(BaseModel):
    project_id: str
    files: list[FileRecord] = Field(default_factory=list)


class FileTreeNodeResponse(BaseModel):
    name: str
    path: str
    type: Literal["folder", "file"]
    file: FileRecord | None = None
    children: list[FileTreeNodeResponse] = Field(default_factory=list)


class FileTreeResponse(BaseModel):
    project_id: str
    tree: list[FileTreeNodeResponse] = Field(default_factory=list)
    folders: list[str] = Field(default_factory=list)


# Chat


class ChatSendRequest(_CamelModel):
    prompt: str = Field(..., min_length=1, max_length=4096)
    current_file: CurrentFileContext | None = Field(default=None, alias="currentFile")


class ChatSendResponse(BaseModel):
    project_id: str
    user_message: ChatMessage
    ai_message: ChatMessage


class ChatMessagesResponse(BaseModel):
    project_id: str
    messages: list[ChatMessage] = Field(default_factory=list)


class ChatApplyRequest(BaseModel):
    parent_path: str | None = None
