from __future__ import annotations

from typing import NoReturn

from fastapi import APIRouter, HTTPException, Response, status

from modforge.dependencies import FileManagerDep, OwnedProject
from modforge.models.api import (
    FileCreateRequest,
    FileListResponse,
    FileMoveRequest,
    FileTreeNodeResponse,
    FileTreeResponse,
    FileUpdateRequest,
    FolderCreateRequest,
    TemplateFileCreateRequest,
    TemplateInfo,
    TemplateListResponse,
)
from modforge.models.file_record import FileRecord
from modforge.services.file_manager import FileManager
from modforge.tools.exceptions import (
    DuplicatePathError,
    FileRecordNotFoundError,
    InvalidFileOperationError,
    PathValidationError,
)
from modforge.tools.file_tree import FileTree
from modforge.tools.mod_templates import TEMPLATE_CATALOGUE, get_descriptor

router = APIRouter(prefix="/projects/{project_id}/files", tags=["files"])


def raise_for_file_error(manager: FileManager, detail: str) -> NoReturn:
    """Translate the manager's last failure into an HTTP error."""
    error = manager.last_error
    if error is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
    if isinstance(error, FileRecordNotFoundError):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, DuplicatePathError):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    if isinstance(error, (PathValidationError, InvalidFileOperationError)):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


def _tree_nodes(tree: FileTree) -> list[FileTreeNodeResponse]:
    return [
        FileTreeNodeResponse(
            name=node.name,
            path=node.path,
            type=node.type,
            file=node.file,
            children=_tree_nodes(node.children),
        )
        for node in tree.values()
    ]


@router.get("", response_model=FileListResponse)
async def list_project_files(project_id: str, manager: FileManagerDep) -> FileListResponse:
    files = await manager.list_files()
    if files is None:
        raise_for_file_error(manager, "Failed to load files")
    return FileListResponse(project_id=project_id, files=files)


@router.get("/tree", response_model=FileTreeResponse)
async def get_project_file_tree(project_id: str, manager: FileManagerDep) -> FileTreeResponse:
    if await manager.list_files() is None:
        raise_for_file_error(manager, "Failed to load files")
    return FileTreeResponse(
        project_id=project_id,
        tree=_tree_nodes(manager.tree()),
        folders=manager.folder_paths(),
    )


@router.get("/templates", response_model=TemplateListResponse)
async def list_file_templates(project: OwnedProject) -> TemplateListResponse:
    return TemplateListResponse(
        templates=[
            TemplateInfo(
                name=descriptor.name,
                extension=descriptor.extension,
                template=descriptor.template,
                category=descriptor.category,
            )
            for descriptor in TEMPLATE_CATALOGUE
        ]
    )


@router.post("", response_model=FileRecord, status_code=status.HTTP_201_CREATED)
async def create_project_file(payload: FileCreateRequest, manager: FileManagerDep) -> FileRecord:
    record = await manager.create_file(
        payload.name,
        payload.path,
        content=payload.content,
        file_type=payload.file_type,
        is_directory=payload.is_directory,
        parent_path=payload.parent_path,
    )
    if record is None:
        raise_for_file_error(manager, "File name cannot be empty")
    return record


@router.post("/folders", response_model=FileRecord, status_code=status.HTTP_201_CREATED)
async def create_project_folder(
    payload: FolderCreateRequest, manager: FileManagerDep
) -> FileRecord:
    record = await manager.create_folder(payload.name, payload.parent_path)
    if record is None:
        raise_for_file_error(manager, "Folder name cannot be empty")
    return record


@router.post("/from-template", response_model=FileRecord, status_code=status.HTTP_201_CREATED)
async def create_file_from_template(
    payload: TemplateFileCreateRequest,
    project: OwnedProject,
    manager: FileManagerDep,
) -> FileRecord:
    descriptor = get_descriptor(payload.template)
    if descriptor is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown template '{payload.template}'",
        )

    record = await manager.create_from_template(
        descriptor,
        payload.name,
        parent_path=payload.parent_path,
        mod_id=payload.mod_id or project.mod_id,
    )
    if record is None:
        raise_for_file_error(manager, "File name cannot be empty")
    return record


@router.post("/scaffold", response_model=FileListResponse, status_code=status.HTTP_201_CREATED)
async def scaffold_sample_project(
    project_id: str,
    project: OwnedProject,
    manager: FileManagerDep,
) -> FileListResponse:
    records = await manager.scaffold_sample(
        project.mod_id,
        project_name=project.name,
        platform=project.platform,
        minecraft_version=project.minecraft_version,
        description=project.description,
    )
    if records is None:
        raise_for_file_error(manager, "Failed to create sample project")
    return FileListResponse(project_id=project_id, files=records)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def clear_project_files(manager: FileManagerDep) -> Response:
    if not await manager.clear_project():
        raise_for_file_error(manager, "Failed to clear project")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{file_id}", response_model=FileRecord)
async def get_project_file(file_id: str, manager: FileManagerDep) -> FileRecord:
    record = await manager.open_file(file_id)
    if record is None:
        raise_for_file_error(manager, "Failed to open file")
    return record


@router.put("/{file_id}", response_model=FileRecord)
async def update_project_file(
    file_id: str,
    payload: FileUpdateRequest,
    manager: FileManagerDep,
) -> FileRecord:
    record = await manager.update_file(file_id, payload.content, payload.new_path)
    if record is None:
        raise_for_file_error(manager, "Failed to save file")
    return record


@router.post("/{file_id}/move", response_model=FileRecord)
async def move_project_file(
    file_id: str,
    payload: FileMoveRequest,
    manager: FileManagerDep,
) -> FileRecord:
    record = await manager.move_file(file_id, payload.target_path)
    if record is None:
        raise_for_file_error(manager, "Failed to move file")
    return record


@router.delete("/{file_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project_file(file_id: str, manager: FileManagerDep) -> Response:
    if not await manager.delete_file(file_id):
        raise_for_file_error(manager, "Failed to delete file")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
