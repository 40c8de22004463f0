from __future__ import annotations

from fastapi import APIRouter, HTTPException, Response, status

from modforge.config import settings
from modforge.dependencies import CurrentUserId, OwnedProject, ProjectServiceDep
from modforge.models.api import (
    ProjectCreateRequest,
    ProjectCreateResponse,
    ProjectListResponse,
    ProjectStatusUpdateRequest,
)
from modforge.models.project import Project
from modforge.repositories.project_repository import ProjectNotFoundError

router = APIRouter(prefix="/projects", tags=["projects"])


@router.post("", response_model=ProjectCreateResponse, status_code=status.HTTP_201_CREATED)
async def create_project(
    payload: ProjectCreateRequest,
    service: ProjectServiceDep,
    user_id: CurrentUserId,
) -> ProjectCreateResponse:
    creation = await service.create_project(
        user_id=user_id,
        name=payload.name,
        platform=payload.platform,
        minecraft_version=payload.minecraft_version or settings.default_minecraft_version,
        description=payload.description,
        scaffold=payload.scaffold,
    )
    return ProjectCreateResponse(
        project=creation.project,
        scaffolded=creation.scaffolded,
        file_count=len(creation.files or []),
    )


@router.get("", response_model=ProjectListResponse)
async def list_user_projects(
    service: ProjectServiceDep,
    user_id: CurrentUserId,
    limit: int = 50,
    offset: int = 0,
) -> ProjectListResponse:
    """List all projects for the current user, most recently updated first."""
    projects = await service.list_user_projects(user_id=user_id, limit=limit, offset=offset)
    return ProjectListResponse(projects=projects)


@router.get("/{project_id}", response_model=Project)
async def get_project(project: OwnedProject) -> Project:
    return project


@router.patch("/{project_id}/status", response_model=Project)
async def update_project_status(
    project_id: str,
    payload: ProjectStatusUpdateRequest,
    service: ProjectServiceDep,
    user_id: CurrentUserId,
) -> Project:
    try:
        return await service.update_status(project_id, payload.status, user_id=user_id)
    except ProjectNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: str,
    service: ProjectServiceDep,
    user_id: CurrentUserId,
) -> Response:
    try:
        await service.delete_project(project_id, user_id=user_id)
    except ProjectNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
