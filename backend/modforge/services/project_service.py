from __future__ import annotations

import logging
from dataclasses import dataclass

from modforge.models.file_record import FileRecord
from modforge.models.project import Platform, Project, ProjectStatus
from modforge.repositories.file_repository import FileRepository
from modforge.repositories.project_repository import ProjectRepository
from modforge.services.file_manager import FileManager
from modforge.services.notification_service import NotificationService

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ProjectCreation:
    project: Project
    files: list[FileRecord] | None = None

    @property
    def scaffolded(self) -> bool:
        return bool(self.files)


class ProjectService:
    """Coordinator for project registry operations."""

    def __init__(
        self,
        repository: ProjectRepository,
        file_repository: FileRepository,
        notification_service: NotificationService,
    ):
        self.repository = repository
        self.file_repository = file_repository
        self.notification_service = notification_service

    def file_manager(self, project_id: str) -> FileManager:
        return FileManager(self.file_repository, self.notification_service, project_id)

    async def create_project(
        self,
        user_id: str,
        name: str,
        platform: Platform,
        minecraft_version: str,
        description: str | None = None,
        *,
        scaffold: bool = True,
    ) -> ProjectCreation:
        """Register a project and, unless disabled, scaffold its sample tree.

        A scaffold failure is reported through notifications only; the project
        itself stays created.
        """

        project = await self.repository.create_project(
            user_id=user_id,
            name=name,
            platform=platform,
            minecraft_version=minecraft_version,
            description=description,
        )
        await self.notification_service.notify(
            project.id, "Project created", f"{project.name} is ready to edit"
        )
        logger.info("Created project %s (%s) for %s", project.id, project.mod_id, user_id)

        if not scaffold:
            return ProjectCreation(project=project)

        files = await self.file_manager(project.id).scaffold_sample(
            project.mod_id,
            project_name=project.name,
            platform=project.platform,
            minecraft_version=project.minecraft_version,
            description=project.description,
        )
        return ProjectCreation(project=project, files=files)

    async def get_project(self, project_id: str, user_id: str | None = None) -> Project:
        return await self.repository.get_project(project_id, user_id)

    async def list_user_projects(
        self, user_id: str, limit: int = 50, offset: int = 0
    ) -> list[Project]:
        return await self.repository.list_user_projects(user_id, limit, offset)

    async def update_status(
        self,
        project_id: str,
        status: ProjectStatus,
        user_id: str | None = None,
    ) -> Project:
        project = await self.repository.update_project_status(project_id, status, user_id)
        await self.notification_service.notify(
            project_id, "Project updated", f"Status changed to {status.value}"
        )
        return project

    async def delete_project(self, project_id: str, user_id: str | None = None) -> None:
        await self.repository.delete_project(project_id, user_id)
        await self.notification_service.notify(
            project_id, "Project deleted", "The project and its files have been removed"
        )
        await self.notification_service.forget(project_id)
        logger.info("Deleted project %s", project_id)
