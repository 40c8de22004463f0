from __future__ import annotations

from datetime import UTC, datetime
from uuid import uuid4

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from modforge.models.file_record_db import ProjectFileDB
from modforge.models.project import (
    Platform,
    Project,
    ProjectStatus,
    derive_mod_id,
)
from modforge.models.project_db import ProjectDB


class ProjectNotFoundError(Exception):
    """Raised when a project identifier cannot be resolved."""

    def __init__(self, project_id: str):
        super().__init__(f"Project '{project_id}' was not found")
        self.project_id = project_id


class ProjectRepository:
    """Repository for the ``projects`` table."""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _project_db_to_model(self, project_db: ProjectDB) -> Project:
        """Convert database model to domain model."""
        return Project(
            id=project_db.id,
            user_id=project_db.user_id,
            name=project_db.name,
            description=project_db.description,
            platform=Platform(project_db.platform),
            minecraft_version=project_db.minecraft_version,
            mod_id=project_db.mod_id,
            status=ProjectStatus(project_db.status),
            created_at=project_db.created_at,
            updated_at=project_db.updated_at,
        )

    async def _get_row(self, project_id: str, user_id: str | None = None) -> ProjectDB:
        query = select(ProjectDB).where(ProjectDB.id == project_id)
        if user_id:
            query = query.where(ProjectDB.user_id == user_id)

        result = await self.session.execute(query)
        project_db = result.scalar_one_or_none()
        if not project_db:
            raise ProjectNotFoundError(project_id)
        return project_db

    async def create_project(
        self,
        user_id: str,
        name: str,
        platform: Platform,
        minecraft_version: str,
        description: str | None = None,
        project_id: str | None = None,
    ) -> Project:
        if project_id is None:
            project_id = uuid4().hex
        project_db = ProjectDB(
            id=project_id,
            user_id=user_id,
            name=name,
            description=description,
            platform=platform.value,
            minecraft_version=minecraft_version,
            mod_id=derive_mod_id(name),
            status=ProjectStatus.ACTIVE.value,
        )
        self.session.add(project_db)
        await self.session.commit()
        await self.session.refresh(project_db)
        return self._project_db_to_model(project_db)

    async def get_project(self, project_id: str, user_id: str | None = None) -> Project:
        return self._project_db_to_model(await self._get_row(project_id, user_id))

    async def list_user_projects(
        self, user_id: str, limit: int = 50, offset: int = 0
    ) -> list[Project]:
        result = await self.session.execute(
            select(ProjectDB)
            .where(ProjectDB.user_id == user_id)
            .order_by(ProjectDB.updated_at.desc())
            .limit(limit)
            .offset(offset)
        )
        projects_db = result.scalars().all()
        return [self._project_db_to_model(p) for p in projects_db]

    async def update_project_status(
        self,
        project_id: str,
        status: ProjectStatus,
        user_id: str | None = None,
    ) -> Project:
        project_db = await self._get_row(project_id, user_id)

        project_db.status = status.value
        project_db.updated_at = datetime.now(UTC)
        await self.session.commit()
        await self.session.refresh(project_db)
        return self._project_db_to_model(project_db)

    async def delete_project(self, project_id: str, user_id: str | None = None) -> None:
        """Delete a project together with all of its file records."""
        project_db = await self._get_row(project_id, user_id)

        await self.session.execute(
            delete(ProjectFileDB).where(ProjectFileDB.project_id == project_db.id)
        )
        await self.session.execute(delete(ProjectDB).where(ProjectDB.id == project_db.id))
        await self.session.commit()
