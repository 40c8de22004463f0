from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import uuid4

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from modforge.models.file_record import DEFAULT_FILE_TYPE, FOLDER_FILE_TYPE, FileRecord
from modforge.models.file_record_db import ProjectFileDB
from modforge.tools.exceptions import (
    DuplicatePathError,
    FileRecordNotFoundError,
    InvalidFileOperationError,
    PathValidationError,
)
from modforge.tools.path_utils import (
    basename,
    is_descendant,
    normalize_path,
    parent_of,
    rebase_path,
)


@dataclass(slots=True)
class NewFileRecord:
    """Insert payload for batch creation; name and parent derive from *path*."""

    path: str
    content: str = ""
    file_type: str = DEFAULT_FILE_TYPE
    is_directory: bool = False


class FileRepository:
    """Record store for the ``project_files`` table.

    This is the only place that knows the persisted column names; everything
    above it works with :class:`FileRecord`.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    def _file_db_to_model(self, file_db: ProjectFileDB) -> FileRecord:
        return FileRecord(
            id=file_db.id,
            project_id=file_db.project_id,
            path=file_db.file_path,
            name=file_db.file_name,
            content=file_db.file_content or "",
            file_type=file_db.file_type,
            is_directory=bool(file_db.is_directory),
            parent_path=file_db.parent_path,
            created_at=file_db.created_at,
            updated_at=file_db.updated_at,
        )

    def _model_to_db(self, project_id: str, entry: NewFileRecord) -> ProjectFileDB:
        path = normalize_path(entry.path)
        if entry.is_directory and entry.content:
            raise InvalidFileOperationError(f"Directory '{path}' cannot hold content")
        return ProjectFileDB(
            id=uuid4().hex,
            project_id=project_id,
            file_path=path,
            file_name=basename(path),
            file_content="" if entry.is_directory else entry.content,
            file_type=FOLDER_FILE_TYPE if entry.is_directory else entry.file_type,
            is_directory=entry.is_directory,
            parent_path=parent_of(path),
        )

    async def _get_row(self, file_id: str, project_id: str | None = None) -> ProjectFileDB:
        query = select(ProjectFileDB).where(ProjectFileDB.id == file_id)
        if project_id:
            query = query.where(ProjectFileDB.project_id == project_id)

        result = await self.session.execute(query)
        file_db = result.scalar_one_or_none()
        if file_db is None:
            raise FileRecordNotFoundError(file_id)
        return file_db

    async def _descendant_rows(self, project_id: str, path: str) -> list[ProjectFileDB]:
        result = await self.session.execute(
            select(ProjectFileDB)
            .where(ProjectFileDB.project_id == project_id)
            .where(ProjectFileDB.file_path.startswith(f"{path}/", autoescape=True))
        )
        return list(result.scalars().all())

    async def _taken_paths(
        self,
        project_id: str,
        paths: Iterable[str],
        *,
        exclude_ids: Iterable[str] = (),
    ) -> set[str]:
        candidates = set(paths)
        if not candidates:
            return set()
        query = (
            select(ProjectFileDB.file_path)
            .where(ProjectFileDB.project_id == project_id)
            .where(ProjectFileDB.file_path.in_(candidates))
        )
        excluded = list(exclude_ids)
        if excluded:
            query = query.where(ProjectFileDB.id.not_in(excluded))
        result = await self.session.execute(query)
        return set(result.scalars().all())

    async def _commit(self, project_id: str, path: str) -> None:
        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            raise DuplicatePathError(project_id, path) from exc

    async def rollback(self) -> None:
        await self.session.rollback()

    async def list_files(self, project_id: str) -> list[FileRecord]:
        result = await self.session.execute(
            select(ProjectFileDB)
            .where(ProjectFileDB.project_id == project_id)
            .order_by(ProjectFileDB.file_path.asc())
        )
        return [self._file_db_to_model(row) for row in result.scalars().all()]

    async def get_file(self, file_id: str, project_id: str | None = None) -> FileRecord:
        return self._file_db_to_model(await self._get_row(file_id, project_id))

    async def find_by_path(self, project_id: str, path: str) -> FileRecord | None:
        result = await self.session.execute(
            select(ProjectFileDB)
            .where(ProjectFileDB.project_id == project_id)
            .where(ProjectFileDB.file_path == path)
        )
        file_db = result.scalar_one_or_none()
        return self._file_db_to_model(file_db) if file_db is not None else None

    async def create_file(
        self,
        project_id: str,
        name: str,
        path: str,
        content: str = "",
        file_type: str = DEFAULT_FILE_TYPE,
        is_directory: bool = False,
        parent_path: str | None = None,
    ) -> FileRecord:
        normalize_path(path)
        if basename(path) != name:
            raise PathValidationError(f"Name '{name}' does not match path '{path}'")
        if parent_path is not None and parent_path != parent_of(path):
            raise PathValidationError(
                f"Parent '{parent_path}' does not match path '{path}'"
            )

        file_db = self._model_to_db(
            project_id,
            NewFileRecord(
                path=path,
                content=content,
                file_type=file_type,
                is_directory=is_directory,
            ),
        )
        if await self._taken_paths(project_id, [path]):
            raise DuplicatePathError(project_id, path)

        self.session.add(file_db)
        await self._commit(project_id, path)
        await self.session.refresh(file_db)
        return self._file_db_to_model(file_db)

    async def create_many(
        self,
        project_id: str,
        entries: Sequence[NewFileRecord],
    ) -> list[FileRecord]:
        """Insert all *entries* in one transaction; nothing is written on failure."""
        rows = [self._model_to_db(project_id, entry) for entry in entries]

        seen: set[str] = set()
        for row in rows:
            if row.file_path in seen:
                raise DuplicatePathError(project_id, row.file_path)
            seen.add(row.file_path)

        taken = await self._taken_paths(project_id, seen)
        if taken:
            raise DuplicatePathError(project_id, sorted(taken)[0])

        self.session.add_all(rows)
        await self._commit(project_id, rows[0].file_path if rows else "")
        for row in rows:
            await self.session.refresh(row)
        return [self._file_db_to_model(row) for row in rows]

    async def update_file(
        self,
        file_id: str,
        content: str | None = None,
        new_path: str | None = None,
        *,
        project_id: str | None = None,
    ) -> list[FileRecord]:
        """Persist new content and/or a new path.

        Renaming a directory rewrites every descendant's ``path`` and
        ``parent_path`` in the same transaction. Returns the updated record
        first, followed by any moved descendants.
        """

        file_db = await self._get_row(file_id, project_id)
        now = datetime.now(UTC)

        if content and file_db.is_directory:
            raise InvalidFileOperationError(
                f"Directory '{file_db.file_path}' cannot hold content"
            )

        renamed: dict[str, str] = {}
        descendants: list[ProjectFileDB] = []
        if new_path is not None and new_path != file_db.file_path:
            normalize_path(new_path)
            old_path = file_db.file_path
            if file_db.is_directory:
                if is_descendant(new_path, old_path):
                    raise PathValidationError(
                        f"Cannot move '{old_path}' into its own subtree '{new_path}'"
                    )
                descendants = await self._descendant_rows(file_db.project_id, old_path)

            renamed[file_db.id] = new_path
            for child in descendants:
                renamed[child.id] = rebase_path(child.file_path, old_path, new_path)

            taken = await self._taken_paths(
                file_db.project_id,
                renamed.values(),
                exclude_ids=renamed.keys(),
            )
            if taken:
                raise DuplicatePathError(file_db.project_id, sorted(taken)[0])

        if content is not None:
            file_db.file_content = content
        for row in (file_db, *descendants):
            if row.id in renamed:
                row.file_path = renamed[row.id]
                row.file_name = basename(row.file_path)
                row.parent_path = parent_of(row.file_path)
                row.updated_at = now

        file_db.updated_at = now
        await self._commit(file_db.project_id, file_db.file_path)
        await self.session.refresh(file_db)
        for row in descendants:
            await self.session.refresh(row)
        return [self._file_db_to_model(row) for row in (file_db, *descendants)]

    async def delete_file(self, file_id: str, *, project_id: str | None = None) -> list[str]:
        """Delete a record and, for directories, its whole subtree.

        Returns the identifiers of every removed record.
        """

        file_db = await self._get_row(file_id, project_id)
        removed = [file_db.id]
        if file_db.is_directory:
            descendants = await self._descendant_rows(file_db.project_id, file_db.file_path)
            removed.extend(row.id for row in descendants)
        await self.session.execute(delete(ProjectFileDB).where(ProjectFileDB.id.in_(removed)))
        await self.session.commit()
        return removed

    async def delete_all(self, project_id: str) -> int:
        result = await self.session.execute(
            delete(ProjectFileDB).where(ProjectFileDB.project_id == project_id)
        )
        await self.session.commit()
        return result.rowcount or 0
