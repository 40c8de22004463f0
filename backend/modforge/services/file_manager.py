from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError

from modforge.config import settings
from modforge.models.file_record import (
    DEFAULT_FILE_TYPE,
    FOLDER_FILE_TYPE,
    FileRecord,
    file_type_for,
)
from modforge.models.project import DEFAULT_MOD_ID, Platform
from modforge.repositories.file_repository import FileRepository, NewFileRecord
from modforge.services.notification_service import NotificationService
from modforge.tools.exceptions import FileStoreError, InvalidFileOperationError
from modforge.tools.file_tree import FileTree, build_tree, iter_folder_paths
from modforge.tools.mod_templates import (
    TemplateDescriptor,
    render_file_template,
    with_extension,
)
from modforge.tools.path_utils import ancestor_paths, basename, join_path
from modforge.tools.scaffold_templates import generate_project_structure

logger = logging.getLogger(__name__)

StoreError = FileStoreError | SQLAlchemyError


class FileManager:
    """CRUD façade over a project's file records.

    Keeps an in-memory mirror of the records (``files``) and the file open in
    the editor (``current_file``). Store failures never propagate: they are
    logged, published as destructive notifications, kept on ``last_error``
    and turned into a ``None``/``False`` result.
    """

    def __init__(
        self,
        repository: FileRepository,
        notification_service: NotificationService,
        project_id: str,
    ):
        self.repository = repository
        self.notification_service = notification_service
        self.project_id = project_id
        self.files: list[FileRecord] = []
        self.current_file: FileRecord | None = None
        self.last_error: StoreError | None = None

    async def _report_failure(self, title: str, exc: StoreError) -> None:
        self.last_error = exc
        if isinstance(exc, SQLAlchemyError):
            logger.exception("%s (project %s)", title, self.project_id)
            await self.repository.rollback()
            description = "Please try again"
        else:
            logger.warning("%s (project %s): %s", title, self.project_id, exc)
            description = str(exc)
        await self.notification_service.notify(
            self.project_id, title, description, destructive=True
        )

    async def _notify(self, title: str, description: str | None = None) -> None:
        await self.notification_service.notify(self.project_id, title, description)

    def _find(self, file_id: str) -> FileRecord | None:
        return next((record for record in self.files if record.id == file_id), None)

    async def _lookup(self, file_id: str) -> FileRecord:
        return self._find(file_id) or await self.repository.get_file(file_id, self.project_id)

    def _merge(self, records: list[FileRecord]) -> None:
        updated = {record.id: record for record in records}
        known = {record.id for record in self.files}
        self.files = [updated.get(record.id, record) for record in self.files]
        self.files.extend(record for record in records if record.id not in known)
        if self.current_file is not None and self.current_file.id in updated:
            self.current_file = updated[self.current_file.id]

    def tree(self) -> FileTree:
        return build_tree(self.files)

    def folder_paths(self) -> list[str]:
        return iter_folder_paths(self.tree())

    async def list_files(self) -> list[FileRecord] | None:
        self.last_error = None
        try:
            records = await self.repository.list_files(self.project_id)
        except (FileStoreError, SQLAlchemyError) as exc:
            await self._report_failure("Failed to load files", exc)
            return None

        self.files = records
        if self.current_file is not None:
            self.current_file = self._find(self.current_file.id)
        return list(self.files)

    async def create_file(
        self,
        name: str,
        path: str,
        content: str = "",
        file_type: str = DEFAULT_FILE_TYPE,
        is_directory: bool = False,
        parent_path: str | None = None,
    ) -> FileRecord | None:
        self.last_error = None
        if not name or not name.strip():
            return None

        try:
            record = await self.repository.create_file(
                self.project_id,
                name=name,
                path=path,
                content=content,
                file_type=file_type,
                is_directory=is_directory,
                parent_path=parent_path,
            )
        except (FileStoreError, SQLAlchemyError) as exc:
            await self._report_failure("Failed to create file", exc)
            return None

        self.files.append(record)
        await self._notify("File created", f"{name} has been created")
        logger.info("Created %s in project %s", record.path, self.project_id)
        return record

    async def create_folder(self, name: str, parent_path: str | None = None) -> FileRecord | None:
        return await self.create_file(
            name,
            join_path(parent_path, name),
            file_type=FOLDER_FILE_TYPE,
            is_directory=True,
            parent_path=parent_path,
        )

    async def create_from_template(
        self,
        descriptor: TemplateDescriptor,
        name: str,
        parent_path: str | None = None,
        mod_id: str = DEFAULT_MOD_ID,
    ) -> FileRecord | None:
        if not name or not name.strip():
            return None
        file_name = with_extension(name, descriptor)
        return await self.create_file(
            file_name,
            join_path(parent_path, file_name),
            content=render_file_template(descriptor.template, file_name, mod_id),
            file_type=file_type_for(file_name),
            parent_path=parent_path,
        )

    async def update_file(
        self,
        file_id: str,
        content: str,
        new_path: str | None = None,
    ) -> FileRecord | None:
        """Save *content* and optionally move the record to *new_path*.

        Directory moves carry every descendant along; all affected mirror
        entries are refreshed.
        """

        self.last_error = None
        try:
            records = await self.repository.update_file(
                file_id, content=content, new_path=new_path, project_id=self.project_id
            )
        except (FileStoreError, SQLAlchemyError) as exc:
            await self._report_failure("Failed to save file", exc)
            return None

        self._merge(records)
        return records[0]

    async def move_file(self, file_id: str, target_path: str | None) -> FileRecord | None:
        """Drop a record onto *target_path* (``None`` or ``""`` for the root).

        The target must be a folder: an explicit directory record or a folder
        implied by deeper paths.
        """
        self.last_error = None
        try:
            record = await self._lookup(file_id)
            if target_path:
                target = await self.repository.find_by_path(self.project_id, target_path)
                if target is not None and not target.is_directory:
                    raise InvalidFileOperationError(
                        f"Cannot move '{record.path}' into file '{target_path}'"
                    )
        except (FileStoreError, SQLAlchemyError) as exc:
            await self._report_failure("Failed to move file", exc)
            return None

        new_path = join_path(target_path or None, record.name)
        if new_path == record.path:
            return record

        moved = await self.update_file(file_id, record.content, new_path)
        if moved is not None:
            await self._notify("File moved", f"{record.path} moved to {new_path}")
        return moved

    async def delete_file(self, file_id: str) -> bool:
        self.last_error = None
        try:
            removed = set(
                await self.repository.delete_file(file_id, project_id=self.project_id)
            )
        except (FileStoreError, SQLAlchemyError) as exc:
            await self._report_failure("Failed to delete file", exc)
            return False

        self.files = [record for record in self.files if record.id not in removed]
        if self.current_file is not None and self.current_file.id in removed:
            self.current_file = None
        await self._notify("File deleted", "The file has been removed")
        return True

    async def open_file(self, file_id: str) -> FileRecord | None:
        self.last_error = None
        try:
            record = await self._lookup(file_id)
        except (FileStoreError, SQLAlchemyError) as exc:
            await self._report_failure("Failed to open file", exc)
            return None

        self.current_file = record
        return record

    async def scaffold_sample(
        self,
        mod_id: str = DEFAULT_MOD_ID,
        *,
        project_name: str | None = None,
        platform: Platform = Platform.FORGE,
        minecraft_version: str | None = None,
        description: str | None = None,
    ) -> list[FileRecord] | None:
        """Create the sample mod tree in a single transaction.

        Directories implied by the sample files come first, shallowest first;
        directories already present in the project are reused.
        """

        self.last_error = None
        structure = generate_project_structure(
            project_name or mod_id,
            platform,
            minecraft_version or settings.default_minecraft_version,
            description,
            mod_id=mod_id,
        )

        directories: dict[str, None] = {}
        for path in structure.project_structure:
            directories.update(dict.fromkeys(ancestor_paths(path)))

        try:
            existing = {
                record.path
                for record in await self.repository.list_files(self.project_id)
                if record.is_directory
            }
            entries = [
                NewFileRecord(path=path, is_directory=True)
                for path in directories
                if path not in existing
            ]
            entries.extend(
                NewFileRecord(path=path, content=content, file_type=file_type_for(basename(path)))
                for path, content in structure.project_structure.items()
            )
            records = await self.repository.create_many(self.project_id, entries)
        except (FileStoreError, SQLAlchemyError) as exc:
            await self._report_failure("Failed to create sample project", exc)
            return None

        self._merge(records)
        await self._notify(
            "Sample project created",
            f"{len(records)} files and folders have been created",
        )
        logger.info("Scaffolded %d records in project %s", len(records), self.project_id)
        return records

    async def clear_project(self) -> bool:
        self.last_error = None
        try:
            removed = await self.repository.delete_all(self.project_id)
        except (FileStoreError, SQLAlchemyError) as exc:
            await self._report_failure("Failed to clear project", exc)
            return False

        self.files = []
        self.current_file = None
        await self._notify("Project cleared", f"{removed} files have been removed")
        return True
