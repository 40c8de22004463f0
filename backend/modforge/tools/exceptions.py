from __future__ import annotations


class FileStoreError(RuntimeError):
    """Base error for file record operations."""


class PathValidationError(FileStoreError):
    """Raised when a path is malformed or inconsistent with its name/parent."""


class DuplicatePathError(FileStoreError):
    """Raised when a path is already taken within a project."""

    def __init__(self, project_id: str, path: str):
        super().__init__(f"Path '{path}' already exists in project '{project_id}'")
        self.project_id = project_id
        self.path = path


class FileRecordNotFoundError(FileStoreError):
    """Raised when a file identifier cannot be resolved."""

    def __init__(self, file_id: str):
        super().__init__(f"File '{file_id}' was not found")
        self.file_id = file_id


class InvalidFileOperationError(FileStoreError):
    """Raised when an operation does not apply to the record (e.g. content on a folder)."""
