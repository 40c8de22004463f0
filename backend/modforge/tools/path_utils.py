from __future__ import annotations

from .exceptions import PathValidationError


def normalize_path(path: str) -> str:
    """Validate a slash-delimited project path and return it unchanged.

    Paths are relative: no leading or trailing slash, no empty segments and
    no ``.`` or ``..`` segments.
    """

    if not path or not path.strip():
        raise PathValidationError("Path must not be empty")
    if "\\" in path:
        raise PathValidationError(f"Path '{path}' must use '/' separators")
    segments = path.split("/")
    for segment in segments:
        if not segment or not segment.strip():
            raise PathValidationError(f"Path '{path}' contains an empty segment")
        if segment in {".", ".."}:
            raise PathValidationError(f"Path '{path}' contains a relative segment")
    return path


def join_path(parent_path: str | None, name: str) -> str:
    return f"{parent_path}/{name}" if parent_path else name


def basename(path: str) -> str:
    return path.rsplit("/", 1)[-1]


def parent_of(path: str) -> str | None:
    """Return *path* with its last segment removed, ``None`` at the root."""
    head, sep, _ = path.rpartition("/")
    return head if sep else None


def is_descendant(path: str, ancestor: str) -> bool:
    return path.startswith(f"{ancestor}/")


def rebase_path(path: str, old_prefix: str, new_prefix: str) -> str:
    """Move *path* from under *old_prefix* to under *new_prefix*."""
    if path == old_prefix:
        return new_prefix
    if not is_descendant(path, old_prefix):
        raise PathValidationError(f"Path '{path}' is not under '{old_prefix}'")
    return f"{new_prefix}{path[len(old_prefix):]}"


def ancestor_paths(path: str) -> list[str]:
    """Every proper ancestor of *path*, shallowest first."""
    segments = path.split("/")[:-1]
    return ["/".join(segments[: index + 1]) for index in range(len(segments))]
