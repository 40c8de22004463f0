"""Nested view of a project's flat file records.

The tree is keyed by path segment. Folders that have no record of their own
(a file whose parent was never created explicitly) are synthesized with
``file=None`` so the hierarchy always renders.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Literal

from modforge.models.file_record import FileRecord

NodeType = Literal["folder", "file"]


@dataclass
class FileNode:
    name: str
    path: str
    type: NodeType = "folder"
    file: FileRecord | None = None
    children: dict[str, FileNode] = field(default_factory=dict)


FileTree = dict[str, FileNode]


def build_tree(records: Iterable[FileRecord]) -> FileTree:
    """Build the nested tree for *records*, processed in input order.

    A record landing on a node that already exists (because a deeper record
    implied it) overwrites the node's type and file; the later record wins.
    """

    tree: FileTree = {}
    for record in records:
        segments = record.path.split("/")
        level = tree
        node: FileNode | None = None
        for depth, segment in enumerate(segments):
            node = level.get(segment)
            if node is None:
                node = FileNode(name=segment, path="/".join(segments[: depth + 1]))
                level[segment] = node
            level = node.children
        if node is None:
            continue
        node.type = "folder" if record.is_directory else "file"
        node.file = record
    return tree


def iter_nodes(tree: FileTree) -> Iterator[FileNode]:
    """Depth-first walk, parents before children."""
    for node in tree.values():
        yield node
        yield from iter_nodes(node.children)


def flatten_tree(tree: FileTree) -> list[FileRecord]:
    """Every record attached to *tree*, parents before children."""
    return [node.file for node in iter_nodes(tree) if node.file is not None]


def iter_folder_paths(tree: FileTree) -> list[str]:
    """Paths of all folder nodes, explicit or synthesized, sorted."""
    return sorted(node.path for node in iter_nodes(tree) if node.type == "folder")


def find_node(tree: FileTree, path: str) -> FileNode | None:
    level = tree
    node: FileNode | None = None
    for segment in path.split("/"):
        node = level.get(segment)
        if node is None:
            return None
        level = node.children
    return node
