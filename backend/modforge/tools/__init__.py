"""Tools and utilities for backend operations.

This package contains utilities for:
- Claude Agent SDK configuration (builders.py)
- Path validation and rewriting for file records (path_utils.py)
- Flat list <-> nested tree conversion (file_tree.py)
- Single-file templates and the sample project layout (mod_templates.py, scaffold_templates.py)
- Exception types for file record operations (exceptions.py)

"""

from .builders import build_claude_options
from .exceptions import (
    DuplicatePathError,
    FileRecordNotFoundError,
    FileStoreError,
    InvalidFileOperationError,
    PathValidationError,
)
from .file_tree import FileNode, FileTree, build_tree, flatten_tree, iter_folder_paths
from .mod_templates import TEMPLATE_CATALOGUE, TemplateDescriptor, render_file_template
from .path_utils import join_path, normalize_path, parent_of
from .scaffold_templates import ProjectStructure, generate_project_structure

__all__ = [
    # Builders
    "build_claude_options",
    # Tree
    "FileNode",
    "FileTree",
    "build_tree",
    "flatten_tree",
    "iter_folder_paths",
    # Templates
    "TEMPLATE_CATALOGUE",
    "TemplateDescriptor",
    "render_file_template",
    "ProjectStructure",
    "generate_project_structure",
    # Exceptions
    "FileStoreError",
    "DuplicatePathError",
    "FileRecordNotFoundError",
    "InvalidFileOperationError",
    "PathValidationError",
    # Utilities
    "normalize_path",
    "join_path",
    "parent_of",
]
