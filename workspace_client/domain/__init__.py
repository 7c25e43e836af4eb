"""Domain layer definitions."""

from .documents import Document, SelectedFile
from .workspaces import Flags, Pagination, SearchStats, WorkspaceState

__all__ = [
    "Document",
    "Flags",
    "Pagination",
    "SearchStats",
    "SelectedFile",
    "WorkspaceState",
]
