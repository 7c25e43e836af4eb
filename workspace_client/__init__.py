"""Client-side controller for a paginated, searchable document workspace."""

from .app import create_workspace
from .application import WorkspaceController
from .config import ClientSettings
from .domain import Document, SelectedFile, WorkspaceState

__all__ = [
    "ClientSettings",
    "Document",
    "SelectedFile",
    "WorkspaceController",
    "WorkspaceState",
    "create_workspace",
]
