"""Application services."""

from .outcomes import NotificationPolicy
from .workspace import WorkspaceController

__all__ = [
    "NotificationPolicy",
    "WorkspaceController",
]
