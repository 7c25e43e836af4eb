"""Infrastructure layer exports."""

from .confirmation import Confirm, accept, ask, decline
from .documents_api import DocumentApiClient, DocumentBackend, RequestError
from .notifications import (
    LogNotifier,
    Notification,
    Notifier,
    RecordingNotifier,
    configure_notifier,
    get_notifier,
)

__all__ = [
    "Confirm",
    "DocumentApiClient",
    "DocumentBackend",
    "LogNotifier",
    "Notification",
    "Notifier",
    "RecordingNotifier",
    "RequestError",
    "accept",
    "ask",
    "configure_notifier",
    "decline",
    "get_notifier",
]
