"""User-visible notifications (the toasts shown after an operation resolves).

The workspace only decides *what* to tell the user; rendering is left to a
notifier.  The default notifier writes through the log so a headless session
still surfaces every message.  An embedding UI installs its own with
``configure_notifier`` or passes one to the controller directly.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Protocol

from loguru import logger

NotificationKind = Literal["success", "error"]


@dataclass(frozen=True, slots=True)
class Notification:
    kind: NotificationKind
    message: str
    duration_ms: int

    def render(self) -> str:
        icon = "✅" if self.kind == "success" else "❌"
        return f"{icon} {self.message}"


class Notifier(Protocol):
    """Contract for notification sinks."""

    def notify(self, notification: Notification) -> None:
        """Show ``notification`` to the user."""


class LogNotifier:
    """Fallback notifier that writes each notification to the log."""

    def notify(self, notification: Notification) -> None:
        level = "SUCCESS" if notification.kind == "success" else "ERROR"
        logger.log(level, notification.render())


class RecordingNotifier:
    """Keeps every notification in memory, newest last."""

    def __init__(self) -> None:
        self.notifications: list[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)

    @property
    def last(self) -> Notification | None:
        return self.notifications[-1] if self.notifications else None

    def clear(self) -> None:
        self.notifications.clear()


_notifier: Notifier = LogNotifier()


def configure_notifier(notifier: Notifier) -> None:
    """Install the notifier used by workspaces created without one."""

    global _notifier
    _notifier = notifier


def get_notifier() -> Notifier:
    """Return the currently configured notifier."""

    return _notifier
