"""Terminal outcome handlers shared by every asynchronous workspace operation."""
from __future__ import annotations

from typing import Callable

from loguru import logger

from workspace_client.core import state
from workspace_client.core.state import WorkspaceStore
from workspace_client.core.validation import ValidationError
from workspace_client.infrastructure.notifications import Notification, Notifier

SUCCESS_DURATION_MS = 5000
ERROR_DURATION_MS = 5000


class NotificationPolicy:
    """Maps operation outcomes to state transitions and user notifications."""

    def __init__(self, store: WorkspaceStore, notifier: Notifier, refresh: Callable[[], object]) -> None:
        self._store = store
        self._notifier = notifier
        self._refresh = refresh

    def handle_success(self, message: str) -> None:
        """Clear both flags, refresh the current page and tell the user."""

        self._store.apply(state.operation_succeeded)
        self._refresh()
        logger.info(message)
        self._notifier.notify(Notification("success", message, SUCCESS_DURATION_MS))

    def handle_error(self, user_message: str, cause: BaseException, *, upload_or_delete: bool = False) -> None:
        """Record ``cause`` for diagnostics and show ``user_message`` instead.

        Only the flag of the failed channel is cleared: ``uploading`` for
        upload/delete failures, ``loading`` for everything else.
        """

        logger.opt(exception=cause).error(f"{user_message} ({cause})")
        self._store.apply(state.operation_failed, user_message, upload_or_delete=upload_or_delete)
        self._notifier.notify(Notification("error", user_message, ERROR_DURATION_MS))

    def handle_validation(self, error: ValidationError) -> None:
        logger.debug(f"Rejected before submit: {error.message}")
        self._notifier.notify(Notification("error", error.message, error.duration_ms))
