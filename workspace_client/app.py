from __future__ import annotations

from loguru import logger

from workspace_client.application import WorkspaceController
from workspace_client.config import ClientSettings, setup_logging
from workspace_client.infrastructure import (
    Confirm,
    DocumentApiClient,
    DocumentBackend,
    Notifier,
    decline,
)


def create_workspace(
    settings: ClientSettings | None = None,
    *,
    backend: DocumentBackend | None = None,
    notifier: Notifier | None = None,
    confirm: Confirm = decline,
) -> WorkspaceController:
    """Wire a workspace controller; call ``await controller.start()`` to load page 1.

    Without explicit ``settings`` they are read from the environment and the
    log sink is configured from them.
    """

    if settings is None:
        settings = ClientSettings.from_env()
        setup_logging(settings)

    owns_backend = backend is None
    if backend is None:
        backend = DocumentApiClient(settings.api_base, timeout=settings.http_timeout)
        logger.info(f"Workspace talking to {settings.api_base}")

    return WorkspaceController(
        backend,
        notifier=notifier,
        confirm=confirm,
        page_limit=settings.page_limit,
        search_delay=settings.debounce_seconds,
        owns_backend=owns_backend,
    )
