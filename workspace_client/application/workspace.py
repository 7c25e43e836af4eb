"""Workspace use cases: listing, paging, searching, uploading, deleting, viewing."""
from __future__ import annotations

import asyncio
import time
from typing import Any, Callable, Coroutine

from loguru import logger

from workspace_client.core import state
from workspace_client.core.state import Observer, WorkspaceStore
from workspace_client.core.validation import ValidationError, validate_upload
from workspace_client.domain import Pagination, SelectedFile, WorkspaceState
from workspace_client.infrastructure.confirmation import Confirm, ask, decline
from workspace_client.infrastructure.documents_api import DocumentBackend, RequestError
from workspace_client.infrastructure.notifications import Notifier, get_notifier
from workspace_client.workers.debounce import DEFAULT_SEARCH_DELAY, SearchPipeline

from .outcomes import NotificationPolicy

LOAD_FAILED = "Failed to load documents."
SEARCH_FAILED = "Search failed."
UPLOAD_FAILED = "Upload failed. Invalid Document"
DELETE_FAILED = "Failed to delete document."
VIEW_FAILED = "Failed to load document details."
UPLOAD_SUCCEEDED = "Document uploaded successfully!"
DELETE_SUCCEEDED = "Document deleted successfully!"
DELETE_PROMPT = "Are you sure you want to delete this document?"


class WorkspaceController:
    """Coordinates the document workspace against a :class:`DocumentBackend`.

    All methods run on one event loop.  Actions the user triggers await their
    own request; follow-up work (the debounced search and the page refresh
    after an upload or delete) runs as tracked background tasks, see
    :meth:`wait_idle`.  Responses are applied in the order they resolve.
    """

    def __init__(
        self,
        backend: DocumentBackend,
        *,
        notifier: Notifier | None = None,
        confirm: Confirm = decline,
        page_limit: int = 5,
        search_delay: float = DEFAULT_SEARCH_DELAY,
        owns_backend: bool = False,
    ) -> None:
        self._backend = backend
        self._owns_backend = owns_backend
        self._confirm = confirm
        self._store = WorkspaceStore(WorkspaceState(pagination=Pagination(page=1, limit=page_limit)))
        self._outcomes = NotificationPolicy(self._store, notifier or get_notifier(), self._schedule_refresh)
        self._pipeline = SearchPipeline(self._dispatch_search, delay=search_delay)
        self._tasks: set[asyncio.Task[Any]] = set()

    # ------------------------------------------------------------------
    # state access
    # ------------------------------------------------------------------
    @property
    def state(self) -> WorkspaceState:
        return self._store.state

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        return self._store.subscribe(observer)

    # ------------------------------------------------------------------
    # listing & pagination
    # ------------------------------------------------------------------
    async def start(self) -> None:
        """Initial fetch of the first page."""

        await self.load_documents()

    async def load_documents(self) -> None:
        pagination = self.state.pagination
        self._store.apply(state.request_started)
        try:
            documents = await self._backend.list(pagination.page, pagination.limit)
        except RequestError as exc:
            self._outcomes.handle_error(LOAD_FAILED, exc)
            return
        self._store.apply(state.documents_loaded, documents)
        logger.info(f"Loaded {len(documents)} documents for page {pagination.page}")

    async def next_page(self) -> None:
        self._store.apply(state.page_changed, self.state.pagination.page + 1)
        await self.load_documents()

    async def previous_page(self) -> None:
        page = self.state.pagination.page
        if page <= 1:
            return
        self._store.apply(state.page_changed, page - 1)
        await self.load_documents()

    # ------------------------------------------------------------------
    # search
    # ------------------------------------------------------------------
    def on_search_input(self, keyword: str) -> None:
        """Feed one keystroke's worth of keyword into the debounced channel."""

        self._store.apply(state.keyword_changed, keyword)
        self._pipeline.push(keyword)

    async def perform_search(self, keyword: str) -> None:
        if not keyword.strip():
            await self._clear_search()
            return

        started = time.perf_counter()
        self._store.apply(state.request_started)
        try:
            documents = await self._backend.search(keyword)
        except RequestError as exc:
            self._outcomes.handle_error(SEARCH_FAILED, exc)
            return
        elapsed_ms = (time.perf_counter() - started) * 1000
        self._store.apply(state.search_succeeded, documents, elapsed_ms)
        logger.info(f"Search {keyword!r} returned {len(documents)} documents in {elapsed_ms:.1f} ms")

    async def _clear_search(self) -> None:
        self._store.apply(state.search_cleared)
        await self.load_documents()

    def _dispatch_search(self, keyword: str) -> None:
        logger.debug(f"Dispatching search for {keyword!r}")
        self._spawn(self.perform_search(keyword))

    # ------------------------------------------------------------------
    # upload & delete
    # ------------------------------------------------------------------
    def select_file(self, file: SelectedFile) -> None:
        """Pick ``file`` for the next upload (file dialog or drag-and-drop)."""

        self._store.apply(state.file_selected, file)

    def clear_file(self) -> None:
        self._store.apply(state.file_cleared)

    async def upload_selected_file(self) -> None:
        try:
            file = validate_upload(self.state.selected_file)
        except ValidationError as exc:
            self._outcomes.handle_validation(exc)
            return

        self._store.apply(state.submit_started)
        try:
            await self._backend.upload(file)
        except RequestError as exc:
            self._outcomes.handle_error(UPLOAD_FAILED, exc, upload_or_delete=True)
            return
        self._outcomes.handle_success(UPLOAD_SUCCEEDED)
        self._store.apply(state.file_cleared)

    async def delete_document(self, document_id: int) -> None:
        if not await ask(self._confirm, DELETE_PROMPT):
            logger.debug(f"Deletion of document {document_id} not confirmed")
            return

        self._store.apply(state.submit_started)
        try:
            await self._backend.delete(document_id)
        except RequestError as exc:
            self._outcomes.handle_error(DELETE_FAILED, exc, upload_or_delete=True)
            return
        self._outcomes.handle_success(DELETE_SUCCEEDED)

    # ------------------------------------------------------------------
    # single document
    # ------------------------------------------------------------------
    async def view_document(self, document_id: int) -> None:
        self._store.apply(state.request_started)
        try:
            document = await self._backend.get(document_id)
        except RequestError as exc:
            self._outcomes.handle_error(VIEW_FAILED, exc)
            return
        self._store.apply(state.document_viewed, document)

    # ------------------------------------------------------------------
    # background work
    # ------------------------------------------------------------------
    def _spawn(self, coro: Coroutine[Any, Any, None]) -> asyncio.Task[None]:
        task = asyncio.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def _schedule_refresh(self) -> None:
        self._spawn(self.load_documents())

    async def wait_idle(self) -> None:
        """Wait until no keyword is debouncing and no background task is running."""

        while True:
            running = [task for task in self._tasks if not task.done()]
            if running:
                await asyncio.gather(*running)
            elif self._pipeline.is_debouncing:
                await asyncio.sleep(self._pipeline.delay)
            else:
                return

    async def aclose(self) -> None:
        self._pipeline.cancel()
        await self.wait_idle()
        if self._owns_backend:
            await self._backend.aclose()  # type: ignore[attr-defined]
