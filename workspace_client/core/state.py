"""State transitions for the workspace and the store that applies them.

Every transition is a pure function taking the current
:class:`~workspace_client.domain.WorkspaceState` plus the outcome it reacts to
and returning a new state.  :class:`WorkspaceStore` is the only place that
swaps the current state, so call sites never write fields directly.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Any, Callable, Iterable

from workspace_client.domain import Document, SelectedFile, WorkspaceState

Observer = Callable[[WorkspaceState], None]
Transition = Callable[..., WorkspaceState]


# ----------------------------------------------------------------------
# list / search / get
# ----------------------------------------------------------------------
def request_started(state: WorkspaceState) -> WorkspaceState:
    return replace(state, flags=replace(state.flags, loading=True), error_message="")


def documents_loaded(state: WorkspaceState, documents: Iterable[Document]) -> WorkspaceState:
    return replace(state, documents=tuple(documents), flags=replace(state.flags, loading=False))


def search_succeeded(state: WorkspaceState, documents: Iterable[Document], elapsed_ms: float) -> WorkspaceState:
    results = tuple(documents)
    return replace(
        state,
        documents=results,
        search=replace(state.search, result_count=len(results), elapsed_ms=elapsed_ms),
        selected_doc=results[0] if results else None,
        flags=replace(state.flags, loading=False),
    )


def search_cleared(state: WorkspaceState) -> WorkspaceState:
    return replace(
        state,
        search=replace(state.search, result_count=0, elapsed_ms=0.0),
        selected_doc=None,
    )


def keyword_changed(state: WorkspaceState, keyword: str) -> WorkspaceState:
    return replace(state, search=replace(state.search, keyword=keyword))


def document_viewed(state: WorkspaceState, document: Document) -> WorkspaceState:
    return replace(state, selected_doc=document, flags=replace(state.flags, loading=False))


def page_changed(state: WorkspaceState, page: int) -> WorkspaceState:
    return replace(state, pagination=replace(state.pagination, page=page))


# ----------------------------------------------------------------------
# upload / delete
# ----------------------------------------------------------------------
def submit_started(state: WorkspaceState) -> WorkspaceState:
    return replace(state, flags=replace(state.flags, uploading=True), error_message="")


def file_selected(state: WorkspaceState, file: SelectedFile) -> WorkspaceState:
    return replace(state, selected_file=file)


def file_cleared(state: WorkspaceState) -> WorkspaceState:
    return replace(state, selected_file=None)


# ----------------------------------------------------------------------
# terminal outcomes
# ----------------------------------------------------------------------
def operation_succeeded(state: WorkspaceState) -> WorkspaceState:
    return replace(state, flags=replace(state.flags, loading=False, uploading=False))


def operation_failed(state: WorkspaceState, message: str, *, upload_or_delete: bool = False) -> WorkspaceState:
    # Only the failed channel's flag is cleared; the other may still be in flight.
    if upload_or_delete:
        flags = replace(state.flags, uploading=False)
    else:
        flags = replace(state.flags, loading=False)
    return replace(state, error_message=message, flags=flags)


class WorkspaceStore:
    """Holds the current workspace state and notifies observers on change."""

    def __init__(self, initial: WorkspaceState | None = None) -> None:
        self._state = initial or WorkspaceState()
        self._observers: list[Observer] = []

    @property
    def state(self) -> WorkspaceState:
        return self._state

    def apply(self, transition: Transition, *args: Any, **kwargs: Any) -> WorkspaceState:
        self._state = transition(self._state, *args, **kwargs)
        for observer in list(self._observers):
            observer(self._state)
        return self._state

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register ``observer`` and return a callable that removes it again."""

        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe


__all__ = [
    "WorkspaceStore",
    "document_viewed",
    "documents_loaded",
    "file_cleared",
    "file_selected",
    "keyword_changed",
    "operation_failed",
    "operation_succeeded",
    "page_changed",
    "request_started",
    "search_cleared",
    "search_succeeded",
    "submit_started",
]
