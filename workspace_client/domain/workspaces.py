"""Domain entities for the document workspace."""
from __future__ import annotations

from dataclasses import dataclass, field

from .documents import Document, SelectedFile


@dataclass(frozen=True, slots=True)
class Pagination:
    """Client-side page cursor; the server never reports the current page."""

    page: int = 1
    limit: int = 5

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("page must be >= 1")
        if self.limit <= 0:
            raise ValueError("limit must be > 0")


@dataclass(frozen=True, slots=True)
class SearchStats:
    keyword: str = ""
    result_count: int = 0
    elapsed_ms: float = 0.0


@dataclass(frozen=True, slots=True)
class Flags:
    """``loading`` covers list/search/get, ``uploading`` covers upload/delete."""

    loading: bool = False
    uploading: bool = False


@dataclass(frozen=True, slots=True)
class WorkspaceState:
    """Aggregated state shown by a single workspace view."""

    documents: tuple[Document, ...] = ()
    selected_doc: Document | None = None
    pagination: Pagination = field(default_factory=Pagination)
    search: SearchStats = field(default_factory=SearchStats)
    flags: Flags = field(default_factory=Flags)
    error_message: str = ""
    selected_file: SelectedFile | None = None
