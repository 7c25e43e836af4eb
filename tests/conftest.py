from __future__ import annotations

import asyncio
from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest
from loguru import logger

from workspace_client.application import WorkspaceController
from workspace_client.domain import Document, SelectedFile
from workspace_client.infrastructure import RecordingNotifier, RequestError

SHORT_DELAY = 0.02


def make_document(doc_id: int, name: str | None = None, **extra) -> Document:
    name = name or f"doc-{doc_id}.txt"
    return Document(
        id=doc_id,
        name=name,
        path=f"/storage/{name}",
        created_at="2025-01-01T00:00:00Z",
        **extra,
    )


class FakeBackend:
    """In-memory document API recording every call it receives."""

    def __init__(self, documents: list[Document] | None = None) -> None:
        self.documents: list[Document] = list(documents or [])
        self.calls: list[tuple] = []
        self.failures: dict[str, Exception] = {}
        self.gates: dict[str, asyncio.Event] = {}
        self.search_results: dict[str, list[Document]] = {}

    def calls_for(self, operation: str) -> list[tuple]:
        return [call for call in self.calls if call[0] == operation]

    def hold(self, operation: str) -> asyncio.Event:
        gate = asyncio.Event()
        self.gates[operation] = gate
        return gate

    async def _enter(self, operation: str, *args) -> None:
        self.calls.append((operation, *args))
        gate = self.gates.get(operation)
        if gate is not None:
            await gate.wait()
        failure = self.failures.get(operation)
        if failure is not None:
            raise RequestError(operation, failure)

    async def list(self, page: int, limit: int) -> list[Document]:
        await self._enter("list", page, limit)
        start = (page - 1) * limit
        return self.documents[start : start + limit]

    async def search(self, keyword: str) -> list[Document]:
        await self._enter("search", keyword)
        if keyword in self.search_results:
            return list(self.search_results[keyword])
        return [doc for doc in self.documents if keyword.lower() in doc.name.lower()]

    async def get(self, document_id: int) -> Document:
        await self._enter("get", document_id)
        for doc in self.documents:
            if doc.id == document_id:
                return doc
        raise RequestError("get", LookupError(document_id))

    async def upload(self, file: SelectedFile) -> None:
        await self._enter("upload", file.name)
        next_id = max((doc.id for doc in self.documents), default=0) + 1
        self.documents.append(make_document(next_id, file.name))

    async def delete(self, document_id: int) -> None:
        await self._enter("delete", document_id)
        self.documents = [doc for doc in self.documents if doc.id != document_id]


@pytest.fixture()
def backend() -> FakeBackend:
    return FakeBackend([make_document(i) for i in range(1, 4)])


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def controller(backend, notifier) -> WorkspaceController:
    return WorkspaceController(backend, notifier=notifier, search_delay=SHORT_DELAY)


@pytest.fixture()
def log_messages():
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(str(message)), level="DEBUG", format="{level} | {message}")
    yield messages
    logger.remove(handler_id)
