"""HTTP client for the document API."""
from __future__ import annotations

from typing import Any, Protocol
from urllib.parse import urlparse

import httpx
import pydantic
from loguru import logger

from workspace_client.domain import Document, SelectedFile

_DOCUMENT_LIST = pydantic.TypeAdapter(list[Document])


class RequestError(RuntimeError):
    """Raised when a call to the document API does not produce a usable result."""

    def __init__(self, operation: str, cause: BaseException) -> None:
        super().__init__(f"{operation} failed: {cause}")
        self.operation = operation
        self.cause = cause


class DocumentBackend(Protocol):
    """Contract for the document API consumed by the workspace."""

    async def list(self, page: int, limit: int) -> list[Document]: ...

    async def upload(self, file: SelectedFile) -> None: ...

    async def get(self, document_id: int) -> Document: ...

    async def delete(self, document_id: int) -> None: ...

    async def search(self, keyword: str) -> list[Document]: ...


class DocumentApiClient:
    """Stateless request/response wrapper around the ``/documents`` and ``/search`` endpoints."""

    def __init__(
        self,
        api_base: str = "http://localhost:8000/api",
        *,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        parsed = urlparse(api_base)
        if not parsed.scheme or not parsed.netloc:
            raise ValueError("api_base must include scheme and host")

        self._api_base = api_base.rstrip("/")
        self._client = http_client or httpx.AsyncClient(timeout=timeout)
        self._owns_client = http_client is None

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------
    def _url(self, path: str) -> str:
        return f"{self._api_base}{path}"

    async def _send(self, operation: str, method: str, path: str, **kwargs: Any) -> httpx.Response:
        logger.debug(f"{operation}: {method} {path}")
        try:
            response = await self._client.request(method, self._url(path), **kwargs)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise RequestError(operation, exc) from exc
        return response

    @staticmethod
    def _decode(operation: str, response: httpx.Response, adapter: Any) -> Any:
        try:
            return adapter(response.json())
        except (ValueError, pydantic.ValidationError) as exc:
            raise RequestError(operation, exc) from exc

    # ------------------------------------------------------------------
    # public API
    # ------------------------------------------------------------------
    async def list(self, page: int = 1, limit: int = 5) -> list[Document]:
        response = await self._send("list", "GET", "/documents", params={"page": page, "limit": limit})
        return self._decode("list", response, _DOCUMENT_LIST.validate_python)

    async def upload(self, file: SelectedFile) -> None:
        files = {"document": (file.name, file.content, file.content_type or "application/octet-stream")}
        await self._send("upload", "POST", "/documents", files=files)

    async def get(self, document_id: int) -> Document:
        response = await self._send("get", "GET", f"/documents/{document_id}")
        return self._decode("get", response, Document.model_validate)

    async def delete(self, document_id: int) -> None:
        await self._send("delete", "DELETE", f"/documents/{document_id}")

    async def search(self, keyword: str) -> list[Document]:
        response = await self._send("search", "GET", "/search", params={"keyword": keyword})
        return self._decode("search", response, _DOCUMENT_LIST.validate_python)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "DocumentApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


__all__ = ["DocumentApiClient", "DocumentBackend", "RequestError"]
