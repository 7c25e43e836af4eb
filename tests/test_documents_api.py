from __future__ import annotations

import httpx
import pytest

from workspace_client.domain import Document, SelectedFile
from workspace_client.infrastructure import DocumentApiClient, RequestError

API_BASE = "http://docs.example.test/api"


def _document_payload(doc_id: int, **extra) -> dict:
    payload = {
        "id": doc_id,
        "name": f"doc-{doc_id}.txt",
        "path": f"/storage/doc-{doc_id}.txt",
        "created_at": "2025-01-01T00:00:00Z",
    }
    payload.update(extra)
    return payload


def _client(handler) -> tuple[DocumentApiClient, httpx.AsyncClient]:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return DocumentApiClient(API_BASE, http_client=http_client), http_client


@pytest.mark.asyncio
async def test_list_requests_page_and_limit():
    captured: dict[str, object] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["method"] = request.method
        captured["path"] = request.url.path
        captured["params"] = dict(request.url.params)
        return httpx.Response(200, json=[_document_payload(3), _document_payload(1)])

    client, http_client = _client(handler)
    documents = await client.list(2, 5)

    assert captured == {"method": "GET", "path": "/api/documents", "params": {"page": "2", "limit": "5"}}
    assert [doc.id for doc in documents] == [3, 1]
    assert all(isinstance(doc, Document) for doc in documents)
    await http_client.aclose()


@pytest.mark.asyncio
async def test_search_encodes_keyword_and_keeps_highlights():
    captured: dict[str, str] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["raw_query"] = request.url.query.decode("ascii")
        captured["keyword"] = request.url.params["keyword"]
        return httpx.Response(
            200,
            json=[_document_payload(7, highlighted_content="an <em>invoice</em> line", score=0.9)],
        )

    client, http_client = _client(handler)
    results = await client.search(" invoice & co ")

    assert captured["keyword"] == " invoice & co "
    assert "&" not in captured["raw_query"].split("keyword=", 1)[1]
    assert results[0].highlighted_content == "an <em>invoice</em> line"
    await http_client.aclose()


@pytest.mark.asyncio
async def test_upload_sends_multipart_document_field():
    captured: dict[str, object] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["method"] = request.method
        captured["path"] = request.url.path
        captured["content_type"] = request.headers["content-type"]
        captured["body"] = request.content
        return httpx.Response(201, json=_document_payload(11, name="report.pdf"))

    client, http_client = _client(handler)
    await client.upload(SelectedFile(name="report.pdf", content=b"%PDF-1.4", content_type="application/pdf"))

    assert captured["method"] == "POST"
    assert captured["path"] == "/api/documents"
    assert str(captured["content_type"]).startswith("multipart/form-data")
    body = captured["body"]
    assert b'name="document"' in body
    assert b'filename="report.pdf"' in body
    assert b"%PDF-1.4" in body
    await http_client.aclose()


@pytest.mark.asyncio
async def test_get_and_delete_use_document_path():
    seen: list[tuple[str, str]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.method, request.url.path))
        if request.method == "DELETE":
            return httpx.Response(204)
        return httpx.Response(200, json=_document_payload(42, body="full text"))

    client, http_client = _client(handler)
    document = await client.get(42)
    await client.delete(42)

    assert document.body == "full text"
    assert seen == [("GET", "/api/documents/42"), ("DELETE", "/api/documents/42")]
    await http_client.aclose()


@pytest.mark.asyncio
async def test_error_status_raises_request_error():
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"detail": "boom"})

    client, http_client = _client(handler)
    with pytest.raises(RequestError) as excinfo:
        await client.list(1, 5)

    assert excinfo.value.operation == "list"
    assert isinstance(excinfo.value.cause, httpx.HTTPStatusError)
    await http_client.aclose()


@pytest.mark.asyncio
async def test_transport_failure_raises_request_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client, http_client = _client(handler)
    with pytest.raises(RequestError) as excinfo:
        await client.delete(1)

    assert excinfo.value.operation == "delete"
    await http_client.aclose()


@pytest.mark.asyncio
async def test_malformed_payload_raises_request_error():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/search"):
            return httpx.Response(200, content=b"not json")
        return httpx.Response(200, json=[{"id": "not-a-number"}])

    client, http_client = _client(handler)
    with pytest.raises(RequestError):
        await client.list(1, 5)
    with pytest.raises(RequestError):
        await client.search("x")
    await http_client.aclose()


def test_api_base_requires_scheme_and_host():
    with pytest.raises(ValueError):
        DocumentApiClient("localhost/api")


@pytest.mark.asyncio
async def test_injected_http_client_is_left_open():
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=[])

    client, http_client = _client(handler)
    async with client:
        assert await client.list(1, 5) == []

    assert not http_client.is_closed
    await http_client.aclose()
