"""Tests for the extraction HTTP client."""

import httpx
import pytest

from asset_analyzer.backend.models import ExtractedAsset
from asset_analyzer.frontend.extraction_client import ExtractionClient, ExtractionClientError
from asset_analyzer.frontend.models import SourceDocument


@pytest.fixture
def document() -> SourceDocument:
    return SourceDocument(name="assets.pdf", content=b"%PDF-1.4 test", content_type="application/pdf")


def make_client(handler) -> ExtractionClient:
    """Extraction client backed by an httpx mock transport."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return ExtractionClient("http://backend.test", http_client=http_client)


class TestExtractionClientSuccess:
    """Tests for successful responses."""

    @pytest.mark.asyncio
    async def test_returns_assets(self, document: SourceDocument):
        """Test assets in the response body are returned as records."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                json={
                    "assets": [
                        {
                            "assetId": "A-1",
                            "type": "PC",
                            "model": "HP ProDesk",
                            "serialNumber": "S-9",
                            "location": "HQ",
                        }
                    ]
                },
            )

        client = make_client(handler)
        assets = await client.extract_assets(document)

        assert assets == [
            ExtractedAsset(
                asset_id="A-1", type="PC", model="HP ProDesk", serial_number="S-9", location="HQ"
            )
        ]

    @pytest.mark.asyncio
    async def test_posts_multipart_under_pdf_field(self, document: SourceDocument):
        """Test the file is sent as a single multipart part named pdfFile."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"assets": []})

        client = make_client(handler)
        await client.extract_assets(document)

        request = seen[0]
        assert request.method == "POST"
        assert request.url == "http://backend.test/api/process-pdf"
        assert request.headers["content-type"].startswith("multipart/form-data")
        body = request.read()
        assert b'name="pdfFile"' in body
        assert b'filename="assets.pdf"' in body
        assert b"%PDF-1.4 test" in body

    @pytest.mark.asyncio
    async def test_missing_assets_key_is_empty(self, document: SourceDocument):
        """Test a body without 'assets' yields an empty list."""
        client = make_client(lambda request: httpx.Response(200, json={}))
        assert await client.extract_assets(document) == []

    @pytest.mark.asyncio
    async def test_null_assets_is_empty(self, document: SourceDocument):
        """Test a null 'assets' value yields an empty list."""
        client = make_client(lambda request: httpx.Response(200, json={"assets": None}))
        assert await client.extract_assets(document) == []


class TestExtractionClientErrors:
    """Tests for failure translation."""

    @pytest.mark.asyncio
    async def test_uses_error_from_json_body(self, document: SourceDocument):
        """Test the server's error message is used when present."""
        client = make_client(
            lambda request: httpx.Response(500, json={"error": "API key not configured on the server."})
        )
        with pytest.raises(ExtractionClientError) as exc_info:
            await client.extract_assets(document)

        assert str(exc_info.value) == (
            "Failed to process assets.pdf. Reason: API key not configured on the server."
        )
        assert exc_info.value.filename == "assets.pdf"

    @pytest.mark.asyncio
    async def test_falls_back_to_status_line(self, document: SourceDocument):
        """Test a non-JSON error body falls back to status code and reason."""
        client = make_client(lambda request: httpx.Response(502, text="<html>bad gateway</html>"))
        with pytest.raises(ExtractionClientError) as exc_info:
            await client.extract_assets(document)

        assert exc_info.value.reason == "Server error: 502 Bad Gateway"

    @pytest.mark.asyncio
    async def test_json_without_error_key_falls_back(self, document: SourceDocument):
        """Test a JSON error body with no 'error' falls back to the status line."""
        client = make_client(lambda request: httpx.Response(400, json={"detail": "nope"}))
        with pytest.raises(ExtractionClientError) as exc_info:
            await client.extract_assets(document)

        assert exc_info.value.reason == "Server error: 400 Bad Request"

    @pytest.mark.asyncio
    async def test_network_error_wrapped(self, document: SourceDocument):
        """Test transport failures become a single client error."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(handler)
        with pytest.raises(ExtractionClientError) as exc_info:
            await client.extract_assets(document)

        assert "Failed to process assets.pdf" in str(exc_info.value)
        assert "connection refused" in exc_info.value.reason
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_malformed_json_wrapped(self, document: SourceDocument):
        """Test an unparseable success body becomes a client error."""
        client = make_client(lambda request: httpx.Response(200, text="not json"))
        with pytest.raises(ExtractionClientError) as exc_info:
            await client.extract_assets(document)

        assert exc_info.value.filename == "assets.pdf"


class TestExtractionClientLifecycle:
    """Tests for client ownership of the HTTP connection pool."""

    @pytest.mark.asyncio
    async def test_injected_client_left_open(self):
        """Test an injected httpx client is not closed."""
        http_client = httpx.AsyncClient(
            transport=httpx.MockTransport(lambda request: httpx.Response(200, json={}))
        )
        async with ExtractionClient("http://backend.test", http_client=http_client):
            pass
        assert not http_client.is_closed
        await http_client.aclose()

    @pytest.mark.asyncio
    async def test_owned_client_closed(self):
        """Test a client created internally is closed on exit."""
        client = ExtractionClient("http://backend.test/")
        assert client.base_url == "http://backend.test"
        async with client:
            pass
        assert client._http.is_closed
