"""Pytest configuration and fixtures."""

import asyncio
import json
from typing import Any, Generator

import pytest
from fastapi.testclient import TestClient

from asset_analyzer.backend.config import Settings, get_settings
from asset_analyzer.backend.main import app
from asset_analyzer.backend.models import ExtractedAsset
from asset_analyzer.backend.services.ai import get_ai_service
from asset_analyzer.frontend.models import Asset, SourceDocument


class FakeAIService:
    """Stand-in for AIService returning canned model output."""

    def __init__(self, payload: Any = None, error: Exception | None = None):
        self.payload = payload if payload is not None else []
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def generate_json(self, file_bytes, mime_type, instruction, schema, filename=None) -> str:
        self.calls.append(
            {
                "file_bytes": file_bytes,
                "mime_type": mime_type,
                "instruction": instruction,
                "schema": schema,
                "filename": filename,
            }
        )
        if self.error is not None:
            raise self.error
        if isinstance(self.payload, str):
            return self.payload
        return json.dumps(self.payload)


class FakeExtractionClient:
    """
    Stand-in for ExtractionClient.

    Results are keyed by file name: a list of assets, or an exception to raise.
    Delays (seconds) let tests control completion order.
    """

    def __init__(
        self,
        results: dict[str, list[ExtractedAsset] | Exception],
        delays: dict[str, float] | None = None,
    ):
        self.results = results
        self.delays = delays or {}
        self.requested: list[str] = []

    async def extract_assets(self, document: SourceDocument) -> list[ExtractedAsset]:
        self.requested.append(document.name)
        await asyncio.sleep(self.delays.get(document.name, 0))
        result = self.results.get(document.name, [])
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def settings() -> Settings:
    """Settings with a dummy OpenAI key and no .env lookup."""
    return Settings(openai_api_key="test-key", _env_file=None)


@pytest.fixture
def fake_ai_service() -> FakeAIService:
    """Fake AI service returning two assets."""
    return FakeAIService(
        payload=[
            {
                "assetId": "1000012345-0",
                "type": "PC",
                "model": "Dell OptiPlex 7090",
                "serialNumber": "SN-001",
                "location": "กฟส. Bang Phli",
            },
            {
                "assetId": None,
                "type": "Monitor",
                "model": "LG 24MK430H",
                "serialNumber": None,
                "location": None,
            },
        ]
    )


@pytest.fixture
def client(settings: Settings, fake_ai_service: FakeAIService) -> Generator[TestClient, None, None]:
    """Create a test client with settings and the AI service overridden."""
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_ai_service] = lambda: fake_ai_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_pdf_bytes() -> bytes:
    """
    Create a minimal valid PDF for testing.

    The content is never parsed locally; it only has to look like a PDF.
    """
    return b"""%PDF-1.4
1 0 obj
<< /Type /Catalog /Pages 2 0 R >>
endobj
2 0 obj
<< /Type /Pages /Kids [3 0 R] /Count 1 >>
endobj
3 0 obj
<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] >>
endobj
trailer
<< /Size 4 /Root 1 0 R >>
%%EOF"""


def make_asset(
    asset_id: str | None = None,
    type: str | None = None,
    model: str | None = None,
    serial_number: str | None = None,
    location: str | None = None,
    source_file: str = "assets.pdf",
    id: str | None = None,
) -> Asset:
    """Build an Asset for view-model tests."""
    return Asset(
        asset_id=asset_id,
        type=type,
        model=model,
        serial_number=serial_number,
        location=location,
        source_file=source_file,
        id=id or f"{source_file}-{asset_id}",
    )
